"""
Short Weierstrass groups y^2 = x^3 + b (a = 0) in affine coordinates.

Points are (x, y) tuples of py_ecc field elements; the point at infinity is
None. The group law is py_ecc's, which works over any FQ / FQP field.
"""

from __future__ import annotations

from typing import Optional, Type

from py_ecc.bn128 import add, double, is_on_curve, multiply, neg

from ecvectors.arith.fields import FieldElement, is_zero, random_element, sqrt

Point = Optional[tuple]


class CurveGroup:
    """A prime-order subgroup of y^2 = x^3 + b over a prime or extension field."""

    def __init__(
        self,
        name: str,
        field: Type[FieldElement],
        b: FieldElement,
        order: int,
        cofactor: int,
        generator: Point = None,
    ) -> None:
        self.name = name
        self.field = field
        self.b = b
        self.order = order
        self.cofactor = cofactor
        self.generator = generator

    def __repr__(self) -> str:
        return f"CurveGroup({self.name})"

    @property
    def field_modulus(self) -> int:
        return self.field.field_modulus

    # -- group law ----------------------------------------------------------

    def is_on_curve(self, pt: Point) -> bool:
        if pt is None:
            return True
        return is_on_curve(pt, self.b)

    def double(self, pt: Point) -> Point:
        # 2-torsion points double to infinity
        if pt is None or is_zero(pt[1]):
            return None
        return double(pt)

    def add(self, p1: Point, p2: Point) -> Point:
        if p1 is not None and p1 == p2:
            return self.double(p1)
        return add(p1, p2)

    def neg(self, pt: Point) -> Point:
        if pt is None:
            return None
        return neg(pt)

    def multiply(self, pt: Point, n: int) -> Point:
        """n is not reduced mod r, so this is valid off the subgroup."""
        if pt is None:
            return None
        if n < 0:
            return multiply(neg(pt), -n)
        return multiply(pt, n)

    def is_in_subgroup(self, pt: Point) -> bool:
        """Order-r membership; assumes pt is on the curve."""
        return self.multiply(pt, self.order) is None

    # -- sampling -------------------------------------------------------------

    def random_element(self, rng) -> Point:
        """Uniform non-identity element of the prime-order subgroup."""
        return self.multiply(self.generator, rng.randrange(1, self.order))

    def random_coordinate(self, rng) -> FieldElement:
        return random_element(self.field, rng)

    def lift_x(self, x: FieldElement) -> Point:
        """Solve the curve equation for y; None if x^3 + b is not a square."""
        y = sqrt(x * x * x + self.b)
        if y is None:
            return None
        return (x, y)
