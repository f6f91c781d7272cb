"""
Field towers on top of py_ecc's FQ / FQP.

py_ecc does the arithmetic. This module adds what it lacks for the
precompile curves:

- BinomialFQP: extensions Fp[w] / (w^k - c), configured per subclass
- square roots in Fp (Tonelli-Shanks) and in quadratic extensions
- coefficient access, subfield embedding and conjugation
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional, Sequence, Type, Union

from py_ecc.fields.field_elements import FQ, FQP

FieldElement = Union[FQ, FQP]


class BinomialFQP(FQP):
    """Fp[w] / (w^degree - non_residue).

    Subclasses set field_modulus, degree and non_residue, the same way
    py_ecc's own FQ2 / FQ12 subclasses fix their modulus polynomials.
    """

    degree = 0
    non_residue = 0

    def __init__(self, coeffs: Sequence[Union[int, FQ]]) -> None:
        super().__init__(coeffs, self.modulus_coeffs())

    @classmethod
    def modulus_coeffs(cls) -> tuple[int, ...]:
        # w^k = c  <=>  w^k + (-c) = 0
        return ((-cls.non_residue) % cls.field_modulus,) + (0,) * (cls.degree - 1)

    @classmethod
    def gen(cls) -> BinomialFQP:
        """The adjoined root w."""
        return cls([0, 1] + [0] * (cls.degree - 2))


# ---------------------------------------------------------------------------
# Element helpers
# ---------------------------------------------------------------------------

def degree_of(field: Type[FieldElement]) -> int:
    if issubclass(field, FQP):
        return field.degree
    return 1


def _as_int(c: Union[int, FQ]) -> int:
    return c.n if isinstance(c, FQ) else int(c)


def coefficients(value: FieldElement) -> tuple[int, ...]:
    """Canonical integer coefficients, c0 first."""
    if isinstance(value, FQP):
        return tuple(_as_int(c) for c in value.coeffs)
    return (value.n,)


def from_coefficients(field: Type[FieldElement], coeffs: Sequence[int]) -> FieldElement:
    if len(coeffs) != degree_of(field):
        raise ValueError(f"{field.__name__} needs {degree_of(field)} coefficients, got {len(coeffs)}")
    if issubclass(field, FQP):
        return field([int(c) for c in coeffs])
    return field(int(coeffs[0]))


def is_zero(value: FieldElement) -> bool:
    return not any(coefficients(value))


def random_element(field: Type[FieldElement], rng) -> FieldElement:
    p = field.field_modulus
    return from_coefficients(field, [rng.randrange(p) for _ in range(degree_of(field))])


def embed(target: Type[BinomialFQP], value: FieldElement) -> BinomialFQP:
    """Embed a subfield element, mapping its generator u to w^(k/d).

    Valid when the subfield is Fp[u] / (u^d - c) with the same c.
    """
    coeffs = coefficients(value)
    d = len(coeffs)
    if d > 1:
        p = target.field_modulus
        if target.degree % d or type(value).non_residue % p != target.non_residue % p:
            raise ValueError(f"{type(value).__name__} does not embed into {target.__name__}")
    step = target.degree // d
    out = [0] * target.degree
    for i, c in enumerate(coeffs):
        out[i * step] = c
    return target(out)


def conjugate(value: BinomialFQP) -> BinomialFQP:
    """Negate the odd coefficients: the p^(k/2) Frobenius when c^((p^(k/2) - 1) / k) = -1."""
    if value.degree % 2:
        raise ValueError("Conjugation needs an even extension degree")
    p = value.field_modulus
    return type(value)([c if i % 2 == 0 else -c % p for i, c in enumerate(coefficients(value))])


# ---------------------------------------------------------------------------
# Square roots
# ---------------------------------------------------------------------------

@lru_cache(maxsize=None)
def _tonelli_shanks_params(p: int) -> tuple[int, int, int]:
    """(q, s, z) with p - 1 = q * 2^s, q odd, and z the smallest non-residue."""
    q, s = p - 1, 0
    while q % 2 == 0:
        q //= 2
        s += 1
    z = 2
    while pow(z, (p - 1) // 2, p) != p - 1:
        z += 1
    return q, s, z


def sqrt_mod(a: int, p: int) -> Optional[int]:
    """A square root of a modulo the odd prime p, or None for a non-residue."""
    a %= p
    if a == 0:
        return 0
    if pow(a, (p - 1) // 2, p) != 1:
        return None
    if p % 4 == 3:
        return pow(a, (p + 1) // 4, p)

    q, m, z = _tonelli_shanks_params(p)
    c = pow(z, q, p)
    t = pow(a, q, p)
    r = pow(a, (q + 1) // 2, p)
    while t != 1:
        i, t2 = 1, t * t % p
        while t2 != 1:
            t2 = t2 * t2 % p
            i += 1
        b = pow(c, 1 << (m - i - 1), p)
        m = i
        c = b * b % p
        t = t * c % p
        r = r * b % p
    return r


def _sqrt_quadratic(value: BinomialFQP) -> Optional[BinomialFQP]:
    field = type(value)
    p = field.field_modulus
    beta = field.non_residue % p
    a0, a1 = coefficients(value)

    if a1 == 0:
        root = sqrt_mod(a0, p)
        if root is not None:
            return field([root, 0])
        # a0 non-residue, so a0 / beta is a residue: (r u)^2 = r^2 beta
        root = sqrt_mod(a0 * pow(beta, -1, p), p)
        if root is None:
            return None
        return field([0, root])

    s = sqrt_mod(a0 * a0 - beta * a1 * a1, p)
    if s is None:
        return None
    half = pow(2, -1, p)
    c0 = sqrt_mod((a0 + s) * half, p)
    if c0 is None:
        c0 = sqrt_mod((a0 - s) * half, p)
        if c0 is None:
            return None
    c1 = a1 * pow(2 * c0, -1, p) % p
    candidate = field([c0, c1])
    if candidate * candidate != value:
        return None
    return candidate


def sqrt(value: FieldElement) -> Optional[FieldElement]:
    """Square root in Fp or a quadratic extension, or None for a non-residue."""
    if isinstance(value, FQP):
        if value.degree != 2:
            raise ValueError("Square roots are only supported in quadratic extensions")
        return _sqrt_quadratic(value)
    root = sqrt_mod(value.n, value.field_modulus)
    if root is None:
        return None
    return type(value)(root)
