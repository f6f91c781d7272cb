"""
Reduced Tate pairing and multi-pairing check.

The G1 argument drives the Miller loop over the base field; the G2 argument
is untwisted into the target field Fp^k = Fp[w] / (w^k - c) and only used to
evaluate line functions. Vertical lines take values in the subfield
Fp^(k/2) and are removed by the final exponentiation.
"""

from __future__ import annotations

from typing import Iterable, Type

from ecvectors.arith.curves import CurveGroup, Point
from ecvectors.arith.fields import BinomialFQP, conjugate, embed


class TatePairing:
    def __init__(
        self,
        g1: CurveGroup,
        g2: CurveGroup,
        target: Type[BinomialFQP],
        twist_x: BinomialFQP,
        twist_y: BinomialFQP,
    ) -> None:
        if target.degree % 2:
            raise ValueError("Target field must have even degree")
        self.g1 = g1
        self.g2 = g2
        self.target = target
        self.twist_x = twist_x
        self.twist_y = twist_y
        self.order = g1.order
        half = target.field_modulus ** (target.degree // 2)
        if (half + 1) % self.order != 0:
            raise ValueError("r must divide p^(k/2) + 1")
        self._hard_exponent = (half + 1) // self.order

    def untwist(self, pt: Point) -> tuple[BinomialFQP, BinomialFQP]:
        x, y = pt
        return (embed(self.target, x) * self.twist_x, embed(self.target, y) * self.twist_y)

    def _line(self, p1, p2, t) -> BinomialFQP:
        """Line through p1 and p2 (tangent if equal) evaluated at t."""
        x1, y1 = p1
        x2, y2 = p2
        xt, yt = t
        dx = xt - embed(self.target, x1)
        if x1 != x2:
            m = (y2 - y1) / (x2 - x1)
        elif y1 == y2:
            m = 3 * x1 * x1 / (2 * y1)
        else:
            return dx
        return dx * m.n - (yt - embed(self.target, y1))

    def miller_loop(self, p: Point, q: Point) -> BinomialFQP:
        """f_{r,P}(Q) without final exponentiation."""
        if p is None or q is None:
            return self.target.one()
        t = self.untwist(q)
        r = p
        f = self.target.one()
        for bit in bin(self.order)[3:]:
            f = f * f * self._line(r, r, t)
            r = self.g1.double(r)
            if bit == "1":
                f = f * self._line(r, p, t)
                r = self.g1.add(r, p)
        return f

    def final_exponentiate(self, f: BinomialFQP) -> BinomialFQP:
        # easy part: f^(p^(k/2) - 1)
        f = conjugate(f) * f.inv()
        return f ** self._hard_exponent

    def pairing(self, p: Point, q: Point) -> BinomialFQP:
        return self.final_exponentiate(self.miller_loop(p, q))

    def check(self, pairs: Iterable[tuple[Point, Point]]) -> bool:
        """True iff the product of e(P_i, Q_i) is the multiplicative identity."""
        f = self.target.one()
        for p, q in pairs:
            if p is None or q is None:
                continue
            f = f * self.miller_loop(p, q)
        return self.final_exponentiate(f) == self.target.one()
