"""
Capability interface consumed by the vector generators.

The generators only touch curves through a PairingBackend: two CurveGroups,
the scalar field order and a multi-pairing check. Tests can swap in any
object with the same surface.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ecvectors.arith.curves import CurveGroup, Point
from ecvectors.arith.pairing import TatePairing


class BackendError(Exception):
    """Curve parameters failed validation."""


@dataclass(frozen=True)
class PairingBackend:
    name: str
    g1: CurveGroup
    g2: CurveGroup
    pairing: TatePairing

    @property
    def scalar_modulus(self) -> int:
        return self.g1.order

    @property
    def field_modulus(self) -> int:
        return self.g1.field_modulus

    def group(self, name: str) -> CurveGroup:
        if name == "g1":
            return self.g1
        if name == "g2":
            return self.g2
        raise KeyError(f"Unknown group: {name}")

    def random_scalar(self, rng) -> int:
        return rng.randrange(self.scalar_modulus)

    def pairing_check(self, pairs: Iterable[tuple[Point, Point]]) -> bool:
        return self.pairing.check(pairs)

    def validate(self) -> None:
        """Check generators and group orders before anything is generated."""
        if self.g1.order != self.g2.order:
            raise BackendError(f"{self.name}: G1 and G2 orders differ")
        for group in (self.g1, self.g2):
            gen = group.generator
            if gen is None:
                raise BackendError(f"{group.name}: missing generator")
            if not group.is_on_curve(gen):
                raise BackendError(f"{group.name}: generator is not on the curve")
            if not group.is_in_subgroup(gen):
                raise BackendError(f"{group.name}: generator is not in the order-r subgroup")
