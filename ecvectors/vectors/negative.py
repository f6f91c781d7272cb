"""
Malformed-input vectors tagged with the error they must trigger.

Categories shared by every operation:
  - invalid length: empty, one byte short, one byte long
  - a field element >= the modulus
  - a point that is not on the curve
and, for the pairing check only:
  - an on-curve point outside the order-r subgroup

Defects go into the last operand slot; the other slots stay well-formed so
each vector isolates a single fault. Synthesized points are re-checked
against the backend predicates before they are emitted.
"""

from __future__ import annotations

import logging

from ecvectors.arith.backend import PairingBackend
from ecvectors.arith.curves import CurveGroup, Point
from ecvectors.common.config import DEFAULT_MAX_SAMPLING_ATTEMPTS
from ecvectors.vectors.codec import ByteCodec
from ecvectors.vectors.types import (
    ERR_G1_NOT_IN_SUBGROUP,
    ERR_G2_NOT_IN_SUBGROUP,
    ERR_INVALID_LENGTH,
    ERR_LARGE_FIELD_ELEMENT,
    ERR_NOT_ON_CURVE,
    VectorFail,
)

logger = logging.getLogger(__name__)

# Slots per vector for the multi-operand operations
MULTI_OPERAND_ARITY = 3
# Filler for the over-long input
LONG_INPUT_BYTE = b"\x01"


class GenerationError(RuntimeError):
    """A generated vector would not carry its intended defect."""


class SamplingError(GenerationError):
    """Rejection sampling ran out of attempts."""


class NegativeVectorGenerator:
    def __init__(
        self,
        codec: ByteCodec,
        backend: PairingBackend,
        rng,
        max_attempts: int = DEFAULT_MAX_SAMPLING_ATTEMPTS,
    ) -> None:
        self.codec = codec
        self.backend = backend
        self.rng = rng
        self.max_attempts = max_attempts

    def generate(self, operation: str) -> list[VectorFail]:
        if operation == "pairing":
            return self.pairing_fail()
        group, _, kind = operation.partition("_")
        if kind == "add":
            return self.add_fail(group)
        if kind == "mul":
            return self.mul_fail(group)
        if kind == "multiexp":
            return self.multiexp_fail(group)
        raise KeyError(f"Unknown operation: {operation}")

    # -- input lengths -------------------------------------------------------

    def input_length(self, operation: str) -> int:
        profile = self.codec.profile
        if operation == "pairing":
            return MULTI_OPERAND_ARITY * profile.pair_size
        group, _, kind = operation.partition("_")
        size = profile.group_size(group)
        if kind == "add":
            return 2 * size
        if kind == "mul":
            return size + profile.scalar_word_size
        if kind == "multiexp":
            return MULTI_OPERAND_ARITY * (size + profile.scalar_word_size)
        raise KeyError(f"Unknown operation: {operation}")

    @staticmethod
    def length_vectors(input_len: int) -> list[VectorFail]:
        return [
            VectorFail(b"", ERR_INVALID_LENGTH, "invalid_input_length_empty"),
            VectorFail(b"\x00" * (input_len - 1), ERR_INVALID_LENGTH, "invalid_input_length_short"),
            VectorFail(LONG_INPUT_BYTE * (input_len + 1), ERR_INVALID_LENGTH, "invalid_input_length_large"),
        ]

    # -- defective points ----------------------------------------------------

    def random_point_not_on_curve(self, group: CurveGroup) -> Point:
        """Independently random coordinates, resampled while on the curve."""
        for attempt in range(1, self.max_attempts + 1):
            pt = (group.random_coordinate(self.rng), group.random_coordinate(self.rng))
            if not group.is_on_curve(pt):
                logger.debug("%s: off-curve point after %d attempt(s)", group.name, attempt)
                return pt
        raise SamplingError(
            f"{group.name}: no off-curve point in {self.max_attempts} attempts"
        )

    def random_point_not_in_subgroup(self, group: CurveGroup) -> Point:
        """First on-curve point from a random x that lies outside the subgroup."""
        for attempt in range(1, self.max_attempts + 1):
            pt = group.lift_x(group.random_coordinate(self.rng))
            if pt is None:
                continue
            if not group.is_in_subgroup(pt):
                logger.debug("%s: wrong-subgroup point after %d attempt(s)", group.name, attempt)
                return pt
        raise SamplingError(
            f"{group.name}: no wrong-subgroup point in {self.max_attempts} attempts"
        )

    def _off_curve_slot(self, group: str) -> bytes:
        g = self.backend.group(group)
        pt = self.random_point_not_on_curve(g)
        if g.is_on_curve(pt):
            raise GenerationError(f"{g.name}: sampled point lies on the curve")
        return self.codec.encode_point(group, pt)

    def _wrong_subgroup_slot(self, group: str) -> bytes:
        g = self.backend.group(group)
        pt = self.random_point_not_in_subgroup(g)
        if not g.is_on_curve(pt) or g.is_in_subgroup(pt):
            raise GenerationError(f"{g.name}: sampled point is not an on-curve non-subgroup point")
        return self.codec.encode_point(group, pt)

    def _oversized_slot(self, size: int) -> bytes:
        """First coordinate word >= modulus, the rest of the slot zero."""
        oversized = self.codec.encode_oversized_field_element()
        return oversized + b"\x00" * (size - len(oversized))

    # -- valid operands --------------------------------------------------------

    def _point(self, group: str) -> bytes:
        g = self.backend.group(group)
        return self.codec.encode_point(group, g.random_element(self.rng))

    def _scalar(self) -> bytes:
        return self.codec.encode_scalar(self.backend.random_scalar(self.rng))

    def _pair(self) -> bytes:
        return self._point("g1") + self._point("g2")

    # -- operations ------------------------------------------------------------

    def add_fail(self, group: str) -> list[VectorFail]:
        size = self.codec.profile.group_size(group)
        vectors = self.length_vectors(self.input_length(f"{group}_add"))
        vectors.append(VectorFail(
            self._point(group) + self._oversized_slot(size),
            ERR_LARGE_FIELD_ELEMENT,
            "large_field_element",
        ))
        vectors.append(VectorFail(
            self._point(group) + self._off_curve_slot(group),
            ERR_NOT_ON_CURVE,
            "point_not_on_curve",
        ))
        return vectors

    def mul_fail(self, group: str) -> list[VectorFail]:
        size = self.codec.profile.group_size(group)
        zero_scalar = b"\x00" * self.codec.profile.scalar_word_size
        vectors = self.length_vectors(self.input_length(f"{group}_mul"))
        vectors.append(VectorFail(
            self._oversized_slot(size) + zero_scalar,
            ERR_LARGE_FIELD_ELEMENT,
            "large_field_element",
        ))
        vectors.append(VectorFail(
            self._off_curve_slot(group) + zero_scalar,
            ERR_NOT_ON_CURVE,
            "point_not_on_curve",
        ))
        return vectors

    def multiexp_fail(self, group: str) -> list[VectorFail]:
        profile = self.codec.profile
        size = profile.group_size(group)
        vectors = self.length_vectors(self.input_length(f"{group}_multiexp"))

        def valid_slots() -> bytes:
            return b"".join(
                self._point(group) + self._scalar()
                for _ in range(MULTI_OPERAND_ARITY - 1)
            )

        vectors.append(VectorFail(
            valid_slots() + self._oversized_slot(size) + b"\x00" * profile.scalar_word_size,
            ERR_LARGE_FIELD_ELEMENT,
            "large_field_element",
        ))
        vectors.append(VectorFail(
            valid_slots() + self._off_curve_slot(group) + self._scalar(),
            ERR_NOT_ON_CURVE,
            "point_not_on_curve",
        ))
        return vectors

    def pairing_fail(self) -> list[VectorFail]:
        profile = self.codec.profile
        vectors = self.length_vectors(self.input_length("pairing"))

        def valid_pairs() -> bytes:
            return b"".join(self._pair() for _ in range(MULTI_OPERAND_ARITY - 1))

        vectors.append(VectorFail(
            valid_pairs() + self._oversized_slot(profile.pair_size),
            ERR_LARGE_FIELD_ELEMENT,
            "large_field_element",
        ))
        vectors.append(VectorFail(
            valid_pairs() + self._off_curve_slot("g1") + self._point("g2"),
            ERR_NOT_ON_CURVE,
            "point_not_on_curve_g1",
        ))
        vectors.append(VectorFail(
            valid_pairs() + self._point("g1") + self._off_curve_slot("g2"),
            ERR_NOT_ON_CURVE,
            "point_not_on_curve_g2",
        ))
        vectors.append(VectorFail(
            valid_pairs() + self._wrong_subgroup_slot("g1") + self._point("g2"),
            ERR_G1_NOT_IN_SUBGROUP,
            "incorrect_subgroup_g1",
        ))
        vectors.append(VectorFail(
            valid_pairs() + self._point("g1") + self._wrong_subgroup_slot("g2"),
            ERR_G2_NOT_IN_SUBGROUP,
            "incorrect_subgroup_g2",
        ))
        return vectors
