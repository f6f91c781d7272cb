"""
Calldata encoding for curve precompiles.

Layout (all big-endian, sizes from the CurveProfile):
  field element: (word_size - field_element_size) zero bytes || element
  G1 point:      x || y
  G2 point:      x.c0 || x.c1 || y.c0 || y.c1   (x || y over a prime field)
  scalar:        (scalar_word_size - scalar_size) zero bytes || scalar
  infinity:      all zero bytes of the point's full size
"""

from __future__ import annotations

from ecvectors.arith.curves import Point
from ecvectors.arith.fields import FieldElement, coefficients
from ecvectors.common.config import EVM_WORD_SIZE, CurveProfile

# Added to the modulus to build an element that a decoder must reject.
OVERSIZED_FIELD_ELEMENT_OFFSET = 4


class EncodingError(ValueError):
    """A value does not fit the profile's layout."""


class ByteCodec:
    def __init__(self, profile: CurveProfile, field_modulus: int) -> None:
        self.profile = profile
        self.field_modulus = field_modulus
        if (field_modulus.bit_length() + 7) // 8 > profile.field_element_size:
            raise EncodingError(
                f"{profile.prefix}: modulus does not fit {profile.field_element_size} bytes"
            )
        self._padding = b"\x00" * profile.field_padding
        self._oversized = self._encode_int(field_modulus + OVERSIZED_FIELD_ELEMENT_OFFSET)

    def _encode_int(self, value: int) -> bytes:
        size = self.profile.field_element_size
        if value < 0 or value.bit_length() > 8 * size:
            raise EncodingError(f"Field element does not fit {size} bytes")
        return self._padding + value.to_bytes(size, "big")

    # -- field elements ------------------------------------------------------

    def encode_field_element(self, fe: FieldElement) -> bytes:
        """One padded word per coefficient, c0 first."""
        return b"".join(self._encode_int(c) for c in coefficients(fe))

    def encode_oversized_field_element(self) -> bytes:
        """A word-sized encoding of a value >= the field modulus."""
        return self._oversized

    # -- points --------------------------------------------------------------

    def _encode_point(self, point: Point, size: int) -> bytes:
        if point is None:
            return b"\x00" * size
        out = bytearray()
        for coord in point:
            out += self.encode_field_element(coord)
        if len(out) != size:
            raise EncodingError(f"Encoded point is {len(out)} bytes, expected {size}")
        return bytes(out)

    def encode_point_g1(self, point: Point) -> bytes:
        return self._encode_point(point, self.profile.g1_encoded_size)

    def encode_point_g2(self, point: Point) -> bytes:
        return self._encode_point(point, self.profile.g2_encoded_size)

    def encode_point(self, group: str, point: Point) -> bytes:
        if group == "g1":
            return self.encode_point_g1(point)
        if group == "g2":
            return self.encode_point_g2(point)
        raise KeyError(f"Unknown group: {group}")

    def encode_infinity_g1(self) -> bytes:
        return b"\x00" * self.profile.g1_encoded_size

    def encode_infinity_g2(self) -> bytes:
        return b"\x00" * self.profile.g2_encoded_size

    # -- scalars -------------------------------------------------------------

    def encode_scalar(self, scalar: int) -> bytes:
        size = self.profile.scalar_size
        if scalar < 0 or scalar.bit_length() > 8 * size:
            raise EncodingError(f"Scalar does not fit {size} bytes")
        return scalar.to_bytes(self.profile.scalar_word_size, "big")

    # -- pairing results -----------------------------------------------------

    @staticmethod
    def true_sentinel() -> bytes:
        return b"\x00" * (EVM_WORD_SIZE - 1) + b"\x01"

    @staticmethod
    def false_sentinel() -> bytes:
        return b"\x00" * EVM_WORD_SIZE
