"""Test helpers for vector generation tests."""

from .decode import (
    decode_field_words,
    decode_pairs,
    decode_point,
    decode_scalar,
    split_slots,
)
from .toy import TOY_P, TOY_PROFILE, ToyBackend, toy_curve

__all__ = [
    # Decoding
    "decode_field_words",
    "decode_pairs",
    "decode_point",
    "decode_scalar",
    "split_slots",
    # Toy curve
    "TOY_P",
    "TOY_PROFILE",
    "ToyBackend",
    "toy_curve",
]
