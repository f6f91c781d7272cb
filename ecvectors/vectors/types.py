"""
Test vector records.

Success vectors carry the expected precompile output; fail vectors carry the
error tag a conforming precompile must report. Both serialize to the JSON
shape consumed by precompile test harnesses (lower-case hex, no 0x prefix).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

# Error tags matched by downstream harnesses
ERR_INVALID_LENGTH = "invalid input length"
ERR_LARGE_FIELD_ELEMENT = "must be less than modulus"
ERR_NOT_ON_CURVE = "point is not on curve"
ERR_G1_NOT_IN_SUBGROUP = "g1 point is not on correct subgroup"
ERR_G2_NOT_IN_SUBGROUP = "g2 point is not on correct subgroup"


@dataclass(frozen=True)
class VectorSuccess:
    input: bytes
    expected: bytes
    name: Optional[str] = None

    def to_json(self) -> dict:
        data = {"input": self.input.hex(), "expected": self.expected.hex()}
        if self.name is not None:
            data["name"] = self.name
        return data


@dataclass(frozen=True)
class VectorFail:
    input: bytes
    expected_error: str
    name: str

    def to_json(self) -> dict:
        return {
            "input": self.input.hex(),
            "expected_error": self.expected_error,
            "name": self.name,
        }


Vector = Union[VectorSuccess, VectorFail]
