"""
Curve profiles and generation settings.

A CurveProfile is the byte geometry of one precompile family's calldata.
Every codec and generator routine reads sizes from here; nothing else
hardcodes a curve's layout.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


class ProfileError(ValueError):
    """A curve profile's sizes are inconsistent."""


# ---------------------------------------------------------------------------
# Calldata constants
# ---------------------------------------------------------------------------

EVM_WORD_SIZE = 32
DEFAULT_NUM_TESTS = 100
DEFAULT_MAX_SAMPLING_ATTEMPTS = 1000

OPERATIONS = (
    "g1_add",
    "g1_mul",
    "g1_multiexp",
    "g2_add",
    "g2_mul",
    "g2_multiexp",
    "pairing",
)


# ---------------------------------------------------------------------------
# Curve profile
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CurveProfile:
    name: str                   # arithmetic backend name
    prefix: str                 # vector file prefix
    field_element_size: int     # bytes in a canonical base-field element
    word_size: int              # bytes per encoded coordinate (with padding)
    scalar_size: int            # bytes in a canonical scalar
    scalar_word_size: int       # bytes per encoded scalar (with padding)
    g1_encoded_size: int
    g2_encoded_size: int

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        for attr in (
            "field_element_size", "word_size", "scalar_size",
            "scalar_word_size", "g1_encoded_size", "g2_encoded_size",
        ):
            if getattr(self, attr) <= 0:
                raise ProfileError(f"{self.prefix}: {attr} must be positive")
        if self.word_size < self.field_element_size:
            raise ProfileError(
                f"{self.prefix}: word_size {self.word_size} < "
                f"field_element_size {self.field_element_size}"
            )
        if self.scalar_word_size < self.scalar_size:
            raise ProfileError(
                f"{self.prefix}: scalar_word_size {self.scalar_word_size} < "
                f"scalar_size {self.scalar_size}"
            )
        if self.g1_encoded_size != 2 * self.word_size:
            raise ProfileError(
                f"{self.prefix}: g1_encoded_size must be two coordinate words"
            )
        if self.g2_encoded_size % (2 * self.word_size) != 0:
            raise ProfileError(
                f"{self.prefix}: g2_encoded_size must be a whole number of coordinate words"
            )

    @property
    def field_padding(self) -> int:
        return self.word_size - self.field_element_size

    @property
    def scalar_padding(self) -> int:
        return self.scalar_word_size - self.scalar_size

    @property
    def g2_extension_degree(self) -> int:
        """Base-field components per G2 coordinate."""
        return self.g2_encoded_size // (2 * self.word_size)

    @property
    def pair_size(self) -> int:
        """One (G1, G2) pairing input."""
        return self.g1_encoded_size + self.g2_encoded_size

    def group_size(self, group: str) -> int:
        if group == "g1":
            return self.g1_encoded_size
        if group == "g2":
            return self.g2_encoded_size
        raise KeyError(f"Unknown group: {group}")


# EIP-2539: 48-byte elements in 64-byte words, 32-byte scalars
BLS12_377_PROFILE = CurveProfile(
    name="bls12_377",
    prefix="bls12377",
    field_element_size=48,
    word_size=64,
    scalar_size=32,
    scalar_word_size=32,
    g1_encoded_size=128,
    g2_encoded_size=256,
)

# EIP-3026: unpadded 96-byte elements, 48-byte scalars in two EVM words
BW6_761_PROFILE = CurveProfile(
    name="bw6_761",
    prefix="bw6",
    field_element_size=96,
    word_size=96,
    scalar_size=48,
    scalar_word_size=2 * EVM_WORD_SIZE,
    g1_encoded_size=192,
    g2_encoded_size=192,
)

PROFILES: dict[str, CurveProfile] = {
    BLS12_377_PROFILE.prefix: BLS12_377_PROFILE,
    BW6_761_PROFILE.prefix: BW6_761_PROFILE,
}


def get_profile(prefix: str) -> CurveProfile:
    profile = PROFILES.get(prefix)
    if profile is None:
        raise KeyError(f"Unknown curve profile: {prefix} (known: {', '.join(PROFILES)})")
    return profile


# ---------------------------------------------------------------------------
# Generation settings
# ---------------------------------------------------------------------------

@dataclass
class GeneratorConfig:
    num_tests: int = DEFAULT_NUM_TESTS
    seed: int = 0
    output_dir: Path = Path("vectors")
    operations: tuple[str, ...] = OPERATIONS
    max_sampling_attempts: int = DEFAULT_MAX_SAMPLING_ATTEMPTS

    def __post_init__(self) -> None:
        if self.num_tests < 1:
            raise ValueError("num_tests must be at least 1")
        if self.max_sampling_attempts < 1:
            raise ValueError("max_sampling_attempts must be at least 1")
        unknown = [op for op in self.operations if op not in OPERATIONS]
        if unknown:
            raise ValueError(f"Unknown operations: {', '.join(unknown)}")

    def rng_seed(self, prefix: str, operation: str) -> str:
        """Per-operation seed so each vector list is reproducible on its own."""
        return f"{self.seed}:{prefix}:{operation}"
