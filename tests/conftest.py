"""Pytest configuration and shared fixtures for all tests."""

import random

import pytest

from ecvectors.arith.params import get_backend
from ecvectors.common.config import BLS12_377_PROFILE, BW6_761_PROFILE
from ecvectors.vectors.codec import ByteCodec


# =============================================================================
# Curve Fixtures
# =============================================================================

@pytest.fixture(scope="session")
def bls_backend():
    """BLS12-377 backend (built once per session)."""
    return get_backend("bls12_377")


@pytest.fixture(scope="session")
def bw6_backend():
    """BW6-761 backend (built once per session)."""
    return get_backend("bw6_761")


@pytest.fixture
def bls_profile():
    return BLS12_377_PROFILE


@pytest.fixture
def bw6_profile():
    return BW6_761_PROFILE


@pytest.fixture
def bls_codec(bls_backend):
    return ByteCodec(BLS12_377_PROFILE, bls_backend.field_modulus)


@pytest.fixture
def bw6_codec(bw6_backend):
    return ByteCodec(BW6_761_PROFILE, bw6_backend.field_modulus)


@pytest.fixture(params=["bls12377", "bw6"])
def curve(request, bls_backend, bw6_backend):
    """(profile, backend, codec) for each supported curve."""
    if request.param == "bls12377":
        return BLS12_377_PROFILE, bls_backend, ByteCodec(BLS12_377_PROFILE, bls_backend.field_modulus)
    return BW6_761_PROFILE, bw6_backend, ByteCodec(BW6_761_PROFILE, bw6_backend.field_modulus)


# =============================================================================
# Randomness
# =============================================================================

@pytest.fixture
def rng():
    """Seeded RNG so failures reproduce."""
    return random.Random(1337)
