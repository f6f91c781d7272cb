"""
Per-curve generation driver.

Each operation draws from its own seeded RNG, so a file's contents depend
only on (seed, curve prefix, operation) and not on which other operations
run alongside it.
"""

from __future__ import annotations

import logging
import random
from pathlib import Path

from ecvectors.arith.params import get_backend
from ecvectors.common.config import CurveProfile, GeneratorConfig
from ecvectors.vectors.codec import ByteCodec
from ecvectors.vectors.negative import NegativeVectorGenerator
from ecvectors.vectors.positive import PositiveVectorGenerator
from ecvectors.vectors.types import VectorFail, VectorSuccess
from ecvectors.vectors.writer import VectorWriter

logger = logging.getLogger(__name__)


def generate_operation(
    profile: CurveProfile,
    operation: str,
    config: GeneratorConfig,
) -> tuple[list[VectorSuccess], list[VectorFail]]:
    backend = get_backend(profile.name)
    codec = ByteCodec(profile, backend.field_modulus)
    rng = random.Random(config.rng_seed(profile.prefix, operation))

    success = PositiveVectorGenerator(codec, backend, rng, config.num_tests).generate(operation)
    fail = NegativeVectorGenerator(
        codec, backend, rng, config.max_sampling_attempts,
    ).generate(operation)
    return success, fail


def generate_curve(
    profile: CurveProfile,
    config: GeneratorConfig,
    writer: VectorWriter,
) -> list[Path]:
    """Generate and write both vector files for every configured operation."""
    written: list[Path] = []
    for operation in config.operations:
        logger.info("%s: generating %s", profile.prefix, operation)
        success, fail = generate_operation(profile, operation, config)
        written.append(writer.write(f"{profile.prefix}_{operation}", success))
        written.append(writer.write(f"{profile.prefix}_{operation}_fail", fail))
    return written
