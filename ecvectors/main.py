"""
Conformance vectors for the BLS12-377 and BW6-761 precompiles.

For every selected curve and operation:
  1. Build (and validate) the curve backend
  2. Generate success vectors with expected outputs
  3. Generate fail vectors tagged with the expected error
  4. Write <prefix>_<operation>.json and <prefix>_<operation>_fail.json
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

from ecvectors.arith.backend import BackendError
from ecvectors.common.config import (
    DEFAULT_MAX_SAMPLING_ATTEMPTS,
    DEFAULT_NUM_TESTS,
    OPERATIONS,
    PROFILES,
    GeneratorConfig,
)
from ecvectors.vectors.driver import generate_curve
from ecvectors.vectors.negative import GenerationError
from ecvectors.vectors.writer import VectorWriter


logger = logging.getLogger("ecvectors")


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ecvectors",
        description="Generate BLS12-377 / BW6-761 precompile test vectors",
    )
    parser.add_argument(
        "--curve",
        choices=[*PROFILES, "all"],
        default="all",
        help="Curve profile to generate for (default: all)",
    )
    parser.add_argument(
        "--operation",
        action="append",
        choices=OPERATIONS,
        default=None,
        help="Operation to generate; repeat for several (default: all)",
    )
    parser.add_argument(
        "--num-tests",
        type=int,
        default=DEFAULT_NUM_TESTS,
        help=f"Random vectors per operation (default: {DEFAULT_NUM_TESTS})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="RNG seed for reproducible output (random if not set)",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default="vectors",
        help="Directory for the JSON files (default: vectors)",
    )
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=DEFAULT_MAX_SAMPLING_ATTEMPTS,
        help=f"Rejection-sampling attempts per defective point (default: {DEFAULT_MAX_SAMPLING_ATTEMPTS})",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    # Setup logging
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    seed = args.seed
    if seed is None:
        seed = int.from_bytes(os.urandom(8), "big")
        logger.info("Using random seed %d", seed)

    try:
        config = GeneratorConfig(
            num_tests=args.num_tests,
            seed=seed,
            output_dir=Path(args.output_dir),
            operations=tuple(args.operation) if args.operation else OPERATIONS,
            max_sampling_attempts=args.max_attempts,
        )
    except ValueError as e:
        logger.error("Invalid configuration: %s", e)
        sys.exit(1)

    profiles = list(PROFILES.values()) if args.curve == "all" else [PROFILES[args.curve]]
    writer = VectorWriter(config.output_dir)

    try:
        for profile in profiles:
            written = generate_curve(profile, config, writer)
            logger.info("%s: wrote %d files to %s", profile.prefix, len(written), config.output_dir)
    except (GenerationError, BackendError, ValueError, OSError) as e:
        logger.error("Vector generation failed: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
