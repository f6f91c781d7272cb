"""JSON persistence for vector lists."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Sequence

from ecvectors.vectors.types import Vector

logger = logging.getLogger(__name__)


class VectorWriter:
    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)

    def path_for(self, name: str) -> Path:
        return self.output_dir / f"{name}.json"

    def write(self, name: str, vectors: Sequence[Vector]) -> Path:
        """Write the list to <output_dir>/<name>.json via an atomic rename."""
        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = self.path_for(name)
        payload = [v.to_json() for v in vectors]

        fd, tmp_name = tempfile.mkstemp(prefix=f".{name}.", suffix=".tmp", dir=self.output_dir)
        try:
            with os.fdopen(fd, "w") as f:
                json.dump(payload, f, indent=2)
                f.write("\n")
            os.replace(tmp_name, path)
        except BaseException:
            try:
                os.unlink(tmp_name)
            except FileNotFoundError:
                pass
            raise

        logger.info("Wrote %d vectors to %s", len(payload), path)
        return path
