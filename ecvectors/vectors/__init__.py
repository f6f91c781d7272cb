"""Vector records, encoding, generation and persistence."""

from .types import VectorFail, VectorSuccess
from .codec import ByteCodec, EncodingError
from .negative import GenerationError, SamplingError

__all__ = [
    "VectorFail",
    "VectorSuccess",
    "ByteCodec",
    "EncodingError",
    "GenerationError",
    "SamplingError",
]
