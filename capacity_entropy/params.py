# ==================================================
# capacity_entropy/params.py
# ==================================================
import hashlib
from dataclasses import dataclass
from typing import Callable

from .const import DATA_CHUNK_SIZE, PACKING_HASH_ALG, PACKING_HASH_SIZE


@dataclass(frozen=True)
class PackingParams:
    """Chunk geometry + digest used by every entropy routine.

    ``hash_factory`` is any zero-argument hashlib-style constructor: the object
    it returns needs ``update()``, ``digest()``, ``copy()`` and ``digest_size``.
    Packers and verifiers must agree on all three fields to get bit-compatible
    chunks.
    """
    chunk_size: int = DATA_CHUNK_SIZE
    hash_size: int = PACKING_HASH_SIZE
    hash_factory: Callable = getattr(hashlib, PACKING_HASH_ALG)

    def __post_init__(self):
        if self.hash_size <= 0:
            raise ValueError("hash_size must be positive")
        if self.chunk_size <= 0 or self.chunk_size % self.hash_size:
            raise ValueError(
                f"chunk_size {self.chunk_size} is not a positive multiple "
                f"of hash_size {self.hash_size}")

    @property
    def iterations_per_block(self) -> int:
        return self.chunk_size // self.hash_size

    @property
    def last_segment_offset(self) -> int:
        return (self.iterations_per_block - 1) * self.hash_size


DEFAULT_PARAMS = PackingParams()
