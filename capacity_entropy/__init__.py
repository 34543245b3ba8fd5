from .const   import (DATA_CHUNK_SIZE, HASH_ITERATIONS_PER_BLOCK,
                      PACKING_HASH_ALG, PACKING_HASH_SIZE)
from .entropy import (compute_entropy_chunk, compute_initial_chunk,
                      derive_seed_hash, expand_chunk_from_seed,
                      iter_entropy_chunks, mix_entropy_chunk)
from .errors  import (AllocationError, EntropyChunkError,
                      HashComputationError, SeedHashError)
from .params  import DEFAULT_PARAMS, PackingParams

__all__ = [
    "DATA_CHUNK_SIZE", "HASH_ITERATIONS_PER_BLOCK", "PACKING_HASH_ALG",
    "PACKING_HASH_SIZE",
    "compute_entropy_chunk", "compute_initial_chunk", "derive_seed_hash",
    "expand_chunk_from_seed", "iter_entropy_chunks", "mix_entropy_chunk",
    "AllocationError", "EntropyChunkError", "HashComputationError",
    "SeedHashError",
    "DEFAULT_PARAMS", "PackingParams",
]
