# ==================================================
# capacity_entropy/errors.py
# ==================================================


class EntropyChunkError(Exception):
    """Base class; every error is fatal to the current call."""


class AllocationError(EntropyChunkError):
    """A required buffer could not be obtained."""


class SeedHashError(EntropyChunkError):
    """The digest context for seed derivation could not be initialized."""


class HashComputationError(EntropyChunkError):
    """The digest context for chunk expansion/mixing could not be initialized."""
