# ==================================================
# capacity_entropy/entropy.py
# ==================================================
"""
Entropy chunk generation for capacity packing.

    seed      = H(address ‖ partition_hash ‖ offset as u64)
    segment 0 = H(seed), segment n = H(segment n-1)          (initial fill)
    round i   = H(chain ‖ initial slot i % segments) -> slot (mixing)

Every call is a pure function of its arguments; chunks are never cached.
"""
import logging
import struct
from typing import Iterable, Iterator, Tuple

from .const  import OFFSET_FMT, U64_MASK
from .errors import AllocationError, HashComputationError, SeedHashError
from .params import DEFAULT_PARAMS, PackingParams

log = logging.getLogger(__name__)

_pack_offset = struct.Struct(OFFSET_FMT).pack

# -- buffer / context helpers ----------------------------------------------

def _allocate(size: int) -> bytearray:
    try:
        return bytearray(size)
    except MemoryError as exc:
        log.error("cannot allocate %d byte buffer", size)
        raise AllocationError(f"cannot allocate {size} bytes") from exc


def _output_buffer(out, params: PackingParams):
    """Return ``(out, byte view of out)``; allocates when *out* is None."""
    if out is None:
        out = _allocate(params.chunk_size)
    view = memoryview(out)
    if view.readonly:
        raise ValueError("output buffer is read-only")
    if view.nbytes != params.chunk_size:
        raise ValueError(
            f"output buffer is {view.nbytes} bytes, expected {params.chunk_size}")
    return out, view.cast("B")


def _new_context(params: PackingParams, error_cls):
    try:
        ctx = params.hash_factory()
    except Exception as exc:
        log.error("digest context init failed: %s", exc)
        raise error_cls(f"cannot initialize digest context: {exc}") from exc
    if ctx.digest_size != params.hash_size:
        log.error("digest size %d != hash_size %d", ctx.digest_size, params.hash_size)
        raise error_cls(
            f"digest size {ctx.digest_size} does not match hash_size {params.hash_size}")
    return ctx

# -- seed derivation -------------------------------------------------------

def derive_seed_hash(address: bytes, offset: int, partition_hash: bytes,
                     *, params: PackingParams = DEFAULT_PARAMS) -> bytes:
    """Digest of ``address ‖ partition_hash ‖ offset`` (8 native-order bytes).

    The offset is reduced modulo 2**64 the way an unsigned cast would.
    """
    try:
        data = b"".join((address, partition_hash, _pack_offset(offset & U64_MASK)))
    except MemoryError as exc:
        log.error("cannot allocate seed input (%d + %d + 8 bytes)",
                  len(address), len(partition_hash))
        raise AllocationError("cannot allocate seed input") from exc

    ctx = _new_context(params, SeedHashError)
    ctx.update(data)
    return ctx.digest()

# -- initial fill ----------------------------------------------------------

def expand_chunk_from_seed(seed: bytes, out=None,
                           *, params: PackingParams = DEFAULT_PARAMS):
    """Fill *out* with ``H(seed), H(H(seed)), ...`` until it is full.

    *out* must be a writable buffer of exactly ``params.chunk_size`` bytes;
    a new ``bytearray`` is allocated when omitted. Returns the filled buffer.
    On error the buffer has not been written to.
    """
    out, buf = _output_buffer(out, params)
    base = _new_context(params, HashComputationError)

    hs = params.hash_size
    previous = bytes(seed)
    for pos in range(0, params.chunk_size, hs):
        h = base.copy()
        h.update(previous)
        previous = h.digest()
        buf[pos:pos + hs] = previous
    return out


def compute_initial_chunk(address: bytes, offset: int, partition_hash: bytes,
                          out=None, *, params: PackingParams = DEFAULT_PARAMS):
    """Seed derivation followed by the initial fill (no mixing rounds)."""
    seed = derive_seed_hash(address, offset, partition_hash, params=params)
    return expand_chunk_from_seed(seed, out, params=params)

# -- mixing rounds ---------------------------------------------------------

def mix_entropy_chunk(segment: bytes, chunk: bytes, iterations: int, out=None,
                      *, params: PackingParams = DEFAULT_PARAMS):
    """Extend an initial fill to *iterations* total hash operations.

    *chunk* is copied into *out*, then for every round ``i`` from
    ``iterations_per_block`` up to *iterations* the slot
    ``i % iterations_per_block`` is replaced by ``H(chain ‖ initial slot)``,
    where ``initial slot`` always comes from the unmodified *chunk* and
    ``chain`` is the segment written by the previous round (initially
    *segment*).
    """
    hs = params.hash_size
    if len(segment) != hs:
        raise ValueError(f"segment is {len(segment)} bytes, expected {hs}")
    source = memoryview(chunk).cast("B")
    if source.nbytes != params.chunk_size:
        raise ValueError(
            f"chunk is {source.nbytes} bytes, expected {params.chunk_size}")
    current = bytes(segment)                 # out may alias chunk/segment

    out, buf = _output_buffer(out, params)
    base = _new_context(params, HashComputationError)
    initial = memoryview(bytes(source))
    buf[:] = initial

    per_block = params.iterations_per_block
    for i in range(per_block, iterations):
        slot = (i % per_block) * hs
        h = base.copy()
        h.update(current)
        h.update(initial[slot:slot + hs])
        current = h.digest()
        buf[slot:slot + hs] = current
    return out


def compute_entropy_chunk(address: bytes, offset: int, partition_hash: bytes,
                          iterations: int, out=None,
                          *, params: PackingParams = DEFAULT_PARAMS):
    """Full pipeline: seed -> initial fill -> ``iterations`` mixing rounds."""
    log.debug("entropy chunk: address=%d bytes partition=%d bytes offset=%d iterations=%d",
              len(address), len(partition_hash), offset, iterations)
    out, _ = _output_buffer(out, params)
    start = _allocate(params.chunk_size)
    compute_initial_chunk(address, offset, partition_hash, start, params=params)
    last = bytes(start[params.last_segment_offset:])
    return mix_entropy_chunk(last, start, iterations, out, params=params)


def iter_entropy_chunks(address: bytes, partition_hash: bytes,
                        offsets: Iterable[int], iterations: int,
                        *, params: PackingParams = DEFAULT_PARAMS
                        ) -> Iterator[Tuple[int, bytearray]]:
    """Yield ``(offset, chunk)`` for each offset, one independent call each."""
    for offset in offsets:
        yield offset, compute_entropy_chunk(address, offset, partition_hash,
                                            iterations, params=params)
