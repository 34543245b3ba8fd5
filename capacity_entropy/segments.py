# ==================================================
# capacity_entropy/segments.py
# ==================================================
import numpy as np

from .params import DEFAULT_PARAMS, PackingParams

# -------- segment views ---------------------------------------------------

def segment_view(chunk, params: PackingParams = DEFAULT_PARAMS) -> np.ndarray:
    """Read-only ``(segments, params.hash_size)`` uint8 view over *chunk* (no copy)."""
    hash_size = params.hash_size
    flat = np.frombuffer(chunk, dtype=np.uint8)
    if flat.size % hash_size:
        raise ValueError(f"chunk of {flat.size} bytes is not a whole number of "
                         f"{hash_size} byte segments")
    view = flat.reshape(-1, hash_size)
    view.flags.writeable = False
    return view


def get_segment(chunk, index: int, params: PackingParams = DEFAULT_PARAMS) -> bytes:
    segs = segment_view(chunk, params)
    if not 0 <= index < len(segs):
        raise IndexError(f"segment {index} out of range (0..{len(segs) - 1})")
    return segs[index].tobytes()


def changed_segments(before, after, params: PackingParams = DEFAULT_PARAMS) -> list[int]:
    """Indices of the segments whose bytes differ between two chunks."""
    a = segment_view(before, params)
    b = segment_view(after, params)
    if a.shape != b.shape:
        raise ValueError(f"chunk sizes differ: {a.size} vs {b.size}")
    return np.flatnonzero((a != b).any(axis=1)).tolist()

# -------- chain check -----------------------------------------------------

def verify_chain(seed: bytes, chunk, params: PackingParams = DEFAULT_PARAMS) -> bool:
    """True when *chunk* is the initial fill grown from *seed* under *params*."""
    segs = segment_view(chunk, params)
    if segs.size != params.chunk_size:
        return False
    previous = bytes(seed)
    for seg in segs:
        h = params.hash_factory()
        h.update(previous)
        previous = seg.tobytes()
        if h.digest() != previous:
            return False
    return True
