import hashlib
import struct
import sys

import pytest

from capacity_entropy import AllocationError, SeedHashError, derive_seed_hash

from helpers import sha256

ADDRESS = bytes(range(20))
PARTITION = bytes(range(100, 132))


def test_seed_is_digest_of_address_partition_offset():
    expected = sha256(ADDRESS + PARTITION + struct.pack("=Q", 42))
    assert derive_seed_hash(ADDRESS, 42, PARTITION) == expected


def test_offset_uses_native_byte_order():
    seed = derive_seed_hash(b"A", 1, b"P")
    assert seed == sha256(b"AP" + (1).to_bytes(8, sys.byteorder))


def test_empty_inputs_allowed():
    assert derive_seed_hash(b"", 0, b"") == sha256(b"\0" * 8)


def test_offset_wraps_like_unsigned_cast():
    assert derive_seed_hash(ADDRESS, -1, PARTITION) == \
        derive_seed_hash(ADDRESS, 2 ** 64 - 1, PARTITION)
    assert derive_seed_hash(ADDRESS, 2 ** 64 + 5, PARTITION) == \
        derive_seed_hash(ADDRESS, 5, PARTITION)


def test_concatenation_order_matters():
    assert derive_seed_hash(b"A", 0, b"P") != derive_seed_hash(b"P", 0, b"A")


def test_accepts_bytearray_and_memoryview():
    a = derive_seed_hash(bytearray(ADDRESS), 7, memoryview(PARTITION))
    assert a == derive_seed_hash(ADDRESS, 7, PARTITION)


def test_context_failure_raises_seed_hash_error(broken_params):
    with pytest.raises(SeedHashError) as info:
        derive_seed_hash(ADDRESS, 0, PARTITION, params=broken_params)
    assert isinstance(info.value.__cause__, ValueError)


def test_seed_input_allocation_failure(monkeypatch):
    from capacity_entropy import PackingParams, entropy

    def _oom(value):
        raise MemoryError

    calls = []

    def factory():
        calls.append(1)
        return hashlib.sha256()

    monkeypatch.setattr(entropy, "_pack_offset", _oom)
    params = PackingParams(chunk_size=64, hash_size=32, hash_factory=factory)
    with pytest.raises(AllocationError) as info:
        derive_seed_hash(ADDRESS, 0, PARTITION, params=params)
    assert isinstance(info.value.__cause__, MemoryError)
    assert calls == []
