import pytest

from capacity_entropy import PackingParams

from helpers import ToyHash


def _broken_factory():
    raise ValueError("unsupported hash type")


@pytest.fixture
def toy_params():
    # 64 byte chunk, 2 segments of SHA-256
    return PackingParams(chunk_size=64, hash_size=32)


@pytest.fixture
def small_params():
    return PackingParams(chunk_size=32 * 8, hash_size=32)


@pytest.fixture
def double_params():
    return PackingParams(chunk_size=32 * 8, hash_size=32, hash_factory=ToyHash)


@pytest.fixture
def broken_params():
    return PackingParams(chunk_size=64, hash_size=32, hash_factory=_broken_factory)
