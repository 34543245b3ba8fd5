import hashlib


class ToyHash:
    """Reduced deterministic 32-byte digest standing in for SHA-256."""
    digest_size = 32

    def __init__(self, data=b""):
        self._buf = bytearray(data)

    def update(self, data):
        self._buf += data

    def copy(self):
        return ToyHash(self._buf)

    def digest(self):
        out = bytearray(self.digest_size)
        for i, b in enumerate(self._buf):
            out[i % self.digest_size] = (out[i % self.digest_size] * 31 + b + i) & 0xFF
        return bytes(out)


def toy_digest(data: bytes) -> bytes:
    h = ToyHash()
    h.update(data)
    return h.digest()


def sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def split(chunk, size=32):
    return [bytes(chunk[i:i + size]) for i in range(0, len(chunk), size)]
