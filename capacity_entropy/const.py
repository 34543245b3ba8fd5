# ==================================================
# capacity_entropy/const.py
# ==================================================
DATA_CHUNK_SIZE = 256 * 1024      # bytes per entropy chunk (256 KiB)
PACKING_HASH_ALG = "sha256"       # hashlib name of the packing digest
PACKING_HASH_SIZE = 32            # digest size of PACKING_HASH_ALG
HASH_ITERATIONS_PER_BLOCK = DATA_CHUNK_SIZE // PACKING_HASH_SIZE   # 8192 segments
OFFSET_FMT = "=Q"                 # u64 chunk offset, native byte order, no padding
U64_MASK = 0xFFFF_FFFF_FFFF_FFFF
