# ==================================================
# examples/compute_chunk.py
# ==================================================
import argparse, hashlib
from capacity_entropy import iter_entropy_chunks
from capacity_entropy.config import configure_logging, packing_iterations

def main(argv=None):
    p = argparse.ArgumentParser()
    p.add_argument("address", help="mining address, hex")
    p.add_argument("partition", help="partition hash, hex")
    p.add_argument("start", type=int, help="first chunk offset")
    p.add_argument("count", type=int, nargs="?", default=1)
    p.add_argument("--iterations", type=int, default=None,
                   help="packing depth (default: $ENTROPY_PACKING_ITERATIONS)")
    p.add_argument("--log-level", default=None)
    args = p.parse_args(argv)

    configure_logging(args.log_level)
    iterations = args.iterations if args.iterations is not None else packing_iterations()
    address = bytes.fromhex(args.address)
    partition = bytes.fromhex(args.partition)

    offsets = range(args.start, args.start + args.count)
    for offset, chunk in iter_entropy_chunks(address, partition, offsets, iterations):
        print(offset, hashlib.sha256(chunk).hexdigest())

if __name__ == "__main__":
    main()
