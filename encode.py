import argparse
import os
from codec import encode_bytes
from huffman import HuffmanTree
from bitstream import write_file, FLAG_TREE_IN_STREAM

def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--input", required=True, help="path to file to compress")
    ap.add_argument("--output", required=True, help="path to .short")
    ap.add_argument("--code", default=None,
                    help="use this .code file instead of embedding the tree")
    args = ap.parse_args(argv)

    with open(args.input, "rb") as f:
        data = f.read()

    if args.code:
        with open(args.code, "r", encoding="ascii") as f:
            tree = HuffmanTree.from_text(f)
        flags = 0
    else:
        tree = None
        flags = FLAG_TREE_IN_STREAM

    payload = encode_bytes(data, tree, with_header=tree is None)

    os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
    with open(args.output, "wb") as f:
        write_file(f, payload, flags=flags, orig_len=len(data))

    print(f"[encode] wrote {args.output}")
    print(f"[encode] input={len(data)} bytes, payload={len(payload)} bytes, "
          f"tree={'embedded' if flags & FLAG_TREE_IN_STREAM else args.code}")

if __name__ == "__main__":
    main()
