import argparse
import os
from codec import decode_bytes
from huffman import HuffmanTree
from bitstream import read_file, FLAG_TREE_IN_STREAM

def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--input", required=True, help="path to .short")
    ap.add_argument("--output", required=True, help="path to decoded file")
    ap.add_argument("--code", default=None,
                    help=".code file (required when the tree is not embedded)")
    args = ap.parse_args(argv)

    with open(args.input, "rb") as f:
        h, payload = read_file(f)

    tree = None
    if not h["flags"] & FLAG_TREE_IN_STREAM:
        if not args.code:
            raise ValueError("stream has no embedded tree: pass --code")
        with open(args.code, "r", encoding="ascii") as f:
            tree = HuffmanTree.from_text(f)

    y = decode_bytes(payload, tree)
    if len(y) != h["orig_len"]:
        raise ValueError(f"Malformed stream: decoded {len(y)} bytes, header says {h['orig_len']}")

    os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
    with open(args.output, "wb") as f:
        f.write(y)
    print(f"[decode] wrote {args.output} bytes={len(y)}")

if __name__ == "__main__":
    main()
