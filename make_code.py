import argparse
import os
from freq import count_bytes
from huffman import HuffmanTree

def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--input", required=True, help="path to file to analyze")
    ap.add_argument("--output", required=True, help="path to .code file")
    args = ap.parse_args(argv)

    with open(args.input, "rb") as f:
        data = f.read()

    counts = count_bytes(data)
    tree = HuffmanTree.from_counts(counts)

    os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
    with open(args.output, "w", encoding="ascii", newline="\n") as f:
        tree.write(f)

    print(f"[make_code] wrote {args.output}")
    print(f"[make_code] bytes={len(data)}, distinct={int((counts > 0).sum())}")

if __name__ == "__main__":
    main()
