import io
from typing import Optional

from bitpack import BitWriter, BitReader
from freq import count_bytes, EOF_SYMBOL
from huffman import HuffmanTree

def encode_bytes(data: bytes, tree: Optional[HuffmanTree] = None, *, with_header: bool = True) -> bytes:
    """
    Returns payload bytes:
      [bit-packed tree if with_header] codes of data... code of EOF, zero padded
    """
    # 1) Tree from byte frequencies unless the caller brings one
    if tree is None:
        tree = HuffmanTree.from_counts(count_bytes(data))

    codes = tree.code_table()
    if EOF_SYMBOL not in codes:
        raise ValueError("tree has no end-of-file leaf")

    # 2) Pack header + payload bits
    bw = BitWriter()
    if with_header:
        tree.write_header(bw)
    for b in data:
        code = codes.get(b)
        if code is None:
            raise ValueError(f"byte {b} has no code in this tree")
        bw.write_bits(code)
    bw.write_bits(codes[EOF_SYMBOL])
    return bw.finish()

def decode_bytes(payload: bytes, tree: Optional[HuffmanTree] = None) -> bytes:
    """
    tree=None: the payload starts with the bit-packed tree.
    """
    br = BitReader(payload)
    if tree is None:
        tree = HuffmanTree.from_header(br)
    out = io.BytesIO()
    tree.decode(br, out, EOF_SYMBOL)
    return out.getvalue()
