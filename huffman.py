from __future__ import annotations
import heapq
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from bitpack import BitWriter, BitReader

# Symbol field width of the bit-packed tree header.
SYMBOL_BITS = 9
MAX_SYMBOL = (1 << SYMBOL_BITS) - 1

@dataclass(frozen=True)
class Leaf:
    symbol: int
    weight: int = field(default=0, compare=False)

@dataclass(frozen=True)
class Internal:
    left: "Node"
    right: "Node"
    weight: int = field(default=0, compare=False)

Node = Union[Leaf, Internal]

def _combine(a: Node, b: Node) -> Internal:
    return Internal(left=a, right=b, weight=a.weight + b.weight)

def _walk(node: Node, path: str) -> Iterator[Tuple[int, str]]:
    # depth-first, left before right
    if isinstance(node, Leaf):
        yield node.symbol, path
        return
    yield from _walk(node.left, path + "0")
    yield from _walk(node.right, path + "1")

def _from_trie(trie: dict, path: str) -> Node:
    """
    Turn a nested-dict trie {0: ..., 1: ..., "sym": s} into nodes.
    """
    has0, has1 = 0 in trie, 1 in trie
    if not has0 and not has1:
        if "sym" not in trie:
            raise ValueError(f"Malformed code file: no symbol at {path!r}")
        return Leaf(symbol=trie["sym"])
    if "sym" in trie:
        raise ValueError(f"Malformed code file: code {path!r} is a prefix of another code")
    if not (has0 and has1):
        raise ValueError(f"Malformed code file: branch {path!r} has a single child")
    return Internal(left=_from_trie(trie[0], path + "0"),
                    right=_from_trie(trie[1], path + "1"))

def _write_node(node: Node, writer: BitWriter):
    if isinstance(node, Leaf):
        writer.write_bit(1)
        writer.write_uint(node.symbol, SYMBOL_BITS)
    else:
        writer.write_bit(0)
        _write_node(node.left, writer)
        _write_node(node.right, writer)

def _read_node(reader: BitReader) -> Node:
    if reader.read_bit() == 1:
        return Leaf(symbol=reader.read_uint(SYMBOL_BITS))
    left = _read_node(reader)
    right = _read_node(reader)
    return Internal(left=left, right=right)


class HuffmanTree:
    """
    Static Huffman code tree.

    Every Internal node has exactly two children and every Leaf holds one
    symbol. Built once by one of the from_* constructors, read-only afterwards.
    """

    def __init__(self, root: Node):
        if root is None:
            raise ValueError("tree needs a root node")
        self.root = root

    def __eq__(self, other):
        if not isinstance(other, HuffmanTree):
            return NotImplemented
        return self.root == other.root

    def __repr__(self):
        return f"HuffmanTree(leaves={sum(1 for _ in self.items())})"

    # ---- construction ----

    @classmethod
    def from_counts(cls, counts) -> "HuffmanTree":
        """
        counts[i] = occurrences of symbol i, for i in 0..N-1.
        Adds the end-of-file leaf (symbol N, weight 1).
        Ties between equal weights are resolved first-in first-out.
        """
        pq: List[Tuple[int, int, Node]] = []
        seq = 0
        for sym, c in enumerate(counts):
            if int(c) != c:
                raise ValueError(f"non-integral count {c!r} for symbol {sym}")
            c = int(c)
            if c < 0:
                raise ValueError(f"negative count for symbol {sym}")
            if c > 0:
                pq.append((c, seq, Leaf(symbol=sym, weight=c)))
                seq += 1
        pq.append((1, seq, Leaf(symbol=len(counts), weight=1)))
        seq += 1
        heapq.heapify(pq)
        while len(pq) > 1:
            _, _, a = heapq.heappop(pq)
            _, _, b = heapq.heappop(pq)
            node = _combine(a, b)
            heapq.heappush(pq, (node.weight, seq, node))
            seq += 1
        return cls(pq[0][2])

    @classmethod
    def from_text(cls, lines: Iterable[str]) -> "HuffmanTree":
        """
        Rebuild from a code file: alternating lines of symbol id and
        '0'/'1' path, until input is exhausted.
        """
        trie: dict = {}
        it = iter(lines)
        npairs = 0
        for line in it:
            s = line.rstrip("\r\n")
            try:
                sym = int(s)
            except ValueError:
                raise ValueError(f"Malformed code file: bad symbol line {s!r}") from None
            path = next(it, None)
            if path is None:
                raise ValueError(f"Malformed code file: symbol {sym} has no code line")
            path = path.rstrip("\r\n")
            cur = trie
            for ch in path:
                if ch not in "01":
                    raise ValueError(f"Malformed code file: bad code {path!r} for symbol {sym}")
                cur = cur.setdefault(int(ch), {})
            cur["sym"] = sym
            npairs += 1
        if npairs == 0:
            raise ValueError("Malformed code file: no entries")
        return cls(_from_trie(trie, ""))

    @classmethod
    def from_header(cls, reader: BitReader) -> "HuffmanTree":
        """Rebuild from the bit-packed header written by write_header."""
        return cls(_read_node(reader))

    # ---- queries / serialization ----

    def items(self) -> Iterator[Tuple[int, str]]:
        """(symbol, path) for every leaf, left to right."""
        return _walk(self.root, "")

    def assign(self, codes: List[Optional[str]]):
        """Fill codes[symbol] with the leaf's path for every leaf."""
        for sym, path in self.items():
            codes[sym] = path

    def code_table(self) -> Dict[int, str]:
        return dict(self.items())

    def write(self, out):
        """Write the code file format (symbol line, path line per leaf)."""
        for sym, path in self.items():
            out.write(f"{sym}\n{path}\n")

    def write_header(self, writer: BitWriter):
        bad = [s for s, _ in self.items() if not 0 <= s <= MAX_SYMBOL]
        if bad:
            raise ValueError(f"symbol {bad[0]} does not fit in {SYMBOL_BITS} bits")
        _write_node(self.root, writer)

    def decode(self, reader: BitReader, out, eof: int) -> int:
        """
        Read codes from reader and write the matching bytes to out until the
        eof symbol is decoded. Returns number of bytes written.
        """
        n = 0
        while True:
            cur = self.root
            while isinstance(cur, Internal):
                cur = cur.right if reader.read_bit() else cur.left
            if cur.symbol == eof:
                return n
            out.write(bytes((cur.symbol,)))
            n += 1
