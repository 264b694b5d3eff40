import pytest

import decode
import encode
import make_code
from huffman import HuffmanTree

DATA = b"she sells sea shells by the sea shore\n" * 20


@pytest.fixture
def src(tmp_path):
    p = tmp_path / "in.txt"
    p.write_bytes(DATA)
    return p


def test_encode_decode_embedded_tree(src, tmp_path, capsys):
    short = tmp_path / "in.short"
    back = tmp_path / "out" / "in.txt"
    encode.main(["--input", str(src), "--output", str(short)])
    decode.main(["--input", str(short), "--output", str(back)])
    assert back.read_bytes() == DATA
    out = capsys.readouterr().out
    assert "[encode] wrote" in out
    assert "[decode] wrote" in out


def test_code_file_pipeline(src, tmp_path):
    code = tmp_path / "in.code"
    short = tmp_path / "in.short"
    back = tmp_path / "back.txt"
    make_code.main(["--input", str(src), "--output", str(code)])
    with open(code) as f:
        tree = HuffmanTree.from_text(f)
    assert 256 in tree.code_table()

    encode.main(["--input", str(src), "--output", str(short), "--code", str(code)])
    decode.main(["--input", str(short), "--output", str(back), "--code", str(code)])
    assert back.read_bytes() == DATA


def test_decode_needs_code_file(src, tmp_path):
    code = tmp_path / "in.code"
    short = tmp_path / "in.short"
    make_code.main(["--input", str(src), "--output", str(code)])
    encode.main(["--input", str(src), "--output", str(short), "--code", str(code)])
    with pytest.raises(ValueError, match="--code"):
        decode.main(["--input", str(short), "--output", str(tmp_path / "x")])
