import pytest

from bitpack import BitWriter, BitReader


def test_bits_are_packed_msb_first():
    bw = BitWriter()
    bw.write_bits("101")
    assert bw.finish() == b"\xa0"


def test_uint_is_lsb_first():
    bw = BitWriter()
    bw.write_uint(6, 9)  # 0b000000110 -> 0,1,1,0,0,0,0,0,0
    assert bw.finish() == b"\x60\x00"


def test_read_uint_inverts_write_uint():
    bw = BitWriter()
    for v in (0, 1, 97, 256, 511):
        bw.write_uint(v, 9)
    br = BitReader(bw.finish())
    assert [br.read_uint(9) for _ in range(5)] == [0, 1, 97, 256, 511]


def test_reader_raises_at_end():
    br = BitReader(b"\xff")
    for _ in range(8):
        assert br.read_bit() == 1
    with pytest.raises(EOFError):
        br.read_bit()


def test_write_bits_rejects_non_binary():
    with pytest.raises(ValueError):
        BitWriter().write_bits("012")
