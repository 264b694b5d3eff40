class BitWriter:
    def __init__(self):
        self._buf = bytearray()
        self._cur = 0
        self._nbits = 0  # bits currently in _cur (0..7)

    def write_bit(self, bit: int):
        self._cur = (self._cur << 1) | (1 if bit else 0)
        self._nbits += 1
        if self._nbits == 8:
            self._buf.append(self._cur)
            self._cur = 0
            self._nbits = 0

    def write_bits(self, path: str):
        """Write a '0'/'1' string, first character first."""
        for ch in path:
            if ch not in "01":
                raise ValueError(f"Invalid bit character: {ch!r}")
            self.write_bit(ch == "1")

    def write_uint(self, value: int, nbits: int):
        """Write a fixed-width unsigned integer, least significant bit first."""
        for i in range(nbits):
            self.write_bit((value >> i) & 1)

    def finish(self) -> bytes:
        """Pad remaining bits with zeros."""
        if self._nbits > 0:
            self._buf.append(self._cur << (8 - self._nbits))
            self._cur = 0
            self._nbits = 0
        return bytes(self._buf)

class BitReader:
    def __init__(self, data: bytes):
        self.data = data
        self.i = 0
        self.bit = 0  # bit index in current byte (0..7), MSB-first

    def read_bit(self) -> int:
        if self.i >= len(self.data):
            raise EOFError("Unexpected end of bitstream")
        b = (self.data[self.i] >> (7 - self.bit)) & 1
        self.bit += 1
        if self.bit == 8:
            self.bit = 0
            self.i += 1
        return b

    def read_uint(self, nbits: int) -> int:
        """Inverse of BitWriter.write_uint (LSB-first)."""
        value = 0
        for i in range(nbits):
            value |= self.read_bit() << i
        return value
