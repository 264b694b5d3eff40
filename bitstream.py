import struct

MAGIC = b"HUF2"   # 4 bytes
VERSION = 1       # 1 byte

# flags
FLAG_TREE_IN_STREAM = 0x01  # payload starts with the bit-packed tree

# Header (little-endian):
# magic(4) version(1) flags(1) orig_len(u32) payload_len(u32)
HDR_FMT = "<4sBBII"
HDR_SIZE = struct.calcsize(HDR_FMT)

def write_header(f, *, flags: int, orig_len: int, payload_len: int):
    f.write(struct.pack(HDR_FMT, MAGIC, VERSION, flags, orig_len, payload_len))

def read_header(f):
    data = f.read(HDR_SIZE)
    if len(data) != HDR_SIZE:
        raise ValueError("Malformed stream: header too short")
    magic, ver, flags, orig_len, payload_len = struct.unpack(HDR_FMT, data)
    if magic != MAGIC:
        raise ValueError("Bad magic number (not HUF2)")
    if ver != VERSION:
        raise ValueError(f"Unsupported version: {ver}")
    return dict(flags=flags, orig_len=orig_len, payload_len=payload_len)

def write_file(f, payload: bytes, *, flags: int, orig_len: int):
    write_header(f, flags=flags, orig_len=orig_len, payload_len=len(payload))
    f.write(payload)

def read_file(f):
    """Returns (header dict, payload bytes)."""
    h = read_header(f)
    payload = f.read(h["payload_len"])
    if len(payload) != h["payload_len"]:
        raise ValueError("Malformed stream: payload truncated")
    return h, payload
