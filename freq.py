import numpy as np

# Byte alphabet; the end-of-file pseudo-symbol takes the next free id.
ALPHABET_SIZE = 256
EOF_SYMBOL = ALPHABET_SIZE

def count_bytes(data: bytes, alphabet_size: int = ALPHABET_SIZE) -> np.ndarray:
    """
    Occurrence count of every byte value.
    Returns int64 array of length alphabet_size, index = byte value.
    """
    x = np.frombuffer(bytes(data), dtype=np.uint8)
    counts = np.bincount(x, minlength=alphabet_size).astype(np.int64)
    if counts.size > alphabet_size:
        raise ValueError(f"byte value out of alphabet (size {alphabet_size})")
    return counts
