"""Big-endian unsigned byte strings <-> Python integers."""

from cryptography.utils import int_to_bytes


def encode(value: int) -> bytes:
    """Minimal big-endian encoding; zero is a single zero byte."""
    if value < 0:
        raise ValueError("Cannot encode a negative integer")
    return int_to_bytes(value)


def decode(data: bytes) -> int:
    """Interpret data as a big-endian unsigned integer. Empty input is zero."""
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"Expected bytes, got {type(data).__name__}")
    return int.from_bytes(data, 'big')
