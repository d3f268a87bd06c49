"""Length-prefixed framing: each frame starts with a 4-byte little-endian length."""

import struct

HEADER_SIZE = 4
MAX_LENGTH = 0xFFFFFFFF

_LENGTH = struct.Struct("<I")


def recv_exact(conn, size):
    """Read exactly ``size`` bytes, raising ConnectionError on early close."""
    data = bytearray()
    while len(data) < size:
        chunk = conn.recv(size - len(data))
        if not chunk:
            raise ConnectionError(f"connection closed after {len(data)} of {size} bytes")
        data += chunk
    return bytes(data)


def send_all(conn, data):
    """Write all of ``data``, retrying on partial writes."""
    view = memoryview(data)
    while view:
        view = view[conn.send(view):]


def encode_length(size):
    """Return the 4-byte header for a frame of ``size`` bytes."""
    if not 0 <= size <= MAX_LENGTH:
        raise ValueError(f"frame length out of range: {size}")
    return _LENGTH.pack(size)


def decode_length(header):
    """Return the length held in a 4-byte header."""
    if len(header) != HEADER_SIZE:
        raise ValueError(f"length header must be {HEADER_SIZE} bytes, got {len(header)}")
    return _LENGTH.unpack(bytes(header))[0]