"""Hex dump rendering for inspecting canonical block bytes."""

_BYTES_PER_LINE = 16


def _printable(byte: int) -> str:
    return chr(byte) if 0x20 <= byte < 0x7F else "."


def hex_dump(data: bytes) -> str:
    """Return ``data`` in ``hexdump -C`` layout.

    Each line holds 16 bytes: an 8-digit hex offset, two groups of eight byte
    pairs and the printable characters between pipes. Empty input renders as an
    empty string.

    Example:
        00000000  00 01 02 03 04 05 06 07  08 09 0a 0b 0c 0d 0e 0f  |................|
    """
    lines = []
    for offset in range(0, len(data), _BYTES_PER_LINE):
        chunk = data[offset:offset + _BYTES_PER_LINE]
        pairs = [f"{b:02x}" for b in chunk]
        left = " ".join(pairs[:8])
        right = " ".join(pairs[8:])
        # Pad the hex columns so the ascii column lines up on short lines
        hex_part = f"{left:<23}  {right:<23}"
        ascii_part = "".join(_printable(b) for b in chunk)
        lines.append(f"{offset:08x}  {hex_part}  |{ascii_part}|")
    return "\n".join(lines)
