"""Tests for hex dump rendering"""
from helloblocks.schemas.block import Block
from helloblocks.utils.chain import NULL_HASH, serialize_block
from helloblocks.utils.hexdump import hex_dump

ASCII_COLUMN = 60


def test_hex_dump_full_line():
    """Test a 16-byte line renders offset, both byte groups and ascii"""
    dump = hex_dump(bytes(range(0x41, 0x51)))
    assert dump == (
        "00000000  41 42 43 44 45 46 47 48  49 4a 4b 4c 4d 4e 4f 50  |ABCDEFGHIJKLMNOP|"
    )


def test_hex_dump_short_line_is_aligned():
    """Test the ascii column lines up on a partial last line"""
    dump = hex_dump(b"AB")
    assert dump.startswith("00000000  41 42 ")
    assert dump.endswith("|AB|")
    assert dump.index("|") == ASCII_COLUMN


def test_hex_dump_block_bytes():
    """Test dump of the first block's canonical bytes"""
    lines = hex_dump(serialize_block(Block(prev_hash=NULL_HASH, height=1))).splitlines()
    assert len(lines) == 3
    assert [line[:8] for line in lines] == ["00000000", "00000010", "00000020"]
    assert lines[2].startswith("00000020  01 00 00 00 00 00 00 00")
    assert lines[2].endswith("|........|")
    assert all(line.index("|") == ASCII_COLUMN for line in lines)


def test_hex_dump_non_printable():
    """Test non-printable bytes show as dots"""
    assert hex_dump(b"\x00\x7f\x1f~").endswith("|...~|")


def test_hex_dump_empty():
    """Test empty input renders nothing"""
    assert hex_dump(b"") == ""
