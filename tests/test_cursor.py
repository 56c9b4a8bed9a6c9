import pytest

from thumbscache.error import IoError
from thumbscache.tdb_cursor import TDB_Cursor
from thumbscache.utils import decodeBytes, cleanFileName


def test_typed_reads_are_little_endian():
    tdbCursor = TDB_Cursor(b"\x01\x00\x00\x00" + b"\x02\x00\x00\x00\x00\x00\x00\x01")

    assert tdbCursor.readUInt32() == 1
    assert tdbCursor.getUInt64(4) == 0x0100000000000002
    assert tdbCursor.tell() == 4
    tdbCursor.skip(8)
    assert tdbCursor.remaining() == 0


def test_short_read_raises_and_keeps_position():
    tdbCursor = TDB_Cursor(b"\x01\x02\x03")

    with pytest.raises(IoError):
        tdbCursor.readUInt32()
    assert tdbCursor.tell() == 0

    with pytest.raises(IoError):
        tdbCursor.readBytes(4)
    with pytest.raises(IoError):
        tdbCursor.skip(10)
    assert tdbCursor.readBytes(3) == b"\x01\x02\x03"


def test_position_past_end_has_nothing_remaining():
    tdbCursor = TDB_Cursor(b"abc")
    tdbCursor.seek(10)

    assert tdbCursor.remaining() == 0
    with pytest.raises(IoError):
        tdbCursor.readBytes(1)


def test_absolute_reads_do_not_move():
    tdbCursor = TDB_Cursor(b"\x00\x00\x05\x00\x00\x00")

    assert tdbCursor.getUInt32(2) == 5
    assert tdbCursor.getBytes(0, 2) == b"\x00\x00"
    assert tdbCursor.tell() == 0
    with pytest.raises(IoError):
        tdbCursor.getUInt64(0)


def test_utf16_read():
    tdbCursor = TDB_Cursor("a1b2".encode("utf-16-le"))

    assert tdbCursor.readUTF16(4) == "a1"
    assert tdbCursor.readUTF16(4) == "b2"


def test_decode_bytes_is_lossy():
    # Lone surrogate is replaced, dangling odd byte dropped
    assert decodeBytes(b"a\x00\x00\xd8b\x00") == "a\ufffdb"
    assert decodeBytes(b"a\x00b") == "a"
    assert decodeBytes(b"") == ""


def test_clean_file_name():
    assert cleanFileName('a/b\\c:d*e?f"g<h>i|j') == "a_b_c_d_e_f_g_h_i_j"
