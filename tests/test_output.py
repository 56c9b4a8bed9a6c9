import pytest

from thumbscache.cmmm_entry import CacheEntry
from thumbscache.database import decodeBuffer
from thumbscache.error import IoError
from thumbscache.tdb_streams import TDB_Streams

from helpers import makeHeader, makeModernEntry


@pytest.fixture
def tcEntry():
    bytesPayload = b"\x89PNG\r\n\x1a\n" + bytes(range(256))
    return decodeBuffer(makeHeader() + makeModernEntry("3f2a9c", bytesPayload)).entries[0]


def test_write_to_given_path(tmp_path, tcEntry):
    pathOut = tmp_path / "thumb.out"

    assert tcEntry.writeToFile(str(pathOut)) == str(pathOut)
    assert pathOut.read_bytes() == tcEntry.data


def test_write_truncates_existing_file(tmp_path, tcEntry):
    pathOut = tmp_path / "thumb.out"
    pathOut.write_bytes(b"\xff" * 4096)

    tcEntry.writeToFile(str(pathOut))

    assert pathOut.read_bytes() == tcEntry.data


def test_write_to_default_path(tmp_path, monkeypatch, tcEntry):
    monkeypatch.chdir(tmp_path)

    tcEntry.writeToFile()

    # ...always .bmp, whatever the data holds
    assert (tmp_path / "3f2a9c.bmp").read_bytes() == tcEntry.data
    assert tcEntry.getFileName() == "3f2a9c.bmp"


def test_write_failure_raises(tmp_path, tcEntry):
    with pytest.raises(IoError):
        tcEntry.writeToFile(str(tmp_path / "missing" / "thumb.bmp"))


def test_empty_data_writes_empty_file(tmp_path):
    tcEntry = CacheEntry(58, None, 2, 0, 0, 0, 0, "e", b"", 0, 24)

    tcEntry.writeToFile(str(tmp_path / "e.bmp"))

    assert (tmp_path / "e.bmp").read_bytes() == b""


def test_entries_are_immutable(tcEntry):
    with pytest.raises(AttributeError):
        tcEntry.data = b""


def test_streams_file_names():
    tdbStreams = TDB_Streams()

    assert tdbStreams.getFileName("abc") == "abc.bmp"
    assert tdbStreams.getFileName("abc") == "abc_1.bmp"
    assert tdbStreams.getFileName("def") == "def.bmp"
    assert tdbStreams.getFileName("abc") == "abc_2.bmp"
    assert tdbStreams["abc"] == ["abc", "abc_1", "abc_2"]
    assert len(tdbStreams) == 2
    assert tdbStreams.getCount() == 4
    assert tdbStreams.extractStats("out/") == ["  Extracted:    4 thumbnails to out/",
                                               " Duplicates:    2 identifiers renamed"]

    del tdbStreams["abc"]
    assert tdbStreams.getCount() == 1


def test_streams_rejects_bad_values():
    tdbStreams = TDB_Streams()

    assert tdbStreams.extractStats() is None
    with pytest.raises(TypeError):
        tdbStreams[1] = "one"
    with pytest.raises(TypeError):
        tdbStreams["one"] = 1
