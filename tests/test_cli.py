import io

import pytest

import thumbscache.config as config
from thumbscache.thumbscache import getArgs, main

from helpers import makeHeader, makeModernEntry


@pytest.fixture
def pathDB(tmp_path):
    pathDB = tmp_path / "thumbcache_256.db"
    pathDB.write_bytes(makeHeader(iFormat=32, iType=4) +
                       makeModernEntry("aaaa", b"\x01\x02") +
                       makeModernEntry("b/b", b"\x03") +
                       makeModernEntry("aaaa", b"\x04\x05\x06"))
    return pathDB


def test_summary_output(pathDB, capsys):
    main([str(pathDB)])

    strOut = capsys.readouterr().out
    assert "Format: 32 (Windows 10)" in strOut
    assert "Type: 4 (thumbcache_256.db)" in strOut
    assert "Entries: 3" in strOut
    assert "Version: Windows 10" in strOut
    assert "Cache type=256" in strOut
    assert "ID: b/b" in strOut


def test_prompt_for_path(pathDB, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(str(pathDB) + "\n"))

    main([])

    strOut = capsys.readouterr().out
    assert "Thumbscache path : " in strOut
    assert "Entries: 3" in strOut


def test_quiet_prints_nothing(pathDB, capsys):
    main(["-q", str(pathDB)])

    assert capsys.readouterr().out == ""


def test_extract_to_outdir(pathDB, tmp_path, capsys):
    pathOut = tmp_path / "out"

    main(["-o", str(pathOut), str(pathDB)])

    assert (pathOut / "aaaa.bmp").read_bytes() == b"\x01\x02"
    assert (pathOut / "b_b.bmp").read_bytes() == b"\x03"
    assert (pathOut / "aaaa_1.bmp").read_bytes() == b"\x04\x05\x06"
    assert "Extracted:    3 thumbnails" in capsys.readouterr().out


def test_missing_file_fails(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path / "missing.db")])

    assert excinfo.value.code == 1
    assert "Invalid file" in capsys.readouterr().err


def test_bad_signature_fails(tmp_path, capsys):
    pathBad = tmp_path / "bad.db"
    pathBad.write_bytes(b"IMMM" + b"\x00" * 60)

    with pytest.raises(SystemExit) as excinfo:
        main([str(pathBad)])

    assert excinfo.value.code == 1
    assert "Expected CMMM, got IMMM" in capsys.readouterr().err


def test_verbose_overrides_quiet():
    assert getArgs(["-q", "x"]).verbose == -1
    pargs = getArgs(["-q", "-v", "x"])
    assert pargs.verbose == 1
    assert pargs.quiet is False


def test_verbose_output(pathDB, capsys):
    main(["-v", str(pathDB)])

    assert config.VERBOSE == 1
    strOut = capsys.readouterr().out
    assert "Data Size: 2" in strOut
    assert "Entry Start: 24" in strOut
