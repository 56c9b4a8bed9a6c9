import ast

import pytest

import thumbscache.version as version
from thumbscache.thumbscache import getArgs


def test_version_metadata():
    assert version.STR_VERSION == version.major + "." + version.minor + "." + version.micro
    assert version.author[0] == version.maintainer[0][0]
    assert not hasattr(version, "location")


def test_version_module_has_no_imports():
    # setup.py imports it straight from the source tree
    with open(version.__file__) as fileVersion:
        treeVersion = ast.parse(fileVersion.read())
    assert not [node for node in ast.walk(treeVersion) if isinstance(node, (ast.Import, ast.ImportFrom))]


def test_version_option(capsys):
    with pytest.raises(SystemExit) as excinfo:
        getArgs(["--version"])
    assert excinfo.value.code == 0
    strOut = capsys.readouterr().out
    assert version.STR_VERSION in strOut
    assert "http" not in strOut
