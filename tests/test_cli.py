import json
from io import StringIO

import pytest

from sprig.__main__ import main


def test_text_argument(capsys):
    assert main(["<p>text <hr /> more text</p>"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["declaration"] is None
    assert data["root"]["name"] == "p"
    assert data["root"]["children"][0] == "text "
    assert data["root"]["children"][1]["name"] == "hr"
    assert data["root"]["children"][2] == "more text"


def test_file_argument(capsys, files_path):
    assert main(["--file", str(files_path / "soap-envelope.xml")]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["declaration"] == {"version": "1.1"}
    assert data["root"]["ns"] == "soapenv"
    assert data["root"]["name"] == "Envelope"


def test_file_with_encoding_option(capsys, tmp_path):
    file = tmp_path / "menu.xml"
    file.write_bytes("<item>Crêpe</item>".encode("cp1252"))

    assert main(["--file", str(file), "--encoding", "cp1252"]) == 0
    assert json.loads(capsys.readouterr().out)["root"]["children"] == ["Crêpe"]


def test_standard_input(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", StringIO("<a><b/></a>"))

    assert main([]) == 0
    assert json.loads(capsys.readouterr().out)["root"]["children"][0]["name"] == "b"


def test_parsing_error(capsys):
    assert main(["<p></bacon>"]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Expected </p> closing tag, got </bacon> instead." in captured.err


def test_missing_file(capsys, tmp_path):
    assert main(["--file", str(tmp_path / "nothing.xml")]) == 1
    assert "Couldn't load" in capsys.readouterr().err


def test_strict_option(capsys):
    assert main(['<a x="1" x="2"/>']) == 0
    capsys.readouterr()

    assert main(["--strict", '<a x="1" x="2"/>']) == 1
    assert 'Attribute "x" is defined more than once.' in capsys.readouterr().err


def test_ordered_attributes_option(capsys):
    assert main(["--ordered-attributes", "--indent", "0", '<a y="1" x="2"/>']) == 0

    data = json.loads(capsys.readouterr().out)
    assert [a["property"] for a in data["root"]["attributes"]] == ["y", "x"]


def test_mutually_exclusive_sources(capsys):
    with pytest.raises(SystemExit):
        main(["<a/>", "--url", "https://sprig.example/"])
    assert "not allowed with argument" in capsys.readouterr().err
