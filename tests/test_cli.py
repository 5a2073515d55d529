import io
import sys

from fixlatin.cli import build_parser, main


def _stdin(monkeypatch, data):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data)))


def test_defaults_match_original_tool():
    args = build_parser().parse_args([])
    assert args.allow_control is True
    assert args.assume == "cp1252"


def test_stdin_to_stdout(monkeypatch, capsysbinary):
    _stdin(monkeypatch, b"\x80 5 \x96 caf\xc3\xa9\n")

    assert main([]) == 0
    assert capsysbinary.readouterr().out == "€ 5 – café\n".encode("utf-8")


def test_files(tmp_path):
    src = tmp_path / "in.txt"
    dst = tmp_path / "out.txt"
    src.write_bytes(b"\xa4uro \xbd")

    assert main([str(src), "-o", str(dst), "--assume", "iso-8859-15"]) == 0
    assert dst.read_bytes() == "€uro œ".encode("utf-8")


def test_control_byte_fails_without_output(monkeypatch, capsysbinary, caplog):
    _stdin(monkeypatch, b"header\n\x81")

    assert main(["--no-control"]) == 1
    assert capsysbinary.readouterr().out == b""
    assert "control character 0x81 at offset 7" in caplog.text


def test_unwritable_output(tmp_path, caplog):
    src = tmp_path / "in.txt"
    src.write_bytes(b"caf\xe9")
    dst = tmp_path / "missing-dir" / "out.txt"

    assert main([str(src), "-o", str(dst)]) == 1
    assert not dst.exists()
    assert "cannot write" in caplog.text


def test_missing_input_file(tmp_path, caplog):
    assert main([str(tmp_path / "nope.txt")]) == 1
    assert "cannot read" in caplog.text
