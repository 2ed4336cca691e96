"""
classical_cipher — Command-Line Test Suite
==========================================
Run with:  python -m pytest tests/ -v
"""

import sys
import os
import io
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from classical_cipher            import __version__
from classical_cipher.cli        import main
from classical_cipher.exceptions import MissingArgument, UnknownArgument
from classical_cipher.modes      import CipherMode, CipherType
from classical_cipher.settings   import ProgramSettings, process_command_line


# ── Settings ─────────────────────────────────────────────────────────────────
def test_defaults():
    s = process_command_line([])
    assert s == ProgramSettings()
    assert s.cipher_type is CipherType.CAESAR
    assert s.cipher_mode is CipherMode.ENCRYPT
    assert s.cipher_key == ""

def test_full_command_line():
    s = process_command_line(["-i", "in.txt", "-o", "out.txt", "-c", "PlayFair",
                              "-k", "secret", "--decrypt"])
    assert s.input_file == "in.txt"
    assert s.output_file == "out.txt"
    assert s.cipher_type is CipherType.PLAYFAIR
    assert s.cipher_key == "secret"
    assert s.cipher_mode is CipherMode.DECRYPT

def test_last_mode_flag_wins():
    assert process_command_line(["--decrypt", "--encrypt"]).cipher_mode is CipherMode.ENCRYPT

def test_negative_caesar_key_accepted():
    assert process_command_line(["-k", "-3"]).cipher_key == "-3"

def test_settings_are_frozen():
    s = process_command_line([])
    with pytest.raises(AttributeError):
        s.cipher_key = "changed"

@pytest.mark.parametrize("argv", [["-k"], ["-i"], ["--outfile"], ["-c"], ["-k", "--decrypt"]])
def test_missing_argument(argv):
    with pytest.raises(MissingArgument):
        process_command_line(argv)

@pytest.mark.parametrize("argv", [["--bogus"], ["stray"], ["-c", "enigma"], ["--enc"]])
def test_unknown_argument(argv):
    with pytest.raises(UnknownArgument):
        process_command_line(argv)


# ── main() ───────────────────────────────────────────────────────────────────
def _stdin(monkeypatch, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))

def test_help(capsys):
    assert main(["--help"]) == 0
    out = capsys.readouterr().out
    assert "mpags-cipher" in out
    assert "--decrypt" in out

def test_version(capsys):
    assert main(["-v"]) == 0
    assert capsys.readouterr().out.strip() == __version__

def test_caesar_stdin_to_stdout(monkeypatch, capsys):
    _stdin(monkeypatch, "Hello, hello!\n")
    assert main(["-k", "3"]) == 0
    assert capsys.readouterr().out == "KHOORKHOOR\n"

def test_vigenere_decrypt(monkeypatch, capsys):
    _stdin(monkeypatch, "rijvs")
    assert main(["-c", "vigenere", "-k", "key", "--decrypt"]) == 0
    assert capsys.readouterr().out == "HELLO\n"

def test_file_roundtrip(tmp_path):
    src = tmp_path / "plain.txt"
    mid = tmp_path / "secret.txt"
    out = tmp_path / "back.txt"
    src.write_text("Meet me at 10 by the old oak tree\n")
    assert main(["-c", "playfair", "-k", "oak", "-i", str(src), "-o", str(mid)]) == 0
    assert main(["-c", "playfair", "-k", "oak", "-i", str(mid), "-o", str(out), "--decrypt"]) == 0
    # digits kept in place, odd final E padded with X
    assert out.read_text() == "MEETMEAT10BYTHEOLDOAKTREEX\n"

def test_missing_input_file(tmp_path, capsys):
    assert main(["-i", str(tmp_path / "nope.txt")]) == 1
    assert "[error]" in capsys.readouterr().err

def test_invalid_key_reports_and_writes_nothing(tmp_path, monkeypatch, capsys):
    _stdin(monkeypatch, "HELLO")
    out = tmp_path / "out.txt"
    assert main(["-k", "abc", "-o", str(out)]) == 1
    assert "Invalid key" in capsys.readouterr().err
    assert not out.exists()

def test_argument_errors_exit_1(capsys):
    assert main(["-k"]) == 1
    assert "Missing argument" in capsys.readouterr().err
    assert main(["--nope"]) == 1
    assert "Unknown argument" in capsys.readouterr().err

def test_input_file_not_utf8(tmp_path, capsys):
    src = tmp_path / "latin1.txt"
    src.write_bytes(b"HELLO\xff\xfe")
    assert main(["-k", "3", "-i", str(src)]) == 0
    assert capsys.readouterr().out == "KHOOR\n"

def test_stdin_not_utf8(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"HELLO\xff"), encoding="utf-8"))
    assert main(["-k", "3"]) == 1
    assert "[error] failed to decode standard input" in capsys.readouterr().err

@pytest.mark.parametrize("flag,name", [
    ("-i", "-i/--infile"), ("-o", "-o/--outfile"), ("-c", "-c/--cipher"), ("-k", "-k/--key"),
])
def test_missing_argument_names_flag(flag, name):
    # relies on argparse's "argument X: expected one argument" wording
    with pytest.raises(MissingArgument) as excinfo:
        process_command_line([flag])
    assert name in str(excinfo.value)
    assert "expected one argument" in str(excinfo.value)
