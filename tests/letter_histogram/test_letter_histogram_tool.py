#!/usr/bin/env python3

import io
import sys

from path import Path

from letter_histogram.tools import letter_histogram_tool

AAB_A = "a: " + "#" * 67 + " 66.67%"
AAB_B = "b: " + "#" * 33 + " 33.33%"
SAMPLES = Path(__file__).parent / "samples"


def run_tool(monkeypatch, capsys, argv, stdin=""):
    if isinstance(stdin, bytes):
        stdin = io.TextIOWrapper(io.BytesIO(stdin), encoding="utf-8")
    else:
        stdin = io.StringIO(stdin)
    monkeypatch.setattr(sys, "argv", ["letter-histogram", *argv])
    monkeypatch.setattr(sys, "stdin", stdin)
    rc = letter_histogram_tool.main()
    out, err = capsys.readouterr()
    return rc, out, err


class TestTool:
    def test_stdin(self, monkeypatch, capsys):
        rc, out, _ = run_tool(monkeypatch, capsys, [], stdin="AaB")
        assert rc == 0
        assert out == f"{AAB_A}\n{AAB_B}\n"

    def test_empty_stdin(self, monkeypatch, capsys):
        rc, out, _ = run_tool(monkeypatch, capsys, [])
        assert rc == 0
        assert out == "\n"

    def test_upper_and_threshold(self, monkeypatch, capsys):
        rc, out, _ = run_tool(monkeypatch, capsys, ["-U", "-t", "50"], stdin="aab")
        assert rc == 0
        assert out == "A: " + "#" * 67 + " 66.67%\n"

    def test_file(self, monkeypatch, capsys):
        rc, out, _ = run_tool(monkeypatch, capsys, [SAMPLES / "aab.txt"])
        assert rc == 0
        assert out == f"{AAB_A}\n{AAB_B}\n"

    def test_file_and_stdin(self, monkeypatch, capsys):
        rc, out, _ = run_tool(
            monkeypatch, capsys, [SAMPLES / "aab.txt", "-"], stdin="b"
        )
        assert rc == 0
        bar = "#" * 50
        assert out == f"a: {bar} 50.00%\nb: {bar} 50.00%\n"

    def test_pangram(self, monkeypatch, capsys):
        rc, out, _ = run_tool(monkeypatch, capsys, [SAMPLES / "pangram.txt"])
        assert rc == 0
        lines = out.rstrip("\n").split("\n")
        assert len(lines) == 26
        assert lines[0] == "o: " + "#" * 11 + " 11.43%"

    def test_missing_file(self, monkeypatch, capsys):
        rc, out, err = run_tool(monkeypatch, capsys, [SAMPLES / "nope.txt"])
        assert rc == 1
        assert out == ""
        assert "nope.txt" in err

    def test_verbose(self, monkeypatch, capsys):
        rc, out, err = run_tool(monkeypatch, capsys, ["-v"], stdin="aab")
        assert rc == 0
        assert out == f"{AAB_A}\n{AAB_B}\n"
        assert "3 characters" in err

    def test_invalid_utf8_stdin(self, monkeypatch, capsys):
        rc, out, _ = run_tool(monkeypatch, capsys, [], stdin=b"ab\xff\n")
        assert rc == 0
        bar = "#" * 33
        assert out == f"a: {bar} 33.33%\nb: {bar} 33.33%\n\ufffd: {bar} 33.33%\n"

    def test_invalid_utf8_file(self, monkeypatch, capsys, tmp_path):
        p = tmp_path / "bad.txt"
        p.write_bytes(b"\xfe\xfeab")
        rc, out, _ = run_tool(monkeypatch, capsys, [str(p)])
        assert rc == 0
        assert out.split("\n")[0] == "\ufffd: " + "#" * 50 + " 50.00%"

    def test_bom_file(self, monkeypatch, capsys, tmp_path):
        p = tmp_path / "bom.txt"
        p.write_bytes("\ufeffaab\n".encode("utf-8"))
        rc, out, _ = run_tool(monkeypatch, capsys, [str(p)])
        assert rc == 0
        assert out == f"{AAB_A}\n{AAB_B}\n"
