"""
End-to-end tests for the ``contl`` command line.
"""
from __future__ import annotations

import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

from contl import cli

FIXTURES = Path(__file__).parent / "fixtures"


class TestCli:
    def _run(self, tmp_path, data: bytes, *extra):
        src = tmp_path / "in.txt"
        dst = tmp_path / "out.txt"
        src.write_bytes(data)
        code = cli.main([str(src), "-o", str(dst), *extra])
        return code, dst.read_bytes() if dst.exists() else b""

    def test_unfolds_to_output_file(self, tmp_path):
        code, out = self._run(tmp_path, b"Line 1\n  continued...\nLine 2\n")
        assert code == 0
        assert out == b"Line 1 continued...\nLine 2\n"

    def test_blank_lines_kept(self, tmp_path):
        code, out = self._run(tmp_path, b"A\n\nB\n")
        assert code == 0
        assert out == b"A\n\nB\n"

    def test_delimiter_option(self, tmp_path):
        code, out = self._run(tmp_path, b"X\n\tY\n", "--delimiter", "|")
        assert out == b"X|Y\n"

    def test_escaped_delimiter_option(self, tmp_path):
        code, out = self._run(tmp_path, b"X\n Y\n", "-d", "\\t")
        assert out == b"X\tY\n"

    def test_bytes_pass_through(self, tmp_path):
        code, out = self._run(tmp_path, b"\xff\xfe\n \x80\n")
        assert out == b"\xff\xfe \x80\n"

    def test_fixture_file(self, tmp_path):
        dst = tmp_path / "out.txt"
        assert cli.main([str(FIXTURES / "message.txt"), "-o", str(dst)]) == 0
        assert dst.read_text().splitlines()[1] == "Subject: quarterly report for Q3"

    def test_empty_input(self, tmp_path):
        code, out = self._run(tmp_path, b"")
        assert code == 0
        assert out == b""

    def test_missing_input_is_fatal(self, tmp_path, capsys):
        code = cli.main([str(tmp_path / "nope.txt")])
        assert code == 1
        assert capsys.readouterr().err.startswith("fatal: ")

    def test_first_line_read_failure_is_fatal(self, tmp_path, capsys, monkeypatch, scripted):
        data = b"ok\n more\nsecond\n"
        stream = scripted(data, fail_at=data.index(b"second"))
        monkeypatch.setattr(sys, "stdin", SimpleNamespace(buffer=stream))
        dst = tmp_path / "out.txt"
        code = cli.main(["-", "-o", str(dst)])
        assert code == 1
        assert "fatal: simulated read failure" in capsys.readouterr().err
        assert dst.read_bytes() == b"ok more\n"

    def test_bad_delimiter_rejected(self, tmp_path, capsys):
        code, _ = self._run(tmp_path, b"a\n", "-d", "\\x")
        assert code == 2
        assert "error:" in capsys.readouterr().err

    def test_help_mentions_continued_lines(self, capsys):
        with pytest.raises(SystemExit) as info:
            cli.main(["--help"])
        assert info.value.code == 0
        assert "continued line" in capsys.readouterr().out

    def test_unfold_helper_counts_lines(self, tmp_path):
        import io

        from contl.reader.continued_line import ContinuedLineReader

        out = io.BytesIO()
        count = cli.unfold(ContinuedLineReader(io.BytesIO(b"a\n b\nc\n")), out)
        assert count == 2
        assert out.getvalue() == b"a b\nc\n"
