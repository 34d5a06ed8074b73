"""Tests for whitespace-token input (cli/prompt.py)."""

from __future__ import annotations

import io

import pytest

from numconv.cli.prompt import TokenReader


class TestTokenReader:
    def test_one_token_per_line(self) -> None:
        reader = TokenReader(stream=io.StringIO("1\n1010\n"))
        assert reader.read_token() == "1"
        assert reader.read_token() == "1010"

    def test_extra_tokens_kept_for_next_read(self) -> None:
        reader = TokenReader(stream=io.StringIO("6 255 0\n"))
        assert [reader.read_token() for _ in range(3)] == ["6", "255", "0"]

    def test_blank_lines_skipped(self) -> None:
        reader = TokenReader(stream=io.StringIO("\n   \n\t42\n"))
        assert reader.read_token() == "42"

    def test_eof_returns_none(self) -> None:
        reader = TokenReader(stream=io.StringIO("7"))
        assert reader.read_token() == "7"
        assert reader.read_token() is None

    def test_prompt_written_without_newline(self) -> None:
        out = io.StringIO()
        reader = TokenReader(stream=io.StringIO("x\n"), prompt_stream=out)
        reader.read_token("Enter your choice: ")
        assert out.getvalue() == "Enter your choice: "

    def test_prompt_written_even_when_token_buffered(self) -> None:
        out = io.StringIO()
        reader = TokenReader(stream=io.StringIO("1 1010\n"), prompt_stream=out)
        reader.read_token("A: ")
        reader.read_token("B: ")
        assert out.getvalue() == "A: B: "

    def test_defaults_to_sys_stdin(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("ff\n"))
        assert TokenReader().read_token() == "ff"
