"""Tests for the CLI module."""

import io

import pytest

from zhttp.cli import build_parser, parse_cli, use_color, validate_args
from zhttp.engine import DEFAULT_TIMEOUT


class TestBuildParser:
    """Tests for the argument parser construction."""

    def test_parser_has_required_args(self):
        parser = build_parser()
        args = parser.parse_args(["api.http", "--line", "12"])
        assert args.file == "api.http"
        assert args.line == 12

    def test_defaults(self):
        parser = build_parser()
        args = parser.parse_args(["api.http", "--line", "1"])
        assert args.timeout == DEFAULT_TIMEOUT
        assert args.proxy is None
        assert args.follow_redirects is True
        assert args.color == "auto"
        assert args.verbose is False
        assert args.complete is None

    def test_no_follow_redirects_flag(self):
        parser = build_parser()
        args = parser.parse_args(["f", "--line", "1", "--no-follow-redirects"])
        assert args.follow_redirects is False

    def test_proxy_argument(self):
        parser = build_parser()
        args = parser.parse_args([
            "f", "--line", "1",
            "--proxy", "http://127.0.0.1:8080",
        ])
        assert args.proxy == "http://127.0.0.1:8080"

    def test_missing_line(self):
        parser = build_parser()
        with pytest.raises(SystemExit):
            parser.parse_args(["api.http"])

    def test_missing_required_args(self):
        parser = build_parser()
        with pytest.raises(SystemExit):
            parser.parse_args([])

    def test_non_numeric_line(self):
        parser = build_parser()
        with pytest.raises(SystemExit):
            parser.parse_args(["api.http", "--line", "abc"])

    def test_invalid_color_choice(self):
        parser = build_parser()
        with pytest.raises(SystemExit):
            parser.parse_args(["api.http", "--line", "1", "--color", "rainbow"])


class TestValidateArgs:
    """Tests for argument validation."""

    def test_zero_line_exits(self):
        parser = build_parser()
        args = parser.parse_args(["api.http", "--line", "0"])
        with pytest.raises(SystemExit) as excinfo:
            validate_args(parser, args)
        assert excinfo.value.code == 2

    def test_non_positive_timeout_exits(self):
        parser = build_parser()
        args = parser.parse_args(["api.http", "--line", "1", "--timeout", "0"])
        with pytest.raises(SystemExit):
            validate_args(parser, args)

    def test_negative_complete_column_exits(self):
        parser = build_parser()
        args = parser.parse_args(["api.http", "--line", "1", "--complete", "-1"])
        with pytest.raises(SystemExit):
            validate_args(parser, args)

    def test_empty_proxy_exits(self):
        parser = build_parser()
        args = parser.parse_args(["api.http", "--line", "1", "--proxy", "  "])
        with pytest.raises(SystemExit):
            validate_args(parser, args)

    def test_valid_args_pass(self):
        parser = build_parser()
        args = parser.parse_args(["api.http", "--line", "3", "--timeout", "2.5"])
        # Should not raise
        validate_args(parser, args)


class TestUseColor:
    """Tests for resolving the --color choice."""

    def test_always(self):
        assert use_color("always", io.StringIO()) is True

    def test_never(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        assert use_color("never") is False

    def test_auto_non_tty(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        assert use_color("auto", io.StringIO()) is False

    def test_auto_tty(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)

        class FakeTty(io.StringIO):
            def isatty(self):
                return True

        assert use_color("auto", FakeTty()) is True

    def test_auto_respects_no_color(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")

        class FakeTty(io.StringIO):
            def isatty(self):
                return True

        assert use_color("auto", FakeTty()) is False


class TestParseCli:
    """Tests for the full parse_cli flow."""

    def test_full_parse_flow(self):
        args = parse_cli(["api.http", "--line", "7", "--color", "never", "-v"])
        assert args.file == "api.http"
        assert args.line == 7
        assert args.color == "never"
        assert args.verbose is True
