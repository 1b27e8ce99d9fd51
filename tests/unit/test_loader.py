"""Tests for the properties configuration loader."""

from __future__ import annotations

from pathlib import Path

import pytest

from rakislog.config.loader import (
    ParsedConfig,
    load_file,
    parse_entry,
    parse_lines,
    split_line,
)
from rakislog.core.errors import (
    ConfigurationError,
    DuplicateLevelError,
    InvalidOptionForTypeError,
    MissingLevelError,
    MissingSourceFileError,
)
from rakislog.core.levels import Level
from rakislog.plugins.sinks import ConsoleSink


class TestSplitLine:
    @pytest.mark.parametrize("line", ["", "   ", "# comment", "; comment", "  # x"])
    def test_blank_and_comment_lines_are_skipped(self, line: str) -> None:
        assert split_line(line) is None

    def test_splits_on_first_equals(self) -> None:
        assert split_line(" a.b = DEBUG, File, path=x.log ") == (
            "a.b",
            "DEBUG, File, path=x.log",
        )

    def test_line_without_equals_has_empty_value(self) -> None:
        assert split_line("a.b") == ("a.b", "")

    def test_empty_name_is_skipped(self) -> None:
        assert split_line("= INFO") is None


class TestParseEntry:
    def test_level_only(self) -> None:
        entry = parse_entry("a.b.c", "WARN")
        assert entry.full_name == "a.b.c"
        assert entry.name == "c"
        assert entry.level is Level.WARN
        assert entry.type is None
        assert entry.sink is None
        assert entry.options == {}

    def test_console_attaches_sink(self) -> None:
        entry = parse_entry("rootLogger", "INFO, Console")
        assert entry.type == "Console"
        assert isinstance(entry.sink, ConsoleSink)
        assert entry.is_root

    def test_type_keyword_is_case_insensitive(self) -> None:
        assert parse_entry("a", "INFO, console").type == "Console"
        assert parse_entry("a", "INFO, FILE, path=x").type == "File"

    def test_file_options(self) -> None:
        entry = parse_entry("a", "DEBUG, File, path = a.log, append, base_path=logs")
        assert entry.type == "File"
        assert entry.sink is None
        assert entry.options == {"path": "a.log", "append": "true", "base_path": "logs"}

    def test_token_order_level_after_type(self) -> None:
        entry = parse_entry("a", "File, path=a.log, ERROR")
        assert entry.level is Level.ERROR
        assert entry.options == {"path": "a.log"}

    def test_empty_tokens_are_ignored(self) -> None:
        entry = parse_entry("a", " , INFO,, Console, ")
        assert entry.level is Level.INFO
        assert entry.type == "Console"

    def test_missing_level_raises(self) -> None:
        with pytest.raises(MissingLevelError, match="'a.b' does not specify a level"):
            parse_entry("a.b", "Console", source="x.properties", line_no=3)

    def test_missing_level_carries_location(self) -> None:
        with pytest.raises(MissingLevelError) as exc_info:
            parse_entry("a.b", "", source="x.properties", line_no=3)
        assert exc_info.value.line == 3
        assert exc_info.value.source == "x.properties"

    def test_lowercase_level_is_not_a_level(self) -> None:
        # Not a level, not a type and before File: rejected as an option
        with pytest.raises(InvalidOptionForTypeError, match="'info'"):
            parse_entry("a", "info")

    def test_duplicate_level_raises(self) -> None:
        with pytest.raises(DuplicateLevelError):
            parse_entry("a", "INFO, DEBUG")

    def test_option_without_file_raises(self) -> None:
        with pytest.raises(InvalidOptionForTypeError, match="path=x"):
            parse_entry("a", "INFO, path=x")

    def test_option_with_console_raises(self) -> None:
        with pytest.raises(InvalidOptionForTypeError, match="'Console'"):
            parse_entry("a", "INFO, Console, stream=stderr")

    def test_option_before_file_raises(self) -> None:
        with pytest.raises(InvalidOptionForTypeError):
            parse_entry("a", "INFO, path=x, File")

    def test_repeated_option_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="more than once"):
            parse_entry("a", "INFO, File, path=x, path=y")

    def test_option_value_keeps_inner_equals(self) -> None:
        entry = parse_entry("a", "INFO, File, path=a=b.log")
        assert entry.options["path"] == "a=b.log"


class TestParseLines:
    def test_root_and_entries_are_separated(self) -> None:
        parsed = parse_lines(
            [
                "# header",
                "rootLogger = WARN, Console",
                "",
                "a = INFO",
                "a.b = DEBUG",
            ]
        )
        assert parsed.root is not None
        assert parsed.root.level is Level.WARN
        assert [e.full_name for e in parsed.entries] == ["a", "a.b"]

    def test_later_root_replaces_earlier(self) -> None:
        parsed = parse_lines(["rootLogger = WARN", "rootLogger = ERROR"])
        assert parsed.root is not None
        assert parsed.root.level is Level.ERROR

    def test_line_numbers_count_every_line(self) -> None:
        with pytest.raises(MissingLevelError) as exc_info:
            parse_lines(["# c", "", "a = INFO", "b"], source="mem")
        assert exc_info.value.line == 4

    def test_into_accumulates(self) -> None:
        parsed = ParsedConfig()
        parse_lines(["a = INFO"], into=parsed)
        parse_lines(["b = INFO"], into=parsed)
        assert [e.full_name for e in parsed.entries] == ["a", "b"]


class TestLoadFile:
    def test_reads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "rakisLog.properties"
        path.write_text(
            "rootLogger = INFO, Console\na.b = DEBUG, File, path=ab.log\n",
            encoding="utf-8",
        )

        parsed = load_file(path)

        assert parsed.root is not None
        assert len(parsed.entries) == 1
        assert parsed.entries[0].options == {"path": "ab.log"}

    def test_none_path_raises(self) -> None:
        with pytest.raises(MissingSourceFileError, match="No configuration file"):
            load_file(None)

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        missing = tmp_path / "nope.properties"
        with pytest.raises(MissingSourceFileError) as exc_info:
            load_file(missing)
        assert exc_info.value.source == str(missing)
        assert isinstance(exc_info.value.cause, FileNotFoundError)

    def test_directory_raises(self, tmp_path: Path) -> None:
        with pytest.raises(MissingSourceFileError):
            load_file(tmp_path)

    def test_invalid_line_reports_file_and_line(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.properties"
        path.write_text("a = INFO\nb = INFO, WARN\n", encoding="utf-8")
        with pytest.raises(DuplicateLevelError) as exc_info:
            load_file(path)
        assert exc_info.value.source == str(path)
        assert exc_info.value.line == 2

    def test_undecodable_file_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "latin.properties"
        path.write_bytes(b"rootLogger = INFO, Console\n\xff\xfe = DEBUG\n")
        with pytest.raises(MissingSourceFileError) as exc_info:
            load_file(path)
        assert exc_info.value.source == str(path)
        assert isinstance(exc_info.value.cause, UnicodeDecodeError)

    def test_unknown_encoding_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "a.properties"
        path.write_text("a = INFO\n", encoding="utf-8")
        with pytest.raises(MissingSourceFileError) as exc_info:
            load_file(path, encoding="no-such-codec")
        assert isinstance(exc_info.value.cause, LookupError)
