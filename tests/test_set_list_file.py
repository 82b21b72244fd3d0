import pytest

from kronut.set_list_file import (
    COL2_DATA_WIDTH,
    MarkdownSetListFile,
    OrgModeSetListFile,
    SetListFile,
)


def _write(f: SetListFile, path, action):
    with f.open(path, "w"):
        action(f)


def _read_lines(f: SetListFile, path):
    lines = []
    with f.open(path, "r"):
        while f.getline():
            lines.append(f.line)
    return lines


@pytest.mark.parametrize("cls", [OrgModeSetListFile, MarkdownSetListFile])
def test_headers_round_trip(tmp_path, cls):
    path = tmp_path / "headers.txt"
    f = cls()

    def action(w):
        w.header(1, "My Set")
        w.header(2, "First Slot")

    _write(f, path, action)
    with f.open(path, "r"):
        assert f.getline()
        assert f.is_header(1)
        assert not f.is_header(2)
        assert f.header_text(1) == "My Set"
        f.skip_blank_lines()
        assert f.is_header(2)
        assert not f.is_header(1)
        assert f.header_text(2) == "First Slot"


def test_header_needs_space(tmp_path):
    path = tmp_path / "h.md"
    f = MarkdownSetListFile()
    _write(f, path, lambda w: w.puts("#NoSpace"))
    with f.open(path, "r"):
        f.getline()
        assert f.line == "#NoSpace"
        assert not f.is_header(1)


@pytest.mark.parametrize("cls", [OrgModeSetListFile, MarkdownSetListFile])
def test_table_round_trip(tmp_path, cls):
    path = tmp_path / "table.txt"
    f = cls()

    def action(w):
        w.table_headers("Setting", "Value")
        w.table_row("Volume", 127)
        w.table_row("Color", "Olive")
        w.table_end()

    _write(f, path, action)
    with f.open(path, "r"):
        f.getline()
        assert f.is_table_start()
        f.skip_table_headers()
        assert not f.is_table_separator()
        assert f.table_col1() == "Volume"
        assert f.table_col2() == "127"
        f.getline()
        assert f.table_col1() == "Color"
        assert f.table_col2() == "Olive"
        f.getline()
        assert f.is_table_separator()


def test_separator_characters(tmp_path):
    org_path = tmp_path / "org.txt"
    md_path = tmp_path / "md.txt"
    _write(OrgModeSetListFile(), org_path, lambda w: w.table_separator())
    _write(MarkdownSetListFile(), md_path, lambda w: w.table_separator())

    org_reader = OrgModeSetListFile()
    with org_reader.open(org_path, "r"):
        assert org_reader.getline() is True
        assert org_reader.is_table_separator()
        org_line = org_reader.line

    md_reader = MarkdownSetListFile()
    with md_reader.open(md_path, "r"):
        assert md_reader.getline() is True
        assert md_reader.is_table_separator()
        md_line = md_reader.line

    assert org_line.count("+") == 1
    assert "+" not in md_line
    assert len(org_line) == len(md_line)
    assert org_line.replace("+", "|") == md_line


def test_long_value_truncated_on_read(tmp_path):
    path = tmp_path / "long.txt"
    f = OrgModeSetListFile()
    _write(f, path, lambda w: w.table_row("Band Levels", "x" * 30))
    with f.open(path, "r"):
        f.getline()
        assert f.table_col1() == "Band Levels"
        assert f.table_col2() == "x" * COL2_DATA_WIDTH


def test_text_normalises_newlines(tmp_path):
    path = tmp_path / "text.txt"
    f = MarkdownSetListFile()
    _write(f, path, lambda w: w.text("a\rb  \n"))
    assert _read_lines(f, path) == ["a", "b", ""]


def test_puts_adds_missing_newline(tmp_path):
    path = tmp_path / "puts.txt"

    def action(w):
        w.puts("x")
        w.puts("y\n")
        w.puts("")

    f = MarkdownSetListFile()
    _write(f, path, action)
    assert _read_lines(f, path) == ["x", "y", ""]


def test_getline_false_at_eof(tmp_path):
    path = tmp_path / "one.txt"
    _write(OrgModeSetListFile(), path, lambda w: w.puts("only"))
    f = OrgModeSetListFile()
    with f.open(path, "r"):
        assert f.getline() is True
        assert f.line == "only"
        assert f.getline() is False
        assert f.line == ""


def test_skip_blank_lines_stops_on_text(tmp_path):
    path = tmp_path / "blank.txt"

    def action(w):
        w.puts("start")
        w.puts("")
        w.puts("   ")
        w.puts("content")

    f = OrgModeSetListFile()
    _write(f, path, action)
    with f.open(path, "r"):
        f.getline()
        f.skip_blank_lines()
        assert f.line == "content"


def test_open_missing_file_raises(tmp_path):
    f = OrgModeSetListFile()
    with pytest.raises(FileNotFoundError):
        f.open(tmp_path / "missing.org", "r")


def test_write_without_open_raises():
    with pytest.raises(ValueError):
        MarkdownSetListFile().puts("nothing")


def test_read_without_open_raises():
    with pytest.raises(ValueError):
        MarkdownSetListFile().getline()