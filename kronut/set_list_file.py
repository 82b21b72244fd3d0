"""Org Mode and Markdown set list files: headers, text and two-column tables."""

import io
from typing import IO, Optional, Union

from kronut.kstring import KString

COL1_DATA_WIDTH = 12
COL2_DATA_WIDTH = 18

_WHITESPACE = " \t\n\v\f\r"
_ENCODING = "latin-1"


def _trimmed(text: str) -> str:
    return text.strip(_WHITESPACE)


class SetListFile:
    """Reads and writes the line-oriented set list text format.

    Headers are lines starting with `level` header characters and a space.
    Tables have two columns of fixed width, framed by separator lines.
    """

    def __init__(self, header_char: str, table_sep_sep_char: str) -> None:
        self.header_char = header_char
        self.table_sep_sep_char = table_sep_sep_char
        self._in: Optional[IO[str]] = None
        self._out: Optional[IO[str]] = None
        self._line = ""

    # ---------------- opening and closing ----------------

    def open(self, path, mode: str = "r") -> "SetListFile":
        """Open `path` for reading if `mode` starts with "r", else for writing."""
        self._line = ""
        if mode.startswith("r"):
            self._in = io.open(path, "r", encoding=_ENCODING)
        else:
            self._out = io.open(path, "w", encoding=_ENCODING, newline="")
        return self

    def close(self) -> None:
        if self._in is not None:
            self._in.close()
            self._in = None
        if self._out is not None:
            self._out.close()
            self._out = None

    def __enter__(self) -> "SetListFile":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def _writer(self) -> IO[str]:
        if self._out is None:
            raise ValueError("set list file is not open for writing")
        return self._out

    @property
    def _reader(self) -> IO[str]:
        if self._in is None:
            raise ValueError("set list file is not open for reading")
        return self._in

    # ---------------- writing ----------------

    def header(self, level: int, text: str) -> None:
        self._writer.write(f"{self.header_char * level} {text}\n\n")

    def text(self, text: Union[str, KString]) -> None:
        """Write text as a paragraph, normalising Kronos line endings."""
        if isinstance(text, KString):
            kstr = text
        else:
            kstr = KString.from_internal(text.encode(_ENCODING, errors="replace"), 0)
        self._writer.write(f"{kstr.text}\n\n")

    def puts(self, text: str) -> None:
        """Write text, adding a newline unless it already ends with one."""
        out = self._writer
        out.write(text)
        if not text.endswith("\n"):
            out.write("\n")

    # ---------------- writing tables ----------------

    def table_separator(self) -> None:
        self._writer.write(
            "|"
            + "-" * (COL1_DATA_WIDTH + 2)
            + self.table_sep_sep_char
            + "-" * (COL2_DATA_WIDTH + 2)
            + "|\n"
        )

    def table_headers(self, h1: str, h2: str) -> None:
        self.table_separator()
        self.table_row(h1, h2)
        self.table_separator()

    def table_row(self, col1: str, col2: Union[str, int]) -> None:
        self._writer.write(
            f"| {col1:<{COL1_DATA_WIDTH}} | {str(col2):<{COL2_DATA_WIDTH}} |\n"
        )

    def table_end(self) -> None:
        self.table_separator()

    # ---------------- reading ----------------

    @property
    def line(self) -> str:
        """The most recently read line, without its newline."""
        return self._line

    def getline(self) -> bool:
        """Read the next line; return False at end of file."""
        raw = self._reader.readline()
        self._line = raw[:-1] if raw.endswith("\n") else raw
        return raw != ""

    def skip_blank_lines(self) -> None:
        while self.getline():
            if _trimmed(self._line):
                return

    def is_header(self, level: int) -> bool:
        line = self._line
        if len(line) < level + 1:
            return False
        return line[:level] == self.header_char * level and line[level] == " "

    def header_text(self, level: int) -> str:
        return _trimmed(self._line[level + 1:])

    # ---------------- reading tables ----------------

    def is_table_start(self) -> bool:
        return self.is_table_separator()

    def is_table_separator(self) -> bool:
        return self._line[:3] == "|--"

    def skip_table_headers(self) -> None:
        """Move from a table's first separator to its first data row."""
        for _ in range(3):
            self.getline()

    def table_col1(self) -> str:
        return _trimmed(self._line[2:2 + COL1_DATA_WIDTH])

    def table_col2(self) -> str:
        start = 2 + COL1_DATA_WIDTH + 3
        return _trimmed(self._line[start:start + COL2_DATA_WIDTH])


class OrgModeSetListFile(SetListFile):
    """Org Mode flavour: "*" headers and "+" in table separators."""

    def __init__(self) -> None:
        super().__init__("*", "+")


class MarkdownSetListFile(SetListFile):
    """Markdown flavour: "#" headers and "|" in table separators."""

    def __init__(self) -> None:
        super().__init__("#", "|")