"""Editing the current slot's name and comments in an external text editor."""

import os
import shlex
import subprocess
import sys
import tempfile
from pathlib import Path
from typing import IO, Optional

from kronut.file_editor import trimmed
from kronut.fixed_string import encode_fixed, fits
from kronut.kronos import Kronos
from kronut.kstring import KString
from kronut.slot import SLOT_COMMENTS_LEN, SLOT_NAME_LEN

DEFAULT_TEMPFILE = Path(tempfile.gettempdir()) / "kronut_editor.md"

_NAME_HEADER = "# Slot Name"
_COMMENTS_HEADER = "# Comments"
_ENCODING = "latin-1"
_EDITOR_VARIABLES = (
    ("KRONUT_TEXT_EDITOR", "KRONUT_TEXT_EDITOR_OPTIONS"),
    ("VISUAL", "KRONUT_VISUAL_OPTIONS"),
    ("EDITOR", "KRONUT_EDITOR_OPTIONS"),
)


class SlotTextTooLong(ValueError):
    """The edited slot name or comments do not fit and were not sent."""

    def __init__(self, name_too_long: bool, comments_too_long: bool) -> None:
        parts = []
        if name_too_long:
            parts.append(f"name is too long ({SLOT_NAME_LEN} max)")
        if comments_too_long:
            parts.append(f"comments are too long ({SLOT_COMMENTS_LEN} max)")
        super().__init__("; ".join(parts))
        self.name_too_long = name_too_long
        self.comments_too_long = comments_too_long


class TextEditor:
    """Edits the Kronos's current slot name and comments in a text file."""

    def __init__(self, kronos: Kronos, tempfile_path=None, out: Optional[IO[str]] = None) -> None:
        self.kronos = kronos
        self.tempfile_path = Path(tempfile_path) if tempfile_path is not None else DEFAULT_TEMPFILE
        self.out = out
        self.name = ""
        self.comments = ""

    def _stream(self) -> IO[str]:
        return sys.stdout if self.out is None else self.out

    def edit_current_slot(self, read_from_kronos: bool = True) -> None:
        """Edit the slot text in an editor and send it back to the Kronos.

        Raises SlotTextTooLong, without sending, if the result does not fit.
        """
        if read_from_kronos:
            self.read_slot()
        self.save_to_file()
        self.edit_file()
        self.load_from_file()
        self.tempfile_path.unlink(missing_ok=True)
        if self.name_too_long() or self.comments_too_long():
            raise SlotTextTooLong(self.name_too_long(), self.comments_too_long())
        self.write_slot()

    def name_too_long(self) -> bool:
        return not fits(self.name, SLOT_NAME_LEN)

    def comments_too_long(self) -> bool:
        return not fits(self.comments, SLOT_COMMENTS_LEN)

    def print_current_slot(self) -> None:
        self.read_slot()
        out = self._stream()
        print(self.name, file=out)
        print("", file=out)
        print(self.comments, file=out)

    def dump_current_slot(self) -> None:
        self._read(dump=True)

    def print_set_list_slot_names(self) -> None:
        set_list = self.kronos.read_current_set_list()
        out = self._stream()
        print(f"Set List: {set_list.name}", file=out)
        for number, slot in enumerate(set_list.slots, start=1):
            print(f"{number:3d}\t{slot.name}", file=out)

    def read_slot(self) -> None:
        """Read the current slot's name and comments from the Kronos."""
        self._read(dump=False)

    def _read(self, dump: bool) -> None:
        self.name = self.kronos.read_current_slot_name().text
        if dump:
            self.kronos.dump_sysex("slot name")
        self.comments = self.kronos.read_current_slot_comments().text
        if dump:
            self.kronos.dump_sysex("slot comments")

    def write_slot(self) -> None:
        """Send the name and comments to the Kronos's current slot."""
        self.kronos.write_current_slot_name(
            KString.from_internal(encode_fixed(self.name, SLOT_NAME_LEN), 0))
        self.kronos.write_current_slot_comments(
            KString.from_internal(encode_fixed(self.comments, SLOT_COMMENTS_LEN), 0))

    def save_to_file(self) -> None:
        with open(self.tempfile_path, "w", encoding=_ENCODING, errors="replace", newline="") as f:
            f.write(f"{_NAME_HEADER}\n\n{self.name}\n\n{_COMMENTS_HEADER}\n\n{self.comments}\n")

    def edit_file(self) -> None:
        """Run the user's editor on the temporary file; raise if it fails."""
        for editor_var, options_var in _EDITOR_VARIABLES:
            editor = os.environ.get(editor_var)
            if editor is not None:
                options = os.environ.get(options_var)
                break
        else:
            editor = "vi"
            options = os.environ.get("KRONUT_VI_OPTIONS")
        command = f"{editor} {options or ''} {shlex.quote(str(self.tempfile_path))}"
        subprocess.run(command, shell=True, stderr=subprocess.STDOUT, check=True)

    def load_from_file(self) -> None:
        """Read the name and comments back from the temporary file."""
        section = None
        buf = ""
        with open(self.tempfile_path, "r", encoding=_ENCODING) as f:
            for line in f:
                if line.startswith(_NAME_HEADER):
                    section = "name"
                    buf = ""
                elif line.startswith(_COMMENTS_HEADER):
                    section = "comments"
                    self.name = trimmed(buf)
                    buf = ""
                elif section is not None:
                    buf += line
        self.comments = trimmed(buf)