"""Saving set lists to text files and loading them back."""

import re
import sys
from enum import IntEnum

from kronut.set_list import BAND_LEVEL_COUNT, SetList
from kronut.set_list_file import MarkdownSetListFile, OrgModeSetListFile, SetListFile
from kronut.slot import Slot
from kronut.utils import hex_lines

_WHITESPACE = " \t\n\v\f\r"
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_MAX_SLOTS = 128


class FileFormat(IntEnum):
    ORG_MODE = 0
    MARKDOWN = 1
    HEXDUMP = 2


def trimmed(text: str) -> str:
    """Return `text` without leading and trailing whitespace."""
    return text.strip(_WHITESPACE)


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _warn(message: str) -> None:
    print(f"warning: {message}", file=sys.stderr)


class FileEditor:
    """Moves a set list between memory and an Org Mode, Markdown or hex dump file."""

    def __init__(self, format: int = FileFormat.ORG_MODE) -> None:
        self.format = FileFormat(format)
        self.set_list = SetList()
        self._file: SetListFile | None
        if self.format is FileFormat.ORG_MODE:
            self._file = OrgModeSetListFile()
        elif self.format is FileFormat.MARKDOWN:
            self._file = MarkdownSetListFile()
        else:
            self._file = None

    # ---------------- loading ----------------

    def load_set_list_from_file(self, path) -> None:
        """Read `path` into `set_list`, starting from an empty set list."""
        f = self._file
        if f is None:
            raise ValueError(f"cannot load set lists from {self.format.name.lower()} files")

        slot_number = 0
        collect_comments = False
        name = ""
        comments = ""

        with f.open(path, "r"):
            self.set_list = SetList.empty()
            while f.getline():
                if f.is_header(1):
                    name = f.header_text(1)
                    if self.set_list.set_name(trimmed(name)):
                        _warn(f'set list name "{name}" is too long and will be truncated')
                    f.skip_blank_lines()
                    self._load_set_list_settings()
                elif f.is_header(2):
                    name = f.header_text(2)
                    comments = ""
                    collect_comments = True
                elif f.is_table_start():
                    collect_comments = False
                    slot = self.set_list.slots[slot_number]
                    if slot.set_name(trimmed(name)):
                        _warn(
                            f'slot {slot_number:03d} named "{name}" is too long '
                            "and will be truncated"
                        )
                    trimmed_comments = trimmed(comments)
                    if slot.set_comments(trimmed_comments):
                        _warn(
                            f'slot {slot_number:03d} named "{name}" comments '
                            f'"{trimmed_comments[:20]}..." are too long and will be truncated'
                        )
                    self._load_slot_settings(slot)
                    slot_number += 1
                    if slot_number >= _MAX_SLOTS:
                        break
                elif collect_comments:
                    comments += f.line + "\n"

    def _load_set_list_settings(self) -> None:
        f = self._file
        self.set_list.reserved = bytes(len(self.set_list.reserved))
        f.skip_table_headers()
        while not f.is_table_separator():
            self._apply_set_list_setting(f.table_col1(), f.table_col2())
            if not f.getline():
                return
        f.getline()

    def _apply_set_list_setting(self, setting: str, value: str) -> None:
        set_list = self.set_list
        if setting == "Slots/Page":
            set_list.slots_per_page = _atoi(value)
        elif setting == "EQ Bypass":
            set_list.eq_bypass = value[:1] in ("t", "T", "y", "Y")
        elif setting == "Band Levels":
            parts = value.split(",") + [""] * BAND_LEVEL_COUNT
            set_list.band_levels = [_atoi(part) & 0xFF for part in parts[:BAND_LEVEL_COUNT]]
        elif setting == "Surface Mode":
            set_list.control_surface_mode_byte = _atoi(value) & 0xFF
        elif setting == "Surface Asgn":
            set_list.set_control_surface_assign_from_name(value)

    def _load_slot_settings(self, slot: Slot) -> None:
        f = self._file
        f.skip_table_headers()
        while not f.is_table_separator():
            self._apply_slot_setting(slot, f.table_col1(), f.table_col2())
            if not f.getline():
                return

    @staticmethod
    def _apply_slot_setting(slot: Slot, setting: str, value: str) -> None:
        if setting == "Performance":
            slot.set_performance_name(value)
        elif setting == "Color":
            slot.set_color_name(value)
        elif setting == "Font":
            slot.set_font_name(value)
        elif setting == "Transpose":
            slot.xpose = _atoi(value)
        elif setting == "Volume":
            slot.volume = _atoi(value) & 0xFF
        elif setting == "Hold Time":
            slot.hold_time = _atoi(value) & 0xFF
        elif setting == "Kbd Track":
            slot.keyboard_track = _atoi(value)

    # ---------------- saving ----------------

    def save_set_list_to_file(self, path, skip_empty_slots: bool = False) -> None:
        """Write `set_list` to `path`, optionally leaving out empty slots."""
        f = self._file
        if f is None:
            self.hexdump(path)
            return

        with f.open(path, "w"):
            f.header(1, self.set_list.name)
            self._save_set_list_settings()
            f.puts("")
            for slot in self.set_list.slots:
                if skip_empty_slots and slot.is_empty():
                    continue
                f.header(2, slot.name)
                if slot.comments:
                    f.text(trimmed(slot.comments))
                self._save_slot_settings(slot)
                f.puts("")

    def _save_set_list_settings(self) -> None:
        f = self._file
        set_list = self.set_list
        f.table_headers("Setting", "Value")
        f.table_row("Slots/Page", set_list.slots_per_page)
        f.table_row("EQ Bypass", "true (EQ off)" if set_list.eq_bypass else "false (EQ on)")
        f.table_row("Band Levels", ",".join(str(level) for level in set_list.band_levels))
        f.table_row("Surface Mode", set_list.control_surface_mode_byte)
        f.table_row("Surface Asgn", set_list.control_surface_assign_from_name)
        f.table_end()

    def _save_slot_settings(self, slot: Slot) -> None:
        f = self._file
        f.table_headers("Setting", "Value")
        f.table_row("Performance", slot.performance_name)
        f.table_row("Color", slot.color_name)
        f.table_row("Font", slot.font_name)
        f.table_row("Transpose", slot.xpose)
        f.table_row("Volume", slot.volume)
        f.table_row("Hold Time", slot.hold_time)
        f.table_row("Kbd Track", slot.keyboard_track)
        f.table_end()

    def hexdump(self, path) -> None:
        """Write a hex dump of the raw set list bytes to `path`."""
        with open(path, "w", encoding="latin-1", newline="") as out:
            for line in hex_lines(self.set_list.to_bytes()):
                out.write(line + "\n")