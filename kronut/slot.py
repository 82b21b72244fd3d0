"""Set list slots: the raw Kronos slot record and its decoded fields."""

import struct
from dataclasses import dataclass
from enum import IntEnum

from kronut.fixed_string import decode_fixed, encode_fixed, fits

SLOT_NAME_LEN = 24
SLOT_COMMENTS_LEN = 512

_LAYOUT = struct.Struct(f"{SLOT_NAME_LEN}s6B{SLOT_COMMENTS_LEN}s")
SLOT_SIZE = _LAYOUT.size


class PerformanceType(IntEnum):
    COMBINATION = 0
    PROGRAM = 1
    SONG = 2


class SlotColor(IntEnum):
    DEFAULT = 0
    CHARCOAL = 1
    BRICK = 2
    BURGUNDY = 3
    IVY = 4
    OLIVE = 5
    GOLD = 6
    CACAO = 7
    INDIGO = 8
    NAVY = 9
    ROSE = 10
    LAVENDER = 11
    AZURE = 12
    DENIM = 13
    SILVER = 14
    SLATE = 15


class SlotFont(IntEnum):
    S = 0
    XS = 1
    M = 2
    L = 3
    XL = 4


PERF_TYPE_NAMES = ("Combination", "Program", "Song")
PERF_TYPE_NAMES_ABBREV = ("Combi", "Prog", "Song")
COLOR_NAMES = (
    "Default", "Charcoal", "Brick", "Burgundy", "Ivy", "Olive", "Gold", "Cacao",
    "Indigo", "Navy", "Rose", "Lavender", "Azure", "Denim", "Silver", "Slate",
)
FONT_NAMES = ("Small", "Extra Small", "Medium", "Large", "Extra Large")
FONT_SHORT_NAMES = ("S", "XS", "M", "L", "XL")


def _ci_equal(a: str, b: str) -> bool:
    return a.lower() == b.lower()


def _strtol(text: str) -> int:
    """Parse a leading decimal integer the way strtol does, 0 if there is none."""
    s = text.lstrip()
    sign = 1
    if s[:1] in ("+", "-"):
        sign = -1 if s[0] == "-" else 1
        s = s[1:]
    digits = ""
    for ch in s:
        if not ("0" <= ch <= "9"):
            break
        digits += ch
    return sign * int(digits) if digits else 0


def _bank_has_index_offset(bank: int) -> bool:
    # The g* banks and the GM bank start with index 1, not 0, in the UI.
    return 0x06 <= bank <= 0x10


@dataclass
class Slot:
    """One set list slot as stored by the Kronos.

    The packed byte fields are kept as they are on the instrument; the
    properties decode and encode the values packed into them.
    """

    raw_name: bytes = bytes(SLOT_NAME_LEN)
    type_byte: int = 0
    bank_byte: int = 0
    performance_index: int = 0
    hold_time: int = 0
    volume: int = 0
    track_byte: int = 0
    raw_comments: bytes = bytes(SLOT_COMMENTS_LEN)

    # ---------------- serialisation ----------------

    @classmethod
    def from_bytes(cls, data: bytes) -> "Slot":
        if len(data) != SLOT_SIZE:
            raise ValueError(f"slot data must be {SLOT_SIZE} bytes, got {len(data)}")
        return cls(*_LAYOUT.unpack(bytes(data)))

    def to_bytes(self) -> bytes:
        return _LAYOUT.pack(
            encode_raw(self.raw_name, SLOT_NAME_LEN),
            self.type_byte & 0xFF,
            self.bank_byte & 0xFF,
            self.performance_index & 0xFF,
            self.hold_time & 0xFF,
            self.volume & 0xFF,
            self.track_byte & 0xFF,
            encode_raw(self.raw_comments, SLOT_COMMENTS_LEN),
        )

    def is_empty(self) -> bool:
        return (
            self.name == ""
            and (self.type_byte & 0x03) == PerformanceType.PROGRAM
            and self.performance_bank == 0
            and self.performance_index == 0
            and self.hold_time == 6
            and self.volume == 127
            and self.keyboard_track == 0
            and self.comments == ""
        )

    # ---------------- strings ----------------

    @property
    def name(self) -> str:
        return decode_fixed(self.raw_name)

    def set_name(self, text: str) -> bool:
        """Store the name; return True if it was too long and got truncated."""
        self.raw_name = encode_fixed(text, SLOT_NAME_LEN)
        return not fits(text, SLOT_NAME_LEN)

    @property
    def comments(self) -> str:
        return decode_fixed(self.raw_comments)

    def set_comments(self, text: str) -> bool:
        """Store the comments; return True if they were too long and got truncated."""
        self.raw_comments = encode_fixed(text, SLOT_COMMENTS_LEN)
        return not fits(text, SLOT_COMMENTS_LEN)

    # ---------------- performance ----------------

    @property
    def performance_type(self) -> PerformanceType:
        return PerformanceType(self.type_byte & 0x03)

    @performance_type.setter
    def performance_type(self, value: int) -> None:
        self.type_byte = (self.type_byte & 0xFC) | (int(value) & 0x03)

    def performance_type_name(self, abbreviated: bool = False) -> str:
        index = self.type_byte & 0x03
        if index >= len(PERF_TYPE_NAMES):
            raise ValueError(f"illegal performance type value {index}")
        return PERF_TYPE_NAMES_ABBREV[index] if abbreviated else PERF_TYPE_NAMES[index]

    @property
    def performance_bank(self) -> int:
        return self.bank_byte & 0x1F

    @performance_bank.setter
    def performance_bank(self, value: int) -> None:
        self.bank_byte = (self.bank_byte & 0xE0) | (value & 0x1F)

    @property
    def performance_bank_name(self) -> str:
        bank = self.performance_bank
        if bank >= 0x18:
            letter = chr(ord("A") + bank - 0x18)
            return f"USER-{letter}{letter}"
        if bank >= 0x11:
            return f"USER-{chr(ord('A') + bank - 0x11)}"
        if bank == 0x10:
            return "g(d)"
        if bank >= 0x07:
            return f"g({bank - 0x07 + 1})"
        if bank == 0x06:
            return "GM"
        return f"INT-{chr(ord('A') + bank)}"

    @property
    def performance_name(self) -> str:
        offset = 1 if _bank_has_index_offset(self.performance_bank) else 0
        return (
            f"{self.performance_type_name(True)} {self.performance_bank_name} "
            f"{self.performance_index + offset:03d}"
        )

    def set_performance_name(self, text: str) -> None:
        """Parse a performance name such as "Prog INT-E 123" and store its parts.

        Matching is case insensitive. Only the first letter of the type is
        checked. Banks are "INT-[A-F]", "GM", "g([1-9d])" or "USER-[A-G]{1,2}".
        """
        for value, type_name in enumerate(PERF_TYPE_NAMES):
            if text[:1] and _ci_equal(text[:1], type_name[:1]):
                self.performance_type = value
                break

        space = text.find(" ")
        if space == -1:
            return
        rest = text[space + 1:]

        if _ci_equal(rest[:5], "USER-") and len(rest) >= 5:
            ch = rest[5] if len(rest) > 5 else "\0"
            if "a" <= ch <= "g":
                ch = ch.upper()
            bank = 0x11 + ord(ch) - ord("A")
            if len(rest) > 6 and rest[6] == ch:
                bank += 7
            self.performance_bank = bank
        elif _ci_equal(rest[:4], "g(d)") and len(rest) >= 4:
            self.performance_bank = 0x10
        elif _ci_equal(rest[:2], "g(") and len(rest) >= 2:
            digit = rest[2] if len(rest) > 2 else "\0"
            self.performance_bank = 0x07 + (ord(digit) - ord("1"))
        elif _ci_equal(rest[:2], "GM") and len(rest) >= 2:
            self.performance_bank = 0x06
        elif _ci_equal(rest[:4], "INT-") and len(rest) >= 4:
            ch = rest[4] if len(rest) > 4 else "\0"
            if "a" <= ch <= "f":
                ch = ch.upper()
            self.performance_bank = ord(ch) - ord("A")

        space = rest.find(" ")
        if space == -1:
            return
        offset = -1 if _bank_has_index_offset(self.performance_bank) else 0
        self.performance_index = (_strtol(rest[space + 1:]) + offset) & 0xFF

    # ---------------- keyboard track and transpose ----------------

    @property
    def keyboard_track(self) -> int:
        return self.track_byte & 0x0F

    @keyboard_track.setter
    def keyboard_track(self, value: int) -> None:
        self.track_byte = (self.track_byte & 0xF0) | (value & 0x0F)

    @property
    def xpose(self) -> int:
        value = ((self.bank_byte >> 5) << 3) + (self.track_byte >> 5)
        return value - 64 if value > 24 else value

    @xpose.setter
    def xpose(self, value: int) -> None:
        if value < 0:
            value += 64
        self.track_byte = (self.track_byte & 0x1F) | ((value & 0x07) << 5)
        self.bank_byte = ((self.bank_byte & 0x1F) + ((value & 0xF8) << 2)) & 0xFF

    # ---------------- color ----------------

    @property
    def color(self) -> SlotColor:
        return SlotColor((self.type_byte & 0x3C) >> 2)

    @color.setter
    def color(self, value: int) -> None:
        self.type_byte = (self.type_byte & 0xC3) | ((int(value) << 2) & 0x3C)

    @property
    def color_name(self) -> str:
        return COLOR_NAMES[self.color]

    def set_color_name(self, text: str) -> None:
        """Set the color from a case-insensitive prefix of its name."""
        for value, color_name in enumerate(COLOR_NAMES):
            n = min(len(text), len(color_name))
            if _ci_equal(text[:n], color_name[:n]):
                self.color = value
                return

    # ---------------- font ----------------

    @property
    def font(self) -> SlotFont:
        if self.track_byte & 0x10:
            return SlotFont.XL
        return SlotFont((self.type_byte >> 6) & 0x03)

    @font.setter
    def font(self, value: int) -> None:
        if value == SlotFont.XL:
            self.track_byte |= 0x10
            self.type_byte &= 0x3F
        else:
            self.track_byte &= 0xEF
            self.type_byte = (self.type_byte & 0x3F) | ((int(value) << 6) & 0xC0)

    @property
    def font_name(self) -> str:
        return FONT_NAMES[self.font]

    @property
    def font_short_name(self) -> str:
        return FONT_SHORT_NAMES[self.font]

    def set_font_name(self, text: str) -> None:
        """Set the font from a prefix of its name or from its short name."""
        lowered = text.lower()
        for value, (font_name, short_name) in enumerate(zip(FONT_NAMES, FONT_SHORT_NAMES)):
            n = min(len(text), len(font_name))
            if _ci_equal(text[:n], font_name[:n]):
                self.font = value
                return
            if lowered.startswith(short_name.lower()):
                self.font = value
                return


def encode_raw(data: bytes, length: int) -> bytes:
    """Fit raw field bytes to exactly `length` bytes."""
    data = bytes(data)[:length]
    return data + bytes(length - len(data))