"""Kronos set lists: the raw set list record and its decoded settings."""

from dataclasses import dataclass, field
from enum import IntEnum

from kronut.fixed_string import decode_fixed, encode_fixed, fits
from kronut.slot import SLOT_SIZE, PerformanceType, Slot, encode_raw

# If a set list is uninitialized then its first byte (name[0]) is this value.
UNINITIALIZED_SET_LIST = 0xFF
SET_LIST_NAME_LEN = 24
UNDEFINED_SET_LIST_NUM = -1
SLOTS_PER_SET_LIST = 128
BAND_LEVEL_COUNT = 9
_RESERVED_LEN = 3

SET_LIST_SIZE = (
    SET_LIST_NAME_LEN + SLOTS_PER_SET_LIST * SLOT_SIZE + 1 + BAND_LEVEL_COUNT + 3 + _RESERVED_LEN
)

_SLOTS_PER_PAGE_CODES = {16: 0, 8: 1, 4: 2}


class ControlSurfaceAssignFrom(IntEnum):
    SLOT = 0
    SET_LIST = 1


CONTROL_SURFACE_ASSIGN_FROM_NAMES = ("Slot", "Set List")


def _uninitialized_name() -> bytes:
    return bytes([UNINITIALIZED_SET_LIST]) + bytes(SET_LIST_NAME_LEN - 1)


@dataclass
class SetList:
    """A set list as stored by the Kronos: a name, 128 slots and settings."""

    raw_name: bytes = field(default_factory=_uninitialized_name)
    slots: list = field(default_factory=lambda: [Slot() for _ in range(SLOTS_PER_SET_LIST)])
    eq_bypass_byte: int = 0
    band_levels: list = field(default_factory=lambda: [0] * BAND_LEVEL_COUNT)
    control_surface_mode_byte: int = 0
    assign_from_byte: int = 0
    slots_per_page_byte: int = 0
    reserved: bytes = bytes(_RESERVED_LEN)

    # ---------------- construction and serialisation ----------------

    @classmethod
    def from_bytes(cls, data: bytes) -> "SetList":
        data = bytes(data)
        if len(data) != SET_LIST_SIZE:
            raise ValueError(f"set list data must be {SET_LIST_SIZE} bytes, got {len(data)}")
        pos = SET_LIST_NAME_LEN
        raw_name = data[:pos]
        slots = []
        for _ in range(SLOTS_PER_SET_LIST):
            slots.append(Slot.from_bytes(data[pos:pos + SLOT_SIZE]))
            pos += SLOT_SIZE
        eq_bypass_byte = data[pos]
        pos += 1
        band_levels = list(data[pos:pos + BAND_LEVEL_COUNT])
        pos += BAND_LEVEL_COUNT
        mode, assign_from, per_page = data[pos:pos + 3]
        pos += 3
        return cls(
            raw_name=raw_name,
            slots=slots,
            eq_bypass_byte=eq_bypass_byte,
            band_levels=band_levels,
            control_surface_mode_byte=mode,
            assign_from_byte=assign_from,
            slots_per_page_byte=per_page,
            reserved=data[pos:pos + _RESERVED_LEN],
        )

    def to_bytes(self) -> bytes:
        if len(self.slots) != SLOTS_PER_SET_LIST:
            raise ValueError(f"a set list holds {SLOTS_PER_SET_LIST} slots, not {len(self.slots)}")
        if len(self.band_levels) != BAND_LEVEL_COUNT:
            raise ValueError(f"a set list holds {BAND_LEVEL_COUNT} band levels")
        parts = [encode_raw(self.raw_name, SET_LIST_NAME_LEN)]
        parts.extend(slot.to_bytes() for slot in self.slots)
        parts.append(bytes([self.eq_bypass_byte & 0xFF]))
        parts.append(bytes(level & 0xFF for level in self.band_levels))
        parts.append(bytes([
            self.control_surface_mode_byte & 0xFF,
            self.assign_from_byte & 0xFF,
            self.slots_per_page_byte & 0xFF,
        ]))
        parts.append(encode_raw(self.reserved, _RESERVED_LEN))
        return b"".join(parts)

    @classmethod
    def empty(cls) -> "SetList":
        """A blank set list: zeroed, named "Empty Set List", with default slots."""
        set_list = cls(raw_name=bytes(SET_LIST_NAME_LEN))
        set_list.set_name("Empty Set List")
        set_list.slots_per_page = 16
        set_list.eq_bypass = True
        set_list.control_surface_mode_byte = 5
        for slot in set_list.slots:
            slot.performance_type = PerformanceType.PROGRAM
            slot.volume = 127
            slot.hold_time = 6
        return set_list

    def is_initialized(self) -> bool:
        return self.raw_name[0] != UNINITIALIZED_SET_LIST

    # ---------------- name ----------------

    @property
    def name(self) -> str:
        return decode_fixed(self.raw_name)

    def set_name(self, text: str) -> bool:
        """Store the name; return True if it was too long and got truncated."""
        self.raw_name = encode_fixed(text, SET_LIST_NAME_LEN)
        return not fits(text, SET_LIST_NAME_LEN)

    # ---------------- settings ----------------

    @property
    def eq_bypass(self) -> bool:
        return (self.eq_bypass_byte & 0x01) == 1

    @eq_bypass.setter
    def eq_bypass(self, value: bool) -> None:
        self.eq_bypass_byte = (self.eq_bypass_byte & 0xFE) | (1 if value else 0)

    @property
    def slots_per_page(self) -> int:
        return 16 >> self.slots_per_page_byte

    @slots_per_page.setter
    def slots_per_page(self, value: int) -> None:
        code = _SLOTS_PER_PAGE_CODES.get(value)
        if code is not None:
            self.slots_per_page_byte = code

    @property
    def control_surface_mode(self) -> int:
        return self.control_surface_mode_byte & 0x03

    @control_surface_mode.setter
    def control_surface_mode(self, value: int) -> None:
        self.control_surface_mode_byte = (self.control_surface_mode_byte & 0xFC) | (value & 0x03)

    @property
    def control_surface_assign_from(self) -> ControlSurfaceAssignFrom:
        return ControlSurfaceAssignFrom(self.assign_from_byte & 0x01)

    @control_surface_assign_from.setter
    def control_surface_assign_from(self, value: int) -> None:
        self.assign_from_byte = (self.assign_from_byte & 0xFE) | (int(value) & 0x01)

    @property
    def control_surface_assign_from_name(self) -> str:
        return CONTROL_SURFACE_ASSIGN_FROM_NAMES[self.control_surface_assign_from]

    def set_control_surface_assign_from_name(self, text: str) -> None:
        """Set the assignment source from text: "Set List" if its second letter is "e"."""
        second = text[1] if len(text) > 1 else ""
        self.control_surface_assign_from = (
            ControlSurfaceAssignFrom.SET_LIST if second in ("e", "E") else ControlSurfaceAssignFrom.SLOT
        )