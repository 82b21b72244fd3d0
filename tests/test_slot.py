import pytest

from kronut.slot import (
    SLOT_COMMENTS_LEN,
    SLOT_NAME_LEN,
    PerformanceType,
    Slot,
    SlotColor,
    SlotFont,
)

TEST_NAME = "abcdefghijklmnopqrstuvwx"


@pytest.fixture
def slot():
    return Slot()


# ---------------- string handling ----------------

def test_get_name(slot):
    slot.raw_name = TEST_NAME.encode()
    assert slot.name == TEST_NAME
    slot.raw_name = b"short" + bytes(SLOT_NAME_LEN - 5)
    assert slot.name == "short"


def test_set_name(slot):
    slot.set_name(TEST_NAME)
    assert slot.raw_name == TEST_NAME.encode()
    slot.set_name("short")
    assert slot.raw_name == b"short" + bytes(SLOT_NAME_LEN - 5)


def test_set_name_truncation(slot):
    text = "this is too long so we should see a non-zero return from set_name"
    assert slot.set_name(text) is True
    assert slot.name == text[:SLOT_NAME_LEN]


def test_set_name_that_fits_reports_no_truncation(slot):
    assert slot.set_name(TEST_NAME) is False


def test_get_comments(slot):
    slot.raw_comments = TEST_NAME.encode() + bytes(SLOT_COMMENTS_LEN - len(TEST_NAME))
    assert slot.comments == TEST_NAME
    slot.raw_comments = b"short" + bytes(SLOT_COMMENTS_LEN - 5)
    assert slot.comments == "short"


def test_set_comments(slot):
    slot.set_comments(TEST_NAME)
    assert slot.raw_comments[:len(TEST_NAME)] == TEST_NAME.encode()
    assert slot.raw_comments[len(TEST_NAME)] == 0
    slot.set_comments("short")
    assert slot.raw_comments == b"short" + bytes(SLOT_COMMENTS_LEN - 5)


# ---------------- transpose ----------------

@pytest.mark.parametrize(
    "bank_byte, track_byte, expected",
    [(0, 0, 0), (0, 0x20, 1), (0x60, 0, 24), (0xE0, 0xE0, -1), (0xA0, 0, -24)],
)
def test_xpose_reading(slot, bank_byte, track_byte, expected):
    slot.bank_byte = bank_byte
    slot.track_byte = track_byte
    assert slot.xpose == expected


@pytest.mark.parametrize("value", [0, 24, -1, -24])
def test_xpose_accessors(slot, value):
    slot.xpose = value
    assert slot.xpose == value


def test_xpose_preserves_bank_and_track(slot):
    slot.performance_bank = 0x12
    slot.keyboard_track = 5
    slot.xpose = -7
    assert slot.performance_bank == 0x12
    assert slot.keyboard_track == 5
    assert slot.xpose == -7


# ---------------- fonts ----------------

def test_font_accessors(slot):
    assert slot.font == SlotFont.S
    for font in (SlotFont.XS, SlotFont.M, SlotFont.L, SlotFont.XL, SlotFont.S):
        slot.font = font
        assert slot.font == font


@pytest.mark.parametrize(
    "font, name, short_name",
    [
        (SlotFont.S, "Small", "S"),
        (SlotFont.XS, "Extra Small", "XS"),
        (SlotFont.M, "Medium", "M"),
        (SlotFont.L, "Large", "L"),
        (SlotFont.XL, "Extra Large", "XL"),
    ],
)
def test_font_name_getters(slot, font, name, short_name):
    slot.font = font
    assert slot.font_name == name
    assert slot.font_short_name == short_name


def test_default_font_names(slot):
    assert slot.font_name == "Small"
    assert slot.font_short_name == "S"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Small", SlotFont.S),
        ("Extra Small", SlotFont.XS),
        ("Medium", SlotFont.M),
        ("Large", SlotFont.L),
        ("Extra Large", SlotFont.XL),
        ("S", SlotFont.S),
        ("XS", SlotFont.XS),
        ("M", SlotFont.M),
        ("L", SlotFont.L),
        ("XL", SlotFont.XL),
    ],
)
def test_font_name_setters(slot, text, expected):
    slot.set_font_name(text)
    assert slot.font == expected


# ---------------- colors ----------------

def test_color_names(slot):
    assert slot.color_name == "Default"
    slot.color = SlotColor.OLIVE
    assert slot.color_name == "Olive"


def test_color_name_setters(slot):
    slot.set_color_name("olive")
    assert slot.color == SlotColor.OLIVE
    slot.set_color_name("na")
    assert slot.color == SlotColor.NAVY
    slot.set_color_name("LAV")
    assert slot.color == SlotColor.LAVENDER


def test_color_and_font_and_type_share_byte(slot):
    slot.performance_type = PerformanceType.SONG
    slot.color = SlotColor.SLATE
    slot.font = SlotFont.L
    assert slot.performance_type == PerformanceType.SONG
    assert slot.color == SlotColor.SLATE
    assert slot.font == SlotFont.L


# ---------------- banks and performances ----------------

@pytest.mark.parametrize(
    "bank, name",
    [
        (0x00, "INT-A"),
        (0x05, "INT-F"),
        (0x06, "GM"),
        (0x07, "g(1)"),
        (0x0F, "g(9)"),
        (0x10, "g(d)"),
        (0x11, "USER-A"),
        (0x17, "USER-G"),
        (0x18, "USER-AA"),
        (0x1E, "USER-GG"),
    ],
)
def test_bank_names(slot, bank, name):
    slot.performance_bank = bank
    assert slot.performance_bank_name == name


def test_performance_names(slot):
    slot.performance_type = PerformanceType.COMBINATION
    slot.performance_bank = 0x12
    slot.performance_index = 3
    assert slot.performance_name == "Combi USER-B 003"

    slot.performance_bank = 0x19
    assert slot.performance_name == "Combi USER-BB 003"

    slot.performance_bank = 0x07
    assert slot.performance_name == "Combi g(1) 004"

    slot.performance_bank = 0x06
    assert slot.performance_name == "Combi GM 004"

    slot.performance_type = PerformanceType.PROGRAM
    slot.performance_bank = 0x12
    slot.performance_index = 3
    assert slot.performance_name == "Prog USER-B 003"


def test_performance_name_saving(slot):
    slot.set_performance_name("Combination INT-E 023")
    assert slot.performance_type == PerformanceType.COMBINATION
    assert slot.performance_bank == 0x04
    assert slot.performance_index == 23
    assert slot.performance_name == "Combi INT-E 023"

    slot.set_performance_name("prog int-e 123")
    assert slot.performance_type == PerformanceType.PROGRAM
    assert slot.performance_bank == 0x04
    assert slot.performance_index == 123
    assert slot.performance_name == "Prog INT-E 123"

    slot.set_performance_name("Combi GM 1")
    assert slot.performance_type == PerformanceType.COMBINATION
    assert slot.performance_bank == 0x06
    assert slot.performance_index == 0
    assert slot.performance_name == "Combi GM 001"


@pytest.mark.parametrize(
    "name",
    ["Combi USER-B 003", "Prog USER-BB 010", "Song g(d) 001", "Prog g(9) 128", "Combi INT-A 000"],
)
def test_performance_name_round_trip(slot, name):
    slot.set_performance_name(name)
    assert slot.performance_name == name


def test_performance_type_name(slot):
    slot.performance_type = PerformanceType.SONG
    assert slot.performance_type_name(False) == "Song"
    slot.performance_type = PerformanceType.COMBINATION
    assert slot.performance_type_name(False) == "Combination"
    assert slot.performance_type_name(True) == "Combi"


def test_illegal_performance_type_name_raises(slot):
    slot.type_byte = 0x03
    with pytest.raises(ValueError):
        slot.performance_type_name(True)


# ---------------- emptiness and serialisation ----------------

def test_is_empty():
    slot = Slot()
    assert slot.is_empty() is False
    slot.performance_type = PerformanceType.PROGRAM
    slot.volume = 127
    slot.hold_time = 6
    assert slot.is_empty() is True
    slot.set_name("x")
    assert slot.is_empty() is False


def test_bytes_round_trip(slot):
    slot.set_name("Grand Piano")
    slot.set_comments("line one\rline two")
    slot.set_performance_name("Prog USER-C 042")
    slot.color = SlotColor.AZURE
    slot.font = SlotFont.XL
    slot.xpose = -12
    slot.volume = 100
    slot.hold_time = 9
    slot.keyboard_track = 3
    data = slot.to_bytes()
    assert len(data) == SLOT_NAME_LEN + 6 + SLOT_COMMENTS_LEN
    assert Slot.from_bytes(data) == slot


def test_from_bytes_wrong_size_raises():
    with pytest.raises(ValueError):
        Slot.from_bytes(bytes(10))