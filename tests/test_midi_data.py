import pytest

from kronut.midi_data import (
    MIDIData,
    internal_length,
    internal_to_midi,
    midi_length,
    midi_to_internal,
)

MIDI_LETTERS = bytes([
    0x40, *b"abcdefg",
    0, *b"hijklmn",
    0, *b"opqrstu",
    0, *b"vwx",
])
INTERNAL_LETTERS = bytes([
    *b"abcdef", ord("g") + 0x80,
    *b"hijklmn",
    *b"opqrstu",
    *b"vwx",
])


def test_md_m2i_len():
    md = MIDIData.from_midi(MIDI_LETTERS)
    assert md.internal_len == 24


def test_md_i2m_len():
    md = MIDIData.from_internal(INTERNAL_LETTERS)
    assert md.midi_len == 28


def test_md_init_with_midi():
    md = MIDIData.from_midi(MIDI_LETTERS)
    assert md.internal_bytes[:24] == INTERNAL_LETTERS


def test_md_init_with_internal():
    md = MIDIData.from_internal(INTERNAL_LETTERS)
    assert md.midi_bytes[:24] == MIDI_LETTERS[:24]
    assert md.midi_bytes == MIDI_LETTERS


@pytest.mark.parametrize("n", [0, 1, 6, 7, 8, 13, 14, 15, 24, 100])
def test_length_round_trip(n):
    assert internal_length(midi_length(n)) == n


@pytest.mark.parametrize("n", [0, 1, 7, 8, 24, 69])
def test_encoded_length_matches_formula(n):
    assert len(internal_to_midi(bytes(n))) == midi_length(n)


def test_byte_round_trip_all_values():
    data = bytes(range(256)) * 3
    assert midi_to_internal(internal_to_midi(data)) == data


def test_midi_bytes_are_seven_bit():
    data = bytes(range(128, 256))
    assert all(b < 0x80 for b in internal_to_midi(data))


def test_setting_midi_updates_internal():
    md = MIDIData.from_internal(b"zzz")
    md.midi_bytes = MIDI_LETTERS
    assert md.internal_bytes == INTERNAL_LETTERS


def test_setting_internal_updates_midi():
    md = MIDIData()
    md.internal_bytes = INTERNAL_LETTERS
    assert md.midi_bytes == MIDI_LETTERS


def test_dump_prints_both(capsys):
    MIDIData.from_internal(b"ab").dump()
    out = capsys.readouterr().out
    assert "MIDIData midi bytes" in out
    assert "MIDIData internal bytes" in out