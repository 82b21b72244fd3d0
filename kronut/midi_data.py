"""Conversion between Kronos internal bytes and 7-bit MIDI sysex bytes."""

from kronut.utils import dump_hex


def internal_length(midi_len: int) -> int:
    """Number of internal bytes encoded by `midi_len` MIDI bytes."""
    rest = midi_len % 8
    return (midi_len // 8) * 7 + (rest - 1 if rest else 0)


def midi_length(internal_len: int) -> int:
    """Number of MIDI bytes needed to encode `internal_len` internal bytes."""
    return internal_len + (internal_len + 6) // 7


def midi_to_internal(midi: bytes) -> bytes:
    """Decode 7-bit MIDI data: each 8-byte chunk is a high-bit byte and 7 data bytes."""
    internal = bytearray()
    for start in range(0, len(midi), 8):
        chunk = midi[start:start + 8]
        high_bits = chunk[0]
        for i, b in enumerate(chunk[1:]):
            internal.append((b + (0x80 if high_bits & (1 << i) else 0)) & 0xFF)
    return bytes(internal)


def internal_to_midi(internal: bytes) -> bytes:
    """Encode 8-bit internal data as 7-bit MIDI data."""
    midi = bytearray()
    for start in range(0, len(internal), 7):
        chunk = internal[start:start + 7]
        high_bits = sum(1 << i for i, b in enumerate(chunk) if b & 0x80)
        midi.append(high_bits)
        midi.extend(b & 0x7F for b in chunk)
    return bytes(midi)


class MIDIData:
    """Internal bytes kept together with their MIDI encoding."""

    def __init__(self, internal: bytes = b"") -> None:
        self._internal = bytes(internal)

    @classmethod
    def from_midi(cls, data: bytes) -> "MIDIData":
        return cls(midi_to_internal(bytes(data)))

    @classmethod
    def from_internal(cls, data: bytes) -> "MIDIData":
        return cls(bytes(data))

    @property
    def internal_bytes(self) -> bytes:
        return self._internal

    @internal_bytes.setter
    def internal_bytes(self, value: bytes) -> None:
        self._internal = bytes(value)

    @property
    def midi_bytes(self) -> bytes:
        return internal_to_midi(self._internal)

    @midi_bytes.setter
    def midi_bytes(self, value: bytes) -> None:
        self._internal = midi_to_internal(bytes(value))

    @property
    def internal_len(self) -> int:
        return len(self._internal)

    @property
    def midi_len(self) -> int:
        return midi_length(len(self._internal))

    def dump(self) -> None:
        """Print hex dumps of the MIDI and internal bytes."""
        dump_hex(self.midi_bytes, "MIDIData midi bytes")
        dump_hex(self.internal_bytes, "MIDIData internal bytes")