"""Kronos strings: fixed-length internal bytes with a text view."""

from kronut.midi_data import MIDIData, midi_to_internal
from kronut.utils import dump_hex

_ENCODING = "latin-1"


class KString(MIDIData):
    """Fixed-length Kronos string.

    The text is derived from the internal bytes: trailing pad characters,
    spaces and newlines are dropped and Kronos carriage returns become
    newlines. Setting the text truncates it to the original length.
    """

    def __init__(self, internal: bytes = b"", pad: int = 0) -> None:
        super().__init__(internal)
        self.pad = pad

    @classmethod
    def from_midi(cls, data: bytes, pad: int = 0) -> "KString":
        return cls(midi_to_internal(bytes(data)), pad)

    @classmethod
    def from_internal(cls, data: bytes, pad: int = 0) -> "KString":
        return cls(bytes(data), pad)

    @property
    def text(self) -> str:
        raw = self.internal_bytes.decode(_ENCODING)
        raw = raw.rstrip(chr(self.pad) + "\r\n ")
        raw = raw.split("\0", 1)[0]
        return raw.replace("\r\n", "\n").replace("\r", "\n")

    @text.setter
    def text(self, value: str) -> None:
        self.set_str(value)

    def set_str(self, text: str) -> None:
        """Store `text`, truncated to the string length and padded with the pad byte."""
        length = self.internal_len
        encoded = text.encode(_ENCODING, errors="replace")[:length]
        encoded = encoded.split(b"\0", 1)[0].replace(b"\n", b"\r")
        self.internal_bytes = encoded + bytes([self.pad]) * (length - len(encoded))

    def dump(self) -> None:
        """Print hex dumps of the MIDI, internal and text bytes."""
        super().dump()
        dump_hex(self.text.encode(_ENCODING) + b"\0", "KString c_str")