"""Fixed-length byte fields holding text that need not be NUL terminated."""

_ENCODING = "latin-1"


def decode_fixed(data: bytes) -> str:
    """Return the text in `data` up to the first NUL byte, or all of it if none."""
    return bytes(data).split(b"\0", 1)[0].decode(_ENCODING)


def encode_fixed(text: str, length: int) -> bytes:
    """Encode `text` into exactly `length` bytes, truncating or NUL padding it."""
    encoded = text.encode(_ENCODING, errors="replace")[:length]
    return encoded + bytes(length - len(encoded))


def fits(text: str, length: int) -> bool:
    """True if `text` fits in a fixed field of `length` bytes without truncation."""
    return len(text.encode(_ENCODING, errors="replace")) <= length