"""Save, load and edit Korg Kronos set lists and slot text over MIDI."""

__version__ = "0.1.0"