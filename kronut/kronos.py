"""Talking to a Kronos over MIDI system exclusive messages."""

import logging
import threading
from collections.abc import Iterable
from typing import Any, Optional, Union

import mido

from kronut.consts import (
    CC_BANK_SELECT_LSB,
    CC_BANK_SELECT_MSB,
    EOX,
    KORG_MANUFACTURER_ID,
    KRONOS_DEVICE_ID,
    SYSEX,
    FunctionCode,
    KronosMode,
    ObjectType,
)
from kronut.kstring import KString
from kronut.midi_data import internal_to_midi, midi_to_internal
from kronut.set_list import SET_LIST_SIZE, SetList
from kronut.utils import dump_hex

log = logging.getLogger(__name__)

SYSEX_TIMEOUT_SECS = 5.0
_DATA_START = 7

ERROR_REPLY_MESSAGES = {
    0x00: "no error",
    0x01: "parameter type specified is incorrect for current mode",
    0x02: "unknown param message type, unknown parameter id or index",
    0x03: "short or otherwise mangled message",
    0x04: "target object not found",
    0x05: "insufficient resources to complete request",
    0x06: "parameter value is out of range",
    0x07: "(internal error code)",
    0x64: (
        "other error: program bank is wrong type for received program dump "
        "(Func 73, 75); invalid data in Preset Pattern Dump (Func 7B)."
    ),
    0x65: "target object is protected",
    0x66: "memory overflow",
}


class KronosError(Exception):
    """A request to the Kronos failed or was answered with an error."""


MessageLike = Union[Iterable[int], Any]


def _message_bytes(message: MessageLike) -> bytes:
    if hasattr(message, "bytes"):
        return bytes(message.bytes())
    return bytes(message)


class Kronos:
    """A Kronos reached through a MIDI output port.

    Replies arrive through `receive_midi`, which is meant to be called from
    the input port's callback. Requests wait for the matching reply and raise
    `KronosError` on an error reply or a timeout.
    """

    def __init__(self, channel: int = 0, output=None, timeout: float = SYSEX_TIMEOUT_SECS) -> None:
        if not 0 <= channel <= 15:
            raise ValueError("channel must be 0-15")
        self.channel = channel
        self.output = output
        self.timeout = timeout
        self._sysex = b""
        self._waiting: Optional[int] = None
        self._closed = False
        self._cond = threading.Condition()

    def __enter__(self) -> "Kronos":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Stop waiting for replies; later requests fail."""
        with self._cond:
            self._closed = True
            self._waiting = None
            self._cond.notify_all()

    @property
    def sysex(self) -> bytes:
        """The most recently received wanted sysex message."""
        return self._sysex

    @property
    def _header(self) -> bytes:
        return bytes([SYSEX, KORG_MANUFACTURER_ID, 0x30 + self.channel, KRONOS_DEVICE_ID])

    # ---------------- sysex I/O ----------------

    def message_is_wanted(self, message: MessageLike) -> bool:
        data = _message_bytes(message)
        return (
            len(data) > 4
            and data[0] == SYSEX
            and (data[4] == self._waiting or data[4] == FunctionCode.REPLY)
        )

    def receive_midi(self, message: MessageLike) -> None:
        """Keep an incoming message if it is the reply being waited for."""
        data = _message_bytes(message)
        with self._cond:
            if self.message_is_wanted(data):
                self._sysex = data
                self._cond.notify_all()

    def _send(self, message: mido.Message) -> None:
        if self.output is not None:
            self.output.send(message)

    def _send_sysex(self, func_name: str, request: bytes) -> None:
        log.debug("Kronos.%s: sending sysex, func %02x", func_name, request[4])
        self._send(mido.Message("sysex", data=request[1:-1]))

    def _get(self, request: bytes, func_name: str, reply_function: int) -> bytes:
        """Send `request` and wait for a reply with function `reply_function`."""
        log.debug("Kronos.%s: waiting for reply func %02x", func_name, reply_function)
        with self._cond:
            if self._closed:
                raise KronosError(f"{func_name}: connection closed")
            self._sysex = b""
            self._waiting = reply_function
        try:
            self._send_sysex(func_name, request)
            with self._cond:
                done = self._cond.wait_for(
                    lambda: self._closed
                    or self.error_reply_seen()
                    or self.message_is_wanted(self._sysex),
                    timeout=self.timeout,
                )
        finally:
            with self._cond:
                self._waiting = None
        if self.error_reply_seen():
            log.debug("Kronos.%s: error reply %s", func_name, self._sysex.hex())
            raise KronosError(f"sysex error response: {self.error_reply_message()}")
        if self._closed:
            raise KronosError(f"{func_name}: connection closed")
        if not done:
            raise KronosError(f"Kronos.{func_name}: timeout waiting for sysex")
        return self._sysex

    def _payload(self) -> bytes:
        data = self._sysex[_DATA_START:]
        end = data.find(EOX)
        return data if end == -1 else data[:end]

    # ---------------- error detection ----------------

    def error_reply_seen(self) -> bool:
        s = self._sysex
        return len(s) > 5 and s[0] == SYSEX and s[4] == FunctionCode.REPLY and s[5] > 0

    def error_reply_message(self) -> str:
        code = self._sysex[5] if len(self._sysex) > 5 else 0
        message = ERROR_REPLY_MESSAGES.get(code)
        if message is None:
            return f"unknown error reply code: {code:02x}"
        return message

    # ---------------- reading objects ----------------

    def _read_current_string(self, obj_type: int, pad: int) -> KString:
        request = self._header + bytes([FunctionCode.CURR_OBJ_DUMP_REQ, obj_type, EOX])
        self._get(request, "read_current_string", FunctionCode.CURR_OBJ_DUMP)
        return KString.from_midi(self._payload(), pad)

    def read_current_slot_name(self) -> KString:
        return self._read_current_string(ObjectType.SET_LIST_SLOT_NAME, 0)

    def read_current_slot_comments(self) -> KString:
        return self._read_current_string(ObjectType.SET_LIST_SLOT_COMMENTS, 0)

    def _request_set_list(self, func_name: str) -> SetList:
        request = self._header + bytes([FunctionCode.CURR_OBJ_DUMP_REQ, ObjectType.SET_LIST, EOX])
        self._get(request, func_name, FunctionCode.CURR_OBJ_DUMP)
        internal = midi_to_internal(self._payload())
        if len(internal) != SET_LIST_SIZE:
            raise KronosError(
                f"{func_name}: set list dump holds {len(internal)} bytes, expected {SET_LIST_SIZE}"
            )
        return SetList.from_bytes(internal)

    def read_set_list(self, n: int) -> SetList:
        """Move to set list `n` and read it."""
        self.set_mode(KronosMode.SET_LIST)
        self.goto_set_list(n)
        return self._request_set_list("read_set_list")

    def read_current_set_list(self) -> SetList:
        return self._request_set_list("read_current_set_list")

    # ---------------- writing objects ----------------

    def _write_current_string(self, obj_type: int, kstr: KString) -> None:
        request = (
            self._header
            + bytes([FunctionCode.CURR_OBJ_DUMP, obj_type, 0])
            + kstr.midi_bytes
            + bytes([EOX])
        )
        self._get(request, "write_current_string", FunctionCode.REPLY)

    def write_current_slot_name(self, kstr: KString) -> None:
        self._write_current_string(ObjectType.SET_LIST_SLOT_NAME, kstr)

    def write_current_slot_comments(self, kstr: KString) -> None:
        self._write_current_string(ObjectType.SET_LIST_SLOT_COMMENTS, kstr)

    def write_set_list(self, n: int, set_list: SetList) -> None:
        """Send `set_list` to set list `n` and store it."""
        self.set_mode(KronosMode.SET_LIST)
        self.goto_set_list(n)
        request = (
            self._header
            + bytes([
                FunctionCode.CURR_OBJ_DUMP,
                ObjectType.SET_LIST,
                0,
                (n >> 7) & 0x7F,
                n & 0x7F,
                0,
            ])
            + internal_to_midi(set_list.to_bytes())
            + bytes([EOX])
        )
        self._get(request, "write_current_set_list", FunctionCode.REPLY)
        self.save_current_set_list()

    # ---------------- saving to non-volatile storage ----------------

    def save_current_set_list(self) -> None:
        request = self._header + bytes([FunctionCode.STORE_BANK_REQ, ObjectType.SET_LIST, 0, EOX])
        self._get(request, "save_current_set_list", FunctionCode.REPLY)

    # ---------------- mode and movement ----------------

    def mode(self) -> KronosMode:
        request = self._header + bytes([FunctionCode.MODE_REQ, EOX])
        reply = self._get(request, "mode", FunctionCode.MODE_DATA)
        value = reply[5] & 0x0F
        try:
            return KronosMode(value)
        except ValueError:
            raise KronosError(f"unknown mode {value}") from None

    def set_mode(self, mode: int) -> None:
        request = self._header + bytes([FunctionCode.MODE_CHANGE, int(mode), EOX])
        self._get(request, "set_mode", FunctionCode.REPLY)

    def goto_set_list(self, n: int) -> None:
        if not 0 <= n <= 127:
            raise ValueError("set list number must be 0-127")
        self.set_mode(KronosMode.SET_LIST)
        self._send(mido.Message("control_change", channel=self.channel,
                                control=CC_BANK_SELECT_MSB, value=0))
        self._send(mido.Message("control_change", channel=self.channel,
                                control=CC_BANK_SELECT_LSB, value=n))
        self._send(mido.Message("program_change", channel=self.channel, program=0))

    # ---------------- helpers ----------------

    def dump_sysex(self, msg: str) -> None:
        dump_hex(self._sysex, msg)