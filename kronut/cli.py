"""Command line interface: list MIDI ports, load and save set lists, edit slots."""

import getopt
import logging
import subprocess
import sys
from dataclasses import dataclass
from typing import IO, Optional

import mido

from kronut.file_editor import FileEditor, FileFormat
from kronut.kronos import Kronos, KronosError
from kronut.set_list import UNDEFINED_SET_LIST_NUM
from kronut.slot import SLOT_COMMENTS_LEN, SLOT_NAME_LEN
from kronut.text_editor import SlotTextTooLong, TextEditor

PROG_NAME = "kronut"
KRONOS_INPUT_NAME = "Kronos KEYBOARD"
KRONOS_OUTPUT_NAME = "Kronos SOUND"

USAGE_LINES = (
    " [-c N] [-f FORMAT] [-i N] [-o N] [-s] [-d] [-h] COMMAND [args]",
    "",
    "    -c, --channel N   Kronos general MIDI channel (1-16, default 1)",
    "    -f, --format FMT  Format: \"o\" (Org Mode, default), \"m\" (Markdown),",
    "                      \"h\" (hex dump)",
    "    -i, --input N     Input number (default: attempts to find it automatically)",
    "    -o, --output N    Output number (default: attempts to find it automatically)",
    "    -s, --skip-empty  Skips empty slots when saving",
    "    -d, --debug       Outputs various debug messages",
    "",
    "Commands:",
    "",
    "    list         Lists all input and output MIDI devices.",
    "",
    "    load N FILE  Reads a file into the set list N.",
    "",
    "    save N FILE  Saves set list N into a file.",
    "",
    "    edit [N]     Starts the slot text editor, optionally moving to set list N",
    "                 first. See the README for more information.",
    "",
    "    help         This help.",
)

EDITOR_INTRO = "Type 'e' to edit current slot, 'p' print, 'd' dump, 'q' quit, 'h' help."
EDITOR_PROMPT = "kronut> "
EDITOR_HELP = (
    "  e: edit current slot",
    "  r: re-edit (does not get data from Kronos)",
    "  p: print current slot",
    "  d: dump current slot",
    "  h: this help (also '?')",
    "  q: quit",
)

_SHORT_OPTS = "c:f:i:o:sdh"
_LONG_OPTS = ["channel=", "format=", "input=", "output=", "skip-empty", "debug", "help"]
_FORMATS = {"m": FileFormat.MARKDOWN, "o": FileFormat.ORG_MODE, "h": FileFormat.HEXDUMP}
_DIGITS = "0123456789"


class UsageError(Exception):
    """The command line was not understood; usage should be shown."""

    def __init__(self, message: str = "", status: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.status = status


@dataclass
class Options:
    channel: int = 0
    input_num: int = -1
    output_num: int = -1
    format: FileFormat = FileFormat.ORG_MODE
    skip_empty_slots: bool = False
    debug: bool = False


def _atoi(text: str) -> int:
    """Parse a leading decimal integer, 0 if there is none."""
    s = text.lstrip()
    sign = -1 if s[:1] == "-" else 1
    if s[:1] in ("+", "-"):
        s = s[1:]
    digits = ""
    for ch in s:
        if ch not in _DIGITS:
            break
        digits += ch
    return sign * int(digits) if digits else 0


def _starts_with_digit(text: str) -> bool:
    return text[:1] != "" and text[:1] in _DIGITS


def find_kronos_input_name(names) -> Optional[str]:
    """Return the Kronos input port name from `names`, or None."""
    return next((name for name in names if name == KRONOS_INPUT_NAME), None)


def find_kronos_output_name(names) -> Optional[str]:
    """Return the Kronos output port name from `names`, or None."""
    return next((name for name in names if name == KRONOS_OUTPUT_NAME), None)


def usage(prog_name: str = PROG_NAME, file: Optional[IO[str]] = None) -> None:
    out = sys.stdout if file is None else file
    out.write(f"usage: {prog_name}")
    for line in USAGE_LINES:
        out.write(line + "\n")


def parse_command_line(argv):
    """Parse options; return (Options, remaining arguments). Raises UsageError."""
    opts = Options()
    try:
        pairs, args = getopt.gnu_getopt(list(argv), _SHORT_OPTS, _LONG_OPTS)
    except getopt.GetoptError as err:
        raise UsageError(f"error: {err}", status=0) from None

    for flag, value in pairs:
        if flag in ("-c", "--channel"):
            opts.channel = _atoi(value) - 1
            if not 0 <= opts.channel <= 15:
                raise UsageError("error: channel must be 1-16")
        elif flag in ("-f", "--format"):
            fmt = _FORMATS.get(value[:1])
            if fmt is None:
                raise UsageError("error: format must be 'm', 'o', or 'h'")
            opts.format = fmt
        elif flag in ("-i", "--input"):
            opts.input_num = _atoi(value)
        elif flag in ("-o", "--output"):
            opts.output_num = _atoi(value)
        elif flag in ("-s", "--skip-empty"):
            opts.skip_empty_slots = True
        elif flag in ("-d", "--debug"):
            opts.debug = True
        elif flag in ("-h", "--help"):
            raise UsageError("", status=0)
    return opts, args


def format_device_list(title: str, names) -> str:
    """Numbered list of port names, quoting names with leading or trailing spaces."""
    lines = [f"{title}:"]
    for number, name in enumerate(names):
        quote = '"' if name[:1] == " " or name[-1:] == " " else ""
        lines.append(f"  {number:2d}: {quote}{name}{quote}")
    return "\n".join(lines) + "\n"


def _report_too_long(err: SlotTextTooLong, editor: TextEditor, out: IO[str]) -> None:
    print("error: slot strings were NOT sent back to the Kronos", file=out)
    if err.name_too_long:
        print(f"  name is too long ({len(editor.name)} chars, {SLOT_NAME_LEN} max)", file=out)
    if err.comments_too_long:
        print(
            f"  comments are too long ({len(editor.comments)} chars, {SLOT_COMMENTS_LEN} max)",
            file=out,
        )
    print("Type 'r' to re-edit what you saved.", file=out)


def _run_editor_command(editor: TextEditor, command: str, out: IO[str]) -> None:
    if command in ("e", "r"):
        try:
            editor.edit_current_slot(command == "e")
        except SlotTextTooLong as err:
            _report_too_long(err, editor, out)
    elif command == "d":
        editor.dump_current_slot()
    elif command == "p":
        editor.print_current_slot()
    elif command == "s":
        editor.print_set_list_slot_names()
    elif command in ("h", "?"):
        for line in EDITOR_HELP:
            print(line, file=out)


def run_text_editor(kronos, set_list_num=UNDEFINED_SET_LIST_NUM, stdin=None, stdout=None) -> None:
    """Run the interactive slot editor until 'q' or end of input."""
    inp = sys.stdin if stdin is None else stdin
    out = sys.stdout if stdout is None else stdout
    editor = TextEditor(kronos, out=out)

    if set_list_num is not None and set_list_num != UNDEFINED_SET_LIST_NUM:
        kronos.goto_set_list(set_list_num)

    print(EDITOR_INTRO, file=out)
    while True:
        out.write(EDITOR_PROMPT)
        out.flush()
        line = inp.readline()
        if not line:
            out.write("\n")
            return
        command = line[:1]
        if command == "q":
            return
        try:
            _run_editor_command(editor, command, out)
        except (KronosError, subprocess.CalledProcessError, OSError) as err:
            print(f"error: {err}", file=sys.stderr)


def _resolve_port(names, number: int, finder) -> Optional[str]:
    if number == -1:
        return finder(names)
    if 0 <= number < len(names):
        return names[number]
    return None


def _run_command(command, args, opts, kronos, file_editor) -> int:
    if command == "l":
        path = args[2]
        try:
            file_editor.load_set_list_from_file(path)
        except OSError as err:
            print(f'error: can\'t open "{path}" for reading: {err.strerror or err}',
                  file=sys.stderr)
            return 1
        kronos.write_set_list(_atoi(args[1]), file_editor.set_list)
        return 0
    if command == "s":
        path = args[2]
        file_editor.set_list = kronos.read_set_list(_atoi(args[1]))
        try:
            file_editor.save_set_list_to_file(path, opts.skip_empty_slots)
        except OSError as err:
            print(f'error: can\'t open "{path}" for writing: {err.strerror or err}',
                  file=sys.stderr)
            return 1
        return 0
    if command == "e":
        number = _atoi(args[1]) if len(args) >= 2 else UNDEFINED_SET_LIST_NUM
        run_text_editor(kronos, number)
        return 0
    usage(PROG_NAME)
    return 1


def main(argv=None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    try:
        opts, args = parse_command_line(argv)
    except UsageError as err:
        if err.message:
            print(err.message, file=sys.stderr)
        usage(PROG_NAME)
        return err.status

    if not args:
        usage(PROG_NAME)
        return 1
    if args[0].startswith("h"):
        usage(PROG_NAME)
        return 0
    if args[0].startswith("li"):
        sys.stdout.write(format_device_list("Inputs", mido.get_input_names()))
        sys.stdout.write(format_device_list("Outputs", mido.get_output_names()))
        return 0

    if opts.debug:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    input_name = _resolve_port(mido.get_input_names(), opts.input_num, find_kronos_input_name)
    if input_name is None:
        print("error: can't find Kronos input port number", file=sys.stderr)
    output_name = _resolve_port(mido.get_output_names(), opts.output_num, find_kronos_output_name)
    if output_name is None:
        print("error: can't find Kronos output port number", file=sys.stderr)
    if input_name is None or output_name is None:
        usage(PROG_NAME)
        return 1

    command = args[0][:1]
    if command in ("l", "s") and (len(args) < 3 or not _starts_with_digit(args[1])):
        usage(PROG_NAME)
        return 1
    if command == "e" and len(args) >= 2 and not _starts_with_digit(args[1]):
        usage(PROG_NAME)
        return 1

    try:
        with mido.open_output(output_name) as output:
            kronos = Kronos(opts.channel, output)
            file_editor = FileEditor(opts.format)
            with mido.open_input(input_name, callback=kronos.receive_midi):
                try:
                    return _run_command(command, args, opts, kronos, file_editor)
                except (KronosError, ValueError) as err:
                    print(f"error: {err}", file=sys.stderr)
                    return 1
                finally:
                    kronos.close()
    except OSError as err:
        print(f"error: can't open MIDI port: {err}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())