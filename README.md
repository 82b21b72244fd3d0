# kronut

Tools for working with Korg Kronos set lists over MIDI. With `kronut` you can
save a set list from the instrument to an editable text file (Org Mode or
Markdown), load such a file back into a set list, and edit the name and
comments of the current slot in your own text editor.

## Installation

```
pip install .
```

This installs the `kronut` command. MIDI I/O goes through `mido`, which needs
a MIDI backend such as `python-rtmidi` installed alongside it.

## Usage

```
kronut [-c N] [-f FORMAT] [-i N] [-o N] [-s] [-d] [-h] COMMAND [args]
```

Options:

- `-c, --channel N`: Kronos global MIDI channel (1-16, default 1)
- `-f, --format FMT`: `o` (Org Mode, default), `m` (Markdown) or `h` (hex dump)
- `-i, --input N`: input port number (found automatically by default)
- `-o, --output N`: output port number (found automatically by default)
- `-s, --skip-empty`: skip empty slots when saving
- `-d, --debug`: print debug messages to standard error

Commands:

- `kronut list`: list all MIDI input and output ports, numbered
- `kronut save N FILE`: read set list N from the Kronos and save it to FILE
- `kronut load N FILE`: read FILE into set list N and store it on the Kronos
- `kronut edit [N]`: start the slot text editor, optionally moving to set list N first
- `kronut help`: show usage

When no port numbers are given, `kronut` looks for the ports named
"Kronos KEYBOARD" (input) and "Kronos SOUND" (output).

### Set list files

A saved file starts with a level-1 header holding the set list name, followed
by a settings table. Each slot then has a level-2 header with its name, any
comment text, and a settings table. In Markdown:

```
# My Set List

|--------------|--------------------|
| Setting      | Value              |
|--------------|--------------------|
| Slots/Page   | 16                 |
| EQ Bypass    | true (EQ off)      |
...
|--------------|--------------------|
```

Org Mode files use `*` for headers and `+` where the separator lines meet the
middle column.

Set list settings are `Slots/Page`, `EQ Bypass`, `Band Levels`,
`Surface Mode` and `Surface Asgn`. Slot settings are `Performance` (for
example `Prog INT-E 123`), `Color`, `Font`, `Transpose`, `Volume`,
`Hold Time` and `Kbd Track`. Edit names, comments and table values, then load
the file back with `kronut load`. Loading starts from an empty set list, so
slots missing from the file come back empty.

The hex dump format (`-f h`) is for inspecting the raw set list bytes; it
can only be written, not loaded.

### The slot text editor

`kronut edit` gives a prompt with these commands:

- `e`: edit the current slot's name and comments
- `r`: re-edit the last text without reading from the Kronos
- `p`: print the current slot
- `d`: dump the current slot's raw data
- `s`: print all slot names in the current set list
- `h` or `?`: help
- `q`: quit

The editor comes from `KRONUT_TEXT_EDITOR`, then `VISUAL`, then `EDITOR`,
and otherwise `vi`. Extra options can be given in
`KRONUT_TEXT_EDITOR_OPTIONS`, `KRONUT_VISUAL_OPTIONS`,
`KRONUT_EDITOR_OPTIONS` or `KRONUT_VI_OPTIONS`, matching the editor chosen.
The text is edited in `kronut_editor.md` in the system temporary directory.

A slot name holds at most 24 characters and comments hold at most 512. Text
that is too long is not sent to the Kronos; type `r` to edit it again.

## Library use

Working with set list files:

```python
from kronut.file_editor import FileEditor, FileFormat

editor = FileEditor(FileFormat.MARKDOWN)
editor.load_set_list_from_file("set_list.md")
print(editor.set_list.name)
for slot in editor.set_list.slots[:4]:
    print(slot.name, slot.performance_name, slot.color_name)
```

Talking to the instrument, with replies fed in through the input port's
callback:

```python
import mido
from kronut.kronos import Kronos

with mido.open_output("Kronos SOUND") as output:
    kronos = Kronos(0, output)
    with mido.open_input("Kronos KEYBOARD", callback=kronos.receive_midi):
        set_list = kronos.read_set_list(3)
        print(set_list.name)
        kronos.close()
```

Requests raise `kronut.kronos.KronosError` when the Kronos answers with an
error or does not answer within the timeout (five seconds by default).