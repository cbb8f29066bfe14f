# cubkit

Building blocks for a small raycasting game: the parts that run before
the first frame is drawn.

- **XPM textures** (`cubkit.xpm`): decode XPM images from a file, from text or
  from a sequence of strings, and read pixels back as `0xAARRGGBB` integers.
- **Colour names** (`cubkit.colors`): look up X11 colour names such as
  `"snow"` or `"light goldenrod"`, ignoring ASCII case.
- **Line reading** (`cubkit.lines`): read a text or binary stream line by line
  through a fixed-size buffer, keeping the trailing newline.
- **Text helpers** (`cubkit.textutils`, `cubkit.chars`): integer parsing and
  formatting, splitting, trimming, bounded search and comparison, ASCII
  character classes and small output helpers.
- **Argument checks** (`cubkit.arguments`): validate a command line that names
  one `.cub` map file.

The package uses only the standard library.

## Textures

```python
from cubkit.xpm import load_xpm, parse_xpm, XpmError

image = parse_xpm([
    "2 1 2 1",
    "a c #ff0000",
    "b c blue",
    "ab",
])
image.pixel(0, 0)   # 0xFF0000
image.pixel(1, 0)   # 0x0000FF

try:
    wall = load_xpm("textures/north.xpm")
except XpmError as error:
    print(f"cannot load texture: {error}")
```

`parse_xpm` takes the XPM strings themselves: the header
(`width height colours chars-per-pixel`), the colour lines, then one string
per pixel row. `parse_xpm_text` takes the whole contents of an `.xpm` file,
quotes, commas and comments included, and `load_xpm` reads such a file from
disk. The result is an `XpmImage` with `width`, `height` and a row-major
`pixels` tuple; `pixel(x, y)` raises `IndexError` outside the image.

Colour entries are resolved by `text_to_rgb`: `#rrggbb` hexadecimal or a
colour name, possibly split over two words. Unknown names give black (0), and
the `None` colour is stored as `cubkit.xpm.TRANSPARENT` (`0xFF000000`).
Malformed data (a short header, non-positive header values, a colour line
without a `c` key, missing rows) raises `XpmError`, as does a file that cannot
be read.

`strip_comments`, `find_unquoted` and `split_words` are the helpers the text
parser is built from: they blank out comments outside quoted strings, find a
substring outside quotes, and split on spaces and tabs.

## Colour names

```python
from cubkit.colors import lookup_color

lookup_color("Snow")      # 0xFFFAFA
lookup_color("none")      # -1
lookup_color("nosuch")    # None
```

## Reading lines

```python
from cubkit.lines import LineReader, read_lines

with open("maps/level.cub") as stream:
    for line in LineReader(stream, 42):
        ...

with open("maps/level.cub") as stream:
    lines = read_lines(stream, 42)
```

Each line keeps its `"\n"`; the last line of a stream without a final newline
comes back without one. `LineReader.readline()` returns `None` once the stream
is exhausted. The buffer size defaults to 42 and must be positive.

## Text helpers

```python
from cubkit.textutils import atoi, itoa, split, trim, is_digits
from cubkit.chars import is_digit, to_upper, write_line

atoi("  -42abc")          # -42
itoa(-7)                  # "-7"
split("220,100,0", ",")   # ["220", "100", "0"]
trim("  NO  ", " ")       # "NO"
is_digits("255")          # True
is_digit("7")             # True
to_upper("a")             # "A"
```

`atoi` skips leading whitespace, stops at the first non-digit and wraps
like a 32-bit signed integer. `split` drops empty words. `substring(text,
start, length)` returns an empty string for a start past the end.
`find_bounded(haystack, needle, limit)` returns the index of the first match
lying wholly within the first `limit` characters, or -1. `compare_prefix`
compares at most `limit` bytes (text as UTF-8) and returns a value whose sign
orders the first differing byte.

The predicates and case mappings in `cubkit.chars` accept a one-character
string or an integer code and cover ASCII only. `write_number`, `write_text`
and `write_line` write to any text stream, standard output by default;
`None` text writes nothing.

## Checking arguments

```python
import sys
from cubkit.arguments import validate_arguments, ArgumentError

try:
    map_path = validate_arguments(sys.argv)
except ArgumentError as error:
    print(error.report, file=sys.stderr)
    sys.exit(1)
```

`check_argument_count` and `check_map_path` perform the two checks one at a
time: exactly one argument after the program name, and a path that ends in
`.cub` and can be opened for reading. `ArgumentError.report` is the message
prefixed with an `Error` line.

## What this package does not do

There is no game here: no window, no raycasting renderer, no player movement
and no parsing or validation of the contents of `.cub` maps. The package
provides the texture, colour, line-reading, text and argument-checking pieces
such a program is built on, and no command to run.