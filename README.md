# kbdmodels

Plain-Python data models for a virtual on-screen keyboard. The package
describes the keys and key areas of a layout, holds the text being edited,
keeps the list of word candidates shown above the keys, and reads style
attributes from INI-style settings files. It uses only the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

- `kbdmodels.area`: frozen geometry values `Size` (default `(-1, -1)`, which
  is invalid; `is_valid()`, `is_empty()`), `Point`, `Rect`
  (`from_origin_size()`, `origin()`, `size()`) and `Margins`, plus `Area`,
  which combines a size, a background image name (bytes) and background borders.
- `kbdmodels.key`: `Key` with its `Action` and `Style` enums. `Key.valid()` is
  true when the area size is valid and the key is not an unlabelled commit key;
  `Key.rect()` gives its rectangle. Keys compare equal on origin, area, label
  and icon.
- `kbdmodels.keyarea`: `KeyArea`, a list of keys with an origin and an area,
  with `has_keys()` and `rect()`.
- `kbdmodels.keydescription`: `KeyDescription` and `Keyboard`, along with the
  `Width`, `Icon`, `State` and `FontGroup` enums.
- `kbdmodels.text`: `Text`, the preedit, surrounding text, primary candidate,
  preedit face and cursor position of the editor. It provides `set_preedit`,
  `append_to_preedit`, `remove_from_preedit` (raises `ValueError` and leaves the
  preedit unchanged when the length is not positive or too large),
  `commit_preedit`, `surrounding_left` and `surrounding_right`.
- `kbdmodels.wordcandidate`: `WordCandidate` and its `Source` enum. A candidate
  from `Source.USER` gets the label `Add '<word>' to user dictionary`; others
  are labelled with the word itself.
- `kbdmodels.signals`: a small `Signal` class with `connect`, `disconnect`
  (raises `ValueError` for a slot that is not connected) and `emit`. The models
  use it to announce changes.
- `kbdmodels.wordribbon`: `WordRibbon`, a list model of word candidates with a
  single `word` role. Releasing a prediction or spell-checking candidate emits
  `word_candidate_selected`; releasing a user candidate emits
  `user_candidate_selected`.
- `kbdmodels.layout`: `Layout`, a list model over a `KeyArea` with one row per
  key, the `Role` enum for per-key data (`data()`, `data_by_name()`),
  `LayoutState`, and signals for title, geometry, background, visibility and
  state changes. `replace_key()` raises `IndexError` for an index out of range.
- `kbdmodels.styleconv`: the `Orientation` enum, conversions of widths, icons,
  styles and states to their setting-name parts, `parse_margins()`,
  `build_key()`, `lookup()` (falls back to the `default` style) and
  `load_ini_store()`, which reads an INI file into a flat `"section/key"`
  mapping.
- `kbdmodels.styleattributes`: `StyleAttributes`, which reads image names,
  borders, icons, fonts, sizes, margins and sound names from such a mapping.
  The font name defaults to `b"Nokia Pure"`. A key-area width written with `%`
  is taken relative to the `screen_width` given to the constructor.

## Example

```python
from kbdmodels.area import Area, Point, Size
from kbdmodels.key import Key
from kbdmodels.keyarea import KeyArea
from kbdmodels.layout import Layout, Role
from kbdmodels.text import Text

key = Key()
key.origin = Point(10, 20)
key.area = Area(size=Size(40, 50))
key.label = "a"
assert key.valid()

layout = Layout()
layout.set_key_area(KeyArea(keys=[key], area=Area(size=Size(480, 200))))
assert layout.row_count() == 1
assert layout.data(0, Role.KEY_TEXT) == "a"

text = Text()
text.set_preedit("hel", -1)
text.append_to_preedit("lo")
text.commit_preedit()
assert text.surrounding == "hello"
```

## What it does not do

The package only holds and reports keyboard state. It draws nothing, handles
no touch or key events, has no word engine or spell checker to produce
candidates, plays no sounds and loads no layout files; the caller supplies keys,
candidates and settings and connects to the signals to react to changes.