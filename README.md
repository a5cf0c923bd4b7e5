# ourpaint

Building blocks for a small collaborative 2D CAD editor: mapping between
logical and screen coordinates, the wire format used to share a drawing
session, console command completion and history, the model behind the
figure and requirement side panel, window frame geometry, and a helper that
picks a contrasting frame colour.

Everything is plain Python with no dependencies outside the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `ourpaint.scaling`

`Scaling(width, height)` holds a window scale, a zoom factor and an integer
panning offset (`delta_x`, `delta_y`).

- `scale_coordinate`, `scale_coordinate_x`, `scale_coordinate_y` map logical
  values to the screen; `logic`, `logic_x`, `logic_y` map back.
- `fit(widget_width, widget_height, bounds)` sets the scale for the widget size
  and, unless the user has zoomed or panned, shrinks the zoom so that
  `bounds = (max_x, min_x, max_y, min_y)` fits with a 10% margin. Pass an empty
  sequence to only update the scale.
- `zoom_in(max_zoom)` and `zoom_out()` change the zoom by a factor of 1.1.
  `reset_zoom()` sets the zoom back to 1 and clears the offset.
- `start_mouse_press(pos)`, `mouse_move(pos)` and `end_mouse_press()` pan the
  view while the right button is held. `shift(dx, dy)` adds to the offset
  directly.
- `users_resize` records that the user zoomed or panned. `reset_users_resize()`
  clears it.

### `ourpaint.protocol`

- `encode_qstring(text)` frames a string as a 4-byte big-endian byte length
  followed by UTF-16BE data. `None` encodes the null string.
- `StreamDecoder().feed(data)` buffers bytes and returns every string that is
  now complete. `pending` is the number of bytes still buffered. A frame with
  an odd byte length raises `ValueError`.
- `format_chat(name, message)` builds a `CHAT|name|message` line.
- `parse_client_message(text)` returns a `ChatMessage`, a `ShutdownNotice`
  (for `SERVER_SHUTDOWN`) or a `StateUpdate`.
- `parse_server_message(text)` returns a `ChatMessage` or a `Command`.

### `ourpaint.console`

- `Autocompleter(commands)` suggests the first command that starts with the
  typed text, ignoring case. The default commands are `circle `, `exit`,
  `addreq `, `section `, `point ` and `clear`. The methods are
  `update(text)`, `hint(text)` (the part shown after the typed text) and
  `accept()` (as the Tab key does).
- `CommandHistory` stores entered commands. `previous()` and `next()` step
  through them as the Up and Down keys do, and return `None` while the history
  is empty.

### `ourpaint.leftmenu`

- `LeftMenu` lists figures and requirements. `add_figure(id, text, params)`
  makes the name unique (`Point`, `Point1`, `Point2`, ...).
  `add_requirement(id, text, id1, id2, parameter)` lists a requirement. A
  `text` of `"Clear"` empties the list instead of adding to it.
  `figure_names()` and `requirement_names()` map ids to shown names.
- `FigureEntry.lines` and `RequirementEntry.lines` are the field lines shown
  under an entry, such as `ID: 3` and `X: 1.000000`.
- `parse_figure_lines(lines)` reads the id and numeric parameters back from
  such lines.

### `ourpaint.window`

- `resize_edges(x, y, width, height, margin)` returns the `Edge` flags near a
  position inside the window.
- `cursor_for_edges(edges)` picks a `CursorShape`.
- `resize_rect(rect, edges, dx, dy)` moves the grabbed edges of a `Rect`.
- `snap_geometry(key, current, screen, maximized)` gives the new geometry for
  Ctrl+arrow (`SnapKey`). The result is a `Rect`, or one of the strings
  `MAXIMIZE`, `RESTORE` or `MINIMIZE`.

### `ourpaint.colors`

- `average_color(rows)` averages an image given as rows of `(r, g, b)` pixels.
  Large images are sampled on a grid.
- `relative_luminance`, `contrast_color` and `choose_frame_color(rows)` choose
  black or white, whichever contrasts more with the background. An empty image
  gives white.

## Example

```python
from ourpaint.protocol import StreamDecoder, encode_qstring, format_chat, parse_client_message
from ourpaint.scaling import Scaling

view = Scaling(800, 600)
view.fit(800, 600, [])
view.zoom_in(4.0)                  # zoom is now about 1.1
print(view.logic_x(view.scale_coordinate_x(10.0)))  # about 10.0

decoder = StreamDecoder()
frame = encode_qstring(format_chat("alice", "hello"))
for text in decoder.feed(frame):
    print(parse_client_message(text))  # ChatMessage(name='alice', message='hello')
```

## What this package does not do

It has no model of the drawing itself: no points, sections or circles, and no
requirements solver. It has no TCP server or client that carries the session
over the network, and no parser that runs console commands. It defines the
wire format, the console completion and the panel model those would use. It
draws nothing on screen and provides no window, and it has no command-line
entry point.