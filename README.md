# stripcast

stripcast draws frames for a wall of vertical LED strips and sends each frame
as raw RGB bytes over UDP to two controllers.

By default the wall is 12 columns of strips, each 60 pixels tall. Every frame
is rotated so that one strip becomes one row (read bottom to top), and then
split into two packets:

* columns 0–7 go to the first controller as a 60×8 RGB block
* columns 8 onward go to the second controller as a 60×8 RGB block, whose
  rows 4–7 are always black

Each packet is `60 * 8 * 3` bytes of plain RGB data, row by row. The default
targets are `192.168.1.179:8888` and `192.168.1.180:8888`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
stripcast
```

This starts the built-in test pattern and streams it to the default targets
until interrupted. The pattern is a rising "staircase" of white pixels with a
red column that moves one column along every 20 frames and wraps around at the
last column.

Options:

* `--frames N` – send N frames and stop (default: run forever)
* `--fps RATE` – frames per second (default 60); `0` sends as fast as possible

## Using it as a library

`stripcast.pixels` has `Color`, a frozen 8-bit RGB value, and `Frame`, a
black-initialised RGB buffer with `get`, `set`, `fill_rect` (clipped to the
frame), `clear` and `to_bytes`.

```python
from stripcast.pixels import Color, Frame
from stripcast.sender import UDPSender, transform_frame, split_frame

frame = Frame(12, 60)
frame.fill_rect(0, 0, 1, 60, Color(255, 0, 0))

first, second = split_frame(frame, 60)   # two 60x8 frames

with UDPSender(12, 60, 1, targets=[("127.0.0.1", 8888), ("127.0.0.1", 8889)]) as sender:
    sender.send_frame(frame)
```

`UDPSender` needs exactly two targets. It uses a non-blocking socket unless one
is passed as `sock`; a send that would block is dropped. `send_frame` raises
`ValueError` if the frame's width is not the configured number of columns, and
`split_frame` raises it if there are more than 16 columns or the frame height
is not the strip height.

The pattern scene and the state machine can be driven on their own:

```python
from stripcast.pixels import Frame
from stripcast.shared import SharedData
from stripcast.states import StateMachine, TestState

shared = SharedData(num_columns=12, strip_height=60, strip_width=1)
machine = StateMachine(shared)
machine.add_state(TestState(shared))
machine.change_state("TestState")

frame = Frame(12, 60)
machine.update(0)
machine.draw(frame)
```

`add_state` calls the scene's `setup` and refuses a name that is already
present; `change_state` raises `KeyError` for an unknown name.

`stripcast.app.App` ties these together: `setup()` configures the shared data,
the test scene, the frame and (if none was given) a sender to the default
targets; `update()` advances, draws and sends one frame; `run(frames, fps)`
loops.

`preview_labels(num_columns)` gives the labels of the columns: `A1`, `A2`, …
for the first half and `B1`, `B2`, … for the second.

## What it does not do

stripcast has no display: it does not open a window or draw an on-screen
preview, it only computes the preview labels. It has a single built-in scene,
the test pattern. `SharedData` carries fields for audio analysis (`rms`,
`magnitudes`, `spectral_centroid` and so on), but nothing in the package
captures or analyses audio to fill them.