"""The application loop: render the current scene and stream it to the strips."""

from __future__ import annotations

import argparse
import itertools
import time

from .pixels import Frame
from .sender import UDPSender
from .shared import SharedData
from .states import StateMachine, TestState

STRIP_HEIGHT = 60
STRIP_WIDTH = 1
NUM_COLUMNS = 12
PREVIEW_SCALE = 4
WINDOW_WIDTH = 1024
MAX_WHITE = 255
MID_WHITE = 127
DEFAULT_FPS = 60


class App:
    """Renders the active scene into a frame each tick and sends it."""

    def __init__(self, sender: UDPSender | None = None) -> None:
        self.sender = sender
        self.shared = SharedData()
        self.state_machine = StateMachine(self.shared)
        self.frame: Frame | None = None
        self.frame_num = 0

    def setup(self) -> None:
        self.shared.strip_height = STRIP_HEIGHT
        self.shared.strip_width = STRIP_WIDTH
        self.shared.num_columns = NUM_COLUMNS
        self.shared.gui_x = WINDOW_WIDTH - 250
        self.shared.gui_y = 40
        self.shared.max_white = MAX_WHITE
        self.shared.mid_white = MID_WHITE

        self.state_machine.add_state(TestState(self.shared))
        self.state_machine.change_state("TestState")

        self.frame = Frame(NUM_COLUMNS, STRIP_HEIGHT)
        if self.sender is None:
            self.sender = UDPSender(NUM_COLUMNS, STRIP_HEIGHT, STRIP_WIDTH)

    def update(self) -> None:
        """Advance the scene, render it, and send the frame."""
        if self.frame is None or self.sender is None:
            raise RuntimeError("setup() must be called before update()")
        self.state_machine.update(self.frame_num)
        self.frame.clear()
        self.state_machine.draw(self.frame)
        self.sender.send_frame(self.frame)
        self.frame_num += 1

    def run(self, frames: int | None = None, fps: float | None = DEFAULT_FPS) -> None:
        """Run for a number of frames (forever if None), paced at fps when given."""
        if self.frame is None:
            self.setup()
        interval = 1.0 / fps if fps else 0.0
        ticks = itertools.count() if frames is None else range(frames)
        deadline = time.monotonic()
        for _ in ticks:
            self.update()
            if interval:
                deadline += interval
                delay = deadline - time.monotonic()
                if delay > 0:
                    time.sleep(delay)
                else:
                    deadline = time.monotonic()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="stripcast", description="Stream a test pattern to LED strips over UDP.")
    parser.add_argument("--frames", type=int, default=None, help="number of frames to send (default: run forever)")
    parser.add_argument("--fps", type=float, default=DEFAULT_FPS, help="frames per second, 0 for unthrottled")
    args = parser.parse_args(argv)

    with UDPSender(NUM_COLUMNS, STRIP_HEIGHT, STRIP_WIDTH) as sender:
        app = App(sender)
        try:
            app.run(frames=args.frames, fps=args.fps)
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())