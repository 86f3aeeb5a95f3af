"""Scenes that draw into a frame, and the machine that switches between them."""

from __future__ import annotations

from itertools import cycle, islice
from typing import Protocol

from .pixels import BLACK, BLUE, GREEN, RED, WHITE, YELLOW, Color, Frame
from .shared import SharedData

STEP_FRAMES = 20
_PALETTE = (RED, GREEN, BLUE, YELLOW)


class State(Protocol):
    name: str

    def setup(self) -> None: ...

    def update(self, frame_num: int) -> None: ...

    def draw(self, frame: Frame) -> None: ...


class TestState:
    """A test pattern: a white staircase with a red column that steps across."""

    __test__ = False
    name = "TestState"

    def __init__(self, shared: SharedData) -> None:
        self.shared = shared
        self.num_columns = 0
        self.strip_height = 0
        self.strip_width = 0
        self.colors: list[Color] = []
        self.cnt = 0

    def setup(self) -> None:
        self.num_columns = self.shared.num_columns
        self.strip_height = self.shared.strip_height
        self.strip_width = self.shared.strip_width
        self.colors = list(islice(cycle(_PALETTE), self.num_columns))
        self.cnt = 0

    def update(self, frame_num: int) -> None:
        """Advance the red column every STEP_FRAMES frames, wrapping at the end."""
        if frame_num % STEP_FRAMES == 0:
            self.cnt = 0 if self.cnt == self.num_columns - 1 else self.cnt + 1

    def draw(self, frame: Frame) -> None:
        frame.fill_rect(0, 0, self.num_columns, self.strip_height, BLACK)
        for i in range(self.num_columns):
            frame.fill_rect(i, self.strip_height - i - 1, self.strip_width, i + 1, WHITE)
        frame.fill_rect(self.cnt, 0, self.strip_width, self.strip_height, RED)


class StateMachine:
    """Holds named scenes and forwards update and draw to the current one."""

    def __init__(self, shared: SharedData) -> None:
        self.shared = shared
        self.states: dict[str, State] = {}
        self.current: State | None = None

    def add_state(self, state: State) -> State:
        if state.name in self.states:
            raise ValueError(f"state already added: {state.name}")
        self.states[state.name] = state
        state.setup()
        return state

    def change_state(self, name: str) -> State:
        try:
            self.current = self.states[name]
        except KeyError:
            raise KeyError(f"unknown state: {name}") from None
        return self.current

    def update(self, frame_num: int) -> None:
        if self.current is not None:
            self.current.update(frame_num)

    def draw(self, frame: Frame) -> None:
        if self.current is not None:
            self.current.draw(frame)