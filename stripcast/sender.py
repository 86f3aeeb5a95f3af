"""Reorders rendered frames for the LED controllers and sends them over UDP."""

from __future__ import annotations

import socket
from typing import Sequence

from .pixels import BLACK, Frame

DEFAULT_TARGETS: tuple[tuple[str, int], ...] = (
    ("192.168.1.179", 8888),
    ("192.168.1.180", 8888),
)
ROWS_PER_PACKET = 8
SECOND_PACKET_ROWS = 4


def transform_frame(frame: Frame, strip_height: int) -> Frame:
    """Rotate a columns x strip_height frame into strip_height x columns.

    Column y of the input becomes row y of the output, read bottom to top.
    """
    if frame.height != strip_height:
        raise ValueError(f"frame height {frame.height} does not match strip height {strip_height}")
    out = Frame(strip_height, frame.width)
    for y in range(frame.width):
        for x in range(strip_height):
            out.set(strip_height - x - 1, y, frame.get(y, x))
    return out


def split_frame(frame: Frame, strip_height: int) -> tuple[Frame, Frame]:
    """Rotate a frame and split it into two packets of eight strips each.

    The first eight strips go to the first packet, the rest to the second,
    whose rows from SECOND_PACKET_ROWS onward are always black.
    """
    transformed = transform_frame(frame, strip_height)
    if transformed.height > 2 * ROWS_PER_PACKET:
        raise ValueError(f"at most {2 * ROWS_PER_PACKET} columns fit in two packets")
    first = Frame(strip_height, ROWS_PER_PACKET)
    second = Frame(strip_height, ROWS_PER_PACKET)
    for y in range(transformed.height):
        target, row = (first, y) if y < ROWS_PER_PACKET else (second, y - ROWS_PER_PACKET)
        for x in range(strip_height):
            target.set(x, row, transformed.get(x, y))
    second.fill_rect(0, SECOND_PACKET_ROWS, strip_height, ROWS_PER_PACKET - SECOND_PACKET_ROWS, BLACK)
    return first, second


def preview_labels(num_columns: int) -> list[str]:
    """Labels for the preview: A1.. for the first half of the columns, B1.. for the rest."""
    half = num_columns // 2
    return [f"A{i + 1}" if i < half else f"B{i - half + 1}" for i in range(num_columns)]


class UDPSender:
    """Sends each frame as two raw RGB packets to two controllers."""

    def __init__(
        self,
        num_columns: int,
        strip_height: int,
        strip_width: int,
        targets: Sequence[tuple[str, int]] | None = None,
        sock: socket.socket | None = None,
    ) -> None:
        self.num_columns = num_columns
        self.strip_height = strip_height
        self.strip_width = strip_width
        self.targets = tuple(targets) if targets is not None else DEFAULT_TARGETS
        if len(self.targets) != 2:
            raise ValueError("exactly two targets are required")
        if sock is None:
            sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
            sock.setblocking(False)
        self.sock = sock
        self.outputs: tuple[Frame, Frame] | None = None
        self.labels = preview_labels(num_columns)

    def send_frame(self, frame: Frame) -> tuple[Frame, Frame]:
        """Split the frame and send both halves; returns the two packets' frames."""
        if frame.width != self.num_columns:
            raise ValueError(f"frame width {frame.width} does not match {self.num_columns} columns")
        self.outputs = split_frame(frame, self.strip_height)
        for packet, target in zip(self.outputs, self.targets):
            try:
                self.sock.sendto(packet.to_bytes(), target)
            except BlockingIOError:
                pass  # a dropped frame is acceptable; the next one follows shortly
        return self.outputs

    def close(self) -> None:
        self.sock.close()

    def __enter__(self) -> UDPSender:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()