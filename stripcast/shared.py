"""State shared between the application and its scenes."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class SharedData:
    """Layout settings and audio analysis values available to every scene."""

    num_columns: int = 0
    strip_height: int = 0
    strip_width: int = 0
    max_white: int = 0
    mid_white: int = 0
    gui_x: int = 0
    gui_y: int = 0
    magnitudes: list[float] = field(default_factory=list)
    bins: int = 0
    rms: float = 0.0
    peak_detected: bool = False
    left: list[float] = field(default_factory=list)
    right: list[float] = field(default_factory=list)
    spectral_centroid: float = 0.0