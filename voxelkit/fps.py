"""Frame-rate counter reporting once per second."""

from __future__ import annotations

import math
import sys
from typing import TextIO

__all__ = ["FPSCounter"]


class FPSCounter:
    """Counts frames and reports the rate and the slowest frame each second."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream
        self.fps = 0
        self.min_fps = 0
        self.frames = 0
        self.total_time = 0.0

    def update(self, delta_time: float) -> bool:
        """Record one frame; True when a second elapsed and a report was printed."""
        self.frames += 1
        self.total_time += delta_time
        rate = 1.0 / delta_time if delta_time != 0 else math.inf
        self.min_fps = int(min(float(self.min_fps), rate))
        if self.total_time < 1.0:
            return False
        self.fps = self.frames
        print(f"fps: {self.fps} | {self.min_fps}", file=self.stream or sys.stdout)
        self.frames = 0
        self.min_fps = self.fps
        self.total_time = 0.0
        return True