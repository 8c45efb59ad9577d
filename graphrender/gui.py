"""On-screen overlay showing the frame rate."""

from __future__ import annotations

import math
import time
from collections import deque
from typing import Any

FRAME_WINDOW = 60
MARGIN = 10
FONT_SIZE = 12
TEXT_COLOR = (255, 255, 255, 255)


def fps_text(framerate: float) -> str:
    """The frame-time line shown in the overlay."""
    ms = 1000.0 / framerate if framerate > 0 else math.inf
    return f"Application average {ms:.3f} ms/frame ({framerate:.1f} FPS)"


class Gui:
    """Measures frame times and draws the FPS panel over the scene."""

    def __init__(self, window: Any) -> None:
        self.window = window
        self._clock = time.perf_counter
        self._last: float | None = None
        self._deltas: deque[float] = deque(maxlen=FRAME_WINDOW)
        self._label: Any = None

    @property
    def framerate(self) -> float:
        """Frames per second averaged over the last frames; 0 before any are timed."""
        total = sum(self._deltas)
        return len(self._deltas) / total if total > 0 else 0.0

    def begin_frame(self) -> None:
        """Mark the start of a frame."""
        now = self._clock()
        if self._last is not None:
            self._deltas.append(now - self._last)
        self._last = now

    def _ensure_label(self) -> Any:
        if self._label is None:
            import pyglet.text

            self._label = pyglet.text.Label(
                "",
                x=MARGIN,
                y=self.window.height - MARGIN,
                anchor_x="left",
                anchor_y="top",
                font_size=FONT_SIZE,
                color=TEXT_COLOR,
            )
        return self._label

    def end_frame(self) -> None:
        """Draw the FPS panel on top of what has been rendered."""
        if self.window is None:
            raise RuntimeError("Gui has no window to draw on")
        from pyglet import gl

        label = self._ensure_label()
        label.text = fps_text(self.framerate)
        label.y = self.window.height - MARGIN

        depth_test = gl.glIsEnabled(gl.GL_DEPTH_TEST)
        gl.glDisable(gl.GL_DEPTH_TEST)
        label.draw()
        if depth_test:
            gl.glEnable(gl.GL_DEPTH_TEST)