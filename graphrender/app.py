"""The application window, its input handling and main loop."""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass
from typing import Any, Sequence

from .camera import Camera, CameraMovement
from .gl_utils import check_errors
from .gui import Gui
from .renderer import Renderer

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
DEFAULT_TITLE = "Graph Renderer"


class WindowError(RuntimeError):
    """The window or its OpenGL context could not be created."""


@dataclass
class MouseTracker:
    """Turns cursor positions into offsets; y grows downwards, offsets upwards."""

    last_x: float = SCREEN_WIDTH / 2.0
    last_y: float = SCREEN_HEIGHT / 2.0
    first: bool = True

    def update(self, x: float, y: float) -> tuple[float, float]:
        """Record the cursor at ``(x, y)`` and return how far it moved."""
        if self.first:
            self.last_x, self.last_y = x, y
            self.first = False
        xoffset = x - self.last_x
        yoffset = self.last_y - y
        self.last_x, self.last_y = x, y
        return xoffset, yoffset


class App:
    """Opens the window and runs the render loop until it is closed."""

    def __init__(
        self,
        width: int = SCREEN_WIDTH,
        height: int = SCREEN_HEIGHT,
        title: str = DEFAULT_TITLE,
    ) -> None:
        self.width = width
        self.height = height
        self.title = title
        self.camera = Camera()
        self.mouse = MouseTracker()
        self._cursor_x = 0.0
        self._cursor_y = 0.0
        self._should_close = False
        self._clock = time.perf_counter

        self.window = self._create_window()

        from pyglet.window import key

        self._keys = key.KeyStateHandler()
        self.window.push_handlers(self._keys)
        self.window.push_handlers(
            on_mouse_motion=self._on_mouse_motion,
            on_mouse_drag=self._on_mouse_drag,
            on_mouse_scroll=self._on_mouse_scroll,
            on_close=self._on_close,
        )
        self.window.set_exclusive_mouse(True)

        self.renderer = Renderer(self.window, clock=self._clock)
        self.renderer.init()
        self.gui = Gui(self.window)

    def _create_window(self) -> Any:
        import pyglet
        from pyglet.gl import ContextException
        from pyglet.window import NoSuchConfigException

        config = pyglet.gl.Config(
            major_version=3,
            minor_version=3,
            forward_compatible=True,
            double_buffer=True,
            depth_size=24,
        )
        try:
            return pyglet.window.Window(
                width=self.width,
                height=self.height,
                caption=self.title,
                resizable=True,
                config=config,
            )
        except (NoSuchConfigException, ContextException) as exc:
            raise WindowError("Failed to create window") from exc

    def __enter__(self) -> App:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def run(self) -> None:
        """Render frames until the window is asked to close."""
        last_frame = self._clock()
        while not self._should_close:
            current_frame = self._clock()
            delta_time = current_frame - last_frame
            last_frame = current_frame

            self._process_input(delta_time)

            self.gui.begin_frame()
            self.renderer.render(self.camera, delta_time)
            self.gui.end_frame()

            self.window.flip()
            self.window.dispatch_events()
            check_errors()

    def close(self) -> None:
        """Release GPU resources and close the window."""
        self.renderer.delete()
        self.window.close()

    def _process_input(self, delta_time: float) -> None:
        from pyglet.window import key

        if self._keys[key.ESCAPE]:
            self._should_close = True

        bindings = (
            (key.W, CameraMovement.FORWARD),
            (key.S, CameraMovement.BACKWARD),
            (key.A, CameraMovement.LEFT),
            (key.D, CameraMovement.RIGHT),
        )
        for symbol, movement in bindings:
            if self._keys[symbol]:
                self.camera.process_keyboard(movement, delta_time)

    def _on_mouse_motion(self, x: int, y: int, dx: int, dy: int) -> None:
        # The cursor is captured, so follow a virtual cursor built from the deltas.
        self._cursor_x += dx
        self._cursor_y -= dy
        xoffset, yoffset = self.mouse.update(self._cursor_x, self._cursor_y)
        self.camera.process_mouse_movement(xoffset, yoffset)

    def _on_mouse_drag(self, x: int, y: int, dx: int, dy: int, buttons: int, modifiers: int) -> None:
        self._on_mouse_motion(x, y, dx, dy)

    def _on_mouse_scroll(self, x: int, y: int, scroll_x: float, scroll_y: float) -> None:
        self.camera.process_mouse_scroll(float(scroll_y))

    def _on_close(self) -> bool:
        self._should_close = True
        return True


def main(argv: Sequence[str] | None = None) -> int:
    """Open the renderer window and run until it is closed."""
    parser = argparse.ArgumentParser(
        prog="graphrender",
        description="Render animated mathematical surfaces as a grid of cubes.",
    )
    parser.parse_args(argv)

    try:
        app = App()
    except WindowError as exc:
        print(exc, file=sys.stderr)
        return 1

    with app:
        app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())