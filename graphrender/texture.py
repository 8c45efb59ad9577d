"""2D textures loaded from image files."""

from __future__ import annotations

import io
from pathlib import Path

import numpy as np

from .gl_utils import check_errors

GL_RED = 0x1903
GL_RGB = 0x1907
GL_RGBA = 0x1908

_CHANNEL_FORMATS = {1: GL_RED, 3: GL_RGB, 4: GL_RGBA}
_COMPONENTS = {GL_RED: "L", GL_RGB: "RGB", GL_RGBA: "RGBA"}


def pixel_format(channels: int) -> int:
    """The OpenGL pixel format for an image with ``channels`` channels (RGB by default)."""
    return _CHANNEL_FORMATS.get(channels, GL_RGB)


class Texture:
    """A mipmapped, repeating 2D texture, with its bottom row first."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        try:
            raw = self.path.read_bytes()
        except OSError as exc:
            raise OSError(f"Failed to load texture: {path}") from exc

        import pyglet.image
        from pyglet import gl
        from pyglet.image.codecs import ImageDecodeException

        try:
            image = pyglet.image.load(self.path.name, file=io.BytesIO(raw)).get_image_data()
        except ImageDecodeException as exc:
            raise OSError(f"Failed to load texture: {path}") from exc

        self.width = image.width
        self.height = image.height
        self.channels = len(image.format)
        fmt = pixel_format(self.channels)
        components = _COMPONENTS[fmt]
        pixels = np.frombuffer(
            image.get_data(components, self.width * len(components)), dtype=np.uint8
        )

        self._id = gl.GLuint()
        gl.glGenTextures(1, self._id)
        check_errors()
        gl.glBindTexture(gl.GL_TEXTURE_2D, self._id)
        check_errors()

        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_S, gl.GL_REPEAT)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_T, gl.GL_REPEAT)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MIN_FILTER, gl.GL_LINEAR_MIPMAP_LINEAR)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MAG_FILTER, gl.GL_LINEAR)
        check_errors()

        gl.glTexImage2D(
            gl.GL_TEXTURE_2D,
            0,
            fmt,
            self.width,
            self.height,
            0,
            fmt,
            gl.GL_UNSIGNED_BYTE,
            pixels.ctypes.data,
        )
        gl.glGenerateMipmap(gl.GL_TEXTURE_2D)
        check_errors()

    @property
    def id(self) -> int:
        """The OpenGL texture name."""
        return self._id.value

    def bind(self, unit: int = 0) -> None:
        """Bind the texture to texture unit ``unit``."""
        from pyglet import gl

        gl.glActiveTexture(gl.GL_TEXTURE0 + unit)
        gl.glBindTexture(gl.GL_TEXTURE_2D, self._id)

    def delete(self) -> None:
        """Release the texture."""
        from pyglet import gl

        gl.glDeleteTextures(1, self._id)