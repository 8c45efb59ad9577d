"""Reporting of OpenGL errors."""

from __future__ import annotations

import inspect
import os

GL_NO_ERROR = 0
GL_INVALID_ENUM = 0x0500
GL_INVALID_VALUE = 0x0501
GL_INVALID_OPERATION = 0x0502
GL_OUT_OF_MEMORY = 0x0505
GL_INVALID_FRAMEBUFFER_OPERATION = 0x0506

_ERROR_NAMES = {
    GL_INVALID_ENUM: "INVALID_ENUM",
    GL_INVALID_VALUE: "INVALID_VALUE",
    GL_INVALID_OPERATION: "INVALID_OPERATION",
    GL_OUT_OF_MEMORY: "OUT_OF_MEMORY",
    GL_INVALID_FRAMEBUFFER_OPERATION: "INVALID_FRAMEBUFFER_OPERATION",
}

DEBUG = bool(os.environ.get("GRAPHRENDER_DEBUG"))
"""Error checks only query the driver when this is true."""


def error_name(code: int) -> str:
    """Short name of an OpenGL error code, or an empty string if it is not one."""
    return _ERROR_NAMES.get(code, "")


def check_errors() -> list[str]:
    """Drain the OpenGL error queue, printing each error with the caller's location.

    Returns the names of the errors found; does nothing unless ``DEBUG`` is set.
    """
    if not DEBUG:
        return []

    from pyglet import gl

    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    filename = caller.f_code.co_filename if caller is not None else "<unknown>"
    line = caller.f_lineno if caller is not None else 0
    del frame, caller

    names = []
    while (code := gl.glGetError()) != GL_NO_ERROR:
        name = error_name(code)
        print(f"{name} | {filename} ({line})")
        names.append(name)
    return names