"""Shader programs built from GLSL source files."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Sequence

import numpy as np


class ShaderError(Exception):
    """A shader could not be read, compiled or linked."""


def read_file(path: str | Path) -> str:
    """Return the text of ``path``."""
    try:
        return Path(path).read_text()
    except OSError as exc:
        raise ShaderError(f"Failed to open file {path}") from exc


def _components(args: Sequence[Any], count: int) -> tuple[float, ...]:
    """Accept either one vector or ``count`` scalars and return the components."""
    if len(args) == 1:
        values = tuple(float(c) for c in np.ravel(args[0]))
    else:
        values = tuple(float(a) for a in args)
    if len(values) != count:
        raise TypeError(f"expected {count} components, got {len(values)}")
    return values


def _column_major(mat: Any, size: int) -> tuple[float, ...]:
    """Flatten a ``size`` x ``size`` matrix column by column."""
    arr = np.asarray(mat, dtype=float)
    if arr.shape != (size, size):
        raise ValueError(f"expected a {size}x{size} matrix, got shape {arr.shape}")
    return tuple(float(x) for x in arr.T.ravel())


class Shader:
    """A linked vertex and fragment shader program."""

    def __init__(self, vertex_path: str | Path, fragment_path: str | Path) -> None:
        vertex_source = read_file(vertex_path)
        fragment_source = read_file(fragment_path)

        from pyglet.graphics.shader import Shader as _GLShader
        from pyglet.graphics.shader import ShaderException, ShaderProgram

        compiled = []
        try:
            compiled.append(_GLShader(vertex_source, "vertex"))
            compiled.append(_GLShader(fragment_source, "fragment"))
            self._program = ShaderProgram(*compiled)
        except ShaderException as exc:
            raise ShaderError(str(exc)) from exc
        finally:
            for stage in compiled:
                stage.delete()

    @property
    def id(self) -> int:
        """The OpenGL program name."""
        return self._program.id

    def use(self) -> None:
        """Make this the active program."""
        self._program.use()

    def _set(self, name: str, value: Any) -> None:
        # Like a uniform location of -1, a name the program lacks is ignored.
        if name in self._program.uniforms:
            self._program[name] = value

    def set_bool(self, name: str, value: bool) -> None:
        self._set(name, int(bool(value)))

    def set_int(self, name: str, value: int) -> None:
        self._set(name, int(value))

    def set_float(self, name: str, value: float) -> None:
        self._set(name, float(value))

    def set_vec2(self, name: str, *args: Any) -> None:
        """Set a vec2 from one vector or two floats."""
        self._set(name, _components(args, 2))

    def set_vec3(self, name: str, *args: Any) -> None:
        """Set a vec3 from one vector or three floats."""
        self._set(name, _components(args, 3))

    def set_vec4(self, name: str, *args: Any) -> None:
        """Set a vec4 from one vector or four floats."""
        self._set(name, _components(args, 4))

    def set_mat2(self, name: str, mat: Any) -> None:
        self._set(name, _column_major(mat, 2))

    def set_mat3(self, name: str, mat: Any) -> None:
        self._set(name, _column_major(mat, 3))

    def set_mat4(self, name: str, mat: Any) -> None:
        self._set(name, _column_major(mat, 4))

    def delete(self) -> None:
        """Release the program."""
        self._program.delete()