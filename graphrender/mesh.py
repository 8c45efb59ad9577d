"""Vertex buffers on the GPU, with optional per-instance transforms."""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

from .gl_utils import check_errors
from .meshutils import Vertex

VERTEX_FLOATS = 8
FLOAT_SIZE = 4
VERTEX_STRIDE = VERTEX_FLOATS * FLOAT_SIZE
NORMAL_OFFSET = 3 * FLOAT_SIZE
TEX_COORDS_OFFSET = 6 * FLOAT_SIZE
MAT4_STRIDE = 16 * FLOAT_SIZE

POSITION_LOCATION = 0
NORMAL_LOCATION = 1
TEX_COORDS_LOCATION = 2
INSTANCE_LOCATION = 1


def pack_vertices(vertices: Iterable[Vertex]) -> np.ndarray:
    """Interleave vertices as float32 rows of position, normal and texture coordinates."""
    rows = [(*v.position, *v.normal, *v.tex_coords) for v in vertices]
    return np.array(rows, dtype=np.float32).reshape(-1, VERTEX_FLOATS)


def pack_transforms(transforms: Sequence[np.ndarray] | np.ndarray) -> np.ndarray:
    """Lay out 4x4 matrices column by column, one float32 row of 16 per matrix."""
    arr = np.asarray(transforms, dtype=np.float32)
    if arr.size == 0:
        return np.empty((0, 16), dtype=np.float32)
    if arr.ndim == 2:
        arr = arr[np.newaxis]
    if arr.ndim != 3 or arr.shape[1:] != (4, 4):
        raise ValueError(f"expected 4x4 matrices, got shape {arr.shape}")
    return np.ascontiguousarray(arr.transpose(0, 2, 1)).reshape(-1, 16)


class Mesh:
    """A vertex array drawn as triangles, singly or instanced."""

    def __init__(
        self,
        vertices: Iterable[Vertex],
        with_normals: bool = True,
        with_tex_coords: bool = True,
    ) -> None:
        from pyglet import gl

        self.vertices = list(vertices)
        self.vertex_count = len(self.vertices)
        self.instancing_enabled = False
        self._instance_vbos = None
        self._current_instance_vbo = 0

        self._vao = gl.GLuint()
        self._vbo = gl.GLuint()
        gl.glGenVertexArrays(1, self._vao)
        gl.glGenBuffers(1, self._vbo)
        check_errors()

        gl.glBindVertexArray(self._vao)
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, self._vbo)
        check_errors()

        data = pack_vertices(self.vertices)
        gl.glBufferData(gl.GL_ARRAY_BUFFER, data.nbytes, data.ctypes.data, gl.GL_DYNAMIC_DRAW)
        check_errors()

        gl.glVertexAttribPointer(POSITION_LOCATION, 3, gl.GL_FLOAT, gl.GL_FALSE, VERTEX_STRIDE, 0)
        gl.glEnableVertexAttribArray(POSITION_LOCATION)
        check_errors()

        if with_normals:
            gl.glVertexAttribPointer(
                NORMAL_LOCATION, 3, gl.GL_FLOAT, gl.GL_FALSE, VERTEX_STRIDE, NORMAL_OFFSET
            )
            gl.glEnableVertexAttribArray(NORMAL_LOCATION)
            check_errors()

        if with_tex_coords:
            gl.glVertexAttribPointer(
                TEX_COORDS_LOCATION, 2, gl.GL_FLOAT, gl.GL_FALSE, VERTEX_STRIDE, TEX_COORDS_OFFSET
            )
            gl.glEnableVertexAttribArray(TEX_COORDS_LOCATION)
            check_errors()

        gl.glBindVertexArray(0)

    def draw(self) -> None:
        """Draw the mesh once."""
        from pyglet import gl

        gl.glBindVertexArray(self._vao)
        gl.glDrawArrays(gl.GL_TRIANGLES, 0, self.vertex_count)
        gl.glBindVertexArray(0)

    def draw_instanced(self, instance_count: int) -> None:
        """Draw ``instance_count`` instances, or a single mesh if no transforms are set."""
        if not self.instancing_enabled:
            self.draw()
            return
        from pyglet import gl

        gl.glBindVertexArray(self._vao)
        gl.glDrawArraysInstanced(gl.GL_TRIANGLES, 0, self.vertex_count, instance_count)
        gl.glBindVertexArray(0)

    def set_instance_transforms(self, transforms: Sequence[np.ndarray] | np.ndarray) -> None:
        """Upload per-instance model matrices, alternating between two buffers."""
        from pyglet import gl

        if self._instance_vbos is None:
            self._instance_vbos = (gl.GLuint * 2)()
            gl.glGenBuffers(2, self._instance_vbos)

        self._current_instance_vbo = (self._current_instance_vbo + 1) % 2
        active = self._instance_vbos[self._current_instance_vbo]
        data = pack_transforms(transforms)

        gl.glBindVertexArray(self._vao)
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, active)
        gl.glBufferData(gl.GL_ARRAY_BUFFER, data.nbytes, None, gl.GL_DYNAMIC_DRAW)
        gl.glBufferSubData(gl.GL_ARRAY_BUFFER, 0, data.nbytes, data.ctypes.data)

        for column in range(4):
            location = INSTANCE_LOCATION + column
            gl.glEnableVertexAttribArray(location)
            gl.glVertexAttribPointer(
                location, 4, gl.GL_FLOAT, gl.GL_FALSE, MAT4_STRIDE, column * 4 * FLOAT_SIZE
            )
            gl.glVertexAttribDivisor(location, 1)

        gl.glBindVertexArray(0)
        self.instancing_enabled = True

    def delete(self) -> None:
        """Release the GPU buffers and vertex array."""
        from pyglet import gl

        if self._instance_vbos is not None:
            gl.glDeleteBuffers(2, self._instance_vbos)
            self._instance_vbos = None
        gl.glDeleteBuffers(1, self._vbo)
        gl.glDeleteVertexArrays(1, self._vao)