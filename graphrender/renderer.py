"""Draws the animated graph as instanced cubes."""

from __future__ import annotations

import time
from pathlib import Path
from typing import Any, Callable

from .camera import Camera
from .function_library import FunctionName
from .graph import Graph
from .mesh import Mesh
from .shader import Shader

CLEAR_COLOR = (0.1, 0.1, 0.1, 1.0)
DEFAULT_RESOLUTION = 100
DEFAULT_SHADER_DIR = "shaders"
VERTEX_SHADER = "basic.vert.glsl"
FRAGMENT_SHADER = "basic.frag.glsl"


def aspect_ratio(width: float, height: float) -> float:
    """Width divided by height of a framebuffer."""
    if height <= 0:
        raise ValueError(f"height must be positive, got {height}")
    return width / height


class Renderer:
    """Owns the shader, graph and cube mesh, and draws a frame on request."""

    def __init__(
        self,
        window: Any = None,
        shader_dir: str | Path = DEFAULT_SHADER_DIR,
        resolution: int = DEFAULT_RESOLUTION,
        function_name: FunctionName = FunctionName.SPHERE,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self.window = window
        self.shader_dir = Path(shader_dir)
        self.resolution = resolution
        self.function_name = FunctionName(function_name)
        self._clock = clock
        self._start = clock()
        self.shader: Shader | None = None
        self.graph: Graph | None = None
        self.mesh: Mesh | None = None

    def init(self) -> None:
        """Set up GL state and create the shader, graph and mesh; needs a current context."""
        from pyglet import gl

        gl.glEnable(gl.GL_DEPTH_TEST)
        self.shader = Shader(self.shader_dir / VERTEX_SHADER, self.shader_dir / FRAGMENT_SHADER)
        self.graph = Graph(self.function_name, self.resolution)
        self.mesh = Mesh(self.graph.vertices, with_normals=False, with_tex_coords=False)

    def _clear_screen(self) -> None:
        from pyglet import gl

        gl.glClearColor(*CLEAR_COLOR)
        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)

    def render(self, camera: Camera, delta_time: float) -> None:
        """Advance the graph by ``delta_time`` and draw it as seen by ``camera``."""
        if self.graph is None or self.shader is None or self.mesh is None:
            raise RuntimeError("Renderer.init() must be called before render()")
        if self.window is None:
            raise RuntimeError("Renderer has no window to draw into")

        self.graph.update(delta_time)
        self._clear_screen()

        width, height = self.window.get_framebuffer_size()
        if width <= 0 or height <= 0:
            return
        aspect = aspect_ratio(width, height)

        view = camera.view_matrix()
        projection = camera.projection_matrix(aspect)

        self.shader.use()
        self.shader.set_mat4("u_view", view)
        self.shader.set_mat4("u_projection", projection)

        matrices = self.graph.all_model_matrices(self._clock() - self._start)
        self.mesh.set_instance_transforms(matrices)
        self.mesh.draw_instanced(len(matrices))

    def delete(self) -> None:
        """Release the GPU resources."""
        if self.mesh is not None:
            self.mesh.delete()
            self.mesh = None
        if self.shader is not None:
            self.shader.delete()
            self.shader = None