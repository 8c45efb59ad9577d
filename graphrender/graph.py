"""A grid of points animated by the surface functions."""

from __future__ import annotations

from enum import Enum, auto

import numpy as np

from .function_library import FunctionName, get_function, get_next_function_name
from .meshutils import Vertex, create_cube_vertices


class TransitionMode(Enum):
    CYCLE = auto()
    RANDOM = auto()


class Graph:
    """A ``resolution`` x ``resolution`` grid of cubes shaped by a surface function."""

    def __init__(self, function_name: FunctionName, resolution: int) -> None:
        self.function_name = FunctionName(function_name)
        self._function = get_function(self.function_name)
        self.resolution = resolution
        self.step = 2.0 / resolution
        self.duration = 0.0
        self.function_duration = 1.0
        self.vertices: list[Vertex] = create_cube_vertices()
        self.positions: list[tuple[float, float, float]] = [
            ((x + 0.5) * self.step - 1.0, 0.0, (z + 0.5) * self.step - 1.0)
            for z in range(resolution)
            for x in range(resolution)
        ]

    @property
    def point_count(self) -> int:
        return len(self.positions)

    def model_matrix(self, index: int, time: float) -> np.ndarray:
        """The model matrix of point ``index`` at ``time``."""
        return self._function(self.positions[index], time, self.resolution)

    def all_model_matrices(self, time: float) -> np.ndarray:
        """Model matrices of every point, shaped ``(point_count, 4, 4)``."""
        if not self.positions:
            return np.empty((0, 4, 4))
        return np.stack([self._function(p, time, self.resolution) for p in self.positions])

    def update(self, delta_time: float) -> None:
        """Advance time and move to the next function once its duration is spent."""
        self.duration += delta_time
        if self.duration >= self.function_duration:
            self.duration -= self.function_duration
            self.function_name = get_next_function_name(self.function_name)
            self._function = get_function(self.function_name)