"""Parametric surface functions that place the graph's points in space."""

from __future__ import annotations

import math
import random
from enum import IntEnum
from typing import Callable, Sequence

import numpy as np

PI = math.pi

Function = Callable[[Sequence[float], float, int], np.ndarray]

_default_rng = random.Random()


class FunctionName(IntEnum):
    """The surfaces the graph can show, in cycling order."""

    WAVE = 0
    MULTI_WAVE = 1
    RIPPLE = 2
    SPHERE = 3
    TORUS = 4


def _transform(position: Sequence[float], resolution: int) -> np.ndarray:
    """Translate to ``position`` and scale uniformly by ``2 / resolution``."""
    matrix = np.identity(4)
    scale = 2.0 / resolution
    matrix[0, 0] = matrix[1, 1] = matrix[2, 2] = scale
    matrix[:3, 3] = position
    return matrix


def wave(base_position: Sequence[float], t: float, resolution: int) -> np.ndarray:
    """A single travelling sine wave along the diagonal."""
    x, _, z = base_position
    y = math.sin(PI * (x + z + t))
    return _transform((x, y, z), resolution)


def multi_wave(base_position: Sequence[float], t: float, resolution: int) -> np.ndarray:
    """Three superimposed sine waves."""
    x, _, z = base_position
    y = math.sin(PI * (x + 0.5 * t))
    y += 0.5 * math.sin(2.0 * PI * (z + t))
    y += math.sin(PI * (x + z + 0.25 * t))
    y *= 1.0 / 2.5
    return _transform((x, y, z), resolution)


def ripple(base_position: Sequence[float], t: float, resolution: int) -> np.ndarray:
    """A damped ripple spreading out from the origin."""
    x, _, z = base_position
    d = math.sqrt(x * x + z * z)
    y = math.sin(PI * (4.0 * d - t))
    y /= 1.0 + 10.0 * d
    return _transform((x, y, z), resolution)


def sphere(base_position: Sequence[float], t: float, resolution: int) -> np.ndarray:
    """A sphere with a twisting band pattern on its radius."""
    u, _, v = base_position
    r = 0.9 + 0.1 * math.sin(PI * (6.0 * u + 4.0 * v + t))
    s = r * math.cos(0.5 * PI * v)
    position = (
        s * math.sin(PI * u),
        r * math.sin(0.5 * PI * v),
        s * math.cos(PI * u),
    )
    return _transform(position, resolution)


def torus(base_position: Sequence[float], t: float, resolution: int) -> np.ndarray:
    """A torus whose two radii pulse over time."""
    u, _, v = base_position
    r1 = 0.7 + 0.1 * math.sin(PI * (6.0 * u + 0.5 * t))
    r2 = 0.15 + 0.05 * math.sin(PI * (8.0 * u + 4.0 * v + 2.0 * t))
    s = r1 + r2 * math.cos(PI * v)
    position = (
        s * math.sin(PI * u),
        r2 * math.sin(PI * v),
        s * math.cos(PI * u),
    )
    return _transform(position, resolution)


_FUNCTIONS: dict[FunctionName, Function] = {
    FunctionName.WAVE: wave,
    FunctionName.MULTI_WAVE: multi_wave,
    FunctionName.RIPPLE: ripple,
    FunctionName.SPHERE: sphere,
    FunctionName.TORUS: torus,
}


def get_function(name: FunctionName) -> Function:
    """Return the surface function for ``name``."""
    return _FUNCTIONS[FunctionName(name)]


def get_next_function_name(name: FunctionName) -> FunctionName:
    """Return the name after ``name``, wrapping round to the first."""
    return FunctionName((int(name) + 1) % len(FunctionName))


def get_random_function_name(rng: random.Random | None = None) -> FunctionName:
    """Pick any function name uniformly at random."""
    rng = rng or _default_rng
    return FunctionName(rng.randint(0, len(FunctionName) - 1))


def get_random_function_name_other_than(
    name: FunctionName, rng: random.Random | None = None
) -> FunctionName:
    """Pick a random function name different from ``name``."""
    rng = rng or _default_rng
    while True:
        choice = FunctionName(rng.randint(0, len(FunctionName) - 1))
        if choice != name:
            return choice