"""A fly-through camera driven by keyboard and mouse input."""

from __future__ import annotations

import math
from enum import Enum, auto
from typing import Sequence

import numpy as np

NEAR = 0.1
FAR = 100.0
ORTHO_SIZE = 3.0


class CameraMovement(Enum):
    FORWARD = auto()
    BACKWARD = auto()
    LEFT = auto()
    RIGHT = auto()


class Projection(Enum):
    PERSPECTIVE = auto()
    ORTHOGRAPHIC = auto()


def _normalize(v: np.ndarray) -> np.ndarray:
    return v / np.linalg.norm(v)


def look_at(eye: Sequence[float], center: Sequence[float], up: Sequence[float]) -> np.ndarray:
    """Right-handed view matrix looking from ``eye`` towards ``center``."""
    eye = np.asarray(eye, dtype=float)
    f = _normalize(np.asarray(center, dtype=float) - eye)
    s = _normalize(np.cross(f, np.asarray(up, dtype=float)))
    u = np.cross(s, f)
    m = np.identity(4)
    m[0, :3] = s
    m[1, :3] = u
    m[2, :3] = -f
    m[0, 3] = -np.dot(s, eye)
    m[1, 3] = -np.dot(u, eye)
    m[2, 3] = np.dot(f, eye)
    return m


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection to clip depth -1..1; ``fovy`` in radians."""
    tan_half = math.tan(fovy / 2.0)
    m = np.zeros((4, 4))
    m[0, 0] = 1.0 / (aspect * tan_half)
    m[1, 1] = 1.0 / tan_half
    m[2, 2] = -(far + near) / (far - near)
    m[3, 2] = -1.0
    m[2, 3] = -(2.0 * far * near) / (far - near)
    return m


def ortho(left: float, right: float, bottom: float, top: float, near: float, far: float) -> np.ndarray:
    """Right-handed orthographic projection to clip depth -1..1."""
    m = np.identity(4)
    m[0, 0] = 2.0 / (right - left)
    m[1, 1] = 2.0 / (top - bottom)
    m[2, 2] = -2.0 / (far - near)
    m[0, 3] = -(right + left) / (right - left)
    m[1, 3] = -(top + bottom) / (top - bottom)
    m[2, 3] = -(far + near) / (far - near)
    return m


class Camera:
    """Euler-angle camera; matrices follow the ``M @ v`` convention."""

    DEFAULT_YAW = -90.0
    DEFAULT_PITCH = 0.0
    DEFAULT_SPEED = 2.5
    DEFAULT_SENSITIVITY = 0.1
    DEFAULT_FOV = 45.0
    DEFAULT_POSITION = (0.0, 0.0, 3.0)

    def __init__(
        self,
        position: Sequence[float] | None = None,
        up: Sequence[float] | None = None,
        yaw: float = DEFAULT_YAW,
        pitch: float = DEFAULT_PITCH,
    ) -> None:
        self.position = np.array(position if position is not None else self.DEFAULT_POSITION, dtype=float)
        self._world_up = np.array(up if up is not None else (0.0, 1.0, 0.0), dtype=float)
        self._front = np.array([0.0, 0.0, -1.0])
        self._yaw = float(yaw)
        self._pitch = float(pitch)
        self.movement_speed = self.DEFAULT_SPEED
        self.mouse_sensitivity = self.DEFAULT_SENSITIVITY
        self._fov = self.DEFAULT_FOV
        self.projection_mode = Projection.PERSPECTIVE
        self._update_vectors()

    @property
    def front(self) -> np.ndarray:
        return self._front.copy()

    @property
    def up(self) -> np.ndarray:
        return self._up.copy()

    @property
    def right(self) -> np.ndarray:
        return self._right.copy()

    @property
    def yaw(self) -> float:
        return self._yaw

    @property
    def pitch(self) -> float:
        return self._pitch

    @property
    def fov(self) -> float:
        return self._fov

    def view_matrix(self) -> np.ndarray:
        return look_at(self.position, self.position + self._front, self._up)

    def projection_matrix(self, aspect_ratio: float) -> np.ndarray:
        if self.projection_mode is Projection.PERSPECTIVE:
            return perspective(math.radians(self._fov), aspect_ratio, NEAR, FAR)
        return ortho(
            -ORTHO_SIZE * aspect_ratio,
            ORTHO_SIZE * aspect_ratio,
            -ORTHO_SIZE,
            ORTHO_SIZE,
            NEAR,
            FAR,
        )

    def view_projection_matrix(self, aspect_ratio: float) -> np.ndarray:
        return self.projection_matrix(aspect_ratio) @ self.view_matrix()

    def process_keyboard(self, direction: CameraMovement, delta_time: float) -> None:
        velocity = self.movement_speed * delta_time
        if direction is CameraMovement.FORWARD:
            self.position = self.position + self._front * velocity
        elif direction is CameraMovement.BACKWARD:
            self.position = self.position - self._front * velocity
        elif direction is CameraMovement.LEFT:
            self.position = self.position - self._right * velocity
        elif direction is CameraMovement.RIGHT:
            self.position = self.position + self._right * velocity

    def process_mouse_movement(self, xoffset: float, yoffset: float, constrain_pitch: bool = True) -> None:
        self._yaw += xoffset * self.mouse_sensitivity
        self._pitch += yoffset * self.mouse_sensitivity
        if constrain_pitch:
            self._pitch = min(max(self._pitch, -89.0), 89.0)
        self._update_vectors()

    def process_mouse_scroll(self, yoffset: float) -> None:
        self._fov = min(max(self._fov - yoffset, 1.0), 45.0)

    def toggle_projection_mode(self) -> None:
        self.projection_mode = (
            Projection.ORTHOGRAPHIC
            if self.projection_mode is Projection.PERSPECTIVE
            else Projection.PERSPECTIVE
        )

    def reset(self) -> None:
        self.position = np.array(self.DEFAULT_POSITION, dtype=float)
        self._yaw = self.DEFAULT_YAW
        self._pitch = self.DEFAULT_PITCH
        self._fov = self.DEFAULT_FOV
        self._update_vectors()

    def _update_vectors(self) -> None:
        yaw = math.radians(self._yaw)
        pitch = math.radians(self._pitch)
        front = np.array([
            math.cos(yaw) * math.cos(pitch),
            math.sin(pitch),
            math.sin(yaw) * math.cos(pitch),
        ])
        self._front = _normalize(front)
        self._right = _normalize(np.cross(self._front, self._world_up))
        self._up = _normalize(np.cross(self._right, self._front))