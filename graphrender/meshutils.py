"""Vertex data for the meshes the renderer draws."""

from __future__ import annotations

from dataclasses import dataclass

Vec3 = tuple[float, float, float]
Vec2 = tuple[float, float]


@dataclass(frozen=True)
class Vertex:
    """One vertex: position, normal and texture coordinates."""

    position: Vec3
    normal: Vec3
    tex_coords: Vec2


_CUBE = [
    # back face
    ((-0.5, -0.5, -0.5), (0.0, 0.0, -1.0), (0.0, 0.0)),
    ((0.5, -0.5, -0.5), (0.0, 0.0, -1.0), (1.0, 0.0)),
    ((0.5, 0.5, -0.5), (0.0, 0.0, -1.0), (1.0, 1.0)),
    ((0.5, 0.5, -0.5), (0.0, 0.0, -1.0), (1.0, 1.0)),
    ((-0.5, 0.5, -0.5), (0.0, 0.0, -1.0), (0.0, 1.0)),
    ((-0.5, -0.5, -0.5), (0.0, 0.0, -1.0), (0.0, 0.0)),
    # front face
    ((-0.5, -0.5, 0.5), (0.0, 0.0, 1.0), (0.0, 0.0)),
    ((0.5, -0.5, 0.5), (0.0, 0.0, 1.0), (1.0, 0.0)),
    ((0.5, 0.5, 0.5), (0.0, 0.0, 1.0), (1.0, 1.0)),
    ((0.5, 0.5, 0.5), (0.0, 0.0, 1.0), (1.0, 1.0)),
    ((-0.5, 0.5, 0.5), (0.0, 0.0, 1.0), (0.0, 1.0)),
    ((-0.5, -0.5, 0.5), (0.0, 0.0, 1.0), (0.0, 0.0)),
    # left face
    ((-0.5, 0.5, 0.5), (-1.0, 0.0, 0.0), (1.0, 0.0)),
    ((-0.5, 0.5, -0.5), (-1.0, 0.0, 0.0), (1.0, 1.0)),
    ((-0.5, -0.5, -0.5), (-1.0, 0.0, 0.0), (0.0, 1.0)),
    ((-0.5, -0.5, -0.5), (-1.0, 0.0, 0.0), (0.0, 1.0)),
    ((-0.5, -0.5, 0.5), (-1.0, 0.0, 0.0), (0.0, 0.0)),
    ((-0.5, 0.5, 0.5), (-1.0, 0.0, 0.0), (1.0, 0.0)),
    # right face
    ((0.5, 0.5, 0.5), (1.0, 0.0, 0.0), (1.0, 0.0)),
    ((0.5, 0.5, -0.5), (1.0, 0.0, 0.0), (1.0, 1.0)),
    ((0.5, -0.5, -0.5), (1.0, 0.0, 0.0), (0.0, 1.0)),
    ((0.5, -0.5, -0.5), (1.0, 0.0, 0.0), (0.0, 1.0)),
    ((0.5, -0.5, 0.5), (1.0, 0.0, 0.0), (0.0, 0.0)),
    ((0.5, 0.5, 0.5), (1.0, 0.0, 0.0), (1.0, 0.0)),
    # bottom face
    ((-0.5, -0.5, -0.5), (0.0, -1.0, 0.0), (0.0, 1.0)),
    ((0.5, -0.5, -0.5), (0.0, -1.0, 0.0), (1.0, 1.0)),
    ((0.5, -0.5, 0.5), (0.0, -1.0, 0.0), (1.0, 0.0)),
    ((0.5, -0.5, 0.5), (0.0, -1.0, 0.0), (1.0, 0.0)),
    ((-0.5, -0.5, 0.5), (0.0, -1.0, 0.0), (0.0, 0.0)),
    ((-0.5, -0.5, -0.5), (0.0, -1.0, 0.0), (0.0, 1.0)),
    # top face
    ((-0.5, 0.5, -0.5), (0.0, 1.0, 0.0), (0.0, 1.0)),
    ((0.5, 0.5, -0.5), (0.0, 1.0, 0.0), (1.0, 1.0)),
    ((0.5, 0.5, 0.5), (0.0, 1.0, 0.0), (1.0, 0.0)),
    ((0.5, 0.5, 0.5), (0.0, 1.0, 0.0), (1.0, 0.0)),
    ((-0.5, 0.5, 0.5), (0.0, 1.0, 0.0), (0.0, 0.0)),
    ((-0.5, 0.5, -0.5), (0.0, 1.0, 0.0), (0.0, 1.0)),
]


def create_cube_vertices() -> list[Vertex]:
    """Return the 36 vertices of a unit cube centred on the origin, as triangles."""
    return [Vertex(p, n, uv) for p, n, uv in _CUBE]