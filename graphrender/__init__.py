"""Animated 3D function graphs drawn as instanced cubes with OpenGL."""

__version__ = "0.1.0"