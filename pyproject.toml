[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphrender"
version = "0.1.0"
description = "Animated 3D function graphs drawn as instanced cubes with OpenGL"
requires-python = ">=3.10"
keywords = ["opengl", "graph", "visualization", "instancing", "3d", "pyglet"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Scientific/Engineering :: Visualization",
]
dependencies = [
    "numpy",
    "pyglet",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
graphrender = "graphrender.app:main"

[tool.hatch.build.targets.wheel]
packages = ["graphrender"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
