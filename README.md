# graphrender

graphrender draws animated mathematical surfaces in 3D. A grid of small
cubes is placed by one of five functions (wave, multi-wave, ripple, sphere and
torus), and the graph moves on to the next function each time a second of
frame time has passed, starting from the sphere. All cubes are drawn in a
single instanced OpenGL draw call, with a frame-rate line drawn over the
scene.

## Installing

```
pip install .
```

You need a display and an OpenGL 3.3 driver. Rendering uses pyglet; the
maths uses numpy.

## Running

```
graphrender
```

The same entry point is `graphrender.app.main`. It takes no options other
than `--help`. If no window with an OpenGL 3.3 context can be created, it
prints `Failed to create window` and exits with status 1.

Controls:

- `W` / `S` move the camera forward and back
- `A` / `D` move it left and right
- move the mouse to look around (the cursor is captured; pitch is held
  between -89 and 89 degrees)
- scroll to zoom (field of view runs from 1 to 45 degrees)
- `Esc` or closing the window quits

Setting the environment variable `GRAPHRENDER_DEBUG` to a non-empty value
makes `graphrender.gl_utils.check_errors()` drain the OpenGL error queue after
each frame and after buffer and texture set-up, printing each error as
`NAME | file (line)`.

## Shaders

The package ships no shader files. `Renderer` loads
`shaders/basic.vert.glsl` and `shaders/basic.frag.glsl` relative to the
working directory (another directory can be passed as `shader_dir`); a missing
file raises `graphrender.shader.ShaderError`. The vertex shader gets:

- the cube position at attribute location 0
- the per-cube model matrix as four `vec4` columns at locations 1 to 4
- the uniforms `u_view` and `u_projection` (`mat4`)

## Using the pieces

The maths needs no window and works on its own:

```python
from graphrender.function_library import FunctionName, get_function, get_next_function_name
from graphrender.graph import Graph
from graphrender.camera import Camera, CameraMovement

matrix = get_function(FunctionName.RIPPLE)((0.1, 0.0, -0.2), 0.5, 100)
assert get_next_function_name(FunctionName.TORUS) is FunctionName.WAVE

graph = Graph(FunctionName.SPHERE, 10)
matrices = graph.all_model_matrices(0.0)    # shape (100, 4, 4)
graph.update(1.0)                           # moves on to the torus

camera = Camera()
camera.process_keyboard(CameraMovement.FORWARD, 0.016)
view = camera.view_matrix()
projection = camera.projection_matrix(800 / 600)
```

Matrices are numpy arrays used as `M @ v`. Other pieces:

- `graphrender.function_library`: `wave`, `multi_wave`, `ripple`, `sphere`,
  `torus`, and `get_random_function_name(rng)` /
  `get_random_function_name_other_than(name, rng)`, which take an optional
  `random.Random`.
- `graphrender.camera`: `look_at`, `perspective`, `ortho`, and `Camera` with
  `view_projection_matrix`, `process_mouse_movement`, `process_mouse_scroll`,
  `toggle_projection_mode` (perspective or a 3-unit orthographic view) and
  `reset`.
- `graphrender.meshutils`: `create_cube_vertices()` gives the 36 vertices of
  a unit cube as `Vertex` records with normals and texture coordinates.
- `graphrender.mesh`: `pack_vertices` and `pack_transforms` produce the
  float32 buffer layouts; `Mesh` uploads and draws them.
- `graphrender.shader`, `graphrender.texture`: `Shader` (uniform setters
  `set_bool` to `set_mat4`) and `Texture` (`bind`, `delete`), which need a
  current OpenGL context.
- `graphrender.gui`: `fps_text(framerate)` formats the overlay line.

## What it does not do

- There is no way to pick the function, the grid resolution (100 x 100) or
  the cycling mode from the command line; the graph always cycles in order.
  `TransitionMode.RANDOM` exists but nothing uses it.
- The overlay shows only the frame rate; there are no other on-screen
  controls.
- `Texture` can load an image, but the renderer draws untextured cubes.

## Tests

```
pip install ".[test]"
pytest
```