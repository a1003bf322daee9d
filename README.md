# partiview

Building blocks for viewing particle systems: small vector, matrix and
quaternion types using Direct3D-style conventions (row vectors, `v * m`,
row-major matrices), grid generators for placing particles, an orbiting
camera, and the scene-state model of a viewer engine.

## Install

```
pip install partiview
```

For running the tests:

```
pip install "partiview[test]"
pytest
```

## Modules

- `partiview.vector`: immutable `Vector2`, `Vector3` and `Vector4` with
  component-wise `+`, `-`, `*`, `/` and scalar scaling, plus `dot`,
  `length`, `normalize` (raises `ZeroDivisionError` on a zero vector),
  `cross`, `vmin`, `vmax`, `vabs`, `vfloor`, `vceil`, `clamp`, `lerp`,
  `smooth_step`, `max3` and `min3`.
- `partiview.matrix`: `Matrix2x2`, `Matrix3x3` and `Matrix4x4`.
  `Matrix4x4` has `identity`, `translation`, `scale`, `rotation_x`,
  `rotation_y`, `rotation_z`, `rotation_arbitrary`, `view_from_basis`,
  `projection`, `ortho`, `ortho_off_center`, `with_near_far_clip_planes`,
  `near_far_clip_planes`, `transpose`, `determinant`, `inverse` and
  `remove_translation`. Multiplying a `Vector3` by a `Matrix4x4`
  (`v * m`) applies the transform with `w = 1` and divides by the result's `w`.
- `partiview.quaternion`: `Quaternion` (`from_axis_angle`, `axis_angle`,
  `to_matrix`, `rotate_vector`, `normalized`, `*` for composition) and
  `slerp`.
- `partiview.parameters`: the supported particle counts (`NbParticles`),
  their display names and grid subdivisions in `ALL_NB_PARTICLES`, and
  `subdiv_2d` / `subdiv_3d`, which return zeros for unsupported counts.
- `partiview.formatting`: `float_to_str`, which rounds a value to single
  precision and writes it in fixed notation with an `f` suffix.
- `partiview.geometry`: `generate_2d_grid` and `generate_3d_grid` for
  rectangular, circular, box and sphere particle layouts, plus the
  individual `rectangular_grid`, `circular_grid`, `box_grid` and
  `sphere_grid`. Rectangles and boxes may be filled with
  `Distribution.RANDOM`, drawing from an optional `random.Random`;
  other shapes and non-positive resolutions raise `ValueError`.
- `partiview.camera`: `Camera`, an orbit camera with `rotate`,
  `translate`, `zoom`, `reset` and `set_scene_aspect_ratio`, exposing its
  view, projection and combined projection-view matrices.
- `partiview.engine`: `Engine`, `EngineParams` and `UserAction`. The
  engine turns mouse input (`check_mouse_events`) into camera motion,
  steps auto rotation with `advance_frame`, and holds the vertex and
  index data of the bounding box and grid cells (`box_2d_vertices`,
  `box_3d_vertices`, `grid_cell_vertices`, `grid_cell_indices`).

## Example

```python
from partiview.vector import Vector2, Vector3
from partiview.geometry import BoxSize3D, Shape3D, generate_3d_grid
from partiview.engine import Engine, EngineParams, UserAction

points = generate_3d_grid(
    Shape3D.BOX, (8, 8, 8), Vector3(-5, -5, -5), Vector3(5, 5, 5)
)
print(len(points))  # 512

engine = Engine(EngineParams(box_size=BoxSize3D(10, 10, 10),
                             grid_res=BoxSize3D(2, 2, 2),
                             aspect_ratio=16 / 9))
engine.check_mouse_events(UserAction.ROTATION, Vector2(10.0, 5.0))
engine.check_mouse_events(UserAction.ZOOM, Vector2(-2.0, 0.0))
print(engine.camera_pos)
```

## What it does not do

The package computes camera matrices and scene geometry only. It opens
no window, draws nothing, compiles no shaders, runs no particle
simulation and has no user interface or command-line program; feeding
the matrices and vertex data to a graphics API is left to the caller.