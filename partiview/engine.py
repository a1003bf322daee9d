"""Scene state of the particle viewer: camera handling, box and grid geometry."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from itertools import product

from partiview.camera import Camera
from partiview.geometry import (
    REF_CUBE_INDICES,
    REF_CUBE_VERTICES,
    REF_SQUARE_INDICES,
    REF_SQUARE_VERTICES,
    BoxSize3D,
    Dimension,
)
from partiview.vector import Vector2, Vector3

_PI_F = 3.1415927
_TRANSLATION_SPEED = 0.06
_AUTO_ROTATION_STEP = Vector2(0.5, 0.0)


class UserAction(Enum):
    """Kind of mouse interaction applied to the camera."""

    TRANSLATION = "translation"
    ROTATION = "rotation"
    ZOOM = "zoom"


@dataclass
class EngineParams:
    """Settings the engine is built from."""

    curr_nb_particles: int = 0
    max_nb_particles: int = 0
    box_size: BoxSize3D = field(default_factory=lambda: BoxSize3D(0, 0, 0))
    grid_res: BoxSize3D = field(default_factory=lambda: BoxSize3D(0, 0, 0))
    point_size: int = 10
    aspect_ratio: float = 1.0
    dimension: Dimension = Dimension.DIM_3D


def box_2d_vertices(box_size: BoxSize3D) -> list[tuple[float, float]]:
    """Corners of the 2D bounding square, lying in the YZ plane."""
    return [
        (a * box_size.y / 2.0, b * box_size.z / 2.0) for a, b in REF_SQUARE_VERTICES
    ]


def box_3d_vertices(box_size: BoxSize3D) -> list[tuple[float, float, float]]:
    """Corners of the 3D bounding box, centred on the origin."""
    return [
        (a * box_size.x / 2.0, b * box_size.y / 2.0, c * box_size.z / 2.0)
        for a, b, c in REF_CUBE_VERTICES
    ]


def _cell_count(grid_res: BoxSize3D) -> int:
    return grid_res.x * grid_res.y * grid_res.z


def grid_cell_vertices(
    box_size: BoxSize3D, grid_res: BoxSize3D
) -> list[tuple[float, float, float]]:
    """Eight corners of every grid cell, cells ordered x, then y, then z innermost."""
    if _cell_count(grid_res) <= 0:
        return []

    cell = (
        box_size.x / grid_res.x,
        box_size.y / grid_res.y,
        box_size.z / grid_res.z,
    )
    local_corners = [
        (a * cell[0] * 0.5, b * cell[1] * 0.5, c * cell[2] * 0.5)
        for a, b, c in REF_CUBE_VERTICES
    ]
    first = (
        -box_size.x / 2.0 + 0.5 * cell[0],
        -box_size.y / 2.0 + 0.5 * cell[1],
        -box_size.z / 2.0 + 0.5 * cell[2],
    )

    vertices = []
    for ix, iy, iz in product(range(grid_res.x), range(grid_res.y), range(grid_res.z)):
        cx = first[0] + ix * cell[0]
        cy = first[1] + iy * cell[1]
        cz = first[2] + iz * cell[2]
        vertices.extend((lx + cx, ly + cy, lz + cz) for lx, ly, lz in local_corners)
    return vertices


def grid_cell_indices(grid_res: BoxSize3D) -> list[int]:
    """Line indices of the edges of every grid cell."""
    return [
        index + 8 * cell
        for cell in range(max(_cell_count(grid_res), 0))
        for index in REF_CUBE_INDICES
    ]


class Engine:
    """Viewer state: camera, display toggles and static scene geometry."""

    def __init__(self, params: EngineParams) -> None:
        self.max_nb_particles = params.max_nb_particles
        self.nb_particles = params.curr_nb_particles
        self.box_size = params.box_size
        self.grid_res = params.grid_res
        self.point_size = params.point_size
        self.dimension = params.dimension

        self.box_visible = True
        self.grid_visible = False
        self.target_visible = False
        self.blending_enabled = False
        self.target_pos = Vector3(0.0, 0.0, 0.0)

        self.camera = Camera(params.aspect_ratio)

        self._box_2d = box_2d_vertices(self.box_size)
        self._box_3d = box_3d_vertices(self.box_size)
        self.grid_vertices = grid_cell_vertices(self.box_size, self.grid_res)
        self.grid_indices = grid_cell_indices(self.grid_res)

    @property
    def camera_pos(self) -> Vector3:
        return self.camera.camera_pos

    @property
    def focus_pos(self) -> Vector3:
        return self.camera.focus_pos

    @property
    def is_camera_auto_rotating(self) -> bool:
        return self.camera.auto_rotating

    @property
    def box_vertices(self) -> list[tuple[float, ...]]:
        """Bounding box corners for the current dimension."""
        return list(self._box_2d if self.dimension is Dimension.DIM_2D else self._box_3d)

    @property
    def box_indices(self) -> tuple[int, ...]:
        """Bounding box edge indices for the current dimension."""
        return REF_SQUARE_INDICES if self.dimension is Dimension.DIM_2D else REF_CUBE_INDICES

    @property
    def grid_element_count(self) -> int:
        """Number of line indices drawn for the grid."""
        return 24 * _cell_count(self.grid_res)

    def check_mouse_events(self, action: UserAction, delta: Vector2) -> None:
        """Move the camera according to a mouse displacement."""
        if action is UserAction.TRANSLATION:
            displacement = _TRANSLATION_SPEED * delta
            self.camera.translate(-displacement.x, displacement.y)
        elif action is UserAction.ROTATION:
            angle = delta * _PI_F / 180.0 * 0.5
            self.camera.rotate(angle.y, angle.x)
        elif action is UserAction.ZOOM:
            self.camera.zoom(0.5 * delta.x)
        else:
            raise ValueError(f"unknown user action {action!r}")

    def advance_frame(self) -> Vector3:
        """Apply one step of auto rotation if enabled; return the camera position."""
        if self.camera.auto_rotating:
            angle = _AUTO_ROTATION_STEP * _PI_F / 180.0 * 0.5
            self.camera.rotate(angle.y, angle.x)
        return self.camera.camera_pos

    def reset_camera(self) -> None:
        """Put the camera back at its initial position."""
        self.camera.reset()

    def auto_rotate_camera(self, enabled: bool) -> None:
        """Turn automatic rotation on or off."""
        self.camera.auto_rotating = enabled

    def set_window_size(self, width: int, height: int) -> None:
        """Adapt the camera projection to a new window size."""
        if height == 0:
            raise ZeroDivisionError("window height must not be zero")
        self.camera.set_scene_aspect_ratio(width / height)


__all__ = [
    "UserAction",
    "EngineParams",
    "Engine",
    "box_2d_vertices",
    "box_3d_vertices",
    "grid_cell_vertices",
    "grid_cell_indices",
    "math",
]