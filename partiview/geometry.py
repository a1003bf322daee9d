"""Reference shapes and generators of particle start positions."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from enum import Enum
from itertools import product
from typing import Callable, Iterable, Optional

from partiview.vector import Vector3, length


class Dimension(Enum):
    """Dimension of a simulated system."""

    DIM_2D = "2D"
    DIM_3D = "3D"


class Shape2D(Enum):
    """Shapes a 2D grid can take."""

    RECTANGLE = "rectangle"
    CIRCLE = "circle"


class Shape3D(Enum):
    """Shapes a 3D grid can take."""

    BOX = "box"
    SPHERE = "sphere"


class Distribution(Enum):
    """How points are spread inside a shape."""

    UNIFORM = "uniform"
    RANDOM = "random"


class Plane(Enum):
    """Axis-aligned plane a 2D grid lies in."""

    XY = "xy"
    YZ = "yz"
    XZ = "xz"


@dataclass(frozen=True)
class BoxSize3D:
    """Integer extent along each axis."""

    x: int
    y: int
    z: int


# Dimensions of the bounding box where the particles evolve.
BOX_SIZE_3D = BoxSize3D(10, 10, 10)

# Resolution of the cells forming the 3D grid containing all the particles.
GRID_RES_3D = BoxSize3D(30, 30, 30)

REF_CUBE_VERTICES: tuple[tuple[float, float, float], ...] = (
    (1.0, -1.0, -1.0),
    (1.0, 1.0, -1.0),
    (-1.0, 1.0, -1.0),
    (-1.0, -1.0, -1.0),
    (1.0, -1.0, 1.0),
    (1.0, 1.0, 1.0),
    (-1.0, 1.0, 1.0),
    (-1.0, -1.0, 1.0),
)

REF_CUBE_INDICES: tuple[int, ...] = (
    0, 1, 1, 2, 2, 3, 3, 0,
    4, 5, 5, 6, 6, 7, 7, 4,
    0, 4, 1, 5, 2, 6, 3, 7,
)

REF_SQUARE_VERTICES: tuple[tuple[float, float], ...] = (
    (-1.0, -1.0),
    (-1.0, 1.0),
    (1.0, 1.0),
    (1.0, -1.0),
)

REF_SQUARE_INDICES: tuple[int, ...] = (0, 1, 1, 2, 2, 3, 3, 0)


def _resolution(grid_res: Iterable[int], size: int) -> tuple[int, ...]:
    values = tuple(int(v) for v in grid_res)
    if len(values) != size:
        raise ValueError(f"grid resolution needs {size} values, got {len(values)}")
    if any(v <= 0 for v in values):
        raise ValueError("cannot generate grid with negative or null number of vertices")
    return values


def _draw(rng: Optional[random.Random]) -> Callable[[], float]:
    return rng.random if rng is not None else random.random


def _random_points(
    count: int, start: Vector3, extent: Vector3, rng: Optional[random.Random]
) -> list[Vector3]:
    draw = _draw(rng)
    points = []
    for _ in range(count):
        x = draw() * extent.x + start.x
        y = draw() * extent.y + start.y
        z = draw() * extent.z + start.z
        points.append(Vector3(x, y, z))
    return points


def _lattice(start: Vector3, spacing: Vector3, counts: tuple[int, int, int]) -> list[Vector3]:
    nx, ny, nz = counts
    return [
        Vector3(start.x + ix * spacing.x, start.y + iy * spacing.y, start.z + iz * spacing.z)
        for ix, iy, iz in product(range(nx), range(ny), range(nz))
    ]


def rectangular_grid(
    plane: Plane,
    grid_res: Iterable[int],
    start: Vector3,
    end: Vector3,
    distribution: Distribution = Distribution.UNIFORM,
    rng: Optional[random.Random] = None,
) -> list[Vector3]:
    """Points of a rectangle in ``plane`` spanning ``start`` to ``end``."""
    gx, gy = _resolution(grid_res, 2)
    vec = end - start

    if distribution is Distribution.RANDOM:
        return _random_points(gx * gy, start, vec, rng)

    if plane is Plane.XY:
        spacing = Vector3(vec.x / gx, vec.y / gy, 0.0)
        counts = (gx, gy, 1)
    elif plane is Plane.XZ:
        spacing = Vector3(vec.x / gx, 0.0, vec.z / gy)
        counts = (gx, 1, gy)
    elif plane is Plane.YZ:
        spacing = Vector3(0.0, vec.y / gx, vec.z / gy)
        counts = (1, gx, gy)
    else:
        raise ValueError(f"cannot generate rectangular grid in plane {plane!r}")
    return _lattice(start, spacing, counts)


def circular_grid(
    plane: Plane, grid_res: Iterable[int], start: Vector3, end: Vector3
) -> list[Vector3]:
    """Points of a disc in ``plane``: ``grid_res[0]`` angles by ``grid_res[1]`` rings."""
    n_angles, n_rings = _resolution(grid_res, 2)
    if not isinstance(plane, Plane):
        raise ValueError(f"cannot generate circular grid in plane {plane!r}")

    vec = end - start
    center = start + vec / 2.0
    radius = length(vec) / 2.0
    angle_spacing = 2.0 * math.pi / n_angles
    radius_spacing = radius / n_rings

    points = []
    for io, ir in product(range(n_angles), range(1, n_rings + 1)):
        r = ir * radius_spacing
        c = r * math.cos(io * angle_spacing)
        s = r * math.sin(io * angle_spacing)
        if plane is Plane.XY:
            points.append(Vector3(center.x + c, center.y + s, center.z))
        elif plane is Plane.XZ:
            points.append(Vector3(center.x + c, center.y, center.z + s))
        else:
            points.append(Vector3(center.x, center.y + c, center.z + s))
    return points


def box_grid(
    grid_res: Iterable[int],
    start: Vector3,
    end: Vector3,
    distribution: Distribution = Distribution.UNIFORM,
    rng: Optional[random.Random] = None,
) -> list[Vector3]:
    """Points of an axis-aligned box spanning ``start`` to ``end``."""
    gx, gy, gz = _resolution(grid_res, 3)
    vec = end - start
    if distribution is Distribution.RANDOM:
        return _random_points(gx * gy * gz, start, vec, rng)
    spacing = Vector3(vec.x / gx, vec.y / gy, vec.z / gz)
    return _lattice(start, spacing, (gx, gy, gz))


def sphere_grid(grid_res: Iterable[int], start: Vector3, end: Vector3) -> list[Vector3]:
    """Points of a ball: polar angles by azimuths by shells."""
    n_phi, n_theta, n_shells = _resolution(grid_res, 3)
    vec = end - start
    center = start + vec / 2.0
    radius = length(vec) / 2.0
    phi_spacing = math.pi / n_phi
    theta_spacing = 2.0 * math.pi / n_theta
    radius_spacing = radius / n_shells

    points = []
    for iphi, itheta, ir in product(range(n_phi), range(n_theta), range(n_shells)):
        r = (ir + 1) * radius_spacing
        phi = iphi * phi_spacing
        theta = itheta * theta_spacing
        points.append(
            Vector3(
                center.x + r * math.cos(theta) * math.sin(phi),
                center.y + r * math.sin(theta) * math.sin(phi),
                center.z + r * math.cos(phi),
            )
        )
    return points


def generate_2d_grid(
    shape: Shape2D,
    plane: Plane,
    grid_res: Iterable[int],
    start: Vector3,
    end: Vector3,
    distribution: Distribution = Distribution.UNIFORM,
    rng: Optional[random.Random] = None,
) -> list[Vector3]:
    """Points of a 2D shape; random spreading is supported for rectangles only."""
    if distribution is not Distribution.UNIFORM and shape is not Shape2D.RECTANGLE:
        raise ValueError("random distribution is not available for this shape")
    grid_res = _resolution(grid_res, 2)
    if shape is Shape2D.CIRCLE:
        return circular_grid(plane, grid_res, start, end)
    if shape is Shape2D.RECTANGLE:
        return rectangular_grid(plane, grid_res, start, end, distribution, rng)
    raise ValueError(f"unknown 2D shape {shape!r}")


def generate_3d_grid(
    shape: Shape3D,
    grid_res: Iterable[int],
    start: Vector3,
    end: Vector3,
    distribution: Distribution = Distribution.UNIFORM,
    rng: Optional[random.Random] = None,
) -> list[Vector3]:
    """Points of a 3D shape; random spreading is supported for boxes only."""
    if distribution is not Distribution.UNIFORM and shape is not Shape3D.BOX:
        raise ValueError("random distribution is not available for this shape")
    grid_res = _resolution(grid_res, 3)
    if shape is Shape3D.SPHERE:
        return sphere_grid(grid_res, start, end)
    if shape is Shape3D.BOX:
        return box_grid(grid_res, start, end, distribution, rng)
    raise ValueError(f"unknown 3D shape {shape!r}")