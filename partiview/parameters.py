"""Supported particle system sizes and their grid subdivisions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class NbParticles(IntEnum):
    """Supported numbers of particles."""

    P512 = 1 << 9
    P1K = 1 << 10
    P4K = 1 << 12
    P8K = 1 << 13
    P16K = 1 << 14
    P32K = 1 << 15
    P65K = 1 << 16
    P130K = 1 << 17


@dataclass(frozen=True)
class NbParticlesInfo:
    """Display name and the 2D/3D grid subdivisions giving that many particles."""

    name: str
    subdiv2d: tuple[int, int]
    subdiv3d: tuple[int, int, int]


ALL_NB_PARTICLES: dict[NbParticles, NbParticlesInfo] = {
    NbParticles.P512: NbParticlesInfo("512", (32, 16), (8, 8, 8)),
    NbParticles.P1K: NbParticlesInfo("1k", (32, 32), (16, 8, 8)),
    NbParticles.P4K: NbParticlesInfo("4k", (64, 64), (16, 16, 16)),
    NbParticles.P8K: NbParticlesInfo("8k", (128, 64), (32, 16, 16)),
    NbParticles.P16K: NbParticlesInfo("16k", (128, 128), (32, 32, 16)),
    NbParticles.P32K: NbParticlesInfo("32k", (128, 256), (32, 32, 32)),
    NbParticles.P65K: NbParticlesInfo("65k", (256, 256), (64, 32, 32)),
    NbParticles.P130K: NbParticlesInfo("130k", (256, 512), (64, 64, 32)),
}


def subdiv_2d(nb_particles: int) -> tuple[int, int]:
    """2D subdivision for a supported size, ``(0, 0)`` otherwise."""
    info = ALL_NB_PARTICLES.get(nb_particles)
    return info.subdiv2d if info else (0, 0)


def subdiv_3d(nb_particles: int) -> tuple[int, int, int]:
    """3D subdivision for a supported size, ``(0, 0, 0)`` otherwise."""
    info = ALL_NB_PARTICLES.get(nb_particles)
    return info.subdiv3d if info else (0, 0, 0)