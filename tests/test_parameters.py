import math

import pytest

from partiview.parameters import (
    ALL_NB_PARTICLES,
    NbParticles,
    NbParticlesInfo,
    subdiv_2d,
    subdiv_3d,
)


def test_values_are_powers_of_two():
    assert NbParticles(512) is NbParticles.P512
    assert math.prod(subdiv_2d(NbParticles.P130K)) == 131072
    assert all(math.prod(subdiv_3d(n)) & (n - 1) == 0 for n in NbParticles)


def test_every_size_has_info():
    for nb in NbParticles:
        info = ALL_NB_PARTICLES[nb]
        assert info == NbParticlesInfo(info.name, subdiv_2d(nb), subdiv_3d(nb))


def test_table_is_in_ascending_order():
    assert [subdiv_2d(k) for k in ALL_NB_PARTICLES] == [
        (32, 16),
        (32, 32),
        (64, 64),
        (128, 64),
        (128, 128),
        (128, 256),
        (256, 256),
        (256, 512),
    ]


@pytest.mark.parametrize("nb", list(NbParticles))
def test_subdivisions_multiply_to_size(nb):
    assert math.prod(subdiv_2d(nb)) == nb
    assert math.prod(subdiv_3d(nb)) == nb


def test_known_entries():
    assert ALL_NB_PARTICLES[NbParticles.P4K] == NbParticlesInfo("4k", (64, 64), (16, 16, 16))
    assert subdiv_2d(NbParticles.P8K) == (128, 64)
    assert subdiv_3d(NbParticles.P65K) == (64, 32, 32)


def test_plain_int_lookup():
    assert subdiv_3d(512) == (8, 8, 8)


def test_unknown_size_gives_zeros():
    assert subdiv_2d(1000) == (0, 0)
    assert subdiv_3d(1000) == (0, 0, 0)


def test_info_is_immutable():
    info = NbParticlesInfo("x", (1, 1), (1, 1, 1))
    with pytest.raises(AttributeError):
        info.name = "other"
    assert info.name == "x"