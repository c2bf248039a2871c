import math
import pytest

####

from dexcite.constant import PARITY_POSITIVE
from dexcite.error import InvalidEnergyRange, InvalidWidth
from dexcite.object_.channel import (
    ChannelContinuumFragment,
    ChannelContinuumGamma,
    ChannelDiscreteFragment,
    ChannelDiscreteGamma,
)
from dexcite.object_.fragment import light_fragment
from dexcite.object_.gamma_strength import GammaStrengthConstant
from dexcite.object_.level import Level
from dexcite.object_.level_density import LevelDensityConstant
from dexcite.object_.optical_model import TransmissionConstant
from dexcite.object_.particle import nucleus


@pytest.fixture
def make_channel():
    residue = nucleus(1000190390, 36294.0, 19)
    neutron = light_fragment("n")
    level = Level(0.0, 3, PARITY_POSITIVE)
    rho = LevelDensityConstant(1.0)
    gamma_strength = GammaStrengthConstant([1.0, 0.0], [0.0, 0.0])
    transmission = TransmissionConstant(neutron, 1.0)

    def make(kind, width, E_min=0.0, E_max=1.0):
        if kind == "discrete_fragment":
            return ChannelDiscreteFragment(width, level, residue, neutron)
        elif kind == "discrete_gamma":
            return ChannelDiscreteGamma(width, level, residue)
        elif kind == "continuum_fragment":
            return ChannelContinuumFragment(
                width,
                E_min,
                E_max,
                residue,
                lambda Ex: (1.0, 1.0),
                neutron,
                transmission,
                rho,
            )
        elif kind == "continuum_gamma":
            return ChannelContinuumGamma(
                width, E_min, E_max, residue, lambda Ex: 1.0, gamma_strength, rho
            )

    return make


KINDS = ["discrete_fragment", "discrete_gamma", "continuum_fragment", "continuum_gamma"]


@pytest.mark.parametrize("kind", KINDS)
def test_width(make_channel, kind):
    assert make_channel(kind, 0.25).width == 0.25
    assert make_channel(kind, 0.0).width == 0.0


@pytest.mark.parametrize("kind", KINDS)
@pytest.mark.parametrize("width", [-1.0, math.inf, math.nan])
def test_invalid_width(make_channel, kind, width):
    with pytest.raises(InvalidWidth):
        make_channel(kind, width)


@pytest.mark.parametrize("kind", KINDS)
def test_width_is_read_only(make_channel, kind):
    channel = make_channel(kind, 0.25)
    with pytest.raises(AttributeError):
        channel.width = 1.0


@pytest.mark.parametrize("kind", ["continuum_fragment", "continuum_gamma"])
@pytest.mark.parametrize("E_min, E_max", [(2.0, 1.0), (0.0, math.inf), (math.nan, 1.0)])
def test_invalid_energy_range(make_channel, kind, E_min, E_max):
    with pytest.raises(InvalidEnergyRange):
        make_channel(kind, 1.0, E_min, E_max)


def test_degenerate_energy_range(make_channel):
    channel = make_channel("continuum_gamma", 1.0, 2.0, 2.0)
    assert channel.E_min == channel.E_max == 2.0


def test_channels_are_not_registered(make_channel):
    from dexcite.object_.structure import structure

    N_level = len(structure.levels)
    channel = make_channel("discrete_gamma", 1.0)
    assert channel.ID == -1
    assert len(structure.levels) == N_level


def test_repr(make_channel):
    text = repr(make_channel("continuum_gamma", 0.5))
    assert "Continuum gamma channel" in text
    assert "Width: 0.5 MeV" in text
    assert "CDF built: False" in text

    text = repr(make_channel("discrete_fragment", 0.5))
    assert "Discrete fragment channel" in text
    assert "Fragment: n" in text
