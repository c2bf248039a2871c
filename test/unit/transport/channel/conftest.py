import pytest

####

from dexcite.constant import PARITY_POSITIVE
from dexcite.object_.channel import (
    ChannelContinuumFragment,
    ChannelContinuumGamma,
    NuclearState,
)
from dexcite.object_.fragment import light_fragment
from dexcite.object_.gamma_strength import GammaStrengthConstant
from dexcite.object_.level_density import LevelDensityConstant
from dexcite.object_.optical_model import TransmissionConstant
from dexcite.object_.particle import nucleus

K40_PDG = 1000190400
K40_MASS = 37224.0
K39_PDG = 1000190390
K39_MASS = 36294.0


@pytest.fixture
def k40():
    return nucleus(K40_PDG, K40_MASS, 19)


@pytest.fixture
def k39():
    return nucleus(K39_PDG, K39_MASS, 19)


@pytest.fixture
def state():
    return NuclearState(
        pdg=K40_PDG, gs_mass=K40_MASS, Ex=10.0, two_J=4, parity=PARITY_POSITIVE
    )


@pytest.fixture
def e1_only():
    return GammaStrengthConstant(electric=[1.0, 0.0], magnetic=[0.0, 0.0])


@pytest.fixture
def flat_density():
    return LevelDensityConstant(1.0)


@pytest.fixture
def gamma_continuum(k40, e1_only, flat_density):
    # Uniform on [0, 5] MeV
    return ChannelContinuumGamma(
        0.8, 0.0, 5.0, k40, lambda Ex: 0.2, e1_only, flat_density
    )


@pytest.fixture
def neutron_continuum(k39, flat_density):
    neutron = light_fragment("n")
    # Separation energy: K40 at Ex goes to K39 at Ex_f + n when Ex_f < Ex - S_n
    S_n = K39_MASS + neutron.mass - K40_MASS

    def density(Ex):
        KE = 10.0 - S_n - Ex
        return 1.0, KE

    return ChannelContinuumFragment(
        0.3,
        0.0,
        10.0 - S_n,
        k39,
        density,
        neutron,
        TransmissionConstant(neutron, 1.0, l_max=2),
        flat_density,
    )
