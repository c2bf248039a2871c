import pytest

####

from dexcite.constant import (
    PARITY_NEGATIVE,
    PARITY_POSITIVE,
    TRANSITION_ELECTRIC,
    TRANSITION_MAGNETIC,
)
from dexcite.object_.fragment import light_fragment
from dexcite.object_.gamma_strength import (
    GammaStrengthConstant,
    GammaStrengthStandardLorentzian,
)
from dexcite.object_.level_density import (
    LevelDensityBackshiftedFermiGas,
    LevelDensityConstant,
)
from dexcite.object_.optical_model import (
    TransmissionBarrierPenetration,
    TransmissionConstant,
)
from dexcite.transport.physics import (
    fragment_transmission,
    gamma_transmission,
    level_density,
)


# ======================================================================================
# Level density
# ======================================================================================


def test_fermi_gas_density_grows_with_energy():
    model = LevelDensityBackshiftedFermiGas(19, 40)
    densities = [level_density(model, Ex, 4, PARITY_POSITIVE) for Ex in [4, 8, 12, 16]]
    assert all(rho > 0.0 for rho in densities)
    assert densities == sorted(densities)


def test_fermi_gas_parities_are_equiprobable():
    model = LevelDensityBackshiftedFermiGas(19, 40)
    assert level_density(model, 10.0, 2, PARITY_POSITIVE) == level_density(
        model, 10.0, 2, PARITY_NEGATIVE
    )


def test_fermi_gas_spin_distribution_peaks_at_low_spin():
    model = LevelDensityBackshiftedFermiGas(19, 40)
    low = level_density(model, 10.0, 4, PARITY_POSITIVE)
    high = level_density(model, 10.0, 40, PARITY_POSITIVE)
    assert high < low


def test_fermi_gas_below_back_shift_is_finite():
    model = LevelDensityBackshiftedFermiGas(20, 40)
    assert model.delta > 0.0
    assert level_density(model, 0.0, 0, PARITY_POSITIVE) > 0.0


def test_constant_density():
    model = LevelDensityConstant(3.5)
    assert level_density(model, 7.0, 11, PARITY_NEGATIVE) == 3.5


# ======================================================================================
# Gamma-ray transmission
# ======================================================================================


def test_lorentzian_transmission_is_positive():
    model = GammaStrengthStandardLorentzian(19, 40)
    for kind in [TRANSITION_ELECTRIC, TRANSITION_MAGNETIC]:
        for l in [1, 2]:
            assert gamma_transmission(model, kind, l, 5.0) > 0.0


def test_e1_dominates():
    model = GammaStrengthStandardLorentzian(19, 40)
    T_E1 = gamma_transmission(model, TRANSITION_ELECTRIC, 1, 5.0)
    T_M1 = gamma_transmission(model, TRANSITION_MAGNETIC, 1, 5.0)
    T_M2 = gamma_transmission(model, TRANSITION_MAGNETIC, 2, 5.0)
    assert T_E1 > T_M1 > T_M2


def test_no_transmission_without_energy_or_beyond_quadrupole():
    model = GammaStrengthStandardLorentzian(19, 40)
    assert gamma_transmission(model, TRANSITION_ELECTRIC, 1, 0.0) == 0.0
    assert gamma_transmission(model, TRANSITION_ELECTRIC, 1, -1.0) == 0.0
    assert gamma_transmission(model, TRANSITION_ELECTRIC, 3, 5.0) == 0.0


def test_constant_gamma_transmission():
    model = GammaStrengthConstant(electric=[0.5, 0.25], magnetic=[0.1, 0.0])
    assert gamma_transmission(model, TRANSITION_ELECTRIC, 2, 3.0) == 0.25
    assert gamma_transmission(model, TRANSITION_MAGNETIC, 1, 3.0) == 0.1


# ======================================================================================
# Fragment transmission
# ======================================================================================


def test_barrier_penetration_rises_with_energy():
    proton = light_fragment("p")
    model = TransmissionBarrierPenetration(proton, 18, 39)
    T = [fragment_transmission(model, KE, 1, 0) for KE in [1.0, 3.0, 6.0, 12.0]]
    assert T == sorted(T)
    assert 0.0 < T[0] < T[-1] < 1.0


def test_centrifugal_barrier_suppresses_high_l():
    neutron = light_fragment("n")
    model = TransmissionBarrierPenetration(neutron, 19, 39)
    assert model.coulomb_barrier == 0.0
    assert fragment_transmission(model, 2.0, 1, 0) > fragment_transmission(
        model, 2.0, 9, 4
    )


def test_no_transmission_without_energy():
    neutron = light_fragment("n")
    model = TransmissionBarrierPenetration(neutron, 19, 39)
    assert fragment_transmission(model, 0.0, 1, 0) == 0.0


def test_constant_transmission_cuts_at_l_max():
    model = TransmissionConstant(light_fragment("n"), 0.7, l_max=1)
    assert fragment_transmission(model, 1.0, 1, 0) == 0.7
    assert fragment_transmission(model, 1.0, 3, 1) == 0.7
    assert fragment_transmission(model, 1.0, 5, 2) == 0.0
