import numpy as np
import pytest

####

import dexcite.transport.rng as rng

from dexcite.constant import PARITY_POSITIVE, SAMPLING_MODE_SKIP_SPIN_PARITY
from dexcite.error import DensityViolation, NoAccessibleChannel
from dexcite.object_.channel import ChannelContinuumGamma
from dexcite.object_.level_density import LevelDensityConstant
from dexcite.object_.structure import structure
from dexcite.transport.channel import (
    decay,
    invalidate_spin_parity_table,
    sample_excitation_energy,
    sample_spin_parity,
)


def advance(seed, N):
    rng_state = rng.rng_state(seed)
    for i in range(N):
        rng.lcg(rng_state)
    return rng_state[0]["rng_seed"]


# ======================================================================================
# Excitation energy
# ======================================================================================


def test_excitation_energy_in_range(gamma_continuum):
    rng_state = rng.rng_state(1)
    for i in range(1000):
        Ex = sample_excitation_energy(gamma_continuum, rng_state)
        assert 0.0 <= Ex <= 5.0


def test_excitation_energy_is_reproducible(k40, e1_only, flat_density):
    def sequence():
        channel = ChannelContinuumGamma(
            1.0, 0.0, 5.0, k40, lambda Ex: 0.2, e1_only, flat_density
        )
        rng_state = rng.rng_state(2)
        return [sample_excitation_energy(channel, rng_state) for i in range(100)]

    assert sequence() == sequence()


def test_uniform_density_chi_square(gamma_continuum):
    rng_state = rng.rng_state(3)
    N = 100000
    N_bin = 50
    samples = np.array(
        [sample_excitation_energy(gamma_continuum, rng_state) for i in range(N)]
    )
    counts, _ = np.histogram(samples, bins=N_bin, range=(0.0, 5.0))
    expected = N / N_bin
    chi2 = np.sum((counts - expected) ** 2 / expected)

    # 49 degrees of freedom
    assert chi2 < 100.0


def test_linear_density_mean(k40, e1_only, flat_density):
    channel = ChannelContinuumGamma(
        1.0, 0.0, 5.0, k40, lambda Ex: Ex, e1_only, flat_density
    )
    rng_state = rng.rng_state(4)
    N = 20000
    mean = sum(sample_excitation_energy(channel, rng_state) for i in range(N)) / N

    # Mean 10/3, standard deviation 5/(3 sqrt(2))
    assert mean == pytest.approx(10.0 / 3.0, abs=5.0 * 1.1785 / np.sqrt(N))


def test_narrow_continuum_far_from_zero(k40, e1_only, flat_density):
    channel = ChannelContinuumGamma(
        1.0, 10.0, 10.001, k40, lambda Ex: 1.0, e1_only, flat_density
    )
    rng_state = rng.rng_state(20)
    for i in range(20):
        Ex = sample_excitation_energy(channel, rng_state)
        assert 10.0 <= Ex <= 10.001


def test_degenerate_range_uses_one_random_number(k40, e1_only, flat_density):
    channel = ChannelContinuumGamma(
        1.0, 2.0, 2.0, k40, lambda Ex: 1.0, e1_only, flat_density
    )
    rng_state = rng.rng_state(5)
    assert sample_excitation_energy(channel, rng_state) == 2.0
    assert rng_state[0]["rng_seed"] == advance(5, 1)
    assert not channel.cdf.built


def test_cdf_is_built_once(k40, e1_only, flat_density):
    calls = []

    def density(Ex):
        calls.append(Ex)
        return 1.0

    channel = ChannelContinuumGamma(1.0, 0.0, 5.0, k40, density, e1_only, flat_density)
    assert not channel.cdf.built

    rng_state = rng.rng_state(6)
    sample_excitation_energy(channel, rng_state)
    N_call = len(calls)
    assert N_call > 0
    assert channel.cdf.built

    for i in range(10):
        sample_excitation_energy(channel, rng_state)
    assert len(calls) == N_call


def test_negative_density_warns_and_is_zeroed(k40, e1_only, flat_density):
    channel = ChannelContinuumGamma(
        1.0, 0.0, 5.0, k40, lambda Ex: Ex - 1.0, e1_only, flat_density
    )
    rng_state = rng.rng_state(7)
    with pytest.warns(DensityViolation):
        Ex = sample_excitation_energy(channel, rng_state)
    assert 0.0 <= Ex <= 5.0


def test_negative_density_raises_on_request(k40, e1_only, flat_density):
    structure.settings.set_density_violation("raise")
    channel = ChannelContinuumGamma(
        1.0, 0.0, 5.0, k40, lambda Ex: Ex - 1.0, e1_only, flat_density
    )
    with pytest.raises(DensityViolation):
        sample_excitation_energy(channel, rng.rng_state(8))

    # The failed build leaves the cell empty
    assert not channel.cdf.built


def test_vanishing_density_raises(k40, e1_only, flat_density):
    channel = ChannelContinuumGamma(
        1.0, 0.0, 5.0, k40, lambda Ex: 0.0, e1_only, flat_density
    )
    with pytest.raises(NoAccessibleChannel):
        sample_excitation_energy(channel, rng.rng_state(9))


# ======================================================================================
# Spin-parity
# ======================================================================================


def test_spin_parity_table_is_built_once(gamma_continuum, state):
    rng_state = rng.rng_state(10)
    assert not gamma_continuum.spin_parity_table.built

    sample_spin_parity(gamma_continuum, state, 2.0, rng_state)
    table = gamma_continuum.spin_parity_table.get()
    assert gamma_continuum.spin_parity_table.built

    # Reused even for another final energy
    sample_spin_parity(gamma_continuum, state, 3.0, rng_state)
    assert gamma_continuum.spin_parity_table.get() is table

    invalidate_spin_parity_table(gamma_continuum)
    assert not gamma_continuum.spin_parity_table.built
    sample_spin_parity(gamma_continuum, state, 3.0, rng_state)
    assert gamma_continuum.spin_parity_table.get() is not table


def test_sampled_spin_parity_is_in_table(gamma_continuum, state):
    rng_state = rng.rng_state(11)
    for i in range(100):
        entry = sample_spin_parity(gamma_continuum, state, 2.0, rng_state)
        assert entry in gamma_continuum.spin_parity_table.get()


def test_no_final_levels_raises(k40, state, e1_only):
    channel = ChannelContinuumGamma(
        1.0, 0.0, 5.0, k40, lambda Ex: 1.0, e1_only, LevelDensityConstant(0.0)
    )
    with pytest.raises(NoAccessibleChannel):
        decay(channel, state, rng.rng_state(12))


# ======================================================================================
# Decay
# ======================================================================================


def test_decay_updates_state(gamma_continuum, state, k40):
    emitted, residue = decay(gamma_continuum, state, rng.rng_state(13))

    assert state.pdg == k40.pdg
    assert state.gs_mass == k40.mass
    assert 0.0 <= state.Ex <= 5.0
    assert residue.mass == pytest.approx(k40.mass + state.Ex)
    assert (state.two_J, state.parity) in [(2, -1), (4, -1), (6, -1)]


def test_decay_uses_four_random_numbers(gamma_continuum, state):
    rng_state = rng.rng_state(14)
    decay(gamma_continuum, state, rng_state)
    assert rng_state[0]["rng_seed"] == advance(14, 4)


def test_skip_mode_keeps_spin_parity(gamma_continuum, state):
    rng_state = rng.rng_state(15)
    Ex_initial = state.Ex
    decay(gamma_continuum, state, rng_state, SAMPLING_MODE_SKIP_SPIN_PARITY)

    assert state.Ex != Ex_initial
    assert 0.0 <= state.Ex <= 5.0
    assert state.two_J == 4
    assert state.parity == PARITY_POSITIVE
    assert not gamma_continuum.spin_parity_table.built
    assert rng_state[0]["rng_seed"] == advance(15, 3)


def test_fragment_decay(neutron_continuum, state, k39):
    emitted, residue = decay(neutron_continuum, state, rng.rng_state(16))

    assert emitted.pdg == neutron_continuum.fragment.pdg
    assert state.pdg == k39.pdg
    assert 0.0 <= state.Ex <= neutron_continuum.E_max
    assert emitted.kinetic_energy + residue.kinetic_energy == pytest.approx(
        neutron_continuum.E_max - state.Ex, abs=1e-6
    )
