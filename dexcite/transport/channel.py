import warnings

####

import dexcite.transport.rng as rng

from dexcite.constant import (
    CHANNEL_CONTINUUM_FRAGMENT,
    CHANNEL_CONTINUUM_GAMMA,
    CHANNEL_DISCRETE_FRAGMENT,
    CHANNEL_DISCRETE_GAMMA,
    DENSITY_VIOLATION_RAISE,
    FRAGMENT_L_MAX,
    GAMMA_L_MAX,
    PHOTON,
    SAMPLING_MODE_FULL,
    SAMPLING_MODE_SKIP_SPIN_PARITY,
    TRANSITION_ELECTRIC,
    TRANSITION_MAGNETIC,
)
from dexcite.error import DensityViolation, NoAccessibleChannel
from dexcite.object_.channel import SpinParityWidth
from dexcite.object_.particle import Particle
from dexcite.object_.structure import structure
from dexcite.transport.interpolation import build_inverse_cdf
from dexcite.transport.kinematics import two_body_decay
from dexcite.transport.physics import (
    fragment_transmission,
    gamma_transmission,
    level_density,
)
from dexcite.transport.util import sample_weighted


# ======================================================================================
# Capabilities
# ======================================================================================


def is_continuum(channel):
    return (
        channel.type == CHANNEL_CONTINUUM_FRAGMENT
        or channel.type == CHANNEL_CONTINUUM_GAMMA
    )


def emits_fragment(channel):
    return (
        channel.type == CHANNEL_DISCRETE_FRAGMENT
        or channel.type == CHANNEL_CONTINUUM_FRAGMENT
    )


def emitted_particle_pdg(channel):
    if emits_fragment(channel):
        return channel.fragment.pdg
    return PHOTON


def emitted_particle(channel):
    if emits_fragment(channel):
        fragment = channel.fragment
        return Particle(pdg=fragment.pdg, mass=fragment.mass, charge=fragment.Z)
    return Particle(pdg=PHOTON)


# ======================================================================================
# Channel selection
# ======================================================================================


def sample_channel(channels, rng_state):
    """Pick one of `channels` with probability proportional to its width."""
    return sample_weighted(channels, rng_state)


# ======================================================================================
# Decay
# ======================================================================================


def decay(channel, state, rng_state, mode=SAMPLING_MODE_FULL):
    """
    Emit one particle through `channel`.

    Parameters
    ----------
    channel : ChannelBase
        Any of the four channel variants.
    state : NuclearState
        Decaying nucleus. Overwritten with the state of the residue.
    rng_state : numpy.ndarray
        Random stream. Discrete channels use two draws (emission direction);
        continuum channels use one more for the excitation energy and, unless
        skipped, one for the spin-parity.
    mode : int, optional
        SAMPLING_MODE_FULL, or SAMPLING_MODE_SKIP_SPIN_PARITY for testing the
        excitation energy sampling alone; the latter leaves the spin-parity at
        its initial value, which is not physically meaningful.

    Returns
    -------
    emitted : Particle
    residue : Particle
        Both in the rest frame of the decaying nucleus.
    """
    if is_continuum(channel):
        return decay_continuum(channel, state, rng_state, mode)
    else:
        return decay_discrete(channel, state, rng_state)


def decay_discrete(channel, state, rng_state):
    level = channel.final_level

    emitted = emitted_particle(channel)
    residue = channel.residue.copy()
    residue.mass = channel.residue.mass + level.energy
    two_body_decay(state.mass, emitted, residue, rng_state)

    update_state(state, channel.residue, level.energy, level.two_J, level.parity)
    return emitted, residue


def decay_continuum(channel, state, rng_state, mode):
    Ex_final = sample_excitation_energy(channel, rng_state)

    if mode == SAMPLING_MODE_SKIP_SPIN_PARITY:
        two_J = state.two_J
        parity = state.parity
    else:
        entry = sample_spin_parity(channel, state, Ex_final, rng_state)
        two_J = entry.two_J
        parity = entry.parity

    emitted = emitted_particle(channel)
    residue = channel.residue.copy()
    residue.mass = channel.residue.mass + Ex_final
    two_body_decay(state.mass, emitted, residue, rng_state)

    update_state(state, channel.residue, Ex_final, two_J, parity)
    return emitted, residue


def update_state(state, gs_residue, Ex, two_J, parity):
    state.pdg = gs_residue.pdg
    state.gs_mass = gs_residue.mass
    state.Ex = float(Ex)
    state.two_J = int(two_J)
    state.parity = int(parity)


# ======================================================================================
# Continuum excitation energy
# ======================================================================================


def sample_excitation_energy(channel, rng_state):
    """Final excitation energy in [E_min, E_max]; one random number is used."""
    settings = structure.settings
    xi = rng.lcg(rng_state)

    if channel.E_min == channel.E_max:
        return channel.E_min

    inverse_cdf = channel.cdf.get_or_build(lambda: build_channel_cdf(channel))
    Ex = inverse_cdf.sample(xi, settings.cdf_tolerance, settings.cdf_max_iteration)
    # The bisection midpoint may round just outside the range
    return min(max(Ex, channel.E_min), channel.E_max)


def build_channel_cdf(channel):
    settings = structure.settings
    return build_inverse_cdf(
        excitation_energy_pdf(channel, settings.density_violation),
        channel.E_min,
        channel.E_max,
        settings.chebyshev_degree,
        settings.cdf_grid_size,
    )


def excitation_energy_pdf(channel, policy):
    """The channel's density as a scalar function of Ex, negatives handled."""
    with_KE = channel.type == CHANNEL_CONTINUUM_FRAGMENT

    def pdf(Ex):
        if with_KE:
            value = channel.density(Ex)[0]
        else:
            value = channel.density(Ex)

        if value < 0.0:
            message = f"Excitation energy density {value} at Ex = {Ex} MeV"
            if policy == DENSITY_VIOLATION_RAISE:
                raise DensityViolation(message)
            warnings.warn(message + " is treated as zero", DensityViolation)
            value = 0.0
        return value

    return pdf


# ======================================================================================
# Continuum spin-parity
# ======================================================================================


def sample_spin_parity(channel, state, Ex_final, rng_state):
    """
    Width-weighted pick from the channel's spin-parity table; one random
    number is used.

    The table is built on the first call, for `state` and `Ex_final`, and
    reused afterwards until `invalidate_spin_parity_table`.
    """
    table = channel.spin_parity_table.get_or_build(
        lambda: build_spin_parity_table(channel, state, Ex_final)
    )
    return sample_weighted(table, rng_state)


def invalidate_spin_parity_table(channel):
    channel.spin_parity_table.reset()


def build_spin_parity_table(channel, state, Ex_final):
    if channel.type == CHANNEL_CONTINUUM_GAMMA:
        table = gamma_spin_parity_table(channel, state, Ex_final)
    else:
        table = fragment_spin_parity_table(channel, state, Ex_final)

    if len(table) == 0:
        raise NoAccessibleChannel(
            f"No final spin-parity accessible from {state} at Ex = {Ex_final} MeV"
        )
    return table


def gamma_spin_parity_table(channel, state, Ex_final):
    E_gamma = state.Ex - Ex_final
    model = channel.gamma_strength

    # Transmission coefficients by multipolarity
    T_E = [0.0]
    T_M = [0.0]
    for l in range(1, GAMMA_L_MAX + 1):
        T_E.append(gamma_transmission(model, TRANSITION_ELECTRIC, l, E_gamma))
        T_M.append(gamma_transmission(model, TRANSITION_MAGNETIC, l, E_gamma))

    table = []
    for two_Jf in range(
        state.two_J - 2 * GAMMA_L_MAX, state.two_J + 2 * GAMMA_L_MAX + 1, 2
    ):
        if two_Jf < 0:
            continue

        # Lowest multipolarity; l = 0 (and 0 -> 0) is not a photon transition
        l = max(abs(state.two_J - two_Jf) // 2, 1)
        if 2 * l > state.two_J + two_Jf:
            continue

        parity_E = state.parity * (-1) ** l
        parity_M = -parity_E

        rho = level_density(channel.level_density, Ex_final, two_Jf, parity_E)
        append_entry(table, two_Jf, parity_E, T_E[l] * rho)

        rho = level_density(channel.level_density, Ex_final, two_Jf, parity_M)
        append_entry(table, two_Jf, parity_M, T_M[l] * rho)

    return table


def fragment_spin_parity_table(channel, state, Ex_final):
    fragment = channel.fragment
    KE = channel.density(Ex_final)[1]

    table = []
    for l in range(FRAGMENT_L_MAX + 1):
        parity_f = state.parity * fragment.parity * (-1) ** l

        # Couple orbital and fragment spin to j, then j and the final spin to
        # the initial spin
        for two_j in range(abs(2 * l - fragment.two_s), 2 * l + fragment.two_s + 1, 2):
            T = fragment_transmission(channel.transmission, KE, two_j, l)
            if not T > 0.0:
                continue

            for two_Jf in range(
                abs(state.two_J - two_j), state.two_J + two_j + 1, 2
            ):
                rho = level_density(channel.level_density, Ex_final, two_Jf, parity_f)
                append_entry(table, two_Jf, parity_f, T * rho)

    return table


def append_entry(table, two_J, parity, width):
    if width > 0.0:
        table.append(SpinParityWidth(int(two_J), int(parity), float(width)))
