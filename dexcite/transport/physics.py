import math

from numba import njit

####

from dexcite.constant import (
    GAMMA_L_MAX,
    GAMMA_STRENGTH_CONSTANT,
    GAMMA_STRENGTH_STANDARD_LORENTZIAN,
    LEVEL_DENSITY_BACKSHIFTED_FERMI_GAS,
    LEVEL_DENSITY_CONSTANT,
    PI,
    TRANSITION_ELECTRIC,
    TRANSMISSION_BARRIER_PENETRATION,
    TRANSMISSION_CONSTANT,
)


# ======================================================================================
# Level density
# ======================================================================================


def level_density(model, Ex, two_J, parity):
    """Density of levels (1/MeV) with spin two_J/2 and the given parity at Ex."""
    model_type = model.type

    if model_type == LEVEL_DENSITY_BACKSHIFTED_FERMI_GAS:
        return backshifted_fermi_gas(
            Ex, two_J, model.a, model.delta, model.sigma2_factor
        )

    elif model_type == LEVEL_DENSITY_CONSTANT:
        return model.value

    else:
        raise ValueError(f"Unknown model type: {model_type}")


@njit
def backshifted_fermi_gas(Ex, two_J, a, delta, sigma2_factor):
    # Below U_min the Fermi gas formula turns up again; hold it at its minimum
    U = Ex - delta
    U_min = 25.0 / (16.0 * a)
    if U < U_min:
        U = U_min

    sqrt_aU = math.sqrt(a * U)
    sigma2 = sigma2_factor * sqrt_aU / a

    rho = math.exp(2.0 * sqrt_aU) / (
        12.0 * math.sqrt(2.0 * sigma2) * a**0.25 * U**1.25
    )

    # Spin distribution; parities equiprobable
    J = 0.5 * two_J
    spin_factor = (
        (2.0 * J + 1.0) / (2.0 * sigma2) * math.exp(-((J + 0.5) ** 2) / (2.0 * sigma2))
    )
    return 0.5 * rho * spin_factor


# ======================================================================================
# Gamma-ray transmission
# ======================================================================================


def gamma_transmission(model, kind, l, E_gamma):
    """
    Transmission coefficient of a gamma-ray transition.

    Parameters
    ----------
    kind : int
        TRANSITION_ELECTRIC or TRANSITION_MAGNETIC.
    l : int
        Multipolarity, 1 <= l <= GAMMA_L_MAX.
    E_gamma : float
        Gamma-ray energy (MeV).
    """
    if E_gamma <= 0.0 or l < 1 or l > GAMMA_L_MAX:
        return 0.0

    idx = 0 if kind == TRANSITION_ELECTRIC else 1
    model_type = model.type

    if model_type == GAMMA_STRENGTH_STANDARD_LORENTZIAN:
        strength = model.scale[idx, l - 1] * standard_lorentzian(
            E_gamma,
            model.resonance_energy[idx, l - 1],
            model.resonance_width[idx, l - 1],
            model.cross_section[idx, l - 1],
            l,
        )
        return 2.0 * PI * E_gamma ** (2 * l + 1) * strength

    elif model_type == GAMMA_STRENGTH_CONSTANT:
        return model.transmission[idx, l - 1]

    else:
        raise ValueError(f"Unknown model type: {model_type}")


@njit
def standard_lorentzian(E, E_r, Gamma, sigma, l):
    """Strength (1/MeV^(2l+1)) of a Lorentzian resonance of multipolarity l."""
    factor = 26.0e-8 / (2 * l + 1)
    return (
        factor
        * sigma
        * Gamma**2
        * E ** (3 - 2 * l)
        / ((E**2 - E_r**2) ** 2 + E**2 * Gamma**2)
    )


# ======================================================================================
# Fragment transmission
# ======================================================================================


def fragment_transmission(model, KE, two_j, l):
    """Transmission coefficient of a fragment with kinetic energy KE (MeV)."""
    if KE <= 0.0:
        return 0.0

    model_type = model.type

    if model_type == TRANSMISSION_BARRIER_PENETRATION:
        return barrier_penetration(
            KE, l, model.coulomb_barrier, model.centrifugal_factor, model.diffuseness
        )

    elif model_type == TRANSMISSION_CONSTANT:
        return model.value if l <= model.l_max else 0.0

    else:
        raise ValueError(f"Unknown model type: {model_type}")


@njit
def barrier_penetration(KE, l, coulomb_barrier, centrifugal_factor, diffuseness):
    barrier = coulomb_barrier + centrifugal_factor * l * (l + 1)
    x = (barrier - KE) / diffuseness
    if x > 700.0:
        return 0.0
    return 1.0 / (1.0 + math.exp(x))
