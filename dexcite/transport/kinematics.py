import math

from numba import njit

####

import dexcite.transport.rng as rng

from dexcite.constant import PI
from dexcite.error import KinematicallyForbidden

# Relative slack on the mass balance, absorbing round-off at threshold
MASS_TOLERANCE = 1e-12


@njit
def sample_isotropic_direction(rng_state):
    # Sample polar cosine and azimuthal angle uniformly
    mu = 2.0 * rng.lcg(rng_state) - 1.0
    azi = 2.0 * PI * rng.lcg(rng_state)

    # Convert to Cartesian coordinates
    c = (1.0 - mu**2) ** 0.5
    x = math.cos(azi) * c
    y = math.sin(azi) * c
    z = mu
    return x, y, z


@njit
def two_body_momentum(M, m1, m2):
    """Momentum of either product of a two-body decay at rest (MeV)."""
    p2 = (M**2 - (m1 + m2) ** 2) * (M**2 - (m1 - m2) ** 2) / (4.0 * M**2)
    if p2 < 0.0:
        return 0.0
    return math.sqrt(p2)


def two_body_decay(parent_mass, emitted, residue, rng_state):
    """
    Isotropic two-body decay at rest.

    Fills the four-momenta of `emitted` and `residue` (whose masses must
    already be set) in the rest frame of the parent. Two random numbers are
    used for the emission direction.
    """
    m1 = emitted.mass
    m2 = residue.mass
    if parent_mass < (m1 + m2) * (1.0 - MASS_TOLERANCE):
        raise KinematicallyForbidden(
            f"Parent mass {parent_mass} MeV is below the decay products' "
            f"{m1} + {m2} MeV"
        )

    p = two_body_momentum(parent_mass, m1, m2)
    ux, uy, uz = sample_isotropic_direction(rng_state)

    emitted.px = p * ux
    emitted.py = p * uy
    emitted.pz = p * uz
    emitted.total_energy = math.sqrt(p**2 + m1**2)

    residue.px = -p * ux
    residue.py = -p * uy
    residue.pz = -p * uz
    residue.total_energy = math.sqrt(p**2 + m2**2)
