import numpy as np

import dexcite

from dexcite.constant import TRANSITION_ELECTRIC
from dexcite.transport.physics import gamma_transmission, level_density

# =============================================================================
# Nuclei
# =============================================================================

K40_PDG = dexcite.nucleus_pdg(19, 40)
K39_PDG = dexcite.nucleus_pdg(19, 39)
K40_MASS = dexcite.nucleus_mass(19, 40, -33.5354)
K39_MASS = dexcite.nucleus_mass(19, 39, -33.8071)

k40 = dexcite.nucleus(K40_PDG, K40_MASS, 19)
k39 = dexcite.nucleus(K39_PDG, K39_MASS, 19)
neutron = dexcite.light_fragment("n")

# Neutron separation energy of 40K
S_n = K39_MASS + neutron.mass - K40_MASS

# Tabulated levels below the continuum
E_continuum = 2.5
scheme = dexcite.DecayScheme("40K", K40_PDG, K40_MASS, 19)
l0 = scheme.add_level(0.0, 8, -1)  # 4-
l1 = scheme.add_level(0.0299, 6, -1)  # 3-
l2 = scheme.add_level(0.8004, 4, -1)  # 2-
l3 = scheme.add_level(0.8914, 10, -1)  # 5-
scheme.add_gamma(l1, l0, 1.0)
scheme.add_gamma(l2, l1, 1.0)
scheme.add_gamma(l3, l0, 1.0)

# =============================================================================
# Models
# =============================================================================

rho_k40 = dexcite.LevelDensityBackshiftedFermiGas(19, 40)
rho_k39 = dexcite.LevelDensityBackshiftedFermiGas(19, 39)
gamma_strength = dexcite.GammaStrengthStandardLorentzian(19, 40)
transmission = dexcite.TransmissionBarrierPenetration(neutron, 19, 39)

# =============================================================================
# Channel builder
# =============================================================================


def integrate(f, a, b, N=64):
    x = np.linspace(a, b, N + 1)
    y = np.array([f(x_) for x_ in x])
    return 0.5 * (b - a) / N * (y[0] + y[-1] + 2.0 * y[1:-1].sum())


def builder(state):
    # Nothing is tabulated for 40K below the continuum but the scheme, and
    # nothing at all for the 39K residue
    if state.pdg != K40_PDG:
        return []
    if state.Ex < E_continuum:
        return scheme(state)

    Ex = state.Ex
    channels = []

    # E1 gamma rays into the continuum
    def gamma_density(E):
        T = gamma_transmission(gamma_strength, TRANSITION_ELECTRIC, 1, Ex - E)
        return T * level_density(rho_k40, E, state.two_J, -state.parity)

    width = integrate(gamma_density, E_continuum, Ex)
    channels.append(
        dexcite.ChannelContinuumGamma(
            width, E_continuum, Ex, k40, gamma_density, gamma_strength, rho_k40
        )
    )

    # E1 gamma rays to the tabulated levels
    for level in scheme.levels:
        T = gamma_transmission(gamma_strength, TRANSITION_ELECTRIC, 1, Ex - level.energy)
        channels.append(dexcite.ChannelDiscreteGamma(T, level, k40))

    # Neutrons into the 39K continuum
    if Ex > S_n:
        E_max = Ex - S_n

        def neutron_density(E):
            KE = E_max - E
            rho = level_density(rho_k39, E, 3, state.parity)
            return KE * rho, KE

        width = integrate(lambda E: neutron_density(E)[0], 0.0, E_max)
        channels.append(
            dexcite.ChannelContinuumFragment(
                width, 0.0, E_max, k39, neutron_density, neutron, transmission, rho_k39
            )
        )

    return channels


# =============================================================================
# Source
# =============================================================================

dexcite.Source(
    builder, Ex=9.0, two_J=4, parity=+1, pdg=K40_PDG, gs_mass=K40_MASS, Z=19
)

# =============================================================================
# Set settings and run
# =============================================================================

dexcite.settings.N_event = 200
dexcite.settings.rng_seed = 7
dexcite.run()
