from dexcite.constant import (
    ALPHA,
    AMU,
    DEUTERON,
    HELION,
    NEUTRON,
    NEUTRON_MASS,
    PARITY_POSITIVE,
    PROTON,
    PROTON_MASS,
    TRITON,
)
from dexcite.object_.base import ObjectNonSingleton
from dexcite.object_.level import check_parity, decode_spin_parity
from dexcite.print_ import print_error


# ======================================================================================
# Emitted nuclear fragment
# ======================================================================================


class Fragment(ObjectNonSingleton):
    # Annotations for type checking
    label: str = "fragment"
    #
    name: str
    pdg: int
    mass: float
    Z: int
    A: int
    two_s: int
    parity: int

    def __init__(self, name, pdg, mass, Z, A, two_s, parity=PARITY_POSITIVE):
        super().__init__()

        if mass <= 0.0:
            print_error(f"Fragment {name}: mass must be positive, got {mass}")
        if two_s < 0:
            print_error(f"Fragment {name}: spin must be non-negative, got two_s = {two_s}")

        self.name = name
        self.pdg = int(pdg)
        self.mass = float(mass)
        self.Z = int(Z)
        self.A = int(A)
        self.two_s = int(two_s)
        self.parity = check_parity(parity)

    def __repr__(self):
        text = "\n"
        text += "Fragment\n"
        text += f"  - ID: {self.ID}\n"
        text += f"  - Name: {self.name}\n"
        text += f"  - PDG: {self.pdg}\n"
        text += f"  - Mass: {self.mass} MeV\n"
        text += f"  - Z, A: {self.Z}, {self.A}\n"
        text += f"  - Spin-parity: {decode_spin_parity(self.two_s, self.parity)}\n"
        return text


# ======================================================================================
# Light fragments
# ======================================================================================
# Masses are nuclear (bare) masses in MeV


LIGHT_FRAGMENTS = {
    "n": (NEUTRON, NEUTRON_MASS, 0, 1, 1),
    "p": (PROTON, PROTON_MASS, 1, 1, 1),
    "d": (DEUTERON, 1875.61294257, 1, 2, 2),
    "t": (TRITON, 2808.92113298, 1, 3, 1),
    "h": (HELION, 2808.39160743, 2, 3, 1),
    "a": (ALPHA, 3727.3794066, 2, 4, 0),
}


def light_fragment(name):
    """Create (and register) one of the light fragments n, p, d, t, h, a."""
    from dexcite.object_.structure import structure

    if name not in LIGHT_FRAGMENTS:
        print_error(f"Unknown light fragment: {name}")

    pdg, mass, Z, A, two_s = LIGHT_FRAGMENTS[name]
    fragment = structure.find_fragment(pdg)
    if fragment is not None:
        return fragment
    return Fragment(name, pdg, mass, Z, A, two_s)


def nucleus_pdg(Z, A):
    """PDG code 10LZZZAAAI of a nucleus in its ground state."""
    return 1000000000 + 10000 * Z + 10 * A


def nucleus_mass(Z, A, mass_excess=0.0):
    """Approximate nuclear mass (MeV) from an atomic mass excess (MeV)."""
    from dexcite.constant import ELECTRON_MASS

    return A * AMU + mass_excess - Z * ELECTRON_MASS
