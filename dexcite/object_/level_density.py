import math

####

from dexcite.constant import (
    LEVEL_DENSITY_BACKSHIFTED_FERMI_GAS,
    LEVEL_DENSITY_CONSTANT,
)
from dexcite.object_.base import ObjectPolymorphic
from dexcite.print_ import print_error

# ======================================================================================
# Level density base class
# ======================================================================================


class LevelDensityBase(ObjectPolymorphic):
    # Annotations for type checking
    label: str = "level_density"

    def __init__(self, type_):
        super().__init__(type_)

    def __repr__(self):
        text = "\n"
        text += f"{decode_type(self.type)}\n"
        text += f"  - ID: {self.ID}\n"
        return text


def decode_type(type_):
    if type_ == LEVEL_DENSITY_BACKSHIFTED_FERMI_GAS:
        return "Back-shifted Fermi gas level density"
    elif type_ == LEVEL_DENSITY_CONSTANT:
        return "Constant level density"


# ======================================================================================
# Back-shifted Fermi gas
# ======================================================================================


class LevelDensityBackshiftedFermiGas(LevelDensityBase):
    """
    Back-shifted Fermi gas level density with a rigid-body spin cutoff and
    equiprobable parities.

    Parameters
    ----------
    Z, A : int
        Proton and mass numbers of the nucleus.
    a : float, optional
        Level density parameter (1/MeV). Defaults to the global systematics
        ``0.0722396 A + 0.195267 A^(2/3)``.
    delta : float, optional
        Energy back-shift (MeV). Defaults to the pairing energy ``chi 12/sqrt(A)``
        with chi = +1, 0, -1 for even-even, odd-A, odd-odd nuclei.
    """

    # Annotations for type checking
    label: str = "backshifted_fermi_gas"
    #
    Z: int
    A: int
    a: float
    delta: float
    sigma2_factor: float

    def __init__(self, Z, A, a=None, delta=None):
        super().__init__(LEVEL_DENSITY_BACKSHIFTED_FERMI_GAS)

        if A < 1 or Z < 0 or Z > A:
            print_error(f"Level density: invalid nucleus Z={Z}, A={A}")

        self.Z = int(Z)
        self.A = int(A)

        if a is None:
            a = 0.0722396 * A + 0.195267 * A ** (2.0 / 3.0)
        if not a > 0.0:
            print_error(f"Level density: parameter a must be positive, got {a}")
        self.a = float(a)

        if delta is None:
            N = A - Z
            if Z % 2 == 0 and N % 2 == 0:
                chi = 1.0
            elif Z % 2 == 1 and N % 2 == 1:
                chi = -1.0
            else:
                chi = 0.0
            delta = chi * 12.0 / math.sqrt(A)
        self.delta = float(delta)

        # Rigid-body spin cutoff: sigma^2 = sigma2_factor * sqrt(a U) / a
        self.sigma2_factor = 0.01389 * A ** (5.0 / 3.0)

    def __repr__(self):
        text = super().__repr__()
        text += f"  - Z, A: {self.Z}, {self.A}\n"
        text += f"  - a: {self.a} /MeV\n"
        text += f"  - Back-shift: {self.delta} MeV\n"
        return text


# ======================================================================================
# Constant
# ======================================================================================


class LevelDensityConstant(LevelDensityBase):
    """Level density independent of energy, spin, and parity (levels/MeV)."""

    # Annotations for type checking
    label: str = "constant_level_density"
    #
    value: float

    def __init__(self, value):
        super().__init__(LEVEL_DENSITY_CONSTANT)

        if not math.isfinite(value) or value < 0.0:
            print_error(f"Level density: value must be non-negative, got {value}")
        self.value = float(value)

    def __repr__(self):
        text = super().__repr__()
        text += f"  - Value: {self.value} /MeV\n"
        return text
