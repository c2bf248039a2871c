import numpy as np

from numpy import float64
from numpy.typing import NDArray
from typing import Annotated

####

from dexcite.constant import (
    GAMMA_L_MAX,
    GAMMA_STRENGTH_CONSTANT,
    GAMMA_STRENGTH_STANDARD_LORENTZIAN,
    PI,
)
from dexcite.object_.base import ObjectPolymorphic
from dexcite.print_ import print_1d_array, print_error
from dexcite.transport.physics import standard_lorentzian

# ======================================================================================
# Gamma-ray strength function base class
# ======================================================================================


class GammaStrengthBase(ObjectPolymorphic):
    # Annotations for type checking
    label: str = "gamma_strength"

    def __init__(self, type_):
        super().__init__(type_)

    def __repr__(self):
        text = "\n"
        text += f"{decode_type(self.type)}\n"
        text += f"  - ID: {self.ID}\n"
        return text


def decode_type(type_):
    if type_ == GAMMA_STRENGTH_STANDARD_LORENTZIAN:
        return "Standard Lorentzian gamma-ray strength"
    elif type_ == GAMMA_STRENGTH_CONSTANT:
        return "Constant gamma-ray transmission"


# ======================================================================================
# Standard Lorentzian
# ======================================================================================
# Giant resonance parameters are stored per transition type (row: electric,
# magnetic) and multipolarity (column: l - 1).


class GammaStrengthStandardLorentzian(GammaStrengthBase):
    """
    Standard Lorentzian (Brink-Axel) strength function for E1, M1, E2, M2.

    The resonance energies, widths, and peak cross sections follow the global
    systematics for a nucleus (Z, A); M2 is scaled down from M1.
    """

    # Annotations for type checking
    label: str = "standard_lorentzian"
    #
    Z: int
    A: int
    resonance_energy: Annotated[NDArray[float64], (2, GAMMA_L_MAX)]
    resonance_width: Annotated[NDArray[float64], (2, GAMMA_L_MAX)]
    cross_section: Annotated[NDArray[float64], (2, GAMMA_L_MAX)]
    scale: Annotated[NDArray[float64], (2, GAMMA_L_MAX)]

    def __init__(self, Z, A):
        super().__init__(GAMMA_STRENGTH_STANDARD_LORENTZIAN)

        if A < 2 or Z < 1 or Z >= A:
            print_error(f"Gamma strength: invalid nucleus Z={Z}, A={A}")

        self.Z = int(Z)
        self.A = int(A)
        N = A - Z
        A13 = A ** (1.0 / 3.0)

        energy = np.zeros((2, GAMMA_L_MAX))
        width = np.zeros((2, GAMMA_L_MAX))
        cross_section = np.zeros((2, GAMMA_L_MAX))
        scale = np.ones((2, GAMMA_L_MAX))

        # E1: giant dipole resonance
        energy[0, 0] = 31.2 / A13 + 20.6 / A ** (1.0 / 6.0)
        width[0, 0] = 0.026 * energy[0, 0] ** 1.91
        cross_section[0, 0] = 1.2 * 120.0 * N * Z / (A * PI * width[0, 0])

        # E2: isoscalar giant quadrupole resonance
        energy[0, 1] = 63.0 / A13
        width[0, 1] = 6.11 - 0.012 * A
        cross_section[0, 1] = (
            1.5e-4 * Z**2 * energy[0, 1] ** 2 / (A13 * width[0, 1])
        )

        # M1: spin-flip resonance, normalized to the E1 strength at 7 MeV
        energy[1, 0] = 41.0 / A13
        width[1, 0] = 4.0
        f_E1 = standard_lorentzian(
            7.0, energy[0, 0], width[0, 0], cross_section[0, 0], 1
        )
        f_M1 = f_E1 / (0.0588 * A**0.878)
        cross_section[1, 0] = f_M1 / standard_lorentzian(
            7.0, energy[1, 0], width[1, 0], 1.0, 1
        )

        # M2: M1 shape scaled down
        energy[1, 1] = energy[1, 0]
        width[1, 1] = width[1, 0]
        cross_section[1, 1] = cross_section[1, 0]
        scale[1, 1] = 8.0e-4

        self.resonance_energy = energy
        self.resonance_width = width
        self.cross_section = cross_section
        self.scale = scale

    def __repr__(self):
        text = super().__repr__()
        text += f"  - Z, A: {self.Z}, {self.A}\n"
        text += f"  - E1 resonance energy {print_1d_array(self.resonance_energy[0])}\n"
        text += f"  - M1 resonance energy {print_1d_array(self.resonance_energy[1])}\n"
        return text


# ======================================================================================
# Constant
# ======================================================================================


class GammaStrengthConstant(GammaStrengthBase):
    """Energy-independent transmission coefficients, one per (type, l)."""

    # Annotations for type checking
    label: str = "constant_gamma_strength"
    #
    transmission: Annotated[NDArray[float64], (2, GAMMA_L_MAX)]

    def __init__(self, electric, magnetic):
        super().__init__(GAMMA_STRENGTH_CONSTANT)

        transmission = np.zeros((2, GAMMA_L_MAX))
        transmission[0] = electric
        transmission[1] = magnetic
        if not np.all(np.isfinite(transmission)) or np.any(transmission < 0.0):
            print_error("Gamma strength: transmission coefficients must be non-negative")
        self.transmission = transmission

    def __repr__(self):
        text = super().__repr__()
        text += f"  - Electric {print_1d_array(self.transmission[0])}\n"
        text += f"  - Magnetic {print_1d_array(self.transmission[1])}\n"
        return text
