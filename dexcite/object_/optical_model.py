import math

####

from dexcite.constant import (
    E2,
    FRAGMENT_L_MAX,
    HBAR_C,
    NUCLEAR_R0,
    TRANSMISSION_BARRIER_PENETRATION,
    TRANSMISSION_CONSTANT,
)
from dexcite.object_.base import ObjectPolymorphic
from dexcite.object_.fragment import Fragment
from dexcite.print_ import print_error

# ======================================================================================
# Fragment transmission base class
# ======================================================================================


class TransmissionBase(ObjectPolymorphic):
    # Annotations for type checking
    label: str = "transmission"
    #
    fragment: Fragment

    def __init__(self, type_, fragment):
        super().__init__(type_)
        self.fragment = fragment

    def __repr__(self):
        text = "\n"
        text += f"{decode_type(self.type)}\n"
        text += f"  - ID: {self.ID}\n"
        text += f"  - Fragment: {self.fragment.name}\n"
        return text


def decode_type(type_):
    if type_ == TRANSMISSION_BARRIER_PENETRATION:
        return "Barrier penetration transmission"
    elif type_ == TRANSMISSION_CONSTANT:
        return "Constant transmission"


# ======================================================================================
# Barrier penetration
# ======================================================================================


class TransmissionBarrierPenetration(TransmissionBase):
    """
    Smooth barrier-penetration transmission of a fragment from a residue.

    ``T_l(KE) = 1 / (1 + exp((B_l - KE) / diffuseness))`` where ``B_l`` is the
    Coulomb barrier at the touching radius plus the centrifugal barrier of
    orbital angular momentum ``l``. The transmission does not depend on the
    total fragment angular momentum ``j``.
    """

    # Annotations for type checking
    label: str = "barrier_penetration"
    #
    Z_residue: int
    A_residue: int
    radius: float
    coulomb_barrier: float
    centrifugal_factor: float
    diffuseness: float

    def __init__(self, fragment, Z_residue, A_residue, diffuseness=1.0, r0=NUCLEAR_R0):
        super().__init__(TRANSMISSION_BARRIER_PENETRATION, fragment)

        if A_residue < 1 or Z_residue < 0:
            print_error(
                f"Transmission: invalid residue Z={Z_residue}, A={A_residue}"
            )
        if not diffuseness > 0.0:
            print_error(f"Transmission: diffuseness must be positive, got {diffuseness}")

        self.Z_residue = int(Z_residue)
        self.A_residue = int(A_residue)
        self.diffuseness = float(diffuseness)

        # Touching radius (fm)
        self.radius = r0 * (fragment.A ** (1.0 / 3.0) + A_residue ** (1.0 / 3.0))

        # Barriers (MeV)
        self.coulomb_barrier = fragment.Z * Z_residue * E2 / self.radius
        mass_residue = A_residue * fragment.mass / fragment.A
        reduced_mass = fragment.mass * mass_residue / (fragment.mass + mass_residue)
        self.centrifugal_factor = HBAR_C**2 / (2.0 * reduced_mass * self.radius**2)

    def barrier(self, l):
        return self.coulomb_barrier + self.centrifugal_factor * l * (l + 1)

    def __repr__(self):
        text = super().__repr__()
        text += f"  - Residue Z, A: {self.Z_residue}, {self.A_residue}\n"
        text += f"  - Radius: {self.radius} fm\n"
        text += f"  - Coulomb barrier: {self.coulomb_barrier} MeV\n"
        text += f"  - Diffuseness: {self.diffuseness} MeV\n"
        return text


# ======================================================================================
# Constant
# ======================================================================================


class TransmissionConstant(TransmissionBase):
    """Transmission `value` for every partial wave with l <= l_max, zero above."""

    # Annotations for type checking
    label: str = "constant_transmission"
    #
    value: float
    l_max: int

    def __init__(self, fragment, value, l_max=FRAGMENT_L_MAX):
        super().__init__(TRANSMISSION_CONSTANT, fragment)

        if not math.isfinite(value) or value < 0.0 or value > 1.0:
            print_error(f"Transmission: value must be in [0, 1], got {value}")

        self.value = float(value)
        self.l_max = int(l_max)

    def __repr__(self):
        text = super().__repr__()
        text += f"  - Value: {self.value}\n"
        text += f"  - Largest l: {self.l_max}\n"
        return text
