import math

from collections.abc import Callable
from dataclasses import dataclass

####

from dexcite.constant import (
    CHANNEL_CONTINUUM_FRAGMENT,
    CHANNEL_CONTINUUM_GAMMA,
    CHANNEL_DISCRETE_FRAGMENT,
    CHANNEL_DISCRETE_GAMMA,
    PARITY_POSITIVE,
)
from dexcite.error import InvalidEnergyRange, InvalidWidth
from dexcite.object_.base import ObjectBase, ObjectPolymorphic
from dexcite.object_.fragment import Fragment
from dexcite.object_.gamma_strength import GammaStrengthBase
from dexcite.object_.level import Level, decode_spin_parity
from dexcite.object_.level_density import LevelDensityBase
from dexcite.object_.optical_model import TransmissionBase
from dexcite.object_.particle import Particle
from dexcite.object_.util import OnceCell


# ======================================================================================
# Nuclear state and spin-parity sub-channel
# ======================================================================================


@dataclass
class NuclearState(ObjectBase):
    """
    Current state of the decaying nucleus.

    A decay reads the state on entry and overwrites it with the state of the
    residual nucleus on return.
    """

    label: str = "nuclear_state"
    pdg: int = 0
    gs_mass: float = 0.0
    Ex: float = 0.0
    two_J: int = 0
    parity: int = PARITY_POSITIVE

    @property
    def mass(self):
        return self.gs_mass + self.Ex

    def __repr__(self):
        return (
            f"NuclearState(pdg={self.pdg}, Ex={self.Ex} MeV, "
            f"J^P={decode_spin_parity(self.two_J, self.parity)})"
        )


@dataclass(frozen=True)
class SpinParityWidth:
    """One final spin-parity accessible through a continuum channel."""

    two_J: int
    parity: int
    width: float


# ======================================================================================
# Channel base class
# ======================================================================================


class ChannelBase(ObjectPolymorphic):
    # Annotations for type checking
    label: str = "channel"
    #
    _width: float

    def __init__(self, type_, width):
        # Channels are transient; they are not registered
        super().__init__(type_, register=False)
        self._width = check_width(width)

    @property
    def width(self):
        """Partial decay width (MeV)."""
        return self._width

    def __repr__(self):
        text = "\n"
        text += f"{decode_type(self.type)}\n"
        text += f"  - Width: {self.width} MeV\n"
        return text


def decode_type(type_):
    if type_ == CHANNEL_DISCRETE_FRAGMENT:
        return "Discrete fragment channel"
    elif type_ == CHANNEL_DISCRETE_GAMMA:
        return "Discrete gamma channel"
    elif type_ == CHANNEL_CONTINUUM_FRAGMENT:
        return "Continuum fragment channel"
    elif type_ == CHANNEL_CONTINUUM_GAMMA:
        return "Continuum gamma channel"


def check_width(width):
    if not math.isfinite(width) or width < 0.0:
        raise InvalidWidth(f"Decay width must be finite and non-negative, got {width}")
    return float(width)


def check_energy_range(E_min, E_max):
    if not (math.isfinite(E_min) and math.isfinite(E_max)) or E_min > E_max:
        raise InvalidEnergyRange(
            f"Invalid continuum excitation energy range [{E_min}, {E_max}]"
        )
    return float(E_min), float(E_max)


# ======================================================================================
# Discrete channels
# ======================================================================================


class ChannelDiscreteBase(ChannelBase):
    # Annotations for type checking
    label: str = "discrete_channel"
    #
    final_level: Level
    residue: Particle

    def __init__(self, type_, width, final_level, residue):
        super().__init__(type_, width)
        self.final_level = final_level
        self.residue = residue

    def __repr__(self):
        text = super().__repr__()
        text += f"  - Final level: {self.final_level.energy} MeV"
        text += f" {self.final_level.spin_parity}\n"
        text += f"  - Residue PDG: {self.residue.pdg}\n"
        return text


class ChannelDiscreteFragment(ChannelDiscreteBase):
    """
    Fragment emission to a tabulated level of the residue.

    Parameters
    ----------
    width : float
        Partial decay width (MeV).
    final_level : Level
        Level of the residue populated by the decay.
    residue : Particle
        Residual nucleus in its ground state.
    fragment : Fragment
        Emitted fragment.
    """

    # Annotations for type checking
    label: str = "discrete_fragment_channel"
    #
    fragment: Fragment

    def __init__(self, width, final_level, residue, fragment):
        super().__init__(CHANNEL_DISCRETE_FRAGMENT, width, final_level, residue)
        self.fragment = fragment

    def __repr__(self):
        text = super().__repr__()
        text += f"  - Fragment: {self.fragment.name}\n"
        return text


class ChannelDiscreteGamma(ChannelDiscreteBase):
    """Gamma-ray emission to a tabulated level; see `ChannelDiscreteFragment`."""

    # Annotations for type checking
    label: str = "discrete_gamma_channel"

    def __init__(self, width, final_level, residue):
        super().__init__(CHANNEL_DISCRETE_GAMMA, width, final_level, residue)


# ======================================================================================
# Continuum channels
# ======================================================================================
# The CDF interpolant and the spin-parity table are built on first use only;
# most channels offered to the selector are never picked.


class ChannelContinuumBase(ChannelBase):
    # Annotations for type checking
    label: str = "continuum_channel"
    #
    E_min: float
    E_max: float
    residue: Particle
    density: Callable
    level_density: LevelDensityBase
    cdf: OnceCell
    spin_parity_table: OnceCell

    def __init__(self, type_, width, E_min, E_max, residue, density, level_density):
        super().__init__(type_, width)
        self.E_min, self.E_max = check_energy_range(E_min, E_max)
        self.residue = residue
        self.density = density
        self.level_density = level_density
        self.cdf = OnceCell()
        self.spin_parity_table = OnceCell()

    def __repr__(self):
        text = super().__repr__()
        text += f"  - Excitation energy range: [{self.E_min}, {self.E_max}] MeV\n"
        text += f"  - Residue PDG: {self.residue.pdg}\n"
        text += f"  - CDF built: {self.cdf.built}\n"
        text += f"  - Spin-parity table built: {self.spin_parity_table.built}\n"
        return text


class ChannelContinuumFragment(ChannelContinuumBase):
    """
    Fragment emission into the unbound continuum of the residue.

    Parameters
    ----------
    width : float
        Partial decay width (MeV).
    E_min, E_max : float
        Accessible range of residue excitation energy (MeV).
    residue : Particle
        Residual nucleus in its ground state.
    density : callable
        ``density(Ex) -> (pdf, KE)``: probability density of the final
        excitation energy and the fragment kinetic energy it implies.
    fragment : Fragment
        Emitted fragment.
    transmission : TransmissionBase
        Fragment transmission model.
    level_density : LevelDensityBase
        Level density of the residue.
    """

    # Annotations for type checking
    label: str = "continuum_fragment_channel"
    #
    fragment: Fragment
    transmission: TransmissionBase

    def __init__(
        self,
        width,
        E_min,
        E_max,
        residue,
        density,
        fragment,
        transmission,
        level_density,
    ):
        super().__init__(
            CHANNEL_CONTINUUM_FRAGMENT,
            width,
            E_min,
            E_max,
            residue,
            density,
            level_density,
        )
        self.fragment = fragment
        self.transmission = transmission

    def __repr__(self):
        text = super().__repr__()
        text += f"  - Fragment: {self.fragment.name}\n"
        return text


class ChannelContinuumGamma(ChannelContinuumBase):
    """
    Gamma-ray emission into the continuum; ``density(Ex) -> pdf``.

    See `ChannelContinuumFragment` for the other parameters.
    """

    # Annotations for type checking
    label: str = "continuum_gamma_channel"
    #
    gamma_strength: GammaStrengthBase

    def __init__(
        self, width, E_min, E_max, residue, density, gamma_strength, level_density
    ):
        super().__init__(
            CHANNEL_CONTINUUM_GAMMA,
            width,
            E_min,
            E_max,
            residue,
            density,
            level_density,
        )
        self.gamma_strength = gamma_strength
