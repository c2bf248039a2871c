from collections.abc import Callable
from types import NoneType

####

from dexcite.constant import PARITY_POSITIVE
from dexcite.object_.base import ObjectNonSingleton
from dexcite.object_.channel import NuclearState
from dexcite.object_.decay_scheme import DecayScheme
from dexcite.object_.event import Event
from dexcite.object_.level import check_parity, decode_spin_parity
from dexcite.object_.particle import Particle, nucleus
from dexcite.print_ import print_error

# ======================================================================================
# Source
# ======================================================================================


class Source(ObjectNonSingleton):
    """
    Initial excited nucleus of the events, and the channel builder that
    de-excites it.

    Parameters
    ----------
    builder : DecayScheme or callable
        ``builder(state) -> list of channels``. Called at every cascade step;
        an empty list (or only zero widths) ends the cascade.
    Ex : float
        Initial excitation energy (MeV).
    two_J : int
        Two times the initial spin.
    parity : int
        Initial parity, +1 or -1.
    pdg, gs_mass, Z : optional
        Ground state of the initial nucleus; taken from `builder` if it is a
        `DecayScheme`.
    projectile, ejectile : Particle, optional
        Reaction participants recorded in the events.
    probability : float
        Relative probability of this source among all sources.
    """

    # Annotations for type checking
    label: str = "source"
    #
    name: str
    builder: Callable
    pdg: int
    gs_mass: float
    Z: int
    Ex: float
    two_J: int
    parity: int
    projectile: Particle
    ejectile: Particle
    probability: float

    def __init__(
        self,
        builder: DecayScheme | Callable,
        Ex: float,
        two_J: int,
        parity: int = PARITY_POSITIVE,
        pdg: int | NoneType = None,
        gs_mass: float | NoneType = None,
        Z: int | NoneType = None,
        projectile: Particle | NoneType = None,
        ejectile: Particle | NoneType = None,
        name: str = "",
        probability: float = 1.0,
    ):
        super().__init__()

        # Set name
        if name != "":
            self.name = name
        else:
            self.name = f"{self.label}_{self.ID}"

        self.builder = builder

        # Ground state of the decaying nucleus
        if isinstance(builder, DecayScheme):
            pdg = builder.pdg if pdg is None else pdg
            gs_mass = builder.gs_mass if gs_mass is None else gs_mass
            Z = builder.Z if Z is None else Z
        if pdg is None or gs_mass is None or Z is None:
            print_error(f"Source {self.name}: pdg, gs_mass, and Z must be given")
        self.pdg = int(pdg)
        self.gs_mass = float(gs_mass)
        self.Z = int(Z)

        # Initial state
        if not Ex >= 0.0:
            print_error(f"Source {self.name}: Ex must be non-negative, got {Ex}")
        if two_J < 0:
            print_error(f"Source {self.name}: two_J must be non-negative, got {two_J}")
        self.Ex = float(Ex)
        self.two_J = int(two_J)
        self.parity = check_parity(parity)

        # Reaction participants
        self.projectile = Particle() if projectile is None else projectile
        self.ejectile = Particle() if ejectile is None else ejectile

        if not probability > 0.0:
            print_error(f"Source {self.name}: probability must be positive")
        self.probability = float(probability)

    def initial_state(self):
        return NuclearState(
            pdg=self.pdg,
            gs_mass=self.gs_mass,
            Ex=self.Ex,
            two_J=self.two_J,
            parity=self.parity,
        )

    def initial_event(self):
        target = nucleus(self.pdg, self.gs_mass, self.Z)
        residue = nucleus(self.pdg, self.gs_mass + self.Ex, self.Z)
        return Event(self.projectile, target, self.ejectile, residue, self.Ex)

    def __repr__(self):
        text = "\n"
        text += "Source\n"
        text += f"  - ID: {self.ID}\n"
        text += f"  - Name: {self.name}\n"
        text += f"  - PDG: {self.pdg}\n"
        text += f"  - Ex: {self.Ex} MeV\n"
        text += f"  - Spin-parity: {decode_spin_parity(self.two_J, self.parity)}\n"
        text += f"  - Probability: {self.probability}\n"
        return text
