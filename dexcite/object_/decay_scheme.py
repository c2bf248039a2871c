from dataclasses import dataclass

####

from dexcite.error import NoAccessibleChannel
from dexcite.object_.base import ObjectNonSingleton
from dexcite.object_.channel import ChannelDiscreteGamma
from dexcite.object_.level import Level
from dexcite.object_.particle import nucleus
from dexcite.print_ import print_error


@dataclass(frozen=True)
class GammaTransition:
    initial: Level
    final: Level
    intensity: float


# ======================================================================================
# Discrete gamma-ray decay scheme
# ======================================================================================


class DecayScheme(ObjectNonSingleton):
    """
    Tabulated levels of a nucleus and the gamma-ray transitions between them.

    Acts as a channel builder: `channels(state)` gives one discrete gamma
    channel per transition out of the level at the state's excitation energy,
    with the relative intensity as the width.

    Parameters
    ----------
    name : str
        Name of the nucleus, e.g. ``"40K"``.
    pdg : int
        PDG code of the nucleus.
    gs_mass : float
        Ground-state mass (MeV).
    Z : int
        Proton number.
    """

    # Annotations for type checking
    label: str = "decay_scheme"
    #
    name: str
    pdg: int
    gs_mass: float
    Z: int
    levels: list[Level]
    transitions: list[GammaTransition]

    def __init__(self, name, pdg, gs_mass, Z):
        super().__init__()

        if not gs_mass > 0.0:
            print_error(f"Decay scheme {name}: mass must be positive, got {gs_mass}")

        self.name = name
        self.pdg = int(pdg)
        self.gs_mass = float(gs_mass)
        self.Z = int(Z)
        self.levels = []
        self.transitions = []

    def add_level(self, energy, two_J, parity):
        level = Level(energy, two_J, parity)
        if len(self.levels) > 0 and energy <= self.levels[-1].energy:
            print_error(
                f"Decay scheme {self.name}: levels must be added in increasing "
                f"energy, got {energy} MeV after {self.levels[-1].energy} MeV"
            )
        self.levels.append(level)
        return level

    def add_gamma(self, initial, final, intensity):
        if initial not in self.levels or final not in self.levels:
            print_error(f"Decay scheme {self.name}: unknown level in gamma transition")
        if not final.energy < initial.energy:
            print_error(
                f"Decay scheme {self.name}: gamma transition from {initial.energy} "
                f"MeV must go to a lower level, got {final.energy} MeV"
            )
        if not intensity >= 0.0:
            print_error(
                f"Decay scheme {self.name}: intensity must be non-negative, "
                f"got {intensity}"
            )
        self.transitions.append(GammaTransition(initial, final, float(intensity)))

    def find_level(self, Ex, tolerance):
        for level in self.levels:
            if abs(level.energy - Ex) <= tolerance:
                return level
        return None

    def ground_state(self):
        return nucleus(self.pdg, self.gs_mass, self.Z)

    def channels(self, state):
        from dexcite.object_.structure import structure

        level = self.find_level(state.Ex, structure.settings.level_tolerance)
        if level is None:
            raise NoAccessibleChannel(
                f"Decay scheme {self.name}: no level at Ex = {state.Ex} MeV"
            )

        residue = self.ground_state()
        return [
            ChannelDiscreteGamma(transition.intensity, transition.final, residue)
            for transition in self.transitions
            if transition.initial is level
        ]

    def __call__(self, state):
        return self.channels(state)

    def __repr__(self):
        text = "\n"
        text += "Decay scheme\n"
        text += f"  - ID: {self.ID}\n"
        text += f"  - Name: {self.name}\n"
        text += f"  - PDG: {self.pdg}\n"
        text += f"  - Levels: {len(self.levels)}\n"
        text += f"  - Gamma transitions: {len(self.transitions)}\n"
        return text
