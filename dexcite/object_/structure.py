from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dexcite.object_.decay_scheme import DecayScheme
    from dexcite.object_.fragment import Fragment
    from dexcite.object_.gamma_strength import GammaStrengthBase
    from dexcite.object_.level import Level
    from dexcite.object_.level_density import LevelDensityBase
    from dexcite.object_.optical_model import TransmissionBase
    from dexcite.object_.source import Source

####

from dexcite.object_.base import ObjectSingleton
from dexcite.object_.settings import Settings


# ======================================================================================
# Nuclear structure database
# ======================================================================================
# Owns every registered record. A record's ID is its index in the corresponding
# list; exit channels refer to records but never own them, and the database
# outlives all channels.


class NuclearStructure(ObjectSingleton):
    # Records
    levels: list[Level]
    fragments: list[Fragment]
    decay_schemes: list[DecayScheme]

    # Models
    level_density_models: list[LevelDensityBase]
    gamma_strength_models: list[GammaStrengthBase]
    transmission_models: list[TransmissionBase]

    # Run input
    sources: list[Source]
    settings: Settings

    def __init__(self):
        super().__init__()
        self.reset()

    def reset(self):
        self.levels = []
        self.fragments = []
        self.decay_schemes = []

        self.level_density_models = []
        self.gamma_strength_models = []
        self.transmission_models = []

        self.sources = []
        self.settings = Settings()

    def find_decay_scheme(self, pdg):
        for scheme in self.decay_schemes:
            if scheme.pdg == pdg:
                return scheme
        return None

    def find_fragment(self, pdg):
        for fragment in self.fragments:
            if fragment.pdg == pdg:
                return fragment
        return None

    def __repr__(self):
        text = "\n"
        text += "Nuclear structure database\n"
        text += f"  - Levels: {len(self.levels)}\n"
        text += f"  - Fragments: {len(self.fragments)}\n"
        text += f"  - Decay schemes: {len(self.decay_schemes)}\n"
        text += f"  - Level density models: {len(self.level_density_models)}\n"
        text += f"  - Gamma strength models: {len(self.gamma_strength_models)}\n"
        text += f"  - Transmission models: {len(self.transmission_models)}\n"
        text += f"  - Sources: {len(self.sources)}\n"
        return text


structure = NuclearStructure()
