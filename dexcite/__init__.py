# ======================================================================================
# Nuclear structure building blocks
# ======================================================================================

from dexcite.object_.structure import structure

settings = structure.settings

# The records
from dexcite.object_.decay_scheme import DecayScheme
from dexcite.object_.fragment import Fragment, light_fragment, nucleus_mass, nucleus_pdg
from dexcite.object_.level import Level
from dexcite.object_.particle import Particle, nucleus
from dexcite.object_.source import Source

# The models
from dexcite.object_.gamma_strength import (
    GammaStrengthConstant,
    GammaStrengthStandardLorentzian,
)
from dexcite.object_.level_density import (
    LevelDensityBackshiftedFermiGas,
    LevelDensityConstant,
)
from dexcite.object_.optical_model import (
    TransmissionBarrierPenetration,
    TransmissionConstant,
)

# The exit channels
from dexcite.object_.channel import (
    ChannelContinuumFragment,
    ChannelContinuumGamma,
    ChannelDiscreteFragment,
    ChannelDiscreteGamma,
    NuclearState,
    SpinParityWidth,
)

# ======================================================================================
# Runners
# ======================================================================================

from dexcite.main import run

# ======================================================================================
# Misc.
# ======================================================================================

import dexcite.config
from dexcite.error import (
    CascadeError,
    DecayError,
    DensityViolation,
    DexciteError,
    InvalidEnergyRange,
    InvalidWidth,
    KinematicallyForbidden,
    NoAccessibleChannel,
    NumericalConvergenceFailure,
)
