import math
import numpy as np

FLOAT_DTYPE = np.float64
INT_DTYPE = np.int32

# Exit channels
CHANNEL_DISCRETE_FRAGMENT  :INT_DTYPE = 0
CHANNEL_DISCRETE_GAMMA     :INT_DTYPE = 1
CHANNEL_CONTINUUM_FRAGMENT :INT_DTYPE = 2
CHANNEL_CONTINUUM_GAMMA    :INT_DTYPE = 3

# Level density models
LEVEL_DENSITY_BACKSHIFTED_FERMI_GAS :INT_DTYPE = 0
LEVEL_DENSITY_CONSTANT              :INT_DTYPE = 1

# Gamma-ray strength models
GAMMA_STRENGTH_STANDARD_LORENTZIAN :INT_DTYPE = 0
GAMMA_STRENGTH_CONSTANT            :INT_DTYPE = 1

# Fragment transmission models
TRANSMISSION_BARRIER_PENETRATION :INT_DTYPE = 0
TRANSMISSION_CONSTANT            :INT_DTYPE = 1

# Gamma-ray transition types
TRANSITION_ELECTRIC :INT_DTYPE = 0
TRANSITION_MAGNETIC :INT_DTYPE = 1

# Parity
PARITY_POSITIVE :INT_DTYPE = 1
PARITY_NEGATIVE :INT_DTYPE = -1

# Sampling modes (SKIP_SPIN_PARITY is for testing only: the final spin-parity
# is left at its initial value, which is not physically meaningful)
SAMPLING_MODE_FULL             :INT_DTYPE = 0
SAMPLING_MODE_SKIP_SPIN_PARITY :INT_DTYPE = 1

# Negative excitation-energy density policy
DENSITY_VIOLATION_ZERO  :INT_DTYPE = 0
DENSITY_VIOLATION_RAISE :INT_DTYPE = 1

# PDG particle codes
PHOTON   :INT_DTYPE = 22
NEUTRON  :INT_DTYPE = 2112
PROTON   :INT_DTYPE = 2212
DEUTERON :INT_DTYPE = 1000010020
TRITON   :INT_DTYPE = 1000010030
HELION   :INT_DTYPE = 1000020030
ALPHA    :INT_DTYPE = 1000020040

# Physics constants (MeV, fm, c = 1)
AMU           :FLOAT_DTYPE = 931.49410242  # MeV
HBAR_C        :FLOAT_DTYPE = 197.3269804   # MeV fm
E2            :FLOAT_DTYPE = 1.439964548   # e^2 / (4 pi eps0), MeV fm
NUCLEAR_R0    :FLOAT_DTYPE = 1.25          # fm
NEUTRON_MASS  :FLOAT_DTYPE = 939.56542052  # MeV
PROTON_MASS   :FLOAT_DTYPE = 938.27208816  # MeV
ELECTRON_MASS :FLOAT_DTYPE = 0.51099895    # MeV

# Defaults
CHEBYSHEV_DEGREE   :INT_DTYPE = 63
CDF_GRID_SIZE      :INT_DTYPE = 256
CDF_TOLERANCE      :FLOAT_DTYPE = 1E-12
CDF_MAX_ITERATION  :INT_DTYPE = 200
LEVEL_TOLERANCE    :FLOAT_DTYPE = 1E-6 # MeV
MAX_CASCADE_STEPS  :INT_DTYPE = 1000
FRAGMENT_L_MAX     :INT_DTYPE = 5 # Largest orbital angular momentum for fragment emission
GAMMA_L_MAX        :INT_DTYPE = 2 # Largest gamma-ray multipolarity

# Misc.
PI   :FLOAT_DTYPE = math.acos(-1.0)
