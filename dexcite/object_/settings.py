from dataclasses import dataclass

####

from dexcite.constant import (
    CDF_GRID_SIZE,
    CDF_MAX_ITERATION,
    CDF_TOLERANCE,
    CHEBYSHEV_DEGREE,
    DENSITY_VIOLATION_RAISE,
    DENSITY_VIOLATION_ZERO,
    LEVEL_TOLERANCE,
    MAX_CASCADE_STEPS,
)
from dexcite.object_.base import ObjectSingleton
from dexcite.print_ import print_error

# ======================================================================================
# Settings
# ======================================================================================


@dataclass
class Settings(ObjectSingleton):
    """
    Global input settings for a de-excitation run.

    Attributes
    ----------
    N_event : int
        Number of events to generate.
    rng_seed : int
        Random number generator seed. Event ``i`` samples from the independent
        stream ``rng.event_seed(i, rng_seed)``.
    output_name : str
        Base name for output files.
    use_progress_bar : bool
        Enable progress reporting.
    save_hepevt : bool
        Also write the events in HEPEvt text format.
    chebyshev_degree : int
        Degree of the Chebyshev interpolant to continuum excitation-energy
        densities.
    cdf_grid_size : int
        Number of bins of the tabulated CDF used to bracket each inversion.
    cdf_tolerance : float
        Relative (to the continuum width) tolerance of the CDF inversion.
    cdf_max_iteration : int
        Iterations allowed before a CDF inversion is declared unconverged.
    density_violation : int
        One of ``DENSITY_VIOLATION_*``; see :meth:`set_density_violation`.
    level_tolerance : float
        Energy tolerance (MeV) used to match a nuclear state to a tabulated
        level.
    max_cascade_steps : int
        Upper bound on the number of emissions in one cascade.
    discard_failed_events : bool
        If True, events whose cascade failed are reported and dropped;
        otherwise the failure propagates.
    """

    # Annotations for type checking
    label: str = "settings"

    # Basic
    N_event: int = 0
    rng_seed: int = 1

    # Output
    output_name: str = "output"
    use_progress_bar: bool = True
    save_hepevt: bool = False

    # Continuum sampling
    chebyshev_degree: int = CHEBYSHEV_DEGREE
    cdf_grid_size: int = CDF_GRID_SIZE
    cdf_tolerance: float = CDF_TOLERANCE
    cdf_max_iteration: int = CDF_MAX_ITERATION
    density_violation: int = DENSITY_VIOLATION_ZERO

    # Cascade
    level_tolerance: float = LEVEL_TOLERANCE
    max_cascade_steps: int = MAX_CASCADE_STEPS
    discard_failed_events: bool = True

    def __post_init__(self):
        super().__init__()

    def set_cdf_inversion(
        self, degree=None, grid_size=None, tolerance=None, max_iteration=None
    ):
        if degree is not None:
            if degree < 1:
                print_error("CDF inversion: Chebyshev degree has to be positive.")
            self.chebyshev_degree = int(degree)
        if grid_size is not None:
            if grid_size < 1:
                print_error("CDF inversion: Grid size has to be positive.")
            self.cdf_grid_size = int(grid_size)
        if tolerance is not None:
            if not tolerance > 0.0:
                print_error("CDF inversion: Tolerance has to be larger than zero.")
            self.cdf_tolerance = float(tolerance)
        if max_iteration is not None:
            if max_iteration < 1:
                print_error("CDF inversion: Maximum iteration has to be positive.")
            self.cdf_max_iteration = int(max_iteration)

    def set_density_violation(self, policy):
        """
        Select what happens where an excitation-energy density is negative.

        ``"zero"`` (default) treats the point as inaccessible (zero density)
        and issues a :class:`dexcite.error.DensityViolation` warning;
        ``"raise"`` raises it instead, aborting the cascade.
        """
        if policy == "zero":
            self.density_violation = DENSITY_VIOLATION_ZERO
        elif policy == "raise":
            self.density_violation = DENSITY_VIOLATION_RAISE
        else:
            print_error(f"Unknown density violation policy: {policy}")
