# ======================================================================================
# Construction errors
# ======================================================================================


class DexciteError(Exception):
    pass


class InvalidWidth(DexciteError, ValueError):
    """A decay width that is negative or not finite."""


class InvalidEnergyRange(DexciteError, ValueError):
    """A continuum excitation-energy range with E_min > E_max or non-finite bounds."""


# ======================================================================================
# Decay errors
#   Any of these aborts the cascade of the current event. Nothing is retried
#   internally; discarding and regenerating an event is up to the driver.
# ======================================================================================


class DecayError(DexciteError):
    pass


class DensityViolation(DecayError, UserWarning):
    """
    The excitation-energy density evaluated to a negative value.

    Issued as a warning (and the density taken as zero at that point) under the
    default policy, raised under the ``"raise"`` policy.
    """


class NumericalConvergenceFailure(DecayError):
    """Inversion of the excitation-energy CDF did not converge."""


class NoAccessibleChannel(DecayError):
    """No final state with non-zero width is accessible."""


class KinematicallyForbidden(DecayError):
    """The decaying nucleus is lighter than the decay products."""


class CascadeError(DecayError):
    """The de-excitation cascade did not terminate."""
