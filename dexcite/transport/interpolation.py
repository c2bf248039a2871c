import math
import numpy as np

from numba import njit
from numpy.polynomial import Chebyshev

####

from dexcite.error import NoAccessibleChannel, NumericalConvergenceFailure
from dexcite.transport.util import find_bin, linear_interpolation

# Double precision machine epsilon
EPSILON = np.finfo(np.float64).eps


# ======================================================================================
# Chebyshev interpolant
# ======================================================================================


class ChebyshevInterpolant:
    """
    Chebyshev series approximation of a function on [a, b].

    Build with `build`. Evaluation runs the jitted Clenshaw recurrence on the
    series coefficients.
    """

    def __init__(self, series, a, b):
        self.series = series
        self.coefficients = np.ascontiguousarray(series.coef, dtype=np.float64)
        self.a = float(a)
        self.b = float(b)

    @property
    def degree(self):
        return len(self.coefficients) - 1

    def evaluate(self, x):
        return clenshaw(x, self.coefficients, self.a, self.b)

    def __call__(self, x):
        return self.evaluate(x)

    def cdf(self):
        """The running integral from a, as another interpolant."""
        return ChebyshevInterpolant(self.series.integ(lbnd=self.a), self.a, self.b)

    def __repr__(self):
        return f"ChebyshevInterpolant(degree={self.degree}, domain=[{self.a}, {self.b}])"


def build(f, a, b, degree):
    """
    Interpolate the scalar function `f` on [a, b] at the Chebyshev points of
    the first kind.
    """

    def f_vector(x):
        return np.array([f(x_) for x_ in x], dtype=np.float64)

    series = Chebyshev.interpolate(f_vector, degree, domain=[a, b])
    return ChebyshevInterpolant(series, a, b)


@njit
def clenshaw(x, coefficients, a, b):
    t = (2.0 * x - a - b) / (b - a)
    b1 = 0.0
    b2 = 0.0
    for i in range(len(coefficients) - 1, 0, -1):
        b0 = coefficients[i] + 2.0 * t * b1 - b2
        b2 = b1
        b1 = b0
    return coefficients[0] + t * b1 - b2


# ======================================================================================
# Inverse CDF
# ======================================================================================


class InverseCDF:
    """
    Sampler of a density through its interpolated CDF.

    The CDF is tabulated on a uniform grid (made non-decreasing) to bracket
    each inversion; the root is then refined on the interpolant itself.
    """

    def __init__(self, cdf, grid_size):
        self.cdf = cdf
        self.grid_x = np.linspace(cdf.a, cdf.b, grid_size + 1)
        grid_cdf = np.array([cdf.evaluate(x) for x in self.grid_x])
        self.grid_cdf = np.maximum.accumulate(grid_cdf)
        self.total = self.grid_cdf[-1] - self.grid_cdf[0]

        if not self.total > 0.0:
            raise NoAccessibleChannel(
                f"Excitation energy density integrates to {self.total} "
                f"on [{cdf.a}, {cdf.b}]"
            )

    def sample(self, xi, tolerance, max_iteration):
        x, converged = invert_cdf(
            xi,
            self.cdf.coefficients,
            self.cdf.a,
            self.cdf.b,
            self.grid_x,
            self.grid_cdf,
            tolerance,
            max_iteration,
        )
        if not converged:
            raise NumericalConvergenceFailure(
                f"CDF inversion at {xi} did not converge in {max_iteration} "
                f"iterations (last estimate {x})"
            )
        return x

    def __repr__(self):
        return f"InverseCDF(grid_size={len(self.grid_x) - 1}, total={self.total})"


def build_inverse_cdf(f, a, b, degree, grid_size):
    return InverseCDF(build(f, a, b, degree).cdf(), grid_size)


@njit
def invert_cdf(xi, coefficients, a, b, grid_x, grid_cdf, tolerance, max_iteration):
    """
    Solve CDF(x) = CDF(a) + xi (CDF(b) - CDF(a)) for x in [a, b].

    Returns the root estimate and whether it converged to within
    ``tolerance * (b - a)``, or to the double spacing at the root when that is
    larger.
    """
    N = len(grid_cdf)
    target = grid_cdf[0] + xi * (grid_cdf[N - 1] - grid_cdf[0])

    # Bracket from the tabulation
    idx = find_bin(target, grid_cdf, 0.0, False)
    if idx == -1:
        idx = N - 2
    lo = grid_x[idx]
    hi = grid_x[idx + 1]

    # Secant first guess, then bisection
    if grid_cdf[idx + 1] > grid_cdf[idx]:
        x = linear_interpolation(target, grid_cdf[idx], grid_cdf[idx + 1], lo, hi)
    else:
        x = 0.5 * (lo + hi)

    x_tolerance = tolerance * (b - a)
    for i in range(max_iteration):
        value = clenshaw(x, coefficients, a, b) - target
        if not math.isfinite(value):
            return x, False

        if value < 0.0:
            lo = x
        else:
            hi = x

        x = 0.5 * (lo + hi)

        # Relative tolerance below the double spacing at x cannot be reached
        x_spacing = 4.0 * EPSILON * max(abs(lo), abs(hi))
        if hi - lo <= max(x_tolerance, x_spacing) or x == lo or x == hi:
            return x, True

    return x, False
