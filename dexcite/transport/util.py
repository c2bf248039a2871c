from collections.abc import Sequence
from operator import attrgetter

from numba import njit

####

import dexcite.transport.rng as rng

from dexcite.error import NoAccessibleChannel


@njit
def find_bin(
    value: float, grid: Sequence[float], epsilon: float = 0.0, go_lower: bool = True
) -> int:
    """
    Return the bin index i for which grid[i] <= value < grid[i+1], with optional
    epsilon tolerance and tie-breaking toward the lower/upper bin.

    Parameters
    ----------
    value : float
        Query point.
    grid : Sequence[float]
        Monotonically non-decreasing bin edges of length N_grid = N_bin + 1.
    epsilon : float, optional (default: 0.0)
        Tolerance to treat values as being exactly on a grid edge if
        |value - grid[k]| <= epsilon.
    go_lower : bool, optional (default: True)
        Tie-breaking rule when value is at/within epsilon of a grid edge:
          - True  -> tie to the lower/left bin
          - False -> tie to the upper/right bin

    Notes
    -----
    - With epsilon=0 and go_lower=True, this reduces to the standard
      left-closed/right-open binning (grid[i] <= value < grid[i+1]).
    - Values beyond the first/last edge by more than epsilon give -1.
    """
    n = len(grid)

    if value < grid[0] - epsilon or value > grid[-1] + epsilon:
        return -1

    # Base binary search (strict left-closed / right-open, no epsilon)
    low, high = 0, n - 1
    if value < grid[0] or value >= grid[-1]:
        base = -1
    else:
        while high - low > 1:
            mid = (low + high) // 2
            if value < grid[mid]:
                high = mid
            else:
                low = mid
        base = low

    # Tie-breaking near edges (epsilon band)
    if base == -1:
        if abs(value - grid[0]) <= epsilon:
            return -1 if go_lower else 0
        if abs(value - grid[-1]) <= epsilon:
            return (n - 2) if go_lower else -1
        return -1

    idx = base

    if abs(value - grid[idx]) <= epsilon:
        if idx == 0:
            return -1 if go_lower else 0
        return (idx - 1) if go_lower else idx

    right_edge = grid[idx + 1]
    if abs(value - right_edge) <= epsilon:
        if idx + 1 == n - 1:
            return (n - 2) if go_lower else -1
        return idx if go_lower else (idx + 1)

    return idx


@njit
def linear_interpolation(x, x1, x2, y1, y2):
    return y1 + (x - x1) * (y2 - y1) / (x2 - x1)


# ======================================================================================
# Width-weighted sampling
# ======================================================================================


class WeightView(Sequence):
    """
    Read-only projection of a sequence onto one scalar weight per item.

    The weights are read from the underlying items on access; nothing is
    copied, so the view stays valid for any sequence of channels or spin-parity
    table entries.
    """

    def __init__(self, items, weight=attrgetter("width")):
        self.items = items
        self.weight = weight

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        if isinstance(idx, slice):
            return WeightView(self.items[idx], self.weight)
        return self.weight(self.items[idx])

    def __repr__(self):
        return f"WeightView(size={len(self)})"


def sample_weighted_index(weights, rng_state):
    total = sum(weights)
    if not total > 0.0:
        raise NoAccessibleChannel(
            f"Cannot sample from {len(weights)} entries with total weight {total}"
        )

    xi = rng.lcg(rng_state) * total
    cumulative = 0.0
    last_nonzero = -1
    for idx, weight in enumerate(weights):
        if weight > 0.0:
            last_nonzero = idx
        cumulative += weight
        if cumulative > xi:
            return idx

    # Round-off: xi landed on the total
    return last_nonzero


def sample_weighted(items, rng_state, weight=attrgetter("width")):
    """
    Draw one item with probability proportional to its weight.

    Parameters
    ----------
    items : Sequence
        Channels, spin-parity table entries, or anything `weight` can project.
    rng_state : numpy.ndarray
        Random stream (see `dexcite.transport.rng.rng_state`). One draw is used.
    weight : callable, optional
        Projection item -> non-negative weight (default: the ``width``
        attribute).

    Raises
    ------
    NoAccessibleChannel
        If the sequence is empty or all weights are zero.
    """
    idx = sample_weighted_index(WeightView(items, weight), rng_state)
    return items[idx]
