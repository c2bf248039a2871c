import numba as nb
import numpy as np

from numba import uint64, njit


# ======================================================================================
# Random number generator
#   LCG with hash seed-split
# ======================================================================================

# LCG parameters
RNG_G = nb.uint64(2806196910506780709)
RNG_C = nb.uint64(1)
RNG_MOD_MASK = nb.uint64(0x7FFFFFFFFFFFFFFF)
RNG_MOD = nb.uint64(0x8000000000000000)

# Splitter seeds
SEED_SPLIT_EVENT = nb.uint64(0x4576656E74)

# The state container: a one-element structured array, so that the seed can be
# evolved in place by jitted and non-jitted callers alike
RNG_STATE_DTYPE = np.dtype([("rng_seed", np.uint64)])


def rng_state(seed):
    """Create a random stream starting from `seed`."""
    state_arr = np.zeros(1, dtype=RNG_STATE_DTYPE)
    state_arr[0]["rng_seed"] = np.uint64(seed)
    return state_arr


@njit
def wrapping_mul(a, b):
    return a * b


@njit
def wrapping_add(a, b):
    return a + b


@njit
def split_seed(key, seed):
    """
    murmur_hash64a

    If called from non-jitted function, may need to recast the argument key with numba.uint64
    """
    multiplier = uint64(0xC6A4A7935BD1E995)
    length = uint64(8)
    rotator = uint64(47)
    key = uint64(key)
    seed = uint64(seed)

    hash_value = uint64(seed) ^ wrapping_mul(length, multiplier)

    key = wrapping_mul(key, multiplier)
    key ^= key >> rotator
    key = wrapping_mul(key, multiplier)
    hash_value ^= key
    hash_value = wrapping_mul(hash_value, multiplier)

    hash_value ^= hash_value >> rotator
    hash_value = wrapping_mul(hash_value, multiplier)
    hash_value ^= hash_value >> rotator
    return hash_value


@njit
def lcg_(seed):
    seed = uint64(seed)
    return wrapping_add(wrapping_mul(RNG_G, seed), RNG_C) & RNG_MOD_MASK


@njit
def lcg(state_arr):
    state = state_arr[0]
    state["rng_seed"] = lcg_(state["rng_seed"])
    return state["rng_seed"] / RNG_MOD


def event_seed(idx_event, seed):
    """Seed of the independent random stream of event `idx_event`."""
    seed_event = split_seed(SEED_SPLIT_EVENT, np.uint64(seed))
    return split_seed(np.uint64(idx_event), np.uint64(seed_event))
