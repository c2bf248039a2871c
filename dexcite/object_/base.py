import collections.abc
import functools
import inspect
import types
import numpy as np

from typing import get_origin, get_args, Union, Annotated

####

from dexcite.print_ import print_error


# ======================================================================================
# Object base classes
# ======================================================================================


class ObjectBase:
    def __init__(self, register):
        if register and isinstance(self, ObjectNonSingleton):
            register_object(self)

    def __setattr__(self, key, value):
        hints = class_hints(self.__class__)
        if key in hints and not check_type(value, hints[key], self.__class__, self):
            print_error(f"{key} must be {hints[key]!r}, got {value!r}")
        super().__setattr__(key, value)


class ObjectSingleton(ObjectBase):
    def __init__(self):
        super().__init__(register=False)


class ObjectNonSingleton(ObjectBase):
    ID: int

    def __init__(self, register=True):
        self.ID = -1
        super().__init__(register)


class ObjectPolymorphic(ObjectNonSingleton):
    child_ID: int
    type: int

    def __init__(self, type_, register=True):
        self.child_ID = -1
        self.type = type_
        super().__init__(register)


# ======================================================================================
# Helper functions
# ======================================================================================


def register_object(object_):
    from dexcite.object_.structure import structure

    from dexcite.object_.decay_scheme import DecayScheme
    from dexcite.object_.fragment import Fragment
    from dexcite.object_.gamma_strength import GammaStrengthBase
    from dexcite.object_.level import Level
    from dexcite.object_.level_density import LevelDensityBase
    from dexcite.object_.optical_model import TransmissionBase
    from dexcite.object_.source import Source

    object_list = []
    if isinstance(object_, Level):
        object_list = structure.levels
    elif isinstance(object_, Fragment):
        object_list = structure.fragments
    elif isinstance(object_, DecayScheme):
        object_list = structure.decay_schemes
    elif isinstance(object_, LevelDensityBase):
        object_list = structure.level_density_models
    elif isinstance(object_, GammaStrengthBase):
        object_list = structure.gamma_strength_models
    elif isinstance(object_, TransmissionBase):
        object_list = structure.transmission_models
    elif isinstance(object_, Source):
        object_list = structure.sources
    else:
        print_error(f"Unidentified object list for object {object_}")

    object_.ID = len(object_list)
    if isinstance(object_, ObjectPolymorphic):
        object_.child_ID = sum([x.type == object_.type for x in object_list])
    object_list.append(object_)


@functools.lru_cache(maxsize=None)
def class_hints(cls):
    """Annotations of `cls` and its bases; the most derived annotation wins."""
    hints = {}
    for base in reversed(cls.__mro__):
        hints.update(inspect.get_annotations(base))
    return hints


# ======================================================================================
# Type checker
# ======================================================================================


def _shape_matches(arr: np.ndarray, shape: tuple) -> bool:
    if arr.ndim != len(shape):
        return False
    return all(dim is None or dim == s for s, dim in zip(arr.shape, shape))


def _dtype_matches(arr: np.ndarray, dtype_arg) -> bool:
    if dtype_arg is None:
        return True
    if dtype_arg is float:
        return np.issubdtype(arr.dtype, np.floating)
    if dtype_arg is int:
        return np.issubdtype(arr.dtype, np.integer)
    try:
        return arr.dtype == np.dtype(dtype_arg)
    except TypeError:
        return True  # unknown dtype key: do not fail hard


def _ndarray_dtype(hint):
    # NDArray[float64] is ndarray[Any, dtype[float64]]
    args = get_args(hint)
    if len(args) < 2:
        return None
    dtype_args = get_args(args[1])
    return dtype_args[0] if dtype_args else None


def check_type(value, hint, cls, obj=None) -> bool:
    """
    Best-effort runtime checker for class annotations.

    Supports plain classes, NDArray[dtype], Annotated[NDArray[dtype], (shape,)]
    (shape entries may name another attribute of `obj`), list[T], dict[K, V],
    tuple[...], Union/Optional/``A | B``, and Callable.
    """
    origin = get_origin(hint)

    # Annotated[T, meta...]
    if origin is Annotated:
        base, *meta = get_args(hint)
        if isinstance(value, np.ndarray) and meta and isinstance(meta[0], tuple):
            expected_shape = tuple(
                getattr(obj, item) if isinstance(item, str) else item
                for item in meta[0]
            )
            return _shape_matches(value, expected_shape) and _dtype_matches(
                value, _ndarray_dtype(base)
            )
        return check_type(value, base, cls, obj)

    # NDArray[...]
    if origin is np.ndarray:
        return isinstance(value, np.ndarray) and _dtype_matches(
            value, _ndarray_dtype(hint)
        )

    # Builtins / classes
    if origin is None:
        try:
            return isinstance(value, hint)
        except TypeError:
            return True

    # list[T]
    if origin is list:
        (t,) = get_args(hint)
        return isinstance(value, list) and all(check_type(x, t, cls) for x in value)

    # dict[K, V]
    if origin is dict:
        kt, vt = get_args(hint)
        return isinstance(value, dict) and all(
            check_type(k, kt, cls) and check_type(v, vt, cls) for k, v in value.items()
        )

    # tuple[T1, T2] or tuple[T, ...]
    if origin is tuple:
        args = get_args(hint)
        if len(args) == 2 and args[1] is Ellipsis:
            return isinstance(value, tuple) and all(
                check_type(x, args[0], cls) for x in value
            )
        return (
            isinstance(value, tuple)
            and len(value) == len(args)
            and all(check_type(x, t, cls) for x, t in zip(value, args))
        )

    # Union[...] (incl Optional[T] and A | B)
    if origin is Union or origin is types.UnionType:
        return any(check_type(value, t, cls, obj) for t in get_args(hint))

    # Callable[[...], R]
    if origin is collections.abc.Callable:
        return callable(value)

    # Fallback: ABCs (Iterable, Sequence, etc.)
    try:
        return isinstance(value, origin)
    except TypeError:
        return True
