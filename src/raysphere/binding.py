# binding.py
"""
Adapter between loosely typed host values and the intersection core.

Host callers pass vectors as dicts with x/y/z keys (or anything vector-like)
and get back either None or a plain dict:
    {"t": distance, "pi": {"x": .., "y": .., "z": ..}, "col": payload}
Argument checking happens here; the core never validates.
"""
from collections.abc import Mapping, Sequence
from numbers import Real

import numpy as np

from raysphere.core.vector import Vector3
from raysphere.geometry.sphere import intersect as intersect_core

NUM_ARGS = 5


def _is_vector_like(value) -> bool:
    if isinstance(value, Vector3):
        return True
    if isinstance(value, Mapping):
        return all(k in value for k in ("x", "y", "z"))
    if isinstance(value, np.ndarray):
        return value.shape == (3,)
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return len(value) == 3
    return all(hasattr(value, k) for k in ("x", "y", "z"))


def unpack_vector(value) -> Vector3:
    """
    Convert a host vector into a Vector3.
    """
    if not _is_vector_like(value):
        raise TypeError(f"Cannot interpret {type(value).__name__} as a vector")
    if isinstance(value, Vector3):
        return value
    if isinstance(value, Mapping):
        return Vector3(value["x"], value["y"], value["z"])
    if isinstance(value, (np.ndarray, Sequence)):
        return Vector3.from_array(value)
    return Vector3(value.x, value.y, value.z)


def pack_vector(v: Vector3) -> dict:
    return {"x": v.x, "y": v.y, "z": v.z}


def intersect(*args):
    """
    intersect(ray_direction, ray_origin, sphere_center, sphere_radius, payload)

    Raises TypeError on a wrong argument count or wrong argument types.
    """
    if len(args) != NUM_ARGS:
        raise TypeError(
            f"Wrong number of arguments: expected {NUM_ARGS}, got {len(args)}")

    direction, origin, center, radius, payload = args
    if (not _is_vector_like(direction)
            or not _is_vector_like(origin)
            or not _is_vector_like(center)
            or isinstance(radius, bool)
            or not isinstance(radius, Real)):
        raise TypeError("Wrong arguments types")

    try:
        rec = intersect_core(unpack_vector(direction), unpack_vector(origin),
                             unpack_vector(center), float(radius), payload)
    except (TypeError, ValueError) as e:
        # Components that are not numbers.
        raise TypeError(f"Wrong arguments types: {e}") from e

    if rec is None:
        return None
    return {"t": rec.distance, "pi": pack_vector(rec.point), "col": rec.payload}
