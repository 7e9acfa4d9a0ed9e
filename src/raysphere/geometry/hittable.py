# geometry/hittable.py
from typing import Any, Optional
import numpy as np
from raysphere.core.vector import Vector3
from raysphere.core.ray import Ray


def _payloads_equal(a, b) -> bool:
    # Payloads are opaque; array payloads compare element-wise.
    if a is b:
        return True
    if isinstance(a, np.ndarray) or isinstance(b, np.ndarray):
        return bool(np.array_equal(a, b))
    try:
        return bool(a == b)
    except (TypeError, ValueError):
        # Element-wise results with no single truth value.
        return False


class HitRecord:
    """
    Records details of a ray-object intersection. Immutable; a new record is
    created for every successful test and handed to the caller.
    """
    __slots__ = ("distance", "point", "payload")

    def __init__(self, distance: float, point: Vector3, payload: Any = None):
        object.__setattr__(self, "distance", distance)  # Ray parameter t
        object.__setattr__(self, "point", point)        # Intersection point
        object.__setattr__(self, "payload", payload)    # Opaque, passed through

    def __setattr__(self, name, value):
        raise AttributeError("HitRecord is immutable")

    def __eq__(self, other) -> bool:
        if not isinstance(other, HitRecord):
            return NotImplemented
        return (self.distance == other.distance and self.point == other.point
                and _payloads_equal(self.payload, other.payload))

    __hash__ = None

    def __repr__(self) -> str:
        return (f"HitRecord(distance={self.distance}, point={self.point!r}, "
                f"payload={self.payload!r})")


class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")
