from raysphere.core.vector import Vector3
from raysphere.core.ray import Ray
from raysphere.geometry.hittable import HitRecord, Hittable
from raysphere.geometry.sphere import Sphere, intersect

__all__ = [
    "HitRecord",
    "Hittable",
    "Ray",
    "Sphere",
    "Vector3",
    "intersect",
]

__version__ = "0.1.0"
