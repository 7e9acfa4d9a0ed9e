# geometry/sphere.py
import math
from typing import Any, Optional
from raysphere.core.vector import Vector3
from raysphere.core.ray import Ray
from raysphere.geometry.hittable import Hittable, HitRecord


def intersect(ray_direction: Vector3, ray_origin: Vector3, sphere_center: Vector3,
              sphere_radius: float, payload: Any) -> Optional[HitRecord]:
    """
    Intersect a ray with a sphere and return the nearest hit in front of the
    ray origin, or None.

    The quadratic in t is expanded around the world origin:
        A = d.d
        B = 2 (d.o - d.c)
        C = o.o - 2 o.c + c.c - r^2
    Only the nearer root (-B - sqrt(D)) / 2A is considered. A tangent ray
    (D == 0) is a miss, and so is a ray whose nearer root is at or behind the
    origin, which includes every ray starting inside the sphere.

    The direction does not have to be normalized. Inputs are not validated:
    a NaN discriminant or root classifies as a miss and infinities propagate.
    """
    a = ray_direction.dot(ray_direction)
    b = 2.0 * (ray_direction.dot(ray_origin) - ray_direction.dot(sphere_center))
    c = (ray_origin.dot(ray_origin) - 2.0 * ray_origin.dot(sphere_center)
         + sphere_center.dot(sphere_center) - sphere_radius * sphere_radius)
    discriminant = b * b - 4.0 * a * c

    if not discriminant > 0.0:
        return None

    sqrt_disc = math.sqrt(discriminant)
    numerator = -b - sqrt_disc
    if not numerator > 0.0:
        # Nearer root is at or behind the origin; the far root is ignored.
        return None

    denominator = 2.0 * a
    # a can underflow to zero for a vanishingly short direction.
    t = numerator / denominator if denominator != 0.0 else math.inf
    point = ray_origin.add(ray_direction.scale(t))
    return HitRecord(t, point, payload)


class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and an opaque payload
    (colour, material id, ...) that is returned with every hit.
    """
    def __init__(self, center: Vector3, radius: float, payload: Any = None):
        self.center = center
        self.radius = radius
        self.payload = payload

    def hit(self, ray: Ray) -> Optional[HitRecord]:
        return intersect(ray.direction, ray.origin, self.center, self.radius, self.payload)

    def normal_at(self, point: Vector3) -> Vector3:
        """
        Returns the unnormalized outward normal at a surface point.
        """
        return point - self.center

    def __repr__(self) -> str:
        return f"Sphere(center={self.center!r}, radius={self.radius}, payload={self.payload!r})"
