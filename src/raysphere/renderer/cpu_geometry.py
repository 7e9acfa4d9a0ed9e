# renderer/cpu_geometry.py

from numba import njit
import numpy as np
import math

INFINITY = 1e20
NO_HIT = -1.0


@njit(error_model="numpy")
def dot(v1, v2):
    """Dot product of two length-3 arrays."""
    return v1[0]*v2[0] + v1[1]*v2[1] + v1[2]*v2[2]


@njit(error_model="numpy")
def ray_sphere_intersect(ray_origin, ray_dir, sphere_center, sphere_radius):
    """
    Ray-sphere intersection on length-3 arrays.
    Returns the nearer root t, or NO_HIT when the ray misses, grazes the
    sphere, or the nearer root is not in front of the origin.

    Kernel-level building block: NO_HIT is an in-band value. Callers outside
    this module should use the mask returned by intersect_rays, or
    geometry.sphere.intersect, which returns None on a miss.
    """
    a = dot(ray_dir, ray_dir)
    b = 2.0 * (dot(ray_dir, ray_origin) - dot(ray_dir, sphere_center))
    c = (dot(ray_origin, ray_origin) - 2.0 * dot(ray_origin, sphere_center)
         + dot(sphere_center, sphere_center) - sphere_radius * sphere_radius)
    discriminant = b * b - 4.0 * a * c

    if not discriminant > 0.0:
        return NO_HIT

    sqrtd = math.sqrt(discriminant)
    numerator = -b - sqrtd
    if not numerator > 0.0:
        return NO_HIT

    # numpy error model: a zero denominator gives inf rather than raising
    return numerator / (2.0 * a)


@njit(error_model="numpy")
def _intersect_rays_kernel(origins, directions, sphere_center, sphere_radius,
                           out_t, out_points, out_mask):
    n = origins.shape[0]
    for i in range(n):
        t = ray_sphere_intersect(origins[i], directions[i], sphere_center, sphere_radius)
        if t == NO_HIT:
            out_t[i] = NO_HIT
            out_mask[i] = False
            for k in range(3):
                out_points[i, k] = np.nan
        else:
            out_t[i] = t
            out_mask[i] = True
            for k in range(3):
                out_points[i, k] = origins[i, k] + directions[i, k] * t


def intersect_rays(origins, directions, sphere_center, sphere_radius):
    """
    Intersect a batch of rays with one sphere.

    Parameters:
      origins: (n, 3) array of ray origins.
      directions: (n, 3) array of ray directions (need not be normalized).
      sphere_center: length-3 array.
      sphere_radius: float.

    Returns (t, points, mask): t is NO_HIT and points are NaN where mask is False.
    """
    origins = np.ascontiguousarray(origins, dtype=np.float64)
    directions = np.ascontiguousarray(directions, dtype=np.float64)
    center = np.ascontiguousarray(sphere_center, dtype=np.float64).reshape(3)
    if origins.ndim != 2 or origins.shape[1] != 3:
        raise ValueError(f"origins must have shape (n, 3), got {origins.shape}")
    if directions.shape != origins.shape:
        raise ValueError(
            f"directions shape {directions.shape} does not match origins shape {origins.shape}")

    n = origins.shape[0]
    out_t = np.empty(n, dtype=np.float64)
    out_points = np.empty((n, 3), dtype=np.float64)
    out_mask = np.empty(n, dtype=np.bool_)
    _intersect_rays_kernel(origins, directions, center, float(sphere_radius),
                           out_t, out_points, out_mask)
    return out_t, out_points, out_mask
