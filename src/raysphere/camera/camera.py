# camera/camera.py
import math
import numpy as np
from raysphere.core.vector import Vector3
from raysphere.core.ray import Ray


class Camera:
    """
    Pinhole camera. One primary ray per pixel through the pixel center; all
    rays share the camera position as origin.
    """
    def __init__(self, position: Vector3, yaw: float, pitch: float,
                 fov: float, aspect_ratio: float, focus_dist: float = 1.0):
        self.position = position
        self.yaw = yaw
        self.pitch = pitch
        self.fov = fov
        self.aspect_ratio = aspect_ratio
        self.focus_dist = focus_dist  # Distance to the image plane
        self.update_camera()

    def update_camera(self):
        """Recomputes the view frame and the image plane spans."""
        cy, sy = math.cos(self.yaw), math.sin(self.yaw)
        cp, sp = math.cos(self.pitch), math.sin(self.pitch)

        # yaw = 0 looks down -z, yaw = pi looks down +z
        self.forward = Vector3(sy * cp, sp, -cy * cp)
        # forward x world up, already unit length; stays level at any pitch
        self.right = Vector3(cy, 0.0, sy)
        self.up = self.right.cross(self.forward)

        half_height = math.tan(self.fov / 2) * self.focus_dist
        half_width = self.aspect_ratio * half_height
        self.horizontal = self.right * (2.0 * half_width)
        self.vertical = self.up * (2.0 * half_height)
        # Image plane center relative to the camera position.
        self.plane_offset = self.forward * self.focus_dist

    def get_ray(self, u: float, v: float) -> Ray:
        """Ray through viewport coordinates u, v in [0, 1]; v = 0 is the bottom edge."""
        direction = (self.plane_offset +
                     self.horizontal * (u - 0.5) +
                     self.vertical * (v - 0.5))
        return Ray(self.position, direction)

    def ray_grid(self, width: int, height: int):
        """
        Primary rays for a width x height image as numpy arrays, the input
        layout of intersect_rays.
        Returns (origins, directions), each of shape (height * width, 3), in
        row-major order with row 0 at the top of the image.
        """
        du = (np.arange(width, dtype=np.float64) + 0.5) / width - 0.5
        dv = (1.0 - (np.arange(height, dtype=np.float64) + 0.5) / height) - 0.5

        offset = self.plane_offset.to_array()
        horizontal = self.horizontal.to_array()
        vertical = self.vertical.to_array()

        directions = (offset[None, None, :]
                      + du[None, :, None] * horizontal[None, None, :]
                      + dv[:, None, None] * vertical[None, None, :])
        directions = directions.reshape(-1, 3)
        origins = np.broadcast_to(self.position.to_array(), directions.shape).copy()
        return origins, directions
