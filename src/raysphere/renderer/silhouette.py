# renderer/silhouette.py
import math
from collections.abc import Mapping
import numpy as np
from PIL import Image
from raysphere.core.vector import Vector3
from raysphere.camera.camera import Camera
from raysphere.geometry.sphere import Sphere
from .cpu_geometry import INFINITY, intersect_rays

# Named output resolutions, selectable from the command line.
QUALITY_PRESETS = {
    "thumbnail": {"width": 80, "height": 60},
    "preview": {"width": 320, "height": 240},
    "full": {"width": 1280, "height": 960},
}

BACKGROUND = (0, 0, 0)
# Colour used for spheres that carry no payload.
DEFAULT_COLOR = (255, 255, 255)


def payload_to_rgb(payload) -> np.ndarray:
    """
    Interpret a sphere payload as an 8-bit RGB colour. Accepts a Vector3,
    an (r, g, b) sequence or a mapping with x/y/z keys; components are
    clipped to [0, 255]. A None payload maps to DEFAULT_COLOR. Anything
    else raises ValueError.
    """
    if payload is None:
        payload = DEFAULT_COLOR
    elif isinstance(payload, Mapping):
        try:
            payload = (payload["x"], payload["y"], payload["z"])
        except KeyError as e:
            raise ValueError(f"colour mapping is missing component {e}") from e
    if isinstance(payload, (str, bytes)):
        raise ValueError(f"payload {payload!r} is not a colour")
    try:
        rgb = np.asarray(tuple(payload), dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise ValueError(f"payload {payload!r} is not a colour") from e
    if rgb.shape != (3,):
        raise ValueError(f"payload must have three colour components, got {rgb.shape}")
    return np.clip(np.rint(rgb), 0, 255).astype(np.uint8)


class SilhouetteRenderer:
    """
    Renders one sphere as a flat hit mask: each pixel whose primary ray hits
    the sphere takes the sphere payload's colour, everything else is
    background. A depth buffer of hit distances is kept alongside.
    """
    def __init__(self, width: int, height: int, camera: Camera = None,
                 background=BACKGROUND, verbose: bool = False):
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.background = np.asarray(background, dtype=np.uint8)
        self.verbose = verbose
        self.camera = camera if camera is not None else default_camera(width / height)
        self.image = None
        self.depth = None

    def render(self, sphere: Sphere) -> np.ndarray:
        origins, directions = self.camera.ray_grid(self.width, self.height)
        t, _, mask = intersect_rays(origins, directions,
                                    sphere.center.to_array(), sphere.radius)

        image = np.empty((self.height * self.width, 3), dtype=np.uint8)
        image[:] = self.background
        if mask.any():
            image[mask] = payload_to_rgb(sphere.payload)
        depth = np.where(mask, t, INFINITY)

        self.image = image.reshape(self.height, self.width, 3)
        self.depth = depth.reshape(self.height, self.width)

        if self.verbose:
            hits = int(mask.sum())
            print(f"Rendered {self.width}x{self.height}: {hits} of {mask.size} pixels hit {sphere}")
            if hits:
                print(f"Nearest hit distance: {t[mask].min():.6f}")
        return self.image

    def save(self, path: str):
        if self.image is None:
            raise RuntimeError("render() must be called before save()")
        Image.fromarray(self.image).save(path)
        if self.verbose:
            print(f"Saved image to {path}")


def default_camera(aspect_ratio: float) -> Camera:
    """
    Eye at (0, 1.5, -10) looking down +z with a 0.75 high image plane at
    depth 2, the viewing setup of the demo scene.
    """
    fov = 2.0 * math.atan(0.75 / 2.0 / 2.0)
    return Camera(
        position=Vector3(0.0, 1.5, -10.0),
        yaw=math.pi,
        pitch=0.0,
        fov=fov,
        aspect_ratio=aspect_ratio,
        focus_dist=2.0
    )
