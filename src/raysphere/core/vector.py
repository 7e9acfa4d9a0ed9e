# core/vector.py
import math
from numbers import Real

import numpy as np


class Vector3:
    """
    An immutable 3D vector. Every operation returns a new Vector3; equality
    and hashing are component-wise.
    """
    __slots__ = ("x", "y", "z")

    def __init__(self, x: float, y: float, z: float):
        object.__setattr__(self, "x", float(x))
        object.__setattr__(self, "y", float(y))
        object.__setattr__(self, "z", float(z))

    def __setattr__(self, name, value):
        raise AttributeError("Vector3 is immutable")

    def __delattr__(self, name):
        raise AttributeError("Vector3 is immutable")

    @classmethod
    def from_array(cls, values) -> "Vector3":
        x, y, z = values
        return cls(x, y, z)

    def to_array(self, dtype=np.float64) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=dtype)

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def add(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def sub(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, f: float) -> "Vector3":
        return Vector3(self.x * f, self.y * f, self.z * f)

    def product(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> "Vector3":
        l = self.length()
        if l == 0:
            return Vector3(0, 0, 0)
        return self / l

    def __add__(self, other: "Vector3") -> "Vector3":
        return self.add(other)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return self.sub(other)

    def __mul__(self, other):
        if isinstance(other, Real):
            return self.scale(other)
        if isinstance(other, Vector3):
            return self.product(other)
        return NotImplemented

    def __rmul__(self, other: float) -> "Vector3":
        return self.__mul__(other)

    def __truediv__(self, t: float) -> "Vector3":
        return Vector3(self.x / t, self.y / t, self.z / t)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"
