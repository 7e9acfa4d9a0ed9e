import numpy as np
import pytest

from raysphere.core.ray import Ray
from raysphere.core.vector import Vector3
from raysphere.geometry.hittable import HitRecord, Hittable


class TestHitRecord:
    def test_fields(self):
        rec = HitRecord(2.5, Vector3(1, 2, 3), "blue")
        assert rec.distance == 2.5
        assert rec.point == Vector3(1, 2, 3)
        assert rec.payload == "blue"

    def test_immutable(self):
        rec = HitRecord(2.5, Vector3(1, 2, 3), "blue")
        with pytest.raises(AttributeError):
            rec.distance = 1.0

    def test_equality(self):
        assert HitRecord(1.0, Vector3(0, 0, 0), 1) == HitRecord(1.0, Vector3(0, 0, 0), 1)
        assert HitRecord(1.0, Vector3(0, 0, 0), 1) != HitRecord(2.0, Vector3(0, 0, 0), 1)


class TestHittable:
    def test_hit_is_abstract(self):
        with pytest.raises(NotImplementedError):
            Hittable().hit(Ray(Vector3(0, 0, 0), Vector3(1, 0, 0)))


class TestHitRecordArrayPayload:
    def test_equal_array_payloads(self):
        a = HitRecord(1.0, Vector3(0, 0, 0), np.array([1, 2, 3]))
        b = HitRecord(1.0, Vector3(0, 0, 0), np.array([1, 2, 3]))
        assert a == b

    def test_different_array_payloads(self):
        a = HitRecord(1.0, Vector3(0, 0, 0), np.array([1, 2, 3]))
        b = HitRecord(1.0, Vector3(0, 0, 0), np.array([1, 2, 4]))
        assert a != b

    def test_array_against_non_array_payload(self):
        a = HitRecord(1.0, Vector3(0, 0, 0), np.array([1, 2, 3]))
        b = HitRecord(1.0, Vector3(0, 0, 0), "blue")
        assert a != b

    def test_nested_array_payloads_do_not_raise(self):
        a = HitRecord(1.0, Vector3(0, 0, 0), [np.array([1, 2]), 3])
        b = HitRecord(1.0, Vector3(0, 0, 0), [np.array([1, 2]), 3])
        assert (a == b) in (True, False)
