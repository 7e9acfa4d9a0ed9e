import math

import numpy as np
import pytest

from raysphere.core.vector import Vector3

ZEROS = Vector3(0, 0, 0)
ONES = Vector3(1, 1, 1)
TWOS = Vector3(2, 2, 2)
STRAIGHT = Vector3(1, 2, 3)


class TestVector3:
    def test_dot(self):
        assert ZEROS.dot(ONES) == 0
        assert ONES.dot(ONES) == 3
        assert ONES.dot(STRAIGHT) == 6

    def test_add_and_sub(self):
        assert ZEROS.add(ONES) == ONES
        assert ONES.add(ONES) == TWOS
        assert TWOS.sub(ONES) == ONES
        assert ONES - ONES == ZEROS
        assert ZEROS + STRAIGHT == STRAIGHT

    def test_scale(self):
        assert ONES.scale(0) == ZEROS
        assert TWOS.scale(0.5) == ONES
        assert STRAIGHT * 2 == Vector3(2, 4, 6)
        assert 2 * STRAIGHT == Vector3(2, 4, 6)

    def test_product(self):
        assert ONES.product(STRAIGHT) == STRAIGHT
        assert ZEROS * ONES == ZEROS

    def test_operations_return_new_instances(self):
        """Operations never mutate their operands."""
        a = Vector3(1, 2, 3)
        b = a.add(ONES)
        c = a.scale(3)
        assert a == Vector3(1, 2, 3)
        assert b is not a and c is not a

    def test_immutable(self):
        v = Vector3(1, 2, 3)
        with pytest.raises(AttributeError):
            v.x = 5
        with pytest.raises(AttributeError):
            del v.y

    def test_equality_and_hash(self):
        assert Vector3(1, 2, 3) == Vector3(1.0, 2.0, 3.0)
        assert Vector3(1, 2, 3) != Vector3(1, 2, 4)
        assert hash(Vector3(1, 2, 3)) == hash(Vector3(1.0, 2.0, 3.0))
        assert len({Vector3(1, 2, 3), Vector3(1, 2, 3)}) == 1

    def test_length_and_normalize(self):
        assert ZEROS.length() == 0
        assert ONES.length() == math.sqrt(3)
        n = ONES.normalize()
        assert n.length() == pytest.approx(1.0)
        assert ZEROS.normalize() == ZEROS

    def test_cross(self):
        x = Vector3(1, 0, 0)
        y = Vector3(0, 1, 0)
        assert x.cross(y) == Vector3(0, 0, 1)
        assert y.cross(x) == Vector3(0, 0, -1)

    def test_neg_and_div(self):
        assert -ONES == Vector3(-1, -1, -1)
        assert TWOS / 2 == ONES

    def test_array_round_trip(self):
        arr = STRAIGHT.to_array()
        np.testing.assert_array_equal(arr, np.array([1.0, 2.0, 3.0]))
        assert Vector3.from_array(arr) == STRAIGHT
        assert tuple(STRAIGHT) == (1.0, 2.0, 3.0)

    def test_mul_with_unsupported_type(self):
        with pytest.raises(TypeError):
            ONES * "a"
