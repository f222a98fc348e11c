import math

import pytest

from labkit.quaternion import Quat, axis_angle


def test_storage_order():
    assert Quat(1, 2, 3, 4).data() == (2, 3, 4, 1)


def test_add_sub_roundtrip():
    p, q = Quat(1, 2, 3, 4), Quat(5, -1, 0.5, 2)
    assert (p + q) - q == p


def test_unit_products():
    i, j, k = Quat(0, 1, 0, 0), Quat(0, 0, 1, 0), Quat(0, 0, 0, 1)
    assert i * j == k
    assert j * i == Quat(0, 0, 0, -1)
    assert i * i == Quat(-1, 0, 0, 0)


def test_scalar_and_vector_multiplication():
    q = Quat(1, 2, 3, 4)
    assert q * 2 == q * Quat(2, 0, 0, 0)
    assert q * (1, 0, 0) == q * Quat(0, 1, 0, 0)


def test_conjugate_product_is_norm_squared():
    q = Quat(1, 2, 3, 4)
    a, b, c, d = (q * ~q).data()[3], *(q * ~q).data()[:3]
    assert a == pytest.approx(abs(q) ** 2)
    assert (b, c, d) == (0, 0, 0)


def test_inequality():
    assert Quat(1, 2, 3, 4) != Quat(1, 2, 3, 5)


def test_rotate_x_about_z():
    q = axis_angle(90, False, (0, 0, 2))
    assert q.apply((1, 0, 0)) == pytest.approx((0, 1, 0), abs=1e-12)


def test_angle_roundtrip():
    q = axis_angle(60, False, (1, 1, 0))
    assert q.angle(False) == pytest.approx(60)
    assert q.angle() == pytest.approx(math.pi / 3)


def test_apply_preserves_length():
    q = Quat(0.3, -1.2, 2.0, 0.7)
    x, y, z = q.apply((3, -4, 12))
    assert math.sqrt(x * x + y * y + z * z) == pytest.approx(13)


def test_rotation_matrix_identity():
    m = Quat(2, 0, 0, 0).rotation_matrix()
    assert m == pytest.approx([1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1])


def test_rotation_matrix_matches_apply():
    q = axis_angle(0.8, True, (1, 2, 3))
    m = q.rotation_matrix()
    v = (0.5, -1.0, 2.0)
    rotated = tuple(sum(m[col * 4 + row] * v[col] for col in range(3)) for row in range(3))
    assert rotated == pytest.approx(q.apply(v))


def test_matrix_layout():
    m = Quat(1, 2, 3, 4).matrix()
    assert m[0] == m[5] == m[10] == m[15] == 1
    assert m[4] == m[14] == 2 and m[1] == m[11] == -2
    assert m[7] == m[8] == 3 and m[2] == m[13] == -3
    assert m[9] == m[12] == 4 and m[3] == m[6] == -4