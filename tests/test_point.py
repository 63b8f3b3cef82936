import pytest
import math
from hypothesis import given, strategies as st
from plategeometry.point import CoordinateSystemType, Point, cross_product
from plategeometry.errors import DimensionError, PlateGeometryError

finite = st.floats(-1e6, 1e6)
point_3d = st.builds(lambda a, b, c: Point((a, b, c)), finite, finite, finite)


def test_point_components_and_tag():
    p = Point((1, 2, 3), CoordinateSystemType.SPHERICAL)
    assert p[0] == 1.0
    assert p[1] == 2.0
    assert p[2] == 3.0
    assert p.dim == 3
    assert len(p) == 3
    assert list(p) == [1.0, 2.0, 3.0]
    assert p.coordinate_system == CoordinateSystemType.SPHERICAL
    assert p.get_array() == (1.0, 2.0, 3.0)


def test_default_tag_is_cartesian():
    assert Point((1, 2)).coordinate_system == CoordinateSystemType.CARTESIAN
    assert str(CoordinateSystemType.CARTESIAN) == "cartesian"


def test_from_dim_wrong_constructor():
    with pytest.raises(DimensionError, match="Can't use the 3d constructor in 2d."):
        Point.from_dim(2, 1, 2, 3)
    with pytest.raises(DimensionError, match="Can't use the 2d constructor in 3d."):
        Point.from_dim(3, 1, 2)


def test_from_dim_builds_point():
    p = Point.from_dim(2, 1, 2)
    assert p == Point((1, 2))


def test_invalid_number_of_components():
    with pytest.raises(DimensionError):
        Point((1,))
    with pytest.raises(PlateGeometryError):
        Point((1, 2, 3, 4))


def test_origin():
    assert Point.origin(3) == Point((0, 0, 0))
    assert Point.origin(2).dim == 2


def test_arithmetic():
    a = Point((1, 2, 3))
    b = Point((4, 5, 6))
    assert a + b == Point((5, 7, 9))
    assert b - a == Point((3, 3, 3))
    assert -a == Point((-1, -2, -3))
    assert a * 2 == Point((2, 4, 6))
    assert 2 * a == Point((2, 4, 6))
    assert b / 2 == Point((2, 2.5, 3))


def test_multiplying_points_is_dot_product():
    a = Point((1, 2, 3))
    b = Point((4, 5, 6))
    assert a * b == 32.0
    assert a.dot(b) == 32.0


def test_norm():
    p = Point((3, 4))
    assert p.norm_square() == 25.0
    assert p.norm() == 5.0


def test_mixed_dimensions_raise():
    with pytest.raises(DimensionError):
        Point((1, 2)) + Point((1, 2, 3))
    with pytest.raises(DimensionError):
        Point((1, 2)) * Point((1, 2, 3))


def test_points_are_immutable():
    p = Point((1, 2, 3))
    with pytest.raises(AttributeError):
        p.x = 5
    with pytest.raises(TypeError):
        p[0] = 5


def test_with_component_returns_new_point():
    p = Point((1, 2, 3))
    q = p.with_component(1, 7)
    assert q == Point((1, 7, 3))
    assert p == Point((1, 2, 3))


def test_equality_includes_tag():
    assert Point((1, 2)) != Point((1, 2), CoordinateSystemType.SPHERICAL)
    assert Point((1, 2)).with_coordinate_system(
        CoordinateSystemType.SPHERICAL
    ) == Point((1, 2), CoordinateSystemType.SPHERICAL)
    assert len({Point((1, 2)), Point((1.0, 2.0))}) == 1


def test_cross_product():
    x = Point((1, 0, 0))
    y = Point((0, 1, 0))
    assert cross_product(x, y) == Point((0, 0, 1))
    with pytest.raises(DimensionError):
        cross_product(Point((1, 0)), Point((0, 1)))


class TestPointProperties:

    @given(point_3d, point_3d)
    def test_cross_product_is_orthogonal(self, a, b):
        c = cross_product(a, b)
        scale = max(1.0, a.norm() * b.norm())
        assert abs(c.dot(a)) <= 1e-9 * scale * max(1.0, a.norm())
        assert abs(c.dot(b)) <= 1e-9 * scale * max(1.0, b.norm())

    @given(point_3d, point_3d)
    def test_addition_commutes(self, a, b):
        assert a + b == b + a

    @given(point_3d)
    def test_norm_is_non_negative(self, a):
        assert a.norm() >= 0
        assert a.norm() == pytest.approx(math.sqrt(a.dot(a)))
