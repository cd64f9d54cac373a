import pytest

from kbdmodels.area import Area, Margins, Point, Rect, Size


def test_default_size_is_invalid_and_empty():
    size = Size()
    assert size.is_valid() is False
    assert size.is_empty() is True


def test_zero_size_valid_but_empty():
    size = Size(0, 0)
    assert size.is_valid() is True
    assert size.is_empty() is True


@pytest.mark.parametrize("w,h", [(10, 20), (1, 1), (300, 5)])
def test_positive_size_valid_and_not_empty(w, h):
    size = Size(w, h)
    assert size.is_valid() is True
    assert size.is_empty() is False


def test_negative_dimension_invalid():
    assert Size(5, -1).is_valid() is False
    assert Size(-1, 5).is_valid() is False


def test_rect_from_origin_size_round_trip():
    origin = Point(3, 7)
    size = Size(40, 25)
    rect = Rect.from_origin_size(origin, size)
    assert rect.origin() == origin
    assert rect.size() == size
    assert (rect.x, rect.y, rect.width, rect.height) == (3, 7, 40, 25)


def test_rect_equality():
    a = Rect.from_origin_size(Point(1, 2), Size(3, 4))
    b = Rect(1, 2, 3, 4)
    assert a == b
    assert a != Rect(1, 2, 3, 5)


def test_area_defaults():
    area = Area()
    assert area.size == Size()
    assert area.background == b""
    assert area.background_borders == Margins()


def test_area_equality_compares_all_fields():
    a = Area(Size(10, 10), b"bg.png", Margins(1, 2, 3, 4))
    b = Area(Size(10, 10), b"bg.png", Margins(1, 2, 3, 4))
    assert a == b
    assert a != Area(Size(10, 10), b"other.png", Margins(1, 2, 3, 4))
    assert a != Area(Size(10, 11), b"bg.png", Margins(1, 2, 3, 4))
    assert a != Area(Size(10, 10), b"bg.png", Margins(1, 2, 3, 0))


def test_area_is_mutable():
    area = Area()
    area.size = Size(5, 6)
    area.background = b"key.png"
    assert area.size.is_valid() is True
    assert area.background == b"key.png"