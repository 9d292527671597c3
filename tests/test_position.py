from referee.position import Location, Position


def test_location_defaults_to_origin():
    assert Location() == Location(0, 0)


def test_location_str():
    assert str(Location(3, 7)) == "3:7"


def test_position_defaults():
    pos = Position()
    assert pos.beg == Location(0, 0)
    assert pos.end == Location(0, 0)


def test_position_str():
    pos = Position(Location(1, 2), Location(3, 4))
    assert str(pos) == "1:2 .. 3:4"


def test_position_equality():
    a = Position(Location(1, 2), Location(3, 4))
    b = Position(Location(1, 2), Location(3, 4))
    assert a == b
    assert hash(a) == hash(b)
    assert a != Position(Location(1, 2), Location(3, 5))