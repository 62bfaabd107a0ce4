import pytest

from geohash16 import (
    Coordinate,
    Direction,
    InvalidCoordinateRange,
    InvalidHashCharacter,
    Neighbors,
    encode,
    neighbor,
    neighbors,
)


def test_neighbors_of_ten_character_hash():
    ns = neighbors("e71150dc99")
    assert ns == Neighbors(
        n="e71150dc9c",
        ne="e71150dc9e",
        e="e71150dc9b",
        se="e71150dc9a",
        s="e71150dc98",
        sw="e71150dc92",
        w="e71150dc93",
        nw="e71150dc96",
    )


def test_neighbors_of_five_character_hash():
    ns = neighbors("e7115")
    assert ns.sw == "e5bbe"
    assert ns.s == "e7114"
    assert ns.se == "e7116"
    assert ns.w == "e5bbf"
    assert ns.e == "e7117"
    assert ns.nw == "e5bea"
    assert ns.n == "e7140"
    assert ns.ne == "e7142"


def test_neighbor_matches_neighbors_field():
    ns = neighbors("e71150dc99")
    for direction in Direction:
        assert neighbor("e71150dc99", direction) == getattr(ns, direction.value)


def test_opposite_steps_return_to_start():
    start = "e71150dc99"
    assert neighbor(neighbor(start, Direction.N), Direction.S) == start
    assert neighbor(neighbor(start, Direction.E), Direction.W) == start
    assert neighbor(neighbor(start, Direction.NE), Direction.SW) == start


def test_direction_steps():
    assert Direction.N.to_tuple() == (1, 0)
    assert Direction.NE.to_tuple() == (1, 1)
    assert Direction.E.to_tuple() == (0, 1)
    assert Direction.SE.to_tuple() == (-1, 1)
    assert Direction.S.to_tuple() == (-1, 0)
    assert Direction.SW.to_tuple() == (-1, -1)
    assert Direction.W.to_tuple() == (0, -1)
    assert Direction.NW.to_tuple() == (1, -1)


def test_neighbors_as_dict_keys():
    assert list(neighbors("e7115").as_dict()) == ["n", "ne", "e", "se", "s", "sw", "w", "nw"]


def test_neighbor_does_not_wrap_antimeridian():
    edge = encode(Coordinate(x=179.9, y=0.5), 3)
    with pytest.raises(InvalidCoordinateRange):
        neighbor(edge, Direction.E)
    with pytest.raises(InvalidCoordinateRange):
        neighbors(edge)


def test_neighbor_does_not_clamp_pole():
    edge = encode(Coordinate(x=10.0, y=89.9), 3)
    with pytest.raises(InvalidCoordinateRange):
        neighbor(edge, Direction.N)
    assert len(neighbor(edge, Direction.S)) == 3


def test_neighbors_propagates_decode_error_unchanged():
    with pytest.raises(InvalidHashCharacter) as excinfo:
        neighbors("e71g")
    assert excinfo.value.character == "g"


def test_neighbors_raises_first_failing_direction_from_bottom_row():
    # Cell "f" spans lon [90, 180], lat [45, 90]; SE, E, NW, N and NE all
    # step off the world, SE is tried first.
    with pytest.raises(InvalidCoordinateRange) as excinfo:
        neighbors("f")
    assert excinfo.value.coordinate == Coordinate(x=225.0, y=22.5)
