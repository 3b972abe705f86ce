import pytest

from wiieat.geohash import (
    CHAR_MAP,
    Direction,
    GeoCoord,
    decode,
    dimensions_for_precision,
    encode,
    neighbor,
    neighbors,
)


def test_encode_known_value():
    assert encode(57.64911, 10.40744, 11) == "u4pruydqqvj"


@pytest.mark.parametrize("precision", [0, -3, 13])
def test_encode_invalid_precision_falls_back_to_six(precision):
    assert encode(40.0, -75.0, precision) == encode(40.0, -75.0, 6)


@pytest.mark.parametrize("precision", range(1, 13))
def test_encode_length_matches_precision(precision):
    result = encode(12.5, 99.1, precision)
    assert len(result) == precision
    assert set(result) <= set(CHAR_MAP)


@pytest.mark.parametrize("lat,lng", [(90.5, 0.0), (-91.0, 0.0), (0.0, 181.0), (0.0, -180.1)])
def test_encode_out_of_range_raises(lat, lng):
    with pytest.raises(ValueError):
        encode(lat, lng, 8)


def test_decode_contains_original_point():
    lat, lng = 39.9526, -75.1652
    coord = decode(encode(lat, lng, 12))
    assert coord.south <= lat <= coord.north
    assert coord.west <= lng <= coord.east


def test_decode_centre_reencodes_to_same_hash():
    hash_ = encode(-33.8688, 151.2093, 9)
    coord = decode(hash_)
    assert encode(coord.latitude, coord.longitude, 9) == hash_


def test_decode_empty_returns_zero_coord():
    assert decode("") == GeoCoord()


def test_decode_invalid_character_raises():
    with pytest.raises(ValueError):
        decode("abc")


@pytest.mark.parametrize("length", [1, 2, 5, 8, 12])
def test_decode_box_matches_dimensions(length):
    hash_ = encode(51.5, -0.12, length)
    coord = decode(hash_)
    dims = dimensions_for_precision(length)
    assert coord.north - coord.south == pytest.approx(dims.height)
    assert coord.east - coord.west == pytest.approx(dims.width)


def test_dimensions_non_positive_are_zero():
    dims = dimensions_for_precision(0)
    assert (dims.height, dims.width) == (0.0, 0.0)


@pytest.mark.parametrize(
    "direction,opposite",
    [
        (Direction.NORTH, Direction.SOUTH),
        (Direction.SOUTH, Direction.NORTH),
        (Direction.EAST, Direction.WEST),
        (Direction.WEST, Direction.EAST),
    ],
)
def test_neighbor_round_trip(direction, opposite):
    hash_ = encode(40.7128, -74.0060, 7)
    assert neighbor(neighbor(hash_, direction), opposite) == hash_


def test_neighbor_north_is_one_cell_up():
    hash_ = encode(10.0, 20.0, 6)
    here = decode(hash_)
    up = decode(neighbor(hash_, Direction.NORTH))
    dims = dimensions_for_precision(6)
    assert up.latitude - here.latitude == pytest.approx(dims.height)
    assert up.longitude == pytest.approx(here.longitude)


def test_neighbor_east_is_one_cell_right():
    hash_ = encode(10.0, 20.0, 5)
    here = decode(hash_)
    right = decode(neighbor(hash_, Direction.EAST))
    dims = dimensions_for_precision(5)
    assert right.longitude - here.longitude == pytest.approx(dims.width)
    assert right.latitude == pytest.approx(here.latitude)


def test_neighbor_empty_raises():
    with pytest.raises(ValueError):
        neighbor("", Direction.NORTH)


def test_neighbors_order_and_distinctness():
    hash_ = encode(48.8566, 2.3522, 8)
    result = neighbors(hash_)
    assert len(result) == 8
    assert len(set(result)) == 8
    assert hash_ not in result
    assert result[0] == neighbor(hash_, Direction.NORTH)
    assert result[2] == neighbor(hash_, Direction.EAST)
    assert result[4] == neighbor(hash_, Direction.SOUTH)
    assert result[6] == neighbor(hash_, Direction.WEST)
    assert result[1] == neighbor(result[0], Direction.EAST)
    assert result[7] == neighbor(result[6], Direction.NORTH)