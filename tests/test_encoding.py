import pytest

from petlib.bn import Bn

from zkdlog.encoding import PointEncoding, affine_coordinates
from zkdlog.encoding import point_to_bytes, point_from_bytes
from zkdlog.encoding import scalar_to_bytes, scalar_from_bytes
from zkdlog.exceptions import InvalidPoint, InvalidScalar, InfinitePointError
from zkdlog.utils import get_random_point, point_size, scalar_size


def test_point_round_trip(group):
    pt = get_random_point(group)
    data = point_to_bytes(pt)
    assert len(data) == point_size(group)
    assert data[0] == 0x04
    assert point_from_bytes(data, group) == pt
    assert point_to_bytes(point_from_bytes(data, group)) == data


def test_point_to_bytes_rejects_infinity(group):
    with pytest.raises(InfinitePointError):
        point_to_bytes(group.infinite())


def test_affine_coordinates(group):
    pt = get_random_point(group)
    x, y = affine_coordinates(pt)
    ax, ay = pt.get_affine()
    assert len(x) == len(y) == (point_size(group) - 1) // 2
    assert Bn.from_binary(x) == ax
    assert Bn.from_binary(y) == ay


def test_affine_coordinates_rejects_infinity(group):
    with pytest.raises(InfinitePointError):
        affine_coordinates(group.infinite())


@pytest.mark.parametrize(
    "tag,form",
    [
        (0x00, PointEncoding.INFINITY),
        (0x02, PointEncoding.COMPRESSED_EVEN),
        (0x03, PointEncoding.COMPRESSED_ODD),
        (0x04, PointEncoding.UNCOMPRESSED),
    ],
)
def test_classify(tag, form):
    assert PointEncoding.classify(bytes([tag]) + bytes(8)) is form


@pytest.mark.parametrize("data", [b"", b"\x01", b"\x05" + bytes(64), b"\xff"])
def test_classify_rejects_unknown(data):
    with pytest.raises(InvalidPoint):
        PointEncoding.classify(data)


def test_point_from_bytes_rejects_infinity(group):
    with pytest.raises(InvalidPoint):
        point_from_bytes(b"\x00", group)


def test_point_from_bytes_rejects_compressed(group):
    compressed = group.generator().export()
    assert compressed[0] in (0x02, 0x03), "Test assumption is broken."
    with pytest.raises(InvalidPoint):
        point_from_bytes(compressed, group)


@pytest.mark.parametrize("delta", [-1, 1])
def test_point_from_bytes_rejects_wrong_length(group, delta):
    data = point_to_bytes(group.generator())
    data = data[:-1] if delta < 0 else data + b"\x00"
    with pytest.raises(InvalidPoint):
        point_from_bytes(data, group)


def test_point_from_bytes_rejects_off_curve(group):
    data = bytearray(point_to_bytes(group.generator()))
    data[-1] ^= 1
    with pytest.raises(InvalidPoint):
        point_from_bytes(bytes(data), group)


def test_point_from_bytes_rejects_text(group):
    with pytest.raises(InvalidPoint):
        point_from_bytes(point_to_bytes(group.generator()).hex(), group)


def test_scalar_round_trip(group):
    s = group.order().random()
    data = scalar_to_bytes(s, group)
    assert len(data) == scalar_size(group)
    assert scalar_from_bytes(data, group) == s


def test_scalar_zero_is_padded(group):
    assert scalar_to_bytes(0, group) == bytes(scalar_size(group))
    assert scalar_from_bytes(bytes(scalar_size(group)), group) == 0


def test_scalar_to_bytes_reduces(group):
    order = group.order()
    assert scalar_to_bytes(order + 3, group) == scalar_to_bytes(3, group)


@pytest.mark.parametrize("delta", [-1, 1])
def test_scalar_from_bytes_rejects_wrong_length(group, delta):
    size = scalar_size(group) + delta
    with pytest.raises(InvalidScalar):
        scalar_from_bytes(bytes(size), group)


def test_scalar_from_bytes_rejects_unreduced(group):
    data = group.order().binary()
    assert len(data) == scalar_size(group), "Test assumption is broken."
    with pytest.raises(InvalidScalar):
        scalar_from_bytes(data, group)


def test_scalar_from_bytes_rejects_text(group):
    with pytest.raises(InvalidScalar):
        scalar_from_bytes("00" * scalar_size(group), group)
