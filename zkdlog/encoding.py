"""
Canonical byte encodings of points and scalars.

Points are encoded in uncompressed affine form, ``0x04 || x || y``, each coordinate a
big-endian field element of fixed width. Scalars are fixed-width big-endian integers
reduced modulo the group order. Decoding is strict: any byte string that would not
re-encode to itself is rejected.

>>> from zkdlog.consts import DEFAULT_GROUP
>>> g = DEFAULT_GROUP.generator()
>>> data = point_to_bytes(g)
>>> len(data), data[0]
(65, 4)
>>> point_from_bytes(data) == g
True
>>> scalar_to_bytes(1) == bytes(31) + b"\\x01"
True
"""

import enum

from petlib.bn import Bn
from petlib.ec import EcPt, POINT_CONVERSION_UNCOMPRESSED

from zkdlog.consts import DEFAULT_GROUP
from zkdlog.exceptions import InvalidPoint, InvalidScalar, InfinitePointError
from zkdlog.utils import ensure_bn, point_size, scalar_size


class PointEncoding(enum.Enum):
    """
    Forms a SEC1 point encoding can take, keyed by its leading tag byte.
    """

    INFINITY = 0x00
    COMPRESSED_EVEN = 0x02
    COMPRESSED_ODD = 0x03
    UNCOMPRESSED = 0x04

    @classmethod
    def classify(cls, data):
        """
        Determine the encoding form from the tag byte.

        >>> PointEncoding.classify(b"\\x04" + bytes(64))
        <PointEncoding.UNCOMPRESSED: 4>

        Raises:
            InvalidPoint: On empty input or an unknown tag.
        """
        if not data:
            raise InvalidPoint("Empty point encoding")
        try:
            return cls(data[0])
        except ValueError:
            raise InvalidPoint("Unknown point encoding tag 0x{:02x}".format(data[0]))


def point_to_bytes(pt):
    """
    Encode a finite point as ``0x04 || x || y``.

    Raises:
        InfinitePointError: If the point is the point at infinity.
    """
    if pt.is_infinite():
        raise InfinitePointError("Cannot encode the point at infinity")
    return pt.export(POINT_CONVERSION_UNCOMPRESSED)


def point_from_bytes(data, group=None):
    """
    Decode an uncompressed point and check that it lies on the curve.

    Args:
        data (bytes): Encoded point.
        group: Group of the point. Defaults to ``DEFAULT_GROUP``.

    Raises:
        InvalidPoint: On a wrong length, a non-uncompressed form, or coordinates that are
            not on the curve.
    """
    if group is None:
        group = DEFAULT_GROUP
    if not isinstance(data, (bytes, bytearray)):
        raise InvalidPoint("Expected bytes, got {}".format(type(data).__name__))

    form = PointEncoding.classify(data)
    if form is PointEncoding.INFINITY:
        raise InvalidPoint("Point at infinity where a finite point is required")
    elif form in (PointEncoding.COMPRESSED_EVEN, PointEncoding.COMPRESSED_ODD):
        raise InvalidPoint("Compressed point encoding is not canonical")
    elif form is PointEncoding.UNCOMPRESSED:
        expected = point_size(group)
        if len(data) != expected:
            raise InvalidPoint(
                "Expected {} bytes for a point, got {}".format(expected, len(data))
            )
        try:
            pt = EcPt.from_binary(bytes(data), group)
        except Exception as exc:
            raise InvalidPoint("Point is not on the curve") from exc
        if pt.is_infinite() or not group.check_point(pt):
            raise InvalidPoint("Point is not on the curve")
        return pt
    else:
        raise InvalidPoint("Unhandled point encoding {}".format(form))


def affine_coordinates(pt):
    """
    Fixed-width big-endian affine coordinates of a finite point.

    >>> from zkdlog.consts import DEFAULT_GROUP
    >>> x, y = affine_coordinates(DEFAULT_GROUP.generator())
    >>> len(x), len(y)
    (32, 32)

    Raises:
        InfinitePointError: If the point is the point at infinity.
    """
    data = point_to_bytes(pt)
    width = (len(data) - 1) // 2
    return data[1 : 1 + width], data[1 + width :]


def scalar_to_bytes(s, group=None):
    """
    Encode a scalar as a big-endian integer of the order's byte width.

    The scalar is reduced modulo the group order first.
    """
    if group is None:
        group = DEFAULT_GROUP
    value = ensure_bn(s) % group.order()
    return value.binary().rjust(scalar_size(group), b"\x00")


def scalar_from_bytes(data, group=None):
    """
    Decode a fixed-width big-endian scalar.

    Raises:
        InvalidScalar: On a wrong length, or a value not smaller than the group order.
    """
    if group is None:
        group = DEFAULT_GROUP
    if not isinstance(data, (bytes, bytearray)):
        raise InvalidScalar("Expected bytes, got {}".format(type(data).__name__))

    expected = scalar_size(group)
    if len(data) != expected:
        raise InvalidScalar(
            "Expected {} bytes for a scalar, got {}".format(expected, len(data))
        )
    value = Bn.from_binary(bytes(data))
    if value >= group.order():
        raise InvalidScalar("Scalar is not reduced modulo the group order")
    return value
