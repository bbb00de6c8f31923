"""
Fiat-Shamir challenge shared by the prover and the verifier.
"""

from petlib.bn import Bn

from zkdlog.consts import DEFAULT_GROUP, HASH_FUNCTION, PID_BYTES
from zkdlog.encoding import point_to_bytes
from zkdlog.exceptions import GroupMismatchError


def encode_pid(pid):
    """
    Encode a prover identifier as a fixed-width big-endian unsigned integer.

    >>> encode_pid(1)
    b'\\x00\\x00\\x00\\x01'

    Raises:
        ValueError: If the identifier does not fit in ``PID_BYTES`` bytes.
    """
    if not 0 <= pid < 1 << (8 * PID_BYTES):
        raise ValueError("Prover identifier out of range: {}".format(pid))
    return int(pid).to_bytes(PID_BYTES, "big")


def check_same_group(*points):
    """
    Ensure all points belong to the same group.

    Raises:
        GroupMismatchError: If two points come from different groups.
    """
    nids = {pt.group.nid() for pt in points}
    if len(nids) > 1:
        raise GroupMismatchError("Points come from different groups: {}".format(sorted(nids)))


def hash_points(sid, pid, points, group=None):
    """
    Generate a Fiat-Shamir challenge bound to a session, a prover and a list of points.

    The hash absorbs, in order, the UTF-8 bytes of the session identifier, the
    big-endian prover identifier, and the uncompressed encoding of every point. The
    digest is read as a big-endian integer and reduced modulo the group order. The
    order of the points matters.

    >>> g = DEFAULT_GROUP.generator()
    >>> c = hash_points("sid", 1, [g, 2 * g])
    >>> c == hash_points("sid", 1, [g, 2 * g])
    True
    >>> c == hash_points("sid", 1, [2 * g, g])
    False

    Args:
        sid (str): Session identifier.
        pid (int): Prover identifier.
        points: Points to hash.
        group: Group whose order reduces the digest. Defaults to the group of the first
            point, or ``DEFAULT_GROUP``.

    Raises:
        InfinitePointError: If one of the points is the point at infinity.
        GroupMismatchError: If the points come from different groups.
    """
    check_same_group(*points)
    if group is None:
        group = points[0].group if points else DEFAULT_GROUP

    hasher = HASH_FUNCTION()
    hasher.update(sid.encode("utf-8"))
    hasher.update(encode_pid(pid))
    for point in points:
        hasher.update(point_to_bytes(point))

    return Bn.from_binary(hasher.digest()) % group.order()
