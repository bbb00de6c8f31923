r"""
Non-interactive proof of knowledge of a discrete logarithm.

The prover shows :math:`PK\{ x: Y = x G \}` for the group generator :math:`G`, with the
Fiat-Shamir challenge bound to a session identifier and a prover identifier:

.. math::
    t = r G, \quad c = H(sid, pid, G, Y, t), \quad s = r + c x \mod n

The verifier recomputes :math:`c` and accepts iff :math:`s G = t + c Y`.

>>> from zkdlog.consts import DEFAULT_GROUP
>>> x = DEFAULT_GROUP.order().random()
>>> y = x * DEFAULT_GROUP.generator()
>>> proof = DLogProof.prove("sid", 1, x, y)
>>> proof.verify("sid", 1, y)
True
>>> proof.verify("sid", 2, y)
False

See "`Efficient Signature Generation by Smart Cards`_" by Schnorr, 1991 for the
interactive protocol.

.. _`Efficient Signature Generation by Smart Cards`:
    https://doi.org/10.1007/BF00196725

"""
import logging
from collections.abc import Mapping

import attr
import msgpack
from petlib.ec import EcPt

from zkdlog.base import hash_points
from zkdlog.consts import DEFAULT_GROUP
from zkdlog.encoding import point_to_bytes, point_from_bytes
from zkdlog.encoding import scalar_to_bytes, scalar_from_bytes
from zkdlog.exceptions import DecodeError
from zkdlog.utils import ensure_bn, point_size, random_scalar, scalar_size


logger = logging.getLogger(__name__)

#: Field names of the interchange mapping.
PROOF_FIELDS = ("t", "s")


@attr.s(frozen=True)
class DLogProof:
    """
    Proof transcript: the commitment :math:`t` and the response :math:`s`.

    The proof does not carry the session identifier, the prover identifier or the
    statement :math:`Y`; the verifier must supply the same values the prover used.
    """

    t = attr.ib(validator=attr.validators.instance_of(EcPt))
    s = attr.ib(converter=ensure_bn)

    @classmethod
    def prove(cls, sid, pid, x, y, rng=None):
        """See :py:func:`prove`."""
        return prove(sid, pid, x, y, rng=rng)

    def verify(self, sid, pid, y):
        """See :py:func:`verify`."""
        return verify(self, sid, pid, y)

    def to_dict(self):
        """See :py:func:`to_canonical_bytes`."""
        return to_canonical_bytes(self)

    @classmethod
    def from_dict(cls, data, group=None):
        """See :py:func:`from_canonical_bytes`."""
        return from_canonical_bytes(data, group=group)


def prove(sid, pid, x, y, rng=None):
    """
    Prove knowledge of :math:`x` such that :math:`Y = x G`.

    A fresh nonce is drawn on every call. The caller must ensure that :math:`Y = x G`;
    otherwise the resulting proof does not verify.

    Args:
        sid (str): Session identifier.
        pid (int): Prover identifier.
        x: The secret scalar.
        y (EcPt): The public point.
        rng: Optional randomness source, see :py:mod:`zkdlog.utils.groups`.

    Returns:
        DLogProof: The proof.
    """
    group = y.group
    g = group.generator()
    order = group.order()

    r = random_scalar(group, rng=rng)
    t = r * g
    c = hash_points(sid, pid, [g, y, t], group=group)
    s = (r + c * ensure_bn(x)) % order

    logger.debug("Generated DLOG proof for sid=%r pid=%d", sid, pid)
    return DLogProof(t=t, s=s)


def verify(proof, sid, pid, y):
    """
    Verify a proof against a session identifier, a prover identifier and a statement.

    Malformed proofs (commitment at infinity or from another group, unreduced
    response) are rejected rather than raising.

    Args:
        proof (DLogProof): The proof.
        sid (str): Session identifier used by the prover.
        pid (int): Prover identifier used by the prover.
        y (EcPt): The public point.

    Returns:
        bool: True if verification succeeded, False otherwise.
    """
    group = y.group
    if proof.t.group != group:
        logger.debug("Rejecting proof: commitment and statement groups differ")
        return False
    if proof.t.is_infinite() or y.is_infinite():
        logger.debug("Rejecting proof: point at infinity")
        return False

    order = group.order()
    if not 0 <= proof.s < order:
        logger.debug("Rejecting proof: response is not reduced")
        return False

    g = group.generator()
    c = hash_points(sid, pid, [g, y, proof.t], group=group)
    valid = proof.s * g == proof.t + c * y
    if not valid:
        logger.debug("Rejecting proof: verification equation does not hold")
    return valid


def to_canonical_bytes(proof):
    """
    Encode a proof as a mapping with the fields ``t`` and ``s``.

    ``t`` is the uncompressed point encoding and ``s`` the fixed-width big-endian scalar.
    """
    group = proof.t.group
    return {
        "t": point_to_bytes(proof.t),
        "s": scalar_to_bytes(proof.s, group=group),
    }


def from_canonical_bytes(data, group=None):
    """
    Decode a proof from the mapping produced by :py:func:`to_canonical_bytes`.

    Args:
        data: Mapping with exactly the fields ``t`` and ``s``.
        group: Group of the proof. Defaults to ``DEFAULT_GROUP``.

    Raises:
        DecodeError: If the mapping does not have exactly the expected fields.
        InvalidPoint: If ``t`` is not a valid uncompressed point.
        InvalidScalar: If ``s`` is not a valid scalar.
    """
    if group is None:
        group = DEFAULT_GROUP
    if not isinstance(data, Mapping):
        raise DecodeError("Expected a mapping, got {}".format(type(data).__name__))
    if set(data.keys()) != set(PROOF_FIELDS):
        raise DecodeError(
            "Expected fields {}, got {}".format(sorted(PROOF_FIELDS), sorted(map(str, data.keys())))
        )

    t = point_from_bytes(data["t"], group=group)
    s = scalar_from_bytes(data["s"], group=group)
    return DLogProof(t=t, s=s)


def pack_proof(proof):
    """
    Serialize a proof into a msgpack map of its canonical fields.
    """
    return msgpack.packb(to_canonical_bytes(proof), use_bin_type=True)


def unpack_proof(data, group=None):
    """
    Deserialize a proof produced by :py:func:`pack_proof`.

    Raises:
        DecodeError: If the data is not a msgpack map of the canonical fields.
    """
    try:
        fields = msgpack.unpackb(data, raw=False)
    except (ValueError, TypeError, msgpack.exceptions.UnpackException) as exc:
        raise DecodeError("Malformed packed proof") from exc
    return from_canonical_bytes(fields, group=group)


def proof_size(group=None):
    """
    Total length of the canonical fields of a proof.

    >>> proof_size()
    97
    """
    return point_size(group) + scalar_size(group)
