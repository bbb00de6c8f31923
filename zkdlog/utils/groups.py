"""
Group and scalar helpers, and sources of randomness.

A randomness source is any callable that takes the group order :math:`n` (a
:py:class:`petlib.bn.Bn`) and returns a uniformly distributed value in
:math:`[0, n)`. Provers take one as an explicit argument so that tests can
substitute a reproducible source.
"""

import math
import secrets
import hashlib

from petlib.bn import Bn
from petlib.ec import POINT_CONVERSION_UNCOMPRESSED

from zkdlog.consts import DEFAULT_GROUP
from zkdlog.exceptions import EntropyError


def openssl_random(order):
    """
    Draw a uniform value in :math:`[0, order)` from the OpenSSL generator.

    >>> n = Bn(1000)
    >>> 0 <= openssl_random(n) < n
    True
    """
    return order.random()


class SeededRandom:
    """
    Reproducible randomness source.

    The i-th draw is ``SHA-512(seed || i)`` read as a big-endian integer and reduced
    modulo the order. Only meant for tests and examples.

    >>> n = DEFAULT_GROUP.order()
    >>> SeededRandom(1)(n) == SeededRandom(1)(n)
    True
    >>> rng = SeededRandom(1)
    >>> rng(n) != rng(n)
    True

    Args:
        seed (int): Seed value.
    """

    def __init__(self, seed):
        self.seed = seed
        self.counter = 0

    def __call__(self, order):
        digest = hashlib.sha512(b"%i:%i" % (self.seed, self.counter)).digest()
        self.counter += 1
        return Bn.from_binary(digest) % order


def random_scalar(group=None, rng=None):
    """
    Draw a non-zero scalar uniformly from :math:`[1, n - 1]`.

    Zero draws are rejected and redrawn, which keeps the distribution uniform over the
    remaining values.

    >>> x = random_scalar()
    >>> 0 < x < DEFAULT_GROUP.order()
    True

    Args:
        group: Group whose order defines the scalar field.
        rng: Randomness source. Defaults to :py:func:`openssl_random`.

    Raises:
        EntropyError: If the source returns a value outside :math:`[0, n)`.
    """
    if group is None:
        group = DEFAULT_GROUP
    if rng is None:
        rng = openssl_random

    order = group.order()
    while True:
        value = ensure_bn(rng(order))
        if value < 0 or value >= order:
            raise EntropyError("Random value out of range [0, {})".format(order))
        if value != 0:
            return value


def get_random_point(group=None, random_bits=256, seed=None):
    """
    Generate a point with unknown discrete logarithm.

    >>> from petlib.ec import EcPt
    >>> a = get_random_point()
    >>> b = get_random_point()
    >>> isinstance(a, EcPt)
    True
    >>> a != b
    True
    >>> get_random_point(seed=1) == get_random_point(seed=1)
    True

    Args:
        group: Group
        random_bits: Number of bits of a random string to create a point.
        seed: Optional seed for a reproducible point.
    """
    if group is None:
        group = DEFAULT_GROUP

    num_bytes = math.ceil(random_bits / 8)
    if seed is None:
        randomness = secrets.token_bytes(num_bytes)
    else:
        randomness = hashlib.sha512(b"%i" % seed).digest()[:num_bytes]

    return group.hash_to_point(randomness)


def make_generators(num, group=None, random_bits=256, seed=42):
    """
    Create some group points with unknown discrete logarithms relative to each other.

    .. WARNING ::

        There is a negligible chance that some generators will be the same.

    >>> from petlib.ec import EcPt
    >>> generators = make_generators(3)
    >>> len(generators) == 3
    True
    >>> isinstance(generators[0], EcPt)
    True
    """
    if group is None:
        group = DEFAULT_GROUP
    return [
        get_random_point(
            group, random_bits, seed=seed + i if seed is not None else None
        )
        for i in range(num)
    ]


def ensure_bn(x):
    """
    Ensure that value is big number.

    >>> isinstance(ensure_bn(42), Bn)
    True
    >>> isinstance(ensure_bn(Bn(42)), Bn)
    True
    """
    if isinstance(x, Bn):
        return x
    else:
        return Bn(x)


def point_size(group=None):
    """
    Length of the uncompressed point encoding, :math:`1 + 2 \\cdot` field bytes.

    >>> point_size()
    65
    """
    if group is None:
        group = DEFAULT_GROUP
    return len(group.generator().export(POINT_CONVERSION_UNCOMPRESSED))


def scalar_size(group=None):
    """
    Length of the scalar encoding, the byte width of the group order.

    >>> scalar_size()
    32
    """
    if group is None:
        group = DEFAULT_GROUP
    return len(group.order().binary())
