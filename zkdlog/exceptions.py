"""
Common exception classes.
"""


class DecodeError(Exception):
    """Encoded proof material cannot be decoded."""


class InvalidPoint(DecodeError):
    """Bytes do not encode a finite point of the group in uncompressed form."""


class InvalidScalar(DecodeError):
    """Bytes do not encode a reduced scalar of the expected width."""


class InfinitePointError(Exception):
    """The point at infinity has no affine encoding."""


class GroupMismatchError(Exception):
    """Points come from different groups."""


class EntropyError(Exception):
    """Randomness source produced a value outside the scalar field."""
