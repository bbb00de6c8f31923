"""
Library-wide constants.
"""

import hashlib

from petlib.ec import EcGroup

#: OpenSSL identifier of the secp256k1 curve.
SECP256K1_NID = 714

DEFAULT_GROUP = EcGroup(SECP256K1_NID)

#: Width of the prover identifier in the challenge hash (unsigned, big-endian).
PID_BYTES = 4

HASH_FUNCTION = hashlib.sha256
