"""
Proof of knowledge of a discrete logarithm:
PK{ x: y = x * G }

The session and prover identifiers are bound into the challenge, so the verifier
must use the same values as the prover.
"""

from zkdlog import DLogProof
from zkdlog.consts import DEFAULT_GROUP
from zkdlog.encoding import affine_coordinates
from zkdlog.primitives.dlog import pack_proof, unpack_proof
from zkdlog.utils import random_scalar

sid = "sid"
pid = 1

# The secret and the public statement.
x = random_scalar(DEFAULT_GROUP)
y = x * DEFAULT_GROUP.generator()

proof = DLogProof.prove(sid, pid, x, y)
assert proof.verify(sid, pid, y)

# A proof does not transfer to another statement.
assert not proof.verify(sid, pid, DEFAULT_GROUP.generator())

# The commitment in affine coordinates.
tx, ty = affine_coordinates(proof.t)

# Send the proof over the wire and check it on the other side.
blob = pack_proof(proof)
received = unpack_proof(blob)
assert received == proof
assert received.verify(sid, pid, y)
