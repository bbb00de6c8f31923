__version__ = "0.1.0"
__title__ = "zkdlog"
__author__ = "zkdlog contributors"
__email__ = "zkdlog@users.noreply.github.com"
__url__ = "https://github.com/zkdlog/zkdlog"
__license__ = "MIT"
__description__ = "Non-interactive Schnorr proofs of knowledge of a discrete logarithm over elliptic curves."
__copyright__ = "2026, zkdlog contributors"


from zkdlog.primitives.dlog import DLogProof, prove, verify
from zkdlog.primitives.dlog import to_canonical_bytes, from_canonical_bytes
from zkdlog.base import hash_points
