from zkdlog.utils.groups import (
    SeededRandom,
    ensure_bn,
    get_random_point,
    make_generators,
    openssl_random,
    point_size,
    random_scalar,
    scalar_size,
)
