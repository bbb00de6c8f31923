import pytest

from petlib.ec import EcGroup


@pytest.fixture(params=[714, 415], ids=["secp256k1", "prime256v1"])
def group(request):
    return EcGroup(request.param)
