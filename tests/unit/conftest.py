import pytest

from script.helper_config import DEVELOPMENT_CHAINS


@pytest.fixture(autouse=True)
def development_chain_only(network_name):
    if network_name not in DEVELOPMENT_CHAINS:
        pytest.skip("unit tests only run on development chains")
