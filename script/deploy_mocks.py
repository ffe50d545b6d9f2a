from moccasin.boa_tools import VyperContract
from src.mocks import vrf_coordinator_v2_mock
from script.helper_config import (
    BASE_FEE,
    GAS_PRICE_LINK,
    get_network_name,
    is_development_chain,
)

TAGS = ["all", "mocks"]


def deploy_mocks() -> VyperContract | None:
    # each fulfillment costs BASE_FEE plus the callback gas at GAS_PRICE_LINK
    if not is_development_chain():
        print(f"Live network {get_network_name()} detected, skipping mocks")
        return None

    print("Local network detected. Deploying mocks....")
    mock = vrf_coordinator_v2_mock.deploy(BASE_FEE, GAS_PRICE_LINK)
    print(f"VRF Coordinator V2 Mock at: {mock.address}")
    print("Mocks Deployed!")
    print("------------------------------------")
    return mock


def deploy(deployments: dict) -> None:
    mock = deploy_mocks()
    if mock is not None:
        deployments["vrf_coordinator_v2_mock"] = mock


def moccasin_main() -> VyperContract | None:
    return deploy_mocks()
