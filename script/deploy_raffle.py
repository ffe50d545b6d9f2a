from moccasin.boa_tools import VyperContract
from src import raffle
from script.deploy_mocks import deploy_mocks
from script.helper_config import (
    VRF_SUB_FUND_AMOUNT,
    DeploymentError,
    get_network_config,
    get_network_name,
    is_development_chain,
)

TAGS = ["all", "raffle"]


def deploy_raffle(vrf_coordinator_mock: VyperContract | None = None) -> VyperContract:
    network_name = get_network_name()
    network_config = get_network_config(network_name)

    if is_development_chain(network_name):
        if vrf_coordinator_mock is None:
            raise DeploymentError(
                f"{network_name} is a development network, deploy the mocks first"
            )
        vrf_coordinator = vrf_coordinator_mock.address
        subscription_id = vrf_coordinator_mock.createSubscription()
        # the mock has no LINK token, funding just credits the subscription
        vrf_coordinator_mock.fundSubscription(subscription_id, VRF_SUB_FUND_AMOUNT)
        print(f"Created and funded VRF subscription {subscription_id}")
    else:
        vrf_coordinator = network_config["vrf_coordinator"]
        subscription_id = network_config["subscription_id"]

    raffle_contract = raffle.deploy(
        vrf_coordinator,
        network_config["entrance_fee"],
        network_config["gas_lane"],
        subscription_id,
        network_config["callback_gas_limit"],
        network_config["interval"],
    )
    print(f"Raffle deployed at: {raffle_contract.address}")

    if vrf_coordinator_mock is not None:
        vrf_coordinator_mock.addConsumer(subscription_id, raffle_contract.address)
        print(f"Raffle added as consumer of subscription {subscription_id}")
    else:
        print(
            f"Add {raffle_contract.address} as a consumer of subscription "
            f"{subscription_id} and register an upkeep for it"
        )
    return raffle_contract


def deploy(deployments: dict) -> None:
    deployments["raffle"] = deploy_raffle(deployments.get("vrf_coordinator_v2_mock"))


def moccasin_main() -> VyperContract:
    return deploy_raffle(deploy_mocks())
