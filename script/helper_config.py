from eth_utils import to_wei
from moccasin.config import get_active_network

DEVELOPMENT_CHAINS = ["pyevm", "anvil"]

# 0.25 LINK premium per request
BASE_FEE = to_wei("0.25", "ether")
# LINK per gas, calculated value based on the gas price of the chain
GAS_PRICE_LINK = 10**9
VRF_SUB_FUND_AMOUNT = to_wei(30, "ether")

SEPOLIA_GAS_LANE = bytes.fromhex(
    "474e34a077df58807dbe9c96d3c009b23b3c6d0cce433e59bbf5b34f823bc56c"
)

NETWORK_CONFIG = {
    "pyevm": {
        "chain_id": 31337,
        "entrance_fee": to_wei("0.01", "ether"),
        "gas_lane": SEPOLIA_GAS_LANE,
        "subscription_id": 0,
        "callback_gas_limit": 500_000,
        "interval": 30,
    },
    "anvil": {
        "chain_id": 31337,
        "entrance_fee": to_wei("0.01", "ether"),
        "gas_lane": SEPOLIA_GAS_LANE,
        "subscription_id": 0,
        "callback_gas_limit": 500_000,
        "interval": 30,
    },
    "sepolia": {
        "chain_id": 11155111,
        "vrf_coordinator": "0x8103B0A8A00be2DDC778e6e7eaa21791Cd364625",
        "entrance_fee": to_wei("0.01", "ether"),
        "gas_lane": SEPOLIA_GAS_LANE,
        "subscription_id": 1003,
        "callback_gas_limit": 500_000,
        "interval": 30,
    },
}


class DeploymentError(Exception):
    pass


def get_network_name() -> str:
    return get_active_network().name


def is_development_chain(network_name: str | None = None) -> bool:
    return (network_name or get_network_name()) in DEVELOPMENT_CHAINS


def get_network_config(network_name: str | None = None) -> dict:
    """Deployment parameters for `network_name` (default: the active network)."""
    network_name = network_name or get_network_name()
    if network_name not in NETWORK_CONFIG:
        raise DeploymentError(f"No deployment config for network '{network_name}'")
    return NETWORK_CONFIG[network_name]
