import json
import os
from pathlib import Path

from moccasin.boa_tools import VyperContract
from script.helper_config import get_network_config
from script.interactions import get_raffle

TAGS = ["all", "frontend"]

DEFAULT_ADDRESSES_FILE = "../raffle-frontend/constants/contractAddresses.json"
DEFAULT_ABI_FILE = "../raffle-frontend/constants/abi.json"


def update_contract_addresses(raffle_contract, chain_id: int, addresses_file: Path) -> dict:
    """Merge the raffle address into the front end's {chain_id: [address, ...]} map."""
    addresses = {}
    if addresses_file.exists():
        content = addresses_file.read_text()
        if content.strip():
            addresses = json.loads(content)

    chain_addresses = addresses.setdefault(str(chain_id), [])
    address = str(raffle_contract.address)
    if address in chain_addresses:
        chain_addresses.remove(address)
    chain_addresses.append(address)

    addresses_file.parent.mkdir(parents=True, exist_ok=True)
    addresses_file.write_text(json.dumps(addresses, indent=2))
    return addresses


def update_abi(raffle_contract, abi_file: Path) -> None:
    abi_file.parent.mkdir(parents=True, exist_ok=True)
    abi_file.write_text(json.dumps(raffle_contract.abi, indent=2))


def update_front_end(
    raffle_contract, chain_id: int | None = None, addresses_file=None, abi_file=None
) -> bool:
    # Only runs when UPDATE_FRONT_END is set, so deploys on any chain keep
    # the front end's constants in sync.
    if not os.environ.get("UPDATE_FRONT_END"):
        return False

    print("Updating front end...")
    if chain_id is None:
        chain_id = get_network_config()["chain_id"]
    addresses_file = Path(
        addresses_file
        or os.environ.get("FRONT_END_ADDRESSES_FILE", DEFAULT_ADDRESSES_FILE)
    )
    abi_file = Path(abi_file or os.environ.get("FRONT_END_ABI_FILE", DEFAULT_ABI_FILE))

    update_contract_addresses(raffle_contract, chain_id, addresses_file)
    update_abi(raffle_contract, abi_file)
    print(f"Front end updated: {addresses_file}, {abi_file}")
    return True


def deploy(deployments: dict) -> None:
    if "raffle" in deployments:
        update_front_end(deployments["raffle"])


def moccasin_main() -> VyperContract:
    raffle_contract = get_raffle()
    update_front_end(raffle_contract)
    return raffle_contract
