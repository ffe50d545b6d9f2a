import pytest
import boa
from eth_utils import to_wei
from moccasin import config as _moccasin_config
from moccasin._sys_path_and_config_setup import (
    _set_sys_path,
    _setup_network_and_account_from_config_and_cli,
    get_sys_paths_list,
)

# Under plain `pytest` (rather than `mox test`), perform the same moccasin
# config, sys.path and network setup that `mox test` does before collection.
if _moccasin_config._config is None:
    _set_sys_path(get_sys_paths_list(_moccasin_config.initialize_global_config()))
    _setup_network_and_account_from_config_and_cli()
    pytest_plugins = ["moccasin.plugin"]

from script.deploy import run_deployments
from script.helper_config import get_network_config, get_network_name

STARTING_BALANCE = to_wei(10, "ether")


@pytest.fixture(scope="session")
def network_name():
    """Name of the active moccasin network (pyevm unless told otherwise)"""
    name = get_network_name()
    print(f"Running tests on {name}")
    return name


@pytest.fixture(scope="session")
def network_config(network_name):
    return get_network_config(network_name)


@pytest.fixture
def deployer():
    """The account every deploy script sends from"""
    boa.env.set_balance(boa.env.eoa, STARTING_BALANCE)
    return boa.env.eoa


@pytest.fixture
def deployments(deployer):
    """Fresh mocks and raffle for every test"""
    return run_deployments(["mocks", "raffle"])


@pytest.fixture
def vrf_coordinator_mock(deployments):
    return deployments["vrf_coordinator_v2_mock"]


@pytest.fixture
def raffle_contract(deployments):
    return deployments["raffle"]


@pytest.fixture
def entrance_fee(raffle_contract):
    return raffle_contract.getEntranceFee()


@pytest.fixture
def interval(raffle_contract):
    return raffle_contract.getInterval()


@pytest.fixture
def players():
    accounts = [boa.env.generate_address() for _ in range(4)]
    for account in accounts:
        boa.env.set_balance(account, STARTING_BALANCE)
    return accounts
