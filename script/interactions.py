import os
import time

from moccasin.boa_tools import VyperContract
from moccasin.config import get_active_network
from src import raffle

OPEN = 0


def get_raffle() -> VyperContract:
    """The raffle at RAFFLE_ADDRESS, or the one moccasin knows for the active network."""
    address = os.environ.get("RAFFLE_ADDRESS")
    if address:
        return raffle.at(address)
    return get_active_network().manifest_named("raffle")


def enter_raffle(raffle_contract: VyperContract, value: int | None = None) -> None:
    if value is None:
        value = raffle_contract.getEntranceFee()
    raffle_contract.enterRaffle(value=value)
    print(f"Entered raffle {raffle_contract.address} with {value} wei")


def wait_for_winner(
    raffle_contract: VyperContract,
    starting_timestamp: int,
    timeout: float = 500,
    poll_interval: float = 15,
) -> str:
    """Block until the raffle has picked a winner after `starting_timestamp`.

    A fulfilled round moves the latest timestamp forward and reopens the
    raffle, so both are polled until they change or `timeout` seconds pass.
    """
    deadline = time.monotonic() + timeout
    while True:
        if (
            raffle_contract.getLatestTimestamp() > starting_timestamp
            and raffle_contract.getRaffleState() == OPEN
        ):
            winner = raffle_contract.getRecentWinner()
            print(f"WinnerPicked event fired! Winner: {winner}")
            return winner
        if time.monotonic() >= deadline:
            raise TimeoutError(
                f"No winner picked by {raffle_contract.address} within {timeout} seconds"
            )
        time.sleep(poll_interval)


def moccasin_main() -> None:
    raffle_contract = get_raffle()
    enter_raffle(raffle_contract)
    print(f"Players in raffle: {raffle_contract.getNumberOfPlayers()}")
