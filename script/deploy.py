import os

from moccasin.boa_tools import VyperContract
from script import deploy_mocks, deploy_raffle, update_front_end

# Run in this order; later steps read what earlier ones deployed.
DEPLOY_STEPS = [deploy_mocks, deploy_raffle, update_front_end]


def run_deployments(tags: list[str] | None = None) -> dict[str, VyperContract]:
    """Run every deploy step sharing a tag with `tags` (all steps when empty).

    Returns the deployed contracts by name, e.g. ``"vrf_coordinator_v2_mock"``
    and ``"raffle"``.
    """
    deployments = {}
    for step in DEPLOY_STEPS:
        if tags and not set(tags) & set(step.TAGS):
            continue
        step.deploy(deployments)
    return deployments


def parse_tags(raw_tags: str) -> list[str]:
    return [tag.strip() for tag in raw_tags.split(",") if tag.strip()]


def moccasin_main() -> dict[str, VyperContract]:
    return run_deployments(parse_tags(os.environ.get("DEPLOY_TAGS", "")))
