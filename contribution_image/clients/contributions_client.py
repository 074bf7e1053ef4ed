import logging
from collections.abc import Mapping
from typing import Any

import httpx

from contribution_image.schemas.contributions import ContributionDay
from contribution_image.schemas.contributions import ContributionSet


logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://github-contributions-api.deno.dev/{username}.json"
DEFAULT_TIMEOUT_SECONDS = 20.0


class ContributionDataError(ValueError):
    """Raised when the API response carries no usable contribution records."""


def _flatten_records(raw_records: list[Any]) -> list[Any]:
    # The API may group days by week; grid placement uses the flat day index.
    records: list[Any] = []
    for item in raw_records:
        if isinstance(item, list):
            records.extend(item)
        elif isinstance(item, Mapping) and isinstance(item.get("weeks"), list):
            records.extend(item["weeks"])
        else:
            records.append(item)
    return records


def parse_contributions(username: str, payload: Any) -> ContributionSet:
    """Validate a decoded API payload and build the ordered contribution set."""

    if not isinstance(payload, Mapping):
        raise ContributionDataError("contributions response is invalid")

    raw_records = payload.get("contributions")
    if not isinstance(raw_records, list):
        raise ContributionDataError(f"no contribution data found for {username}")

    records = _flatten_records(raw_records)
    if not records:
        raise ContributionDataError(f"no contribution data found for {username}")

    days = tuple(ContributionDay.model_validate(record) for record in records)
    return ContributionSet(username=username, days=days)


def fetch_contributions(
    username: str,
    api_url: str = DEFAULT_API_URL,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> ContributionSet:
    """Fetch one year of contribution days for a user from the contributions API."""

    username = username.strip()
    if not username:
        raise ValueError("username is required")

    url = api_url.format(username=username)
    logger.info("Fetching contributions from %s", url)

    response = httpx.get(
        url,
        headers={
            "Accept": "application/json",
            "User-Agent": "contribution-image",
        },
        timeout=timeout,
    )
    response.raise_for_status()

    contributions = parse_contributions(username, response.json())
    logger.info(
        "Received %d contribution days with %d contributions for %s",
        len(contributions.days),
        contributions.total,
        username,
    )
    return contributions
