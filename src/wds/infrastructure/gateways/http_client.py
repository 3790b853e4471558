"""Shared helper for the httpx-based collaborator adapters."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from wds.domain.exceptions import UpstreamUnavailable

logger = logging.getLogger(__name__)


def post_json(
    client: httpx.Client,
    service: str,
    url: str,
    payload: dict[str, Any],
    **kwargs: Any,
) -> dict[str, Any]:
    """POST *payload* and return the decoded JSON body.

    Transport failures, non-2xx answers and undecodable bodies all become
    UpstreamUnavailable so callers only deal with one error type.
    """
    try:
        response = client.post(url, json=payload, **kwargs)
        response.raise_for_status()
        return response.json()
    except httpx.HTTPStatusError as exc:
        logger.error(
            "%s answered %s: %s", service, exc.response.status_code, exc.response.text
        )
        raise UpstreamUnavailable(
            f"{service} rejected the request ({exc.response.status_code}); please retry"
        ) from exc
    except httpx.HTTPError as exc:
        logger.error("%s unreachable: %s", service, exc)
        raise UpstreamUnavailable(f"{service} is unavailable; please retry") from exc
    except ValueError as exc:
        logger.error("%s sent an invalid response body", service)
        raise UpstreamUnavailable(f"{service} sent an invalid response") from exc
