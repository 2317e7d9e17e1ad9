import logging
from typing import Any, Dict, Optional

import requests

from config import Settings
from normalize import MalformedFeedResponse

logger = logging.getLogger(__name__)


class UpstreamError(Exception):
    """The NASA API could not be reached or answered with an error."""


class UpstreamUnavailable(UpstreamError):
    pass


class UpstreamHTTPError(UpstreamError):
    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        super().__init__(message)


def build_feed_params(start_date: str, end_date: str, api_key: str) -> Dict[str, str]:
    return {
        "start_date": start_date,
        "end_date": end_date,
        "api_key": api_key,
    }


def fetch_feed(
    start_date: str,
    end_date: str,
    settings: Settings,
    session: Optional[requests.Session] = None,
) -> Dict[str, Any]:
    """
    Fetch the NeoWs /feed response for a date range.

    Args:
        start_date: first day, YYYY-MM-DD
        end_date: last day, YYYY-MM-DD
        settings: supplies the feed URL, API key and timeout
        session: optional requests session, a fresh request is made otherwise

    Returns: the decoded JSON body
    """
    http = session or requests
    params = build_feed_params(start_date, end_date, settings.nasa_api_key)
    logger.info("Fetching NEO feed for %s to %s", start_date, end_date)

    try:
        response = http.get(
            settings.nasa_feed_url,
            params=params,
            timeout=settings.request_timeout,
        )
        response.raise_for_status()
    except requests.exceptions.HTTPError as e:
        status_code = e.response.status_code if e.response is not None else 502
        raise UpstreamHTTPError(
            status_code, f"NASA API returned HTTP {status_code}"
        ) from e
    except (requests.exceptions.Timeout, requests.exceptions.ConnectionError) as e:
        raise UpstreamUnavailable(f"NASA API unreachable: {e}") from e

    try:
        return response.json()
    except ValueError as e:
        raise MalformedFeedResponse("NASA API returned a non-JSON body") from e
