"""
Localization Loader

Fetches a published translation table and flattens its wire format
(a JSON array of single-entry objects) into one mapping.
"""
from typing import Any, Dict, List, Optional

import httpx
from loguru import logger

from config import settings

from .languages import language_code
from .localization import Localization


class LocalizationFetchError(ValueError):
    """Raised when the fetched document is not a translation array"""


def get_httpx_client_kwargs() -> dict:
    """Get httpx client kwargs including proxy if configured"""
    kwargs = {"timeout": settings.HTTP_TIMEOUT}
    if settings.PROXY_URL:
        kwargs["proxy"] = settings.PROXY_URL
        logger.debug(f"Using proxy: {settings.PROXY_URL}")
    return kwargs


def build_url(language) -> str:
    """URL of the published table for a language"""
    return settings.LOCALIZATION_URL_TEMPLATE.format(language=language_code(language))


def flatten_array_data(array_data: List[Dict[str, str]]) -> Dict[str, str]:
    """Merge single-entry objects left to right; later keys win"""
    data: Dict[str, str] = {}
    for item in array_data:
        data.update(item)
    return data


async def fetch_localization(
    language,
    client: Optional[httpx.AsyncClient] = None
) -> List[Dict[str, str]]:
    """
    Download the raw translation array for a language.

    Args:
        language: Language code or LocalizationLanguage
        client: Optional client to reuse; it is not closed here

    Raises:
        httpx.HTTPError: on transport errors or non-2xx responses
        LocalizationFetchError: if the payload is not a JSON array
    """
    url = build_url(language)
    logger.info(f"Fetching localization '{language_code(language)}' from {url}")

    try:
        if client is not None:
            response = await client.get(url)
        else:
            async with httpx.AsyncClient(**get_httpx_client_kwargs()) as own_client:
                response = await own_client.get(url)
        response.raise_for_status()
    except httpx.HTTPError as e:
        logger.error(f"Failed to fetch localization '{language_code(language)}': {e}")
        raise

    payload: Any = response.json()
    if not isinstance(payload, list):
        raise LocalizationFetchError(
            f"Expected a JSON array for '{language_code(language)}', got {type(payload).__name__}"
        )
    return payload


async def create_localization(
    language,
    client: Optional[httpx.AsyncClient] = None
) -> Localization:
    """Fetch, flatten and wrap the table for a language"""
    array_data = await fetch_localization(language, client=client)
    localization = Localization(language, flatten_array_data(array_data))
    logger.info(f"Loaded localization '{language_code(language)}' with {len(localization)} entries")
    return localization
