# county_choropleth/loader.py

import logging
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from typing import Any, List

import requests

from .config import Config
from .exceptions import FetchError
from .models import EducationRecord

logger = logging.getLogger(__name__)

def fetch_json(url: str, timeout: int = None) -> Any:
    """
    Downloads a single resource and parses its body as JSON.

    Args:
        url (str): The resource to fetch.
        timeout (int): Request timeout in seconds. Defaults to Config.REQUEST_TIMEOUT.

    Returns:
        Any: The parsed JSON document.

    Raises:
        FetchError: If the request fails or the body is not valid JSON.
    """
    logger.info(f"Fetching {url}.")
    try:
        response = requests.get(url, timeout=timeout or Config.REQUEST_TIMEOUT)
        response.raise_for_status()
    except requests.exceptions.RequestException as e:
        logger.error(f"Failed to fetch {url}: {e}")
        raise FetchError(f"Failed to fetch {url}: {e}") from e

    try:
        return response.json()
    except ValueError as e:
        logger.error(f"Response from {url} is not valid JSON: {e}")
        raise FetchError(f"Response from {url} is not valid JSON: {e}") from e

def load_datasets(urls: List[str], timeout: int = None) -> List[Any]:
    """
    Fetches every URL concurrently and returns the parsed documents in the order of `urls`.

    Each resource gets a single attempt. The first failure is raised as soon as it happens;
    requests that have not started are cancelled and ones in flight are not waited for.

    Raises:
        FetchError: If any of the resources cannot be fetched or parsed.
    """
    if not urls:
        return []

    executor = ThreadPoolExecutor(max_workers=len(urls))
    try:
        futures = [executor.submit(fetch_json, url, timeout) for url in urls]
        done, _ = wait(futures, return_when=FIRST_EXCEPTION)
        for future in futures:
            if future in done and future.exception() is not None:
                # result() re-raises the worker's FetchError
                future.result()
        datasets = [future.result() for future in futures]
    finally:
        executor.shutdown(wait=False, cancel_futures=True)

    logger.info(f"Fetched {len(datasets)} datasets.")
    return datasets

def parse_education_records(raw: List[dict]) -> List[EducationRecord]:
    """
    Converts the raw education JSON into EducationRecord objects, preserving dataset order.

    Raises:
        FetchError: If the document is not a list of education records.
    """
    if not isinstance(raw, list):
        raise FetchError("Education dataset must be a JSON array of records.")
    try:
        return [
            EducationRecord(
                fips=int(item['fips']),
                area_name=item['area_name'],
                state=item['state'],
                bachelorsOrHigher=float(item['bachelorsOrHigher'])
            )
            for item in raw
        ]
    except (KeyError, TypeError, ValueError) as e:
        logger.error(f"Malformed education record: {e}")
        raise FetchError(f"Malformed education record: {e}") from e
