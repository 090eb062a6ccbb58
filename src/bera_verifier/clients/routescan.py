"""RouteScan lookup client: fetch a contract record and save it to disk."""

import logging
from typing import Any, Dict, Tuple

import requests

from ..core.config import VerifierConfig
from ..core.helpers import write_json
from ..exceptions import SourceFetchError
from ..models import ContractRecord

logger = logging.getLogger(__name__)


def routescan_source_url(contract_address: str, config: VerifierConfig) -> str:
    """
    Build the Etherscan-compatible getsourcecode URL on RouteScan.

    Args:
        contract_address: Contract address, used verbatim
        config: Runtime configuration (chain id and base URL)

    Returns:
        Lookup URL
    """
    base_url = config.routescan_base_url.rstrip('/')
    return (
        f"{base_url}/{config.chain_id}/etherscan/contract/getsourcecode"
        f"?address={contract_address}"
    )


def fetch_source_record(contract_address: str, config: VerifierConfig) -> Tuple[Dict[str, Any], ContractRecord]:
    """
    Fetch the first getsourcecode result for an address.

    Args:
        contract_address: Contract address
        config: Runtime configuration

    Returns:
        The raw result element and its parsed ContractRecord

    Raises:
        SourceFetchError: on network errors, non-2xx responses, non-JSON
            bodies or a missing/empty `result` array
    """
    url = routescan_source_url(contract_address, config)
    logger.info(f"🔍 Fetching contract source code from RouteScan: {url}")

    try:
        response = requests.get(url, timeout=config.request_timeout)
        response.raise_for_status()
        data = response.json()
    except (requests.RequestException, ValueError) as e:
        logger.error(f"❌ Failed to fetch contract source code: {e}")
        raise SourceFetchError(f"Failed to fetch contract source code: {e}") from e

    result = data.get('result') if isinstance(data, dict) else None
    if not isinstance(result, list) or not result:
        message = data.get('message') if isinstance(data, dict) else None
        logger.error(f"❌ RouteScan returned no result for {contract_address} (message={message!r})")
        raise SourceFetchError(f"No source code result for {contract_address}: {result!r}")

    raw_record = result[0]
    if not isinstance(raw_record, dict):
        raise SourceFetchError(f"Unexpected getsourcecode result for {contract_address}: {raw_record!r}")

    return raw_record, ContractRecord.model_validate(raw_record)


def fetch_and_save_source_code(contract_address: str, config: VerifierConfig) -> ContractRecord:
    """
    Fetch the contract record and persist it, pretty-printed, to the working file.

    The working directory must already exist. Nothing is written when the
    fetch fails.

    Args:
        contract_address: Contract address
        config: Runtime configuration

    Returns:
        Parsed contract record
    """
    raw_record, record = fetch_source_record(contract_address, config)

    source_file_path = config.source_file_path(contract_address)
    write_json(source_file_path, raw_record)
    logger.info(f"✅ Source code saved to: {source_file_path}")
    return record
