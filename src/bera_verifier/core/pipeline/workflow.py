"""Pipeline orchestrator: fetch, normalize, resolve, submit."""

import logging

from ...clients.berascan import build_verification_request, submit_verification
from ...clients.routescan import fetch_and_save_source_code
from ...extraction.source_code import (
    extract_contract_name,
    process_source_code,
    resolve_contract_name,
)
from ...models import NameStrategy, VerificationResponse
from ..config import VerifierConfig
from ..helpers import ensure_directory_exists

logger = logging.getLogger(__name__)


def run_verification(
    contract_address: str,
    config: VerifierConfig,
    strategy: NameStrategy = NameStrategy.BY_HINT,
) -> VerificationResponse:
    """
    Re-verify one contract: each step runs only after the previous one finished.

    Args:
        contract_address: Contract address from the command line
        config: Runtime configuration
        strategy: How the main source file is selected

    Returns:
        BeraScan's response envelope, accepted or not
    """
    ensure_directory_exists(config.working_dir)

    record = fetch_and_save_source_code(contract_address, config)
    source_code = process_source_code(contract_address, record, config)

    logger.info("Preparing verification request...")
    contract_name = resolve_contract_name([
        lambda: extract_contract_name(source_code, record.contract_name, strategy),
        lambda: record.contract_name,
    ])
    logger.info(f"Contract name: {contract_name}")

    request = build_verification_request(contract_address, contract_name, source_code, record, config)
    return submit_verification(request, config)
