"""BeraScan verification client: build and submit a verifysourcecode request."""

import logging
from typing import Optional
from urllib.parse import urlencode

import requests

from ..core.config import VerifierConfig
from ..exceptions import VerificationSubmitError
from ..models import ContractRecord, VerificationRequest, VerificationResponse

logger = logging.getLogger(__name__)

FORM_HEADERS = {"Content-Type": "application/x-www-form-urlencoded"}


def strip_hex_prefix(value: Optional[str]) -> str:
    """Drop a single leading `0x`; missing values become an empty string."""
    if not value:
        return ""
    if value.startswith("0x"):
        return value[2:]
    return value


def status_check_url(guid: str, config: VerifierConfig) -> str:
    """URL that reports the state of a pending verification (no API key included)."""
    params = {
        'module': 'contract',
        'action': 'checkverifystatus',
        'guid': guid,
    }
    return f"{config.berascan_api_url}?{urlencode(params)}"


def explorer_address_url(contract_address: str, config: VerifierConfig) -> str:
    return f"{config.berascan_site_url.rstrip('/')}/address/{contract_address}#code"


def build_verification_request(
    contract_address: str,
    contract_name: str,
    source_code: str,
    record: ContractRecord,
    config: VerifierConfig,
) -> VerificationRequest:
    """
    Assemble the verification form from the lookup record's metadata.

    Args:
        contract_address: Address from the command line (not from the record)
        contract_name: Resolved `path:Name` identifier
        source_code: Normalized source payload, sent as-is
        record: Lookup result supplying compiler settings
        config: Runtime configuration (API key)

    Returns:
        Request ready for submission
    """
    return VerificationRequest(
        api_key=config.api_key,
        contract_address=contract_address,
        contract_name=contract_name,
        compiler_version=record.compiler_version or "",
        optimization_used=record.optimization_used or "",
        runs=record.runs or "",
        constructor_arguments=strip_hex_prefix(record.constructor_arguments),
        source_code=source_code,
        evm_version=record.evm_version or "",
    )


def submit_verification(request: VerificationRequest, config: VerifierConfig) -> VerificationResponse:
    """
    POST the verification form to BeraScan.

    A response whose status is not "1" is logged and returned, not raised:
    the explorer answered, it just declined the submission.

    Args:
        request: Verification form
        config: Runtime configuration

    Returns:
        Parsed response envelope

    Raises:
        VerificationSubmitError: on network errors, non-2xx responses or a
            non-JSON body
    """
    logger.info(f"constructorArguments {request.constructor_arguments}")
    logger.info("Submitting contract verification request to BeraScan...")

    try:
        response = requests.post(
            config.berascan_api_url,
            data=request.to_form(),
            headers=FORM_HEADERS,
            timeout=config.request_timeout,
        )
        response.raise_for_status()
        data = response.json()
    except (requests.RequestException, ValueError) as e:
        logger.error(f"❌ Failed to verify contract on BeraScan: {e}")
        raise VerificationSubmitError(f"Failed to verify contract on BeraScan: {e}") from e

    logger.info(f"✅ Verification Response: {data}")
    if not isinstance(data, dict):
        raise VerificationSubmitError(f"Unexpected verification response: {data!r}")

    result = VerificationResponse.model_validate(data)
    if result.is_accepted:
        logger.info(f"Check verification status at: {status_check_url(str(result.result), config)}")
    else:
        logger.warning(f"BeraScan did not accept the submission: {result.message} ({result.result})")

    logger.info(f"View verification at: {explorer_address_url(request.contract_address, config)}")
    return result
