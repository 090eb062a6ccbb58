"""Unwrap the brace-wrapped standard JSON input some explorers return."""

import logging

from ...core.config import VerifierConfig
from ...core.helpers import write_text
from ...models import ContractRecord

logger = logging.getLogger(__name__)


def normalize_source_code(source_code: str) -> str:
    """
    Strip one outer brace pair from a `{{...}}` SourceCode payload.

    Etherscan-family explorers return multi-file standard JSON input wrapped
    in an extra pair of braces. Anything not starting with `{` and ending
    with `}` (a flat single-file source) is returned unchanged. The result is
    not validated as JSON here.

    Args:
        source_code: SourceCode field of the lookup result

    Returns:
        Normalized source payload
    """
    if source_code.startswith('{') and source_code.endswith('}'):
        return source_code[1:-1]
    return source_code


def process_source_code(contract_address: str, record: ContractRecord, config: VerifierConfig) -> str:
    """Normalize the record's source and overwrite the working file with it."""
    source_code = normalize_source_code(record.source_code)

    output_file = config.source_file_path(contract_address)
    write_text(output_file, source_code)
    logger.info(f"✅ Extracted SourceCode saved to {output_file}")
    return source_code
