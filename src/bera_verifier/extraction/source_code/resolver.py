"""Resolve the `path:Name` identifier the verification API needs."""

import json
import logging
from typing import Callable, Iterable, Optional

from ...models import NameStrategy

logger = logging.getLogger(__name__)

DEFAULT_CONTRACT_NAME = "Contract"


def contract_name_from_path(source_path: str) -> str:
    """
    Derive a contract name from a source file key.

    Keeps the last `/` segment and drops everything after its last `.`,
    e.g. `contracts/token/Foo.sol` -> `Foo`.
    """
    file_name = source_path.rsplit('/', 1)[-1]
    if '.' in file_name:
        return file_name.rsplit('.', 1)[0]
    return file_name


def _select_source_key(sources: dict, hint: Optional[str], strategy: NameStrategy) -> Optional[str]:
    keys = list(sources.keys())

    if strategy == NameStrategy.FIRST_KEY:
        if not keys:
            logger.error("No source files found in sources.")
            return None
        return keys[0]

    if not hint:
        logger.error("No contract name hint to search sources for.")
        return None

    # First substring match wins, in the explorer's listing order
    for key in keys:
        if hint in key:
            return key

    logger.error("Contract name not found in sources.")
    return None


def extract_contract_name(
    source_code: str,
    hint: Optional[str] = None,
    strategy: NameStrategy = NameStrategy.BY_HINT,
) -> Optional[str]:
    """
    Resolve `filePath:contractName` from a standard JSON input.

    Args:
        source_code: Normalized source payload
        hint: Contract name reported by the lookup service (used by BY_HINT)
        strategy: BY_HINT picks the first source key containing the hint;
            FIRST_KEY picks the first source key regardless of the hint

    Returns:
        The composite identifier, or None when the payload is not a standard
        JSON input or no key could be selected
    """
    try:
        parsed_source = json.loads(source_code)
    except (TypeError, ValueError) as e:
        logger.error(f"Error parsing contract name: {e}")
        return None

    sources = parsed_source.get('sources') if isinstance(parsed_source, dict) else None
    if not isinstance(sources, dict):
        logger.error("Error parsing contract name: no 'sources' mapping in source payload")
        return None

    source_key = _select_source_key(sources, hint, strategy)
    if source_key is None:
        return None

    contract_name = parsed_source.get('ContractName') or contract_name_from_path(source_key)
    return f"{source_key}:{contract_name}"


def resolve_contract_name(
    providers: Iterable[Callable[[], Optional[str]]],
    default: str = DEFAULT_CONTRACT_NAME,
) -> str:
    """
    Return the first non-empty name produced by the providers, in order.

    Providers are called lazily; the ones after the first hit never run.

    Args:
        providers: Zero-argument callables, highest precedence first
        default: Name used when every provider comes back empty

    Returns:
        Contract name for the verification request
    """
    for provider in providers:
        name = provider()
        if name:
            return name
    logger.warning(f"Falling back to default contract name '{default}'")
    return default
