"""Source normalization and contract-name resolution."""

from .normalizer import normalize_source_code, process_source_code
from .resolver import (
    contract_name_from_path,
    extract_contract_name,
    resolve_contract_name,
)

__all__ = [
    "contract_name_from_path",
    "extract_contract_name",
    "normalize_source_code",
    "process_source_code",
    "resolve_contract_name",
]
