"""Configuration and orchestration for the verification flow."""

from .config import VerifierConfig, load_config
from .helpers import ensure_directory_exists

__all__ = [
    "VerifierConfig",
    "ensure_directory_exists",
    "load_config",
]
