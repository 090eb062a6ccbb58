"""Top-to-bottom verification pipeline."""

from .workflow import run_verification

__all__ = ["run_verification"]
