"""Explorer API clients: RouteScan lookup and BeraScan verification."""

from .berascan import build_verification_request, strip_hex_prefix, submit_verification
from .routescan import fetch_and_save_source_code, fetch_source_record

__all__ = [
    "build_verification_request",
    "fetch_and_save_source_code",
    "fetch_source_record",
    "strip_hex_prefix",
    "submit_verification",
]
