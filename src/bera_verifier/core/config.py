"""Runtime configuration built once at start-up and passed to every step."""

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel
from pydantic import ConfigDict

DEFAULT_CHAIN_ID = 80094  # Berachain mainnet
DEFAULT_WORKING_DIR = "./bera"
ROUTESCAN_BASE_URL = "https://api.routescan.io/v2/network/mainnet/evm"
BERASCAN_API_URL = "https://api.berascan.com/api"
BERASCAN_SITE_URL = "https://berascan.com"


class VerifierConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    api_key: str = ""
    working_dir: Path = Path(DEFAULT_WORKING_DIR)
    chain_id: int = DEFAULT_CHAIN_ID
    routescan_base_url: str = ROUTESCAN_BASE_URL
    berascan_api_url: str = BERASCAN_API_URL
    berascan_site_url: str = BERASCAN_SITE_URL
    request_timeout: Optional[float] = None

    def source_file_path(self, contract_address: str) -> Path:
        """Per-address artifact, overwritten on every run."""
        return self.working_dir / f"{contract_address}.json"


def load_config(**overrides) -> VerifierConfig:
    """
    Build the configuration from environment variables.

    The caller is responsible for loading a `.env` file first. Keyword
    arguments override the environment; `None` values are ignored so CLI
    flags that were not given fall through to the environment.

    Args:
        **overrides: VerifierConfig field values

    Returns:
        Frozen configuration
    """
    timeout = os.getenv('REQUEST_TIMEOUT')
    values = {
        'api_key': os.getenv('BERASCAN_API_KEY') or '',
        'working_dir': os.getenv('WORKING_DIR') or DEFAULT_WORKING_DIR,
        'chain_id': int(os.getenv('CHAIN_ID') or DEFAULT_CHAIN_ID),
        'routescan_base_url': os.getenv('ROUTESCAN_BASE_URL') or ROUTESCAN_BASE_URL,
        'berascan_api_url': os.getenv('BERASCAN_API_URL') or BERASCAN_API_URL,
        'berascan_site_url': os.getenv('BERASCAN_SITE_URL') or BERASCAN_SITE_URL,
        'request_timeout': float(timeout) if timeout else None,
    }
    values.update({key: value for key, value in overrides.items() if value is not None})
    return VerifierConfig(**values)
