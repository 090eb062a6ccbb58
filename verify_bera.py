#!/usr/bin/env python3
"""
Run the BeraScan re-verification tool from a source checkout.

    python verify_bera.py <contract-address> [--strategy first-key] [--debug]

Fetches the contract's source from RouteScan and submits it to BeraScan,
without installing the `verify-bera` console script first.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from bera_verifier.main import run

if __name__ == "__main__":
    run()
