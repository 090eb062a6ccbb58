"""Re-verify RouteScan contract sources on BeraScan."""

__version__ = "0.1.0"
