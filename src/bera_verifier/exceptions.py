"""Errors raised by the verification pipeline."""


class VerifierError(RuntimeError):
    """Base class for fatal pipeline errors."""


class SourceFetchError(VerifierError):
    """The lookup service could not provide a contract record."""


class VerificationSubmitError(VerifierError):
    """The verification request could not be delivered or decoded."""
