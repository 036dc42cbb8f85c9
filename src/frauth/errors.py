"""
Error taxonomy for frauth. I/O failures are left as plain OSError.
"""


class FrauthError(Exception):
    """Base for all frauth errors."""


class UserAborted(FrauthError):
    """User declined a confirmation gate."""


class EncodingError(FrauthError):
    """Secrets file could not be encoded or decoded."""


class InteractionError(FrauthError):
    """Prompt could not read an answer (closed stdin, Ctrl+C)."""
