"""
core/errors.py
────────────────────────────────────────────────────────────────────────
Error taxonomy shared by the calculator, providers, store and routers.

`status_code` is the HTTP status the API layer answers with; the message
is safe to show to the caller.
"""
from __future__ import annotations


class FitGeniusError(Exception):
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInput(FitGeniusError):
    """Value present but non-numeric or out of range."""
    status_code = 400


class MissingInput(FitGeniusError):
    """Required measurement absent."""
    status_code = 400


class NotFound(FitGeniusError):
    status_code = 404


class ExternalServiceFailure(FitGeniusError):
    """The text-generation collaborator failed (network, auth, quota, bad output)."""
    status_code = 502
