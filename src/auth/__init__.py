"""Credential session."""

from src.auth.session import AuthSession

__all__ = ["AuthSession"]
