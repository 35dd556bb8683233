"""
api/auth.py - Request credentials for the component API

Session and token management live outside this package; the repository
only asks a provider for the headers to send.
"""

from __future__ import annotations

from typing import Dict, Optional, Protocol

from ..config import ApiConfig


class AuthHeaderProvider(Protocol):
    """Supplies the headers an authenticated request needs."""

    def get_auth_headers(self) -> Dict[str, str]:
        ...


class StaticAuthHeaders:
    """
    Fixed API key and optional bearer token.

    The token is read on every call so a caller can swap it after login.
    """

    def __init__(self, api_key: str = "", token: Optional[str] = None):
        self.api_key = api_key
        self.token = token

    def get_auth_headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["x-api-key"] = self.api_key
        if self.token:
            headers["authorization"] = f"Bearer {self.token}"
        return headers

    @classmethod
    def from_config(cls, config: ApiConfig) -> "StaticAuthHeaders":
        return cls(api_key=config.api_key, token=config.token or None)
