"""
Client layer - User-facing API.

This module provides:
- Client: Main entry point, exposing one accessor per API group
- SpeechResponse: Binary text-to-speech result
"""

from async_openai.client.core import Client, require_id
from async_openai.client.response import SpeechResponse

__all__ = [
    "Client",
    "SpeechResponse",
    "require_id",
]
