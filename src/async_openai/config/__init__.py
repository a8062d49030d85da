"""
Client configuration: endpoint, credentials and per-request headers.
"""

from async_openai.config.auth import resolve_api_key
from async_openai.config.azure import DEFAULT_AZURE_API_VERSION, AzureConfig
from async_openai.config.base import Config
from async_openai.config.openai import OPENAI_API_BASE, OpenAIConfig

__all__ = [
    "DEFAULT_AZURE_API_VERSION",
    "OPENAI_API_BASE",
    "AzureConfig",
    "Config",
    "OpenAIConfig",
    "resolve_api_key",
]
