"""
Streaming support: SSE frame decoding.
"""

from async_openai.streaming.decode import SSEDecoder

__all__ = ["SSEDecoder"]
