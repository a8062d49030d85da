"""
Utility helpers.
"""

from async_openai.utils.files import create_file_part, guess_content_type, save_bytes

__all__ = [
    "create_file_part",
    "guess_content_type",
    "save_bytes",
]
