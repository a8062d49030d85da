#!/usr/bin/env python3
"""
Streaming chat completion example.

Usage:
    export OPENAI_API_KEY="your-api-key"
    python examples/streaming.py
"""

import asyncio
import sys

from async_openai import ApiError, Client, CreateChatCompletionRequest, UserMessage


async def main() -> None:
    """Print a completion as it is generated."""
    request = (
        CreateChatCompletionRequest.args()
        .model("gpt-3.5-turbo")
        .max_tokens(512)
        .messages([UserMessage(content="Write a marketing blog praising and introducing the async-openai Python library")])
        .build()
    )

    async with Client() as client:
        try:
            async for chunk in client.chat().create_stream(request):
                for choice in chunk.choices:
                    content = choice.delta.get("content")
                    if content:
                        sys.stdout.write(content)
                        sys.stdout.flush()
        except ApiError as e:
            print(f"\nStream failed: {e.message}", file=sys.stderr)
    print()


if __name__ == "__main__":
    asyncio.run(main())
