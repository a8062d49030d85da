#!/usr/bin/env python3
"""
Basic chat completion example.

Usage:
    export OPENAI_API_KEY="your-api-key"
    python examples/basic_chat.py
"""

import asyncio

from async_openai import Client, CreateChatCompletionRequest, SystemMessage, UserMessage


async def main() -> None:
    """Run basic chat example."""
    async with Client() as client:
        # Method 1: Request model
        request = CreateChatCompletionRequest(
            model="gpt-3.5-turbo",
            max_tokens=512,
            messages=[
                SystemMessage(content="You are a helpful assistant."),
                UserMessage(content="Who won the world series in 2020?"),
            ],
        )
        response = await client.chat().create(request)
        for choice in response.choices:
            print(f"{choice.index}: {choice.message.role}: {choice.message.content}")
        print()

        # Method 2: Fluent builder
        request = (
            CreateChatCompletionRequest.args()
            .model("gpt-3.5-turbo")
            .messages([UserMessage(content="Write a one-liner to read a file in Python.")])
            .temperature(0.2)
            .build()
        )
        response = await client.chat().create(request)
        print(f"Python tip: {response.choices[0].message.content}")
        print()

        # Method 3: Plain mapping
        response = await client.chat().create(
            {"model": "gpt-3.5-turbo", "messages": [{"role": "user", "content": "Hello!"}]}
        )
        print(f"Response: {response.choices[0].message.content}")
        print(f"Tokens: {response.usage.prompt_tokens} in, {response.usage.completion_tokens} out")


if __name__ == "__main__":
    asyncio.run(main())
