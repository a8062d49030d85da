#!/usr/bin/env python3
"""
Azure OpenAI example.

Usage:
    export AZURE_OPENAI_KEY="your-api-key"
    python examples/azure_chat.py
"""

import asyncio
import os

from async_openai import AzureConfig, Client


async def main() -> None:
    config = (
        AzureConfig()
        .with_api_base("https://your-resource-name.openai.azure.com")
        .with_api_version("2023-03-15-preview")
        .with_deployment_id("deployment-id")
        .with_api_key(os.environ["AZURE_OPENAI_KEY"])
    )

    async with Client.with_config(config) as client:
        response = await client.chat().create(
            {
                "model": "gpt-35-turbo",
                "messages": [
                    {"role": "system", "content": "You are a helpful assistant."},
                    {"role": "user", "content": "How does large language model work?"},
                ],
            }
        )
        print(response.choices[0].message.content)

        embeddings = await client.embeddings().create(
            {"model": "text-embedding-ada-002", "input": "Why do programmers hate nature? It has too many bugs."}
        )
        print(f"Embedding dimensions: {len(embeddings.data[0].embedding)}")


if __name__ == "__main__":
    asyncio.run(main())
