#!/usr/bin/env python3
"""
Assistants example: create an assistant, start a thread and poll a run.

Usage:
    export OPENAI_API_KEY="your-api-key"
    python examples/assistants.py
"""

import asyncio

from async_openai import Client


async def main() -> None:
    async with Client() as client:
        assistant = await client.assistants().create(
            {
                "model": "gpt-4-1106-preview",
                "name": "Math Tutor",
                "instructions": "You are a personal math tutor. Answer questions briefly.",
            }
        )
        thread = await client.threads().create()
        await client.threads().messages(thread.id).create(
            {"content": "I need to solve the equation `3x + 11 = 14`. Can you help me?"}
        )

        runs = client.threads().runs(thread.id)
        run = await runs.create({"assistant_id": assistant.id})
        while run.status in ("queued", "in_progress"):
            await asyncio.sleep(1)
            run = await runs.retrieve(run.id)
        print(f"Run finished with status: {run.status}")

        messages = await client.threads().messages(thread.id).list({"order": "asc"})
        for message in messages.data:
            for content in message.content:
                if content.type == "text":
                    print(f"{message.role}: {content.text.value}")

        await client.threads().delete(thread.id)
        await client.assistants().delete(assistant.id)


if __name__ == "__main__":
    asyncio.run(main())
