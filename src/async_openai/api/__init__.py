"""
API groups.

Each group is a lightweight view over a :class:`~async_openai.Client`;
obtain them through the client (``client.chat()``, ``client.threads()``...).
"""

from async_openai.api.assistants import AssistantFiles, Assistants
from async_openai.api.audio import Audio
from async_openai.api.chat import Chat
from async_openai.api.completions import Completions
from async_openai.api.embeddings import Embeddings
from async_openai.api.files import Files
from async_openai.api.fine_tuning import FineTuning
from async_openai.api.images import Images
from async_openai.api.messages import MessageFiles, Messages
from async_openai.api.models import Models
from async_openai.api.moderations import Moderations
from async_openai.api.runs import Runs
from async_openai.api.steps import Steps
from async_openai.api.threads import Threads

__all__ = [
    "AssistantFiles",
    "Assistants",
    "Audio",
    "Chat",
    "Completions",
    "Embeddings",
    "Files",
    "FineTuning",
    "Images",
    "MessageFiles",
    "Messages",
    "Models",
    "Moderations",
    "Runs",
    "Steps",
    "Threads",
]
