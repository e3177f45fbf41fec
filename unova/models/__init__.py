"""SQLModel table definitions. Importing this package registers every table."""
from unova.models.user import User
from unova.models.speech import Speech
from unova.models.resolution import Resolution
from unova.models.research_note import ResearchNote
from unova.models.conversation import Conversation, Message, MessageRole

__all__ = [
    "User",
    "Speech",
    "Resolution",
    "ResearchNote",
    "Conversation",
    "Message",
    "MessageRole",
]
