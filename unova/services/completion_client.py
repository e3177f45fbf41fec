"""
Completion Client

Wraps the Gemini ``generateContent`` endpoint. Given a role-tagged message
history and an assistance type it returns one generated reply.

There is no retry and no streaming: one request, one full reply or an error.
"""

import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

import httpx

from unova.config import Settings
from unova.errors import ConfigurationError, UpstreamError
from unova.models.conversation import Message, MessageRole

logger = logging.getLogger(__name__)


class AssistanceType(str, Enum):
    """Which system instruction governs a generation call"""
    GENERAL = "GENERAL"
    RESEARCH = "RESEARCH"
    SPEECHWRITING = "SPEECHWRITING"
    DEBATE = "DEBATE"
    RESOLUTION = "RESOLUTION"

    @classmethod
    def resolve(cls, value: Optional[str]) -> "AssistanceType":
        """Map a client-supplied tag to a member; anything unknown is GENERAL."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.GENERAL


SYSTEM_INSTRUCTIONS: Dict[AssistanceType, str] = {
    AssistanceType.GENERAL: (
        "You are UNova, an AI assistant specialized in helping Model United Nations delegates. "
        "You provide accurate, concise information about international relations, UN procedures, "
        "and diplomatic strategies. You can help with research, speechwriting, debate strategy, "
        "and resolution drafting."
    ),
    AssistanceType.RESEARCH: (
        "You are UNova's Research Assistant. You provide accurate, up-to-date information on "
        "country policies, UN history, international relations, and global issues. Cite sources "
        "when possible and focus on factual, unbiased information useful for MUN delegates."
    ),
    AssistanceType.SPEECHWRITING: (
        "You are UNova's Speechwriting Assistant. You help delegates craft compelling speeches for "
        "Model UN conferences. Structure speeches with formal address, problem definition, national "
        "position, policy proposals, and a call to action. Maintain diplomatic tone and formal "
        "language appropriate for UN settings."
    ),
    AssistanceType.DEBATE: (
        "You are UNova's Debate Strategy Assistant. You help delegates prepare arguments, "
        "counterarguments, and rebuttals based on their country's position. Provide tactical advice "
        "for moderated and unmoderated caucuses, point out potential allies and opponents, and "
        "suggest diplomatic language for challenging situations."
    ),
    AssistanceType.RESOLUTION: (
        "You are UNova's Resolution Drafting Assistant. You help delegates create well-structured UN "
        "resolutions with appropriate preambulatory and operative clauses. Ensure proper formatting, "
        "clear language, and logical flow while maintaining diplomatic terminology consistent with "
        "UN documents."
    ),
}

GENERATION_CONFIG = {
    "temperature": 0.7,
    "topK": 40,
    "topP": 0.95,
    "maxOutputTokens": 2048,
}

SAFETY_SETTINGS = [
    {"category": category, "threshold": "BLOCK_MEDIUM_AND_ABOVE"}
    for category in (
        "HARM_CATEGORY_HARASSMENT",
        "HARM_CATEGORY_HATE_SPEECH",
        "HARM_CATEGORY_SEXUALLY_EXPLICIT",
        "HARM_CATEGORY_DANGEROUS_CONTENT",
    )
]

# Gemini calls the assistant side of a conversation "model"
_GEMINI_ROLES = {MessageRole.USER: "user", MessageRole.ASSISTANT: "model"}


def system_instruction_for(assistance_type: Optional[str]) -> str:
    return SYSTEM_INSTRUCTIONS[AssistanceType.resolve(assistance_type)]


def build_request_body(messages: Sequence[Message], assistance_type: Optional[str]) -> Dict[str, Any]:
    """
    Format a message history as a generateContent request.

    If the history has no system entry, the instruction for the resolved
    assistance type is prepended. System entries travel in
    ``systemInstruction``; the rest keep their order in ``contents``.
    """
    history = list(messages)
    if not any(m.role == MessageRole.SYSTEM for m in history):
        history.insert(0, Message.new(MessageRole.SYSTEM, system_instruction_for(assistance_type)))

    system_parts = [{"text": m.content} for m in history if m.role == MessageRole.SYSTEM]
    contents = [
        {"role": _GEMINI_ROLES[m.role], "parts": [{"text": m.content}]}
        for m in history
        if m.role != MessageRole.SYSTEM
    ]

    return {
        "systemInstruction": {"parts": system_parts},
        "contents": contents,
        "generationConfig": dict(GENERATION_CONFIG),
        "safetySettings": [dict(s) for s in SAFETY_SETTINGS],
    }


def extract_reply(payload: Any) -> str:
    """Pull the first candidate's text out of a generateContent response."""
    try:
        parts = payload["candidates"][0]["content"]["parts"]
        text = "".join(part.get("text", "") for part in parts)
    except (KeyError, IndexError, TypeError, AttributeError):
        logger.error(f"Invalid response structure from Gemini API: {str(payload)[:200]}")
        raise UpstreamError()
    if not text:
        logger.error("Gemini API returned an empty candidate")
        raise UpstreamError()
    return text


class CompletionClient:
    """
    Async client for the text-generation endpoint.

    The underlying ``httpx.AsyncClient`` is shared across requests and must be
    closed with ``aclose()`` at shutdown.
    """

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = settings.gemini_api_key
        self.model = settings.gemini_model
        self.api_base = settings.gemini_api_base.rstrip("/")
        self.timeout = settings.gemini_timeout
        self._client = httpx.AsyncClient(timeout=self.timeout, transport=transport)

        if self.api_key:
            logger.info(f"Completion client initialized with model: {self.model}")
        else:
            logger.warning("Completion client has no GEMINI_API_KEY; chat requests will fail")

    @property
    def endpoint(self) -> str:
        return f"{self.api_base}/models/{self.model}:generateContent"

    async def generate_reply(self, messages: List[Message], assistance_type: Optional[str] = None) -> str:
        """
        Generate the assistant's next reply.

        Args:
            messages: Conversation so far, oldest first
            assistance_type: One of AssistanceType; anything else means GENERAL

        Returns:
            The generated reply text

        Raises:
            ConfigurationError: If no API key is configured
            UpstreamError: On non-2xx status, timeout, transport failure or a
                malformed/empty payload
        """
        if not self.api_key:
            logger.error("Gemini API key not found; set GEMINI_API_KEY")
            raise ConfigurationError()

        body = build_request_body(messages, assistance_type)

        try:
            response = await self._client.post(
                self.endpoint,
                params={"key": self.api_key},
                json=body,
            )
        except httpx.TimeoutException as e:
            logger.error(f"Gemini request timed out after {self.timeout}s: {str(e)}")
            raise UpstreamError("The assistant took too long to respond")
        except httpx.HTTPError as e:
            logger.error(f"Gemini request failed: {str(e)}")
            raise UpstreamError()

        if response.is_error:
            logger.error(f"Gemini API error {response.status_code}: {_error_detail(response)}")
            raise UpstreamError()

        try:
            payload = response.json()
        except ValueError:
            logger.error("Gemini API returned a non-JSON body")
            raise UpstreamError()

        return extract_reply(payload)

    async def aclose(self) -> None:
        await self._client.aclose()


def _error_detail(response: httpx.Response) -> str:
    try:
        return response.json().get("error", {}).get("message") or response.reason_phrase
    except (ValueError, AttributeError):
        return response.reason_phrase
