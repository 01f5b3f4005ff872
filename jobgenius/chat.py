"""Career-assistant chat replies via an OpenAI-compatible backend, with keyword fallback."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Sequence

import openai

from jobgenius.config import get_env, get_float_env
from jobgenius.log import get_logger
from jobgenius.models import ChatTurn
from jobgenius.retry import retry

log = get_logger(__name__)

SYSTEM_PROMPT = """You are JobGenius AI, an AI assistant for job seekers.
Your capabilities include:
- Finding relevant job opportunities
- Optimizing resumes and cover letters for specific positions
- Preparing for job interviews
- Analyzing skills gaps and suggesting improvements
- Providing career advice and industry insights

Be helpful, encouraging, and professional in your responses.
Focus on providing actionable advice for job seekers."""

EMPTY_MESSAGE_REPLY = "Please enter a message to continue."
EMPTY_COMPLETION_REPLY = (
    "I'm not sure how to respond to that. Could you try asking in a different way?"
)

HELP_REPLY = (
    "I can help you with your job search by finding relevant positions, optimizing your "
    "resume, and preparing for interviews. What specifically would you like help with?"
)
RESUME_REPLY = (
    "I can optimize your resume for specific job applications. Would you like me to "
    "analyze your current resume and suggest improvements?"
)
INTERVIEW_REPLY = (
    "I can help you prepare for interviews by providing common questions and suggested "
    "answers based on your experience. Would you like to start interview preparation?"
)
JOB_SEARCH_REPLY = (
    "I found several new job postings that match your profile. Would you like me to "
    "prepare applications for these positions?"
)
DEFAULT_REPLY = (
    "I'm here to help with your job search. I can find relevant jobs, optimize your "
    "resume, or help prepare for interviews. What would you like assistance with?"
)

# Evaluated top to bottom; first rule with a keyword in the message wins.
FALLBACK_RULES: list[tuple[tuple[str, ...], str]] = [
    (("help", "how"), HELP_REPLY),
    (("resume", "cv"), RESUME_REPLY),
    (("interview",), INTERVIEW_REPLY),
    (("job", "search"), JOB_SEARCH_REPLY),
]

DEFAULT_BASE_URL = "https://models.inference.ai.azure.com"
DEFAULT_MODEL = "gpt-4o"
DEFAULT_API_VERSION = "2023-05-15"
DEFAULT_TIMEOUT_SECONDS = 5.0


class GenerativeTextService(ABC):
    @abstractmethod
    def complete(self, system_prompt: str, history: Sequence[ChatTurn], message: str) -> str:
        pass


def build_messages(
    system_prompt: str, history: Sequence[ChatTurn], message: str
) -> list[dict[str, str]]:
    messages = [{"role": "system", "content": system_prompt}]
    for turn in history:
        role = "user" if turn.role == "user" else "assistant"
        messages.append({"role": role, "content": turn.content})
    messages.append({"role": "user", "content": message})
    return messages


class OpenAIChatService(GenerativeTextService):
    """Chat completions against Azure AI inference or any OpenAI-compatible API."""

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        model: str = DEFAULT_MODEL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        api_version: str = DEFAULT_API_VERSION,
        temperature: float = 0.7,
        max_tokens: int = 800,
    ) -> None:
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        # SDK retries stay off; the timeout bounds each attempt.
        self.client = openai.OpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=0,
            default_query={"api-version": api_version},
            default_headers={"api-key": api_key},
        )

    @retry(
        max_attempts=2,
        base_delay=0.5,
        retryable=(openai.APIConnectionError,),
        give_up=(openai.APITimeoutError,),
    )
    def _create(self, messages: list[dict[str, str]]) -> str:
        r = self.client.chat.completions.create(
            model=self.model,
            messages=messages,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )
        return r.choices[0].message.content or ""

    def complete(self, system_prompt: str, history: Sequence[ChatTurn], message: str) -> str:
        return self._create(build_messages(system_prompt, history, message))


def get_chat_service(env_getter: Callable[..., str] = get_env) -> GenerativeTextService | None:
    """Configured backend, or None when no API key is available."""
    api_key = env_getter("AZURE_OPENAI_API_KEY") or env_getter("OPENAI_API_KEY")
    if not api_key:
        log.info("No AZURE_OPENAI_API_KEY/OPENAI_API_KEY — chat uses keyword replies")
        return None
    return OpenAIChatService(
        api_key,
        base_url=env_getter("AZURE_OPENAI_BASE_URL") or DEFAULT_BASE_URL,
        model=env_getter("AZURE_OPENAI_MODEL_NAME") or DEFAULT_MODEL,
        timeout=get_float_env("JOBGENIUS_LLM_TIMEOUT", DEFAULT_TIMEOUT_SECONDS, env_getter),
    )


def fallback_reply(message: str) -> str:
    text = (message or "").lower()
    for keywords, reply in FALLBACK_RULES:
        if any(k in text for k in keywords):
            return reply
    return DEFAULT_REPLY


def respond(
    message: str,
    history: Sequence[ChatTurn] = (),
    service: GenerativeTextService | None = None,
) -> str:
    """Exactly one assistant reply; never raises for backend failures."""
    if not message or not message.strip():
        return EMPTY_MESSAGE_REPLY

    if service is None:
        return fallback_reply(message)

    try:
        text = service.complete(SYSTEM_PROMPT, history, message)
    except Exception as exc:
        log.warning("Chat completion failed (%s), using keyword reply", exc)
        return fallback_reply(message)

    if not text:
        return EMPTY_COMPLETION_REPLY
    return text
