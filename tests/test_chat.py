from types import SimpleNamespace

import openai
import pytest

from jobgenius import chat
from jobgenius.chat import (
    DEFAULT_REPLY,
    EMPTY_COMPLETION_REPLY,
    EMPTY_MESSAGE_REPLY,
    HELP_REPLY,
    INTERVIEW_REPLY,
    JOB_SEARCH_REPLY,
    RESUME_REPLY,
    SYSTEM_PROMPT,
    GenerativeTextService,
    OpenAIChatService,
    build_messages,
    fallback_reply,
    get_chat_service,
    respond,
)
from jobgenius.models import ChatTurn


class StubService(GenerativeTextService):
    def __init__(self, reply="", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def complete(self, system_prompt, history, message):
        self.calls.append((system_prompt, list(history), message))
        if self.error:
            raise self.error
        return self.reply


@pytest.mark.parametrize("message", ["", "   ", "\n\t"])
def test_blank_message_short_circuits(message):
    service = StubService(reply="should not be used")
    assert respond(message, [], service) == EMPTY_MESSAGE_REPLY
    assert service.calls == []


def test_resume_question_with_backend_down_gets_help_reply():
    reply = respond("Can you help me with my resume?", [], StubService(error=RuntimeError("503")))
    assert reply == HELP_REPLY
    assert "resume" in reply


def test_unknown_topic_with_backend_down_gets_default():
    assert respond("asdf", [], StubService(error=ConnectionError("down"))) == DEFAULT_REPLY


def test_timeout_is_treated_like_any_failure():
    assert respond("interview tips", [], StubService(error=TimeoutError())) == INTERVIEW_REPLY


def test_no_service_uses_fallback():
    assert respond("Update my CV please") == RESUME_REPLY


@pytest.mark.parametrize("message,expected", [
    ("How do I start?", HELP_REPLY),
    ("please HELP", HELP_REPLY),
    ("review my resume", RESUME_REPLY),
    ("mock interview", INTERVIEW_REPLY),
    ("find a job", JOB_SEARCH_REPLY),
    ("search listings", JOB_SEARCH_REPLY),
    ("hello there", DEFAULT_REPLY),
])
def test_fallback_rules_in_priority_order(message, expected):
    assert fallback_reply(message) == expected


def test_backend_reply_returned_verbatim_with_context():
    history = [ChatTurn("user", "hi"), ChatTurn("assistant", "hello!")]
    service = StubService(reply="  Tailor your summary.  ")
    assert respond("Any tips?", history, service) == "  Tailor your summary.  "
    system_prompt, sent_history, message = service.calls[0]
    assert system_prompt == SYSTEM_PROMPT
    assert sent_history == history
    assert message == "Any tips?"


def test_empty_completion_gets_retry_prompt():
    assert respond("Any tips?", [], StubService(reply="")) == EMPTY_COMPLETION_REPLY


def test_build_messages_order():
    msgs = build_messages("sys", [ChatTurn("user", "a"), ChatTurn("assistant", "b")], "c")
    assert msgs == [
        {"role": "system", "content": "sys"},
        {"role": "user", "content": "a"},
        {"role": "assistant", "content": "b"},
        {"role": "user", "content": "c"},
    ]


def test_get_chat_service_without_key():
    assert get_chat_service(lambda key, default="": "") is None


def test_get_chat_service_reads_env():
    env = {"AZURE_OPENAI_API_KEY": "k", "AZURE_OPENAI_MODEL_NAME": "gpt-4o-mini", "JOBGENIUS_LLM_TIMEOUT": "2.5"}
    service = get_chat_service(lambda key, default="": env.get(key, default))
    assert isinstance(service, OpenAIChatService)
    assert service.model == "gpt-4o-mini"


def _fake_client(create):
    return SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))


def _completion(text):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=text))])


def _api_error(cls):
    # SDK errors normally wrap a transport request; only the type matters here
    err = cls.__new__(cls)
    Exception.__init__(err, f"{cls.__name__} raised")
    return err


def test_openai_service_sends_messages():
    seen = {}

    def create(**kwargs):
        seen.update(kwargs)
        return _completion("Try the STAR method.")

    service = OpenAIChatService("k")
    service.client = _fake_client(create)
    assert respond("interview?", [], service) == "Try the STAR method."
    assert seen["model"] == "gpt-4o"
    assert seen["max_tokens"] == 800
    assert seen["messages"][0] == {"role": "system", "content": SYSTEM_PROMPT}
    assert seen["messages"][-1] == {"role": "user", "content": "interview?"}


def test_openai_service_retries_connection_error_once(no_sleep):
    attempts = []

    def create(**kwargs):
        attempts.append(1)
        if len(attempts) == 1:
            raise _api_error(openai.APIConnectionError)
        return _completion("ok")

    service = OpenAIChatService("k")
    service.client = _fake_client(create)
    assert respond("hi", [], service) == "ok"
    assert len(attempts) == 2


def test_openai_service_falls_back_when_connection_keeps_failing(no_sleep):
    def create(**kwargs):
        raise _api_error(openai.APIConnectionError)

    service = OpenAIChatService("k")
    service.client = _fake_client(create)
    assert respond("job search", [], service) == JOB_SEARCH_REPLY


def test_openai_service_timeout_falls_back_without_retry(no_sleep):
    calls = []

    def create(**kwargs):
        calls.append(1)
        raise _api_error(openai.APITimeoutError)

    service = OpenAIChatService("k")
    service.client = _fake_client(create)
    assert respond("interview", [], service) == INTERVIEW_REPLY
    assert len(calls) == 1


def test_module_exposes_fallback_table():
    keywords = [k for rule, _ in chat.FALLBACK_RULES for k in rule]
    assert keywords == ["help", "how", "resume", "cv", "interview", "job", "search"]
