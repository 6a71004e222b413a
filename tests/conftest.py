import json
from pathlib import Path
from typing import Iterator, TypeAlias

import httpx
import pytest
from starlette.applications import Starlette
from starlette.testclient import TestClient

from app.app import create_app
from app.config import Config
from recetario.completions import CompletionClient
from recetario.session import Session


HTML_DIR = Path(__file__).parent.parent / "assets" / "html"
URL = "https://api.test/v1/chat/completions"

Reply: TypeAlias = str | httpx.Response | Exception


def completion_body(content: str) -> dict[str, object]:
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
    }


class FakeCompletions:
    """Stands in for the chat-completion api. Replies are served in order."""

    default = "Tortilla$huevos, patatas$Batir y cuajar."

    def __init__(self) -> None:
        self.replies: list[Reply] = []
        self.requests: list[httpx.Request] = []

    def queue(self, *replies: Reply) -> None:
        self.replies.extend(replies)

    @property
    def prompts(self) -> list[str]:
        return [json.loads(r.content)["messages"][0]["content"] for r in self.requests]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        reply = self.replies.pop(0) if self.replies else self.default
        if isinstance(reply, Exception):
            raise reply
        if isinstance(reply, httpx.Response):
            return reply
        return httpx.Response(200, json=completion_body(reply))


@pytest.fixture
def fake() -> FakeCompletions:
    return FakeCompletions()


@pytest.fixture
def config() -> Config:
    return Config(
        _env_file=None,  # pyright: ignore[reportCallIssue]
        html_dir=HTML_DIR,
        openai_api_key="sk-test",
        completion_url=URL,
        completion_model="gpt-test",
    )


@pytest.fixture
def client(fake: FakeCompletions) -> CompletionClient:
    return CompletionClient(
        url=URL,
        token="sk-test",
        model="gpt-test",
        client=httpx.AsyncClient(
            transport=httpx.MockTransport(fake),
            headers={"Authorization": "Bearer sk-test"},
        ),
    )


@pytest.fixture
def session() -> Session:
    return Session()


@pytest.fixture
def app(config: Config, client: CompletionClient, session: Session) -> Starlette:
    return create_app(config, client=client, session=session)


@pytest.fixture
def http(app: Starlette) -> Iterator[TestClient]:
    with TestClient(app) as c:
        yield c
