import logging
from typing import Any

import httpx

from recetario.errors import CompletionError
from recetario.models import Recipe
from recetario.parser import parse_recipe


logger = logging.getLogger(__name__)


MAX_TOKENS = 500
TIMEOUT = 60 * 2


def completion_http_client(token: str, *, timeout: float = TIMEOUT) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        headers={
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        },
        timeout=timeout,
    )


class CompletionClient:
    """One prompt in, one chunk of content out. No retries, no streaming."""

    def __init__(
        self,
        *,
        url: str,
        token: str,
        model: str,
        max_tokens: int = MAX_TOKENS,
        timeout: float = TIMEOUT,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.url = url
        self.model = model
        self.max_tokens = max_tokens
        self._client = (
            completion_http_client(token, timeout=timeout) if client is None else client
        )

    def payload(self, prompt: str) -> dict[str, Any]:
        return {
            "model": self.model,
            "messages": [{"role": "system", "content": prompt}],
            "max_tokens": self.max_tokens,
        }

    async def complete(self, prompt: str) -> str:
        logger.debug("Sending prompt to %s: %s", self.url, prompt)
        try:
            resp = await self._client.post(self.url, json=self.payload(prompt))
        except httpx.HTTPError as e:
            raise CompletionError(f"Error while sending the request: {e!r}") from e

        try:
            data = resp.json()
        except ValueError as e:
            raise CompletionError(f"Error while decoding JSON response: {e}") from e

        if isinstance(data, dict) and "error" in data:
            raise CompletionError(f"Problem creating completion. {data['error']}")

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise CompletionError(f"Unexpected completion shape. {data}") from e

        if not isinstance(content, str):
            raise CompletionError(f"Non-string completion content. {content!r}")
        return content

    async def recipe(self, prompt: str) -> Recipe:
        return parse_recipe(await self.complete(prompt))

    async def aclose(self) -> None:
        await self._client.aclose()
