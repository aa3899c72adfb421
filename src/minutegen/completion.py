"""Language-model completion clients."""

from __future__ import annotations

import logging
from typing import Protocol

import openai

from .errors import CompletionServiceError, MissingCredentialError
from .prompt_builder import SYSTEM_PROMPT

log = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-3.5-turbo"
DEFAULT_MAX_TOKENS = 1500
DEFAULT_TEMPERATURE = 0.7


class CompletionClient(Protocol):
    def complete(self, prompt: str) -> str: ...


class OpenAICompletionClient:
    """Single-shot chat completion against the OpenAI API."""

    def __init__(
        self,
        api_key: str | None,
        *,
        model: str = DEFAULT_MODEL,
        system_prompt: str = SYSTEM_PROMPT,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        temperature: float = DEFAULT_TEMPERATURE,
        client: openai.OpenAI | None = None,
    ):
        if not api_key:
            raise MissingCredentialError(
                "OPENAI_API_KEY environment variable is required\n"
                "Add it to your .env file or set it in your environment"
            )
        self.model = model
        self.system_prompt = system_prompt
        self.max_tokens = max_tokens
        self.temperature = temperature
        self._client = client or openai.OpenAI(api_key=api_key)

    def complete(self, prompt: str) -> str:
        log.debug("Requesting completion from %s (%d prompt chars)", self.model, len(prompt))
        try:
            resp = self._client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": self.system_prompt},
                    {"role": "user", "content": prompt},
                ],
                max_tokens=self.max_tokens,
                temperature=self.temperature,
            )
        except openai.OpenAIError as e:
            raise CompletionServiceError(f"Error calling OpenAI API: {e}") from e

        if not resp.choices:
            raise CompletionServiceError("OpenAI API returned no choices")
        content = resp.choices[0].message.content
        if content is None:
            raise CompletionServiceError("OpenAI API returned no message content")
        return content.strip()


class StaticCompletionClient:
    """Returns a fixed response. Used for offline runs with --response-file."""

    def __init__(self, text: str):
        self.text = text
        self.prompts: list[str] = []

    def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.text.strip()
