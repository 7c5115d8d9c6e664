import asyncio
import logging
from typing import Optional

from openai import OpenAI

from careerbridge import config
from careerbridge.errors import ExplanationError
from careerbridge.services.explain import TextGenerator
from careerbridge.services.prompts import SYSTEM_PROMPT


class ChatCompletionClient(TextGenerator):
    """OpenAI-compatible chat completions (Groq's endpoint by default)."""

    name = "chat completion"

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = None,
        max_tokens: int = None,
        *,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[OpenAI] = None,
    ):
        self.api_key = api_key if api_key is not None else config.OPENAI_API_KEY
        self.model = model or config.CHAT_MODEL
        self.max_tokens = max_tokens or config.MAX_TOKENS
        self.base_url = base_url or config.OPENAI_BASE_URL
        self.timeout = config.EXPLAIN_TIMEOUT_SECS if timeout is None else timeout
        self._client = client

    @property
    def client(self) -> OpenAI:
        if self._client is None:
            if not self.api_key:
                raise ExplanationError("OPENAI_API_KEY / GROQ_API_KEY not set")
            # single attempt; the caller falls back instead of retrying
            self._client = OpenAI(
                api_key=self.api_key,
                base_url=self.base_url,
                timeout=self.timeout,
                max_retries=0,
            )
        return self._client

    def get_completion(self, prompt: str, system_prompt: str = None, temperature: float = 0.7) -> str:
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})

        logging.debug(f"Prompt preview: {prompt[:300]}")

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                max_tokens=self.max_tokens,
                temperature=temperature,
            )
            response_text = response.choices[0].message.content
        except ExplanationError:
            raise
        except Exception as e:
            raise ExplanationError(f"Chat completion failed: {e}") from e

        if not isinstance(response_text, str) or not response_text.strip():
            raise ExplanationError("Chat completion returned no content")

        logging.debug(f"Response preview: {response_text[:300]}")
        return response_text.strip()

    async def generate(self, prompt: str) -> str:
        # the SDK client is blocking; keep it off the event loop
        return await asyncio.to_thread(self.get_completion, prompt, SYSTEM_PROMPT)
