# careerbridge/services/hf_client.py
import logging
from typing import Any, Optional

import httpx

from careerbridge import config
from careerbridge.errors import ExplanationError
from careerbridge.services.explain import TextGenerator
from careerbridge.services.prompts import SYSTEM_PROMPT

log = logging.getLogger("matching.hf")


def wrap_instruction(prompt: str) -> str:
    """Mistral-instruct framing: system line + task inside one [INST] block."""
    return f"<s>[INST] {SYSTEM_PROMPT}\n\n{prompt} [/INST]"


def extract_generated_text(data: Any) -> str:
    """
    Accepts ``[{"generated_text": ...}]`` or ``{"generated_text": ...}``.
    Anything else, or an ``error`` field, is a failure.
    """
    if isinstance(data, dict):
        if "error" in data:
            raise ExplanationError(f"Hugging Face API error: {data['error']}")
        text = data.get("generated_text")
        if text is None:
            raise ExplanationError("Invalid response format: no generated_text found")
    elif isinstance(data, list):
        first = data[0] if data else None
        text = first.get("generated_text") if isinstance(first, dict) else None
        if text is None:
            raise ExplanationError("Invalid response format: missing generated_text in array")
    else:
        raise ExplanationError("Invalid response format: unexpected payload type")

    if not isinstance(text, str):
        raise ExplanationError("Invalid response format: generated_text is not a string")
    return text.strip()


class HuggingFaceClient(TextGenerator):
    name = "Hugging Face"

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        *,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.api_key = api_key if api_key is not None else config.HUGGINGFACE_API_KEY
        self.model = model or config.HF_MODEL
        self.base_url = (base_url or config.HF_BASE_URL).rstrip("/")
        self.timeout = config.EXPLAIN_TIMEOUT_SECS if timeout is None else timeout
        self._client = client

    @property
    def url(self) -> str:
        return f"{self.base_url}/{self.model}"

    def _payload(self, prompt: str) -> dict:
        return {
            "inputs": wrap_instruction(prompt),
            "parameters": {
                "max_new_tokens": config.HF_MAX_NEW_TOKENS,
                "temperature": config.HF_TEMPERATURE,
                "return_full_text": False,
            },
        }

    async def generate(self, prompt: str) -> str:
        if not self.api_key:
            raise ExplanationError("HUGGINGFACE_API_KEY not set")

        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

        if self._client is not None:
            return await self._post(self._client, prompt, headers)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await self._post(client, prompt, headers)

    async def _post(self, client: httpx.AsyncClient, prompt: str, headers: dict) -> str:
        log.debug("HF POST %s", self.url)
        try:
            r = await client.post(self.url, json=self._payload(prompt), headers=headers, timeout=self.timeout)
        except httpx.HTTPError as e:
            raise ExplanationError(f"Failed to call Hugging Face API: {e}") from e

        if not r.is_success:
            raise ExplanationError(f"Hugging Face API error ({r.status_code}): {r.text[:400]}")

        try:
            data = r.json()
        except ValueError as e:
            raise ExplanationError(f"Failed to parse Hugging Face response: {e}") from e

        return extract_generated_text(data)
