"""Hugging Face Inference API client using aiohttp. Implements InferencePort."""

import json
import sys
from typing import Any

import aiohttp

from relaybot.config import AppConfig
from relaybot.domain.generation import decode_generation

AI_ERROR_REPLY = "⚠️ Error getting AI reply."
INFERENCE_TIMEOUT_SECONDS = 60


def _log(msg: str):
    print(msg, file=sys.stderr)


def _parse_body(body: str) -> Any:
    """JSON when the body parses, the raw text otherwise; None when empty."""
    if not body.strip():
        return None
    try:
        return json.loads(body)
    except ValueError:
        return body


class HuggingFaceClient:
    """One POST per prompt; every failure degrades to AI_ERROR_REPLY."""

    def __init__(self, config: AppConfig):
        self._token = config.hf_token
        self.model = config.hf_model
        self.url = f"{config.hf_api_base}/{config.hf_model}"

    async def generate(self, prompt: str) -> str:
        headers = {"Authorization": f"Bearer {self._token}"}
        timeout = aiohttp.ClientTimeout(total=INFERENCE_TIMEOUT_SECONDS)

        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.post(self.url, json={"inputs": prompt}, headers=headers) as resp:
                    resp.raise_for_status()
                    body = await resp.text()
            generation = decode_generation(_parse_body(body))
        except Exception as e:
            _log(f"[huggingface] generate failed ({self.model}): {e!r}")
            return AI_ERROR_REPLY

        return generation.text
