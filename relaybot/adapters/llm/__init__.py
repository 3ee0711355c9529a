"""LLM adapters: Hugging Face Inference API."""

from relaybot.adapters.llm.huggingface import AI_ERROR_REPLY, HuggingFaceClient

__all__ = [
    "AI_ERROR_REPLY",
    "HuggingFaceClient",
]
