"""Decoder for text-generation payloads.

The Inference API answers in several shapes depending on the model:
``[{"generated_text": ...}]``, ``{"generated_text": ...}``, a bare string,
or something else entirely. Each shape is an explicit variant, checked in
priority order; the first match wins.
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any

GENERATED_TEXT_FIELD = "generated_text"
RAW_PAYLOAD_LIMIT = 2000


class GenerationKind(Enum):
    LIST_ITEM = "list_item"
    OBJECT = "object"
    TEXT = "text"
    RAW = "raw"


@dataclass(frozen=True)
class Generation:
    kind: GenerationKind
    text: str


def _generated_text(obj: Any) -> str:
    """Return the non-empty generated_text of a dict, or ''."""
    if not isinstance(obj, dict):
        return ""
    value = obj.get(GENERATED_TEXT_FIELD)
    if not value:
        return ""
    return value if isinstance(value, str) else str(value)


def decode_generation(payload: Any) -> Generation:
    """Pick the first matching variant.

    Raises:
        ValueError: the payload is null or an empty body.
    """
    if payload is None:
        raise ValueError("empty inference payload")

    if isinstance(payload, list) and payload:
        text = _generated_text(payload[0])
        if text:
            return Generation(GenerationKind.LIST_ITEM, text)

    text = _generated_text(payload)
    if text:
        return Generation(GenerationKind.OBJECT, text)

    if isinstance(payload, str):
        return Generation(GenerationKind.TEXT, payload)

    raw = json.dumps(payload, ensure_ascii=False)
    return Generation(GenerationKind.RAW, raw[:RAW_PAYLOAD_LIMIT])
