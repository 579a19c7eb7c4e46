"""Recover a qualification record from a provider reply envelope."""

import json
import logging
from typing import Any, Optional

logger = logging.getLogger(__name__)

UNPARSED_NOTE = "Could not parse JSON; see raw."


def _first(items: Any) -> Any:
    if isinstance(items, list) and items:
        return items[0]
    return None


def _structured_payload(envelope: dict) -> Any:
    """The pre-parsed value at output[0].content[0].json, if any."""
    item = _first(envelope.get("output"))
    if not isinstance(item, dict):
        return None
    part = _first(item.get("content"))
    if not isinstance(part, dict):
        return None
    return part.get("json")


def _reply_text(envelope: dict) -> Optional[str]:
    """The full plain-text reply, from output_text or the output message parts."""
    text = envelope.get("output_text")
    if isinstance(text, str):
        return text

    chunks = []
    output = envelope.get("output")
    for item in output if isinstance(output, list) else []:
        if not isinstance(item, dict) or not isinstance(item.get("content"), list):
            continue
        for part in item["content"]:
            if (
                isinstance(part, dict)
                and part.get("type") == "output_text"
                and isinstance(part.get("text"), str)
            ):
                chunks.append(part["text"])

    return "".join(chunks) if chunks else None


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


def _parse_json(text: str) -> Any:
    # NaN and Infinity are not JSON and cannot be sent back to the caller
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError:
        return None


def extract_qualification(envelope: Any) -> Any:
    """
    Pull the qualification record out of a provider reply.

    Tries, in order: the structured payload, the plain-text reply parsed as
    JSON, and finally the untouched envelope tagged with a note. Never raises.

    Args:
        envelope: Decoded JSON reply from the provider

    Returns:
        The extracted record, or ``{"raw": envelope, "note": ...}``
    """
    if isinstance(envelope, dict):
        structured = _structured_payload(envelope)
        if structured is not None:
            return structured

        text = _reply_text(envelope)
        if text is not None:
            parsed = _parse_json(text)
            if parsed is not None:
                return parsed

    logger.warning("Provider reply could not be parsed as JSON; returning raw envelope")
    return {"raw": envelope, "note": UNPARSED_NOTE}
