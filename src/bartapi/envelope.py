"""Response envelope decoding.

Decoding is done in two passes. The first pass looks only for an error
envelope and tolerates any other shape variation. The second pass validates
the body against the record type the caller asked for.
"""

import json
import logging
import xml.etree.ElementTree as ET
from typing import Any, Type, TypeVar

from pydantic import BaseModel, ValidationError

from .errors import BartAPIError, BartDecodeError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def check_api_error(raw: bytes) -> Any:
    """
    Raise if the body is an error envelope.

    Args:
        raw: Full response body.

    Returns:
        The parsed JSON payload when the body is a successful response.

    Raises:
        BartAPIError: The body is a JSON or XML error envelope.
        BartDecodeError: The body is neither valid JSON of the expected outer
            shape nor parseable XML.
    """
    try:
        payload = json.loads(raw)
    except ValueError:
        # Errors on some endpoints are still XML even with json=y.
        logger.debug("Response body is not JSON, probing for an XML error")
        _raise_xml_error(raw)

    error = _find_error(payload)
    if error is None:
        return payload

    if isinstance(error, str):
        message = error
    elif isinstance(error, dict):
        # Usually "text" and "details", but the key set has changed without
        # notice before.
        message = ", ".join(f"{key}: {value}" for key, value in error.items())
    else:
        message = str(error)

    logger.warning(f"BART API returned an error: {message}")
    raise BartAPIError(message, payload=error)


def _find_error(payload: Any) -> Any:
    """Return ``root.message.error`` or None, checking the outer shape."""
    if not isinstance(payload, dict):
        raise BartDecodeError(
            f"expected JSON object at top level, got {type(payload).__name__}"
        )

    root = _get_folded(payload, "root")
    if root is None:
        return None
    if not isinstance(root, dict):
        raise BartDecodeError(f"expected object at root, got {type(root).__name__}")

    message = _get_folded(root, "message")
    if message is None or isinstance(message, str):
        # Most successful responses carry an empty string here.
        return None
    if not isinstance(message, dict):
        raise BartDecodeError(
            f"expected object or string at root.message, got {type(message).__name__}"
        )
    return _get_folded(message, "error")


def _get_folded(obj: dict, name: str) -> Any:
    # Same case-insensitive matching as the record decoder; exact keys win.
    if name in obj:
        return obj[name]
    for key, value in obj.items():
        if isinstance(key, str) and key.lower() == name:
            return value
    return None


def _raise_xml_error(raw: bytes) -> None:
    try:
        root = ET.fromstring(raw)
    except ET.ParseError as exc:
        raise BartDecodeError(f"response body is neither JSON nor XML: {exc}") from exc

    text = root.findtext("message/error/text", default="")
    details = root.findtext("message/error/details", default="")
    message = f"error: {text}. {details}"
    logger.warning(f"BART API returned an XML error: {message}")
    raise BartAPIError(message)


def decode_response(raw: bytes, model: Type[M]) -> M:
    """
    Decode a response body into a record, rejecting error envelopes.

    Args:
        raw: Full response body.
        model: Record type describing the expected response.

    Returns:
        An instance of ``model``.
    """
    payload = check_api_error(raw)
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise BartDecodeError(
            f"unexpected {model.__name__} shape: {exc}"
        ) from exc


__all__ = ["check_api_error", "decode_response"]
