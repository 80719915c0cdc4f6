"""Decode raw item payloads into typed models.

``resolve`` validates a payload against the tagged union of item variants
in one pass: pydantic reads the ``type`` discriminator and validates the
rest of the record against the matching model only. An unrecognized
discriminator is a hard failure, never a best-effort guess.
"""

import logging
from typing import List, Optional, Union

from pydantic import TypeAdapter, ValidationError

from ..errors import MalformedPayload, NotFound, UnknownItemType
from ..models import Item, Variant

logger = logging.getLogger(__name__)

RawPayload = Union[bytes, str]

_variant_adapter: TypeAdapter = TypeAdapter(Variant)


def is_null(raw: RawPayload) -> bool:
    """Whether the API answered a literal JSON null (unknown id)."""
    if isinstance(raw, bytes):
        return raw.strip() == b"null"
    return raw.strip() == "null"


def describe_validation_error(exc: ValidationError) -> str:
    """Flatten a pydantic error into one line for MalformedPayload."""
    parts: List[str] = []
    for error in exc.errors():
        loc = ".".join(str(p) for p in error["loc"])
        parts.append(f"{loc}: {error['msg']}" if loc else error["msg"])
    return "; ".join(parts)


def _unknown_type_from(exc: ValidationError) -> Optional[str]:
    """Return the offending discriminator if dispatch itself failed."""
    for error in exc.errors():
        if error["type"] == "union_tag_invalid":
            record = error.get("input")
            if isinstance(record, dict):
                tag = record.get("type")
            else:
                tag = error.get("ctx", {}).get("tag")
            # a null discriminator counts as missing
            return "" if tag is None else str(tag)
        if error["type"] == "union_tag_not_found":
            return ""
    return None


def resolve(raw: RawPayload) -> Variant:
    """Decode an item payload into Story, Comment, Poll or PollOpt.

    Args:
        raw: Response body of ``/item/<id>.json``

    Returns:
        The variant selected by the payload's ``type``

    Raises:
        NotFound: The body is ``null``
        UnknownItemType: ``type`` is missing or not a known discriminator
        MalformedPayload: The body is not JSON or does not fit the variant
    """
    if is_null(raw):
        raise NotFound("item")
    try:
        variant = _variant_adapter.validate_json(raw)
    except ValidationError as exc:
        item_type = _unknown_type_from(exc)
        if item_type is not None:
            logger.debug("Refusing item with unknown type %r", item_type)
            raise UnknownItemType(item_type) from exc
        raise MalformedPayload(describe_validation_error(exc)) from exc

    logger.debug("Resolved item %s as %s", variant.id, type(variant).__name__)
    return variant


def decode_generic(raw: RawPayload) -> Item:
    """Decode an item payload into the generic superset model.

    The discriminator is not checked; use the ``to_*`` conversions to narrow
    the result.
    """
    if is_null(raw):
        raise NotFound("item")
    try:
        return Item.model_validate_json(raw)
    except ValidationError as exc:
        raise MalformedPayload(describe_validation_error(exc)) from exc
