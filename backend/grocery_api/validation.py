"""
Boundary checks for the item routes.

The ``validate_*`` helpers return either the checked request model or an
``ItemError``; routes decide when to raise it. Nothing here touches the
store.
"""

from __future__ import annotations

import json
import math
import re
from typing import Any, Optional, Union

from grocery_api.errors import (
    BODY_NOT_OBJECT,
    INVALID_DESCRIPTION,
    INVALID_JSON,
    INVALID_NAME,
    INVALID_PRICE,
    MISSING_FIELDS,
    ItemError,
)
from grocery_api.schemas import ItemChanges, ItemPayload, NewItem

_ID_RE = re.compile(r"^\s*([+-]?[0-9]+)")


def parse_item_id(raw: str) -> Optional[int]:
    """
    Parse the leading integer of a path segment.

    ``"12"`` and ``"12abc"`` both give 12; ``"abc"`` gives ``None``.
    """

    match = _ID_RE.match(raw)
    if not match:
        return None
    return int(match.group(1))


def parse_payload(raw_body: bytes) -> ItemPayload:
    if not raw_body.strip():
        return ItemPayload()
    try:
        data = json.loads(raw_body)
    except (ValueError, RecursionError) as err:
        raise ItemError.bad_request(INVALID_JSON) from err
    if not isinstance(data, dict):
        raise ItemError.bad_request(BODY_NOT_OBJECT)
    return ItemPayload.model_validate(data)


def is_valid_price(value: Any) -> bool:
    # bool is an int subclass but not a price
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    if isinstance(value, float) and not math.isfinite(value):
        return False
    return value >= 0


def validate_new_item(payload: ItemPayload) -> Union[NewItem, ItemError]:
    name = payload.name
    if not isinstance(name, str) or not name.strip() or not payload.has("price"):
        return ItemError.bad_request(MISSING_FIELDS)
    if not is_valid_price(payload.price):
        return ItemError.bad_request(INVALID_PRICE)

    description = payload.description
    if description is None:
        description = ""
    elif not isinstance(description, str):
        return ItemError.bad_request(INVALID_DESCRIPTION)

    return NewItem(name=name, price=payload.price, description=description)


def validate_changes(payload: ItemPayload) -> Union[ItemChanges, ItemError]:
    changes: dict[str, Any] = {}

    if payload.has("price"):
        if not is_valid_price(payload.price):
            return ItemError.bad_request(INVALID_PRICE)
        changes["price"] = payload.price
    if payload.has("name"):
        # Blank names are allowed here, unlike on create.
        if not isinstance(payload.name, str):
            return ItemError.bad_request(INVALID_NAME)
        changes["name"] = payload.name
    if payload.has("description"):
        if not isinstance(payload.description, str):
            return ItemError.bad_request(INVALID_DESCRIPTION)
        changes["description"] = payload.description

    return ItemChanges(**changes)
