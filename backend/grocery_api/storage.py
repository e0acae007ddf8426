from __future__ import annotations

import logging
import re
from typing import Any, Iterable, Optional

from grocery_api.schemas import Item, Price
from grocery_api.seed import FIRST_NEW_ID, SEED_ITEMS

logger = logging.getLogger(__name__)


class ItemStore:
    """
    In-memory grocery catalog.

    Items are kept in insertion order. Lookups return ``None``/``False``/``[]``
    instead of raising; callers validate input before mutating.
    """

    def __init__(self, items: Iterable[dict] = (), next_id: int = 1):
        self._items: list[Item] = [Item(**data) for data in items]
        self._next_id = max([next_id] + [item.id + 1 for item in self._items])

    @classmethod
    def seeded(cls) -> ItemStore:
        return cls(SEED_ITEMS, next_id=FIRST_NEW_ID)

    def list(self) -> list[Item]:
        return list(self._items)

    def get(self, item_id: int) -> Optional[Item]:
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def create(self, name: str, price: Price, description: str = "") -> Item:
        item = Item(
            id=self._next_id,
            name=name.strip(),
            price=price,
            description=description.strip() if description else "",
        )
        self._next_id += 1
        self._items.append(item)
        return item

    def update(self, item_id: int, fields: dict[str, Any]) -> Optional[Item]:
        item = self.get(item_id)
        if item is None:
            return None
        if "name" in fields:
            item.name = fields["name"].strip()
        if "price" in fields:
            item.price = fields["price"]
        if "description" in fields:
            item.description = fields["description"].strip()
        return item

    def delete(self, item_id: int) -> bool:
        for index, item in enumerate(self._items):
            if item.id == item_id:
                del self._items[index]
                return True
        return False

    def search(self, pattern: str) -> list[Item]:
        """Case-insensitive regex match on item names; bad patterns match nothing."""

        if not pattern:
            return []
        try:
            regex = re.compile(pattern, re.IGNORECASE)
            return [item for item in self._items if regex.search(item.name)]
        except (re.error, OverflowError, RecursionError) as err:
            logger.debug("Ignoring malformed search pattern %r: %s", pattern[:100], err)
            return []
