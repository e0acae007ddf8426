from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict

Price = Union[int, float]


class Item(BaseModel):
    id: int
    name: str
    price: Price
    description: str = ""


class ItemPayload(BaseModel):
    """Raw create/update body. Values are checked in ``validation``."""

    model_config = ConfigDict(extra="ignore")

    name: Any = None
    price: Any = None
    description: Any = None

    def has(self, field: str) -> bool:
        return field in self.model_fields_set


class NewItem(BaseModel):
    name: str
    price: Price
    description: str = ""


class ItemChanges(BaseModel):
    name: Optional[str] = None
    price: Optional[Price] = None
    description: Optional[str] = None


class ItemResponse(BaseModel):
    item: Item


class ItemListResponse(BaseModel):
    items: list[Item]


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
