import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request

from grocery_api.dependencies import get_store
from grocery_api.errors import INVALID_ID, ItemError
from grocery_api.schemas import (
    ErrorResponse,
    ItemListResponse,
    ItemResponse,
    MessageResponse,
)
from grocery_api.storage import ItemStore
from grocery_api.validation import (
    parse_item_id,
    parse_payload,
    validate_changes,
    validate_new_item,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/items",
    tags=["items"],
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)


def _require_id(raw_id: str) -> int:
    item_id = parse_item_id(raw_id)
    if item_id is None:
        logger.debug("Rejected item id %r", raw_id)
        raise ItemError.bad_request(INVALID_ID)
    return item_id


@router.get("", response_model=ItemListResponse)
@router.get("/", response_model=ItemListResponse, include_in_schema=False)
async def list_items(search: Optional[str] = None, store: ItemStore = Depends(get_store)):
    if search:
        return ItemListResponse(items=store.search(search))
    return ItemListResponse(items=store.list())


@router.post("", response_model=ItemResponse, status_code=201)
@router.post("/", response_model=ItemResponse, status_code=201, include_in_schema=False)
async def create_item(request: Request, store: ItemStore = Depends(get_store)):
    payload = parse_payload(await request.body())
    result = validate_new_item(payload)
    if isinstance(result, ItemError):
        logger.debug("Rejected new item: %s", result.message)
        raise result

    item = store.create(result.name, result.price, result.description)
    logger.info("Created item %s (%s)", item.id, item.name)
    return ItemResponse(item=item)


@router.get("/{item_id}", response_model=ItemResponse)
async def get_item(item_id: str, store: ItemStore = Depends(get_store)):
    item = store.get(_require_id(item_id))
    if item is None:
        raise ItemError.not_found()
    return ItemResponse(item=item)


@router.put("/{item_id}", response_model=ItemResponse)
async def update_item(item_id: str, request: Request, store: ItemStore = Depends(get_store)):
    parsed_id = _require_id(item_id)
    payload = parse_payload(await request.body())
    result = validate_changes(payload)
    if isinstance(result, ItemError):
        logger.debug("Rejected update of item %s: %s", parsed_id, result.message)
        raise result

    item = store.update(parsed_id, result.model_dump(exclude_unset=True))
    if item is None:
        raise ItemError.not_found()
    logger.info("Updated item %s", item.id)
    return ItemResponse(item=item)


@router.delete("/{item_id}", response_model=MessageResponse)
async def delete_item(item_id: str, store: ItemStore = Depends(get_store)):
    parsed_id = _require_id(item_id)
    if not store.delete(parsed_id):
        raise ItemError.not_found()
    logger.info("Deleted item %s", parsed_id)
    return MessageResponse(message="Item deleted successfully")
