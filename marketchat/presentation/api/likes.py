"""
Likes API Router - product likes and the seller reputation they drive.

A successful like/unlike always answers 2xx even when the seller's
reputation could not be updated; that failure is logged and counted only.
"""

from fastapi import APIRouter, Path, Query, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel
from marketchat.application.commands.likes import (
    AddLikeCommand,
    AddLikeHandler,
    RemoveLikeCommand,
    RemoveLikeHandler,
)
from marketchat.application.queries.likes import (
    IsLikedHandler,
    IsLikedQuery,
    ListUserLikesHandler,
    ListUserLikesQuery,
)
from marketchat.application.dto import LikeDTO
from marketchat.domain.value_objects.product_id import ProductId
from marketchat.presentation.api.params import MAX_ROW_ID
from marketchat.presentation.errors import DOMAIN_ERRORS, to_http_exception


class UnlikeResponse(BaseModel):
    success: bool


class IsLikedResponse(BaseModel):
    liked: bool


router = APIRouter(prefix="/api/likes", tags=["likes"])


@router.post("", response_model=LikeDTO, status_code=status.HTTP_201_CREATED)
@inject
async def like_product(
    handler: FromDishka[AddLikeHandler],
    user_id: int = Query(alias="userId"),
    product_id: int = Query(alias="productId", gt=0, le=MAX_ROW_ID),
):
    try:
        like = await handler.execute(
            AddLikeCommand(user_id=user_id, product_id=ProductId(product_id))
        )
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e
    return LikeDTO.from_entity(like)


@router.delete("", response_model=UnlikeResponse)
@inject
async def unlike_product(
    handler: FromDishka[RemoveLikeHandler],
    user_id: int = Query(alias="userId"),
    product_id: int = Query(alias="productId", gt=0, le=MAX_ROW_ID),
):
    try:
        success = await handler.execute(
            RemoveLikeCommand(user_id=user_id, product_id=ProductId(product_id))
        )
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e
    return UnlikeResponse(success=success)


@router.get("/user/{user_id}", response_model=list[LikeDTO])
@inject
async def list_user_likes(
    handler: FromDishka[ListUserLikesHandler],
    user_id: int = Path(),
):
    """Likes of the user, newest first."""
    try:
        likes = await handler.execute(ListUserLikesQuery(user_id=user_id))
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e
    return [LikeDTO.from_entity(like) for like in likes]


@router.get("/check", response_model=IsLikedResponse)
@inject
async def check_liked(
    handler: FromDishka[IsLikedHandler],
    user_id: int = Query(alias="userId"),
    product_id: int = Query(alias="productId", gt=0, le=MAX_ROW_ID),
):
    liked = await handler.execute(
        IsLikedQuery(user_id=user_id, product_id=ProductId(product_id))
    )
    return IsLikedResponse(liked=liked)
