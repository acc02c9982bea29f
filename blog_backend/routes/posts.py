from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from ..services.post_svc import create_post, delete_post, get_all_posts, get_post_by_id, update_post

router = APIRouter()


class PostCreate(BaseModel):
    title: str
    content: str
    excerpt: str
    tags: Optional[str] = None  # comma separated
    publish_date: str  # ISO-8601


class PostUpdate(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None
    excerpt: Optional[str] = None
    tags: Optional[str] = None
    publish_date: Optional[str] = None


@router.get("/api/posts")
def api_posts_list():
    return {"items": get_all_posts()}


@router.get("/api/posts/{post_id}")
def api_post_get(post_id: str):
    post = get_post_by_id(post_id)
    if post is None:
        raise HTTPException(status_code=404, detail="post_not_found")
    return post


@router.post("/api/posts", status_code=201)
def api_post_create(body: PostCreate):
    try:
        return create_post(body.model_dump())
    except ValueError as ve:
        raise HTTPException(status_code=400, detail=str(ve))


@router.patch("/api/posts/{post_id}")
def api_post_update(post_id: str, body: PostUpdate):
    # only fields the client actually sent; an explicit null clears tags
    changes = body.model_dump(exclude_unset=True)
    for k in ("title", "content", "excerpt", "publish_date"):
        if k in changes and changes[k] is None:
            raise HTTPException(status_code=400, detail=f"{k} cannot be null")
    if not update_post(post_id, changes):
        raise HTTPException(status_code=404, detail="post_not_found")
    post = get_post_by_id(post_id)
    if post is None:
        raise HTTPException(status_code=404, detail="post_not_found")
    return post


@router.delete("/api/posts/{post_id}")
def api_post_delete(post_id: str):
    if not delete_post(post_id):
        raise HTTPException(status_code=404, detail="post_not_found")
    return {"message": "ok"}
