from __future__ import annotations

import sqlite3

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from ..services.comment_svc import create_comment, delete_comment, get_comments_by_post_id

router = APIRouter()


class CommentCreate(BaseModel):
    author: str
    content: str


@router.get("/api/posts/{post_id}/comments")
def api_comments_list(post_id: str):
    return {"items": get_comments_by_post_id(post_id)}


@router.post("/api/posts/{post_id}/comments", status_code=201)
def api_comment_create(post_id: str, body: CommentCreate):
    try:
        return create_comment({"post_id": post_id, **body.model_dump()})
    except sqlite3.IntegrityError:
        raise HTTPException(status_code=404, detail="post_not_found")
    except ValueError as ve:
        raise HTTPException(status_code=400, detail=str(ve))


@router.delete("/api/comments/{comment_id}")
def api_comment_delete(comment_id: str):
    if not delete_comment(comment_id):
        raise HTTPException(status_code=404, detail="comment_not_found")
    return {"message": "ok"}
