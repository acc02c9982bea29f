"""
FastAPI app entry point aggregating per-domain routers under blog_backend/routes.
Keep as `uvicorn blog_backend.api:app`.
"""
from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .db import close_store, get_store


@asynccontextmanager
async def lifespan(_: FastAPI):
    # open, create schema and seed before the first request
    get_store()
    yield
    close_store()


app = FastAPI(title="blog-api", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Include routers (split by domain)
from .routes import base as base_routes
from .routes import posts as posts_routes
from .routes import comments as comments_routes

app.include_router(base_routes.router)
app.include_router(posts_routes.router)
app.include_router(comments_routes.router)
