"""FastAPI application entry - Markdown to Slack blocks."""

from contextlib import asynccontextmanager

from . import config
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routes import router
from .logging_config import setup_logging


@asynccontextmanager
async def lifespan(_app: FastAPI):
    setup_logging(config.LOG_LEVEL, force=False)
    yield


app = FastAPI(
    title="Markdown to Slack Blocks",
    description="Convert Markdown (titles, subtitles, links, paragraphs) to Slack Block Kit blocks",
    version="0.1.0",
    lifespan=lifespan,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(router)


@app.get("/")
async def root():
    return {"service": "md-to-slack", "docs": "/docs"}
