"""
Blog Posts API application.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from . import config
from .database import connect_to_mongo, close_mongo_connection
from .errors import setup_error_handlers
from .routers import blog_posts

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the MongoDB connection for the lifetime of the application."""
    await connect_to_mongo(config.MONGO_URL, config.DB_NAME)
    yield
    await close_mongo_connection()


app = FastAPI(
    title="Blog Posts API",
    description="CRUD API for blog posts stored in MongoDB",
    version="1.0.0",
    lifespan=lifespan
)

setup_error_handlers(app)

app.include_router(blog_posts.router, tags=["Blog Posts"])
