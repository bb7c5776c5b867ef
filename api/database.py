"""
MongoDB connection management.

The client is opened when the application starts and closed when it stops.
Routers and services reach the database through get_database().
"""
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from . import config

logger = logging.getLogger(__name__)

client: Optional[AsyncIOMotorClient] = None
db: Optional[AsyncIOMotorDatabase] = None


async def connect_to_mongo(mongo_url: Optional[str] = None, db_name: Optional[str] = None) -> AsyncIOMotorDatabase:
    """Open the MongoDB client and select the database."""
    global client, db

    if client is not None:
        logger.warning("MongoDB client already open, closing it first")
        await close_mongo_connection()

    mongo_url = mongo_url or config.MONGO_URL
    db_name = db_name or config.DB_NAME

    client = AsyncIOMotorClient(mongo_url)
    db = client[db_name]
    logger.info(f"Connected to MongoDB database '{db_name}'")
    return db


async def close_mongo_connection():
    """Close the MongoDB client if one is open."""
    global client, db

    if client is not None:
        client.close()
        logger.info("MongoDB connection closed")
    client = None
    db = None


def get_database() -> AsyncIOMotorDatabase:
    if db is None:
        raise RuntimeError("Database not connected. Call connect_to_mongo() first.")
    return db


def convert_id(document: dict) -> dict:
    """Replace MongoDB's ObjectId `_id` with a string `id`."""
    if document and "_id" in document:
        document["id"] = str(document.pop("_id"))
    return document
