import logging
from datetime import datetime, timezone
from typing import List, Optional

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorCollection

from ..database import get_database, convert_id

logger = logging.getLogger(__name__)

COLLECTION_NAME = "BlogPosts"


def _to_object_id(post_id) -> Optional[ObjectId]:
    """Parse a post id, returning None for anything that is not a valid ObjectId."""
    if isinstance(post_id, ObjectId):
        return post_id
    try:
        return ObjectId(post_id)
    except (InvalidId, TypeError):
        return None


def _with_created(record: dict) -> dict:
    document = dict(record)
    if document.get("created") is None:
        document["created"] = datetime.now(timezone.utc)
    return document


class BlogPostStore:
    """
    Persistence for blog posts in the BlogPosts collection.

    Every method returns plain dicts with the MongoDB `_id` already converted
    to a string `id`, or None when a post does not exist.
    """

    @staticmethod
    def collection() -> AsyncIOMotorCollection:
        return get_database()[COLLECTION_NAME]

    @staticmethod
    async def insert_many(records: List[dict]) -> List[dict]:
        """
        Bulk-create blog posts.

        Args:
            records: Post documents without ids. Missing `created` values are
                filled with the current UTC time.

        Returns:
            The created posts, in input order, each with its assigned `id`.
        """
        if not records:
            return []

        documents = [_with_created(record) for record in records]
        result = await BlogPostStore.collection().insert_many(documents)

        created = []
        for document, inserted_id in zip(documents, result.inserted_ids):
            document["_id"] = inserted_id
            created.append(convert_id(document))

        logger.info(f"Inserted {len(created)} blog posts")
        return created

    @staticmethod
    async def insert_one(record: dict) -> dict:
        """Create a single blog post and return it as stored."""
        document = _with_created(record)
        result = await BlogPostStore.collection().insert_one(document)
        created = await BlogPostStore.collection().find_one({"_id": result.inserted_id})
        return convert_id(created)

    @staticmethod
    async def find_all() -> List[dict]:
        posts = []
        async for post in BlogPostStore.collection().find().sort("_id", 1):
            posts.append(convert_id(post))
        return posts

    @staticmethod
    async def find_one() -> Optional[dict]:
        post = await BlogPostStore.collection().find_one()
        return convert_id(post) if post else None

    @staticmethod
    async def find_by_id(post_id) -> Optional[dict]:
        object_id = _to_object_id(post_id)
        if object_id is None:
            return None

        post = await BlogPostStore.collection().find_one({"_id": object_id})
        return convert_id(post) if post else None

    @staticmethod
    async def update_by_id(post_id, fields: dict) -> bool:
        """
        Replace only the supplied fields of a post.

        An unknown or malformed id is a no-op.

        Returns:
            True if a post with that id exists.
        """
        object_id = _to_object_id(post_id)
        if object_id is None:
            return False
        if not fields:
            return await BlogPostStore.find_by_id(object_id) is not None

        result = await BlogPostStore.collection().update_one(
            {"_id": object_id},
            {"$set": fields}
        )
        return result.matched_count > 0

    @staticmethod
    async def delete_by_id(post_id) -> bool:
        object_id = _to_object_id(post_id)
        if object_id is None:
            return False

        result = await BlogPostStore.collection().delete_one({"_id": object_id})
        return result.deleted_count > 0

    @staticmethod
    async def count() -> int:
        return await BlogPostStore.collection().count_documents({})
