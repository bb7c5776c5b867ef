from fastapi import APIRouter, HTTPException, status
from typing import List
from datetime import datetime, timezone
import logging

from ..models.blog_posts import (
    BlogPostCreate,
    BlogPostInDB,
    BlogPostUpdate,
    BlogPostResponse
)
from ..services.blog_post_store import BlogPostStore

router = APIRouter()
logger = logging.getLogger(__name__)

NOT_FOUND_DETAIL = "Blog post not found"


@router.get("/posts", response_model=List[BlogPostResponse])
async def get_posts():
    """List every blog post, oldest first."""
    posts = await BlogPostStore.find_all()
    return [BlogPostResponse(**post) for post in posts]


@router.get("/posts/{post_id}", response_model=BlogPostResponse)
async def get_post(post_id: str):
    """
    Get a blog post by ID.

    Returns 404 if the post doesn't exist or the ID is malformed.
    """
    post = await BlogPostStore.find_by_id(post_id)

    if not post:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=NOT_FOUND_DETAIL
        )

    return BlogPostResponse(**post)


@router.post("/posts", response_model=BlogPostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(post: BlogPostCreate):
    """
    Create a new blog post.

    `created` defaults to the current time when omitted.
    """
    post_data = BlogPostInDB(
        **post.model_dump(exclude={"created"}),
        created=post.created or datetime.now(timezone.utc)
    ).model_dump(by_alias=True)

    try:
        created_post = await BlogPostStore.insert_one(post_data)
    except Exception as e:
        logger.error(f"Error creating blog post: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error creating blog post"
        )

    logger.info(f"Created blog post {created_post['id']}")
    return BlogPostResponse(**created_post)


@router.put("/posts/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_post(post_id: str, post_update: BlogPostUpdate):
    """
    Update the fields sent over (title, content, author).

    If the body carries an `id` it must match the one in the path.
    """
    if post_update.id is not None and post_update.id != post_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Request path id ({post_id}) and request body id ({post_update.id}) must match"
        )

    update_data = post_update.model_dump(exclude_unset=True, exclude={"id"}, by_alias=True)

    if not update_data:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No fields provided to update"
        )

    try:
        found = await BlogPostStore.update_by_id(post_id, update_data)
    except Exception as e:
        logger.error(f"Error updating blog post {post_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error updating blog post"
        )

    if not found:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=NOT_FOUND_DETAIL
        )

    logger.info(f"Updated blog post {post_id}: {sorted(update_data)}")
    return None


@router.delete("/posts/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(post_id: str):
    """Delete a blog post."""
    try:
        deleted = await BlogPostStore.delete_by_id(post_id)
    except Exception as e:
        logger.error(f"Error deleting blog post {post_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error deleting blog post"
        )

    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=NOT_FOUND_DETAIL
        )

    logger.info(f"Deleted blog post {post_id}")
    return None
