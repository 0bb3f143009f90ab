import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from somedave import dependencies as deps
from somedave.schemas.blog import PostDetail, PostSummary, TagCount
from somedave.services.posts_service import PostsService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/blog")


@router.get("/posts", response_model=List[PostSummary], name="list_posts")
def list_posts(service: PostsService = Depends(deps.get_posts_service)):
    """Get all posts metadata, newest first."""
    try:
        return service.list_posts()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/{name:path}", response_model=PostDetail, name="posts")
def get_post(
    name: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single post by file name."""
    try:
        post = service.get_post(name)
        if not post:
            raise HTTPException(status_code=404, detail="Post not found")
        return post
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {name}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")


@router.get("/tags", response_model=List[TagCount], name="list_tags")
def list_tags(service: PostsService = Depends(deps.get_posts_service)):
    try:
        return service.tag_counts()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing tags: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve tags")


@router.get("/tags/{tag:path}", response_model=List[PostSummary], name="tags")
def list_posts_by_tag(
    tag: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get the posts filed under a tag."""
    try:
        return service.list_posts_by_tag(tag)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts for tag {tag}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")
