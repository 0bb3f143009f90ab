import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import HTMLResponse
from markupsafe import Markup

from somedave import dependencies as deps
from somedave.html_helpers import post_link, tag_button
from somedave.post_views import refresh_registry, registry_for
from somedave.services.posts_service import PostsService
from somedave.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/fragments", default_response_class=HTMLResponse)


@router.get("/tags")
def tag_cloud(
    request: Request,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Tag buttons for every tag, badged with its post count."""
    try:
        buttons = [
            tag_button(request, tag.tag, tag.count) for tag in service.tag_counts()
        ]
    except Exception as e:
        logger.error(f"Unexpected error rendering tag cloud: {e}")
        raise HTTPException(status_code=500, detail="Failed to render tags")
    return HTMLResponse(Markup("\n").join(buttons))


@router.get("/posts")
def recent_posts(
    request: Request,
    limit: Optional[int] = Query(default=None, ge=1),
    service: PostsService = Depends(deps.get_posts_service),
    current_settings: Settings = Depends(deps.get_settings),
):
    """Links to the most recent posts."""
    limit = limit or current_settings.RECENT_POSTS_LIMIT
    try:
        recent = service.list_posts()[:limit]
        views = registry_for(request.app, current_settings.POSTS_DIR)
        if any(post.name not in views for post in recent):
            refresh_registry(request.app, current_settings.POSTS_DIR)
        items = [
            Markup("<li>{}</li>").format(
                post_link(request, post.title, lambda views, name=post.name: views[name])
            )
            for post in recent
        ]
    except Exception as e:
        logger.error(f"Unexpected error rendering recent posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to render posts")
    return HTMLResponse(Markup("<ul>{}</ul>").format(Markup("").join(items)))


@router.get("/post-tags/{name:path}")
def post_tags(
    name: str,
    request: Request,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Tag buttons, without counts, for a single post."""
    post = service.get_post(name)
    if not post:
        raise HTTPException(status_code=404, detail="Post not found")
    return HTMLResponse(
        Markup("\n").join(tag_button(request, tag) for tag in post.tags)
    )
