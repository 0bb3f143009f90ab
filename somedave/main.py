import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from somedave import dependencies as deps
from somedave.post_views import registry_for
from somedave.routers import fragments, posts
from somedave.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=f"{settings.SITE_TITLE} API", description="Somedave blog")


@asynccontextmanager
async def lifespan(app: FastAPI):
    get_settings = app.dependency_overrides.get(deps.get_settings, deps.get_settings)
    current_settings = get_settings()
    views = registry_for(app, current_settings.POSTS_DIR)
    logger.info(
        f"Registered {len(views)} post views from {current_settings.POSTS_DIR}"
    )

    try:
        yield
    finally:
        app.state.post_views = None
        logger.info("Post view registry released")


app.router.lifespan_context = lifespan

app.include_router(posts.router)
app.include_router(fragments.router)


@app.get("/")
async def root():
    return {"message": f"{settings.SITE_TITLE} blog is running"}
