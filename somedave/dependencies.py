from fastapi import Depends

from somedave.repos.posts_repo import FilePostsRepo
from somedave.services.posts_service import PostsService
from somedave.settings import Settings, settings


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def get_posts_repo(current_settings: Settings = Depends(get_settings)):
    return FilePostsRepo(current_settings.POSTS_DIR)


def get_posts_service(repo=Depends(get_posts_repo)):
    return PostsService(repo=repo)
