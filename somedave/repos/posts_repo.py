import logging
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

POST_EXTENSIONS = (".md", ".markdown")


class FilePostsRepo:
    def __init__(self, posts_dir):
        self.posts_dir = Path(posts_dir)

    def list_post_files(self) -> List[Path]:
        if not self.posts_dir.is_dir():
            logger.warning(f"Posts directory not found: {self.posts_dir}")
            return []
        return sorted(
            path
            for path in self.posts_dir.iterdir()
            if path.is_file() and path.suffix.lower() in POST_EXTENSIONS
        )

    def get_post_file(self, name: str) -> Optional[Path]:
        # Match on stem only so route arguments never reach the filesystem
        return next(
            (path for path in self.list_post_files() if path.stem == name), None
        )
