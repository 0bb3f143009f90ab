"""
Registry of known post view paths.

Every post file on disk is registered under its file stem, and under an
identifier form of the stem so selectors can use attribute access:

    views["2014-08-19-method-chaining"]
    views._2014_08_19_method_chaining

Both return the view path, e.g. ``posts/2014-08-19-method-chaining.md``.
"""

import logging
import re
from pathlib import Path
from typing import Dict, Iterator, Mapping

from somedave.repos.posts_repo import FilePostsRepo
from somedave.settings import settings

logger = logging.getLogger(__name__)


def view_attribute_name(stem: str) -> str:
    name = re.sub(r"\W", "_", stem)
    if not name or name[0].isdigit():
        name = f"_{name}"
    return name


class PostViews:
    def __init__(self, paths: Mapping[str, str], posts_dir=None):
        self.posts_dir = None if posts_dir is None else Path(posts_dir)
        self._paths: Dict[str, str] = dict(paths)
        self._attributes: Dict[str, str] = {}
        for stem, path in self._paths.items():
            attribute = view_attribute_name(stem)
            if attribute in self._attributes:
                logger.warning(
                    f"Post views {self._attributes[attribute]} and {path} "
                    f"share attribute name {attribute}; keeping {path}"
                )
            self._attributes[attribute] = path

    @classmethod
    def from_directory(cls, posts_dir, prefix: str | None = None) -> "PostViews":
        posts_dir = Path(posts_dir)
        prefix = posts_dir.name if prefix is None else prefix
        files = FilePostsRepo(posts_dir).list_post_files()
        return cls(
            {path.stem: f"{prefix}/{path.name}" for path in files}, posts_dir
        )

    def __getattr__(self, name: str) -> str:
        attributes = self.__dict__.get("_attributes", {})
        try:
            return attributes[name]
        except KeyError:
            raise AttributeError(f"No post view named {name!r}") from None

    def __getitem__(self, stem: str) -> str:
        return self._paths[stem]

    def __contains__(self, stem) -> bool:
        return stem in self._paths

    def __iter__(self) -> Iterator[str]:
        return iter(self._paths.values())

    def __len__(self) -> int:
        return len(self._paths)


def registry_for(app, posts_dir=None) -> PostViews:
    """Return the app's post view registry, building it on first use.

    Passing ``posts_dir`` rebuilds the registry when the stored one was
    built from a different directory.
    """
    views = getattr(app.state, "post_views", None)
    if views is None or (
        posts_dir is not None and views.posts_dir != Path(posts_dir)
    ):
        views = PostViews.from_directory(
            settings.POSTS_DIR if posts_dir is None else posts_dir
        )
        app.state.post_views = views
        logger.debug(f"Built post view registry from {views.posts_dir}")
    return views


def refresh_registry(app, posts_dir=None) -> PostViews:
    app.state.post_views = None
    return registry_for(app, posts_dir)
