import datetime
import logging
from pathlib import Path
from typing import Dict, List, Optional

import frontmatter

from somedave.schemas.blog import PostDetail, PostSummary, TagCount
from somedave.utils import calculate_reading_time, tag_slug

logger = logging.getLogger(__name__)


class PostsService:
    def __init__(self, repo):
        self.repo = repo

    def list_posts(self) -> List[PostSummary]:
        posts = []
        for path in self.repo.list_post_files():
            post_data = parse_post_data(path, include_content=False)
            if post_data:
                posts.append(post_data)

        posts.sort(key=lambda x: x["name"])
        posts.sort(key=lambda x: x["published"], reverse=True)
        return [PostSummary(**p) for p in posts]

    def get_post(self, name: str) -> Optional[PostDetail]:
        path = self.repo.get_post_file(name)
        if not path:
            return None
        post_data = parse_post_data(path, include_content=True)
        if not post_data:
            return None
        return PostDetail(**post_data)

    def list_posts_by_tag(self, tag: str) -> List[PostSummary]:
        slug = tag_slug(tag)
        return [
            post
            for post in self.list_posts()
            if slug in {tag_slug(t) for t in post.tags}
        ]

    def tag_counts(self) -> List[TagCount]:
        counts: Dict[str, TagCount] = {}
        for post in self.list_posts():
            for slug, tag in {tag_slug(t): t for t in reversed(post.tags)}.items():
                if slug in counts:
                    counts[slug].count += 1
                else:
                    counts[slug] = TagCount(tag=tag, slug=slug, count=1)
        return sorted(counts.values(), key=lambda t: (-t.count, t.slug))


def parse_post_data(path: Path, include_content: bool = False) -> Optional[dict]:
    """Parse front matter and return standardized post data"""
    try:
        parsed = frontmatter.loads(path.read_text(encoding="utf-8-sig"))
        metadata = parsed.metadata or {}
        body = parsed.content

        title = _get_field(metadata, "Title")
        if not title:
            logger.warning(f"Post {path.name} has no Title, skipping")
            return None

        published = _convert_date(_get_field(metadata, "Published"))
        if not published:
            logger.warning(f"Post {path.name} has no valid Published date, skipping")
            return None

        post_data = {
            "name": path.stem,
            "title": str(title),
            "lead": _get_field(metadata, "Lead"),
            "published": published,
            "tags": _normalize_tags(_get_field(metadata, "Tags")),
            "readingTime": calculate_reading_time(body),
        }

        if include_content:
            post_data["body"] = body

        return post_data
    except Exception as e:
        logger.warning(f"Failed to parse post {path.name}: {e}")
        return None


def _get_field(metadata: dict, key: str):
    if key in metadata:
        return metadata[key]
    lowered = key.lower()
    return next(
        (value for name, value in metadata.items() if str(name).lower() == lowered),
        None,
    )


def _normalize_tags(value) -> List[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [tag.strip() for tag in value.split(",") if tag.strip()]
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value if item]
    return [str(value)]


def _convert_date(value) -> Optional[datetime.date]:
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if isinstance(value, str):
        try:
            return datetime.datetime.fromisoformat(value.strip()).date()
        except ValueError:
            return None
    return None
