import textwrap

import pytest
from starlette.requests import Request

POSTS = {
    "2014-08-19-welcome.md": """
        ---
        Title: Welcome
        Lead: First post.
        Published: 2014-08-19
        Tags: [Meta]
        ---
        Hello there.
        """,
    "2014-09-02-method-chaining.md": """
        ---
        Title: Method Chaining
        Lead: Fluent helpers.
        Published: 2014-09-02
        Tags:
          - Method Chaining
          - Bootstrap
        ---
        Chain all the things.
        """,
    "2014-10-14-tag-buttons.md": """
        ---
        Title: Tag Buttons
        Published: 2014-10-14 21:30
        Tags: Bootstrap, method chaining
        ---
        Buttons with badges.
        """,
}


def write_post(directory, filename: str, raw: str):
    path = directory / filename
    path.write_text(textwrap.dedent(raw).lstrip(), encoding="utf-8")
    return path


@pytest.fixture
def posts_dir(tmp_path):
    directory = tmp_path / "posts"
    directory.mkdir()
    for filename, raw in POSTS.items():
        write_post(directory, filename, raw)
    return directory


def make_request(app) -> Request:
    """Bare request bound to ``app`` for exercising the HTML helpers."""
    return Request({"type": "http", "app": app, "headers": []})


class FakeRepo:
    """
    Minimal repo stand-in used in service tests.
    """

    def __init__(self, paths):
        self.paths = list(paths)

    def list_post_files(self):
        return list(self.paths)

    def get_post_file(self, name):
        for path in self.paths:
            if path.stem == name:
                return path
        return None


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(
        self,
        list_posts_return=None,
        get_post_return=None,
        tag_counts_return=None,
        by_tag_return=None,
    ):
        self._list_posts_return = list_posts_return or []
        self._get_post_return = get_post_return
        self._tag_counts_return = tag_counts_return or []
        self._by_tag_return = by_tag_return or []
        self.tag_calls = []

    def list_posts(self):
        return self._list_posts_return

    def get_post(self, name: str):
        return self._get_post_return

    def tag_counts(self):
        return self._tag_counts_return

    def list_posts_by_tag(self, tag: str):
        self.tag_calls.append(tag)
        return self._by_tag_return
