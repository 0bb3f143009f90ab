from pathlib import PurePath
from typing import Callable, Optional
from urllib.parse import quote

from fastapi import Request
from markupsafe import Markup

from somedave.bootstrap import ButtonStyle, LinkButton
from somedave.post_views import PostViews, registry_for
from somedave.utils import tag_slug


def tag_button(
    request: Request,
    tag: str,
    count: Optional[int] = None,
    button_style: ButtonStyle = ButtonStyle.DEFAULT,
) -> LinkButton:
    """Small tag-filter button, with a count badge when a count is given."""
    badge = (
        Markup(" <span class='badge'>{}</span>").format(count)
        if count is not None
        else ""
    )
    url = request.app.url_path_for("tags", tag=quote(tag_slug(tag), safe=""))
    return (
        LinkButton(Markup(" {}{}").format(tag, badge), str(url), button_style)
        .btn_sm()
        .add_css("tag-button", "icon-tag-2")
    )


def post_link(
    request: Request, link_text: str, view: Callable[[PostViews], str]
) -> Markup:
    """Link to a post, picked from the post view registry by ``view``."""
    name = PurePath(view(registry_for(request.app))).stem
    url = request.app.url_path_for("posts", name=name)
    return Markup('<a href="{}">{}</a>').format(str(url), link_text)
