"""
Fluent builder for Bootstrap link buttons.

Each modifier returns the builder itself so calls can be chained:

    LinkButton(" python", "/blog/tags/python").btn_sm().add_css("tag-button")

The builder renders lazily; ``str()`` or any markupsafe/Jinja context that
honours ``__html__`` produces the final ``<a>`` element.
"""

from enum import Enum
from typing import List, Optional

from markupsafe import Markup, escape


class ButtonStyle(str, Enum):
    DEFAULT = "default"
    PRIMARY = "primary"
    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    DANGER = "danger"
    LINK = "link"

    @property
    def css_class(self) -> str:
        return f"btn-{self.value}"


class LinkButton:
    def __init__(
        self, text, href: str, button_style: ButtonStyle = ButtonStyle.DEFAULT
    ):
        self.text = text
        self.href = href
        self.button_style = button_style
        self.size: Optional[str] = None
        self.css_classes: List[str] = []

    def btn_sm(self) -> "LinkButton":
        self.size = "btn-sm"
        return self

    def btn_lg(self) -> "LinkButton":
        self.size = "btn-lg"
        return self

    def btn_xs(self) -> "LinkButton":
        self.size = "btn-xs"
        return self

    def add_css(self, *classes: str) -> "LinkButton":
        for css_class in classes:
            if css_class and css_class not in self.css_classes:
                self.css_classes.append(css_class)
        return self

    @property
    def classes(self) -> List[str]:
        classes = ["btn", self.button_style.css_class]
        if self.size:
            classes.append(self.size)
        return classes + self.css_classes

    def render(self) -> Markup:
        return Markup('<a class="{}" href="{}" role="button">{}</a>').format(
            " ".join(self.classes), self.href, escape(self.text)
        )

    def __html__(self) -> str:
        return str(self.render())

    def __str__(self) -> str:
        return self.__html__()

    def __repr__(self) -> str:
        return f"LinkButton(href={self.href!r}, classes={self.classes!r})"
