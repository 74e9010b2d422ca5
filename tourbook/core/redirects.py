"""
Slug redirect rules.

Stored redirects map an old slug to a new one within a content type. The
content type decides the URL prefix, so a renamed tour ``old`` -> ``new``
becomes ``/tour/old`` -> ``/tour/new``. The legacy ``/blog`` section always
forwards to ``/travel-guide``.

Dependencies: dataclasses (stdlib)
System role: URL routing rules for moved content
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class ContentType(str, Enum):
    """Tables whose slugs can be redirected."""

    BLOG_POSTS = "blog_posts"
    EXPERIENCES = "experiences"
    CATEGORIES = "categories"


BASE_PATHS: dict[str, str] = {
    ContentType.BLOG_POSTS.value: "/travel-guide",
    ContentType.EXPERIENCES.value: "/tour",
    ContentType.CATEGORIES.value: "/category",
}


@dataclass(frozen=True)
class RedirectRule:
    """One source -> destination mapping. ``prefix`` rules also match sub-paths."""

    source: str
    destination: str
    permanent: bool = True
    prefix: bool = False

    @property
    def status_code(self) -> int:
        return 308 if self.permanent else 307

    def match(self, path: str) -> str | None:
        """Destination for ``path`` if this rule applies."""
        if path == self.source:
            return self.destination
        if self.prefix and path.startswith(self.source + "/"):
            return self.destination + path[len(self.source):]
        return None


STATIC_RULES: tuple[RedirectRule, ...] = (
    RedirectRule(source="/blog", destination="/travel-guide", permanent=True, prefix=True),
)


def base_path(content_type: str) -> str:
    """URL prefix for a content type ("" for unknown types)."""
    return BASE_PATHS.get(content_type, "")


def public_path(content_type: str, slug: str) -> str:
    """Storefront path of a row, e.g. ``/tour/fiordland-cruise``."""
    return f"{base_path(content_type)}/{slug}"


def build_rules(redirects: Iterable) -> list[RedirectRule]:
    """
    Static rules followed by one rule per stored redirect row.

    Args:
        redirects: Rows exposing old_slug, new_slug, content_type, permanent

    Returns:
        list[RedirectRule]: Rules in evaluation order
    """
    rules = list(STATIC_RULES)
    for row in redirects:
        rules.append(RedirectRule(
            source=public_path(row.content_type, row.old_slug),
            destination=public_path(row.content_type, row.new_slug),
            permanent=row.permanent if row.permanent is not None else True,
        ))
    return rules


def resolve(path: str, rules: Iterable[RedirectRule]) -> RedirectRule | None:
    """
    Find where ``path`` should go.

    Returns:
        RedirectRule | None: A rule whose destination is already expanded for
        ``path``, or None when nothing matches
    """
    normalized = path.rstrip("/") or "/"
    for rule in rules:
        destination = rule.match(normalized)
        if destination is not None:
            return RedirectRule(
                source=normalized,
                destination=destination,
                permanent=rule.permanent,
            )
    return None
