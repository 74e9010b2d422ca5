"""
SEO metadata schemas.

Page head data returned alongside every storefront payload.

Dependencies: pydantic
System role: SEO API contracts
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class SeoFieldsMixin(BaseModel):
    """Editable SEO columns shared by tours and guide posts."""

    seo_title: str | None = Field(None, max_length=255)
    seo_description: str | None = Field(None, max_length=500)
    seo_keywords: str | None = None
    canonical_url: str | None = None
    robots_index: bool | None = None
    robots_follow: bool | None = None
    robots_nosnippet: bool | None = None
    og_title: str | None = None
    og_description: str | None = None
    og_image: str | None = None
    og_image_alt: str | None = None
    twitter_title: str | None = None
    twitter_description: str | None = None
    twitter_image: str | None = None
    twitter_image_alt: str | None = None
    structured_data_type: str | None = None
    focus_keyword: str | None = None
    custom_json_ld: str | None = Field(None, description="Hand-written JSON-LD replacing the generated schema")


class RobotsDirectives(BaseModel):
    """Robots meta directives."""

    index: bool = True
    follow: bool = True
    nosnippet: bool = False

    @property
    def content(self) -> str:
        """Value for ``<meta name="robots">``."""
        parts = [
            "index" if self.index else "noindex",
            "follow" if self.follow else "nofollow",
        ]
        if self.nosnippet:
            parts.append("nosnippet")
        return ", ".join(parts)


class OpenGraph(BaseModel):
    """Open Graph tags."""

    title: str
    description: str
    url: str
    type: str = "website"
    image: str | None = None
    image_alt: str | None = None
    site_name: str | None = None


class TwitterCard(BaseModel):
    """Twitter card tags."""

    card: str = "summary_large_image"
    title: str
    description: str
    image: str | None = None
    image_alt: str | None = None


class PageMetadata(BaseModel):
    """Everything a page needs for its ``<head>``."""

    title: str
    description: str
    canonical: str
    robots: RobotsDirectives = Field(default_factory=RobotsDirectives)
    robots_content: str = "index, follow"
    keywords: str | None = None
    open_graph: OpenGraph
    twitter: TwitterCard
    structured_data: list[dict[str, Any]] = Field(default_factory=list)
    last_modified: datetime | None = None
