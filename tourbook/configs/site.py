"""
Site identity settings.

Public URL, organization details and storefront copy used by SEO metadata,
structured data, robots.txt and the homepage fallbacks.

Dependencies: pydantic, pydantic_settings
System role: Storefront identity configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from tourbook.configs.base import BaseSettings


class SiteSettings(BaseSettings):
    """Storefront identity and SEO defaults."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SITE_",
        case_sensitive=False,
        extra="ignore",
    )

    url: str = Field(default="https://milford-sound.com", description="Public site URL")
    name: str = Field(default="Milford Sound Tours", description="Site name")
    short_name: str = Field(default="Milford Sound", description="Name used in page titles")
    description: str = Field(
        default="Premier tour operator offering unforgettable experiences in Milford Sound, New Zealand",
        description="Site description for the WebSite schema",
    )
    organization_description: str = Field(default="Leading tour operator in Milford Sound")
    business_description: str = Field(
        default="Tour operator specializing in Milford Sound experiences"
    )
    logo: str | None = Field(default=None, description="Logo URL")
    telephone: str | None = Field(default=None)
    email: str | None = Field(default=None)
    street_address: str | None = Field(default=None)
    city: str = Field(default="Milford Sound")
    region: str = Field(default="Southland")
    postal_code: str | None = Field(default=None)
    country: str = Field(default="NZ")
    destination_name: str = Field(
        default="New Zealand",
        description="Region named in generated listing descriptions",
    )
    latitude: float = Field(default=-44.6189)
    longitude: float = Field(default=167.9224)
    opening_hours: list[str] = Field(default_factory=lambda: ["Mo-Su 08:00-18:00"])
    price_range: str = Field(default="$$")
    social_links: list[str] = Field(default_factory=list)

    blog_author: str = Field(default="Milford Sound Team", description="Byline for guide posts")
    default_tour_image: str = Field(
        default="https://images.unsplash.com/photo-1506905925346-21bda4d32df4?w=600&h=400&fit=crop",
        description="Card image for tours without a main image",
    )

    # Homepage copy used when the hero_section / faq_section rows are missing or disabled
    hero_title: str = Field(default="Unforgettable experiences.")
    hero_subtitle: str = Field(default="Unbeatable deals.")
    hero_description: str = Field(default="Book tours, attractions, and experiences across the globe")
    hero_button_text: str = Field(default="Discover More")
    hero_button_link: str = Field(default="/tours")
    faq_title: str = Field(default="Frequently Asked Questions")
    faq_subtitle: str = Field(
        default="Find answers to common questions about our experiences and services"
    )

    robots_disallow: list[str] = Field(
        default_factory=lambda: [
            "/admin",
            "/api",
            "/auth/callback",
            "/checkout",
            "/_next",
            "/dev-output.log",
        ],
        description="Paths crawlers are asked to skip",
    )

    @property
    def base_url(self) -> str:
        """Site URL without a trailing slash."""
        return self.url.rstrip("/")
