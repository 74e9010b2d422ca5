"""
Storefront page payloads.

Each storefront route returns one of these: everything the page renders,
already composed, plus its head metadata.

Dependencies: pydantic
System role: Storefront API contracts
"""

from pydantic import BaseModel, Field

from tourbook.models.blog import BlogCategoryResponse, BlogPostCard, BlogPostResponse
from tourbook.models.category import CategoryResponse, SubcategoryResponse
from tourbook.models.city import CityResponse
from tourbook.models.common import Breadcrumb
from tourbook.models.experience import ExperienceCard, ExperienceResponse
from tourbook.models.faq import FAQResponse
from tourbook.models.guide import GuideSectionView
from tourbook.models.homepage import FAQSectionContent, HeroContent, StatView, TestimonialResponse
from tourbook.models.internal_link import LinkSectionResponse
from tourbook.models.seo import PageMetadata


class HomePage(BaseModel):
    """Homepage: hero, featured content, FAQs, social proof and link blocks."""

    hero: HeroContent
    categories: list[CategoryResponse] = Field(default_factory=list)
    featured_experiences: list[ExperienceCard] = Field(default_factory=list)
    faq_section: FAQSectionContent
    faqs: list[FAQResponse] = Field(default_factory=list)
    testimonials: list[TestimonialResponse] = Field(default_factory=list)
    stats: list[StatView] = Field(default_factory=list)
    link_sections: list[LinkSectionResponse] = Field(default_factory=list)
    metadata: PageMetadata


class ToursPage(BaseModel):
    """All active tours."""

    experiences: list[ExperienceCard] = Field(default_factory=list)
    total: int = 0
    metadata: PageMetadata


class TourDetailPage(BaseModel):
    """Single tour."""

    experience: ExperienceResponse
    highlights: list[str] = Field(default_factory=list)
    description_paragraphs: list[str] = Field(default_factory=list)
    image_url: str
    breadcrumbs: list[Breadcrumb] = Field(default_factory=list)
    link_sections: list[LinkSectionResponse] = Field(default_factory=list)
    metadata: PageMetadata


class CategoryPage(BaseModel):
    """Category with its subcategories and active tours."""

    category: CategoryResponse
    subcategories: list[SubcategoryResponse] = Field(default_factory=list)
    experiences: list[ExperienceCard] = Field(default_factory=list)
    breadcrumbs: list[Breadcrumb] = Field(default_factory=list)
    metadata: PageMetadata


class SubcategoryPage(BaseModel):
    """Subcategory with its parent and active tours."""

    subcategory: SubcategoryResponse
    category: CategoryResponse | None = None
    experiences: list[ExperienceCard] = Field(default_factory=list)
    breadcrumbs: list[Breadcrumb] = Field(default_factory=list)
    metadata: PageMetadata


class DestinationPage(BaseModel):
    """City with its active tours."""

    city: CityResponse
    experiences: list[ExperienceCard] = Field(default_factory=list)
    breadcrumbs: list[Breadcrumb] = Field(default_factory=list)
    metadata: PageMetadata


class DestinationsPage(BaseModel):
    """All cities, featured first."""

    cities: list[CityResponse] = Field(default_factory=list)
    metadata: PageMetadata


class TravelGuidePage(BaseModel):
    """Travel guide listing."""

    featured_posts: list[BlogPostCard] = Field(default_factory=list)
    posts: list[BlogPostCard] = Field(default_factory=list)
    categories: list[BlogCategoryResponse] = Field(default_factory=list)
    active_category: str | None = None
    metadata: PageMetadata


class TravelGuidePostPage(BaseModel):
    """Single travel guide post."""

    post: BlogPostResponse
    paragraphs: list[str] = Field(default_factory=list)
    guide_sections: list[GuideSectionView] = Field(default_factory=list)
    related_posts: list[BlogPostCard] = Field(default_factory=list)
    breadcrumbs: list[Breadcrumb] = Field(default_factory=list)
    link_sections: list[LinkSectionResponse] = Field(default_factory=list)
    metadata: PageMetadata
