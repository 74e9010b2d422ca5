"""
Schema.org JSON-LD generation.

Turns plain page data into schema.org dictionaries for the storefront's
``<script type="application/ld+json">`` blocks. A page may override the
generated output with hand-written JSON-LD stored on the row.

Dependencies: json (stdlib), tourbook.configs.site
System role: Structured-data formatting for SEO
"""

import json
import logging
from typing import Any, Callable, Iterable

from tourbook.configs.site import SiteSettings

logger = logging.getLogger(__name__)

SCHEMA_CONTEXT = "https://schema.org"

Schema = dict[str, Any]


def _prune(value: Any) -> Any:
    """Drop None, empty strings and empty containers, recursively."""
    if isinstance(value, dict):
        pruned = {k: _prune(v) for k, v in value.items()}
        return {k: v for k, v in pruned.items() if v not in (None, "", [], {})}
    if isinstance(value, list):
        pruned_items = [_prune(v) for v in value]
        return [v for v in pruned_items if v not in (None, "", [], {})]
    return value


def _website(data: dict[str, Any]) -> list[Schema]:
    return [{
        "@context": SCHEMA_CONTEXT,
        "@type": "WebSite",
        "name": data.get("name"),
        "url": data.get("url"),
        "description": data.get("description"),
        "potentialAction": {
            "@type": "SearchAction",
            "target": f"{data.get('url')}/search?q={{search_term_string}}",
            "query-input": "required name=search_term_string",
        } if data.get("url") else None,
    }]


def _organization(data: dict[str, Any]) -> list[Schema]:
    return [{
        "@context": SCHEMA_CONTEXT,
        "@type": "Organization",
        "name": data.get("name"),
        "url": data.get("url"),
        "logo": data.get("logo"),
        "description": data.get("description"),
        "telephone": data.get("telephone"),
        "email": data.get("email"),
        "sameAs": data.get("social_links") or [],
    }]


def _local_business(data: dict[str, Any]) -> list[Schema]:
    latitude = data.get("latitude")
    longitude = data.get("longitude")
    return [{
        "@context": SCHEMA_CONTEXT,
        "@type": "LocalBusiness",
        "name": data.get("name"),
        "url": data.get("url"),
        "description": data.get("description"),
        "telephone": data.get("telephone"),
        "email": data.get("email"),
        "address": {
            "@type": "PostalAddress",
            "streetAddress": data.get("street_address"),
            "addressLocality": data.get("city"),
            "addressRegion": data.get("region"),
            "postalCode": data.get("postal_code"),
            "addressCountry": data.get("country"),
        },
        "geo": {
            "@type": "GeoCoordinates",
            "latitude": latitude,
            "longitude": longitude,
        } if latitude is not None and longitude is not None else None,
        "openingHours": data.get("opening_hours") or [],
        "priceRange": data.get("price_range"),
        "sameAs": data.get("social_links") or [],
    }]


def _breadcrumbs(data: dict[str, Any]) -> list[Schema]:
    crumbs = data.get("breadcrumbs") or []
    if not crumbs:
        return []
    return [{
        "@context": SCHEMA_CONTEXT,
        "@type": "BreadcrumbList",
        "itemListElement": [
            {
                "@type": "ListItem",
                "position": index,
                "name": crumb["name"],
                "item": crumb["url"],
            }
            for index, crumb in enumerate(crumbs, start=1)
        ],
    }]


def _faq_page(data: dict[str, Any]) -> list[Schema]:
    faqs = data.get("faqs") or []
    if not faqs:
        return []
    return [{
        "@context": SCHEMA_CONTEXT,
        "@type": "FAQPage",
        "mainEntity": [
            {
                "@type": "Question",
                "name": faq["question"],
                "acceptedAnswer": {"@type": "Answer", "text": faq["answer"]},
            }
            for faq in faqs
        ],
    }]


def _product(data: dict[str, Any]) -> list[Schema]:
    review_count = data.get("review_count") or 0
    rating = data.get("rating")
    return [{
        "@context": SCHEMA_CONTEXT,
        "@type": "Product",
        "@id": data.get("url"),
        "name": data.get("title"),
        "description": data.get("description"),
        "image": data.get("image_url"),
        "url": data.get("url"),
        "sku": str(data["id"]) if data.get("id") else None,
        "category": data.get("category"),
        "brand": {"@type": "Brand", "name": data.get("brand")} if data.get("brand") else None,
        "offers": {
            "@type": "Offer",
            "price": f"{float(data.get('price') or 0):.2f}",
            "priceCurrency": data.get("currency") or "USD",
            "availability": "https://schema.org/InStock",
            "url": data.get("url"),
        },
        "aggregateRating": {
            "@type": "AggregateRating",
            "ratingValue": rating,
            "reviewCount": review_count,
            "bestRating": 5,
        } if rating and review_count > 0 else None,
        "additionalProperty": [
            {"@type": "PropertyValue", "name": "Duration", "value": data.get("duration")},
            {"@type": "PropertyValue", "name": "Location", "value": data.get("location")},
        ],
    }]


def _blog_posting(data: dict[str, Any]) -> list[Schema]:
    return [{
        "@context": SCHEMA_CONTEXT,
        "@type": "BlogPosting",
        "@id": data.get("url"),
        "headline": data.get("title"),
        "description": data.get("excerpt"),
        "image": data.get("featured_image"),
        "url": data.get("url"),
        "datePublished": data.get("published_date"),
        "dateModified": data.get("updated_date") or data.get("published_date"),
        "articleSection": data.get("category"),
        "author": {"@type": "Organization", "name": data.get("author")} if data.get("author") else None,
        "publisher": {
            "@type": "Organization",
            "name": data.get("publisher"),
            "logo": {"@type": "ImageObject", "url": data.get("publisher_logo")}
            if data.get("publisher_logo") else None,
        } if data.get("publisher") else None,
        "mainEntityOfPage": {"@type": "WebPage", "@id": data.get("url")} if data.get("url") else None,
    }]


_BUILDERS: dict[str, Callable[[dict[str, Any]], list[Schema]]] = {
    "WebSite": _website,
    "Organization": _organization,
    "LocalBusiness": _local_business,
    "BreadcrumbList": _breadcrumbs,
    "FAQPage": _faq_page,
    "Product": _product,
    "BlogPosting": _blog_posting,
}

STRUCTURED_DATA_TYPES = tuple(_BUILDERS)


def parse_override(override: str) -> list[Schema] | None:
    """
    Parse hand-written JSON-LD.

    Returns:
        list[Schema] | None: Objects from the override, or None if it is
        not valid JSON or not an object/list of objects
    """
    try:
        parsed = json.loads(override)
    except json.JSONDecodeError as e:
        logger.warning("Ignoring invalid custom JSON-LD", extra={"error": str(e)})
        return None
    if isinstance(parsed, dict):
        return [parsed]
    if isinstance(parsed, list) and parsed and all(isinstance(item, dict) for item in parsed):
        return parsed
    logger.warning("Ignoring custom JSON-LD that is not an object or list of objects")
    return None


def generate_structured_data(
    schema_type: str,
    data: dict[str, Any],
    override: str | None = None,
) -> list[Schema]:
    """
    Build schema.org objects for one page element.

    Args:
        schema_type: One of :data:`STRUCTURED_DATA_TYPES`
        data: Plain values for the builder (snake_case keys)
        override: Optional custom JSON-LD replacing the generated output

    Returns:
        list[Schema]: Zero or more schema objects with empty values removed
    """
    if override and override.strip():
        parsed = parse_override(override)
        if parsed is not None:
            return parsed

    builder = _BUILDERS.get(schema_type)
    if builder is None:
        logger.warning("Unknown structured data type", extra={"schema_type": schema_type})
        return []
    return [_prune(schema) for schema in builder(data)]


def combine_structured_data(*schemas: Schema | None) -> list[Schema]:
    """Merge schema lists, dropping empty entries and exact duplicates."""
    combined: list[Schema] = []
    seen: set[str] = set()
    for schema in schemas:
        if not schema:
            continue
        key = json.dumps(schema, sort_keys=True, default=str)
        if key in seen:
            continue
        seen.add(key)
        combined.append(schema)
    return combined


def global_structured_data(site: SiteSettings) -> list[Schema]:
    """WebSite, Organization and LocalBusiness schemas for every page."""
    website = generate_structured_data("WebSite", {
        "name": site.name,
        "url": site.base_url,
        "description": site.description,
    })
    organization = generate_structured_data("Organization", {
        "name": site.name,
        "url": site.base_url,
        "logo": site.logo,
        "description": site.organization_description,
        "telephone": site.telephone,
        "email": site.email,
        "social_links": site.social_links,
    })
    business = generate_structured_data("LocalBusiness", {
        "name": site.name,
        "url": site.base_url,
        "description": site.business_description,
        "telephone": site.telephone,
        "email": site.email,
        "street_address": site.street_address,
        "city": site.city,
        "region": site.region,
        "postal_code": site.postal_code,
        "country": site.country,
        "latitude": site.latitude,
        "longitude": site.longitude,
        "opening_hours": site.opening_hours,
        "price_range": site.price_range,
        "social_links": site.social_links,
    })
    return combine_structured_data(*website, *organization, *business)


def render_json_ld(schemas: Schema | Iterable[Schema]) -> str:
    """Serialize one schema (or a list) as compact JSON for a script tag."""
    payload = schemas if isinstance(schemas, dict) else list(schemas)
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False, default=str)
