"""
Core helpers: pure formatting and ordering rules with no I/O.

Slugs, listing filters, guide ordering, redirects, SEO metadata,
structured data and crawler files live here.
"""
