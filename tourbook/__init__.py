"""
Tourbook: tour marketplace storefront and content-management API.
"""

__version__ = "0.1.0"
