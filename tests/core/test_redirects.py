"""
Tests for slug redirect rules and path resolution.

System role: Verification of moved-content URL routing
"""

from types import SimpleNamespace

from tourbook.core.redirects import base_path, build_rules, public_path, resolve


def _redirect(old: str, new: str, content_type: str = "experiences", permanent: bool | None = True):
    return SimpleNamespace(old_slug=old, new_slug=new, content_type=content_type, permanent=permanent)


def test_public_paths_per_content_type() -> None:
    assert public_path("experiences", "fiord-cruise") == "/tour/fiord-cruise"
    assert public_path("categories", "adventure") == "/category/adventure"
    assert public_path("blog_posts", "packing-list") == "/travel-guide/packing-list"
    assert base_path("unknown") == ""


def test_rules_start_with_blog_forwarding() -> None:
    rules = build_rules([_redirect("old-cruise", "new-cruise")])

    assert rules[0].source == "/blog"
    assert rules[1].source == "/tour/old-cruise"
    assert rules[1].destination == "/tour/new-cruise"
    assert rules[1].status_code == 308


def test_temporary_redirect_uses_307() -> None:
    rules = build_rules([_redirect("a", "b", permanent=False)])
    assert rules[1].status_code == 307


def test_null_permanent_defaults_to_permanent() -> None:
    rules = build_rules([_redirect("a", "b", permanent=None)])
    assert rules[1].permanent is True


def test_resolve_blog_prefix_keeps_sub_path() -> None:
    rules = build_rules([])

    assert resolve("/blog", rules).destination == "/travel-guide"
    assert resolve("/blog/packing-list", rules).destination == "/travel-guide/packing-list"
    assert resolve("/blogger", rules) is None


def test_resolve_stored_redirect_ignores_trailing_slash() -> None:
    rules = build_rules([_redirect("old-cruise", "new-cruise", "experiences")])

    rule = resolve("/tour/old-cruise/", rules)

    assert rule.source == "/tour/old-cruise"
    assert rule.destination == "/tour/new-cruise"
    assert resolve("/tour/other", rules) is None
