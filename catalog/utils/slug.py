"""슬러그 생성 및 UUID 판별 유틸리티.

Slug derivation and UUID classification helpers.
Both are pure functions; the product service uses them to fill in missing
slugs and to decide whether a lookup key is an id or a slug.
"""

import re

_UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)
_DISALLOWED = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")
_HYPHENS = re.compile(r"-+")


def generate_slug(title: str) -> str:
    """제목에서 URL용 슬러그를 생성합니다.

    Derive a URL-safe slug from a product title.

    Lower-cases and trims the title, drops everything except ASCII letters,
    digits, whitespace and hyphens, then turns whitespace runs into a single
    hyphen and squeezes repeated hyphens. Applying it to its own output
    returns the same string.

    Example:
        >>> generate_slug("  Red   Hoodie!! ")
        'red-hoodie'
    """
    slug = title.lower().strip()
    slug = _DISALLOWED.sub("", slug)
    slug = _WHITESPACE.sub("-", slug)
    return _HYPHENS.sub("-", slug)


def is_valid_uuid(value: str) -> bool:
    """8-4-4-4-12 형식의 16진수 UUID 문자열인지 확인합니다 (대소문자 무시)."""
    return _UUID_PATTERN.fullmatch(value) is not None
