"""
JSON-LD structured data for search engines.

Three shapes are produced: ``BlogPosting`` for posts, ``WebPage`` for other
pages that have their own slug, and a site-wide ``WebSite`` with a
``SearchAction`` for everything else.
"""

import json
import logging
from datetime import date, datetime, timezone
from typing import Any, Dict, Optional

from .config import SiteConfig
from .meta import POST, WEBSITE, MetadataRecord
from .site import Post, SiteInfo

logger = logging.getLogger(__name__)

SCHEMA_CONTEXT = "https://schema.org"
SEARCH_TERM = "search_term_string"

_DATE_FORMATS = ("%Y/%m/%d", "%Y/%m/%d %H:%M", "%Y/%m/%d %H:%M:%S", "%Y-%m-%d %H:%M")


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        # The content backend stores times as epoch milliseconds.
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text.lstrip("-").isdigit():
            return datetime.fromtimestamp(int(text) / 1000, tz=timezone.utc)
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            pass
        for fmt in _DATE_FORMATS:
            try:
                return datetime.strptime(text, fmt)
            except ValueError:
                continue
    return None


def format_iso_timestamp(value: Any) -> Optional[str]:
    """
    Format a post date as ``YYYY-MM-DDTHH:MM:SS.mmmZ`` in UTC.

    Naive values are taken to be UTC. Returns None for missing or
    unparseable input so the caller can leave the field out entirely.
    """
    if value is None:
        return None
    try:
        parsed = _parse_timestamp(value)
        if parsed is not None and parsed.tzinfo is not None:
            parsed = parsed.astimezone(timezone.utc)
    except (OverflowError, OSError, ValueError):
        parsed = None
    if parsed is None:
        logger.warning("Ignoring unparseable date %r.", value)
        return None
    return (
        f"{parsed.year:04d}-{parsed.month:02d}-{parsed.day:02d}"
        f"T{parsed.hour:02d}:{parsed.minute:02d}:{parsed.second:02d}"
        f".{parsed.microsecond // 1000:03d}Z"
    )


def _prune(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _prune(v) for k, v in value.items() if v is not None}
    if isinstance(value, list):
        return [_prune(v) for v in value]
    return value


def _publisher(config: SiteConfig) -> Dict[str, Any]:
    return {
        "@type": "Organization",
        "name": config.title,
        "logo": {"@type": "ImageObject", "url": config.favicon or None},
    }


def build_json_ld(
    meta: Optional[MetadataRecord],
    site_info: Optional[SiteInfo],
    post: Optional[Post],
    url: str,
    config: SiteConfig,
) -> Dict[str, Any]:
    if meta is not None and meta.type == POST and post is not None:
        data = {
            "@context": SCHEMA_CONTEXT,
            "@type": "BlogPosting",
            "mainEntityOfPage": {"@type": "WebPage", "@id": url},
            "headline": post.title,
            "description": post.summary or meta.description,
            "image": meta.image,
            "datePublished": format_iso_timestamp(post.publish_date),
            "dateModified": format_iso_timestamp(post.last_edited_date),
            "author": {"@type": "Person", "name": config.author or None},
            "publisher": _publisher(config),
        }
    elif meta is not None and meta.type != WEBSITE and meta.slug:
        data = {
            "@context": SCHEMA_CONTEXT,
            "@type": "WebPage",
            "url": url,
            "name": meta.title,
            "description": meta.description,
            "isPartOf": {"@type": "WebSite", "url": config.link, "name": config.title},
        }
    else:
        data = {
            "@context": SCHEMA_CONTEXT,
            "@type": "WebSite",
            "url": config.link,
            "name": config.title,
            "description": site_info.description if site_info else None,
            "publisher": _publisher(config),
            "potentialAction": {
                "@type": "SearchAction",
                "target": f"{config.link}/search/{{{SEARCH_TERM}}}",
                "query-input": f"required name={SEARCH_TERM}",
            },
        }
    return _prune(data)


def json_ld_script(data: Dict[str, Any]) -> str:
    """Serialize JSON-LD to a single string that can sit verbatim inside a script tag."""
    return json.dumps(data, ensure_ascii=False).replace("</", "<\\/")


__all__ = ["build_json_ld", "format_iso_timestamp", "json_ld_script"]
