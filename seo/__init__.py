"""SEO metadata, structured data and document shell for the static blog."""

from .config import SiteConfig, load_site_config
from .site import SiteInfo, Post, PageContext, LocaleStrings
from .routes import RouteId
from .meta import MetadataRecord, resolve
from .jsonld import build_json_ld, format_iso_timestamp, json_ld_script
from .head import HeadTags, build_head_tags, canonical_url, render_head
from .document import render_document

__all__ = [
    "SiteConfig",
    "load_site_config",
    "SiteInfo",
    "Post",
    "PageContext",
    "LocaleStrings",
    "RouteId",
    "MetadataRecord",
    "resolve",
    "build_json_ld",
    "format_iso_timestamp",
    "json_ld_script",
    "HeadTags",
    "build_head_tags",
    "canonical_url",
    "render_head",
    "render_document",
]
