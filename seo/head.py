from dataclasses import dataclass
from html import escape
from typing import List, Optional

from .config import SiteConfig
from .jsonld import build_json_ld, format_iso_timestamp, json_ld_script
from .meta import POST, WEBSITE, MetadataRecord
from .site import PageContext

DEFAULT_IMAGE = "/bg_image.jpg"
WEBMENTION_HOST = "https://webmention.io"


@dataclass
class HeadTags:
    """Final values written into the page <head>."""

    title: str
    description: str
    keywords: str
    url: str
    image: str
    type: str
    lang: str
    category: str
    published_time: Optional[str]
    json_ld: str


def canonical_url(config: SiteConfig, meta: Optional[MetadataRecord]) -> str:
    base = config.link.rstrip("/")
    if config.path:
        base = f"{base}/{config.sub_path.strip('/')}".rstrip("/")
    if meta is None:
        return base
    slug = (meta.slug or "").lstrip("/")
    return f"{base}/{slug}"


def build_head_tags(
    meta: Optional[MetadataRecord], ctx: PageContext, config: SiteConfig
) -> HeadTags:
    post = ctx.post
    url = canonical_url(config, meta)

    keywords = config.keywords
    if meta is not None and meta.tags:
        keywords = ",".join(meta.tags)
    if post is not None and post.tags:
        keywords = ",".join(post.tags)

    description = (meta.description if meta else None) or ctx.site_info.description or ""
    published = None
    if meta is not None and meta.type == POST and post is not None:
        published = format_iso_timestamp(post.publish_date)

    return HeadTags(
        title=(meta.title if meta else None) or config.title,
        description=description,
        keywords=keywords,
        url=url,
        image=(meta.image if meta else None) or DEFAULT_IMAGE,
        type=(meta.type if meta else None) or WEBSITE,
        # Open Graph expects locales like zh_CN.
        lang=config.lang.replace("-", "_"),
        category=(meta.category if meta else None) or config.keywords,
        published_time=published,
        json_ld=json_ld_script(build_json_ld(meta, ctx.site_info, post, url, config)),
    )


def _meta_name(name: str, content: str) -> str:
    return f'<meta name="{escape(name)}" content="{escape(content)}" />'


def _meta_property(prop: str, content: str) -> str:
    return f'<meta property="{escape(prop)}" content="{escape(content)}" />'


def _link(rel: str, href: str) -> str:
    return f'<link rel="{escape(rel)}" href="{escape(href)}" />'


def render_head(tags: HeadTags, config: SiteConfig) -> str:
    """Render the SEO part of the document head as newline-separated tags."""
    lines: List[str] = [
        _link("icon", config.favicon),
        f"<title>{escape(tags.title)}</title>",
        _meta_name("theme-color", config.background_dark),
        _meta_name("robots", "follow, index"),
    ]
    if config.seo_google_site_verification:
        lines.append(_meta_name("google-site-verification", config.seo_google_site_verification))
    lines += [
        _meta_name("keywords", tags.keywords),
        _meta_name("description", tags.description),
        _meta_property("og:locale", tags.lang),
        _meta_property("og:title", tags.title),
        _meta_property("og:description", tags.description),
        _meta_property("og:url", tags.url),
        _meta_property("og:image", tags.image),
        _meta_property("og:site_name", tags.title),
        _meta_property("og:type", tags.type),
        _meta_name("twitter:card", "summary_large_image"),
        _meta_name("twitter:description", tags.description),
        _meta_name("twitter:title", tags.title),
        _meta_name("twitter:image", tags.image),
    ]

    if config.comment_webmention_enable:
        host = config.comment_webmention_hostname
        lines.append(_link("webmention", f"{WEBMENTION_HOST}/{host}/webmention"))
        lines.append(_link("pingback", f"{WEBMENTION_HOST}/{host}/xmlrpc"))
        if config.comment_webmention_auth:
            lines.append(_link("me", config.comment_webmention_auth))

    if config.analytics_busuanzi_enable:
        lines.append(_meta_name("referrer", "no-referrer-when-downgrade"))

    if tags.type == POST:
        if tags.published_time:
            lines.append(_meta_property("article:published_time", tags.published_time))
        lines += [
            _meta_property("article:author", config.author),
            _meta_property("article:section", tags.category),
        ]
        if config.facebook_page:
            lines.append(_meta_property("article:publisher", config.facebook_page))

    lines.append(_link("canonical", tags.url))
    lines.append(f'<script type="application/ld+json">{tags.json_ld}</script>')
    return "\n".join(lines)


__all__ = ["HeadTags", "DEFAULT_IMAGE", "build_head_tags", "canonical_url", "render_head"]
