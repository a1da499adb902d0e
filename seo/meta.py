import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from .config import SiteConfig
from .routes import RouteId
from .site import LocaleStrings, PageContext

logger = logging.getLogger(__name__)

WEBSITE = "website"
POST = "Post"


@dataclass
class MetadataRecord:
    """Per-page SEO metadata consumed by the head renderer and JSON-LD builder."""

    title: str
    description: Optional[str] = None
    image: Optional[str] = None
    slug: Optional[str] = None
    type: Optional[str] = None
    category: Optional[str] = None
    tags: List[str] = field(default_factory=list)


@dataclass
class _RouteInputs:
    params: Mapping[str, Any]
    ctx: PageContext
    locale: LocaleStrings
    config: Optional[SiteConfig]

    @property
    def site_title(self) -> str:
        return _text(self.ctx.site_info.title)

    @property
    def site_description(self) -> str:
        return _text(self.ctx.site_info.description)

    @property
    def cover(self) -> str:
        return _text(self.ctx.site_info.page_cover)

    def value(self, name: str) -> str:
        """Route segment from the router params, falling back to the page context."""
        value = self.params.get(name)
        if value is None:
            value = getattr(self.ctx, name, None)
        return _text(value)

    @property
    def keyword(self) -> str:
        for value in (self.params.get("keyword"), self.params.get("s"), self.ctx.search_keyword):
            if value:
                return str(value)
        return ""

    def listing(self, title: str, slug: str, description: Optional[str] = None) -> MetadataRecord:
        return MetadataRecord(
            title=title,
            description=self.site_description if description is None else description,
            image=self.cover,
            slug=slug,
            type=WEBSITE,
        )


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _search_title(inputs: _RouteInputs) -> str:
    keyword = inputs.keyword
    prefix = f"{keyword} | " if keyword else ""
    return f"{prefix}{inputs.locale['NAV.SEARCH']} | {inputs.site_title}"


def _home(inputs: _RouteInputs) -> MetadataRecord:
    return inputs.listing(f"{inputs.site_title} | {inputs.site_description}", "")


def _archive(inputs: _RouteInputs) -> MetadataRecord:
    return inputs.listing(f"{inputs.locale['NAV.ARCHIVE']} | {inputs.site_title}", "archive")


def _page(inputs: _RouteInputs) -> MetadataRecord:
    page = inputs.value("page")
    return inputs.listing(f"{page} | Page | {inputs.site_title}", f"page/{page}")


def _category(inputs: _RouteInputs) -> MetadataRecord:
    category = inputs.value("category")
    return inputs.listing(
        f"{category} | {inputs.locale['COMMON.CATEGORY']} | {inputs.site_title}",
        f"category/{category}",
    )


def _tag(inputs: _RouteInputs) -> MetadataRecord:
    tag = inputs.value("tag")
    return inputs.listing(
        f"{tag} | {inputs.locale['COMMON.TAGS']} | {inputs.site_title}",
        f"tag/{tag}",
    )


def _search(inputs: _RouteInputs) -> MetadataRecord:
    return inputs.listing(_search_title(inputs), "search")


def _search_keyword(inputs: _RouteInputs) -> MetadataRecord:
    configured = inputs.config.title if inputs.config else inputs.site_title
    return inputs.listing(
        _search_title(inputs), f"search/{inputs.keyword}", description=configured
    )


def _not_found(inputs: _RouteInputs) -> MetadataRecord:
    return MetadataRecord(
        title=f"{inputs.site_title} | {inputs.locale['NAV.PAGE_NOT_FOUND']}",
        image=inputs.cover,
    )


def _tag_index(inputs: _RouteInputs) -> MetadataRecord:
    return inputs.listing(f"{inputs.locale['COMMON.TAGS']} | {inputs.site_title}", "tag")


def _category_index(inputs: _RouteInputs) -> MetadataRecord:
    return inputs.listing(
        f"{inputs.locale['COMMON.CATEGORY']} | {inputs.site_title}", "category"
    )


def _post_detail(inputs: _RouteInputs) -> MetadataRecord:
    post = inputs.ctx.post
    if post is None:
        # Content for the slug has not been fetched yet.
        return MetadataRecord(title=f"{inputs.site_title} | loading", image=inputs.cover)
    return MetadataRecord(
        title=f"{_text(post.title)} | {inputs.site_title}",
        description=post.summary,
        image=post.page_cover_thumbnail or inputs.cover,
        slug=post.slug,
        type=post.type,
        category=post.category[0] if post.category else None,
        tags=list(post.tags),
    )


_RESOLVERS: Dict[RouteId, Callable[[_RouteInputs], MetadataRecord]] = {
    RouteId.HOME: _home,
    RouteId.ARCHIVE: _archive,
    RouteId.PAGE: _page,
    RouteId.CATEGORY: _category,
    RouteId.CATEGORY_PAGE: _category,
    RouteId.TAG: _tag,
    RouteId.TAG_PAGE: _tag,
    RouteId.SEARCH: _search,
    RouteId.SEARCH_KEYWORD: _search_keyword,
    RouteId.SEARCH_KEYWORD_PAGE: _search_keyword,
    RouteId.NOT_FOUND: _not_found,
    RouteId.TAG_INDEX: _tag_index,
    RouteId.CATEGORY_INDEX: _category_index,
    RouteId.POST_DETAIL: _post_detail,
}

_missing = set(RouteId) - set(_RESOLVERS)
if _missing:
    raise RuntimeError(f"No metadata resolver for routes: {sorted(r.name for r in _missing)}")


def resolve(
    route: Union[RouteId, str],
    params: Optional[Mapping[str, Any]],
    ctx: PageContext,
    locale: Optional[LocaleStrings] = None,
    config: Optional[SiteConfig] = None,
) -> MetadataRecord:
    """
    Resolve the SEO metadata for one page render.

    Never raises for missing data: absent fields are rendered as empty
    strings so every route still yields a usable, non-empty title.
    """
    route_id = RouteId.from_pattern(route)
    inputs = _RouteInputs(
        params=params or {},
        ctx=ctx,
        locale=locale or LocaleStrings(),
        config=config,
    )
    meta = _RESOLVERS[route_id](inputs)
    logger.debug("Resolved %s -> %r (slug=%r).", route_id.name, meta.title, meta.slug)
    return meta


__all__ = ["MetadataRecord", "resolve", "WEBSITE", "POST"]
