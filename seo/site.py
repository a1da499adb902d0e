import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union


@dataclass
class SiteInfo:
    """Global site information supplied by the content backend."""

    title: Optional[str] = None
    description: Optional[str] = None
    page_cover: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "SiteInfo":
        data = data or {}
        return cls(
            title=data.get("title"),
            description=data.get("description"),
            page_cover=data.get("pageCover", data.get("page_cover")),
        )


@dataclass
class Post:
    title: Optional[str] = None
    summary: Optional[str] = None
    slug: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    category: List[str] = field(default_factory=list)
    publish_date: Any = None
    last_edited_date: Any = None
    page_cover_thumbnail: Optional[str] = None
    type: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Post":
        """Build a post from a backend record (camelCase or snake_case keys)."""
        category = data.get("category") or []
        if isinstance(category, str):
            category = [category]
        return cls(
            title=data.get("title"),
            summary=data.get("summary"),
            slug=data.get("slug"),
            tags=list(data.get("tags") or []),
            category=list(category),
            publish_date=data.get("publishDate", data.get("publish_date")),
            last_edited_date=data.get("lastEditedDate", data.get("last_edited_date")),
            page_cover_thumbnail=data.get(
                "pageCoverThumbnail", data.get("page_cover_thumbnail")
            ),
            type=data.get("type"),
        )


@dataclass
class PageContext:
    """Everything the content layer hands to a page render."""

    site_info: SiteInfo = field(default_factory=SiteInfo)
    post: Optional[Post] = None
    tag: Optional[str] = None
    category: Optional[str] = None
    page: Union[int, str, None] = None
    search_keyword: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PageContext":
        post = data.get("post")
        return cls(
            site_info=SiteInfo.from_dict(data.get("siteInfo", data.get("site_info"))),
            post=Post.from_dict(post) if post else None,
            tag=data.get("tag"),
            category=data.get("category"),
            page=data.get("page"),
            search_keyword=data.get("keyword", data.get("search_keyword")),
        )


DEFAULT_LOCALE: Dict[str, Dict[str, str]] = {
    "NAV": {
        "ARCHIVE": "Archive",
        "SEARCH": "Search",
        "PAGE_NOT_FOUND": "Page not found",
    },
    "COMMON": {
        "TAGS": "Tags",
        "CATEGORY": "Category",
    },
}


class LocaleStrings:
    """
    Read-only label lookup addressed by dotted keys, e.g. ``NAV.ARCHIVE``.

    Labels missing from the supplied locale fall back to the built-in
    en-US strings and finally to an empty string.
    """

    def __init__(self, labels: Optional[Mapping[str, Any]] = None) -> None:
        self._labels: Mapping[str, Any] = labels or {}

    @staticmethod
    def _lookup(labels: Mapping[str, Any], key: str) -> Optional[str]:
        node: Any = labels
        for part in key.split("."):
            if not isinstance(node, Mapping) or part not in node:
                return None
            node = node[part]
        return node if isinstance(node, str) else None

    def get(self, key: str) -> str:
        value = self._lookup(self._labels, key)
        if value is None:
            value = self._lookup(DEFAULT_LOCALE, key)
        return value or ""

    def __getitem__(self, key: str) -> str:
        return self.get(key)

    @classmethod
    def from_file(cls, path: Path) -> "LocaleStrings":
        path = Path(path)
        try:
            labels = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid locale file {path}: {exc}") from exc
        return cls(labels)


__all__ = ["SiteInfo", "Post", "PageContext", "LocaleStrings", "DEFAULT_LOCALE"]
