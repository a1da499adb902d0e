import json
import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping, Optional


logger = logging.getLogger(__name__)

# Every field can be overridden with BLOG_<FIELD NAME IN UPPER CASE>, e.g.
# BLOG_LINK=https://example.com or BLOG_COMMENT_WEBMENTION_ENABLE=true.
ENV_PREFIX = "BLOG_"

_TRUTHY = {"1", "true", "yes", "on"}

# Backend keys whose names differ from the field they set.
_KEY_ALIASES = {"blog_favicon": "favicon"}


@dataclass(frozen=True)
class SiteConfig:
    """
    Site-wide configuration passed explicitly to every renderer.

    Values come from the defaults below, then an optional JSON file, then
    ``BLOG_*`` environment variables. The content backend can layer its own
    settings on top with :meth:`with_overrides`.
    """

    title: str = "My Blog"
    author: str = ""
    link: str = "http://localhost:3000"
    description: str = ""
    keywords: str = ""
    lang: str = "en-US"
    path: str = ""
    sub_path: str = ""
    favicon: str = "/favicon.ico"
    background_dark: str = "#000000"
    font_awesome: str = ""
    seo_google_site_verification: str = ""
    seo_baidu_site_verification: str = ""
    comment_webmention_enable: bool = False
    comment_webmention_hostname: str = ""
    comment_webmention_auth: str = ""
    analytics_busuanzi_enable: bool = False
    facebook_page: str = ""

    @staticmethod
    def _coerce(name: str, value: Any) -> Any:
        default = getattr(SiteConfig, name)
        if isinstance(default, bool):
            if isinstance(value, str):
                return value.strip().lower() in _TRUTHY
            return bool(value)
        return "" if value is None else str(value)

    def with_overrides(self, overrides: Optional[Mapping[str, Any]]) -> "SiteConfig":
        """Return a copy with upper- or lower-case keys from ``overrides`` applied."""
        if not overrides:
            return self
        known = {f.name for f in fields(self)}
        changes = {}
        for key, value in overrides.items():
            name = key.lower()
            name = _KEY_ALIASES.get(name, name)
            if name not in known:
                logger.debug("Ignoring unknown site config key %s.", key)
                continue
            changes[name] = self._coerce(name, value)
        return replace(self, **changes)

    @classmethod
    def from_env(cls, base: Optional["SiteConfig"] = None) -> "SiteConfig":
        base = base or cls()
        env = {}
        for f in fields(cls):
            value = os.getenv(ENV_PREFIX + f.name.upper())
            if value is not None:
                env[f.name] = value
        return base.with_overrides(env)

    @classmethod
    def from_file(cls, path: Path) -> "SiteConfig":
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Missing site config file: {path}")
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid site config file {path}: {exc}") from exc
        if not isinstance(raw, dict):
            raise ValueError(f"Site config file {path} must contain a JSON object.")
        return cls().with_overrides(raw)


def load_site_config(path: Optional[Path] = None) -> SiteConfig:
    base = SiteConfig.from_file(path) if path else SiteConfig()
    return SiteConfig.from_env(base)


__all__ = ["SiteConfig", "load_site_config", "ENV_PREFIX"]
