import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from seo.config import SiteConfig, load_site_config
from seo.document import render_document
from seo.head import build_head_tags, render_head
from seo.meta import resolve
from seo.site import LocaleStrings, PageContext


BASE_DIR = Path(__file__).parent
DATA_DIR = BASE_DIR / "data"
SITE_CONFIG_FILE = Path(os.getenv("BLOG_SITE_CONFIG", DATA_DIR / "site.json"))


def setup_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def render_page(
    route: str,
    params: Optional[Mapping[str, Any]],
    context: Mapping[str, Any],
    config: SiteConfig,
    locale: Optional[LocaleStrings] = None,
    body_html: str = "",
) -> str:
    """Render one full HTML document for a page described by backend JSON."""
    ctx = PageContext.from_dict(context)
    # Settings published by the content backend win over the local config in
    # the head. The document shell only reads the static site config.
    page_config = config.with_overrides(context.get("config"))
    meta = resolve(route, params, ctx, locale, page_config)
    tags = build_head_tags(meta, ctx, page_config)
    return render_document(config, render_head(tags, page_config), body_html)


def load_page_file(path: Path) -> Dict[str, Any]:
    try:
        return json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid page file {path}: {exc}") from exc


def load_locale(source: Any, base_dir: Path) -> LocaleStrings:
    """Locale labels given inline in the page file or as a path relative to it."""
    if isinstance(source, str):
        return LocaleStrings.from_file(base_dir / source)
    return LocaleStrings(source)


def main(argv: Optional[list] = None) -> int:
    setup_logging()
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        logging.error("Usage: python main.py PAGE_JSON")
        return 2

    page = load_page_file(Path(argv[0]))
    config = load_site_config(SITE_CONFIG_FILE if SITE_CONFIG_FILE.exists() else None)
    locale = load_locale(page.get("locale"), Path(argv[0]).parent)

    route = page.get("route", "/")
    logging.info("Rendering %s.", route)
    html = render_page(
        route,
        page.get("params"),
        page.get("context", {}),
        config,
        locale,
        page.get("body", ""),
    )
    sys.stdout.write(html)
    return 0


if __name__ == "__main__":
    sys.exit(main())
