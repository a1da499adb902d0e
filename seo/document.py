from html import escape
from typing import List

from .config import SiteConfig


def _indent(block: str, prefix: str) -> str:
    return "".join(f"{prefix}{line}\n" for line in block.splitlines() if line.strip())


def render_document(config: SiteConfig, head_html: str, body_html: str = "") -> str:
    """
    Render the root HTML document around an already rendered head and body.

    - Declares the site language on <html>.
    - Preloads the Font Awesome stylesheet when one is configured.
    - Carries the Baidu site verification tag, which must live in the root document.
    """
    shell_parts: List[str] = [
        '  <meta charset="utf-8" />\n',
        '  <meta name="viewport" content="width=device-width, initial-scale=1" />\n',
    ]
    if config.font_awesome:
        href = escape(config.font_awesome)
        shell_parts.append(
            f'  <link rel="preload" href="{href}" as="style" crossorigin="anonymous" />\n'
        )
        shell_parts.append(
            f'  <link rel="stylesheet" href="{href}" crossorigin="anonymous"'
            ' referrerpolicy="no-referrer" />\n'
        )
    if config.seo_baidu_site_verification:
        shell_parts.append(
            '  <meta name="baidu-site-verification" content="'
            f'{escape(config.seo_baidu_site_verification)}'
            '" />\n'
        )

    return (
        "<!DOCTYPE html>\n"
        f'<html lang="{escape(config.lang)}">\n'
        "<head>\n"
        + "".join(shell_parts)
        + _indent(head_html, "  ")
        + "</head>\n"
        "<body>\n"
        + _indent(body_html, "  ")
        + "</body>\n"
        "</html>\n"
    )


__all__ = ["render_document"]
