"""Tests for head tag rendering and the document shell."""

import json
import re
import unittest

from seo.config import SiteConfig
from seo.document import render_document
from seo.head import DEFAULT_IMAGE, build_head_tags, canonical_url, render_head
from seo.meta import MetadataRecord, resolve
from seo.site import PageContext, Post, SiteInfo


SITE = SiteInfo(title="Blog", description="A blog", page_cover="/cover.png")


def _config(**overrides) -> SiteConfig:
    values = dict(
        title="Blog",
        author="Ada",
        link="https://blog.example",
        keywords="notes,blog",
        lang="zh-CN",
        favicon="/icon.png",
    )
    values.update(overrides)
    return SiteConfig(**values)


def _post_ctx() -> PageContext:
    post = Post(
        title="Hello",
        summary='Say "hi" & <wave>',
        slug="article/hello",
        tags=["rust", "systems"],
        category=["Programming"],
        publish_date="2024-01-01",
        last_edited_date="2024-01-02",
        type="Post",
    )
    return PageContext(site_info=SITE, post=post)


class TestCanonicalUrl(unittest.TestCase):
    def test_slug_appended_to_link(self):
        meta = MetadataRecord(title="t", slug="tag/rust")
        self.assertEqual(canonical_url(_config(), meta), "https://blog.example/tag/rust")

    def test_home_has_trailing_slash(self):
        meta = MetadataRecord(title="t", slug="")
        self.assertEqual(canonical_url(_config(), meta), "https://blog.example/")

    def test_sub_path_used_when_path_set(self):
        config = _config(path="/blog", sub_path="blog")
        meta = MetadataRecord(title="t", slug="archive")
        self.assertEqual(canonical_url(config, meta), "https://blog.example/blog/archive")

    def test_no_meta(self):
        self.assertEqual(canonical_url(_config(), None), "https://blog.example")


class TestBuildHeadTags(unittest.TestCase):
    def test_post_values(self):
        ctx = _post_ctx()
        config = _config()
        meta = resolve("/[prefix]/[slug]", {}, ctx, config=config)
        tags = build_head_tags(meta, ctx, config)
        self.assertEqual(tags.keywords, "rust,systems")
        self.assertEqual(tags.lang, "zh_CN")
        self.assertEqual(tags.category, "Programming")
        self.assertEqual(tags.type, "Post")
        self.assertEqual(tags.image, "/cover.png")
        self.assertEqual(tags.url, "https://blog.example/article/hello")
        self.assertEqual(tags.published_time, "2024-01-01T00:00:00.000Z")
        self.assertEqual(json.loads(tags.json_ld)["@type"], "BlogPosting")

    def test_fallbacks(self):
        ctx = PageContext(site_info=SITE)
        meta = MetadataRecord(title="", image=None)
        tags = build_head_tags(meta, ctx, _config())
        self.assertEqual(tags.title, "Blog")
        self.assertEqual(tags.description, "A blog")
        self.assertEqual(tags.image, DEFAULT_IMAGE)
        self.assertEqual(tags.type, "website")
        self.assertEqual(tags.keywords, "notes,blog")
        self.assertEqual(tags.category, "notes,blog")
        self.assertIsNone(tags.published_time)


class TestRenderHead(unittest.TestCase):
    def test_open_graph_and_twitter_tags(self):
        ctx = PageContext(site_info=SITE)
        config = _config()
        meta = resolve("/tag/[tag]", {"tag": "rust"}, ctx, config=config)
        html = render_head(build_head_tags(meta, ctx, config), config)
        self.assertIn("<title>rust | Tags | Blog</title>", html)
        self.assertIn('<meta property="og:url" content="https://blog.example/tag/rust" />', html)
        self.assertIn('<meta property="og:type" content="website" />', html)
        self.assertIn('<meta property="og:locale" content="zh_CN" />', html)
        self.assertIn('<meta name="twitter:card" content="summary_large_image" />', html)
        self.assertIn('<link rel="canonical" href="https://blog.example/tag/rust" />', html)
        self.assertNotIn("article:", html)
        self.assertNotIn("google-site-verification", html)
        self.assertNotIn("webmention", html)

    def test_post_article_tags_and_escaping(self):
        ctx = _post_ctx()
        config = _config(facebook_page="https://facebook.com/blog")
        meta = resolve("/[prefix]/[slug]", {}, ctx, config=config)
        html = render_head(build_head_tags(meta, ctx, config), config)
        self.assertIn('content="Say &quot;hi&quot; &amp; &lt;wave&gt;"', html)
        self.assertIn('<meta property="article:published_time" content="2024-01-01T00:00:00.000Z" />', html)
        self.assertIn('<meta property="article:author" content="Ada" />', html)
        self.assertIn('<meta property="article:section" content="Programming" />', html)
        self.assertIn('<meta property="article:publisher" content="https://facebook.com/blog" />', html)

    def test_optional_integrations(self):
        config = _config(
            seo_google_site_verification="g-token",
            comment_webmention_enable=True,
            comment_webmention_hostname="blog.example",
            comment_webmention_auth="https://github.com/ada",
            analytics_busuanzi_enable=True,
        )
        ctx = PageContext(site_info=SITE)
        html = render_head(build_head_tags(resolve("/", {}, ctx), ctx, config), config)
        self.assertIn('<meta name="google-site-verification" content="g-token" />', html)
        self.assertIn('<link rel="webmention" href="https://webmention.io/blog.example/webmention" />', html)
        self.assertIn('<link rel="pingback" href="https://webmention.io/blog.example/xmlrpc" />', html)
        self.assertIn('<link rel="me" href="https://github.com/ada" />', html)
        self.assertIn('<meta name="referrer" content="no-referrer-when-downgrade" />', html)

    def test_json_ld_script_is_embedded_once(self):
        ctx = PageContext(site_info=SITE)
        config = _config()
        html = render_head(build_head_tags(resolve("/", {}, ctx), ctx, config), config)
        scripts = re.findall(r'<script type="application/ld\+json">(.*?)</script>', html)
        self.assertEqual(len(scripts), 1)
        self.assertEqual(json.loads(scripts[0])["@type"], "WebSite")


class TestRenderDocument(unittest.TestCase):
    def test_shell(self):
        html = render_document(_config(), "<title>T</title>", "<main>Body</main>")
        self.assertTrue(html.startswith("<!DOCTYPE html>\n"))
        self.assertIn('<html lang="zh-CN">', html)
        self.assertIn("  <title>T</title>\n", html)
        self.assertIn("  <main>Body</main>\n", html)
        self.assertNotIn("baidu-site-verification", html)
        self.assertNotIn("preload", html)

    def test_font_awesome_and_baidu(self):
        config = _config(
            font_awesome="https://cdn.example/fa.css",
            seo_baidu_site_verification="b-token",
        )
        html = render_document(config, "")
        self.assertIn('<link rel="preload" href="https://cdn.example/fa.css" as="style"', html)
        self.assertIn('<link rel="stylesheet" href="https://cdn.example/fa.css"', html)
        self.assertIn('<meta name="baidu-site-verification" content="b-token" />', html)


if __name__ == "__main__":
    unittest.main()
