import sys
import unittest
from pathlib import Path

# Ensure src/ is on sys.path so we can import the package without installation
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from qiitasync.errors import (  # noqa: E402
    MalformedDocumentError,
    MissingTitleError,
    ParseError,
    TypeMismatchError,
)
from qiitasync.frontmatter import parse_markdown, render_markdown  # noqa: E402
from qiitasync.resources.items_types import Article  # noqa: E402
from qiitasync.resources.tags_types import Tag  # noqa: E402


HELLO = """---
title: Hello
tags: go:1.x sample
private: false
---
Body text here."""


def _fields(article: Article):
    return (article.title, article.body, article.private, article.tags)


class ParseMarkdownTests(unittest.TestCase):
    def test_hello_document(self):
        article = parse_markdown(HELLO)
        self.assertEqual(article.title, "Hello")
        self.assertFalse(article.private)
        self.assertEqual(article.tags, (Tag("go", ("1.x",)), Tag("sample", None)))
        self.assertEqual(article.body, "Body text here.")
        self.assertEqual(article.id, "")
        self.assertEqual(article.rendered_body, "")
        self.assertIsNone(article.created_at)
        self.assertIsNone(article.updated_at)

    def test_tags_with_multiple_versions(self):
        article = parse_markdown("---\ntitle: T\ntags: foo:1.0,2.0 bar\n---\n")
        self.assertEqual(article.tags, (Tag("foo", ("1.0", "2.0")), Tag("bar")))

    def test_private_defaults_to_true(self):
        self.assertTrue(parse_markdown("---\ntitle: T\n---\nbody").private)

    def test_missing_tags_and_null_tags(self):
        self.assertEqual(parse_markdown("---\ntitle: T\n---\n").tags, ())
        self.assertEqual(parse_markdown("---\ntitle: T\ntags:\n---\n").tags, ())

    def test_body_is_kept_verbatim(self):
        body = "\n  # Heading\n\nText with --- inside\n---\nmore\n\n"
        article = parse_markdown("---\ntitle: T\n---\n" + body)
        self.assertEqual(article.body, body)

    def test_missing_title(self):
        with self.assertRaises(MissingTitleError):
            parse_markdown("---\nprivate: true\n---\nbody")

    def test_empty_frontmatter_has_no_title(self):
        with self.assertRaises(MissingTitleError):
            parse_markdown("---\n---\nbody")

    def test_title_type_mismatch(self):
        with self.assertRaises(TypeMismatchError) as ctx:
            parse_markdown("---\ntitle: 42\n---\n")
        self.assertEqual(ctx.exception.field, "title")

    def test_private_type_mismatch(self):
        with self.assertRaises(TypeMismatchError):
            parse_markdown("---\ntitle: T\nprivate: maybe\n---\n")

    def test_tags_type_mismatch(self):
        with self.assertRaises(TypeMismatchError):
            parse_markdown("---\ntitle: T\ntags: [go, python]\n---\n")

    def test_frontmatter_not_a_mapping(self):
        with self.assertRaises(TypeMismatchError):
            parse_markdown("---\n- a\n- b\n---\n")

    def test_missing_delimiters(self):
        for text in ["", "title: T\n", "---\ntitle: T\n"]:
            with self.subTest(text=text):
                with self.assertRaises(MalformedDocumentError):
                    parse_markdown(text)

    def test_invalid_yaml(self):
        with self.assertRaises(MalformedDocumentError):
            parse_markdown("---\ntitle: [unclosed\n---\n")

    def test_parse_errors_share_a_base(self):
        for error in (MalformedDocumentError, MissingTitleError, TypeMismatchError):
            self.assertTrue(issubclass(error, ParseError))

    def test_preamble_is_discarded_with_warning(self):
        with self.assertLogs("qiitasync.frontmatter", level="WARNING"):
            article = parse_markdown("stray\n---\ntitle: T\n---\nbody")
        self.assertEqual(article.title, "T")
        self.assertEqual(article.body, "body")


class RenderMarkdownTests(unittest.TestCase):
    def test_render_fixed_layout(self):
        article = Article(
            title="Hello",
            body="Body text here.",
            private=False,
            tags=(Tag("go", ("1.x",)), Tag("sample")),
        )
        self.assertEqual(
            render_markdown(article),
            "---\ntitle: Hello\ntags: go:1.x sample\nprivate: false\n---\nBody text here.",
        )

    def test_render_ignores_remote_fields(self):
        local = Article(title="T", body="b")
        remote = Article(title="T", body="b", id="abc", rendered_body="<p>b</p>")
        self.assertEqual(render_markdown(local), render_markdown(remote))

    def test_render_without_tags(self):
        text = render_markdown(Article(title="T", body="b"))
        self.assertIn("private: true\n", text)
        self.assertEqual(parse_markdown(text).tags, ())

    def test_render_quotes_delimiter_like_values(self):
        article = Article(title="a---", body="body", tags=(Tag("c---"),))
        text = render_markdown(article)
        self.assertEqual(text.count("---\n"), 2)
        self.assertEqual(_fields(parse_markdown(text)), _fields(article))

    def test_round_trip(self):
        documents = [
            HELLO,
            "---\ntitle: T\n---\n",
            "---\ntitle: 'Colons: and # hashes'\ntags: 'foo:1.0,2.0 bar go:'\n---\n\nbody\n",
            "---\ntitle: 'true'\nprivate: true\ntags: 'yes'\n---\n  indented\n",
            "---\ntitle: こんにちは\n---\n本文\n",
            "---\ntitle: 'a---'\n---\nbody",
            "---\ntitle: T\ntags: 'c---'\n---\nbody",
            "---\ntitle: '---'\ntags: 'x:--- y'\n---\nbody",
        ]
        for text in documents:
            with self.subTest(text=text):
                first = parse_markdown(text)
                second = parse_markdown(render_markdown(first))
                self.assertEqual(_fields(second), _fields(first))


if __name__ == "__main__":
    unittest.main()
