"""Markdown parser with bicapitalized wiki word support."""

import re
from enum import Enum
from typing import Callable
from xml.etree.ElementTree import Element

from markdown import Markdown
from markdown.extensions import Extension
from markdown.inlinepatterns import InlineProcessor, SimpleTagInlineProcessor
from markdown.util import AtomicString


class LinkStatus(str, Enum):
    """CSS class given to a wiki word link."""

    EXISTS = "exists"
    UNKNOWN = "unknown"


# Pattern for wiki words: two or more capitalized fragments, e.g. HomePage
WIKI_WORD_PATTERN = r"\b([A-Z][a-z]+[A-Z][A-Za-z0-9]+)\b"

# Pattern for strikethrough: ~~text~~
# Group 2 must contain the text (SimpleTagInlineProcessor expectation)
STRIKETHROUGH_PATTERN = r"(~~)(.*?)~~"


class StrikethroughExtension(Extension):
    """Markdown extension for ~~strikethrough~~ text."""

    def extendMarkdown(self, md: Markdown) -> None:
        """Add strikethrough pattern to markdown parser."""
        md.inlinePatterns.register(
            SimpleTagInlineProcessor(STRIKETHROUGH_PATTERN, "del"),
            "strikethrough",
            50,
        )


class WikiWordInlineProcessor(InlineProcessor):
    """Inline processor turning wiki words into page links.

    Words that are already part of a link's text are left as they are.
    """

    ANCESTOR_EXCLUDES = ("a",)

    def __init__(
        self, pattern: str, md: Markdown, classify: Callable[[str], LinkStatus]
    ):
        super().__init__(pattern, md)
        self.classify = classify

    def handleMatch(self, m: re.Match, data: str) -> tuple[Element | None, int, int]:
        """Convert wiki word match to HTML anchor element."""
        page_name = m.group(1)

        el = Element("a")
        el.text = AtomicString(page_name)
        el.set("class", LinkStatus(self.classify(page_name)).value)
        el.set("href", f"/{page_name}")

        return el, m.start(0), m.end(0)


class WikiWordExtension(Extension):
    """Markdown extension for bicapitalized wiki words."""

    def __init__(
        self, classify: Callable[[str], LinkStatus] | None = None, **kwargs
    ):
        self.classify = classify or (lambda x: LinkStatus.EXISTS)
        super().__init__(**kwargs)

    def extendMarkdown(self, md: Markdown) -> None:
        """Add wiki word pattern to markdown parser."""
        wiki_word_processor = WikiWordInlineProcessor(
            WIKI_WORD_PATTERN,
            md,
            self.classify,
        )
        # Below backticks (190) so code spans are left alone
        md.inlinePatterns.register(wiki_word_processor, "wiki_word", 75)


def create_parser(classify: Callable[[str], LinkStatus] | None = None) -> Markdown:
    """Create a Markdown parser with wiki word support.

    Args:
        classify: Callback deciding whether a referenced page exists.
                  Used to style unknown page links differently.

    Returns:
        Configured Markdown parser instance.
    """
    return Markdown(
        extensions=[
            "extra",  # Includes: abbreviations, attr_list, def_list, fenced_code, footnotes, md_in_html, tables
            "sane_lists",
            "pymdownx.tasklist",
            StrikethroughExtension(),
            WikiWordExtension(classify=classify),
        ]
    )


def parse_wiki_content(
    content: str,
    classify: Callable[[str], LinkStatus] | None = None,
) -> str:
    """Parse wiki content (Markdown + wiki words) to HTML.

    Args:
        content: Markdown content with wiki words.
        classify: Callback classifying referenced pages.

    Returns:
        HTML string.
    """
    parser = create_parser(classify)
    return parser.convert(content)


def extract_wiki_words(content: str) -> list[str]:
    """Extract referenced page names in order of first appearance."""
    return list(dict.fromkeys(re.findall(WIKI_WORD_PATTERN, content)))
