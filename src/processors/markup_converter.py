# File: src/processors/markup_converter.py
"""
Converts calendar event descriptions (a small HTML subset) into Discord markdown.

This is a best-effort rewrite, not an HTML parser. The rules below run in the
order they are declared and each one sees the output of the previous one:

    1. <br>                      -> newline
    2. <li>                      -> newline + bullet
    3. <b>, <u>, <i> pairs       -> **, __, * (delimiters hug the text)
    4. <a ... href="url">text</a> -> [text](url)
    5. </p>, </div>, </hN>       -> newline
    6. any other tag             -> removed
    7. &amp; &lt; &gt; &nbsp;    -> literal characters

Known limitation: mixed or overlapping emphasis tags without whitespace between
them (e.g. "<b>bold<i>both</b>italic</i>") can produce markdown that Discord
does not render as intended. The output shape is kept as is.
"""

import re
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Union

from src.utils.logger import setup_logger

logger = setup_logger(__name__)

HTML_ENTITIES = {
    "&amp;": "&",
    "&lt;": "<",
    "&gt;": ">",
    "&nbsp;": " ",
}

Replacement = Union[str, Callable[[re.Match], str]]


@dataclass(frozen=True)
class MarkupRule:
    """A single regex rewrite step."""
    name: str
    pattern: re.Pattern
    replacement: Replacement

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


def _replace_entity(match: re.Match) -> str:
    """Decode the handful of entities we know; leave anything else untouched."""
    entity = match.group(0)
    return HTML_ENTITIES.get(entity, entity)


def _emphasis_rules(tag: str, delimiter: str) -> Sequence[MarkupRule]:
    """
    Open/close rules for one emphasis tag.

    Whitespace next to the tag is moved outside the delimiter, otherwise
    Discord will not render "** bold **" as bold.
    """
    return (
        MarkupRule(
            f"{tag}-open",
            re.compile(rf"<{tag}>(\s*)", re.IGNORECASE),
            lambda m, d=delimiter: m.group(1) + d,
        ),
        MarkupRule(
            f"{tag}-close",
            re.compile(rf"(\s*)</{tag}>", re.IGNORECASE),
            lambda m, d=delimiter: d + m.group(1),
        ),
    )


DEFAULT_RULES: Sequence[MarkupRule] = (
    MarkupRule("line-break", re.compile(r"<br\s*/?>", re.IGNORECASE), "\n"),
    # Ordered lists get bullets too; numbering them is not worth the effort
    MarkupRule("list-item", re.compile(r"<li>", re.IGNORECASE), "\n• "),
    *_emphasis_rules("b", "**"),
    *_emphasis_rules("u", "__"),
    *_emphasis_rules("i", "*"),
    MarkupRule(
        "link",
        re.compile(r'<a[^>]* href="([^"]+)"[^>]*>(.+?)</a>', re.IGNORECASE),
        r"[\2](\1)",
    ),
    # Inline divs will get a stray newline; acceptable
    MarkupRule("block-end", re.compile(r"</(div|p|h\d)>", re.IGNORECASE), "\n"),
    MarkupRule("leftover-tag", re.compile(r"<[^>]*>"), ""),
    MarkupRule("entity", re.compile(r"&[^&;\s]+;"), _replace_entity),
)


class MarkupConverter:
    """Applies the markup rules in their declared order."""

    def __init__(self, rules: Sequence[MarkupRule] = DEFAULT_RULES):
        self.rules = tuple(rules)

    def convert(self, markup: Optional[str]) -> str:
        """
        Convert an HTML event description to Discord markdown.

        Args:
            markup: Description HTML, may be None or empty

        Returns:
            Converted text; never raises on malformed markup
        """
        # Fast exit if the description is empty
        if not markup:
            return ""

        text = markup
        for rule in self.rules:
            text = rule.apply(text)

        logger.debug(f"Converted {len(markup)} chars of markup into {len(text)} chars")
        return text


_default_converter = MarkupConverter()


def convert_markup(markup: Optional[str]) -> str:
    """Convert using the default rule set."""
    return _default_converter.convert(markup)
