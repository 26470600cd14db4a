"""
Content extraction from parsed HTML documents.

This module turns markup into the signals the analysis stages need:
- Visible text (title, description, headings, navigation, main content)
- Body text in original case, for keyword and phrase extraction
- Document language
- An audit of SEO markup already present
- A short content summary

Selector helpers are fail-soft: a selector that does not compile is
logged and treated as matching nothing, so one bad expression never
aborts the analysis of a document.
"""

import json
import logging
import re
from dataclasses import dataclass
from typing import Iterator, Optional

import soupsieve
from bs4 import (
    BeautifulSoup,
    CData,
    Comment,
    Declaration,
    Doctype,
    ProcessingInstruction,
)
from bs4.builder import ParserRejectedMarkup
from bs4.element import Tag

from .config import AnalysisConfig
from .models import ExistingSeoAudit

logger = logging.getLogger(__name__)

# Elements whose text never counts as page content
SKIPPED_TAGS = ["script", "style", "noscript"]

# Non-content string types produced by the parser
_NON_TEXT_STRINGS = (Comment, CData, Declaration, Doctype, ProcessingInstruction)

# Text sources used for classification, in extraction order
TEXT_SOURCE_SELECTORS = (
    "h1",
    "h2",
    "h3",
    "nav a, header a",
    "main, article, section, .content",
)

SENTENCE_SPLIT = re.compile(r"[.!?]")


class AnalysisError(Exception):
    """Raised when a document cannot be analyzed."""
    pass


class DocumentParseError(AnalysisError):
    """Raised when markup cannot be parsed into a queryable document."""
    pass


class InvalidDocumentError(AnalysisError):
    """Raised when the input is not usable markup (wrong type or blank)."""
    pass


@dataclass(frozen=True)
class ParsedDocument:
    """Markup together with its parsed tree. Stages must not mutate ``soup``."""
    markup: str
    soup: BeautifulSoup


def parse_document(markup: str) -> ParsedDocument:
    """
    Parse markup into a queryable document.

    Args:
        markup: Raw HTML text, already read by the caller.

    Returns:
        ParsedDocument wrapping the markup and its BeautifulSoup tree.

    Raises:
        InvalidDocumentError: If markup is not a string or is blank.
        DocumentParseError: If the parser rejects the markup or no
            elements could be recovered from it.
    """
    if not isinstance(markup, str):
        raise InvalidDocumentError(
            f"Expected markup text, got {type(markup).__name__}"
        )
    if not markup.strip():
        raise InvalidDocumentError("Document is empty")

    try:
        soup = BeautifulSoup(markup, "lxml")
    except ParserRejectedMarkup as e:
        raise DocumentParseError(f"Failed to parse HTML: {e}") from e

    if soup.find() is None:
        raise DocumentParseError("Failed to parse HTML: no elements found")

    return ParsedDocument(markup=markup, soup=soup)


# ---------------------------------------------------------------------------
# Selector helpers
# ---------------------------------------------------------------------------

def select_all(soup: BeautifulSoup, selector: str) -> list[Tag]:
    """Return every element matching selector, or [] if it does not compile."""
    try:
        return soup.select(selector)
    except soupsieve.SelectorSyntaxError as e:
        logger.debug(f"Invalid selector {selector!r} treated as absent: {e}")
        return []


def select_first(soup: BeautifulSoup, selector: str) -> Optional[Tag]:
    """Return the first element matching selector, if any."""
    try:
        return soup.select_one(selector)
    except soupsieve.SelectorSyntaxError as e:
        logger.debug(f"Invalid selector {selector!r} treated as absent: {e}")
        return None


def has_match(soup: BeautifulSoup, selector: str) -> bool:
    """Check whether any element matches selector."""
    return select_first(soup, selector) is not None


def count_matches(soup: BeautifulSoup, selector: str) -> int:
    """Count elements matching selector."""
    return len(select_all(soup, selector))


def get_attr(soup: BeautifulSoup, selector: str, attr: str) -> Optional[str]:
    """Return an attribute of the first element matching selector."""
    element = select_first(soup, selector)
    if element is None:
        return None
    value = element.get(attr)
    if isinstance(value, list):
        # Multi-valued attributes (class, rel) come back as lists
        value = " ".join(value)
    return value


def get_text(soup: BeautifulSoup, selector: str) -> Optional[str]:
    """Return the stripped visible text of the first element matching selector."""
    element = select_first(soup, selector)
    if element is None:
        return None
    return element_text(element).strip()


def iter_visible_strings(element: Tag) -> Iterator[str]:
    """Yield text nodes under element, skipping comments and script/style content."""
    for string in element.find_all(string=True):
        if isinstance(string, _NON_TEXT_STRINGS):
            continue
        if string.find_parent(SKIPPED_TAGS) is not None:
            continue
        yield str(string)


def element_text(element: Tag) -> str:
    """Concatenate the visible text of element."""
    return "".join(iter_visible_strings(element))


# ---------------------------------------------------------------------------
# Text extraction
# ---------------------------------------------------------------------------

def extract_classification_text(document: ParsedDocument) -> str:
    """
    Extract lower-cased text used for business classification.

    Concatenates, in order: title, meta description, H1-H3 text,
    navigation/header link text, and main content regions.

    Args:
        document: Parsed document.

    Returns:
        Lower-cased text with one space after every piece.
    """
    soup = document.soup
    pieces: list[str] = []

    title = select_first(soup, "title")
    if title is not None:
        pieces.append(element_text(title))

    description = get_attr(soup, "meta[name='description']", "content")
    if description is not None:
        pieces.append(description)

    for selector in TEXT_SOURCE_SELECTORS:
        for element in select_all(soup, selector):
            pieces.append(element_text(element))

    return "".join(f"{piece} " for piece in pieces).lower()


def extract_body_text(document: ParsedDocument) -> str:
    """
    Extract body text in original case, followed by title and description.

    Script, style and noscript content is excluded. Whitespace is
    collapsed to single spaces.

    Args:
        document: Parsed document.

    Returns:
        Normalized text suitable for tokenization and phrase detection.
    """
    soup = document.soup
    parts: list[str] = []

    body = soup.body
    if body is not None:
        parts.extend(iter_visible_strings(body))

    title = select_first(soup, "title")
    if title is not None:
        parts.append(element_text(title))

    description = get_attr(soup, "meta[name='description']", "content")
    if description:
        parts.append(description)

    return " ".join(" ".join(parts).split())


def detect_language(document: ParsedDocument) -> Optional[str]:
    """
    Detect the document language.

    Checks the root ``lang`` attribute first, then a content-language
    meta declaration. Regional subtags are dropped ("en-US" -> "en").

    Returns:
        Primary language code, or None if undeclared.
    """
    soup = document.soup

    candidates = (
        get_attr(soup, "html", "lang"),
        get_attr(soup, "meta[http-equiv='content-language' i]", "content"),
    )
    for value in candidates:
        if value and value.strip():
            return value.strip().split("-")[0]

    return None


def summarize_content(text: str, config: Optional[AnalysisConfig] = None) -> Optional[str]:
    """
    Build a short summary from the first meaningful sentences of text.

    Args:
        text: Extracted text.
        config: Analysis configuration (sentence count and length bounds).

    Returns:
        Up to ``summary_sentences`` sentences joined with ". ", or None
        when no sentence qualifies.
    """
    config = config or AnalysisConfig()
    low, high = config.summary_sentence_length

    sentences = []
    for sentence in SENTENCE_SPLIT.split(text):
        sentence = sentence.strip()
        if low < len(sentence) < high:
            sentences.append(sentence)
            if len(sentences) == config.summary_sentences:
                break

    return ". ".join(sentences) or None


# ---------------------------------------------------------------------------
# SEO audit
# ---------------------------------------------------------------------------

def audit_existing_seo(document: ParsedDocument) -> ExistingSeoAudit:
    """
    Audit the SEO markup already present in a document.

    Args:
        document: Parsed document.

    Returns:
        ExistingSeoAudit with presence flags, counters and found text.
    """
    soup = document.soup

    title = get_text(soup, "title") or None
    description = get_attr(soup, "meta[name='description']", "content")
    description = description.strip() if description else None

    total_images = count_matches(soup, "img")
    images_with_alt = count_matches(soup, "img[alt]:not([alt=''])")

    return ExistingSeoAudit(
        has_title=title is not None,
        title=title,
        has_description=bool(description),
        description=description or None,
        has_og_tags=has_match(soup, "meta[property^='og:']"),
        has_twitter_cards=has_match(soup, "meta[name^='twitter:']"),
        has_schema=has_match(soup, "script[type='application/ld+json']"),
        has_canonical=has_match(soup, "link[rel~='canonical']"),
        has_viewport=has_match(soup, "meta[name='viewport']"),
        has_charset=(
            has_match(soup, "meta[charset]")
            or has_match(soup, "meta[http-equiv='content-type' i]")
        ),
        h1_count=count_matches(soup, "h1"),
        images_missing_alt=max(total_images - images_with_alt, 0),
        schema_types=extract_schema_types(document),
    )


def extract_schema_types(document: ParsedDocument) -> list[str]:
    """
    Collect ``@type`` values declared in JSON-LD blocks.

    Blocks that are not valid JSON are skipped.

    Returns:
        Unique type names in order of first appearance.
    """
    types: list[str] = []

    for script in select_all(document.soup, "script[type='application/ld+json']"):
        try:
            data = json.loads(script.string or "")
        except (TypeError, ValueError) as e:
            logger.debug(f"Skipping unreadable JSON-LD block: {e}")
            continue
        for schema_type in _iter_schema_types(data):
            if schema_type not in types:
                types.append(schema_type)

    return types


def _iter_schema_types(data) -> Iterator[str]:
    """Walk a JSON-LD value yielding @type names (including @graph members)."""
    if isinstance(data, list):
        for item in data:
            yield from _iter_schema_types(item)
    elif isinstance(data, dict):
        declared = data.get("@type")
        if isinstance(declared, str):
            yield declared
        elif isinstance(declared, list):
            yield from (t for t in declared if isinstance(t, str))
        if "@graph" in data:
            yield from _iter_schema_types(data["@graph"])
