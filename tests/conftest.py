"""
Pytest fixtures and configuration for Site Ranker tests.
"""

import pytest
from datetime import datetime
from pathlib import Path

from site_ranker.config import AnalysisConfig
from site_ranker.extraction import ParsedDocument, parse_document
from site_ranker.models import (
    AnalysisProfile,
    BusinessCategory,
    ExistingSeoAudit,
    Keyword,
)


SERVICE_HTML = """<!DOCTYPE html>
<html lang="en-US">
<head>
    <meta charset="UTF-8">
    <title>Professional Web Services</title>
    <meta name="description" content="Professional consulting services for growing companies.">
</head>
<body>
    <h1>Our Services</h1>
    <main>
        <p>We provide consulting services and software development for growing companies.</p>
        <p>Our services include cloud migration and security assessment.</p>
    </main>
</body>
</html>
"""

BARE_HTML = (
    "<html><head></head><body>"
    "<h1>First</h1><h1>Second</h1><p>Some text here.</p>"
    "</body></html>"
)

COMPLETE_HTML = """<!DOCTYPE html>
<html lang="de-AT">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <title>Online Shop for Garden Tools and Outdoor Supplies</title>
    <meta name="description" content="Buy garden tools online with free shipping.">
    <meta property="og:title" content="Garden Tools Shop">
    <meta name="twitter:card" content="summary">
    <link rel="canonical" href="https://shop.example.com/">
    <script type="application/ld+json">
    {"@context": "https://schema.org", "@graph": [
        {"@type": "Store", "name": "Garden Tools Shop"},
        {"@type": ["Product", "Thing"], "name": "Spade"}
    ]}
    </script>
    <script>var tracking = "checkout checkout checkout";</script>
    <style>.cart { color: red; }</style>
</head>
<body>
    <h1>Garden Tools</h1>
    <img src="spade.jpg" alt="A steel spade">
    <img src="rake.jpg" alt="">
    <img src="hoe.jpg">
    <p>Shop our garden tools catalog and add to cart for fast shipping.</p>
</body>
</html>
"""


class FixedClock:
    """Clock returning a fixed datetime, for reproducible title suggestions."""

    def __init__(self, year: int = 2024):
        self.now = datetime(year, 6, 1, 12, 0, 0)

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def service_html() -> str:
    """Markup of a small professional-services landing page."""
    return SERVICE_HTML


@pytest.fixture
def bare_html() -> str:
    """Markup with no head metadata and two H1 headings."""
    return BARE_HTML


@pytest.fixture
def complete_html() -> str:
    """Markup carrying every audited SEO element."""
    return COMPLETE_HTML


@pytest.fixture
def service_document() -> ParsedDocument:
    return parse_document(SERVICE_HTML)


@pytest.fixture
def complete_document() -> ParsedDocument:
    return parse_document(COMPLETE_HTML)


@pytest.fixture
def config() -> AnalysisConfig:
    """Default analysis configuration."""
    return AnalysisConfig()


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock(2024)


@pytest.fixture
def sample_profile() -> AnalysisProfile:
    """A merged profile with keywords, text and a partial audit."""
    return AnalysisProfile(
        keywords=[
            Keyword("insurance", 6, 9.6),
            Keyword("liability", 4, 7.2),
            Keyword("coverage", 3, 4.8),
            Keyword("professional liability", 2, 10.0, is_phrase=True),
        ],
        business_category=BusinessCategory.SERVICE,
        language="en",
        existing_seo=ExistingSeoAudit(
            has_title=True,
            title="Liability Insurance for Consultants",
            has_description=True,
            description="Professional liability coverage for independent consultants.",
            has_viewport=True,
            has_charset=True,
            h1_count=1,
        ),
        content_summary="Professional liability insurance protects consultants",
        raw_text=" ".join(["word"] * 85 + ["insurance"] * 6 + ["liability"] * 4
                          + ["coverage"] * 3 + ["professional", "liability"]),
    )


@pytest.fixture
def html_site(tmp_path: Path) -> Path:
    """Create a small site directory with nested pages."""
    (tmp_path / "index.html").write_text(SERVICE_HTML, encoding="utf-8")
    blog = tmp_path / "blog"
    blog.mkdir()
    (blog / "post.htm").write_text(COMPLETE_HTML, encoding="utf-8")
    (blog / "notes.txt").write_text("not markup", encoding="utf-8")
    return tmp_path
