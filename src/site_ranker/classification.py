"""
Business category classification.

Classifies a page into a BusinessCategory with a weighted bag of
indicator terms:

- Each category has a fixed vocabulary of indicator terms
- A term found in the text scores 1, plus floor((occurrences - 1) / 2)
  for repeated occurrences
- The category with the strictly highest total wins; ties and the
  all-zero case resolve to Unknown

Terms are matched as substrings of the lower-cased extracted text, so
"service" also matches "services".
"""

from types import MappingProxyType
from typing import Mapping

from .models import BusinessCategory

# Indicator vocabulary per category. Order is fixed so scoring is reproducible.
CATEGORY_INDICATORS: Mapping[BusinessCategory, tuple[str, ...]] = MappingProxyType({
    BusinessCategory.ECOMMERCE: (
        "cart", "checkout", "buy", "shop", "store", "product", "price",
        "add to cart", "purchase", "order", "shipping", "payment",
        "catalog", "inventory", "sale", "discount", "coupon",
    ),
    BusinessCategory.SAAS: (
        "saas", "software", "platform", "dashboard", "api", "integration",
        "subscription", "trial", "demo", "features", "pricing", "plans",
        "enterprise", "startup", "cloud", "automation", "workflow",
    ),
    BusinessCategory.BLOG: (
        "blog", "article", "post", "author", "published", "read more",
        "comments", "tags", "category", "archive", "recent posts",
    ),
    BusinessCategory.PORTFOLIO: (
        "portfolio", "projects", "work", "case study", "client",
        "designer", "developer", "freelance", "hire me", "about me",
    ),
    BusinessCategory.SERVICE: (
        "service", "consulting", "solutions", "expertise", "professional",
        "team", "approach", "methodology", "process", "engagement",
        "migration", "assessment", "audit", "implementation",
    ),
    BusinessCategory.AGENCY: (
        "agency", "creative", "marketing", "branding", "campaigns",
        "clients", "results", "strategy", "digital", "media",
    ),
    BusinessCategory.LOCAL_BUSINESS: (
        "location", "address", "hours", "visit us", "directions",
        "local", "near", "store hours", "call us", "contact",
    ),
    BusinessCategory.RESTAURANT: (
        "menu", "restaurant", "dining", "reservation", "food",
        "cuisine", "chef", "table", "delivery", "takeout", "order online",
    ),
    BusinessCategory.EDUCATION: (
        "course", "learn", "student", "teacher", "education",
        "training", "curriculum", "enroll", "class", "lesson",
        "certification", "degree", "workshop",
    ),
    BusinessCategory.HEALTHCARE: (
        "health", "medical", "doctor", "patient", "clinic",
        "hospital", "treatment", "appointment", "care", "wellness",
        "diagnosis", "symptoms", "therapy",
    ),
    BusinessCategory.REAL_ESTATE: (
        "property", "real estate", "home", "house", "apartment",
        "listing", "rent", "sale", "mortgage", "agent", "broker",
        "bedroom", "bathroom", "sqft",
    ),
    BusinessCategory.TECHNOLOGY: (
        "technology", "tech", "innovation", "engineering", "development",
        "infrastructure", "security", "data", "ai", "machine learning",
        "blockchain", "cloud computing", "devops",
    ),
    BusinessCategory.NON_PROFIT: (
        "nonprofit", "charity", "donate", "volunteer", "mission",
        "cause", "foundation", "community", "impact", "support",
    ),
})


def score_indicators(text: str, indicators: tuple[str, ...]) -> int:
    """
    Score text against one category's indicator terms.

    Args:
        text: Lower-cased extracted text.
        indicators: Indicator terms for the category.

    Returns:
        Number of distinct terms found plus the repetition bonus.
    """
    score = 0
    for term in indicators:
        occurrences = text.count(term)
        if occurrences:
            score += 1 + (occurrences - 1) // 2
    return score


def score_categories(text: str) -> dict[BusinessCategory, int]:
    """Score every category with a non-zero total, in vocabulary order."""
    scores = {}
    for category, indicators in CATEGORY_INDICATORS.items():
        score = score_indicators(text, indicators)
        if score > 0:
            scores[category] = score
    return scores


def classify_business(text: str) -> BusinessCategory:
    """
    Classify extracted text into a business category.

    Args:
        text: Lower-cased extracted text.

    Returns:
        The category with the strictly highest score, or
        BusinessCategory.UNKNOWN on a tie or when nothing matched.
    """
    scores = score_categories(text.lower())
    if not scores:
        return BusinessCategory.UNKNOWN

    best = max(scores.values())
    leaders = [category for category, score in scores.items() if score == best]
    if len(leaders) > 1:
        return BusinessCategory.UNKNOWN
    return leaders[0]
