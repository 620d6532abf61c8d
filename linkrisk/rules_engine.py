# linkrisk/rules_engine.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Tuple
import re

from .normalizer import NormalizedInput
from .similarity import edit_distance

AUTO_UNSAFE_TLDS = (
    ".fake", ".invalid", ".test", ".support", ".support-login",
    ".co-login", ".security-check", ".verify-user", ".user-update",
)

HIGH_RISK_BRANDS = (
    "bankofamerica", "boa", "chase", "wellsfargo",
    "instagram", "facebook", "meta", "apple", "appleid",
    "icloud", "outlook", "hotmail", "fedex", "ups", "usps", "dhl",
)

PHISHING_CLUSTERS = (
    ("login", "verify"), ("secure", "update"), ("account", "verify"),
    ("security", "alert"), ("action", "required"), ("package", "held"),
    ("delivery", "confirm"), ("account", "locked"), ("review", "appeal"),
    ("billing", "payment"),
)

PHISHING_WORDS = (
    "login", "verify", "secure", "update", "alert", "confirm", "required",
    "locked", "restore", "appeal", "payment", "billing", "review",
    "suspended", "disabled",
)

DELIVERY_WORDS = (
    "package", "delivery", "fedex", "usps", "ups", "dhl",
    "held", "action-required", "fee", "confirm-details",
)

# digit -> the letter it imitates
DIGIT_SUBSTITUTIONS = (
    ("0", "o"), ("1", "l"), ("3", "e"), ("5", "s"), ("7", "t"),
)

SIMILARITY_BRANDS = (
    "paypal", "google", "amazon", "apple",
    "facebook", "netflix", "chase", "microsoft",
)

HYPHEN_LIMIT = 4            # >= fires
NUMERIC_RUN_RE = re.compile(r"[0-9]{3,}")
BASE64_RE = re.compile(r"^[A-Za-z0-9+/]{12,}={0,2}$")
HEX_RE = re.compile(r"^[0-9A-F]{16,}$", re.I)
HOMOGLYPH_RE = re.compile("[\u0400-\u04FF\u0370-\u03FF]")   # Cyrillic, Greek
SIMILARITY_MAX_DISTANCE = 2
LONG_URL_LENGTH = 80        # > fires
SUBDOMAIN_DOT_LIMIT = 3     # > fires

Predicate = Callable[[NormalizedInput], bool]


class RuleCategory(str, Enum):
    UNSAFE_TLD = "unsafe_tld"
    HYPHEN_OVERLOAD = "hyphen_overload"
    BRAND = "brand"
    KEYWORD_CLUSTER = "keyword_cluster"
    KEYWORD = "keyword"
    NUMERIC_TOKEN = "numeric_token"
    DELIVERY_SCAM = "delivery_scam"
    ENCODED_REDIRECT = "encoded_redirect"
    HOMOGLYPH = "homoglyph"
    TYPOSQUAT_DIGIT = "typosquat_digit"
    BRAND_SIMILARITY = "brand_similarity"
    LONG_URL = "long_url"
    EXCESSIVE_SUBDOMAINS = "excessive_subdomains"


@dataclass(frozen=True)
class Rule:
    category: RuleCategory
    predicate: Predicate
    weight: int
    message: str

    def matches(self, inp: NormalizedInput) -> bool:
        return bool(self.predicate(inp))


# ---------------------------------------------------------------------------
# Predicate helpers
# ---------------------------------------------------------------------------

def looks_encoded(s: str) -> bool:
    """True for a base64-ish (12+ chars, optional '=' padding) or hex-ish (16+) token."""
    return bool(BASE64_RE.match(s) or HEX_RE.match(s))


def has_homoglyphs(s: str) -> bool:
    return bool(HOMOGLYPH_RE.search(s))


def _host_without_com(host: str) -> str:
    return host[:-len(".com")] if host.endswith(".com") else host


def brand_distance(host: str, brand: str) -> int:
    # compare both the full host and the host minus a trailing ".com"
    return min(edit_distance(host, brand), edit_distance(_host_without_com(host), brand))


def _host_contains(token: str) -> Predicate:
    return lambda inp: token in inp.host


def _text_contains(token: str) -> Predicate:
    return lambda inp: token in inp.trimmed_lower


def _cluster_present(cluster: Tuple[str, ...]) -> Predicate:
    return lambda inp: sum(1 for w in cluster if w in inp.trimmed_lower) >= 2


def _resembles_brand(brand: str) -> Predicate:
    def check(inp: NormalizedInput) -> bool:
        if inp.host.endswith(f"{brand}.com"):
            return False
        return brand_distance(inp.host, brand) <= SIMILARITY_MAX_DISTANCE
    return check


def _encoded_tail(inp: NormalizedInput) -> bool:
    return looks_encoded(inp.trimmed_lower.split("=")[-1])


# ---------------------------------------------------------------------------
# Catalogue
# ---------------------------------------------------------------------------

def build_catalogue() -> Tuple[Rule, ...]:
    """Assemble every rule in evaluation order. Called once at import."""
    rules = []

    for tld in AUTO_UNSAFE_TLDS:
        rules.append(Rule(RuleCategory.UNSAFE_TLD, _host_contains(tld), 90,
                          f"Domain uses high-risk TLD '{tld}'."))

    rules.append(Rule(RuleCategory.HYPHEN_OVERLOAD,
                      lambda inp: inp.host.count("-") >= HYPHEN_LIMIT, 40,
                      "Excessive hyphens indicate synthetic phishing."))

    for brand in HIGH_RISK_BRANDS:
        rules.append(Rule(RuleCategory.BRAND, _host_contains(brand), 50,
                          f"Brand impersonation detected: '{brand}'."))

    for cluster in PHISHING_CLUSTERS:
        rules.append(Rule(RuleCategory.KEYWORD_CLUSTER, _cluster_present(cluster), 50,
                          "Phishing keyword cluster detected: " + " + ".join(cluster)))

    for word in PHISHING_WORDS:
        rules.append(Rule(RuleCategory.KEYWORD, _host_contains(word), 25,
                          f"Suspicious keyword detected: '{word}'."))

    rules.append(Rule(RuleCategory.NUMERIC_TOKEN,
                      lambda inp: bool(NUMERIC_RUN_RE.search(inp.host)), 25,
                      "Suspicious numeric token detected."))

    for word in DELIVERY_WORDS:
        rules.append(Rule(RuleCategory.DELIVERY_SCAM, _text_contains(word), 40,
                          f"Delivery scam pattern: '{word}'."))

    rules.append(Rule(RuleCategory.ENCODED_REDIRECT, _encoded_tail, 40,
                      "Encoded redirect detected."))

    rules.append(Rule(RuleCategory.HOMOGLYPH, lambda inp: has_homoglyphs(inp.raw), 40,
                      "Foreign homoglyph characters detected."))

    for digit, letter in DIGIT_SUBSTITUTIONS:
        rules.append(Rule(RuleCategory.TYPOSQUAT_DIGIT, _host_contains(digit), 45,
                          f"Typosquatting substitution: '{digit}' for '{letter}'."))

    for brand in SIMILARITY_BRANDS:
        rules.append(Rule(RuleCategory.BRAND_SIMILARITY, _resembles_brand(brand), 50,
                          f"Domain resembles '{brand}', highly suspicious."))

    rules.append(Rule(RuleCategory.LONG_URL,
                      lambda inp: len(inp.trimmed) > LONG_URL_LENGTH, 20,
                      "URL is unusually long."))

    rules.append(Rule(RuleCategory.EXCESSIVE_SUBDOMAINS,
                      lambda inp: inp.host.count(".") > SUBDOMAIN_DOT_LIMIT, 25,
                      "Excessive subdomains, common in phishing."))

    return tuple(rules)


CATALOGUE: Tuple[Rule, ...] = build_catalogue()


def catalogue_size() -> int:
    return len(CATALOGUE)


def rules_for(category: RuleCategory) -> Tuple[Rule, ...]:
    return tuple(r for r in CATALOGUE if r.category is category)
