"""Candidate discovery and ranking for the article body."""

import logging
import re
from dataclasses import dataclass
from typing import Optional

from ..models.config import ExtractionRules, ExtractorConfig
from .metrics import density, link_density, text_length
from .protocols import DomElement

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Candidate:
    """A container considered as the article body, with its density score."""

    element: DomElement
    score: float


def select_by_selectors(
    doc: DomElement,
    rules: ExtractionRules,
    min_score: float = 100.0,
) -> list[Candidate]:
    """
    Score the first match of each content selector.

    Selectors are tried independently in priority order, so a document may
    yield one candidate per matching selector.

    Args:
        doc: Parsed document
        rules: Rule set providing the content selectors
        min_score: A candidate is admitted only when its score exceeds this

    Returns:
        Admitted candidates in selector order
    """
    candidates: list[Candidate] = []
    for selector in rules.content_selectors:
        element = doc.select_one(selector)
        if element is None:
            continue
        score = density(element)
        logger.debug(f"Selector {selector!r} matched <{element.name}> with score {score:.1f}")
        if score > min_score:
            candidates.append(Candidate(element=element, score=score))
    return candidates


def _noise_regex(rules: ExtractionRules) -> Optional[re.Pattern[str]]:
    if not rules.fallback_noise_tokens:
        return None
    return re.compile("|".join(re.escape(token) for token in rules.fallback_noise_tokens))


def _attribute_text(element: DomElement, attribute: str) -> str:
    value = element.get(attribute)
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return str(value)


def is_noise_container(
    element: DomElement,
    rules: ExtractionRules,
    pattern: Optional[re.Pattern[str]] = None,
) -> bool:
    """
    True when any checked attribute contains a noise token.

    ``pattern`` is the compiled token regex; callers checking many elements
    build it once with the rules and pass it in.
    """
    if pattern is None:
        pattern = _noise_regex(rules)
    if pattern is None:
        return False
    for attribute in rules.fallback_noise_attributes:
        if pattern.search(_attribute_text(element, attribute).lower()):
            return True
    return False


def scan_fallback(doc: DomElement, config: ExtractorConfig) -> list[Candidate]:
    """
    Walk every fallback container tag and score what looks like prose.

    Containers are rejected when their text is too short, when they are
    link-heavy, or when their class/id marks them as page chrome.

    Args:
        doc: Parsed document
        config: Extractor configuration (rules and thresholds)

    Returns:
        Admitted candidates in document order
    """
    rules = config.rules
    noise_pattern = _noise_regex(rules)
    candidates: list[Candidate] = []

    for element in doc.find_all(rules.fallback_tags):
        text_len = text_length(element)
        if text_len < config.min_fallback_text_length:
            continue

        if link_density(element, text_len) > config.max_link_density:
            continue

        if noise_pattern is not None and is_noise_container(element, rules, noise_pattern):
            continue

        score = density(element)
        if score > config.min_candidate_score:
            candidates.append(Candidate(element=element, score=score))

    logger.debug(f"Fallback scan admitted {len(candidates)} candidates")
    return candidates


def pick_best(candidates: list[Candidate]) -> Optional[Candidate]:
    """
    Return the highest-scoring candidate.

    ``sorted`` is stable, so on an exact tie the candidate discovered
    first keeps its place.
    """
    if not candidates:
        return None
    ranked = sorted(candidates, key=lambda candidate: candidate.score, reverse=True)
    return ranked[0]
