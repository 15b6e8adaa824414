"""
Rule evaluator.

Runs the in-process detectors of a brand's rules against a piece of copy and
returns findings. Only REGEX and DICTIONARY detectors are evaluated here;
LLM, style-check, crawler and parser detectors belong to other layers and
produce nothing.

Rules are duck-typed: anything with the Rule model's attributes works, so the
evaluator can run on unsaved rules in the rule tester.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable

from brandvoice.core.enums import DetectorKind, RuleStatus
from brandvoice.dto import FindingDTO

logger = logging.getLogger(__name__)

REGEX_CONFIDENCE = 1.0
DICTIONARY_CONFIDENCE = 0.9

_WORD_CHAR = re.compile(r"\w")


@dataclass(frozen=True)
class Detector:
    """
    One entry of Rule.detectors.

    Stored detectors written by the web editor use camelCase keys, so both
    spellings are accepted.
    """

    kind: str
    pattern: str = ""
    case_sensitive: bool = False
    word_boundary: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> "Detector":
        return cls(
            kind=str(data.get("kind", "")),
            pattern=data.get("pattern") or "",
            case_sensitive=bool(data.get("case_sensitive", data.get("caseSensitivity", False))),
            word_boundary=bool(data.get("word_boundary", data.get("wordBoundary", False))),
        )


def _render(template: str, match: str) -> str:
    return template.replace("{match}", match)


def _message(rule, match: str) -> str:
    if rule.finding_template:
        return _render(rule.finding_template, match)
    return f'Found "{match}" which violates rule: {rule.name}'


def _is_word_char(char: str) -> bool:
    return bool(char) and _WORD_CHAR.match(char) is not None


def _evaluate_regex(detector: Detector, rule, text: str) -> list[FindingDTO]:
    if not detector.pattern:
        return []

    flags = 0 if detector.case_sensitive else re.IGNORECASE
    try:
        regex = re.compile(detector.pattern, flags)
    except re.error as e:
        logger.warning(
            "Invalid regex detector on rule %s: %s (%s)", rule.id, detector.pattern, e
        )
        return []

    findings = []
    for match in regex.finditer(text):
        start, end = match.span()
        if start == end:
            continue

        if detector.word_boundary:
            before = text[start - 1] if start > 0 else ""
            after = text[end] if end < len(text) else ""
            if _is_word_char(before) or _is_word_char(after):
                continue

        matched = match.group(0)
        if rule.suggestions:
            suggested_fix = rule.suggestions[0]
        elif rule.rewrite_template:
            suggested_fix = _render(rule.rewrite_template, matched)
        else:
            suggested_fix = None

        findings.append(
            FindingDTO(
                rule_id=str(rule.id),
                rule_name=rule.name,
                location_start=start,
                location_end=end,
                severity=rule.severity,
                message=_message(rule, matched),
                suggested_fix=suggested_fix,
                confidence=REGEX_CONFIDENCE,
            )
        )
    return findings


def _evaluate_dictionary(detector: Detector, rule, text: str) -> list[FindingDTO]:
    if not detector.pattern:
        return []

    flags = 0 if detector.case_sensitive else re.IGNORECASE
    suggested_fix = rule.suggestions[0] if rule.suggestions else None

    findings = []
    for term in (t.strip() for t in detector.pattern.split("|")):
        if not term:
            continue
        escaped = re.escape(term)
        if detector.word_boundary:
            escaped = rf"\b{escaped}\b"

        for match in re.finditer(escaped, text, flags):
            findings.append(
                FindingDTO(
                    rule_id=str(rule.id),
                    rule_name=rule.name,
                    location_start=match.start(),
                    location_end=match.end(),
                    severity=rule.severity,
                    message=_message(rule, match.group(0)),
                    suggested_fix=suggested_fix,
                    confidence=DICTIONARY_CONFIDENCE,
                )
            )
    return findings


_EVALUATORS = {
    DetectorKind.REGEX: _evaluate_regex,
    DetectorKind.DICTIONARY: _evaluate_dictionary,
}


def rule_applies(rule, context: str | None) -> bool:
    """
    ACTIVE rules apply everywhere unless they list surfaces, in which case
    the context must be one of them.
    """
    if rule.status != RuleStatus.ACTIVE:
        return False
    if rule.surfaces and context not in rule.surfaces:
        return False
    return True


def evaluate_rule(rule, text: str, context: str | None = None) -> list[FindingDTO]:
    """Findings for one rule, in detector order."""
    if not rule_applies(rule, context):
        return []

    findings: list[FindingDTO] = []
    for raw in rule.detectors or []:
        if not isinstance(raw, dict):
            logger.warning("Malformed detector on rule %s: %r", rule.id, raw)
            continue
        detector = Detector.from_dict(raw)
        evaluate = _EVALUATORS.get(detector.kind)
        if evaluate is None:
            continue
        findings.extend(evaluate(detector, rule, text))
    return findings


def lint_text(rules: Iterable, text: str, context: str | None = None) -> list[FindingDTO]:
    """
    Evaluate rules (already in priority order) against text.

    Findings are sorted by position; findings at the same position keep
    rule priority order.
    """
    findings: list[FindingDTO] = []
    for rule in rules:
        findings.extend(evaluate_rule(rule, text, context))

    findings.sort(key=lambda f: (f.location_start, f.location_end))
    return findings
