"""
Rule evaluator tests.

Rules are plain namespaces carrying the Rule model's attributes; the
evaluator never touches the database.
"""

from types import SimpleNamespace
from unittest.mock import patch

import pytest

from brandvoice.core.enums import DetectorKind, RuleSeverity, RuleStatus
from brandvoice.rules.evaluator import (
    DICTIONARY_CONFIDENCE,
    REGEX_CONFIDENCE,
    Detector,
    evaluate_rule,
    lint_text,
    rule_applies,
)


def make_rule(**overrides):
    fields = {
        "id": "rule-1",
        "name": "No jargon",
        "status": RuleStatus.ACTIVE,
        "severity": RuleSeverity.MINOR,
        "surfaces": [],
        "suggestions": [],
        "detectors": [],
        "finding_template": "",
        "rewrite_template": "",
    }
    fields.update(overrides)
    return SimpleNamespace(**fields)


def regex(pattern, **options):
    return {"kind": DetectorKind.REGEX, "pattern": pattern, **options}


def dictionary(pattern, **options):
    return {"kind": DetectorKind.DICTIONARY, "pattern": pattern, **options}


@pytest.mark.unit
class TestDetectorFromDict:

    def test_snake_case_keys(self):
        detector = Detector.from_dict(
            {"kind": "REGEX", "pattern": "x", "case_sensitive": True, "word_boundary": True}
        )
        assert detector == Detector("REGEX", "x", True, True)

    def test_camel_case_keys(self):
        detector = Detector.from_dict(
            {"kind": "REGEX", "pattern": "x", "caseSensitivity": True, "wordBoundary": True}
        )
        assert detector.case_sensitive is True
        assert detector.word_boundary is True

    def test_defaults(self):
        detector = Detector.from_dict({"kind": "DICTIONARY"})
        assert detector.pattern == ""
        assert detector.case_sensitive is False
        assert detector.word_boundary is False


@pytest.mark.unit
class TestRuleApplies:

    def test_active_rule_applies_everywhere(self):
        assert rule_applies(make_rule(), None) is True
        assert rule_applies(make_rule(), "email") is True

    def test_inactive_rules_never_apply(self):
        assert rule_applies(make_rule(status=RuleStatus.DRAFT), None) is False
        assert rule_applies(make_rule(status=RuleStatus.DEPRECATED), None) is False

    def test_surfaces_restrict_context(self):
        rule = make_rule(surfaces=["ui", "email"])
        assert rule_applies(rule, "ui") is True
        assert rule_applies(rule, "social") is False
        assert rule_applies(rule, None) is False


@pytest.mark.unit
class TestRegexDetector:

    def test_finds_all_matches_case_insensitively(self):
        rule = make_rule(detectors=[regex("synergy")])
        findings = evaluate_rule(rule, "Synergy breeds synergy.")

        assert [(f.location_start, f.location_end) for f in findings] == [(0, 7), (15, 22)]
        assert all(f.confidence == REGEX_CONFIDENCE for f in findings)

    def test_case_sensitive(self):
        rule = make_rule(detectors=[regex("synergy", case_sensitive=True)])
        findings = evaluate_rule(rule, "Synergy breeds synergy.")
        assert [f.location_start for f in findings] == [15]

    def test_word_boundary_skips_embedded_matches(self):
        rule = make_rule(detectors=[regex("cat", word_boundary=True)])
        findings = evaluate_rule(rule, "cat concatenate cat_x cat.")
        assert [f.location_start for f in findings] == [0, 22]

    def test_default_message(self):
        rule = make_rule(detectors=[regex("leverage")])
        finding = evaluate_rule(rule, "We leverage tools")[0]
        assert finding.message == 'Found "leverage" which violates rule: No jargon'

    def test_finding_template(self):
        rule = make_rule(
            detectors=[regex("leverage")],
            finding_template="Avoid '{match}'",
        )
        assert evaluate_rule(rule, "leverage")[0].message == "Avoid 'leverage'"

    def test_suggestion_wins_over_rewrite_template(self):
        rule = make_rule(
            detectors=[regex("utilise")],
            suggestions=["use"],
            rewrite_template="not {match}",
        )
        assert evaluate_rule(rule, "utilise it")[0].suggested_fix == "use"

    def test_rewrite_template(self):
        rule = make_rule(detectors=[regex(r"\d+%")], rewrite_template="{match} percent")
        assert evaluate_rule(rule, "Save 20% now")[0].suggested_fix == "20% percent"

    def test_no_fix_available(self):
        rule = make_rule(detectors=[regex("x")])
        assert evaluate_rule(rule, "x")[0].suggested_fix is None

    def test_invalid_pattern_yields_nothing(self):
        rule = make_rule(detectors=[regex("(unclosed")])
        assert evaluate_rule(rule, "(unclosed") == []

    def test_zero_length_matches_skipped(self):
        rule = make_rule(detectors=[regex("x*")])
        findings = evaluate_rule(rule, "abxx")
        assert [(f.location_start, f.location_end) for f in findings] == [(2, 4)]

    def test_finding_carries_rule_identity(self):
        rule = make_rule(detectors=[regex("x")], severity=RuleSeverity.CRITICAL)
        finding = evaluate_rule(rule, "x")[0]
        assert finding.rule_id == "rule-1"
        assert finding.rule_name == "No jargon"
        assert finding.severity == RuleSeverity.CRITICAL


@pytest.mark.unit
class TestDictionaryDetector:

    def test_matches_each_term(self):
        rule = make_rule(detectors=[dictionary("click here | learn more")])
        findings = evaluate_rule(rule, "Learn more or click here")

        assert [(f.location_start, f.location_end) for f in findings] == [(14, 24), (0, 10)]
        assert all(f.confidence == DICTIONARY_CONFIDENCE for f in findings)

    def test_terms_are_literal(self):
        rule = make_rule(detectors=[dictionary("e.g.")])
        assert evaluate_rule(rule, "eggs") == []
        assert len(evaluate_rule(rule, "see e.g. this")) == 1

    def test_word_boundary(self):
        rule = make_rule(detectors=[dictionary("app", word_boundary=True)])
        findings = evaluate_rule(rule, "app apply app")
        assert [f.location_start for f in findings] == [0, 10]

    def test_empty_terms_ignored(self):
        rule = make_rule(detectors=[dictionary("||")])
        assert evaluate_rule(rule, "anything") == []

    def test_uses_first_suggestion(self):
        rule = make_rule(detectors=[dictionary("utilise")], suggestions=["use", "employ"])
        assert evaluate_rule(rule, "utilise")[0].suggested_fix == "use"


@pytest.mark.unit
class TestUnsupportedDetectors:

    @pytest.mark.parametrize(
        "kind",
        [DetectorKind.LLM_CLASSIFIER, DetectorKind.LLM_REWRITE, DetectorKind.STYLE_CHECK, "UNKNOWN"],
    )
    def test_yield_nothing(self, kind):
        rule = make_rule(detectors=[{"kind": kind, "pattern": "x"}])
        assert evaluate_rule(rule, "x x x") == []

    def test_no_detectors(self):
        assert evaluate_rule(make_rule(detectors=None), "text") == []

    @pytest.mark.parametrize("bad", ["REGEX", None, 42, ["REGEX", "x"]])
    def test_malformed_entries_skipped(self, bad):
        rule = make_rule(detectors=[bad, regex("x")])

        findings = evaluate_rule(rule, "x")

        assert [(f.location_start, f.location_end) for f in findings] == [(0, 1)]

    def test_malformed_entry_is_logged(self):
        rule = make_rule(detectors=["REGEX"])

        with patch("brandvoice.rules.evaluator.logger") as mock_logger:
            assert evaluate_rule(rule, "REGEX") == []

        mock_logger.warning.assert_called_once()


@pytest.mark.unit
class TestLintText:

    def test_findings_sorted_by_position(self):
        rules = [
            make_rule(id="a", name="A", detectors=[regex("world")]),
            make_rule(id="b", name="B", detectors=[regex("hello")]),
        ]
        findings = lint_text(rules, "hello world")
        assert [f.rule_id for f in findings] == ["b", "a"]

    def test_same_position_keeps_rule_order(self):
        rules = [
            make_rule(id="first", detectors=[regex("hello")]),
            make_rule(id="second", detectors=[dictionary("hello")]),
        ]
        findings = lint_text(rules, "hello")
        assert [f.rule_id for f in findings] == ["first", "second"]

    def test_context_filters_rules(self):
        rules = [
            make_rule(id="ui-only", surfaces=["ui"], detectors=[regex("x")]),
            make_rule(id="everywhere", detectors=[regex("x")]),
        ]
        assert [f.rule_id for f in lint_text(rules, "x", "email")] == ["everywhere"]
        assert len(lint_text(rules, "x", "ui")) == 2

    def test_no_rules(self):
        assert lint_text([], "anything") == []
