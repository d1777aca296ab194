from a11y_report.extractors import HeuristicExtractor, RuleEngineExtractor
from a11y_report.finding import Severity, Source


def test_rule_engine_expands_one_finding_per_node(rule_engine):
    findings = RuleEngineExtractor().extract(rule_engine)

    # 2 + 1 + 1 violation nodes, 1 pass node
    assert len(findings) == 5
    assert [f.code for f in findings] == [
        "color-contrast", "color-contrast", "image-alt", "region", "meta-viewport",
    ]
    assert all(f.source is Source.RULE_ENGINE for f in findings)


def test_rule_engine_node_fields(rule_engine):
    first, second = RuleEngineExtractor().extract(rule_engine)[:2]

    assert first.selector == "#hero p"
    assert first.context == "<p>Welcome</p>"
    assert first.screenshot == "shots/hero-p.png"
    assert first.failure_summary == "Element has insufficient color contrast of 2.1"
    assert first.message.startswith("Ensures the contrast")
    assert first.help_text == "Elements must have sufficient color contrast"
    assert first.help_url.endswith("/color-contrast")
    assert first.tags == ("cat.color", "wcag2aa", "wcag143")
    assert first.impact == "serious"

    assert second.selector == "footer a"
    assert second.screenshot is None
    assert second.failure_summary is None
    # Parent metadata is copied to every node.
    assert second.tags == first.tags
    assert second.help_text == first.help_text


def test_rule_engine_severity_from_impact(rule_engine):
    findings = RuleEngineExtractor().extract(rule_engine)
    by_code = {f.code: f for f in findings}

    assert by_code["color-contrast"].severity is Severity.SERIOUS
    assert by_code["image-alt"].severity is Severity.CRITICAL
    assert by_code["region"].severity is Severity.MODERATE


def test_rule_engine_minor_and_missing_impact_are_moderate():
    result = {
        "violations": [
            {"id": "a", "impact": "minor", "tags": [], "nodes": [{"target": ["#a"]}]},
            {"id": "b", "tags": [], "nodes": [{"target": ["#b"]}]},
        ]
    }
    findings = RuleEngineExtractor().extract(result)

    assert [f.severity for f in findings] == [Severity.MODERATE, Severity.MODERATE]


def test_rule_engine_passes_are_marked_passed(rule_engine):
    passed = [f for f in RuleEngineExtractor().extract(rule_engine) if f.passed]

    assert len(passed) == 1
    assert passed[0].severity is Severity.PASSED
    assert passed[0].impact == "passed"


def test_rule_engine_missing_target_gives_empty_selector():
    result = {"violations": [{"id": "x", "impact": "critical", "nodes": [{"html": "<div>"}]}]}
    (finding,) = RuleEngineExtractor().extract(result)

    assert finding.selector == ""
    assert finding.message == ""


def test_rule_engine_nested_shadow_dom_target():
    result = {"violations": [{"id": "x", "nodes": [{"target": [["my-widget", "button.close"]]}]}]}
    (finding,) = RuleEngineExtractor().extract(result)

    assert finding.selector == "my-widget button.close"


def test_rule_engine_rule_without_nodes_produces_nothing():
    result = {"violations": [{"id": "x", "impact": "critical", "nodes": []}], "passes": [{"id": "y"}]}

    assert RuleEngineExtractor().extract(result) == []


def test_heuristic_one_finding_per_item(heuristic):
    findings = HeuristicExtractor().extract(heuristic)

    assert len(findings) == 5
    assert all(f.source is Source.HEURISTIC for f in findings)
    assert [f.passed for f in findings] == [False, False, False, True, True]


def test_heuristic_severity_from_type(heuristic):
    findings = HeuristicExtractor().extract(heuristic)

    assert [f.severity for f in findings] == [
        Severity.CRITICAL, Severity.SERIOUS, Severity.MODERATE, Severity.PASSED, Severity.PASSED,
    ]
    assert findings[0].issue_type == "error"
    assert findings[0].selector == "#nav > a"
    assert findings[0].context == "<a href=\"/\">Home</a>"
    assert findings[0].tags == ()


def test_missing_lists_are_empty():
    assert RuleEngineExtractor().extract({}) == []
    assert RuleEngineExtractor().extract(None) == []
    assert HeuristicExtractor().extract({"issues": None}) == []


def test_non_object_entries_are_skipped():
    result = {"issues": ["not an issue", None, {"code": "WCAG2AA.X", "type": "error", "message": "m"}]}
    findings = HeuristicExtractor().extract(result)

    assert len(findings) == 1
    assert findings[0].code == "WCAG2AA.X"


def test_extractor_is_reusable(heuristic):
    extractor = HeuristicExtractor()
    first = extractor.extract(heuristic)
    second = extractor.extract(heuristic)

    assert first == second
    assert first is not second


def test_extractor_keeps_no_result_after_call(heuristic):
    extractor = HeuristicExtractor()
    findings = extractor.extract(heuristic)
    findings.clear()

    assert vars(extractor) == {}
    assert len(extractor.extract(heuristic)) == 5
