import pytest


def rule_engine_result():
    return {
        "violations": [
            {
                "id": "color-contrast",
                "impact": "serious",
                "tags": ["cat.color", "wcag2aa", "wcag143"],
                "description": "Ensures the contrast between foreground and background colors meets WCAG 2 AA contrast ratio thresholds",
                "help": "Elements must have sufficient color contrast",
                "helpUrl": "https://dequeuniversity.com/rules/axe/4.8/color-contrast",
                "nodes": [
                    {
                        "target": ["#hero p"],
                        "html": "<p>Welcome</p>",
                        "failureSummary": "Element has insufficient color contrast of 2.1",
                        "screenshot": "shots/hero-p.png",
                    },
                    {"target": ["footer a"], "html": "<a href=\"/about\">About</a>"},
                ],
            },
            {
                "id": "image-alt",
                "impact": "critical",
                "tags": ["cat.text-alternatives", "wcag2a", "wcag111", "section508"],
                "description": "Ensures <img> elements have alternate text or a role of none or presentation",
                "help": "Images must have alternate text",
                "helpUrl": "https://dequeuniversity.com/rules/axe/4.8/image-alt",
                "nodes": [{"target": ["img.logo"], "html": "<img class=\"logo\" src=\"logo.png\">"}],
            },
            {
                "id": "region",
                "impact": "moderate",
                "tags": ["cat.keyboard", "best-practice"],
                "description": "Ensures all page content is contained by landmarks",
                "help": "All page content should be contained by landmarks",
                "helpUrl": "https://dequeuniversity.com/rules/axe/4.8/region",
                "nodes": [{"target": ["#promo"], "html": "<div id=\"promo\"></div>"}],
            },
        ],
        "passes": [
            {
                "id": "meta-viewport",
                "impact": None,
                "tags": ["cat.sensory-and-visual-cues", "wcag2aa", "wcag144"],
                "description": "Ensures <meta name=\"viewport\"> does not disable text scaling and zooming",
                "help": "Zooming and scaling must not be disabled",
                "helpUrl": "https://dequeuniversity.com/rules/axe/4.8/meta-viewport",
                "nodes": [{"target": ["meta[name=viewport]"], "html": "<meta name=\"viewport\">"}],
            },
        ],
    }


def heuristic_result():
    return {
        "issues": [
            {
                "code": "WCAG2AA.Principle1.Guideline1_4.1_4_3.G18.Fail",
                "type": "error",
                "message": "This element has insufficient contrast at this conformance level.",
                "selector": "#nav > a",
                "context": "<a href=\"/\">Home</a>",
            },
            {
                "code": "WCAG2AA.Principle2.Guideline2_4.2_4_1.H64.1",
                "type": "warning",
                "message": "Iframe element requires a non-empty title attribute that identifies the frame.",
                "selector": "iframe",
                "context": "<iframe src=\"/widget\"></iframe>",
            },
            {
                "code": "WCAG2AA.Principle3.Guideline3_1.3_1_1.H57.2",
                "type": "notice",
                "message": "The html element should have a lang or xml:lang attribute which describes the language of the page.",
                "selector": "html",
                "context": "<html>",
            },
        ],
        "passed": [
            {
                "code": "WCAG2AA.Principle1.Guideline1_1.1_1_1.H37",
                "message": "Img element has an alt attribute.",
                "selector": "img.hero",
            },
            {
                "code": "WCAG2A.Principle2.Guideline2_4.2_4_2.H25.2",
                "message": "Title element present.",
                "selector": "head > title",
            },
        ],
    }


@pytest.fixture
def rule_engine():
    return rule_engine_result()


@pytest.fixture
def heuristic():
    return heuristic_result()


@pytest.fixture
def full_payload():
    return {
        "url": "https://example.org/",
        "ruleEngineResult": rule_engine_result(),
        "heuristicResult": heuristic_result(),
    }
