"""Pydantic request/response models."""

from typing import List, Optional

from pydantic import BaseModel, Field


# --- Finding (response) ---


class FindingOut(BaseModel):
    """Single normalized accessibility finding."""

    source: str = Field(..., description="rule-engine or heuristic")
    message: str
    selector: str = Field(default="", description="Element locator; empty for page-level checks")
    code: str = Field(default="", description="Rule id or heuristic code")
    severity: str = Field(..., description="critical, serious, moderate, or passed")
    passed: bool
    context: str = Field(default="", description="HTML/text snippet of the affected element")
    help_text: str = Field(default="", alias="help")
    help_url: str = Field(default="", alias="helpUrl")
    tags: List[str] = Field(default_factory=list)
    screenshot: Optional[str] = None
    impact: Optional[str] = None
    failure_summary: Optional[str] = Field(default=None, alias="failureSummary")
    issue_type: Optional[str] = Field(default=None, alias="type")

    model_config = {"populate_by_name": True}


class CategoryOut(BaseModel):
    """Findings of one category, most severe first."""

    key: str = Field(..., description="screenreader, visual, navigation, content, or other")
    label: str
    count: int
    findings: List[FindingOut] = Field(default_factory=list)


# --- Responses ---


class NormalizedReportOut(BaseModel):
    """Response for POST /normalize."""

    url: Optional[str] = None
    wcag_level: str = Field(..., alias="wcagLevel")
    view: str = Field(..., description="issues or passed")
    sources: List[str] = Field(default_factory=list, description="Tool results present in the payload")
    score: int = Field(..., ge=0, le=100)
    compliant: bool
    score_band: str = Field(..., alias="scoreBand", description="good, fair, or poor")
    total_issues: int = Field(..., alias="totalIssues")
    total_passed: int = Field(..., alias="totalPassed")
    total_tests: int = Field(..., alias="totalTests")
    has_issues: bool = Field(..., alias="hasIssues", description="False renders the 'no issues found' state")
    categories: List[CategoryOut] = Field(default_factory=list)

    model_config = {"populate_by_name": True}


class ErrorDetail(BaseModel):
    """Error response detail."""

    detail: str = Field(..., description="Error message")
