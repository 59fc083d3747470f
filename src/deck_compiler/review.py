"""
Review Data

The fixed-shape code review record consumed by the legacy five-slide deck,
plus the status, risk and verdict labels and colors used to present it.
"""

import json
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError

from .colors import RgbColor
from .config import CamelModel, validation_issues
from .errors import InputParseError


class CheckStatus(str, Enum):
    """Outcome of one quality category."""
    passed = "pass"
    warning = "warning"
    issue = "issue"


class Verdict(str, Enum):
    APPROVE = "APPROVE"
    REQUEST_CHANGES = "REQUEST_CHANGES"
    COMMENT = "COMMENT"


class RiskLevel(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"


class CategoryAssessment(BaseModel):
    status: CheckStatus
    notes: str = ""


class QualityAssessment(CamelModel):
    code_quality: CategoryAssessment
    tests: CategoryAssessment
    security: CategoryAssessment
    performance: CategoryAssessment


class ReviewData(CamelModel):
    """Outcome of one pull request review."""
    pr_number: int
    pr_title: str
    pr_author: str
    pr_date: str
    repository: str

    summary: str
    changes: List[str] = Field(default_factory=list)

    quality_assessment: QualityAssessment

    issues_found: List[str] = Field(default_factory=list)
    suggestions: List[str] = Field(default_factory=list)

    verdict: Verdict
    verdict_explanation: str

    business_impact: Optional[str] = None
    risk_level: Optional[RiskLevel] = None
    risk_factors: Optional[List[str]] = None
    affected_areas: Optional[List[str]] = None


# ============================================================
# PRESENTATION HELPERS
# ============================================================

# Status, risk and verdict colors are for callers styling their own review
# output. The five-slide deck itself inserts plain text only.
COLORS: Dict[str, RgbColor] = {
    "primary": RgbColor(red=0.2, green=0.4, blue=0.8),
    "success": RgbColor(red=0.2, green=0.7, blue=0.3),
    "warning": RgbColor(red=0.9, green=0.6, blue=0.1),
    "danger": RgbColor(red=0.8, green=0.2, blue=0.2),
    "dark": RgbColor(red=0.2, green=0.2, blue=0.2),
    "light": RgbColor(red=0.95, green=0.95, blue=0.95),
    "white": RgbColor(red=1, green=1, blue=1),
}

_STATUS_LABELS = {
    CheckStatus.passed: "OK",
    CheckStatus.warning: "WARN",
    CheckStatus.issue: "ISSUE",
}

_STATUS_COLORS = {
    CheckStatus.passed: "success",
    CheckStatus.warning: "warning",
    CheckStatus.issue: "danger",
}

_RISK_COLORS = {
    RiskLevel.low: "success",
    RiskLevel.medium: "warning",
    RiskLevel.high: "danger",
}

_VERDICT_COLORS = {
    Verdict.APPROVE: "success",
    Verdict.REQUEST_CHANGES: "danger",
    Verdict.COMMENT: "warning",
}


def status_label(status: CheckStatus) -> str:
    """Plain-text marker for a category status (OK / WARN / ISSUE)."""
    return _STATUS_LABELS[CheckStatus(status)]


def status_color(status: CheckStatus) -> RgbColor:
    return COLORS[_STATUS_COLORS[CheckStatus(status)]]


def risk_color(level: RiskLevel) -> RgbColor:
    return COLORS[_RISK_COLORS[RiskLevel(level)]]


def verdict_color(verdict: Verdict) -> RgbColor:
    return COLORS[_VERDICT_COLORS[Verdict(verdict)]]


def format_date(iso_date: str) -> str:
    """Format an ISO date as ``January 5, 2024``. Unparseable input is returned as-is."""
    try:
        parsed = datetime.fromisoformat(iso_date.replace("Z", "+00:00"))
    except ValueError:
        return iso_date
    return f"{parsed:%B} {parsed.day}, {parsed.year}"


# ============================================================
# LOADING
# ============================================================

def parse_review_data(text: str, source: Optional[str] = None) -> ReviewData:
    """Parse a JSON review record."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InputParseError(source, [f"Invalid JSON: {exc}"]) from exc
    if not isinstance(data, dict):
        raise InputParseError(source, ["Top-level value must be an object"])
    try:
        return ReviewData.model_validate(data)
    except ValidationError as exc:
        raise InputParseError(source, validation_issues(exc)) from exc
