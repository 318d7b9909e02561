from __future__ import annotations

from enum import Enum
from pydantic import BaseModel, Field

from pcbuilder.schemas.component import ComponentKind


class IssueSeverity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


class CompatibilityIssue(BaseModel):
    code: str
    severity: IssueSeverity
    message: str
    slots: list[ComponentKind] = Field(default_factory=list)
    suggestion: str | None = None


class CompatibilityResult(BaseModel):
    is_compatible: bool = True
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    issues: list[CompatibilityIssue] = Field(default_factory=list)
    checks_passed: int = 0
    checks_total: int = 0


class PowerEstimate(BaseModel):
    watts_needed: int
    watts_recommended: int
