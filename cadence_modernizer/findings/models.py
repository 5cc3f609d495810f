# Pydantic data models for detection, suggestions, fix plans and modernization results.

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PatternKind(str, Enum):
    ACCESS_MODIFIER = "access-modifier"
    STORAGE_API = "storage-api"
    INTERFACE_CONFORMANCE = "interface-conformance"
    FUNCTION_SIGNATURE = "function-signature"
    IMPORT_STATEMENT = "import-statement"
    EVENT_DECLARATION = "event-declaration"


class Severity(str, Enum):
    CRITICAL = "critical"
    WARNING = "warning"
    SUGGESTION = "suggestion"


class Impact(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Effort(str, Enum):
    EASY = "easy"
    MODERATE = "moderate"
    COMPLEX = "complex"


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class SourceLocation(BaseModel):
    """Where in the source text a pattern was matched."""

    line: int = Field(..., ge=1, description="1-based line number")
    column: int = Field(..., ge=1, description="1-based column number")
    start_index: int = Field(..., ge=0, description="0-based offset of the first matched character")
    end_index: int = Field(..., ge=0, description="0-based offset one past the last matched character")

    model_config = ConfigDict(frozen=True)


class LegacyPattern(BaseModel):
    """A single legacy construct found by one detection rule."""

    kind: PatternKind
    severity: Severity
    description: str
    suggested_fix: str
    original_text: str
    modern_replacement: str
    category: str
    location: SourceLocation
    rule: str = Field(..., description="Name of the detection rule that produced the match")

    model_config = ConfigDict(frozen=True)


class CodeExample(BaseModel):
    before: str
    after: str
    description: str

    model_config = ConfigDict(frozen=True)


class ModernizationSuggestion(BaseModel):
    """Human-facing advice for one legacy pattern."""

    pattern: LegacyPattern
    modern_replacement: str
    explanation: str
    example: CodeExample
    confidence: float = Field(..., gt=0.0, le=1.0)
    auto_fixable: bool

    model_config = ConfigDict(frozen=True)


class EducationalContent(BaseModel):
    """Background material for a pattern kind (not for an individual match)."""

    pattern: PatternKind
    title: str
    description: str
    why_modernize: str
    benefits: List[str] = Field(default_factory=list)
    learn_more_url: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class ValidationResult(BaseModel):
    """Outcome of one validation call; validation_time is in milliseconds."""

    is_valid: bool
    has_legacy_patterns: bool
    patterns: List[LegacyPattern] = Field(default_factory=list)
    suggestions: List[ModernizationSuggestion] = Field(default_factory=list)
    educational_content: List[EducationalContent] = Field(default_factory=list)
    validation_time: float = Field(..., ge=0.0)
    confidence: float = Field(..., ge=0.0, le=1.0)

    model_config = ConfigDict(frozen=True)


class PatternCategory(BaseModel):
    name: str
    patterns: List[LegacyPattern]
    priority: int
    description: str


class PrioritizedFix(BaseModel):
    pattern: LegacyPattern
    impact: Impact
    effort: Effort
    order: int = Field(..., ge=1, description="1-based position in the remediation plan")


class FixPlan(BaseModel):
    """Prioritized, time-estimated, risk-scored remediation report."""

    patterns: List[LegacyPattern]
    prioritized_fixes: List[PrioritizedFix]
    estimated_time: int = Field(..., ge=0, description="Estimated remediation time in minutes")
    risk_level: RiskLevel


class AutoModernizationOptions(BaseModel):
    """Policy controlling which patterns the transformer may rewrite."""

    auto_fix_critical: bool = True
    auto_fix_warnings: bool = False
    preserve_comments: bool = True
    add_explanation_comments: bool = False

    model_config = ConfigDict(frozen=True)


class ModernizationResult(BaseModel):
    original_code: str
    modernized_code: str
    transformations_applied: List[str] = Field(default_factory=list)
    confidence: float = Field(..., ge=0.0, le=1.0)
    requires_manual_review: bool = False
    warnings: List[str] = Field(default_factory=list)
