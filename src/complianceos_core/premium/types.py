"""Result types shared by the premium surface and its stub."""

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass
class EnhancedSection:
    """Advisor rewrite of one document section."""

    section_key: str
    content: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class RiskTriage:
    """Advisor estimate for a risk scenario (scores 1-5)."""

    likelihood: int
    impact: int
    rationale: str = ""
    recommended_treatment: str | None = None

    @property
    def score(self) -> int:
        return self.likelihood * self.impact

    def to_dict(self) -> dict[str, Any]:
        result = asdict(self)
        result["score"] = self.score
        return result


@dataclass
class ControlSuggestion:
    control_id: int
    name: str
    rationale: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class QuestionnaireAnswer:
    question: str
    answer: str
    confidence: float = 0.0
    sources: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
