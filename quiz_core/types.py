from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Dict, Optional, Literal, Tuple
QuestionType = Literal["choice","text"]
@dataclass(frozen=True)
class Question:
    id: int; text: str; type: QuestionType
    options: Optional[Tuple[str, ...]] = None
@dataclass(frozen=True)
class Answer:
    question_id: int; value: str
@dataclass
class Result:
    category_scores: Dict[str, float]
    dominant_type: str
    overall_score: float
    recommended_learning_styles: List[str] = field(default_factory=list)
    personalized_description: str = ""
    calculation_steps: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, object]:
        """Wire shape used by the HTTP API, the database and the audit log."""
        return {
            "categoryScores": dict(self.category_scores),
            "dominantType": self.dominant_type,
            "overallScore": self.overall_score,
            "recommendedLearningStyles": list(self.recommended_learning_styles),
            "personalizedDescription": self.personalized_description,
            "calculationSteps": list(self.calculation_steps),
        }
