"""Quiz Engines - Registro, avaliacao e lint."""

from .lint_engine import QuizLintEngine
from .registry import QuizRegistry, RegisteredQuiz, RegistrationReport, check_invariants
from .scoring_engine import QuizScoringEngine, evaluate, score_lesson

__all__ = [
    "QuizRegistry",
    "RegisteredQuiz",
    "RegistrationReport",
    "check_invariants",
    "QuizScoringEngine",
    "evaluate",
    "score_lesson",
    "QuizLintEngine",
]
