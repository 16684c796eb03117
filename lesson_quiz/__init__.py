"""Lesson Quiz - Quizzes das licoes de principios de design (SOLID).

Arquitetura:
- models/: Nos de conteudo, Enums, Schemas Pydantic
- engine/: QuizRegistry, QuizScoringEngine, QuizLintEngine
- storage/: ContentStore (quizzes autorados em <nome>/quiz.json)
- content/: Quizzes que acompanham o pacote
- router.py: FastAPI endpoints para o renderer
- config.py: QuizConfig lido das variaveis de ambiente
"""

from .engine import (
    QuizLintEngine,
    QuizRegistry,
    QuizScoringEngine,
    RegisteredQuiz,
    RegistrationReport,
    evaluate,
    score_lesson,
)
from .exceptions import (
    DuplicateName,
    InvalidSelection,
    NotFound,
    QuizError,
    RegistryFrozen,
    SchemaViolation,
)
from .models import EvaluationResult, LessonScore, QuizMeta, QuizRecord, VariantRecord
from .storage import ContentStore

__version__ = "0.1.0"

__all__ = [
    # Models
    "QuizRecord",
    "QuizMeta",
    "VariantRecord",
    "EvaluationResult",
    "LessonScore",
    # Engines
    "QuizRegistry",
    "RegisteredQuiz",
    "RegistrationReport",
    "QuizScoringEngine",
    "QuizLintEngine",
    "evaluate",
    "score_lesson",
    # Storage
    "ContentStore",
    # Errors
    "QuizError",
    "SchemaViolation",
    "DuplicateName",
    "NotFound",
    "InvalidSelection",
    "RegistryFrozen",
]
