"""Quiz Models - Conteudo, Enums e Schemas."""

from .content import (
    BlockNode,
    CodeNode,
    Content,
    ContentNode,
    EmphasisNode,
    ListNode,
    TableNode,
    TextNode,
    plain_text,
    to_node,
)
from .enums import LintSeverity, SelectionMode
from .schemas import (
    EvaluateRequest,
    EvaluationResult,
    LessonScore,
    LessonScoreRequest,
    LintIssue,
    QuizListResponse,
    QuizMeta,
    QuizRecord,
    VariantRecord,
)

__all__ = [
    # Content
    "Content",
    "ContentNode",
    "TextNode",
    "EmphasisNode",
    "CodeNode",
    "ListNode",
    "TableNode",
    "BlockNode",
    "plain_text",
    "to_node",
    # Enums
    "SelectionMode",
    "LintSeverity",
    # Schemas
    "VariantRecord",
    "QuizMeta",
    "QuizRecord",
    "EvaluationResult",
    "LessonScore",
    "LintIssue",
    "EvaluateRequest",
    "LessonScoreRequest",
    "QuizListResponse",
]
