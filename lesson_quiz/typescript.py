"""Geracao de interfaces TypeScript a partir dos modelos Pydantic.

O renderer do site e escrito em TypeScript; estas interfaces mantem o
contrato do quiz (IQuiz) em sincronia com o backend.
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Literal, Union, get_args, get_origin

from pydantic import BaseModel

from .models.content import (
    BlockNode,
    CodeNode,
    Content,
    ContentNode,
    EmphasisNode,
    ListNode,
    TableNode,
    TextNode,
)
from .models.enums import LintSeverity, SelectionMode
from .models.schemas import (
    EvaluateRequest,
    EvaluationResult,
    LessonScore,
    LessonScoreRequest,
    LintIssue,
    QuizMeta,
    QuizRecord,
    VariantRecord,
)

ENUMS: list[type[Enum]] = [SelectionMode, LintSeverity]

NODE_MODELS: list[type[BaseModel]] = [TextNode, EmphasisNode, CodeNode, ListNode, TableNode, BlockNode]

MODELS: list[type[BaseModel]] = [
    VariantRecord,
    QuizMeta,
    QuizRecord,
    EvaluateRequest,
    EvaluationResult,
    LessonScoreRequest,
    LessonScore,
    LintIssue,
]

BASIC_TYPES = {
    str: "string",
    int: "number",
    float: "number",
    bool: "boolean",
    type(None): "null",
    Any: "any",
}


def python_type_to_ts(python_type: Any) -> str:
    """Converte um tipo Python/Pydantic para TypeScript."""
    if python_type == Content:
        return "Content"
    if python_type == ContentNode:
        return "ContentNode"
    for py_type, ts_type in BASIC_TYPES.items():
        if python_type is py_type:
            return ts_type

    if isinstance(python_type, type):
        if issubclass(python_type, Enum):
            return python_type.__name__
        if issubclass(python_type, BaseModel):
            return python_type.__name__

    origin = get_origin(python_type)
    args = get_args(python_type)

    if origin is Literal:
        return " | ".join(f'"{a}"' if isinstance(a, str) else str(a).lower() for a in args)

    if origin is Annotated:
        return python_type_to_ts(args[0])

    if origin is Union:
        return " | ".join(python_type_to_ts(a) for a in args)

    if origin in (list, set, frozenset, tuple):
        inner = python_type_to_ts(args[0]) if args else "any"
        if " | " in inner:
            inner = f"({inner})"
        return f"{inner}[]"

    if origin is dict:
        value = python_type_to_ts(args[1]) if len(args) == 2 else "any"
        return f"Record<string, {value}>"

    return "any"


def generate_enum(enum_class: type[Enum]) -> str:
    """Gera union de literais a partir de um Enum."""
    values = " | ".join(f'"{member.value}"' for member in enum_class)
    return f"export type {enum_class.__name__} = {values};"


def generate_interface(model_class: type[BaseModel]) -> str:
    """Gera interface TypeScript a partir de um modelo Pydantic."""
    lines = [f"export interface {model_class.__name__} {{"]

    for field_name, field_info in model_class.model_fields.items():
        ts_name = field_info.alias or field_name
        ts_type = python_type_to_ts(field_info.annotation)
        # Discriminadores (Literal) sempre presentes no JSON
        is_tag = get_origin(field_info.annotation) is Literal
        optional = "?" if not field_info.is_required() and not is_tag else ""
        lines.append(f"  {ts_name}{optional}: {ts_type};")

    for field_name, computed in model_class.model_computed_fields.items():
        ts_type = python_type_to_ts(computed.return_type)
        lines.append(f"  readonly {field_name}: {ts_type};")

    lines.append("}")
    return "\n".join(lines)


def generate_typescript() -> str:
    """Gera o arquivo .ts completo com enums, nos de conteudo e modelos."""
    parts = [
        "// =============================================================================",
        "// AUTO-GENERATED - Nao edite manualmente",
        f"// Gerado em: {datetime.now().isoformat(timespec='seconds')}",
        "// Fonte: lesson_quiz.models",
        "// =============================================================================",
        "",
    ]

    for enum_class in ENUMS:
        parts.append(generate_enum(enum_class))
    parts.append("")

    parts.append("export type ContentNode = " + " | ".join(m.__name__ for m in NODE_MODELS) + ";")
    parts.append("export type Content = string | ContentNode;")
    parts.append("")

    for model in NODE_MODELS + MODELS:
        parts.append(generate_interface(model))
        parts.append("")

    # Alias com o nome usado pelos componentes do site
    parts.append("export type IQuiz = QuizRecord;")
    parts.append("")
    return "\n".join(parts)
