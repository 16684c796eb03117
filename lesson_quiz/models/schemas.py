"""Quiz Schemas - Modelos Pydantic do registro de quizzes e da API."""

from typing import Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    computed_field,
    field_serializer,
    field_validator,
)

from .content import Content, plain_text
from .enums import LintSeverity, SelectionMode


class VariantRecord(BaseModel):
    """Alternativa selecionavel de um quiz."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    text: Content = Field(..., description="Conteudo exibido como opcao")
    description: Optional[Content] = Field(
        default=None, description="Justificativa exibida depois da resposta"
    )

    @field_validator("text")
    @classmethod
    def validar_texto(cls, v: Content) -> Content:
        """Texto simples nao pode ser vazio."""
        if isinstance(v, str) and not v.strip():
            raise ValueError("Texto da alternativa nao pode ser vazio")
        return v


class QuizMeta(BaseModel):
    """Metadados de avaliacao do quiz."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    correct_answers: frozenset[int] = Field(
        ...,
        alias="correctAnswers",
        description="Indices (base 0) das alternativas corretas; ordem e duplicatas irrelevantes",
    )

    @field_serializer("correct_answers")
    def serializar_corretas(self, value: frozenset[int]) -> list[int]:
        return sorted(value)


class QuizRecord(BaseModel):
    """Quiz estatico: pergunta, alternativas e o conjunto de respostas corretas.

    Os invariantes de registro (nome, alternativas nao vazias, indices no range)
    sao verificados por ``QuizRegistry.define`` para que o erro carregue o nome
    do quiz e o campo ofensivo.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., description="Chave unica de lookup (ex: srp-patterns-3)")
    question: Content = Field(..., description="Enunciado renderizavel")
    variants: tuple[VariantRecord, ...] = Field(..., description="Alternativas na ordem de exibicao")
    meta: QuizMeta

    @property
    def correct_answers(self) -> frozenset[int]:
        return self.meta.correct_answers

    @computed_field
    @property
    def selection_mode(self) -> SelectionMode:
        """single quando ha exatamente uma correta (radio), multiple caso contrario."""
        if len(self.meta.correct_answers) == 1:
            return SelectionMode.SINGLE
        return SelectionMode.MULTIPLE

    def variant_label(self, index: int) -> str:
        """Texto simples de uma alternativa (para logs)."""
        return plain_text(self.variants[index].text)


class EvaluationResult(BaseModel):
    """Resultado de avaliar uma selecao contra o conjunto correto."""

    name: str
    is_correct: bool
    selected: list[int] = Field(..., description="Indices selecionados (ordenados, sem duplicatas)")
    correct: list[int] = Field(..., description="Indices corretos (ordenados)")
    missed: list[int] = Field(default_factory=list, description="Corretas nao selecionadas")
    unexpected: list[int] = Field(default_factory=list, description="Selecionadas mas incorretas")
    feedback: dict[int, Content] = Field(
        default_factory=dict,
        description="Descricoes das alternativas com que o usuario interagiu (index -> conteudo)",
    )


class LessonScore(BaseModel):
    """Resultado agregado dos quizzes de uma licao."""

    total: int
    correct: int
    percentage: float = Field(..., ge=0, le=100)
    failed: list[str] = Field(default_factory=list, description="Nomes dos quizzes errados")


class LintIssue(BaseModel):
    """Problema de conteudo que nao bloqueia o registro."""

    quiz: str
    rule: str
    severity: LintSeverity
    message: str


# =============================================================================
# REQUEST/RESPONSE DA API
# =============================================================================


class EvaluateRequest(BaseModel):
    """Request para avaliar a selecao de um quiz."""

    selected: list[StrictInt] = Field(..., description="Indices selecionados pelo usuario (inteiros JSON)")


class LessonScoreRequest(BaseModel):
    """Request para pontuar varios quizzes de uma licao."""

    answers: dict[str, list[StrictInt]] = Field(..., description="Nome do quiz -> indices selecionados")


class QuizListResponse(BaseModel):
    """Lista de quizzes registrados."""

    total: int
    names: list[str]
