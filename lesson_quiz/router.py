"""Quiz Router - Endpoints FastAPI consumidos pelo renderer."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request

from .engine.lint_engine import QuizLintEngine
from .engine.registry import QuizRegistry
from .engine.scoring_engine import QuizScoringEngine
from .exceptions import InvalidSelection, NotFound
from .models.schemas import (
    EvaluateRequest,
    EvaluationResult,
    LessonScore,
    LessonScoreRequest,
    LintIssue,
    QuizListResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/quiz", tags=["Quiz"])


# =============================================================================
# DEPENDENCY INJECTION
# =============================================================================


def get_registry(request: Request) -> QuizRegistry:
    """Dependency para obter o registro criado no lifespan."""
    registry = getattr(request.app.state, "registry", None)
    if registry is None:
        raise HTTPException(status_code=503, detail="Registro de quizzes nao inicializado")
    return registry


def get_scoring_engine(registry: QuizRegistry = Depends(get_registry)) -> QuizScoringEngine:
    """Dependency para obter ScoringEngine."""
    return QuizScoringEngine(registry)


def get_lint_engine(request: Request) -> QuizLintEngine:
    """Dependency para obter o LintEngine configurado no lifespan."""
    lint = getattr(request.app.state, "lint_engine", None)
    if lint is None:
        raise HTTPException(status_code=503, detail="Lint de quizzes nao inicializado")
    return lint


def _not_found(e: NotFound) -> HTTPException:
    logger.info(f"Quiz indisponivel: {e.details.get('quiz')}")
    return HTTPException(status_code=404, detail=e.to_dict())


# =============================================================================
# LOOKUP
# =============================================================================


@router.get("/", response_model=QuizListResponse)
async def list_quizzes(registry: QuizRegistry = Depends(get_registry)):
    """Lista os nomes registrados, na ordem de registro."""
    names = registry.names()
    return QuizListResponse(total=len(names), names=names)


@router.get("/{name}")
async def get_quiz(name: str, registry: QuizRegistry = Depends(get_registry)) -> dict[str, Any]:
    """Retorna um quiz pelo nome.

    - ``meta.correctAnswers`` vem em camelCase, como no authoring
    - ``selection_mode`` indica radio (single) ou checkbox (multiple)
    """
    try:
        record = registry.lookup(name)
    except NotFound as e:
        raise _not_found(e)

    return record.model_dump(mode="json", by_alias=True)


@router.get("/{name}/lint", response_model=list[LintIssue])
async def lint_quiz(
    name: str,
    registry: QuizRegistry = Depends(get_registry),
    lint: QuizLintEngine = Depends(get_lint_engine),
):
    """Retorna avisos de conteudo de um quiz (para autores)."""
    try:
        record = registry.lookup(name)
    except NotFound as e:
        raise _not_found(e)

    return lint.lint(record)


# =============================================================================
# ANSWER & RESULTS ENDPOINTS
# =============================================================================


@router.post("/score", response_model=LessonScore)
async def score_lesson(
    request: LessonScoreRequest,
    scoring: QuizScoringEngine = Depends(get_scoring_engine),
):
    """Pontua todos os quizzes respondidos em uma licao."""
    try:
        return scoring.score_answers(request.answers)
    except NotFound as e:
        raise _not_found(e)
    except InvalidSelection as e:
        raise HTTPException(status_code=422, detail=e.to_dict())


@router.post("/{name}/evaluate", response_model=EvaluationResult)
async def evaluate_answer(
    name: str,
    request: EvaluateRequest,
    scoring: QuizScoringEngine = Depends(get_scoring_engine),
):
    """Avalia a selecao do usuario.

    - Acerto exige exatamente o conjunto de corretas
    - Retorna faltantes, excedentes e as descricoes para feedback
    """
    try:
        return scoring.evaluate_answer(name, request.selected)
    except NotFound as e:
        raise _not_found(e)
    except InvalidSelection as e:
        raise HTTPException(status_code=422, detail=e.to_dict())
