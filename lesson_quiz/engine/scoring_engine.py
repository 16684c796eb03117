"""Quiz Scoring Engine - Avaliacao de respostas e pontuacao da licao."""

import logging
from collections.abc import Iterable, Mapping

from ..exceptions import InvalidSelection
from ..models.schemas import EvaluationResult, LessonScore, QuizRecord
from .registry import QuizRegistry

logger = logging.getLogger(__name__)


def evaluate(record: QuizRecord, selected: Iterable[int]) -> EvaluationResult:
    """Compara a selecao do usuario com o conjunto de respostas corretas.

    Acerto e igualdade de conjuntos: ordem e duplicatas na selecao nao
    importam, e nao ha credito parcial.

    Args:
        record: Quiz respondido
        selected: Indices selecionados (qualquer iteravel de int)

    Returns:
        EvaluationResult com acerto, faltantes, excedentes e feedback

    Raises:
        InvalidSelection: Indice fora das alternativas do quiz
    """
    chosen = set(selected)
    total = len(record.variants)
    invalid = sorted(i for i in chosen if i < 0 or i >= total)
    if invalid:
        raise InvalidSelection(
            message=f"Selecao fora do range 0-{total - 1}: {invalid}",
            details={"quiz": record.name, "selected": invalid},
        )

    correct = record.meta.correct_answers

    # Descricoes das alternativas com que o usuario interagiu + as corretas
    feedback = {}
    for i in sorted(chosen | correct):
        description = record.variants[i].description
        if description is not None:
            feedback[i] = description

    return EvaluationResult(
        name=record.name,
        is_correct=chosen == correct,
        selected=sorted(chosen),
        correct=sorted(correct),
        missed=sorted(correct - chosen),
        unexpected=sorted(chosen - correct),
        feedback=feedback,
    )


def score_lesson(results: Iterable[EvaluationResult]) -> LessonScore:
    """Agrega os resultados dos quizzes de uma licao.

    Args:
        results: Resultados individuais

    Returns:
        LessonScore com total, acertos, percentual e quizzes errados
    """
    results = list(results)
    correct = sum(1 for r in results if r.is_correct)
    percentage = (correct / len(results) * 100) if results else 0.0

    return LessonScore(
        total=len(results),
        correct=correct,
        percentage=round(percentage, 1),
        failed=[r.name for r in results if not r.is_correct],
    )


class QuizScoringEngine:
    """Avaliacao por nome, usando o registro para resolver o quiz.

    Example:
        >>> engine = QuizScoringEngine(registry)
        >>> engine.evaluate_answer("srp-patterns-3", [2]).is_correct
        True
    """

    def __init__(self, registry: QuizRegistry):
        self.registry = registry

    def evaluate_answer(self, name: str, selected: Iterable[int]) -> EvaluationResult:
        """Avalia a selecao de um quiz registrado.

        Raises:
            NotFound: Quiz nao registrado
            InvalidSelection: Indice fora do range
        """
        record = self.registry.lookup(name)
        result = evaluate(record, selected)
        logger.debug(f"Quiz {name}: selecionado={result.selected} correto={result.is_correct}")
        return result

    def score_answers(self, answers: Mapping[str, Iterable[int]]) -> LessonScore:
        """Avalia varios quizzes e retorna a pontuacao agregada."""
        results = [self.evaluate_answer(name, selected) for name, selected in answers.items()]
        return score_lesson(results)
