"""Core module - montagem do registro de quizzes no startup."""

from __future__ import annotations

import logging

from lesson_quiz.config import QuizConfig
from lesson_quiz.engine import QuizLintEngine, QuizRegistry, RegistrationReport
from lesson_quiz.models import LintSeverity
from lesson_quiz.storage import ContentStore

logger = logging.getLogger(__name__)


def build_lint_engine(config: QuizConfig) -> QuizLintEngine:
    """LintEngine com as regras desligadas via QUIZ_LINT_DISABLE."""
    return QuizLintEngine(disabled=config.disabled_lint_rules)


def build_registry(config: QuizConfig) -> tuple[QuizRegistry, RegistrationReport]:
    """Carrega o conteudo, roda lint e congela um novo registro.

    O registro e criado uma vez por processo e passado adiante (app.state);
    nao ha estado global de modulo.

    Args:
        config: Configuracao com o diretorio de conteudo e regras de lint

    Returns:
        Tuple de (registro congelado, relatorio do carregamento)
    """
    registry = QuizRegistry()
    report = ContentStore(config.content_dir).populate(registry)

    for error in report.errors:
        logger.error(f"Quiz nao registrado: {error}")

    lint = build_lint_engine(config)
    issues = lint.lint_all(registry)
    if config.strict_lint:
        for issue in issues:
            if issue.severity == LintSeverity.WARNING:
                logger.error(f"[lint {issue.quiz}] {issue.rule}: {issue.message}")

    registry.freeze()
    logger.info(f"Registro pronto: {len(registry)} quizzes")
    return registry, report
