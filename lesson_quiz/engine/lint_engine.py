"""Quiz Lint Engine - Regras de conteudo que nao bloqueiam o registro."""

import logging
from collections.abc import Iterable

from ..models.content import plain_text
from ..models.enums import LintSeverity
from ..models.schemas import LintIssue, QuizRecord

logger = logging.getLogger(__name__)


class QuizLintEngine:
    """Verifica problemas de autoria que o schema permite.

    Um quiz sem resposta correta e estruturalmente valido (pode ser uma
    pergunta-pegadinha), entao vira aviso de lint e nao SchemaViolation.

    Regras:
        - no-correct-answer: nenhuma alternativa correta (warning)
        - duplicate-variant: duas alternativas com o mesmo texto (warning)
        - all-correct: todas as alternativas corretas (info)
        - missing-description: alternativa correta sem justificativa (info)

    Example:
        >>> engine = QuizLintEngine()
        >>> [i.rule for i in engine.lint(record)]
        ['all-correct']
    """

    RULES = ("no-correct-answer", "duplicate-variant", "all-correct", "missing-description")

    def __init__(self, disabled: Iterable[str] = ()):
        """Inicializa engine.

        Args:
            disabled: Regras a ignorar
        """
        unknown = set(disabled) - set(self.RULES)
        if unknown:
            raise ValueError(f"Regras de lint desconhecidas: {sorted(unknown)}")
        self.disabled = frozenset(disabled)

    def lint(self, record: QuizRecord) -> list[LintIssue]:
        """Retorna os problemas encontrados em um quiz."""
        issues = []
        correct = record.meta.correct_answers
        total = len(record.variants)

        if not correct:
            issues.append(
                self._issue(record, "no-correct-answer", LintSeverity.WARNING, "Nenhuma alternativa correta")
            )

        seen: dict[str, int] = {}
        for i, variant in enumerate(record.variants):
            key = " ".join(plain_text(variant.text).split()).casefold()
            if key in seen:
                issues.append(
                    self._issue(
                        record,
                        "duplicate-variant",
                        LintSeverity.WARNING,
                        f"Alternativas {seen[key]} e {i} tem o mesmo texto",
                    )
                )
            else:
                seen[key] = i

        if total > 1 and correct and len(correct) == total:
            issues.append(
                self._issue(record, "all-correct", LintSeverity.INFO, "Todas as alternativas sao corretas")
            )

        if total > 1:
            for i in sorted(correct):
                if i < total and record.variants[i].description is None:
                    issues.append(
                        self._issue(
                            record,
                            "missing-description",
                            LintSeverity.INFO,
                            f"Alternativa correta {i} sem descricao",
                        )
                    )

        issues = [issue for issue in issues if issue.rule not in self.disabled]
        for issue in issues:
            logger.debug(f"[lint {issue.quiz}] {issue.rule}: {issue.message}")
        return issues

    def lint_all(self, records: Iterable[QuizRecord]) -> list[LintIssue]:
        """Roda lint em varios quizzes."""
        issues = []
        for record in records:
            issues.extend(self.lint(record))

        warnings = sum(1 for i in issues if i.severity == LintSeverity.WARNING)
        if warnings:
            logger.warning(f"Lint encontrou {warnings} avisos de conteudo")
        return issues

    @staticmethod
    def _issue(record: QuizRecord, rule: str, severity: LintSeverity, message: str) -> LintIssue:
        return LintIssue(quiz=record.name, rule=rule, severity=severity, message=message)
