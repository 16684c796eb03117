"""Quiz Registry - Indice de quizzes por nome."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import ValidationError

from ..exceptions import DuplicateName, NotFound, QuizError, RegistryFrozen, SchemaViolation
from ..models.schemas import QuizRecord

logger = logging.getLogger(__name__)

# Nomes sao slugs kebab-case (tambem usados como segmento de URL)
NAME_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


@dataclass(frozen=True)
class RegisteredQuiz:
    """Quiz aceito pelo registro.

    Attributes:
        record: Quiz validado
        position: Ordem de registro (0-N)
        source: Arquivo de origem, quando carregado do disco
    """

    record: QuizRecord
    position: int
    source: Optional[Path] = None

    @property
    def name(self) -> str:
        return self.record.name


@dataclass
class RegistrationReport:
    """Resultado de um registro em lote."""

    registered: list[RegisteredQuiz] = field(default_factory=list)
    errors: list[QuizError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict[str, Any]:
        return {
            "registered": [q.name for q in self.registered],
            "errors": [e.to_dict() for e in self.errors],
        }


def schema_violation_from(error: ValidationError, quiz: Optional[str] = None, **details: Any) -> SchemaViolation:
    """Converte erro do pydantic em SchemaViolation com o campo ofensivo."""
    first = error.errors()[0] if error.error_count() else {}
    loc = ".".join(str(part) for part in first.get("loc", ()))
    return SchemaViolation(
        message=first.get("msg", "Quiz invalido"),
        details={"quiz": quiz or "<sem nome>", "field": loc or None, **details},
    )


def check_invariants(record: QuizRecord) -> None:
    """Valida os invariantes estruturais de um quiz.

    Raises:
        SchemaViolation: nome vazio/invalido, sem alternativas ou indice fora do range
    """
    name = record.name
    if not name or not name.strip():
        raise SchemaViolation(
            message="Quiz sem nome",
            details={"quiz": "<sem nome>", "field": "name"},
        )
    if not NAME_PATTERN.match(name):
        raise SchemaViolation(
            message="Nome deve ser um slug kebab-case (a-z, 0-9, -)",
            details={"quiz": name, "field": "name"},
        )
    if not record.variants:
        raise SchemaViolation(
            message="Quiz precisa de pelo menos uma alternativa",
            details={"quiz": name, "field": "variants"},
        )

    total = len(record.variants)
    out_of_range = sorted(i for i in record.meta.correct_answers if i < 0 or i >= total)
    if out_of_range:
        raise SchemaViolation(
            message=f"Indices corretos fora do range 0-{total - 1}: {out_of_range}",
            details={"quiz": name, "field": "meta.correctAnswers"},
        )


class QuizRegistry:
    """Registro de quizzes indexado por nome.

    Criado uma vez no startup, populado em lote e congelado; depois disso
    e apenas lido pelo renderer. Nomes duplicados sao rejeitados: o primeiro
    quiz registrado vence.

    Example:
        >>> registry = QuizRegistry()
        >>> registry.define(record)
        >>> registry.freeze()
        >>> registry.lookup("srp-patterns-3").variants[2].text
        '3 класса'
    """

    def __init__(self):
        self._quizzes: dict[str, RegisteredQuiz] = {}
        self._frozen = False

    # -------------------------------------------------------------------------
    # Escrita (startup)
    # -------------------------------------------------------------------------

    def define(
        self,
        record: Union[QuizRecord, Mapping[str, Any]],
        source: Optional[Path] = None,
    ) -> RegisteredQuiz:
        """Valida e registra um quiz.

        Args:
            record: QuizRecord ou dict no formato de authoring
            source: Arquivo de origem (para mensagens de erro)

        Returns:
            RegisteredQuiz aceito

        Raises:
            SchemaViolation: Quiz quebra um invariante estrutural
            DuplicateName: Ja existe quiz com esse nome
            RegistryFrozen: Registro ja foi congelado
        """
        if self._frozen:
            raise RegistryFrozen(
                message="Registro congelado, quizzes so podem ser definidos no startup",
                details={"quiz": _name_of(record)},
            )

        extra = {"source": str(source)} if source else {}

        if not isinstance(record, QuizRecord):
            try:
                record = QuizRecord.model_validate(record)
            except ValidationError as e:
                raise schema_violation_from(e, quiz=_name_of(record), **extra) from e

        try:
            check_invariants(record)
        except SchemaViolation as e:
            e.details.update(extra)
            raise

        existing = self._quizzes.get(record.name)
        if existing is not None:
            raise DuplicateName(
                message=f"Quiz '{record.name}' ja registrado",
                details={
                    "quiz": record.name,
                    "first_source": str(existing.source) if existing.source else None,
                    **extra,
                },
            )

        registered = RegisteredQuiz(record=record, position=len(self._quizzes), source=source)
        self._quizzes[record.name] = registered
        logger.debug(f"Quiz registrado: {record.name} ({len(record.variants)} alternativas)")
        return registered

    def define_all(
        self,
        records: Iterable[Union[QuizRecord, Mapping[str, Any], tuple[Optional[Path], Any]]],
    ) -> RegistrationReport:
        """Registra varios quizzes; falhas sao reportadas sem impedir os demais.

        Args:
            records: QuizRecords/dicts, ou tuplas (source, record) vindas do loader

        Returns:
            RegistrationReport com aceitos e erros
        """
        report = RegistrationReport()
        for item in records:
            source = None
            if isinstance(item, tuple):
                source, item = item
            try:
                report.registered.append(self.define(item, source=source))
            except (SchemaViolation, DuplicateName) as e:
                logger.warning(f"Quiz rejeitado: {e}")
                report.errors.append(e)

        logger.info(
            f"Registro em lote: {len(report.registered)} aceitos, {len(report.errors)} rejeitados"
        )
        return report

    def freeze(self) -> None:
        """Congela o registro (somente leitura daqui em diante)."""
        self._frozen = True
        logger.info(f"Registro congelado com {len(self._quizzes)} quizzes")

    @property
    def frozen(self) -> bool:
        return self._frozen

    # -------------------------------------------------------------------------
    # Leitura
    # -------------------------------------------------------------------------

    def lookup(self, name: str) -> QuizRecord:
        """Busca um quiz pelo nome exato.

        Raises:
            NotFound: Nenhum quiz com esse nome
        """
        return self.get_registered(name).record

    def get_registered(self, name: str) -> RegisteredQuiz:
        """Como lookup, mas retorna tambem posicao e origem."""
        registered = self._quizzes.get(name)
        if registered is None:
            raise NotFound(message=f"Quiz '{name}' nao encontrado", details={"quiz": name})
        return registered

    def names(self) -> list[str]:
        """Nomes na ordem de registro."""
        return list(self._quizzes)

    def __contains__(self, name: object) -> bool:
        return name in self._quizzes

    def __len__(self) -> int:
        return len(self._quizzes)

    def __iter__(self) -> Iterator[QuizRecord]:
        return (q.record for q in self._quizzes.values())


def _name_of(record: Any) -> Optional[str]:
    if isinstance(record, QuizRecord):
        return record.name
    if isinstance(record, Mapping):
        name = record.get("name")
        return name if isinstance(name, str) else None
    return None
