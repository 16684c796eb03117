"""Content Store - Leitura dos quizzes autorados em disco."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from ..engine.registry import QuizRegistry, RegistrationReport, schema_violation_from
from ..exceptions import SchemaViolation
from ..models.schemas import QuizRecord

logger = logging.getLogger(__name__)

# Quizzes que acompanham o pacote (lesson_quiz/content/<nome>/quiz.json)
BUNDLED_CONTENT_DIR = Path(__file__).resolve().parent.parent / "content"


class ContentStore:
    """Le quizzes de um diretorio de conteudo.

    Cada quiz e uma unidade independente em ``<content_dir>/<nome>/quiz.json``;
    o nome do diretorio deve ser igual ao ``name`` do quiz.

    Estrutura:
        content/
            srp-patterns-3/quiz.json
            lsp-ideal-1/quiz.json

    Example:
        >>> store = ContentStore(Path("content"))
        >>> report = store.populate(registry)
    """

    FILENAME = "quiz.json"

    def __init__(self, content_dir: Union[str, Path] = BUNDLED_CONTENT_DIR):
        """Inicializa store.

        Args:
            content_dir: Diretorio raiz do conteudo

        Raises:
            FileNotFoundError: Diretorio nao existe
        """
        self.content_dir = Path(content_dir).resolve()
        if not self.content_dir.is_dir():
            raise FileNotFoundError(f"Diretorio de conteudo nao encontrado: {self.content_dir}")

    def quiz_files(self) -> list[Path]:
        """Arquivos de quiz ordenados por nome de diretorio."""
        return sorted(self.content_dir.glob(f"*/{self.FILENAME}"))

    def load_file(self, path: Path) -> QuizRecord:
        """Le e valida um arquivo de quiz.

        Raises:
            SchemaViolation: Arquivo ilegivel, JSON malformado, schema invalido
                ou nome divergente do diretorio
        """
        folder = path.parent.name
        try:
            text = path.read_text(encoding="utf-8")
        except (UnicodeDecodeError, OSError) as e:
            raise SchemaViolation(
                message=f"Arquivo ilegivel: {e}",
                details={"quiz": folder, "field": None, "source": str(path)},
            ) from e

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise SchemaViolation(
                message=f"JSON invalido: {e.msg} (linha {e.lineno})",
                details={"quiz": folder, "field": None, "source": str(path)},
            ) from e

        try:
            record = QuizRecord.model_validate(data)
        except ValidationError as e:
            raise schema_violation_from(e, quiz=folder, source=str(path)) from e

        if record.name != folder:
            raise SchemaViolation(
                message=f"Nome '{record.name}' diverge do diretorio '{folder}'",
                details={"quiz": record.name, "field": "name", "source": str(path)},
            )
        return record

    def load_records(self) -> Iterator[tuple[Path, Union[QuizRecord, SchemaViolation]]]:
        """Le todos os quizzes; arquivos invalidos retornam o erro no lugar do record."""
        for path in self.quiz_files():
            try:
                yield path, self.load_file(path)
            except SchemaViolation as e:
                logger.error(f"Quiz invalido em {path}: {e.message}")
                yield path, e

    def populate(self, registry: QuizRegistry) -> RegistrationReport:
        """Carrega o diretorio inteiro no registro.

        Arquivos invalidos entram nos erros do relatorio; os demais quizzes
        sao registrados normalmente.
        """
        load_errors = []
        valid = []
        for path, item in self.load_records():
            if isinstance(item, SchemaViolation):
                load_errors.append(item)
            else:
                valid.append((path, item))

        report = registry.define_all(valid)
        report.errors[:0] = load_errors

        logger.info(
            f"Conteudo carregado de {self.content_dir}: "
            f"{len(report.registered)} quizzes, {len(report.errors)} erros"
        )
        return report
