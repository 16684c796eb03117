"""Quiz Exceptions - Taxonomia de erros do registro de quizzes."""

from typing import Any, Optional


class QuizError(Exception):
    """Erro base do modulo de quiz.

    Carrega uma mensagem legivel e um dict de detalhes (nome do quiz,
    campo ofensivo, caminho do arquivo) para o autor do conteudo corrigir
    a origem.
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Converte para dicionario (para respostas HTTP e logs)."""
        return {
            "error": type(self).__name__,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({context})"


class SchemaViolation(QuizError):
    """Quiz quebra um invariante estrutural (variants vazio, indice fora do range, sem nome)."""

    @property
    def quiz(self) -> Optional[str]:
        return self.details.get("quiz")

    @property
    def field(self) -> Optional[str]:
        return self.details.get("field")


class DuplicateName(QuizError):
    """Segundo quiz registrado com um nome ja existente."""


class NotFound(QuizError):
    """Nenhum quiz registrado com o nome pedido."""


class InvalidSelection(QuizError):
    """Selecao do usuario referencia uma alternativa inexistente."""


class RegistryFrozen(QuizError):
    """Tentativa de registrar quiz depois do startup."""
