# =============================================================================
# CONFIGURACAO DO LESSON QUIZ
# =============================================================================
# Todas as opcoes vem de variaveis de ambiente, com defaults para dev local
# =============================================================================

import os
from dataclasses import dataclass, field
from pathlib import Path

from .storage import BUNDLED_CONTENT_DIR

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str, default: list[str]) -> list[str]:
    value = os.getenv(name)
    if not value:
        return list(default)
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class QuizConfig:
    """Configuracao do servico de quizzes.

    Attributes:
        content_dir: Diretorio com <nome>/quiz.json (QUIZ_CONTENT_DIR)
        strict_lint: Avisos de lint falham a validacao (QUIZ_STRICT_LINT)
        disabled_lint_rules: Regras de lint ignoradas (QUIZ_LINT_DISABLE)
        cors_origins: Origens liberadas para o renderer (QUIZ_CORS_ORIGINS)
        log_level: Nivel de log (LOG_LEVEL)
    """

    content_dir: Path = BUNDLED_CONTENT_DIR
    strict_lint: bool = False
    disabled_lint_rules: list[str] = field(default_factory=list)
    cors_origins: list[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "QuizConfig":
        """Cria config a partir das variaveis de ambiente."""
        content_dir = os.getenv("QUIZ_CONTENT_DIR")
        return cls(
            content_dir=Path(content_dir) if content_dir else BUNDLED_CONTENT_DIR,
            strict_lint=_env_bool("QUIZ_STRICT_LINT", False),
            disabled_lint_rules=_env_list("QUIZ_LINT_DISABLE", []),
            cors_origins=_env_list("QUIZ_CORS_ORIGINS", DEFAULT_CORS_ORIGINS),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


def get_config() -> QuizConfig:
    """Retorna config atual (lida do ambiente a cada chamada)."""
    return QuizConfig.from_env()
