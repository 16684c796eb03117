"""Quiz Enums - Modo de selecao e severidade de lint."""

from enum import Enum


class SelectionMode(str, Enum):
    """Como o renderer deve coletar a resposta."""

    SINGLE = "single"  # Exatamente uma correta - radio
    MULTIPLE = "multiple"  # Zero ou varias corretas - checkbox


class LintSeverity(str, Enum):
    """Severidade de um problema de conteudo."""

    WARNING = "warning"  # Provavel bug de autoria
    INFO = "info"  # Intencional na maioria dos casos
