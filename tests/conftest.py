# =============================================================================
# CONFTEST - Fixtures compartilhadas para todos os testes
# =============================================================================
# Quizzes de exemplo, registro populado e diretorios de conteudo temporarios
# =============================================================================

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest


# =============================================================================
# FIXTURES DE AMBIENTE
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Configura ambiente de testes globalmente."""
    env_vars = {
        "LOG_LEVEL": "ERROR",  # Reduzir logs em testes
    }
    with patch.dict(os.environ, env_vars):
        yield


@pytest.fixture
def clean_env():
    """Limpa variaveis de ambiente para testes isolados."""
    with patch.dict(os.environ, {}, clear=True):
        yield


# =============================================================================
# FIXTURES DO QUIZ
# =============================================================================


@pytest.fixture
def srp_quiz_data():
    """Quiz srp-patterns-3 no formato de authoring."""
    return {
        "name": "srp-patterns-3",
        "question": "Сколько классов должно получиться после разделения?",
        "variants": [
            {"text": "1 класс"},
            {"text": "2 класса"},
            {"text": "3 класса", "description": "Три причины для изменения."},
        ],
        "meta": {"correctAnswers": [2]},
    }


@pytest.fixture
def lsp_quiz_data():
    """Quiz lsp-ideal-1 (todas as alternativas corretas)."""
    return {
        "name": "lsp-ideal-1",
        "question": "Какую задачу решает общая абстракция?",
        "variants": [
            {"text": "Содержит и описывает в себе общую для обоих классов функциональность"},
            {"text": "Предотвращает противоречие в поведении базовой сущности и её потомков"},
            {
                "text": {
                    "kind": "block",
                    "children": [
                        {"kind": "text", "text": "Позволяет использовать"},
                        {"kind": "emphasis", "children": [{"kind": "text", "text": "любую"}]},
                        {"kind": "text", "text": "фигуру"},
                    ],
                }
            },
            {"text": "Позволяет композировать свойства без прямого наследования"},
        ],
        "meta": {"correctAnswers": [0, 1, 2, 3]},
    }


@pytest.fixture
def srp_quiz(srp_quiz_data):
    """QuizRecord srp-patterns-3."""
    from lesson_quiz.models.schemas import QuizRecord

    return QuizRecord.model_validate(srp_quiz_data)


@pytest.fixture
def lsp_quiz(lsp_quiz_data):
    """QuizRecord lsp-ideal-1."""
    from lesson_quiz.models.schemas import QuizRecord

    return QuizRecord.model_validate(lsp_quiz_data)


@pytest.fixture
def registry(srp_quiz, lsp_quiz):
    """Registro com os dois quizzes de exemplo."""
    from lesson_quiz.engine.registry import QuizRegistry

    reg = QuizRegistry()
    reg.define(srp_quiz)
    reg.define(lsp_quiz)
    return reg


@pytest.fixture
def make_content_dir(tmp_path: Path):
    """Factory para criar diretorio de conteudo com <nome>/quiz.json."""

    def _make(quizzes: dict[str, object]) -> Path:
        root = tmp_path / "content"
        root.mkdir(exist_ok=True)
        for folder, data in quizzes.items():
            quiz_dir = root / folder
            quiz_dir.mkdir()
            text = data if isinstance(data, str) else json.dumps(data, ensure_ascii=False)
            (quiz_dir / "quiz.json").write_text(text, encoding="utf-8")
        return root

    return _make


# =============================================================================
# FIXTURES DE LOGGING
# =============================================================================


@pytest.fixture
def capture_logs(caplog):
    """Captura logs para verificacao em testes."""
    import logging

    caplog.set_level(logging.DEBUG)
    return caplog
