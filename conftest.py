# =============================================================================
# CONFTEST - Pytest Fixtures Globais
# =============================================================================
# Garante que os modulos da raiz (config, app_state, server) sejam importaveis
# =============================================================================

import os
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

# Adicionar root ao path
sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture(autouse=True)
def setup_test_env():
    """Isola os testes de configuracao de quizzes do ambiente local."""
    with patch.dict(os.environ):
        for name in ("QUIZ_CONTENT_DIR", "QUIZ_STRICT_LINT", "QUIZ_LINT_DISABLE", "QUIZ_CORS_ORIGINS"):
            os.environ.pop(name, None)
        yield
