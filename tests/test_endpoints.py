# =============================================================================
# TESTES DE INTEGRACAO - Endpoints
# =============================================================================
# Testes de integracao usando FastAPI TestClient (sem servidor externo)
# =============================================================================

import os
from unittest.mock import patch

import pytest


@pytest.fixture
def client():
    """Cliente de teste FastAPI com o conteudo do pacote."""
    from fastapi.testclient import TestClient

    from server import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def client_with_content(make_content_dir, srp_quiz_data):
    """Cliente com diretorio de conteudo customizado (um quiz invalido)."""
    from fastapi.testclient import TestClient

    from server import app

    broken = dict(srp_quiz_data, name="broken-1", meta={"correctAnswers": [9]})
    root = make_content_dir({"srp-patterns-3": srp_quiz_data, "broken-1": broken})

    with patch.dict(os.environ, {"QUIZ_CONTENT_DIR": str(root)}):
        with TestClient(app) as test_client:
            yield test_client


class TestHealthEndpoints:
    """Testes do health check."""

    def test_health_returns_healthy(self, client):
        """GET /health - registro carregado sem erros."""
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["quizzes"] >= 2
        assert data["frozen"] is True

    def test_health_degraded_with_errors(self, client_with_content):
        """GET /health - quiz invalido deixa status degraded."""
        data = client_with_content.get("/health").json()

        assert data["status"] == "degraded"
        assert data["quizzes"] == 1
        assert data["errors"][0]["error"] == "SchemaViolation"


class TestLookupEndpoints:
    """Testes de listagem e lookup."""

    def test_list_quizzes(self, client):
        """GET /quiz/ - lista nomes."""
        data = client.get("/quiz/").json()

        assert "srp-patterns-3" in data["names"]
        assert data["total"] == len(data["names"])

    def test_get_quiz(self, client):
        """GET /quiz/{name} - retorna quiz com alias camelCase."""
        response = client.get("/quiz/srp-patterns-3")

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "srp-patterns-3"
        assert data["meta"] == {"correctAnswers": [2]}
        assert data["selection_mode"] == "single"
        assert [v["text"] for v in data["variants"]] == ["1 класс", "2 класса", "3 класса"]

    def test_get_quiz_not_found(self, client):
        """GET /quiz/{name} - 404 para nome desconhecido."""
        response = client.get("/quiz/ocp-intro-1")

        assert response.status_code == 404
        assert response.json()["detail"]["error"] == "NotFound"

    def test_lint_quiz(self, client):
        """GET /quiz/{name}/lint - avisos do quiz."""
        response = client.get("/quiz/lsp-ideal-1/lint")

        assert response.status_code == 200
        assert "all-correct" in [issue["rule"] for issue in response.json()]

    def test_lint_respects_disabled_rules(self):
        """GET /quiz/{name}/lint - regras de QUIZ_LINT_DISABLE ficam de fora."""
        from fastapi.testclient import TestClient

        from server import app

        env = {"QUIZ_LINT_DISABLE": "all-correct,missing-description"}
        with patch.dict(os.environ, env):
            with TestClient(app) as test_client:
                response = test_client.get("/quiz/lsp-ideal-1/lint")

        assert response.status_code == 200
        assert response.json() == []


class TestEvaluateEndpoints:
    """Testes de avaliacao."""

    @pytest.mark.parametrize(
        "selected,expected",
        [([2], True), ([0], False), ([0, 2], False), ([2, 2], True)],
    )
    def test_evaluate_srp(self, client, selected, expected):
        """POST /quiz/{name}/evaluate - cenario srp-patterns-3."""
        response = client.post("/quiz/srp-patterns-3/evaluate", json={"selected": selected})

        assert response.status_code == 200
        assert response.json()["is_correct"] is expected

    def test_evaluate_lsp_incomplete(self, client):
        """POST /quiz/{name}/evaluate - selecao incompleta."""
        data = client.post("/quiz/lsp-ideal-1/evaluate", json={"selected": [1, 2, 3]}).json()

        assert data["is_correct"] is False
        assert data["missed"] == [0]

    def test_evaluate_feedback(self, client):
        """Feedback traz a descricao da correta."""
        data = client.post("/quiz/srp-patterns-3/evaluate", json={"selected": [0]}).json()

        assert "2" in data["feedback"]
        assert data["feedback"]["2"]["kind"] == "block"

    def test_evaluate_not_found(self, client):
        """404 para quiz desconhecido."""
        response = client.post("/quiz/nada/evaluate", json={"selected": [0]})

        assert response.status_code == 404

    def test_evaluate_invalid_selection(self, client):
        """422 para indice fora do range."""
        response = client.post("/quiz/srp-patterns-3/evaluate", json={"selected": [7]})

        assert response.status_code == 422
        assert response.json()["detail"]["error"] == "InvalidSelection"

    @pytest.mark.parametrize("selected", [["2"], [2.0], [True]])
    def test_evaluate_rejects_non_integer_selection(self, client, selected):
        """422 para indices que nao sao inteiros JSON (sem coercao)."""
        response = client.post("/quiz/srp-patterns-3/evaluate", json={"selected": selected})

        assert response.status_code == 422

    def test_score_rejects_non_integer_selection(self, client):
        """POST /quiz/score - 422 para indice em string."""
        response = client.post("/quiz/score", json={"answers": {"srp-patterns-3": ["2"]}})

        assert response.status_code == 422

    def test_score_lesson(self, client):
        """POST /quiz/score - pontuacao agregada."""
        response = client.post(
            "/quiz/score",
            json={"answers": {"srp-patterns-3": [2], "lsp-ideal-1": [1, 2, 3]}},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 2
        assert data["correct"] == 1
        assert data["percentage"] == 50.0
        assert data["failed"] == ["lsp-ideal-1"]

    def test_score_unknown_quiz(self, client):
        """POST /quiz/score - 404 com quiz desconhecido."""
        response = client.post("/quiz/score", json={"answers": {"nada": [0]}})

        assert response.status_code == 404
