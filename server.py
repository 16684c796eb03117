"""
Lesson Quiz Server

FastAPI backend consumido pelo renderer de quizzes das licoes:
- Registro de quizzes carregado e validado no startup
- Lookup por nome e avaliacao de respostas
- Lint de conteudo para autores
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app_state import build_lint_engine, build_registry
from lesson_quiz import __version__
from lesson_quiz.config import get_config
from lesson_quiz.router import router as quiz_router

# =============================================================================
# CONFIGURATION
# =============================================================================

config = get_config()

logging.basicConfig(
    level=getattr(logging, config.log_level, logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger("lesson_quiz.server")


# =============================================================================
# FASTAPI APP
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Monta o registro no startup e descarta no shutdown."""
    app_config = get_config()
    registry, report = build_registry(app_config)
    app.state.registry = registry
    app.state.registration_report = report
    app.state.lint_engine = build_lint_engine(app_config)
    logger.info(f"Lesson Quiz iniciado com {len(registry)} quizzes de {app_config.content_dir}")
    yield
    app.state.registry = None
    app.state.lint_engine = None
    logger.info("Lesson Quiz encerrado")


app = FastAPI(
    title="Lesson Quiz",
    description="Registro e avaliacao dos quizzes das licoes",
    version=__version__,
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.include_router(quiz_router)


# =============================================================================
# HEALTH ENDPOINTS
# =============================================================================


@app.get("/health")
async def health(request: Request):
    """Health check com contagem de quizzes e erros de carregamento."""
    registry = getattr(request.app.state, "registry", None)
    report = getattr(request.app.state, "registration_report", None)

    if registry is None:
        return {"status": "starting", "quizzes": 0, "errors": []}

    errors = [e.to_dict() for e in report.errors] if report else []
    return {
        "status": "degraded" if errors else "healthy",
        "quizzes": len(registry),
        "frozen": registry.frozen,
        "errors": errors,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8001)
