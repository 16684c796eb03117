"""Quiz Storage - Leitura do conteudo autorado."""

from .content_store import BUNDLED_CONTENT_DIR, ContentStore

__all__ = ["ContentStore", "BUNDLED_CONTENT_DIR"]
