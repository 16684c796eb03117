"""Quiz Content - Nos de conteudo renderizavel.

Perguntas e alternativas podem conter tabelas, enfase e trechos de codigo,
entao o conteudo e uma arvore de nos tipados (discriminados por ``kind``)
e nao uma string crua. Strings simples continuam aceitas e viram ``TextNode``.
"""

from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class _Node(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class TextNode(_Node):
    """Trecho de texto simples."""

    kind: Literal["text"] = "text"
    text: str


class EmphasisNode(_Node):
    """Enfase (italico, ou negrito quando strong=True)."""

    kind: Literal["emphasis"] = "emphasis"
    children: tuple[ContentNode, ...] = Field(..., min_length=1)
    strong: bool = False


class CodeNode(_Node):
    """Bloco de codigo ilustrativo."""

    kind: Literal["code"] = "code"
    code: str
    language: Optional[str] = Field(default=None, description="Linguagem para highlight (ts, py...)")


class ListNode(_Node):
    """Lista (ordenada ou nao) de nos de conteudo."""

    kind: Literal["list"] = "list"
    items: tuple[ContentNode, ...] = Field(..., min_length=1)
    ordered: bool = False


class TableNode(_Node):
    """Tabela simples de texto."""

    kind: Literal["table"] = "table"
    header: tuple[str, ...] = Field(..., min_length=1)
    rows: tuple[tuple[str, ...], ...] = ()

    @model_validator(mode="after")
    def validar_largura(self) -> "TableNode":
        """Todas as linhas devem ter a largura do header."""
        width = len(self.header)
        for i, row in enumerate(self.rows):
            if len(row) != width:
                raise ValueError(f"Linha {i} da tabela tem {len(row)} celulas, esperado {width}")
        return self


class BlockNode(_Node):
    """Sequencia de nos (paragrafos de uma pergunta longa)."""

    kind: Literal["block"] = "block"
    children: tuple[ContentNode, ...] = Field(..., min_length=1)


ContentNode = Annotated[
    Union[TextNode, EmphasisNode, CodeNode, ListNode, TableNode, BlockNode],
    Field(discriminator="kind"),
]

# Strings cruas sao aceitas no authoring e normalizadas pelos schemas
Content = Union[str, ContentNode]

EmphasisNode.model_rebuild()
ListNode.model_rebuild()
BlockNode.model_rebuild()


def to_node(content: Content) -> _Node:
    """Normaliza conteudo para um no tipado."""
    if isinstance(content, str):
        return TextNode(text=content)
    return content


def plain_text(content: Optional[Content]) -> str:
    """Achata o conteudo em texto simples (para logs, lint e CLI)."""
    if content is None:
        return ""
    if isinstance(content, str):
        return content
    if isinstance(content, TextNode):
        return content.text
    if isinstance(content, CodeNode):
        return content.code
    if isinstance(content, (EmphasisNode, BlockNode)):
        return " ".join(plain_text(child) for child in content.children)
    if isinstance(content, ListNode):
        return " ".join(plain_text(item) for item in content.items)
    if isinstance(content, TableNode):
        cells = list(content.header)
        for row in content.rows:
            cells.extend(row)
        return " ".join(cells)
    raise TypeError(f"Tipo de conteudo desconhecido: {type(content).__name__}")
