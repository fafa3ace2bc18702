"""Token-level parser validating dollar-expression structure."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from dollar.errors import ParseError
from dollar.scanner import EOF, Token, TokenKind, quote

DOLLAR_TEXT = "$"


class NodeKind(str, Enum):
    EXP = "exp"
    DOLLAR_EXP = "dollar_exp"
    EOF = "eof"


@dataclass(frozen=True, slots=True)
class Node:
    """A semantic segment: literal text or the body of a ``$$ ... $$`` pair."""

    kind: NodeKind
    text: str = ""

    @classmethod
    def exp(cls, text: str) -> Node:
        return cls(NodeKind.EXP, text)

    @classmethod
    def dollar_exp(cls, text: str) -> Node:
        return cls(NodeKind.DOLLAR_EXP, text)

    def asdict(self) -> dict[str, str]:
        return {"kind": self.kind.value, "text": self.text}

    def __repr__(self) -> str:
        if self.kind is NodeKind.EOF:
            return "Eof"
        name = "Exp" if self.kind is NodeKind.EXP else "DollarExp"
        return f"{name}({quote(self.text)})"


END = Node(NodeKind.EOF)


class Parser:
    """Single-use parser over a materialized token list.

    The grammar needs one token of lookahead:

    - ``Eof`` ends the document,
    - ``DollarDollar`` opens an expression that must be closed by another,
    - ``Other`` and ``Dollar`` runs fold into a single plain-text node, a lone
      ``Dollar`` contributing a literal ``$``.
    """

    def __init__(self, tokens: Sequence[Token]) -> None:
        self._tokens = list(tokens)
        self._index = 0
        self._consumed = False
        self.nodes: list[Node] = []

    def parse(self) -> list[Node]:
        if self._consumed:
            raise RuntimeError("parser already consumed")
        self._consumed = True

        nodes: list[Node] = []
        while True:
            node = self.parse_node()
            if node is END:
                break
            nodes.append(node)
        self.nodes = nodes
        return nodes

    def parse_node(self) -> Node:
        kind = self.peek().kind
        if kind is TokenKind.EOF:
            return END
        if kind is TokenKind.DOLLAR_DOLLAR:
            return self.parse_dollar_dollar()
        return self.parse_other()

    def parse_other(self) -> Node:
        parts: list[str] = []
        while True:
            token = self.peek()
            if token.kind is TokenKind.OTHER:
                parts.append(token.text)
            elif token.kind is TokenKind.DOLLAR:
                parts.append(DOLLAR_TEXT)
            else:
                break
            self.read()
        return Node.exp("".join(parts))

    def parse_dollar_dollar(self) -> Node:
        if self.read().kind is not TokenKind.DOLLAR_DOLLAR:
            raise ParseError("expected $$")

        body = self.parse_other()
        if body.kind is not NodeKind.EXP:
            raise ParseError("expected expression")

        if self.read().kind is not TokenKind.DOLLAR_DOLLAR:
            raise ParseError("expected $$")
        return Node.dollar_exp(body.text)

    def read(self) -> Token:
        token = self.peek()
        self._index += 1
        return token

    def peek(self, offset: int = 0) -> Token:
        position = self._index + offset
        if position >= len(self._tokens):
            return EOF
        return self._tokens[position]


def parse(tokens: Sequence[Token]) -> list[Node]:
    """Parse ``tokens`` into nodes; raises :class:`ParseError` on the first violation."""
    return Parser(tokens).parse()


__all__ = ["END", "Node", "NodeKind", "ParseError", "Parser", "parse"]
