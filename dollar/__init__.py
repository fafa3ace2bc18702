"""Recognizer for ``$$ ... $$`` dollar-expressions embedded in plain text."""

from dollar.errors import DollarError, ParseError, ScanError
from dollar.parser import Node, NodeKind
from dollar.pipeline import ParsedDocument, validate
from dollar.scanner import Token, TokenKind

__all__ = [
    "DollarError",
    "Node",
    "NodeKind",
    "ParseError",
    "ParsedDocument",
    "ScanError",
    "Token",
    "TokenKind",
    "validate",
]
