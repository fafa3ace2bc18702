"""Character-level scanner turning raw text into dollar tokens."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum

from dollar.errors import ScanError

NUL = "\0"
DOLLAR_CHAR = "$"
ESCAPE_CHAR = "\\"


def quote(text: str) -> str:
    """Double-quoted rendering of ``text`` used by token and node reprs."""
    return json.dumps(text, ensure_ascii=False)


class TokenKind(str, Enum):
    DOLLAR = "dollar"
    DOLLAR_DOLLAR = "dollar_dollar"
    OTHER = "other"
    EOF = "eof"


@dataclass(frozen=True, slots=True)
class Token:
    """A lexical unit. Only ``OTHER`` tokens carry text."""

    kind: TokenKind
    text: str = ""

    @classmethod
    def other(cls, text: str) -> Token:
        return cls(TokenKind.OTHER, text)

    def __repr__(self) -> str:
        if self.kind is TokenKind.OTHER:
            return f"Other({quote(self.text)})"
        return self.kind.name.title().replace("_", "")


DOLLAR = Token(TokenKind.DOLLAR)
DOLLAR_DOLLAR = Token(TokenKind.DOLLAR_DOLLAR)
EOF = Token(TokenKind.EOF)


class Scanner:
    """Single-use scanner over one input string.

    ``peek`` past the end yields ``"\\0"``; an embedded NUL ends scanning the
    same way.
    """

    def __init__(self, text: str) -> None:
        self._input = text
        self._index = 0
        self._consumed = False
        self.tokens: list[Token] = []

    def scan(self) -> list[Token]:
        if self._consumed:
            raise RuntimeError("scanner already consumed")
        self._consumed = True

        tokens: list[Token] = []
        while True:
            token = self.scan_token()
            if token is EOF:
                break
            tokens.append(token)
        self.tokens = tokens
        return tokens

    def scan_token(self) -> Token:
        char = self.peek()
        if char == NUL:
            return EOF
        if char == DOLLAR_CHAR:
            self.read()
            if self.peek() == DOLLAR_CHAR:
                self.read()
                return DOLLAR_DOLLAR
            return DOLLAR
        return self.read_other()

    def read_other(self) -> Token:
        chars: list[str] = []
        while True:
            char = self.peek()
            if char in (NUL, DOLLAR_CHAR):
                break
            if char == ESCAPE_CHAR:
                self.read()
                # unconditional: a trailing backslash takes the NUL sentinel
                chars.append(self.read())
            else:
                chars.append(char)
                self.read()
        return Token.other("".join(chars))

    def read(self) -> str:
        char = self.peek()
        self._index += 1
        return char

    def peek(self, offset: int = 0) -> str:
        position = self._index + offset
        if position >= len(self._input):
            return NUL
        return self._input[position]


def scan(text: str) -> list[Token]:
    """Tokenize ``text``; raises :class:`ScanError` on lexical failure."""
    return Scanner(text).scan()


__all__ = [
    "DOLLAR",
    "DOLLAR_DOLLAR",
    "EOF",
    "ScanError",
    "Scanner",
    "Token",
    "TokenKind",
    "scan",
]
