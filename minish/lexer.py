"""Quote and escape aware tokenizer for command lines."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto

logger = logging.getLogger(__name__)

# Characters a backslash escapes inside double quotes; anything else keeps it.
DOUBLE_QUOTE_ESCAPES = frozenset('$`"\\\n')


class LexState(Enum):
    UNQUOTED = auto()
    SINGLE_QUOTED = auto()
    DOUBLE_QUOTED = auto()
    ESCAPE_UNQUOTED = auto()
    ESCAPE_DOUBLE_QUOTED = auto()


@dataclass(frozen=True, slots=True)
class Transition:
    """Result of feeding one character to the lexer.

    ``text`` is appended to the current word; ``split`` closes the word.
    """

    state: LexState
    text: str = ""
    split: bool = False


def step(state: LexState, char: str) -> Transition:
    """Pure transition function over ``(state, char)`` pairs."""

    if state is LexState.UNQUOTED:
        if char == "'":
            return Transition(LexState.SINGLE_QUOTED)
        if char == '"':
            return Transition(LexState.DOUBLE_QUOTED)
        if char == "\\":
            return Transition(LexState.ESCAPE_UNQUOTED)
        if char.isspace():
            return Transition(LexState.UNQUOTED, split=True)
        return Transition(LexState.UNQUOTED, char)
    if state is LexState.SINGLE_QUOTED:
        if char == "'":
            return Transition(LexState.UNQUOTED)
        return Transition(LexState.SINGLE_QUOTED, char)
    if state is LexState.DOUBLE_QUOTED:
        if char == '"':
            return Transition(LexState.UNQUOTED)
        if char == "\\":
            return Transition(LexState.ESCAPE_DOUBLE_QUOTED)
        return Transition(LexState.DOUBLE_QUOTED, char)
    if state is LexState.ESCAPE_DOUBLE_QUOTED:
        if char in DOUBLE_QUOTE_ESCAPES:
            return Transition(LexState.DOUBLE_QUOTED, char)
        return Transition(LexState.DOUBLE_QUOTED, "\\" + char)
    # ESCAPE_UNQUOTED
    return Transition(LexState.UNQUOTED, char)


def tokenize(line: str) -> list[str]:
    """Split ``line`` into shell words.

    Unterminated quotes are accepted and run to the end of the input.
    """

    tokens: list[str] = []
    buffer: list[str] = []
    state = LexState.UNQUOTED
    for char in line:
        transition = step(state, char)
        state = transition.state
        if transition.split:
            if buffer:
                tokens.append("".join(buffer))
                buffer.clear()
            continue
        if transition.text:
            buffer.append(transition.text)
    if buffer:
        tokens.append("".join(buffer))
    if state is not LexState.UNQUOTED:
        logger.debug("input ended in state %s", state.name)
    return tokens


__all__ = ["LexState", "Transition", "step", "tokenize", "DOUBLE_QUOTE_ESCAPES"]
