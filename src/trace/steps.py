"""
Step records and the pull-based iterator that produces them.

A trace is an ordered, finite sequence of immutable Step values. Each
algorithm keeps its cursors and tables as fields of a StepIterator subclass
and advances them one transition per pull, so the consumer decides when the
algorithm makes progress.
"""

from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Any, Deque, Dict, Optional, Tuple, Union


class StepState(Enum):
    INIT = "init"
    WINDOW = "window"
    MATCH = "match"
    MISMATCH = "mismatch"
    SHIFT = "shift"
    HASH_MATCH = "hash-match"
    HASH_MISMATCH = "hash-mismatch"
    FOUND = "found"
    FINISHED = "finished"


@dataclass(frozen=True)
class LpsSnapshot:
    """LPS table attached to KMP steps."""

    values: Tuple[int, ...]


@dataclass(frozen=True)
class HashPair:
    """Pattern hash and current window hash attached to Rabin-Karp steps."""

    pattern_hash: int
    window_hash: int


Auxiliary = Union[LpsSnapshot, HashPair]


@dataclass(frozen=True)
class Step:
    """
    One discrete point of algorithm progress.

    Attributes:
        state: What happened at this step
        text_index: Text cursor, -1 if the step has none
        pattern_index: Pattern cursor, -1 if the step has none
        message: Human readable description
        auxiliary: LPS snapshot or hash pair, depending on the algorithm
    """

    state: StepState
    text_index: int = -1
    pattern_index: int = -1
    message: str = ""
    auxiliary: Optional[Auxiliary] = None

    def to_dict(self) -> Dict[str, Any]:
        """Renderer payload with camelCase keys."""
        payload: Dict[str, Any] = {
            "textIndex": self.text_index,
            "patternIndex": self.pattern_index,
            "state": self.state.value,
            "message": self.message,
        }
        if isinstance(self.auxiliary, LpsSnapshot):
            payload["lps"] = list(self.auxiliary.values)
        elif isinstance(self.auxiliary, HashPair):
            payload["patternHash"] = self.auxiliary.pattern_hash
            payload["windowHash"] = self.auxiliary.window_hash
        return payload


class StepIterator(ABC):
    """
    Iterator over the steps of one algorithm run.

    Subclasses implement ``_advance``, which performs one state transition and
    emits zero or more steps. The sequence always ends with a single
    ``finished`` step; pulling past it keeps raising StopIteration.
    """

    def __init__(self, text: str, pattern: str):
        self.text = text
        self.pattern = pattern
        self.n = len(text)
        self.m = len(pattern)
        self.emitted = 0
        self._pending: Deque[Step] = deque()
        self._done = False

    def __iter__(self) -> "StepIterator":
        return self

    def __next__(self) -> Step:
        while not self._pending:
            if self._done:
                raise StopIteration
            self._advance()
        self.emitted += 1
        return self._pending.popleft()

    @property
    def finished(self) -> bool:
        return self._done and not self._pending

    @abstractmethod
    def _advance(self) -> None:
        pass

    def _emit(
        self,
        state: StepState,
        text_index: int = -1,
        pattern_index: int = -1,
        message: str = "",
        auxiliary: Optional[Auxiliary] = None,
    ) -> None:
        self._pending.append(
            Step(
                state=state,
                text_index=text_index,
                pattern_index=pattern_index,
                message=message,
                auxiliary=auxiliary,
            )
        )

    def _finish(self) -> None:
        self._emit(StepState.FINISHED, message="Search completed")
        self._done = True

    def _compare(self, text_index: int, pattern_index: int) -> bool:
        """Compare one character pair and emit the match/mismatch step."""
        t_char = self.text[text_index]
        p_char = self.pattern[pattern_index]
        if t_char == p_char:
            self._emit(
                StepState.MATCH,
                text_index,
                pattern_index,
                f"Match: text[{text_index}] == pattern[{pattern_index}] ({t_char!r})",
            )
            return True
        self._emit(
            StepState.MISMATCH,
            text_index,
            pattern_index,
            f"Mismatch: text[{text_index}] {t_char!r} != pattern[{pattern_index}] {p_char!r}",
        )
        return False
