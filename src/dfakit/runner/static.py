"""Static evaluation of literals fixed at definition time.

Static evaluation is meant for inputs that are part of the program text:
literals checked while an automaton is being defined, typically at import
time. A literal that fails its declared verdict aborts the definition, so a
broken automaton never reaches run time.

Evaluation works over a precomputed TransitionTable and recurses once per
character, so the depth for a literal of length N is at most N + 1 frames.
Literals longer than Config.recursion_window are walked one window at a
time, which keeps any finite literal inside the recursion limit. Verdicts
are kept in a bounded LRU cache per automaton since both the automaton and
the literal are immutable.
"""

import functools
import weakref
from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

from dfakit.automaton.model import Automaton, as_text, is_symbol
from dfakit.automaton.resolver import TransitionTable
from dfakit.config import Config
from dfakit.exceptions import ExpectationError, LiteralError


@dataclass(frozen=True)
class StaticExpectation:
    """A literal and the verdict the automaton must give for it."""

    literal: Union[str, bytes]
    accepted: bool = True

    def __repr__(self) -> str:
        verdict = "accept" if self.accepted else "reject"
        return f"{verdict} {self.literal!r}"


class StaticEvaluator:
    """Evaluates literals against one automaton with a memoized table.

    Attributes:
        automaton: The automaton being evaluated.
        table: First-match lookup table for the automaton.
        config: Limits applied to literals.
    """

    def __init__(self, automaton: Automaton, config: Config = None):
        self._automaton = weakref.ref(automaton)
        self._accept = {state.name: state.accept for state in automaton}
        self.table = TransitionTable(automaton)
        self.config = config or Config.default()
        self._verdict = functools.lru_cache(maxsize=self.config.cache_size)(self._walk)

    @property
    def automaton(self) -> Automaton:
        return self._automaton()

    def check_literal(self, literal: Union[str, bytes]) -> str:
        """Validate a literal and return it as str.

        Raises:
            LiteralError: If literal is not str/bytes, exceeds a configured
                length cap, or holds a character outside the single-byte
                alphabet.
        """
        if not isinstance(literal, (str, bytes, bytearray)):
            raise LiteralError(f"literal must be str or bytes, got {type(literal).__name__}")
        text = as_text(literal)
        limit = self.config.max_literal_length
        if limit is not None and len(text) > limit:
            raise LiteralError(
                f"literal of length {len(text)} exceeds max_literal_length {limit}"
            )
        for i, c in enumerate(text):
            if not is_symbol(c):
                raise LiteralError(f"character {c!r} at position {i} is not a single byte")
        return text

    def evaluate(self, literal: Union[str, bytes], start: Optional[str] = None) -> bool:
        """Decide whether the automaton accepts literal.

        Args:
            literal: The fixed input.
            start: Name of the state to start from. Defaults to the start state.

        Returns:
            True if the literal is accepted.
        """
        text = self.check_literal(literal)
        if start is None:
            start = self.automaton.start
        else:
            self.automaton.state(start)
        return self._verdict(start, text)

    def cache_info(self):
        """Return hit/miss statistics of the verdict cache."""
        return self._verdict.cache_info()

    def _walk(self, start: str, text: str) -> bool:
        window = self.config.recursion_window
        name: Optional[str] = start
        for begin in range(0, len(text), window):
            name = self._run(name, text, begin, min(begin + window, len(text)))
            if name is None:
                return False
        return self._accept[name]

    def _run(self, name: str, text: str, index: int, stop: int) -> Optional[str]:
        # Returns the state reached at stop, or None when no transition matches.
        if index == stop:
            return name
        c = text[index]
        if self.table.match_any(name, c):
            return self._run(self.table.next(name, c), text, index + 1, stop)
        return None


_evaluators: "weakref.WeakKeyDictionary[Automaton, StaticEvaluator]" = (
    weakref.WeakKeyDictionary()
)


def _evaluator_for(automaton: Automaton, config: Optional[Config]) -> StaticEvaluator:
    if config is not None:
        return StaticEvaluator(automaton, config)
    evaluator = _evaluators.get(automaton)
    if evaluator is None:
        evaluator = StaticEvaluator(automaton)
        _evaluators[automaton] = evaluator
    return evaluator


def evaluate_static(
    automaton: Automaton,
    literal: Union[str, bytes],
    start: Optional[str] = None,
    config: Config = None,
) -> bool:
    """Decide acceptance of a literal known before evaluation.

    Args:
        automaton: The automaton.
        literal: The fixed input string.
        start: Optional name of the state to start from.
        config: Optional configuration; evaluators for the default config are
            cached per automaton.

    Returns:
        True if the literal is accepted.

    Raises:
        LiteralError: If literal is not a valid literal.
    """
    return _evaluator_for(automaton, config).evaluate(literal, start)


def verify_expectations(
    automaton: Automaton,
    expectations: Iterable[StaticExpectation],
    config: Config = None,
) -> None:
    """Check every expectation statically.

    Raises:
        ExpectationError: Listing all expectations whose verdict differs.
    """
    evaluator = _evaluator_for(automaton, config)
    failures: List[StaticExpectation] = []
    for expectation in expectations:
        if evaluator.evaluate(expectation.literal) != expectation.accepted:
            failures.append(expectation)
    if failures:
        raise ExpectationError(failures)
