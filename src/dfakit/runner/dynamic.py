"""Run-time evaluation of inputs known only while the program executes."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Union

from dfakit.automaton.model import Automaton, as_text
from dfakit.automaton.resolver import resolve

logger = logging.getLogger(__name__)


@dataclass
class Trace:
    """Record of a single dynamic evaluation.

    Attributes:
        text: The evaluated input.
        path: Names of the visited states, starting with the start state.
        position: Index of the first unconsumed character.
        accepted: The verdict.
    """

    text: str
    path: List[str] = field(default_factory=list)
    position: int = 0
    accepted: bool = False

    @property
    def final_state(self) -> str:
        return self.path[-1]

    @property
    def stuck(self) -> bool:
        """True if evaluation stopped before consuming the whole input."""
        return self.position < len(self.text)


def evaluate_dynamic(
    automaton: Automaton,
    text: Union[str, bytes],
    index: int = 0,
    start: Optional[str] = None,
) -> bool:
    """Decide acceptance of a run-time input.

    At each position the current state's transitions are scanned in declared
    order and the first one labeled with the current character is followed.
    When no transition matches the input is rejected without reading further.
    The walk is a loop, so input length is unbounded.

    Args:
        automaton: The automaton.
        text: The input, str or bytes.
        index: Position in text to start at.
        start: Name of the state to start from. Defaults to the start state.

    Returns:
        True if the input is accepted.
    """
    if index < 0:
        raise ValueError(f"index must be non-negative, got {index}")
    text = as_text(text)
    state = automaton.state(automaton.start if start is None else start)
    states = automaton.states

    for position in range(index, len(text)):
        target = resolve(state, text[position])
        if target is None:
            return False
        state = states[target]
    return state.accept


def trace(
    automaton: Automaton,
    text: Union[str, bytes],
    index: int = 0,
    start: Optional[str] = None,
) -> Trace:
    """Evaluate like evaluate_dynamic() while recording the visited states."""
    if index < 0:
        raise ValueError(f"index must be non-negative, got {index}")
    text = as_text(text)
    state = automaton.state(automaton.start if start is None else start)
    result = Trace(text=text, path=[state.name], position=index)

    while result.position < len(text):
        c = text[result.position]
        target = resolve(state, c)
        if target is None:
            logger.debug("%s: no transition on %r at %d", state.name, c, result.position)
            result.accepted = False
            return result
        logger.debug("%s --%r--> %s", state.name, c, target)
        state = automaton.states[target]
        result.path.append(target)
        result.position += 1

    result.accepted = state.accept
    return result
