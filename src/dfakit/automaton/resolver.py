"""First-match transition resolution."""

from typing import Dict, Optional

from dfakit.automaton.model import Automaton, State


def resolve(state: State, c: str) -> Optional[str]:
    """Find the successor of a state on character c.

    Transitions are scanned in declared order and the first one labeled c
    wins, even when later transitions share the label.

    Args:
        state: The current state.
        c: The input character.

    Returns:
        Name of the destination state, or None if no transition matches.
    """
    for trans in state.transitions:
        if trans.matches(c):
            return trans.target
    return None


def match_any(state: State, c: str) -> bool:
    """Check if any transition of state is labeled c."""
    return any(trans.matches(c) for trans in state.transitions)


class TransitionTable:
    """Precomputed first-match lookup for every state of an automaton.

    Each state's transitions are folded into a label -> target dict in
    declaration order with setdefault, so a duplicate label keeps the
    destination declared first. Lookups agree with resolve() by construction.
    """

    def __init__(self, automaton: Automaton):
        self._table: Dict[str, Dict[str, str]] = {}
        for state in automaton:
            row: Dict[str, str] = {}
            for trans in state.transitions:
                row.setdefault(trans.label, trans.target)
            self._table[state.name] = row

    def match_any(self, name: str, c: str) -> bool:
        return c in self._table[name]

    def next(self, name: str, c: str) -> Optional[str]:
        """Return the first-match successor of state name on c, if any."""
        return self._table[name].get(c)

    def row(self, name: str) -> Dict[str, str]:
        return dict(self._table[name])
