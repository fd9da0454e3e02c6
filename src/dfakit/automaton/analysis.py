"""Structural queries over an automaton."""

from typing import Dict, List, Optional, Set

from dfakit.automaton.model import Automaton


def alphabet(automaton: Automaton) -> Set[str]:
    """Return every label used by any transition."""
    return {trans.label for state in automaton for trans in state.transitions}


def reachable_states(automaton: Automaton, start: Optional[str] = None) -> Set[str]:
    """Collect the names of all states reachable from start.

    Args:
        automaton: The automaton to explore.
        start: Name of the state to start from. Defaults to the start state.

    Returns:
        Set of reachable state names, including start itself.
    """
    if start is None:
        start = automaton.start
    automaton.state(start)

    visited: Set[str] = set()
    stack: List[str] = [start]
    while stack:
        name = stack.pop()
        if name in visited:
            continue
        visited.add(name)
        for trans in automaton.states[name].transitions:
            if trans.target not in visited:
                stack.append(trans.target)
    return visited


def unreachable_states(automaton: Automaton) -> Set[str]:
    """Return states that can never be entered from the start state."""
    return set(automaton.states) - reachable_states(automaton)


def duplicate_labels(automaton: Automaton) -> Dict[str, List[str]]:
    """Find states with more than one transition on the same label.

    Returns:
        Dict mapping state name to its duplicated labels, in first-seen order.
        States without duplicates are omitted.
    """
    result: Dict[str, List[str]] = {}
    for state in automaton:
        seen: Set[str] = set()
        dups: List[str] = []
        for label in state.labels():
            if label in seen and label not in dups:
                dups.append(label)
            seen.add(label)
        if dups:
            result[state.name] = dups
    return result


def is_deterministic(automaton: Automaton) -> bool:
    """Check that no state has two transitions on the same label."""
    return not duplicate_labels(automaton)
