"""Automaton data model, construction and transition resolution."""

from dfakit.automaton.model import ALPHABET_SIZE, Automaton, State, Transition
from dfakit.automaton.resolver import TransitionTable, match_any, resolve
from dfakit.automaton.analysis import (
    alphabet,
    duplicate_labels,
    is_deterministic,
    reachable_states,
    unreachable_states,
)
from dfakit.automaton.builder import AutomatonBuilder, define_automaton

__all__ = [
    "ALPHABET_SIZE",
    "Automaton",
    "State",
    "Transition",
    "TransitionTable",
    "match_any",
    "resolve",
    "alphabet",
    "duplicate_labels",
    "is_deterministic",
    "reachable_states",
    "unreachable_states",
    "AutomatonBuilder",
    "define_automaton",
]
