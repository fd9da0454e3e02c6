"""
dfakit - Deterministic finite automata with static and dynamic evaluation.

An automaton is a set of named states, each with an accept flag and an
ordered list of single-character transitions. When a state has several
transitions on the same character the first declared one wins.

Example usage:
    >>> from dfakit import define_automaton, evaluate_dynamic
    >>> dfa = define_automaton(
    ...     "q0",
    ...     {
    ...         "q0": (True, [("0", "q1")]),
    ...         "q1": (False, [("1", "q0")]),
    ...     },
    ...     expectations={"0101": True, "011": False},
    ... )
    >>> evaluate_dynamic(dfa, "010101")
    True

Literals given as expectations are checked statically while the automaton is
being defined; a wrong verdict raises ExpectationError.
"""

import logging

from dfakit.automaton import (
    Automaton,
    AutomatonBuilder,
    State,
    Transition,
    TransitionTable,
    define_automaton,
    match_any,
    resolve,
)
from dfakit.runner import (
    StaticExpectation,
    Trace,
    check_agreement,
    evaluate_dynamic,
    evaluate_static,
    trace,
    verify_expectations,
)
from dfakit.config import Config
from dfakit.exceptions import (
    DfaError,
    DefinitionError,
    UnknownStateError,
    ExpectationError,
    LiteralError,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Definition
    "Automaton",
    "AutomatonBuilder",
    "State",
    "Transition",
    "define_automaton",
    # Resolution
    "TransitionTable",
    "match_any",
    "resolve",
    # Evaluation
    "evaluate_static",
    "evaluate_dynamic",
    "trace",
    "Trace",
    "StaticExpectation",
    "verify_expectations",
    "check_agreement",
    # Configuration
    "Config",
    # Exceptions
    "DfaError",
    "DefinitionError",
    "UnknownStateError",
    "ExpectationError",
    "LiteralError",
    # Version
    "__version__",
]
