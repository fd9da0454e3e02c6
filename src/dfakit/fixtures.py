"""Small example automata."""

from dfakit.automaton.builder import AutomatonBuilder, define_automaton
from dfakit.automaton.model import Automaton
from dfakit.config import Config


def single_edge() -> Automaton:
    """q0 --'0'--> q1, where only q1 accepts."""
    return define_automaton(
        "q0",
        {
            "q0": (False, [("0", "q1")]),
            "q1": (True, []),
        },
    )


def alternating_01() -> Automaton:
    """Accepts {01}*: the empty string and repetitions of "01"."""
    b = AutomatonBuilder()
    q0 = b.state("q0", accept=True)
    q1 = b.state("q1")
    q2 = b.state("q2", accept=True)
    q3 = b.state("q3")
    b.edge(q0, "0", q1)
    b.edge(q1, "1", q2)
    b.edge(q2, "0", q3)
    b.edge(q3, "1", q2)
    for literal in ("", "01", "0101"):
        b.expect(literal)
    for literal in ("011", "x"):
        b.expect(literal, accepted=False)
    return b.build(q0)


def alternating_transitions() -> Automaton:
    """Same shape as alternating_01() with q3 accepting instead of q2."""
    return define_automaton(
        "q0",
        {
            "q0": (True, [("0", "q1")]),
            "q1": (False, [("1", "q2")]),
            "q2": (False, [("0", "q3")]),
            "q3": (True, [("1", "q2")]),
        },
    )


def branch() -> Automaton:
    """q0 branches on '0' and '1' to two accepting terminal states."""
    return define_automaton(
        "q0",
        {
            "q0": (False, [("0", "q1"), ("1", "q2")]),
            "q1": (True, []),
            "q2": (True, []),
        },
        expectations={"": False, "0": True, "1": True},
    )


def self_loop() -> Automaton:
    """Accepts a+ via a self-loop on the accepting state."""
    return define_automaton(
        "start",
        {
            "start": (False, [("a", "more")]),
            "more": (True, [("a", "more")]),
        },
    )


def shadowed() -> Automaton:
    """A state with two transitions on 'a'; the first one leads to "first"."""
    return define_automaton(
        "q0",
        {
            "q0": (False, [("a", "first"), ("a", "second")]),
            "first": (True, []),
            "second": (False, []),
        },
        config=Config.quiet(),
    )
