"""Two-phase construction of automata with forward and cyclic references."""

import logging
from collections.abc import Iterable as IterableABC
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from dfakit.automaton.analysis import duplicate_labels, unreachable_states
from dfakit.automaton.model import Automaton, State, Transition
from dfakit.config import Config
from dfakit.exceptions import DefinitionError, UnknownStateError

logger = logging.getLogger(__name__)

EdgeSpec = Tuple[str, str]
StateSpec = Tuple[bool, Sequence[EdgeSpec]]


class AutomatonBuilder:
    """Collects states and transitions, then freezes them into an Automaton.

    States are declared first so transitions may name any of them, including
    states declared later, the source state itself, or states that point back.
    Destinations are only checked when build() is called.

    Example:
        >>> b = AutomatonBuilder()
        >>> even = b.state("even", accept=True)
        >>> odd = b.state("odd")
        >>> _ = b.edge(even, "1", odd).edge(odd, "1", even)
        >>> _ = b.expect("11").expect("1", accepted=False)
        >>> parity = b.build(even)
        >>> parity.accepts("1111")
        True
    """

    def __init__(self, config: Config = None):
        self.config = config or Config.default()
        self._accept: Dict[str, bool] = {}
        self._edges: Dict[str, List[Transition]] = {}
        self._expectations: List[Tuple[str, bool]] = []

    def state(self, name: str, accept: bool = False) -> str:
        """Declare a state.

        Args:
            name: Unique state name.
            accept: Whether the state is accepting.

        Returns:
            The name, for use in later edge() calls.
        """
        if not isinstance(name, str) or not name:
            raise DefinitionError(f"state name must be a non-empty string, got {name!r}")
        if name in self._accept:
            raise DefinitionError("state declared twice", state=name)
        if not isinstance(accept, bool):
            raise DefinitionError(f"accept flag must be a bool, got {accept!r}", state=name)
        self._accept[name] = accept
        self._edges[name] = []
        return name

    def states(self, *names: str, accept: bool = False) -> Tuple[str, ...]:
        """Declare several states sharing one accept flag."""
        return tuple(self.state(name, accept=accept) for name in names)

    def edge(self, source: str, label: str, target: str) -> "AutomatonBuilder":
        """Append a transition to source's priority list."""
        if source not in self._edges:
            raise UnknownStateError(source)
        try:
            trans = Transition(label, target)
        except DefinitionError as e:
            raise DefinitionError(str(e), state=source) from None
        self._edges[source].append(trans)
        return self

    def edges(self, source: str, edges: Iterable[EdgeSpec]) -> "AutomatonBuilder":
        """Append (label, target) pairs to source in order."""
        if not isinstance(edges, IterableABC) or isinstance(edges, (str, bytes)):
            raise DefinitionError(
                f"expected a sequence of (label, target) pairs, got {edges!r}", state=source
            )
        for item in edges:
            if not isinstance(item, (tuple, list)) or len(item) != 2:
                raise DefinitionError(
                    f"expected a (label, target) pair, got {item!r}", state=source
                )
            self.edge(source, item[0], item[1])
        return self

    def expect(self, literal: Union[str, bytes], accepted: bool = True) -> "AutomatonBuilder":
        """Record a literal whose verdict build() must confirm statically."""
        self._expectations.append((literal, accepted))
        return self

    def build(self, start: Optional[str] = None) -> Automaton:
        """Freeze the declared states into an Automaton.

        Args:
            start: Name of the start state. Defaults to the first declared state.

        Returns:
            The immutable automaton.

        Raises:
            DefinitionError: If no state was declared, or duplicate labels are
                present while the config forbids them.
            UnknownStateError: If start or a transition target is undeclared.
            ExpectationError: If a recorded expectation does not hold.
        """
        from dfakit.runner.static import StaticExpectation, verify_expectations

        if not self._accept:
            raise DefinitionError("automaton has no states")
        if start is None:
            start = next(iter(self._accept))

        states = {
            name: State(name, accept, tuple(self._edges[name]))
            for name, accept in self._accept.items()
        }
        automaton = Automaton(states, start)

        dups = duplicate_labels(automaton)
        if dups and not self.config.allow_duplicate_labels:
            name, labels = next(iter(dups.items()))
            raise DefinitionError(f"duplicate transition labels {labels!r}", state=name)
        if dups and self.config.warn_on_duplicate_labels:
            for name, labels in dups.items():
                logger.warning(
                    "State %s has duplicate labels %r; first declared wins", name, labels
                )

        if self.config.warn_on_unreachable:
            unreachable = unreachable_states(automaton)
            if unreachable:
                logger.warning(
                    "States unreachable from %s: %s", start, ", ".join(sorted(unreachable))
                )

        if self._expectations:
            verify_expectations(
                automaton,
                [StaticExpectation(lit, ok) for lit, ok in self._expectations],
                config=self.config,
            )

        logger.debug("Built %r", automaton)
        return automaton


def define_automaton(
    start: str,
    states: Mapping[str, StateSpec],
    config: Config = None,
    expectations: Mapping[Union[str, bytes], bool] = None,
) -> Automaton:
    """Define a set of mutually referencing states in one call.

    Args:
        start: Name of the start state.
        states: Maps each state name to (accept, [(label, target), ...]).
        config: Optional configuration.
        expectations: Optional literal -> expected verdict checks.

    Returns:
        The built automaton.
    """
    builder = AutomatonBuilder(config)
    for name, entry in states.items():
        if not isinstance(entry, (tuple, list)) or len(entry) != 2:
            raise DefinitionError(
                f"expected (accept, edges), got {entry!r}", state=name
            )
        builder.state(name, accept=entry[0])
    for name, (_, edges) in states.items():
        builder.edges(name, edges)
    for literal, accepted in (expectations or {}).items():
        builder.expect(literal, accepted)
    return builder.build(start)
