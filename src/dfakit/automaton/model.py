"""State and transition records, and the automaton arena that owns them."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping, Tuple, Union

from dfakit.exceptions import DefinitionError, UnknownStateError

# Labels and inputs are single-byte characters.
ALPHABET_SIZE = 256


def is_symbol(c: object) -> bool:
    """Return True if c is one character of the single-byte alphabet."""
    return isinstance(c, str) and len(c) == 1 and ord(c) < ALPHABET_SIZE


def as_text(data: Union[str, bytes]) -> str:
    """Normalize an input to str; bytes map one-to-one onto code points 0..255."""
    if isinstance(data, (bytes, bytearray)):
        return bytes(data).decode("latin-1")
    return data


@dataclass(frozen=True)
class Transition:
    """A labeled arc to another state.

    Attributes:
        label: The character consumed by this transition.
        target: Name of the destination state in the owning automaton.
    """

    label: str
    target: str

    def __post_init__(self) -> None:
        if not is_symbol(self.label):
            raise DefinitionError(
                f"transition label must be a single-byte character, got {self.label!r}"
            )
        if not isinstance(self.target, str) or not self.target:
            raise DefinitionError(
                f"transition target must be a state name, got {self.target!r}"
            )

    def matches(self, c: str) -> bool:
        """Check if this transition consumes c."""
        return self.label == c

    def __repr__(self) -> str:
        return f"Transition({self.label!r} -> {self.target})"


@dataclass(frozen=True)
class State:
    """A named state with an accept flag and prioritized outgoing transitions.

    Attributes:
        name: Identifier of the state inside its automaton.
        accept: Whether the automaton accepts when input ends here.
        transitions: Outgoing transitions; earlier entries take priority.
    """

    name: str
    accept: bool = False
    transitions: Tuple[Transition, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.accept, bool):
            raise DefinitionError(
                f"accept flag must be a bool, got {self.accept!r}", state=self.name
            )
        if not isinstance(self.transitions, tuple):
            object.__setattr__(self, "transitions", tuple(self.transitions))
        for trans in self.transitions:
            if not isinstance(trans, Transition):
                raise DefinitionError(
                    f"expected a Transition, got {trans!r}", state=self.name
                )

    @property
    def is_terminal(self) -> bool:
        """A state without outgoing transitions."""
        return len(self.transitions) == 0

    def labels(self) -> Tuple[str, ...]:
        """Return transition labels in priority order."""
        return tuple(t.label for t in self.transitions)

    def __repr__(self) -> str:
        flag = "accept" if self.accept else "reject"
        return f"State({self.name}, {flag}, {list(self.transitions)!r})"


@dataclass(frozen=True, eq=False)
class Automaton:
    """An immutable arena of states plus the name of the start state.

    Transitions refer to their destination by name, so cycles, self-loops
    and forward references need no special handling. Instances hash by
    identity and can be shared freely between threads.

    Attributes:
        states: Mapping from state name to State.
        start: Name of the start state.
    """

    states: Mapping[str, State]
    start: str

    def __post_init__(self) -> None:
        states = dict(self.states)
        for name, state in states.items():
            if not isinstance(state, State):
                raise DefinitionError(f"expected a State, got {state!r}", state=name)
            if state.name != name:
                raise DefinitionError(
                    f"state registered under {name!r} is named {state.name!r}"
                )
            for trans in state.transitions:
                if trans.target not in states:
                    raise UnknownStateError(trans.target, state=name)
        if self.start not in states:
            raise UnknownStateError(self.start)
        object.__setattr__(self, "states", MappingProxyType(states))

    @property
    def start_state(self) -> State:
        return self.states[self.start]

    def state(self, name: str) -> State:
        """Look up a state by name."""
        try:
            return self.states[name]
        except KeyError:
            raise UnknownStateError(name) from None

    def accepts(self, text: Union[str, bytes]) -> bool:
        """Decide acceptance of a run-time input, starting from the start state."""
        from dfakit.runner.dynamic import evaluate_dynamic

        return evaluate_dynamic(self, text)

    def __contains__(self, name: object) -> bool:
        return name in self.states

    def __iter__(self) -> Iterator[State]:
        return iter(self.states.values())

    def __len__(self) -> int:
        return len(self.states)

    def __repr__(self) -> str:
        return f"Automaton(start={self.start}, states={list(self.states)})"
