"""Custom exceptions for dfakit."""

from typing import List, Optional


class DfaError(Exception):
    """Base exception for all dfakit errors."""

    pass


class DefinitionError(DfaError):
    """Raised when an automaton definition is malformed."""

    def __init__(self, message: str, state: Optional[str] = None) -> None:
        self.state = state
        super().__init__(message)

    def __str__(self) -> str:
        if self.state is not None:
            return f"{super().__str__()} in state {self.state!r}"
        return super().__str__()


class UnknownStateError(DefinitionError):
    """Raised when a transition or the start refers to an undeclared state."""

    def __init__(self, name: str, state: Optional[str] = None) -> None:
        self.name = name
        super().__init__(f"unknown state {name!r}", state=state)


class ExpectationError(DfaError):
    """Raised when static expectations declared for an automaton do not hold."""

    def __init__(self, failures: "List[object]") -> None:
        self.failures = list(failures)
        lines = ", ".join(repr(f) for f in self.failures)
        super().__init__(f"{len(self.failures)} expectation(s) failed: {lines}")


class LiteralError(DfaError):
    """Raised when a static literal cannot be evaluated."""

    pass
