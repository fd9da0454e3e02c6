"""Configuration for automaton definition and static evaluation."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Config:
    """Settings shared by the builder and the static evaluator.

    Attributes:
        max_literal_length: Optional cap on static literal length. None means
            any finite literal is evaluated.
        recursion_window: Characters consumed per recursive descent of the
            static evaluator. Longer literals are walked window by window so
            the call depth never approaches the interpreter's recursion limit.
        cache_size: Maximum number of memoized static verdicts per evaluator.
        allow_duplicate_labels: Accept states with several transitions on the
            same label. The first declared transition wins.
        warn_on_duplicate_labels: Log a warning for duplicate labels.
        warn_on_unreachable: Log a warning for states unreachable from start.
    """

    max_literal_length: Optional[int] = None
    recursion_window: int = 256
    cache_size: int = 1024
    allow_duplicate_labels: bool = True
    warn_on_duplicate_labels: bool = True
    warn_on_unreachable: bool = True

    def __post_init__(self) -> None:
        if self.max_literal_length is not None and self.max_literal_length < 0:
            raise ValueError("max_literal_length must be non-negative")
        if self.recursion_window < 1:
            raise ValueError("recursion_window must be positive")
        if self.cache_size < 0:
            raise ValueError("cache_size must be non-negative")

    @classmethod
    def default(cls) -> "Config":
        """Return the default configuration."""
        return cls()

    @classmethod
    def strict(cls) -> "Config":
        """Return a configuration that rejects ambiguous automata."""
        return cls(allow_duplicate_labels=False)

    @classmethod
    def quiet(cls) -> "Config":
        """Return a configuration that never logs definition warnings."""
        return cls(warn_on_duplicate_labels=False, warn_on_unreachable=False)
