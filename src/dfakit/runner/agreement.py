"""Cross-checking of the static and dynamic evaluators."""

import itertools
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Union

from dfakit.automaton.analysis import alphabet
from dfakit.automaton.model import ALPHABET_SIZE, Automaton
from dfakit.runner.dynamic import evaluate_dynamic
from dfakit.runner.static import evaluate_static


@dataclass(frozen=True)
class Disagreement:
    """An input on which the two evaluators gave different verdicts."""

    text: str
    static: bool
    dynamic: bool


def enumerate_inputs(automaton: Automaton, max_length: int) -> Iterator[str]:
    """Yield all strings up to max_length over the automaton's labels.

    One byte that no transition uses is added to the symbol set (when one
    exists) so rejection on unknown input is covered too.
    """
    symbols = sorted(alphabet(automaton))
    for code in range(ALPHABET_SIZE):
        if chr(code) not in symbols:
            symbols.append(chr(code))
            break
    for length in range(max_length + 1):
        for chars in itertools.product(symbols, repeat=length):
            yield "".join(chars)


def check_agreement(
    automaton: Automaton, inputs: Iterable[Union[str, bytes]]
) -> List[Disagreement]:
    """Evaluate every input both ways and collect the mismatches.

    Returns:
        Disagreements in input order; empty when the evaluators agree.
    """
    result = []
    for text in inputs:
        static = evaluate_static(automaton, text)
        dynamic = evaluate_dynamic(automaton, text)
        if static != dynamic:
            shown = text if isinstance(text, str) else text.decode("latin-1")
            result.append(Disagreement(shown, static, dynamic))
    return result
