"""Tests for the static and dynamic evaluators.

The automata come from dfakit.fixtures; every scenario is run through both
evaluators, which must produce the same verdict.
"""

import gc
import weakref

import pytest

from dfakit import Config, check_agreement, evaluate_dynamic, evaluate_static, trace
from dfakit.exceptions import ExpectationError, LiteralError, UnknownStateError
from dfakit.runner.static import (
    StaticEvaluator,
    StaticExpectation,
    _evaluators,
    verify_expectations,
)
from dfakit.fixtures import alternating_01, branch, self_loop, shadowed, single_edge

EVALUATORS = [
    pytest.param(evaluate_static, id="static"),
    pytest.param(evaluate_dynamic, id="dynamic"),
]


@pytest.mark.parametrize("evaluate", EVALUATORS)
class TestScenarios:
    """Verdicts for the example automata."""

    ALTERNATING = [
        ("", True, "empty string"),
        ("01", True, "one repetition"),
        ("0101", True, "two repetitions"),
        ("010101", True, "three repetitions"),
        ("011", False, "doubled one"),
        ("x", False, "unknown symbol"),
        ("0", False, "incomplete pair"),
        ("010", False, "trailing zero"),
        ("10", False, "wrong order"),
    ]

    @pytest.mark.parametrize("text,expected,name", ALTERNATING)
    def test_alternating(self, evaluate, text, expected, name):
        assert evaluate(alternating_01(), text) is expected, name

    BRANCH = [
        ("", False),
        ("0", True),
        ("1", True),
        ("00", False),
        ("2", False),
    ]

    @pytest.mark.parametrize("text,expected", BRANCH)
    def test_branch(self, evaluate, text, expected):
        assert evaluate(branch(), text) is expected

    def test_single_edge(self, evaluate):
        dfa = single_edge()
        assert evaluate(dfa, "0")
        assert not evaluate(dfa, "1")
        assert not evaluate(dfa, "")

    @pytest.mark.parametrize("length", [1, 2, 50, 200])
    def test_self_loop_terminates(self, evaluate, length):
        dfa = self_loop()
        assert evaluate(dfa, "a" * length)
        assert not evaluate(dfa, "a" * length + "b")

    def test_first_declared_transition_wins(self, evaluate):
        assert evaluate(shadowed(), "a")

    def test_bytes_input(self, evaluate):
        assert evaluate(alternating_01(), b"0101")
        assert not evaluate(alternating_01(), b"011")

    def test_custom_start(self, evaluate):
        dfa = alternating_01()
        assert evaluate(dfa, "1", start="q1")
        assert not evaluate(dfa, "", start="q1")

    def test_unknown_start(self, evaluate):
        with pytest.raises(UnknownStateError):
            evaluate(alternating_01(), "", start="nowhere")

    def test_repeatable(self, evaluate):
        dfa = alternating_01()
        verdicts = {evaluate(dfa, "0101") for _ in range(5)}
        assert verdicts == {True}


class TestStaticEvaluator:
    """Literal validation and recursion depth."""

    @pytest.mark.parametrize("literal", [None, 42, ["0", "1"]])
    def test_non_literal_rejected(self, literal):
        with pytest.raises(LiteralError):
            evaluate_static(alternating_01(), literal)

    def test_out_of_alphabet_character_rejected(self):
        with pytest.raises(LiteralError):
            evaluate_static(alternating_01(), "0€")

    def test_length_limit(self):
        config = Config(max_literal_length=4)
        assert evaluate_static(alternating_01(), "0101", config=config)
        with pytest.raises(LiteralError):
            evaluate_static(alternating_01(), "010101", config=config)

    def test_no_default_length_limit(self):
        assert Config.default().max_literal_length is None
        for text in ["01" * 150, "01" * 150 + "1"]:
            assert evaluate_static(alternating_01(), text) == evaluate_dynamic(
                alternating_01(), text
            )

    @pytest.mark.parametrize("length", [300, 5000, 20000])
    def test_literal_beyond_recursion_limit(self, length):
        dfa = self_loop()
        assert evaluate_static(dfa, "a" * length)
        assert not evaluate_static(dfa, "a" * (length - 1) + "b")
        assert check_agreement(alternating_01(), ["01" * length]) == []

    def test_negative_length_limit(self):
        with pytest.raises(ValueError):
            Config(max_literal_length=-1)

    @pytest.mark.parametrize("field", ["recursion_window", "cache_size"])
    def test_invalid_limits(self, field):
        with pytest.raises(ValueError):
            Config(**{field: -1})

    DEPTHS = [
        ("", 1),
        ("0", 1),
        ("01", 1),
        ("0101", 1),
        ("01010101", 3),
        ("0110", 3),
        ("010101010101", 1000),
    ]

    @pytest.mark.parametrize("text,window", DEPTHS)
    def test_depth_bound(self, text, window):
        class CountingEvaluator(StaticEvaluator):
            depth = 0
            max_depth = 0

            def _run(self, name, text, index, stop):
                self.depth += 1
                self.max_depth = max(self.max_depth, self.depth)
                try:
                    return super()._run(name, text, index, stop)
                finally:
                    self.depth -= 1

        evaluator = CountingEvaluator(alternating_01(), Config(recursion_window=window))
        verdict = evaluator.evaluate(text)
        assert verdict == evaluate_dynamic(alternating_01(), text)
        assert evaluator.max_depth <= len(text) + 1
        assert evaluator.max_depth <= window + 1

    def test_verdicts_are_cached(self):
        evaluator = StaticEvaluator(alternating_01())
        assert evaluator.evaluate("01")
        assert evaluator.evaluate("01")
        info = evaluator.cache_info()
        assert (info.hits, info.misses, info.currsize) == (1, 1, 1)

    def test_cache_is_bounded(self):
        evaluator = StaticEvaluator(alternating_01(), Config(cache_size=64))
        for i in range(5000):
            evaluator.evaluate(format(i, "b"))
        assert evaluator.cache_info().currsize == 64

    def test_shared_evaluator_cache_is_bounded(self):
        dfa = alternating_01()
        for i in range(2000):
            evaluate_static(dfa, format(i, "b"))
        assert _evaluators[dfa].cache_info().currsize <= Config.default().cache_size

    def test_cached_evaluator_does_not_keep_automaton_alive(self):
        dfa = alternating_01()
        evaluate_static(dfa, "01")
        ref = weakref.ref(dfa)
        del dfa
        gc.collect()
        assert ref() is None


class TestVerifyExpectations:
    """verify_expectations() collects every mismatch."""

    def test_all_hold(self):
        verify_expectations(
            alternating_01(),
            [StaticExpectation("01"), StaticExpectation("011", accepted=False)],
        )

    def test_mismatch(self):
        with pytest.raises(ExpectationError) as excinfo:
            verify_expectations(branch(), [StaticExpectation(""), StaticExpectation("0")])
        assert [f.literal for f in excinfo.value.failures] == [""]
        assert "accept ''" in str(excinfo.value)


class TestDynamicEvaluator:
    """Run-time inputs of any size."""

    def test_long_input(self):
        assert evaluate_dynamic(self_loop(), "a" * 100000)
        assert evaluate_dynamic(alternating_01(), "01" * 50000)

    def test_start_index(self):
        dfa = alternating_01()
        assert evaluate_dynamic(dfa, "xx01", index=2)
        assert not evaluate_dynamic(dfa, "xx01", index=1)

    def test_index_past_end_reports_start_state(self):
        assert evaluate_dynamic(alternating_01(), "011", index=10)
        assert not evaluate_dynamic(branch(), "0", index=5)

    def test_negative_index(self):
        with pytest.raises(ValueError):
            evaluate_dynamic(alternating_01(), "01", index=-1)

    def test_wide_character_rejects(self):
        assert not evaluate_dynamic(alternating_01(), "0€")


class TestTrace:
    """trace() records the states visited by a dynamic walk."""

    def test_accepted(self):
        result = trace(alternating_01(), "0101")
        assert result.accepted
        assert result.path == ["q0", "q1", "q2", "q3", "q2"]
        assert result.final_state == "q2"
        assert not result.stuck

    def test_stuck(self):
        result = trace(alternating_01(), "011")
        assert not result.accepted
        assert result.path == ["q0", "q1", "q2"]
        assert result.position == 2
        assert result.stuck

    def test_ends_in_rejecting_state(self):
        result = trace(alternating_01(), "010")
        assert not result.accepted
        assert not result.stuck
        assert result.final_state == "q3"

    def test_matches_evaluate_dynamic(self):
        dfa = alternating_01()
        for text in ["", "0", "01", "011", "0101", "x"]:
            assert trace(dfa, text).accepted == evaluate_dynamic(dfa, text)

    START_INDEXES = [
        ("xx01", 2),
        ("xx01", 1),
        ("x0101", 1),
        ("011", 10),
        ("01", 2),
    ]

    @pytest.mark.parametrize("text,index", START_INDEXES)
    def test_index_matches_evaluate_dynamic(self, text, index):
        dfa = alternating_01()
        result = trace(dfa, text, index=index)
        assert result.accepted == evaluate_dynamic(dfa, text, index=index)
        assert result.path[0] == "q0"

    def test_index_offsets_position(self):
        result = trace(alternating_01(), "xx01", index=2)
        assert result.accepted
        assert result.path == ["q0", "q1", "q2"]
        assert result.position == 4

    def test_negative_index(self):
        with pytest.raises(ValueError):
            trace(alternating_01(), "01", index=-1)
