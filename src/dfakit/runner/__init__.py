"""Evaluators deciding acceptance of an input."""

from dfakit.runner.static import (
    StaticEvaluator,
    StaticExpectation,
    evaluate_static,
    verify_expectations,
)
from dfakit.runner.dynamic import Trace, evaluate_dynamic, trace
from dfakit.runner.agreement import Disagreement, check_agreement, enumerate_inputs

__all__ = [
    "StaticEvaluator",
    "StaticExpectation",
    "evaluate_static",
    "verify_expectations",
    "Trace",
    "evaluate_dynamic",
    "trace",
    "Disagreement",
    "check_agreement",
    "enumerate_inputs",
]
