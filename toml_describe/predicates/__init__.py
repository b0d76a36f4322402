"""Platform predicates - the cfg(...) grammar and its evaluation."""

from .expression import Expression, TargetPredicate, parse_predicate
from .evaluator import PredicateEvaluator, evaluate

__all__ = [
    "Expression",
    "TargetPredicate",
    "parse_predicate",
    "PredicateEvaluator",
    "evaluate",
]
