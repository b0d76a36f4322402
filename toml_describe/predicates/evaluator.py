"""Evaluate platform predicates against a target triple."""

from typing import Callable, Optional

from toml_describe.core.logging import get_logger
from toml_describe.models.target import TargetInfo, lookup_target
from toml_describe.predicates.expression import Expression, parse_predicate

logger = get_logger("predicates")


class PredicateEvaluator:
    """Answers "does this cfg predicate hold for this target?".

    The predicate is parsed before the target is resolved, so a malformed
    predicate is reported even when the triple is also unknown.
    """

    def __init__(self, target_lookup: Optional[Callable[[str], TargetInfo]] = None):
        self._lookup = target_lookup or lookup_target

    def parse(self, predicate_text: str) -> Expression:
        return parse_predicate(predicate_text)

    def resolve_target(self, target_triple: str) -> TargetInfo:
        return self._lookup(target_triple)

    def evaluate(self, predicate_text: str, target_triple: str) -> bool:
        """Evaluate ``predicate_text`` for ``target_triple``.

        Raises:
            PredicateError: the text is not a valid platform predicate
            UnknownTargetError: the triple is not in the target database
        """
        expression = self.parse(predicate_text)
        target = self.resolve_target(target_triple)
        result = expression.matches(target)
        logger.group_evaluated(predicate_text, target_triple, result)
        return result


def evaluate(predicate_text: str, target_triple: str) -> bool:
    """Evaluate with the builtin target database."""
    return PredicateEvaluator().evaluate(predicate_text, target_triple)
