"""Enablement engine - filter parsed checks against the toolchain."""

from typing import Iterable, Optional, Union

from toml_describe.core.logging import get_logger
from toml_describe.core.manifest import Pair, parse_manifest
from toml_describe.models.toolchain import ToolchainDescriptor
from toml_describe.predicates.evaluator import PredicateEvaluator

logger = get_logger("engine")


def select(pairs: Iterable[Pair], toolchain: ToolchainDescriptor) -> list[Pair]:
    """Keep the pairs whose condition the toolchain satisfies.

    Order is preserved, and a name declared twice (say, under two platform
    groups) is checked and kept independently each time.
    """
    selected = []
    for name, condition in pairs:
        enabled = condition.satisfies(toolchain)
        logger.capability_checked(name, enabled)
        if enabled:
            selected.append((name, condition))
    return selected


def evaluate(pairs: Iterable[Pair], toolchain: ToolchainDescriptor) -> list[str]:
    """Names of the enabled capabilities, in manifest order."""
    return [name for name, _ in select(pairs, toolchain)]


def evaluate_manifest(
    text: str,
    target: Optional[str],
    toolchain: ToolchainDescriptor,
    *,
    section: Union[str, list[str], None] = None,
    evaluator: Optional[PredicateEvaluator] = None,
) -> list[str]:
    """Parse ``text`` for ``target`` and return the enabled capability names."""
    pairs = parse_manifest(text, target, section=section, evaluator=evaluator)
    return evaluate(pairs, toolchain)
