"""Manifest parsing - from TOML text to the reachable (name, Condition) pairs.

Entries live in one table of the manifest (by default
``[package.metadata.toml_describe.compiler_checks]``). Each entry is
classified by its shape:

- a table of scalars is a single condition (``Direct``)
- a table of tables is a group scoped by the platform predicate used as its
  key (``PlatformScoped``)
- an empty table keyed by a ``cfg(...)`` predicate is an empty group, so the
  predicate is still checked; any other empty table is a condition that is
  never satisfied

Groups do not nest. Every version requirement is validated while parsing,
including those inside groups that will not apply to the current target.
"""

import tomllib
from pathlib import Path
from typing import Any, Optional, Union

from toml_describe.config import DEFAULT_SECTION
from toml_describe.core.errors import ConfigError, ManifestFormatError
from toml_describe.core.logging import get_logger
from toml_describe.models.condition import Condition, Constraint, Direct, PlatformScoped
from toml_describe.predicates.evaluator import PredicateEvaluator

logger = get_logger("manifest")

Pair = tuple[str, Condition]


def load_manifest_text(manifest_dir: Optional[Union[str, Path]], file_name: str = "Cargo.toml") -> str:
    """Read the manifest file from ``manifest_dir``."""
    if manifest_dir is None:
        raise ConfigError("Manifest directory is not set", config_key="CARGO_MANIFEST_DIR")

    path = Path(manifest_dir) / file_name
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise ManifestFormatError(
            f"Could not read {path}",
            details=str(e),
            cause=e,
        ) from e


def _section_path(section: Union[str, list[str], None]) -> list[str]:
    if section is None:
        section = DEFAULT_SECTION
    if isinstance(section, str):
        return [part for part in section.split(".") if part]
    return list(section)


def load_table(text: str, section: Union[str, list[str], None] = None) -> dict[str, Any]:
    """Parse the TOML text and return the compiler checks table."""
    path = _section_path(section)
    dotted = ".".join(path)

    try:
        document = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ManifestFormatError(
            "Manifest is not valid TOML",
            details=str(e),
            cause=e,
        ) from e

    node: Any = document
    for part in path:
        if not isinstance(node, dict) or part not in node:
            raise ManifestFormatError(
                f"Did not find a '{dotted}' metadata section",
                section=dotted,
                suggestion=f"Add a [{dotted}] table to the manifest",
            )
        node = node[part]

    if not isinstance(node, dict):
        raise ManifestFormatError(f"'{dotted}' must be a table", section=dotted)
    return node


def _is_condition_shaped(value: dict) -> bool:
    return not any(isinstance(v, dict) for v in value.values())


def classify_entry(name: str, value: Any) -> Constraint:
    """Decide whether an entry is a single condition or a platform group."""
    if not isinstance(value, dict):
        raise ManifestFormatError(
            f"Entry '{name}' must be a table",
            entry=name,
            suggestion=f'Write it as {name} = {{ version = "..." }}',
        )

    if not value and name.startswith("cfg("):
        return PlatformScoped(predicate=name, members={})

    if _is_condition_shaped(value):
        return Direct(condition=Condition.from_table(name, value))

    if not all(isinstance(v, dict) for v in value.values()):
        raise ManifestFormatError(
            f"Entry '{name}' mixes condition keys with nested tables",
            entry=name,
        )

    members = {}
    for member_name, member in value.items():
        if not _is_condition_shaped(member):
            raise ManifestFormatError(
                f"Capability '{member_name}' under '{name}' nests another group",
                entry=member_name,
                suggestion="Platform groups cannot contain further groups",
            )
        members[member_name] = Condition.from_table(member_name, member)

    return PlatformScoped(predicate=name, members=members)


def parse_constraints(table: dict[str, Any]) -> list[tuple[str, Constraint]]:
    return [(name, classify_entry(name, value)) for name, value in table.items()]


def flatten(
    constraints: list[tuple[str, Constraint]],
    target: Optional[str],
    evaluator: Optional[PredicateEvaluator] = None,
) -> list[Pair]:
    """Expand constraints into the pairs reachable for ``target``.

    Each group's predicate is evaluated exactly once. Members of a group that
    does not apply never reach the result.
    """
    evaluator = evaluator or PredicateEvaluator()
    pairs: list[Pair] = []

    for name, constraint in constraints:
        if isinstance(constraint, Direct):
            pairs.append((name, constraint.condition))
            continue

        if not target:
            raise ConfigError(
                f"A target triple is needed to evaluate '{constraint.predicate}'",
                config_key="TARGET",
            )

        if evaluator.evaluate(constraint.predicate, target):
            pairs.extend(constraint.members.items())

    return pairs


def parse_manifest(
    text: str,
    target: Optional[str],
    *,
    section: Union[str, list[str], None] = None,
    evaluator: Optional[PredicateEvaluator] = None,
) -> list[Pair]:
    """Parse manifest text into the ordered (name, Condition) pairs for ``target``."""
    constraints = parse_constraints(load_table(text, section))
    pairs = flatten(constraints, target, evaluator)
    logger.debug(
        f"Parsed {len(constraints)} entries into {len(pairs)} reachable checks",
        component="manifest",
        target=target,
    )
    return pairs
