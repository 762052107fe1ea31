"""Translate list query parameters into store predicates.

Filters are optional and independent. A value of ``"null"`` on a nullable
filter selects rows where the field IS NULL; ``"null"`` is therefore never a
valid identifier. Anything else must parse as an id. Bad input is rejected
before any query runs.
"""

from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional

from ..core.identity import parse_id
from ..exceptions import InvalidArgumentError
from ..repositories import Predicate

NULL_SENTINEL = "null"


@dataclass(frozen=True)
class FilterSpec:
    """A filterable column. nullable filters accept the "null" sentinel."""

    name: str
    nullable: bool = False


def build_predicates(
    raw: Mapping[str, Optional[str]], specs: Mapping[str, FilterSpec]
) -> List[Predicate]:
    """Parse raw filter values into predicates.

    Args:
        raw: filter name -> raw value; None means the filter was not given.
        specs: the filters this resource accepts, keyed by name.

    Raises:
        InvalidArgumentError: unknown filter name, or a value that is not an id.
    """
    predicates: List[Predicate] = []
    for name, value in raw.items():
        if value is None:
            continue
        spec = specs.get(name)
        if spec is None:
            raise InvalidArgumentError(f"Unknown filter: {name}", field=name, value=value)
        if spec.nullable and value == NULL_SENTINEL:
            predicates.append(Predicate.is_null(spec.name))
        else:
            predicates.append(Predicate.equals(spec.name, parse_id(value, spec.name)))
    return predicates


def specs_for(*specs: FilterSpec) -> Dict[str, FilterSpec]:
    return {spec.name: spec for spec in specs}


USER_FILTERS: Dict[str, FilterSpec] = {}
FOLDER_FILTERS = specs_for(FilterSpec("user_id"), FilterSpec("parent_id", nullable=True))
DOCUMENT_FILTERS = specs_for(FilterSpec("user_id"), FilterSpec("folder_id", nullable=True))
