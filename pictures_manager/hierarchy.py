"""Configuration of how pictures are arranged into nested groups."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

_FILTER_ARITY = {"All": 0, "ParentDir": 1, "Tags": 2, "DateRange": 2}
_GROUP_ARITY = {"None": 0, "DateInterval": 0, "DateCluster": 1, "LocationCluster": 1, "Tags": 1}


def _check_variant(kind: str, args: tuple, arity: Mapping[str, int], name: str) -> None:
    if kind not in arity:
        raise ValueError(f"unknown {name} {kind!r}")
    if len(args) != arity[kind]:
        raise ValueError(f"{name} {kind} takes {arity[kind]} values, got {len(args)}")


@dataclass(frozen=True)
class HierarchyFilterType:
    """Which pictures a rule applies to.

    ``All``; ``ParentDir`` (regex); ``Tags`` (include, exclude); ``DateRange`` (from, to).
    """

    kind: str = "All"
    args: tuple = ()

    def __post_init__(self) -> None:
        args = tuple(self.args)
        if self.kind == "Tags":
            args = tuple(tuple(str(tag) for tag in group) for group in args)
        object.__setattr__(self, "args", args)
        _check_variant(self.kind, args, _FILTER_ARITY, "filter type")


@dataclass(frozen=True)
class HierarchyGroupType:
    """How matching pictures are grouped.

    ``None``; ``DateInterval``; ``DateCluster``, ``LocationCluster`` (cluster id);
    ``Tags`` (tag group id).
    """

    kind: str = "None"
    args: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))
        _check_variant(self.kind, self.args, _GROUP_ARITY, "group type")


@dataclass
class HierarchyFilter:
    """A filter of a group rule."""


@dataclass
class HierarchyGroup:
    """A group produced by a group rule."""


def _mapping(data: Any, name: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"{name} must be an object, got {type(data).__name__}")
    return data


def _list(value: Any, name: str) -> list:
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"{name} must be a list, got {type(value).__name__}")
    return list(value)


@dataclass
class HierarchyGroupRule:
    """Filters and groups applied at one level of the hierarchy."""

    filters: list[HierarchyFilter] = field(default_factory=list)
    groups: list[HierarchyGroup] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"filters": [{} for _ in self.filters], "groups": [{} for _ in self.groups]}

    @classmethod
    def from_dict(cls, data: Any) -> HierarchyGroupRule:
        data = _mapping(data, "HierarchyGroupRule")
        filters = [_mapping(item, "filter") for item in _list(data.get("filters", []), "filters")]
        groups = [_mapping(item, "group") for item in _list(data.get("groups", []), "groups")]
        return cls(
            filters=[HierarchyFilter() for _ in filters],
            groups=[HierarchyGroup() for _ in groups],
        )


@dataclass
class HierarchyConfig:
    """Rules for every nesting level of the hierarchy."""

    nested_levels: list[list[HierarchyGroupRule]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"nested_levels": [[rule.to_dict() for rule in level] for level in self.nested_levels]}

    @classmethod
    def from_dict(cls, data: Any) -> HierarchyConfig:
        data = _mapping(data, "HierarchyConfig")
        return cls(
            nested_levels=[
                [HierarchyGroupRule.from_dict(rule) for rule in _list(level, "level")]
                for level in _list(data.get("nested_levels", []), "nested_levels")
            ]
        )