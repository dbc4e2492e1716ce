import json

import pytest

from pictures_manager.hierarchy import (
    HierarchyConfig,
    HierarchyFilter,
    HierarchyFilterType,
    HierarchyGroup,
    HierarchyGroupRule,
    HierarchyGroupType,
)


def test_filter_type_default_is_all():
    assert HierarchyFilterType() == HierarchyFilterType("All", ())


def test_group_type_default_is_none():
    assert HierarchyGroupType().kind == "None"
    assert HierarchyGroupType().args == ()


def test_filter_type_tags_normalises_lists():
    filter_type = HierarchyFilterType("Tags", (["a", "b"], ["c"]))
    assert filter_type.args == (("a", "b"), ("c",))
    assert hash(filter_type) == hash(HierarchyFilterType("Tags", (("a", "b"), ("c",))))


def test_filter_type_wrong_arity_raises():
    with pytest.raises(ValueError):
        HierarchyFilterType("ParentDir", ())


def test_filter_type_unknown_kind_raises():
    with pytest.raises(ValueError):
        HierarchyFilterType("Camera", ("x",))


@pytest.mark.parametrize("kind", ["DateCluster", "LocationCluster", "Tags"])
def test_group_type_with_id(kind):
    assert HierarchyGroupType(kind, ("id-1",)).args == ("id-1",)
    with pytest.raises(ValueError):
        HierarchyGroupType(kind, ())


def test_group_type_date_interval_takes_nothing():
    with pytest.raises(ValueError):
        HierarchyGroupType("DateInterval", ("day",))


def test_rule_to_dict_shape():
    rule = HierarchyGroupRule(filters=[HierarchyFilter()], groups=[HierarchyGroup(), HierarchyGroup()])
    assert rule.to_dict() == {"filters": [{}], "groups": [{}, {}]}


def test_rule_from_empty_is_default():
    assert HierarchyGroupRule.from_dict({}) == HierarchyGroupRule()


def test_rule_rejects_non_object_filter():
    with pytest.raises(ValueError):
        HierarchyGroupRule.from_dict({"filters": ["x"]})


def test_config_round_trip():
    config = HierarchyConfig(
        nested_levels=[
            [HierarchyGroupRule(filters=[HierarchyFilter()], groups=[])],
            [HierarchyGroupRule(), HierarchyGroupRule(groups=[HierarchyGroup()])],
        ]
    )
    restored = HierarchyConfig.from_dict(json.loads(json.dumps(config.to_dict())))
    assert restored == config
    assert len(restored.nested_levels[1]) == 2


def test_config_from_empty_is_default():
    assert HierarchyConfig.from_dict({}) == HierarchyConfig()


def test_config_rejects_non_list_levels():
    with pytest.raises(ValueError):
        HierarchyConfig.from_dict({"nested_levels": "flat"})