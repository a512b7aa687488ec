import pytest

from leader_slot_checker.leader_schedule import LeaderScheduleIndex


@pytest.fixture
def index():
    return LeaderScheduleIndex({"V1": [2, 0, 1], "V2": [3], "V3": [5, 4]}, 1000)


def test_target_slots_are_absolute_and_sorted(index):
    assert index.slots_for("V1") == (1000, 1001, 1002)
    assert index.slots_for("V3") == (1004, 1005)


def test_unscheduled_identity_returns_none(index):
    assert index.slots_for("V9") is None
    assert "V9" not in index
    assert "V1" in index


def test_global_lookup_is_ordered_by_slot(index):
    assert list(index.slot_leaders) == [1000, 1001, 1002, 1003, 1004, 1005]
    assert index.leader_at(1003) == "V2"
    assert index.leader_at(999) is None
    assert len(index) == 6
    assert index.identity_count == 3


def test_lookups_are_read_only(index):
    with pytest.raises(TypeError):
        index.slot_leaders[2000] = "V4"


def test_index_is_detached_from_source_schedule():
    schedule = {"V1": [0]}
    index = LeaderScheduleIndex(schedule, 10)
    schedule["V1"].append(1)
    schedule["V2"] = [2]
    assert index.slots_for("V1") == (10,)
    assert index.leader_at(12) is None
