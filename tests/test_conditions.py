import pandas as pd
import pytest

from conditions import ZERO_CONDITION, Condition, ConditionTimeline, select_condition


@pytest.mark.unit
def test_condition_normalizes_date_and_defaults():
    c = Condition(id=7, effective_date="2031-04-19")
    assert c.effective_date == pd.Timestamp("2031-04-01")
    assert c.rate_or_zero == 0
    assert c.movement_or_zero == 0
    assert c.monthly_factor == 1
    assert Condition(id=8).is_dated is False


@pytest.mark.unit
def test_condition_apply_adds_movement_before_compounding():
    c = Condition(id=0, effective_date="2020-01", rate=12, movement=100)
    assert c.apply(900) == pytest.approx(1010)


@pytest.mark.unit
def test_select_latest_effective():
    conds = [
        Condition(id=0, effective_date="2020-01", rate=1),
        Condition(id=1, effective_date="2025-01", rate=2),
        Condition(id=2, effective_date="2022-01", rate=3),
    ]
    assert select_condition(conds, pd.Timestamp("2024-06-01")).id == 2
    assert select_condition(conds, pd.Timestamp("2025-01-01")).id == 1
    assert select_condition(conds, pd.Timestamp("2021-12-01")).id == 0


@pytest.mark.unit
def test_select_tie_goes_to_later_entry():
    conds = [
        Condition(id=0, effective_date="2020-01"),
        Condition(id=1, effective_date="2020-01"),
        Condition(id=2, effective_date="2019-01"),
    ]
    assert select_condition(conds, pd.Timestamp("2020-05-01")).id == 1


@pytest.mark.unit
def test_select_fallback_policies():
    conds = [Condition(id=5, effective_date="2040-01"), Condition(id=6, effective_date="2035-01")]
    month = pd.Timestamp("2030-01-01")
    assert select_condition(conds, month).id == 5
    assert select_condition(conds, month, policy="zero") is ZERO_CONDITION


@pytest.mark.unit
def test_select_is_idempotent():
    conds = [Condition(id=0, effective_date="2020-01"), Condition(id=1, effective_date="2021-01")]
    month = pd.Timestamp("2022-03-01")
    picks = {select_condition(conds, month).id for _ in range(5)}
    assert picks == {1}


@pytest.mark.unit
def test_select_rejects_empty():
    with pytest.raises(ValueError):
        select_condition([], pd.Timestamp("2022-03-01"))


@pytest.mark.unit
def test_next_id():
    assert ConditionTimeline().next_id() == 0
    timeline = ConditionTimeline((Condition(id=0), Condition(id=5), Condition(id=2)))
    assert timeline.next_id() == 6


@pytest.mark.unit
def test_add_update_remove_return_new_timelines():
    empty = ConditionTimeline()
    one = empty.add(effective_date="2030-02-14", rate=4, movement=100)
    two = one.add()

    assert len(empty) == 0
    assert one.ids == (0,)
    assert two.ids == (0, 1)
    assert two[1] == Condition(id=1)

    edited = two.update(1, effective_date="2031-07-30", movement=-50)
    assert edited[1].effective_date == pd.Timestamp("2031-07-01")
    assert edited[1].movement == -50
    assert two[1].movement is None

    removed = edited.remove(0)
    assert removed.ids == (1,)
    assert removed.next_id() == 2


@pytest.mark.unit
def test_timeline_errors():
    timeline = ConditionTimeline((Condition(id=0),))
    with pytest.raises(ValueError, match="Duplicate"):
        ConditionTimeline((Condition(id=1), Condition(id=1)))
    with pytest.raises(ValueError, match="Cannot edit"):
        timeline.update(0, id=3)
    with pytest.raises(IndexError):
        timeline.update(4, rate=1)
    with pytest.raises(IndexError):
        timeline.remove(1)


@pytest.mark.unit
def test_default_timeline():
    timeline = ConditionTimeline.default(pd.Timestamp("2026-10-19"))
    assert timeline.ids == (0, 1)
    assert timeline[0].effective_date == pd.Timestamp("2026-10-01")
    assert (timeline[0].rate, timeline[0].movement) == (7, 500)
    assert timeline[1].effective_date == pd.Timestamp("2036-10-01")
    assert (timeline[1].rate, timeline[1].movement) == (7, -2000)


@pytest.mark.unit
def test_timeline_to_frame():
    frame = ConditionTimeline.default(pd.Timestamp("2026-10-01")).to_frame()
    assert list(frame.columns) == ["id", "effective_date", "rate", "movement"]
    assert frame["movement"].tolist() == [500, -2000]
