import pytest

from villagesim.stats import PawnStats


def test_defaults_from_source():
    stats = PawnStats()
    assert stats.hunger == 100.0
    assert stats.hungry_threshold == 30.0
    assert stats.thirst_decrease_rate == 0.2
    assert not (stats.hungry or stats.thirsty or stats.tired or stats.sad)


@pytest.mark.parametrize(
    "method, attr",
    [
        ("modify_hunger", "hunger"),
        ("modify_thirst", "thirst"),
        ("modify_energy", "energy"),
        ("modify_happiness", "happiness"),
    ],
)
def test_modify_clamps_to_range(method, attr):
    stats = PawnStats()
    getattr(stats, method)(-1000)
    assert getattr(stats, attr) == 0.0
    getattr(stats, method)(1000)
    assert getattr(stats, attr) == 100.0


def test_modify_emits_new_value_only_on_change():
    stats = PawnStats()
    values = []
    stats.on_hunger_changed.connect(values.append)
    stats.modify_hunger(100)
    assert values == []
    stats.modify_hunger(-40)
    assert values == [stats.hunger]


def test_decrease_lowers_each_stat_by_its_rate():
    stats = PawnStats()
    stats.decrease()
    assert stats.hunger == pytest.approx(100.0 - 0.1)
    assert stats.thirst == pytest.approx(100.0 - 0.2)
    assert stats.energy == pytest.approx(100.0 - 0.05)
    assert stats.happiness == pytest.approx(100.0 - 0.03)


def test_decrease_sets_flags_below_threshold():
    stats = PawnStats()
    stats.modify_hunger(-75)
    stats.modify_thirst(-75)
    stats.decrease()
    assert stats.hungry and stats.thirsty
    assert not stats.tired and not stats.sad


def test_flags_clear_after_refill():
    stats = PawnStats()
    stats.modify_hunger(-100)
    stats.decrease()
    assert stats.hungry
    stats.modify_hunger(100)
    stats.decrease()
    assert not stats.hungry


def test_decrease_emits_state_changed():
    stats = PawnStats()
    calls = []
    stats.on_state_changed.connect(lambda: calls.append(1))
    stats.decrease()
    assert calls == [1]


def test_advance_counts_whole_seconds_and_carries_remainder():
    stats = PawnStats()
    calls = []
    stats.on_state_changed.connect(lambda: calls.append(1))
    assert stats.advance(0.5) == 0
    assert stats.advance(0.5) == 1
    assert stats.advance(3.0) == 3
    assert len(calls) == 4


def test_advance_negative_raises():
    with pytest.raises(ValueError):
        PawnStats().advance(-1.0)


def test_long_decay_never_goes_below_zero():
    stats = PawnStats(thirst_decrease_rate=50.0)
    stats.advance(5.0)
    assert stats.thirst == 0.0
    assert stats.thirsty