"""Tests for running pace, speed and split calculations."""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from librunner import (
    Duration,
    ImperialRace,
    MetricRace,
    PreconditionError,
    Running,
    format_pace,
    to_duration,
    to_km_h,
    to_mph,
)

FOUR_HOURS = Duration(total_seconds=14400)


@pytest.fixture
def marathon() -> MetricRace:
    return MetricRace(distance=42195)


@pytest.fixture
def imperial_marathon() -> ImperialRace:
    return ImperialRace(distance=46112)


@pytest.fixture
def five_splits() -> list[Duration]:
    return [
        to_duration(0, 5, 53),
        to_duration(0, 5, 38),
        to_duration(0, 5, 44),
        to_duration(0, 5, 37),
        to_duration(0, 5, 29),
    ]


def test_new_running():
    """Test creating a running from a duration."""
    running = Running(duration=FOUR_HOURS)
    assert running.duration == FOUR_HOURS


def test_running_accepts_timedelta_and_seconds():
    """Test that a timedelta or a number of seconds is accepted as duration."""
    assert Running(duration=timedelta(hours=4)).duration == FOUR_HOURS
    assert Running(duration=14400).duration == FOUR_HOURS


def test_running_rejects_negative_duration():
    """Test that a negative duration fails instead of constructing a running."""
    with pytest.raises(ValidationError):
        Running(duration=-1)
    with pytest.raises(ValidationError):
        Running(duration=timedelta(seconds=-30))


def test_metric_average_pace(marathon):
    """Test marathon pace in min/km."""
    pace = Running(duration=FOUR_HOURS).average_pace(marathon)

    assert pace.total_seconds == 341
    assert pace.minutes == 5
    assert pace.seconds == 41
    assert format_pace(pace) == "05:41"


def test_imperial_average_pace(imperial_marathon):
    """Test marathon pace in min/mile."""
    pace = Running(duration=FOUR_HOURS).average_pace(imperial_marathon)

    assert pace.total_seconds == 549
    assert format_pace(pace) == "09:09"


def test_average_pace_zero_distance():
    """Test that pace over a zero-distance race fails explicitly."""
    running = Running(duration=FOUR_HOURS)
    with pytest.raises(PreconditionError):
        running.average_pace(MetricRace(distance=0))
    with pytest.raises(PreconditionError):
        running.average_pace(ImperialRace(distance=0))


def test_metric_speed(marathon):
    """Test speed in m/s and km/h."""
    running = Running(duration=FOUR_HOURS)

    assert running.speed(marathon) == pytest.approx(2.9302083, rel=1e-6)
    assert to_km_h(running.speed(marathon)) == pytest.approx(10.55, abs=0.005)
    assert running.display_speed(marathon) == pytest.approx(10.55, abs=0.005)


def test_imperial_speed(imperial_marathon):
    """Test speed in yd/s and mph."""
    running = Running(duration=FOUR_HOURS)

    assert running.speed(imperial_marathon) == pytest.approx(3.2022222, rel=1e-6)
    assert to_mph(running.speed(imperial_marathon)) == pytest.approx(6.55, abs=0.005)
    assert running.display_speed(imperial_marathon) == pytest.approx(6.55, abs=0.005)


def test_speed_zero_duration(marathon):
    """Test that speed over a zero duration fails instead of returning infinity."""
    with pytest.raises(PreconditionError):
        Running(duration=0).speed(marathon)


def test_one_running_against_several_races(marathon, imperial_marathon):
    """Test that the same running can be evaluated against different races."""
    running = Running(duration=to_duration(0, 50, 0))

    assert running.average_pace(MetricRace(distance=10000)).total_seconds == 300
    assert running.average_pace(MetricRace(distance=5000)).total_seconds == 600
    assert running.average_pace(marathon) < running.average_pace(imperial_marathon)


@pytest.mark.parametrize("hours", [2, 3, 4, 5, 6])
def test_pace_increases_with_duration(marathon, hours):
    """Test that pace grows with duration for a fixed distance."""
    faster = Running(duration=to_duration(hours, 0, 0))
    slower = Running(duration=to_duration(hours, 30, 0))
    assert faster.average_pace(marathon) < slower.average_pace(marathon)


@pytest.mark.parametrize("distance", [5000, 10000, 21097, 42195])
def test_pace_decreases_with_distance(distance):
    """Test that pace drops as distance grows for a fixed duration."""
    running = Running(duration=FOUR_HOURS)
    shorter = MetricRace(distance=distance)
    longer = MetricRace(distance=distance + 1000)
    assert running.average_pace(longer) < running.average_pace(shorter)


@pytest.mark.parametrize(
    "race",
    [MetricRace(distance=42195), ImperialRace(distance=46112), MetricRace(distance=5000)],
)
def test_pace_and_speed_are_reciprocal(race):
    """Test that pace recovered from speed matches the computed pace."""
    running = Running(duration=FOUR_HOURS)
    pace_from_speed = race.split_distance / running.speed(race)
    # average_pace truncates to whole seconds
    assert running.average_pace(race).total_seconds == pytest.approx(pace_from_speed, abs=1)


def test_new_metric_from_pace(marathon):
    """Test building a running from a target pace."""
    running = Running.from_pace(marathon, Duration(total_seconds=341))
    assert running.duration == Duration(total_seconds=14388)


def test_new_imperial_from_pace(imperial_marathon):
    """Test building an imperial running from a target pace."""
    running = Running.from_pace(imperial_marathon, Duration(total_seconds=549))
    assert running.duration == Duration(total_seconds=14383)


def test_new_from_splits(five_splits):
    """Test building a race and a running from recorded splits."""
    race = MetricRace.from_splits(five_splits)
    running = Running.from_splits(five_splits)

    assert race.distance == 5000
    assert running.duration.total_seconds == 1701
    pace = running.average_pace(race)
    assert (pace.minutes, pace.seconds) == (5, 40)


def test_new_imperial_from_splits(five_splits):
    """Test imperial splits give a five mile race."""
    race = ImperialRace.from_splits(five_splits)
    running = Running.from_splits(five_splits)

    assert race.distance == 8800
    assert running.average_pace(race).total_seconds == 340


def test_metric_splits_duration(marathon):
    """Test that even splits all match the average pace."""
    running = Running(duration=FOUR_HOURS)
    splits = running.splits(marathon)
    average_pace = running.average_pace(marathon)

    assert len(splits) == 43
    assert all(split == average_pace for split in splits)


def test_imperial_splits_duration(imperial_marathon):
    """Test even imperial splits."""
    running = Running(duration=FOUR_HOURS)
    splits = running.splits(imperial_marathon)

    assert len(splits) == 27
    assert all(split.total_seconds == 549 for split in splits)


def test_splits_with_pace(marathon):
    """Test splits at a custom pace."""
    pace = to_duration(0, 5, 0)
    splits = Running(duration=FOUR_HOURS).splits_with_pace(marathon, pace)

    assert len(splits) == 43
    assert set(splits) == {pace}


def test_metric_negative_splits(marathon):
    """Test that negative splits start slow and drop one second per block."""
    degree = 5
    variation = 2 * degree + 1
    block = marathon.num_splits() // variation
    running = Running(duration=FOUR_HOURS)
    negative_splits = running.negative_splits(marathon, degree)

    assert len(negative_splits) == 43
    assert negative_splits[0].total_seconds == 346
    assert negative_splits[block].total_seconds == 346 - 1
    assert negative_splits[block * 2].total_seconds == 346 - 2
    assert negative_splits[block * variation].total_seconds == 346 - variation
    assert negative_splits[block * degree] == running.average_pace(marathon)
    assert all(a >= b for a, b in zip(negative_splits, negative_splits[1:]))


def test_metric_positive_splits(marathon):
    """Test that positive splits start fast and add one second per block."""
    degree = 5
    variation = 2 * degree + 1
    block = marathon.num_splits() // variation
    running = Running(duration=FOUR_HOURS)
    positive_splits = running.positive_splits(marathon, degree)

    assert positive_splits[0].total_seconds == 346 - degree * 2
    assert positive_splits[block].total_seconds == 346 - degree * 2 + 1
    assert positive_splits[block * 2].total_seconds == 346 - degree * 2 + 2
    assert positive_splits[block * degree] == running.average_pace(marathon)
    assert all(a <= b for a, b in zip(positive_splits, positive_splits[1:]))


def test_graded_splits_short_race():
    """Test that races with fewer splits than the variation still step every split."""
    race = MetricRace(distance=5000)
    running = Running(duration=to_duration(0, 25, 0))

    paces = [split.total_seconds for split in running.negative_splits(race, 5)]
    assert paces == [305, 304, 303, 302, 301]


def test_graded_splits_zero_degree(marathon):
    """Test that a zero degree gives even splits."""
    running = Running(duration=FOUR_HOURS)
    assert running.negative_splits(marathon, 0) == running.splits(marathon)


def test_graded_splits_invalid_degree(marathon):
    """Test that degrees that cannot produce valid splits fail."""
    running = Running(duration=FOUR_HOURS)
    with pytest.raises(PreconditionError):
        running.negative_splits(marathon, -1)
    with pytest.raises(PreconditionError):
        running.positive_splits(marathon, 400)


@pytest.mark.parametrize(
    "distance,seconds,expected",
    [(1100, 242, 220), (1100, 396, 360), (1100, 550, 500), (42195, 14400, 341)],
)
def test_average_pace_exact_division(distance, seconds, expected):
    """Test that paces dividing evenly into whole seconds are not rounded down."""
    race = MetricRace(distance=distance)
    pace = Running(duration=seconds).average_pace(race)
    assert pace.total_seconds == expected


def test_average_pace_exact_division_formatting():
    """Test that 242 s over 1100 m renders as 03:40 per km."""
    pace = Running(duration=242).average_pace(MetricRace(distance=1100))
    assert format_pace(pace) == "03:40"


@pytest.mark.parametrize(
    "distance,pace,expected",
    [(700, 180, 126), (700, 330, 231), (700, 340, 238), (1400, 180, 252)],
)
def test_from_pace_exact_multiplication(distance, pace, expected):
    """Test that durations built from a pace keep exact whole-second results."""
    race = MetricRace(distance=distance)
    running = Running.from_pace(race, Duration(total_seconds=pace))
    assert running.duration.total_seconds == expected
