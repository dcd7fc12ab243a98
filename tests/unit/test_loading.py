"""
Unit tests for loading conditions (useful load on top of the empty aircraft).
"""

import pytest

from aeroweight.core.point import Point
from aeroweight.errors import ErrorCode
from aeroweight.weight.aggregator import Aircraft, WeightBalanceSummary
from aeroweight.weight.items import WeightGroup
from aeroweight.weight.loading import (
    Crew,
    Fuel,
    LoadCase,
    LoadingCondition,
    Passengers,
    Payload,
    Pilots,
)


@pytest.fixture
def empty() -> WeightBalanceSummary:
    return WeightBalanceSummary(
        design_gross_weight_lb=1000.0,
        ultimate_load_factor=3.75,
        total_weight_lb=600.0,
        cg=Point(10.0, 0.0, 0.0),
    )


def cabin(count, load_case):
    return Passengers(
        count=count,
        weight_each=200.0,
        seat_start_x=14.0,
        cabin_length=40.0,
        rows=20,
        seats_per_row=6,
        load_case=load_case,
    )


class TestUsefulLoadItems:
    """Tests for fixed-position items."""

    def test_pilots(self):
        estimate = Pilots(2, 190.0, Point(5.3, 0.0, 1.0)).estimate().unwrap()
        assert estimate.name == "pilots"
        assert estimate.weight_lb == 380.0
        assert estimate.cg == Point(5.3, 0.0, 1.0)
        assert estimate.group == WeightGroup.USEFUL_LOAD

    def test_crew_name(self):
        assert Crew(3, 170.0, Point(47.0, 0.0, 0.0)).estimate().unwrap().name == "crew"

    def test_payload_and_fuel(self):
        assert Payload(5000.0, Point(50.0, 0.0, -2.0)).estimate().unwrap().weight_lb == 5000.0
        fuel = Fuel(20000.0, Point(46.0, 0.0, 0.5)).estimate().unwrap()
        assert fuel.name == "fuel"

    def test_negative_payload(self):
        result = Payload(-10.0, Point()).estimate()
        assert result.error.code == ErrorCode.PHY_NEGATIVE_WEIGHT

    def test_negative_count(self):
        result = Pilots(-1, 190.0, Point()).estimate()
        assert result.error.code == ErrorCode.PHY_NEGATIVE_WEIGHT


class TestPassengers:
    """Tests for load-case dependent passenger CG."""

    def test_weight(self):
        assert cabin(60, LoadCase.CENTER).weight() == 12000.0

    def test_front(self):
        """Test 60 passengers fill 10 of 20 rows (20 ft) from the front."""
        assert cabin(60, LoadCase.FRONT).position().unwrap().x == pytest.approx(24.0)

    def test_rear(self):
        assert cabin(60, LoadCase.REAR).position().unwrap().x == pytest.approx(44.0)

    def test_center(self):
        assert cabin(60, LoadCase.CENTER).position().unwrap().x == pytest.approx(34.0)

    def test_full_cabin_cases_agree(self):
        xs = [cabin(120, case).position().unwrap().x for case in LoadCase]
        assert xs == pytest.approx([34.0, 34.0, 34.0])

    def test_front_is_forward_of_rear(self):
        front = cabin(30, LoadCase.FRONT).position().unwrap().x
        rear = cabin(30, LoadCase.REAR).position().unwrap().x
        assert front < rear

    def test_over_capacity(self):
        result = cabin(121, LoadCase.FRONT).position()
        assert result.error.code == ErrorCode.GEO_INVALID

    def test_invalid_cabin(self):
        pax = Passengers(count=10, weight_each=200.0, seat_start_x=14.0, cabin_length=40.0, rows=0)
        assert pax.position().error.code == ErrorCode.GEO_INVALID

    def test_from_layout(self):
        pax = Passengers.from_layout(
            count=90, weight_each=200.0, seat_start_x=14.0, rows=15, seat_pitch_in=32.0,
        )
        assert pax.cabin_length == pytest.approx(40.0)
        assert pax.capacity == 90
        assert pax.load_case == LoadCase.CENTER


class TestLoadingCondition:
    """Tests for combining the empty aircraft with useful load."""

    def test_evaluate(self, empty):
        condition = LoadingCondition("crew only", [Pilots(2, 200.0, Point(2.0, 0.0, 0.0))])
        loaded = condition.evaluate(empty).unwrap()
        assert loaded.condition == "crew only"
        assert loaded.total_weight_lb == 1000.0
        assert loaded.useful_load_lb == 400.0
        assert loaded.cg.x == pytest.approx(6.8)

    def test_no_items_is_empty_aircraft(self, empty):
        loaded = LoadingCondition("ferry").evaluate(empty).unwrap()
        assert loaded.total_weight_lb == 600.0
        assert loaded.cg == Point(10.0, 0.0, 0.0)

    def test_item_failure_path(self, empty):
        condition = LoadingCondition("bad", [Payload(-5.0, Point())])
        result = condition.evaluate(empty)
        assert result.error.path == "bad/payload"

    def test_front_loading_moves_cg_forward(self, jet_parameters):
        empty = Aircraft.from_parameters(jet_parameters).compute(84350.0, 3.75).unwrap()
        front = LoadingCondition("front", [cabin(60, LoadCase.FRONT)]).evaluate(empty).unwrap()
        rear = LoadingCondition("rear", [cabin(60, LoadCase.REAR)]).evaluate(empty).unwrap()
        assert front.cg.x < rear.cg.x
        assert front.total_weight_lb == pytest.approx(empty.total_weight_lb + 12000.0)

    def test_to_dict(self, empty):
        condition = LoadingCondition("crew only", [Pilots(2, 200.0, Point(2.0, 0.0, 0.0))])
        data = condition.evaluate(empty).unwrap().to_dict()
        assert data["useful_load_lb"] == 400.0
        assert data["items"][0]["group"] == "useful_load"
