"""
Tests for the route and pricing value objects.
"""

import math

import pandas as pd
import pytest

from src.pathfinding.graph import Edge
from src.route_engine.config import Config
from src.route_engine.exceptions import InvalidPriceConfigError
from src.route_engine.schemas import (
    FareBreakdown,
    FareClass,
    Offer,
    PriceConfig,
    Quote,
    RouteResult,
    RouteSegment,
)


@pytest.fixture
def route() -> RouteResult:
    return RouteResult.from_edges(
        ["DEL", "BLR", "MAA"],
        [Edge("DEL", "BLR", 1708.0), Edge("BLR", "MAA", 268.0)],
        algorithm="dijkstra",
    )


# =============================================================================
# ROUTE RESULT
# =============================================================================


class TestRouteResult:
    def test_from_edges(self, route):
        assert route.path == ("DEL", "BLR", "MAA")
        assert route.segments == (
            RouteSegment("DEL", "BLR", 1708.0),
            RouteSegment("BLR", "MAA", 268.0),
        )
        assert route.total_distance == 1976.0
        assert route.algorithm == "dijkstra"

    def test_accessors(self, route):
        assert route.origin == "DEL"
        assert route.destination == "MAA"
        assert route.num_segments == 2
        assert route.route_key == "DEL-BLR-MAA"

    def test_single_airport_route(self):
        result = RouteResult.from_edges(["DEL"], [])

        assert result.segments == ()
        assert result.total_distance == 0.0
        assert isinstance(result.total_distance, float)

    def test_empty_path_rejected(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            RouteResult.from_edges([], [])

    def test_edge_count_mismatch_rejected(self):
        with pytest.raises(ValueError, match="Expected 1 edges"):
            RouteResult.from_edges(["DEL", "BOM"], [])

    def test_to_dict(self, route):
        assert route.to_dict() == {
            "path": ["DEL", "BLR", "MAA"],
            "segments": [
                {"from": "DEL", "to": "BLR", "distanceKm": 1708.0},
                {"from": "BLR", "to": "MAA", "distanceKm": 268.0},
            ],
            "totalDistance": 1976.0,
        }

    def test_segments_frame(self, route):
        df = route.segments_frame()

        assert list(df.columns) == ["segment_index", "source", "target", "distance_km"]
        assert df["segment_index"].tolist() == [0, 1]
        assert df["distance_km"].sum() == route.total_distance

    def test_segments_frame_empty_route(self):
        df = RouteResult.from_edges(["DEL"], []).segments_frame()

        assert isinstance(df, pd.DataFrame)
        assert len(df) == 0

    def test_immutable(self, route):
        with pytest.raises(AttributeError):
            route.total_distance = 0.0


# =============================================================================
# FARE CLASS
# =============================================================================


class TestFareClass:
    def test_offer_order(self):
        assert [fc.label for fc in FareClass] == ["Saver", "Standard", "Flex"]

    def test_multipliers(self):
        assert FareClass.SAVER.multiplier == 0.95
        assert FareClass.STANDARD.multiplier == 1.00
        assert FareClass.FLEX.multiplier == 1.15


# =============================================================================
# PRICE CONFIG
# =============================================================================


class TestPriceConfig:
    def test_defaults(self):
        config = PriceConfig()

        assert config.fuel_price_per_litre == 95.5
        assert config.default_burn_l_per_km == 1.62
        assert config.tax_rate == 0.18
        assert config.fee_rate == 0.08
        assert config.base_fare == 1500.0
        assert config.currency == "INR"

    def test_zero_values_allowed(self):
        config = PriceConfig(fuel_price_per_litre=0.0, tax_rate=0.0, base_fare=0.0)

        assert config.base_fare == 0.0

    @pytest.mark.parametrize(
        "field_name",
        ["fuel_price_per_litre", "default_burn_l_per_km", "tax_rate", "fee_rate", "base_fare"],
    )
    @pytest.mark.parametrize("value", [-0.01, math.inf, math.nan])
    def test_invalid_values_rejected(self, field_name, value):
        with pytest.raises(InvalidPriceConfigError) as exc_info:
            PriceConfig(**{field_name: value})

        assert exc_info.value.field_name == field_name

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            PriceConfig(tax_rate=-1.0)

    def test_from_env_uses_config(self, monkeypatch):
        monkeypatch.setattr(Config, "BASE_FARE", 2500.0)
        monkeypatch.setattr(Config, "CURRENCY", "USD")

        config = PriceConfig.from_env()

        assert config.base_fare == 2500.0
        assert config.currency == "USD"

    def test_to_dict(self):
        assert PriceConfig().to_dict() == {
            "fuelPricePerLitre": 95.5,
            "defaultBurnLPerKm": 1.62,
            "taxRate": 0.18,
            "feeRate": 0.08,
            "baseFare": 1500.0,
        }


# =============================================================================
# BREAKDOWN, OFFER, QUOTE
# =============================================================================


@pytest.fixture
def breakdown() -> FareBreakdown:
    return FareBreakdown(base=1500.0, fuel_cost=1000.0, ops=200.0, taxes=300.0, demand=1.2)


class TestFareBreakdown:
    def test_subtotal_and_core_price(self, breakdown):
        assert breakdown.subtotal == 3000.0
        assert breakdown.core_price == pytest.approx(3600.0)

    def test_to_dict(self, breakdown):
        assert breakdown.to_dict() == {
            "base": 1500.0,
            "fuelCost": 1000.0,
            "ops": 200.0,
            "taxes": 300.0,
            "demand": 1.2,
        }


class TestQuote:
    @pytest.fixture
    def quote(self, route, breakdown) -> Quote:
        offers = tuple(
            Offer(f"id-{i}", fc, breakdown, fare, "INR")
            for i, (fc, fare) in enumerate(zip(FareClass, [3420, 3600, 4140]))
        )
        return Quote(route=route, offers=offers, config=PriceConfig(), passenger_count=1)

    def test_offer_for(self, quote):
        assert quote.offer_for(FareClass.FLEX).total_fare == 4140

    def test_offer_for_missing_class(self, route):
        empty = Quote(route=route, offers=(), config=PriceConfig(), passenger_count=1)

        assert empty.offer_for(FareClass.SAVER) is None

    def test_cheapest(self, quote):
        assert quote.cheapest.fare_class is FareClass.SAVER

    def test_offer_to_dict(self, quote):
        assert quote.offers[1].to_dict() == {
            "offerId": "id-1",
            "class": "Standard",
            "fareBreakdown": quote.offers[1].fare_breakdown.to_dict(),
            "totalFare": 3600,
            "currency": "INR",
        }

    def test_to_dict(self, quote):
        data = quote.to_dict()

        assert data["route"]["path"] == ["DEL", "BLR", "MAA"]
        assert [o["class"] for o in data["offers"]] == ["Saver", "Standard", "Flex"]
        assert data["config"]["baseFare"] == 1500.0
