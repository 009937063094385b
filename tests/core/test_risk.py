"""Unit tests for weather risk assessment.

Pure function tests - fast, no mocks needed.
"""

import itertools

import pytest

from src.core.risk import (
    CONDITION_RULES,
    TEMPERATURE_RULES,
    WIND_RULES,
    RiskAssessment,
    RiskLevel,
    assess_observation,
    assess_risks,
)
from src.core.weather import WeatherObservation


TEMPERATURE_FACTORS = {r.factor for r in TEMPERATURE_RULES}
WIND_FACTORS = {r.factor for r in WIND_RULES}
CONDITION_FACTORS = {r.factor for r in CONDITION_RULES}


class TestScenarios:
    """End-to-end scenarios for assess_risks()."""

    def test_all_clear(self):
        """Mild weather produces no risk."""
        result = assess_risks(2, 5, 22, 40, [2, 2, 2])

        assert result.level is RiskLevel.NONE
        assert result.risk_factors == ()
        assert result.recommendations == ()
        assert result.has_risk is False

    def test_extreme_heat_only(self):
        """Above 40°C is extreme heat, high risk."""
        result = assess_risks(1, 5, 42, 30, [1])

        assert result.level is RiskLevel.HIGH
        assert result.risk_factors == ("Extreme heat",)
        assert result.recommendations == ("Stay hydrated and avoid outdoor activities",)

    def test_cold_and_moderate_wind(self):
        """Two medium factors stay medium, reported in evaluation order."""
        result = assess_risks(1, 15, 3, 50, [1])

        assert result.level is RiskLevel.MEDIUM
        assert result.risk_factors == ("Cold conditions", "Moderate winds")

    def test_thunderstorm_raises_level(self):
        """Thunderstorm raises medium factors to high."""
        result = assess_risks(96, 15, 3, 50, [1])

        assert result.level is RiskLevel.HIGH
        assert result.risk_factors == ("Cold conditions", "Moderate winds", "Thunderstorm")

    def test_humidity_heat_only(self):
        """Humid heat alone is medium risk."""
        result = assess_risks(1, 0, 32, 90, [1])

        assert result.level is RiskLevel.MEDIUM
        assert result.risk_factors == ("High humidity heat",)
        assert result.recommendations == ("Avoid strenuous activities",)


class TestTemperatureBand:
    """Tests for the temperature rules."""

    @pytest.mark.parametrize("temp,factor,level", [
        (40.1, "Extreme heat", RiskLevel.HIGH),
        (40, "High temperature", RiskLevel.MEDIUM),
        (35.5, "High temperature", RiskLevel.MEDIUM),
        (-0.1, "Freezing conditions", RiskLevel.HIGH),
        (-20, "Freezing conditions", RiskLevel.HIGH),
        (0, "Cold conditions", RiskLevel.MEDIUM),
        (4.9, "Cold conditions", RiskLevel.MEDIUM),
    ])
    def test_band_thresholds(self, temp, factor, level):
        """Each temperature band fires with its own severity."""
        result = assess_risks(0, 0, temp, 50)
        assert result.risk_factors == (factor,)
        assert result.level is level

    @pytest.mark.parametrize("temp", [5, 20, 35])
    def test_comfortable_range_has_no_factor(self, temp):
        """Between 5 and 35°C inclusive no temperature factor fires."""
        assert assess_risks(0, 0, temp, 50).risk_factors == ()

    def test_monotonic_in_heat(self):
        """Raising temperature past 35 then 40 never lowers the level."""
        levels = [assess_risks(1, 12, t, 50, [1]).level for t in (30, 36, 41)]
        assert levels == sorted(levels)
        assert levels[-1] is RiskLevel.HIGH


class TestWindBand:
    """Tests for the wind rules."""

    def test_strong_winds(self):
        result = assess_risks(0, 20.5, 20, 50)
        assert result.risk_factors == ("Strong winds",)
        assert result.level is RiskLevel.HIGH

    def test_moderate_winds_at_strong_threshold(self):
        """Exactly 20 km/h is moderate, not strong."""
        result = assess_risks(0, 20, 20, 50)
        assert result.risk_factors == ("Moderate winds",)
        assert result.level is RiskLevel.MEDIUM

    def test_calm_at_moderate_threshold(self):
        """Exactly 10 km/h is below the moderate band."""
        assert assess_risks(0, 10, 20, 50).level is RiskLevel.NONE


class TestConditionBand:
    """Tests for the weather condition rules and look-ahead."""

    def test_look_ahead_thunderstorm_matches_current(self):
        """An upcoming thunderstorm counts the same as a current one."""
        ahead = assess_risks(10, 0, 20, 50, [96])
        now = assess_risks(96, 0, 20, 50, [])

        assert ahead == now
        assert ahead.level is RiskLevel.HIGH
        assert ahead.risk_factors == ("Thunderstorm",)

    def test_look_ahead_heavy_precipitation(self):
        result = assess_risks(10, 0, 20, 50, [3, 86, 2])
        assert result.risk_factors == ("Heavy precipitation",)
        assert result.level is RiskLevel.HIGH

    def test_thunderstorm_wins_over_heavy_precipitation(self):
        """Current heavy precipitation with a storm ahead reports the storm."""
        result = assess_risks(86, 0, 20, 50, [95])
        assert result.risk_factors == ("Thunderstorm",)

    def test_snow_not_triggered_by_look_ahead(self):
        """Snow and rain only use the current code."""
        assert assess_risks(10, 0, 20, 50, [75, 65]).level is RiskLevel.NONE

    @pytest.mark.parametrize("code", [71, 75, 80, 84])
    def test_snow_conditions(self, code):
        result = assess_risks(code, 0, 20, 50)
        assert result.risk_factors == ("Snow conditions",)
        assert result.level is RiskLevel.MEDIUM

    @pytest.mark.parametrize("code", [61, 65, 70])
    def test_rainy_conditions_is_low(self, code):
        result = assess_risks(code, 0, 20, 50)
        assert result.risk_factors == ("Rainy conditions",)
        assert result.level is RiskLevel.LOW

    @pytest.mark.parametrize("code", [0, 3, 45, 51, 60])
    def test_light_conditions_have_no_factor(self, code):
        assert assess_risks(code, 0, 20, 50).level is RiskLevel.NONE


class TestHumidityHeat:
    """Tests for the compound humidity-heat rule."""

    def test_both_thresholds_are_strict(self):
        assert assess_risks(0, 0, 31, 85).level is RiskLevel.NONE
        assert assess_risks(0, 0, 30, 90).level is RiskLevel.NONE

    def test_raises_low_rain_to_medium(self):
        """A later medium factor lifts an earlier low level."""
        result = assess_risks(61, 0, 31, 90)

        assert result.risk_factors == ("Rainy conditions", "High humidity heat")
        assert result.level is RiskLevel.MEDIUM

    def test_does_not_lower_high(self):
        """A later medium factor never lowers an earlier high level."""
        result = assess_risks(0, 25, 38, 90)

        assert result.risk_factors == ("High temperature", "Strong winds", "High humidity heat")
        assert result.level is RiskLevel.HIGH


class TestInvariants:
    """Structural properties over a sweep of inputs."""

    TEMPS = (-5, 0, 3, 20, 31, 36, 41)
    WINDS = (0, 10, 15, 25)
    CODES = (0, 61, 71, 85, 95)
    HUMIDITY = (-10, 50, 90)
    UPCOMING = ((), (2,), (86,), (99, 1))

    @pytest.fixture(scope="class")
    def results(self):
        return [
            assess_risks(code, wind, temp, hum, upcoming)
            for temp, wind, code, hum, upcoming in itertools.product(
                self.TEMPS, self.WINDS, self.CODES, self.HUMIDITY, self.UPCOMING,
            )
        ]

    def test_factors_pair_with_recommendations(self, results):
        for result in results:
            assert len(result.risk_factors) == len(result.recommendations)

    def test_none_iff_no_factors(self, results):
        for result in results:
            assert (result.level is RiskLevel.NONE) == (result.risk_factors == ())

    def test_at_most_one_factor_per_band(self, results):
        for result in results:
            factors = set(result.risk_factors)
            assert len(factors & TEMPERATURE_FACTORS) <= 1
            assert len(factors & WIND_FACTORS) <= 1
            assert len(factors & CONDITION_FACTORS) <= 1

    def test_idempotent(self):
        first = assess_risks(96, 15, 3, 50, [1])
        second = assess_risks(96, 15, 3, 50, [1])
        assert first == second


class TestRiskLevel:
    """Tests for RiskLevel ordering and labels."""

    def test_ordering(self):
        assert RiskLevel.NONE < RiskLevel.LOW < RiskLevel.MEDIUM < RiskLevel.HIGH

    def test_labels(self):
        assert RiskLevel.NONE.label == ""
        assert RiskLevel.LOW.label == "low"
        assert RiskLevel.HIGH.label == "high"


class TestAssessObservation:
    """Tests for assess_observation()."""

    def test_uses_observation_fields(self):
        observation = WeatherObservation(
            temperature_c=3,
            apparent_temperature_c=-10,
            relative_humidity_pct=50,
            weather_code=1,
            wind_speed_kmh=15,
            upcoming_codes=(96,),
        )

        result = assess_observation(observation)

        assert result == assess_risks(1, 15, 3, 50, (96,))

    def test_apparent_temperature_ignored(self):
        """Feels-like temperature does not influence risk."""
        observation = WeatherObservation(20, -30, 50, 0, 0)
        assert assess_observation(observation) == RiskAssessment()

    def test_factor_pairs(self):
        result = assess_risks(1, 15, 3, 50, [1])
        assert result.factor_pairs() == [
            ("Cold conditions", "Wear appropriate winter clothing"),
            ("Moderate winds", "Be cautious of flying debris"),
        ]
