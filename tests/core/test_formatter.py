"""Unit tests for message formatting.

Pure function tests - verify formatting logic without I/O.
"""

import pytest

from src.core.advisory import compose_advisory
from src.core.centers import Center
from src.core.formatter import (
    EMERGENCY_CONTACTS,
    format_alert_email,
    format_minimal_view,
    format_verification_email,
    format_weather_summary,
)
from src.core.risk import RiskAssessment, assess_risks
from src.core.weather import WeatherObservation


@pytest.fixture
def high_risk():
    """Cold, windy, thunderstorm."""
    return assess_risks(96, 15, 3, 50, [1])


@pytest.fixture
def sample_center():
    return Center(
        id="1",
        name="Mumbai Relief Camp",
        center_type="shelter",
        status="open",
        contact="022-22694725",
        website="",
        capacity=200,
        occupancy=150,
        address="Dharavi, Mumbai",
        latitude=19.038,
        longitude=72.8538,
    )


class TestFormatAlertEmail:
    """Tests for format_alert_email()."""

    def test_subject_has_level(self, high_risk):
        message = format_alert_email(high_risk, compose_advisory(high_risk))
        assert message.subject == "HIGH Weather Alert"

    def test_lists_factors_and_recommendations(self, high_risk):
        message = format_alert_email(high_risk, compose_advisory(high_risk))

        assert "<li>Thunderstorm</li>" in message.html
        assert "<li>Seek indoor shelter and avoid open areas</li>" in message.html
        assert "EMERGENCY ALERT" in message.html

    def test_location_name_in_heading(self, high_risk):
        message = format_alert_email(high_risk, "advisory", location_name="Pune")
        assert "HIGH Weather Alert - Pune" in message.html
        assert message.subject == "HIGH Weather Alert"

    def test_escapes_html(self, high_risk):
        message = format_alert_email(high_risk, "a <b> c", location_name="<script>")
        assert "<script>" not in message.html
        assert "a &lt;b&gt; c" in message.html

    def test_no_risk_raises(self):
        with pytest.raises(ValueError):
            format_alert_email(RiskAssessment(), "stable")

    def test_low_risk_colors(self):
        low = assess_risks(61, 0, 20, 50)
        message = format_alert_email(low, compose_advisory(low))
        assert message.subject == "LOW Weather Alert"
        assert "#DBEAFE" in message.html


class TestFormatVerificationEmail:
    """Tests for format_verification_email()."""

    def test_contains_code(self):
        message = format_verification_email("123456")
        assert message.subject == "Verify your email for Weather Alerts"
        assert "123456" in message.html


class TestFormatWeatherSummary:
    """Tests for format_weather_summary()."""

    def test_summary(self):
        observation = WeatherObservation(31.6, 35.2, 88, 61, 4.4)
        result = format_weather_summary(observation, assess_risks(61, 4.4, 31.6, 88))

        assert result == (
            "Rain, 32°C (feels like 35°C), humidity 88%, wind 4 km/h - medium risk"
        )

    def test_no_risk(self):
        observation = WeatherObservation(20, 20, 40, 0, 2)
        result = format_weather_summary(observation, RiskAssessment())
        assert result.endswith("- no risk")
        assert result.startswith("Clear sky")


class TestFormatMinimalView:
    """Tests for format_minimal_view()."""

    def test_header_and_contacts(self):
        text = format_minimal_view([])

        assert text.startswith("EMERGENCY RESPONSE CENTERS")
        for label, phone in EMERGENCY_CONTACTS:
            assert f"  - {label}: {phone}" in text

    def test_center_block(self, sample_center):
        text = format_minimal_view([sample_center])

        assert "Mumbai Relief Camp\n  Phone: 022-22694725" in text
        assert "  Address: Dharavi, Mumbai" in text
        assert "  Available: 50 spots" in text

    def test_custom_contacts(self):
        text = format_minimal_view([], contacts=(("Police", "100"),))
        assert "  - Police: 100" in text
        assert "112" not in text
