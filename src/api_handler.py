"""Web API Handler - Serves dashboard data to the frontend.

This module provides HTTP endpoints for the dashboard frontend.
Part of the imperative shell - handles HTTP I/O.
"""

import json
import logging
from typing import Any

from flask import Request, Response

from src.core.advisory import level_theme
from src.core.centers import Center, CenterStats, occupancy_band
from src.core.formatter import format_weather_summary
from src.core.geo import parse_location
from src.dashboard import Dashboard, WeatherReport

logger = logging.getLogger(__name__)

# CORS allowed origins
ALLOWED_ORIGINS = [
    "http://localhost:5173",
    "http://localhost:3000",
]


def _cors_headers(origin: str | None) -> dict[str, str]:
    """Generate CORS headers for the response."""
    headers = {
        "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type",
        "Access-Control-Max-Age": "3600",
    }
    if origin and origin in ALLOWED_ORIGINS:
        headers["Access-Control-Allow-Origin"] = origin
    else:
        headers["Access-Control-Allow-Origin"] = ALLOWED_ORIGINS[0]
    return headers


def _preflight(origin: str | None) -> Response:
    response = Response("", status=204)
    for key, value in _cors_headers(origin).items():
        response.headers[key] = value
    return response


def _json_response(
    data: dict[str, Any],
    status: int = 200,
    origin: str | None = None,
) -> Response:
    """Create a JSON response with CORS headers."""
    response = Response(
        json.dumps(data, default=str, ensure_ascii=False),
        status=status,
        mimetype="application/json",
    )
    for key, value in _cors_headers(origin).items():
        response.headers[key] = value
    return response


def _report_to_dict(report: WeatherReport) -> dict[str, Any]:
    """Convert a WeatherReport to a JSON-serializable dict."""
    data: dict[str, Any] = {
        "location": {
            "lat": report.location.latitude,
            "lng": report.location.longitude,
        },
        "available": report.available,
    }

    if not report.available:
        data["error"] = "Failed to load weather data"
        return data

    obs = report.observation
    assessment = report.assessment
    data.update({
        "current": {
            "temperature_c": obs.temperature_c,
            "apparent_temperature_c": obs.apparent_temperature_c,
            "relative_humidity_pct": obs.relative_humidity_pct,
            "weather_code": obs.weather_code,
            "wind_speed_kmh": obs.wind_speed_kmh,
            "condition": report.condition,
            "icon": {"glyph": report.icon.glyph, "tone": report.icon.tone},
        },
        "upcoming_codes": list(obs.upcoming_codes),
        "risk": {
            "level": assessment.level.label or None,
            "theme": level_theme(assessment.level),
            "factors": list(assessment.risk_factors),
            "recommendations": list(assessment.recommendations),
        },
        "message": report.advisory,
        "summary": format_weather_summary(obs, assessment),
    })
    return data


def _center_to_dict(center: Center, distance_km: float | None = None) -> dict[str, Any]:
    """Convert Center dataclass to JSON-serializable dict."""
    return {
        "id": center.id,
        "name": center.name,
        "type": center.center_type,
        "status": center.status,
        "open": center.is_open,
        "contact": center.contact,
        "website": center.website_url,
        "capacity": center.capacity,
        "occupancy": center.occupancy,
        "available": center.available_spots,
        "occupancy_band": occupancy_band(center.occupancy_rate),
        "address": center.address,
        "lat": center.latitude,
        "lng": center.longitude,
        "distance_km": round(distance_km, 1) if distance_km is not None else None,
    }


def _stats_to_dict(stats: CenterStats) -> dict[str, Any]:
    return {
        "total_centers": stats.total_centers,
        "available_capacity": stats.available_capacity,
        "health_centers": stats.health_centers,
        "shelter_centers": stats.shelter_centers,
        "occupancy_rate": round(stats.occupancy_rate, 4),
        "occupancy_band": occupancy_band(stats.occupancy_rate),
    }


def get_weather(request: Request, dashboard: Dashboard) -> Response:
    """API endpoint: Current weather, risk and advisory.

    Query params:
        lat, lng: Location (optional, default location otherwise)

    Returns:
        JSON weather report, 502 if the weather source failed
    """
    origin = request.headers.get("Origin")
    if request.method == "OPTIONS":
        return _preflight(origin)

    location = parse_location(request.args.get("lat"), request.args.get("lng"))
    report = dashboard.weather_report(location)

    status = 200 if report.available else 502
    return _json_response(_report_to_dict(report), status=status, origin=origin)


def get_centers(request: Request, dashboard: Dashboard) -> Response:
    """API endpoint: Search centers, nearest first.

    Query params:
        q: Search text (optional)
        lat, lng: User location (optional)

    Returns:
        JSON with matching centers
    """
    origin = request.headers.get("Origin")
    if request.method == "OPTIONS":
        return _preflight(origin)

    location = parse_location(request.args.get("lat"), request.args.get("lng"))
    pairs = dashboard.list_centers(request.args.get("q"), location)

    return _json_response(
        {
            "centers": [_center_to_dict(c, d) for c, d in pairs],
            "count": len(pairs),
            "sorted_by_distance": location is not None,
        },
        origin=origin,
    )


def get_stats(request: Request, dashboard: Dashboard) -> Response:
    """API endpoint: Center capacity statistics."""
    origin = request.headers.get("Origin")
    if request.method == "OPTIONS":
        return _preflight(origin)

    return _json_response(_stats_to_dict(dashboard.stats()), origin=origin)


def get_faq_answer(request: Request, dashboard: Dashboard) -> Response:
    """API endpoint: Answer an FAQ chat message.

    Query params:
        message: User question
        lang: 'en' or 'hi' (default 'en')
    """
    origin = request.headers.get("Origin")
    if request.method == "OPTIONS":
        return _preflight(origin)

    reply = dashboard.answer(
        request.args.get("message", ""),
        request.args.get("lang"),
    )
    if reply is None:
        return _json_response({"error": "Empty message"}, status=400, origin=origin)

    return _json_response({"topic": reply.topic, "reply": reply.text}, origin=origin)


def get_faq_greeting(request: Request, dashboard: Dashboard) -> Response:
    """API endpoint: Opening chat message.

    Query params:
        lang: 'en' or 'hi' (default 'en')
    """
    origin = request.headers.get("Origin")
    if request.method == "OPTIONS":
        return _preflight(origin)

    return _json_response({"greeting": dashboard.greeting(request.args.get("lang"))}, origin=origin)


def get_minimal_view(request: Request, dashboard: Dashboard) -> Response:
    """API endpoint: Low-bandwidth plain-text view.

    Query params:
        lat, lng: User location (optional, lists nearest centers first)
    """
    origin = request.headers.get("Origin")
    if request.method == "OPTIONS":
        return _preflight(origin)

    location = parse_location(request.args.get("lat"), request.args.get("lng"))
    response = Response(dashboard.minimal_view(location), status=200, mimetype="text/plain")
    for key, value in _cors_headers(origin).items():
        response.headers[key] = value
    return response


def get_centers_map(request: Request, dashboard: Dashboard) -> Response:
    """API endpoint: PNG map of centers.

    Query params:
        lat, lng: User location (optional)
        dark: "1" or "true" for the dark basemap (optional)
    """
    origin = request.headers.get("Origin")
    if request.method == "OPTIONS":
        return _preflight(origin)

    location = parse_location(request.args.get("lat"), request.args.get("lng"))
    dark_mode = request.args.get("dark", "").lower() in ("1", "true", "yes")
    result = dashboard.render_map(location, dark_mode=dark_mode)

    if not result.success:
        return _json_response({"error": "Failed to render map"}, status=502, origin=origin)

    response = Response(result.image_bytes, status=200, mimetype="image/png")
    for key, value in _cors_headers(origin).items():
        response.headers[key] = value
    return response


def post_subscription(request: Request, dashboard: Dashboard) -> Response:
    """API endpoint: Subscribe an email address to weather alerts.

    JSON body:
        email: Address to subscribe
    """
    origin = request.headers.get("Origin")
    if request.method == "OPTIONS":
        return _preflight(origin)

    body = request.get_json(silent=True)
    if body is None:
        body = {}
    if not isinstance(body, dict):
        return _json_response(
            {"error": "Request body must be a JSON object"},
            status=400,
            origin=origin,
        )

    email = body.get("email", "")
    if not isinstance(email, str):
        return _json_response(
            {"error": "Invalid email address"},
            status=400,
            origin=origin,
        )
    if not email.strip():
        return _json_response(
            {"error": "Please enter your email address"},
            status=400,
            origin=origin,
        )

    result = dashboard.subscribe(email)
    if not result.success:
        status = 400 if result.error == "Invalid email address" else 502
        return _json_response({"error": result.error}, status=status, origin=origin)

    return _json_response({"status": "verification_sent"}, origin=origin)


ROUTES = {
    "/api-weather": get_weather,
    "/api-centers": get_centers,
    "/api-stats": get_stats,
    "/api-faq": get_faq_answer,
    "/api-greeting": get_faq_greeting,
    "/api-minimal": get_minimal_view,
    "/api-map": get_centers_map,
    "/api-subscribe": post_subscription,
}


def handle_request(request: Request, dashboard: Dashboard) -> Response:
    """Dispatch a request to the endpoint registered for its path."""
    handler = ROUTES.get(request.path.rstrip("/") or "/")
    if handler is None:
        return _json_response(
            {"error": f"Unknown endpoint: {request.path}", "available": sorted(ROUTES)},
            status=404,
            origin=request.headers.get("Origin"),
        )
    return handler(request, dashboard)
