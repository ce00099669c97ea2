"""
Turns collaborator payloads into the one-line summaries the prompt expects.

The weather and plant-identification services are called elsewhere; only
their results pass through here.
"""

import math
from typing import Dict, Optional


def format_weather(payload: Dict) -> Optional[str]:
    """
    OpenWeather "current weather" JSON -> summary line.

    Returns None when the payload lacks the basics.
    """
    try:
        name = payload["name"]
        description = payload["weather"][0]["description"]
        # halves round up: 26.5 -> 27
        temperature = math.floor(float(payload["main"]["temp"]) + 0.5)
        humidity = payload["main"]["humidity"]
        wind = payload["wind"]["speed"]
    except (KeyError, IndexError, TypeError, ValueError):
        return None

    return (
        f"Current weather in {name}: {description}, "
        f"Temperature: {temperature}°C, "
        f"Humidity: {humidity}%, "
        f"Wind Speed: {wind} m/s"
    )


def format_plant_health(analysis: Dict) -> Optional[str]:
    """
    Plant-identification result -> summary line.

    Expected keys: disease, probability (0..1), and optionally
    treatment / symptoms / prevention.
    """
    disease = analysis.get("disease")
    if not disease:
        return None

    try:
        probability = float(analysis.get("probability") or 0.0)
    except (TypeError, ValueError):
        probability = 0.0

    parts = [f"Detected: {disease} ({probability * 100:.1f}% confidence)."]

    for key, label in (
        ("treatment", "Treatment"),
        ("symptoms", "Symptoms"),
        ("prevention", "Prevention"),
    ):
        value = (analysis.get(key) or "").strip()
        if value:
            parts.append(f"{label}: {value.rstrip('.')}.")

    return " ".join(parts)
