from advisor.context import format_plant_health, format_weather
from nlp.languages import get_language, language_name
from nlp.response_parser import split_thinking


WEATHER = {
    "name": "Nashik",
    "weather": [{"description": "scattered clouds", "icon": "03d"}],
    "main": {"temp": 27.6, "feels_like": 28.1, "humidity": 64},
    "wind": {"speed": 3.1},
}


def test_format_weather():
    assert format_weather(WEATHER) == (
        "Current weather in Nashik: scattered clouds, Temperature: 28°C, "
        "Humidity: 64%, Wind Speed: 3.1 m/s"
    )


def test_format_weather_incomplete_payload():
    assert format_weather({"name": "Nashik"}) is None


def test_format_plant_health():
    text = format_plant_health({
        "disease": "Early blight",
        "probability": 0.912,
        "treatment": "Spray mancozeb",
        "symptoms": "",
        "prevention": "Rotate crops.",
    })
    assert text == (
        "Detected: Early blight (91.2% confidence). "
        "Treatment: Spray mancozeb. Prevention: Rotate crops."
    )
    assert format_plant_health({"probability": 0.5}) is None


def test_split_thinking_complete_blocks():
    thinking, answer = split_thinking(
        "<think>Check leaf age.</think>Apply urea.<think>Dose is 50 kg.</think>"
    )
    assert thinking == "Check leaf age.\n\nDose is 50 kg."
    assert answer == "Apply urea."


def test_split_thinking_unterminated_block():
    thinking, answer = split_thinking("Irrigate tonight. <think>Soil moisture is low and")
    assert thinking == "Soil moisture is low and"
    assert answer == "Irrigate tonight."


def test_split_thinking_plain_text():
    assert split_thinking("Sow after the first rain.") == ("", "Sow after the first rain.")
    assert split_thinking("") == ("", "")


def test_language_lookup():
    assert language_name("kn-IN") == "Kannada"
    assert language_name("fr-FR") == "English"
    assert language_name(None) == "English"
    assert get_language("od-IN")["browser_code"] == "or-IN"


def test_format_weather_rounds_halves_up():
    payload = dict(WEATHER, main={"temp": 26.5, "humidity": 70})
    assert "Temperature: 27°C" in format_weather(payload)

    payload = dict(WEATHER, main={"temp": -0.5, "humidity": 70})
    assert "Temperature: 0°C" in format_weather(payload)


def test_format_plant_health_non_numeric_probability():
    text = format_plant_health({"disease": "Leaf rust", "probability": "high"})
    assert text == "Detected: Leaf rust (0.0% confidence)."
