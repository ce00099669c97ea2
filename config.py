# config.py

from dotenv import load_dotenv
load_dotenv(override=False)

import os


# ---------------- PROJECT ----------------
PROJECT_NAME = "Farmer Sahayak"
VERSION = "1.0.0"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


# ---------------- SARVAM CHAT ----------------
SARVAM_CHAT_URL = os.getenv(
    "SARVAM_CHAT_URL", "https://api.sarvam.ai/v1/chat/completions"
)
SARVAM_CHAT_MODEL = os.getenv("SARVAM_CHAT_MODEL", "sarvam-m")
SARVAM_TIMEOUT_SECONDS = float(os.getenv("SARVAM_TIMEOUT_SECONDS", "45"))

# applied to every request, regardless of intent
FREQUENCY_PENALTY = 0.4
PRESENCE_PENALTY = 0.3


def get_sarvam_api_key():
    # read per call so a key added to the environment later is picked up
    return os.getenv("SARVAM_API_KEY") or None


# ---------------- CONVERSATION ----------------
MAX_HISTORY_TURNS = int(os.getenv("MAX_HISTORY_TURNS", "5"))

DEFAULT_LANGUAGE_CODE = "en-IN"


# ---------------- PROMPTING ----------------
ADVISOR_TIMEZONE = os.getenv("ADVISOR_TIMEZONE", "Asia/Kolkata")

THINKING_INSTRUCTION = (
    "For this query, think step-by-step and provide detailed reasoning "
    "to ensure accuracy."
)
