"""
languages.py

Supported conversation languages.

Scope:
- Eleven Indian languages offered by the app
- Codes are BCP-47 style ("hi-IN"), as sent by the client
- Maps each code to the name used inside prompts

IMPORTANT:
- Unknown codes fall back to English, never raise
- Odia uses "od-IN" for Sarvam but "or-IN" in browsers
"""

from typing import Dict, Optional

from config import DEFAULT_LANGUAGE_CODE


# ============================================================
# SUPPORTED LANGUAGES
# ============================================================

LANGUAGES: Dict[str, Dict[str, str]] = {
    "en-IN": {"name": "English", "english_name": "English", "sarvam_code": "en-IN", "browser_code": "en-IN"},
    "hi-IN": {"name": "हिन्दी", "english_name": "Hindi", "sarvam_code": "hi-IN", "browser_code": "hi-IN"},
    "bn-IN": {"name": "বাংলা", "english_name": "Bengali", "sarvam_code": "bn-IN", "browser_code": "bn-IN"},
    "gu-IN": {"name": "ગુજરાતી", "english_name": "Gujarati", "sarvam_code": "gu-IN", "browser_code": "gu-IN"},
    "kn-IN": {"name": "ಕನ್ನಡ", "english_name": "Kannada", "sarvam_code": "kn-IN", "browser_code": "kn-IN"},
    "ml-IN": {"name": "മലയാളം", "english_name": "Malayalam", "sarvam_code": "ml-IN", "browser_code": "ml-IN"},
    "mr-IN": {"name": "मराठी", "english_name": "Marathi", "sarvam_code": "mr-IN", "browser_code": "mr-IN"},
    "od-IN": {"name": "ଓଡ଼ିଆ", "english_name": "Odia", "sarvam_code": "od-IN", "browser_code": "or-IN"},
    "pa-IN": {"name": "ਪੰਜਾਬੀ", "english_name": "Punjabi", "sarvam_code": "pa-IN", "browser_code": "pa-IN"},
    "ta-IN": {"name": "தமிழ்", "english_name": "Tamil", "sarvam_code": "ta-IN", "browser_code": "ta-IN"},
    "te-IN": {"name": "తెలుగు", "english_name": "Telugu", "sarvam_code": "te-IN", "browser_code": "te-IN"},
}

DEFAULT_LANGUAGE = LANGUAGES[DEFAULT_LANGUAGE_CODE]


# ============================================================
# PUBLIC API
# ============================================================

def get_language(code: Optional[str]) -> Optional[Dict[str, str]]:
    if not code:
        return None
    return LANGUAGES.get(code)


def language_name(code: Optional[str]) -> str:
    """
    English name of the language, used in the system prompt.

    "ta-IN" -> "Tamil", anything unrecognised -> "English".
    """
    lang = get_language(code)
    if not lang:
        return DEFAULT_LANGUAGE["english_name"]
    return lang["english_name"]
