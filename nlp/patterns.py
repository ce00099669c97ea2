"""
patterns.py

Multilingual intent patterns for farmer queries.

Purpose:
- Route a farmer's question to a tuned generation policy
- Work on raw text in any supported Indian language
- Stay deterministic and LLM-free

This module:
- DOES NOT decide priority (see query_classifier.py)
- DOES NOT translate
- Patterns are plain keyword alternations, matched case-insensitively
  anywhere in the text. Overlaps between categories are expected.
"""

from __future__ import annotations

import re
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Pattern, Tuple


class IntentCategory(str, Enum):
    DATE_TIME = "dateTime"
    FACTUAL = "factual"
    CALCULATION = "calculation"
    REASONING = "reasoning"
    DISEASE = "disease"
    SEASONAL = "seasonal"
    EMERGENCY = "emergency"
    MARKET = "market"
    SCHEME = "scheme"
    IRRIGATION = "irrigation"
    SOIL = "soil"
    DEFAULT = "default"


# ============================================================
# RAW PATTERNS (category -> language -> regex sources)
# ============================================================

_INTENT_PATTERNS: Dict[IntentCategory, Dict[str, List[str]]] = {

    # --- DATE / TIME ---
    IntentCategory.DATE_TIME: {
        "en": [
            r"what is today|what is the date|current date|today's date|what day|which date",
            r"today|tomorrow|yesterday|this week|this month|this year",
            r"time|date|day|month|year",
        ],
        "hi": [
            r"आज की तारीख|आज क्या तारीख|आज का दिन|तारीख क्या|कौन सा दिन",
            r"आज|कल|परसों|इस सप्ताह|इस महीने|इस साल",
            r"समय|तारीख|दिन|महीना|साल",
        ],
        "ta": [
            r"இன்றைய தேதி|என்ன தேதி|எந்த நாள்|இன்று",
            r"நேரம்|தேதி|நாள்|மாதம்|வருடம்",
        ],
        "kn": [
            r"ಇಂದಿನ ದಿನಾಂಕ|ಇಂದು ಯಾವ ದಿನ|ಇಂದು",
            r"ಸಮಯ|ದಿನಾಂಕ|ದಿನ|ತಿಂಗಳು|ವರ್ಷ",
        ],
        "mr": [
            r"आजची तारीख|आज कोणता दिवस|आज",
            r"वेळ|तारीख|दिवस|महिना|वर्ष",
        ],
        "te": [
            r"ఈ రోజు|ఈరోజు|నేటి తేదీ|ఏ రోజు",
            r"సమయం|తేదీ|నెల|సంవత్సరం",
        ],
        "bn": [
            r"আজকের তারিখ|আজ কি বার|আজ",
            r"সময়|তারিখ|মাস|বছর",
        ],
        "gu": [
            r"આજની તારીખ|આજે કયો દિવસ|આજે",
            r"સમય|તારીખ|મહિનો|વર્ષ",
        ],
        "ml": [
            r"ഇന്നത്തെ തീയതി|ഇന്ന്",
            r"സമയം|തീയതി|മാസം|വർഷം",
        ],
        "pa": [
            r"ਅੱਜ ਦੀ ਤਾਰੀਖ|ਅੱਜ",
            r"ਸਮਾਂ|ਤਾਰੀਖ|ਮਹੀਨਾ|ਸਾਲ",
        ],
        "od": [
            r"ଆଜିର ତାରିଖ|ଆଜି",
            r"ସମୟ|ତାରିଖ|ମାସ|ବର୍ଷ",
        ],
    },

    # --- FACTUAL ---
    IntentCategory.FACTUAL: {
        "en": [
            r"what is|tell me about|explain|define|information|history|meaning|describe",
            r"who invented|when was|where is|which crop|how many types",
            r"facts about|details of|overview of",
        ],
        "hi": [
            r"क्या है|बताओ|समझाओ|परिभाषा|जानकारी|इतिहास|अर्थ",
            r"कौन|कब|कहाँ|कितने प्रकार",
        ],
        "ta": [
            r"என்ன|சொல்லுங்கள்|விளக்கம்|வரையறை|தகவல்|வரலாறு",
            r"எங்கே|எப்போது|யார்|எத்தனை வகை",
        ],
        "kn": [
            r"ಏನು|ತಿಳಿಸಿ|ವಿವರಿಸಿ|ವ್ಯಾಖ್ಯೆ|ಮಾಹಿತಿ|ಇತಿಹಾಸ",
            r"ಯಾರು|ಯಾವಾಗ|ಎಲ್ಲಿ|ಎಷ್ಟು ವಿಧ",
        ],
        "mr": [r"काय आहे|सांगा|समजावून सांगा|माहिती|इतिहास"],
        "te": [r"ఏమిటి|చెప్పండి|వివరించండి|సమాచారం|చరిత్ర"],
        "bn": [r"কি|বলো|ব্যাখ্যা|তথ্য|ইতিহাস"],
        "gu": [r"શું છે|કહો|સમજાવો|માહિતી|ઇતિહાસ"],
    },

    # --- CALCULATION ---
    IntentCategory.CALCULATION: {
        "en": [
            r"calculate|compute|estimate|budget|cost|price|profit|loss|margin|expense",
            r"how much|quantity|measurement|area|yield per|fertilizer amount|seed rate",
            r"per acre|per hectare|how many bags|total cost",
        ],
        "hi": [
            r"गणना|हिसाब|अनुमान|बजट|लागत|मूल्य|लाभ|हानि|खर्च",
            r"कितना|मात्रा|माप|क्षेत्रफल|उपज|खाद की मात्रा",
            r"प्रति एकड़|प्रति हेक्टेयर|कितने बोरे",
        ],
        "ta": [
            r"கணக்கிடு|மதிப்பீடு|பட்ஜெட்|விலை|லாபம்|நஷ்டம்|செலவு",
            r"எவ்வளவு|அளவு|பரப்பளவு|விளைச்சல்|உரம்",
            r"ஏக்கருக்கு|ஹெக்டேருக்கு|எத்தனை பைகள்",
        ],
        "kn": [
            r"ಲೆಕ್ಕ|ಅಂದಾಜು|ಬಜೆಟ್|ಬೆಲೆ|ಲಾಭ|ನಷ್ಟ|ವೆಚ್ಚ",
            r"ಎಷ್ಟು|ಪ್ರಮಾಣ|ಅಳತೆ|ವಿಸ್ತೀರ್ಣ|ಇಳುವರಿ",
            r"ಎಕರೆಗೆ|ಹೆಕ್ಟೇರಿಗೆ|ಎಷ್ಟು ಚೀಲಗಳು",
        ],
        "mr": [
            r"मोजणी|अंदाज|खर्च|किंमत|नफा|तोटा",
            r"किती|प्रमाण|क्षेत्र|उत्पन्न",
        ],
    },

    # --- REASONING ---
    IntentCategory.REASONING: {
        "en": [
            r"why|reason|cause|effect|because|due to|consequence|result|impact",
            r"should i|better|worse|compare|difference|versus|vs|between|choice",
            r"best|optimal|recommend|suggest|advice|guidance|opinion|which one",
            r"pros and cons|advantages|disadvantages|benefits|drawbacks",
        ],
        "hi": [
            r"क्यों|कारण|प्रभाव|परिणाम|वजह से",
            r"क्या मुझे चाहिए|बेहतर|खराब|तुलना|अंतर|बनाम",
            r"सबसे अच्छा|सिफारिश|सलाह|राय|कौन सा",
            r"फायदे|नुकसान|लाभ",
        ],
        "ta": [
            r"ஏன்|காரணம்|விளைவு|பாதிப்பு|முடிவு",
            r"நான் செய்ய வேண்டுமா|சிறந்த|மோசமான|ஒப்பிடு|வித்தியாசம்",
            r"பரிந்துரை|ஆலோசனை|கருத்து|எது",
            r"நன்மை|தீமை|பலன்கள்",
        ],
        "kn": [
            r"ಯಾಕೆ|ಕಾರಣ|ಪರಿಣಾಮ|ಫಲಿತಾಂಶ",
            r"ನಾನು ಮಾಡಬೇಕೆ|ಉತ್ತಮ|ಕೆಟ್ಟ|ಹೋಲಿಕೆ|ವ್ಯತ್ಯಾಸ",
            r"ಸೂಕ್ತ|ಶಿಫಾರಸು|ಸಲಹೆ|ಅಭಿಪ್ರಾಯ",
            r"ಅನುಕೂಲ|ಅನನುಕೂಲ",
        ],
    },

    # --- DISEASE ---
    IntentCategory.DISEASE: {
        "en": [
            r"disease|infection|pest|fungus|bacteria|virus|pathogen|parasite|insect",
            r"sick|dying|yellow|brown|spots|wilting|rot|blight|mildew|damage",
            r"cure|treatment|remedy|medicine|spray|pesticide|fungicide|control",
            r"leaf curl|powdery mildew|rust|wilt|borer|aphid|whitefly",
        ],
        "hi": [
            r"बीमारी|रोग|संक्रमण|कीट|फफूंद|जीवाणु|वायरस",
            r"बीमार|मर रहा|पीला|धब्बे|मुरझाना|सड़न",
            r"इलाज|उपचार|दवा|स्प्रे|कीटनाशक|फफूंदनाशक",
            r"पत्ती रोग|सफेद चूर्ण|रतुआ|मुरझा रोग",
        ],
        "ta": [
            r"நோய்|தொற்று|பூச்சி|பூஞ்சை|பாக்டீரியா|வைரஸ்",
            r"நோய்வாய்ப்பட்ட|இறந்து|மஞ்சள்|புள்ளிகள்|வாடுதல்|அழுகல்",
            r"சிகிச்சை|மருந்து|தெளிப்பு|பூச்சிக்கொல்லி|பூஞ்சைக்கொல்லி",
            r"இலை சுருள்|வெள்ளை பொடி|துரு|வாடல்",
        ],
        "kn": [
            r"ರೋಗ|ಸೋಂಕು|ಕೀಟ|ಶಿಲೀಂಧ್ರ|ಬ್ಯಾಕ್ಟೀರಿಯಾ|ವೈರಸ್",
            r"ಅನಾರೋಗ್ಯ|ಸಾಯುತ್ತಿದೆ|ಹಳದಿ|ಕಲೆಗಳು|ಬಾಡುವಿಕೆ|ಕೊಳೆತ",
            r"ಚಿಕಿತ್ಸೆ|ಔಷಧ|ಸಿಂಪಡಿಸು|ಕೀಟನಾಶಕ|ಶಿಲೀಂಧ್ರನಾಶಕ",
            r"ಎಲೆ ಸುರುಳಿ|ಬಿಳಿ ಪುಡಿ|ತುಕ್ಕು|ಬಾಡುವಿಕೆ",
        ],
        "mr": [
            r"रोग|संसर्ग|किडा|बुरशी|जीवाणू|विषाणू",
            r"आजारी|मेलेले|पिवळे|डाग|कोमेजणे|कुजणे",
            r"उपचार|औषध|फवारणी|कीटकनाशक",
        ],
        "te": [r"వ్యాధి|తెగులు|పురుగు|శిలీంధ్రం|పురుగుమందు"],
        "bn": [r"রোগ|পোকা|ছত্রাক|কীটনাশক"],
        "gu": [r"રોગ|જીવાત|ફૂગ|જંતુનાશક"],
        "ml": [r"രോഗം|കീടം|കുമിൾ|കീടനാശിനി"],
        "pa": [r"ਬਿਮਾਰੀ|ਰੋਗ|ਕੀੜੇ|ਉੱਲੀ"],
        "od": [r"ରୋଗ|ପୋକ|କୀଟନାଶକ"],
    },

    # --- SEASONAL ---
    IntentCategory.SEASONAL: {
        "en": [
            r"season|monsoon|winter|summer|rain|drought|flood|weather|climate",
            r"when to plant|when to harvest|best time|sowing time|planting season",
            r"kharif|rabi|zaid|cropping season",
        ],
        "hi": [
            r"मौसम|बारिश|सर्दी|गर्मी|सूखा|बाढ़|जलवायु",
            r"कब लगाएं|कब काटें|सबसे अच्छा समय|बुवाई का समय",
            r"खरीफ|रबी|जायद|फसल का मौसम",
        ],
        "ta": [
            r"பருவம்|மழை|குளிர்|வெயில்|வறட்சி|வெள்ளம்|காலநிலை",
            r"எப்போது நடவு|எப்போது அறுவடை|சிறந்த நேரம்|விதைப்பு காலம்",
            r"கரீஃப்|ரபி|சைத்|பருவம்",
        ],
        "kn": [
            r"ಋತು|ಮಳೆ|ಚಳಿಗಾಲ|ಬೇಸಿಗೆ|ಬರ|ಪ್ರವಾಹ|ಹವಾಮಾನ",
            r"ಯಾವಾಗ ನೆಡಬೇಕು|ಯಾವಾಗ ಕೊಯ್ಲು|ಉತ್ತಮ ಸಮಯ",
            r"ಖರೀಫ್|ರಬಿ|ಜಾಯ್ದ್|ಬೆಳೆ ಋತು",
        ],
        "mr": [
            r"हंगाम|पाऊस|हिवाळा|उन्हाळा|दुष्काळ|पूर|हवामान",
            r"कधी लावावे|कधी कापावे|चांगला वेळ|पेरणी",
        ],
    },

    # --- EMERGENCY ---
    IntentCategory.EMERGENCY: {
        "en": [
            r"urgent|emergency|dying|critical|immediately|quickly|asap|help|sos|fast",
            r"right now|very urgent|desperate|crisis",
        ],
        "hi": [
            r"तुरंत|आपातकाल|मर रहा|तत्काल|जल्दी|मदद|एस ओ एस",
            r"अभी|बहुत जरूरी|संकट",
        ],
        "ta": [
            r"உடனடியாக|அவசரம்|இறந்து கொண்டிருக்கிறது|விரைவாக|உதவி",
            r"இப்போதே|மிக அவசரம்|நெருக்கடி",
        ],
        "kn": [
            r"ತುರತು|ತುರ್ತು|ಸಾಯುತ್ತಿದೆ|ತಕ್ಷಣ|ಬೇಗನೆ|ಸಹಾಯ",
            r"ಈಗಲೇ|ತುಂಬಾ ತುರ್ತು|ಸಂಕಷ್ಟ",
        ],
        "mr": [r"तात्काळ|आणीबाणी|मेलेले|लगेच|जलद|मदत"],
        "te": [r"తక్షణం|అత్యవసరం|చనిపోతున్న|త్వరగా|సహాయం"],
        "bn": [r"জরুরি|এখনই|তাড়াতাড়ি|সাহায্য|মরে যাচ্ছে"],
        "gu": [r"તાત્કાલિક|ઇમરજન્સી|જલ્દી|મદદ|મરી રહ્યો"],
        "ml": [r"അടിയന്തിര|ഉടനെ|സഹായം"],
        "pa": [r"ਤੁਰੰਤ|ਐਮਰਜੈਂਸੀ|ਮਦਦ"],
        "od": [r"ଜରୁରୀ|ତୁରନ୍ତ|ସାହାଯ୍ୟ"],
    },

    # --- MARKET ---
    IntentCategory.MARKET: {
        "en": [
            r"price|market|sell|buy|mandi|rate|selling|purchase|trading|dealer",
            r"market price|wholesale|retail|profit margin|commission",
        ],
        "hi": [
            r"मूल्य|बाज़ार|बेचना|खरीदना|मंडी|दर|विक्रय|खरीद|व्यापार",
            r"बाजार मूल्य|थोक|खुदरा|लाभ मार्जिन",
        ],
        "ta": [
            r"விலை|சந்தை|விற்க|வாங்க|மண்டி|விலை நிர்ணயம்|வியாபாரம்",
            r"சந்தை விலை|மொத்த|சில்லறை",
        ],
        "kn": [
            r"ಬೆಲೆ|ಮಾರುಕಟ್ಟೆ|ಮಾರಾಟ|ಖರೀದಿ|ಮಂಡಿ|ದರ|ವ್ಯಾಪಾರ",
            r"ಮಾರುಕಟ್ಟೆ ಬೆಲೆ|ಸಗಟು|ಚಿಲ್ಲರೆ",
        ],
        "mr": [r"किंमत|बाजार|विकणे|खरेदी|मंडई|दर|व्यापार"],
    },

    # --- GOVERNMENT SCHEMES ---
    IntentCategory.SCHEME: {
        "en": [
            r"government scheme|subsidy|loan|insurance|yojana|pradhan mantri",
            r"pm kisan|fasal bima|kcc|kisan credit card|mudra|nabard",
            r"agricultural loan|crop insurance|minimum support price|msp",
        ],
        "hi": [
            r"सरकारी योजना|सब्सिडी|ऋण|बीमा|योजना|प्रधानमंत्री",
            r"पीएम किसान|फसल बीमा|केसीसी|किसान क्रेडिट कार्ड",
            r"कृषि ऋण|फसल बीमा|न्यूनतम समर्थन मूल्य|एमएसपी",
        ],
        "ta": [
            r"அரசு திட்டம்|மானியம்|கடன்|காப்பீடு|யோஜனா",
            r"பிஎம் கிசான்|பயிர் காப்பீடு|கேசிசி|விவசாய கடன்",
        ],
        "kn": [
            r"ಸರ್ಕಾರಿ ಯೋಜನೆ|ಸಬ್ಸಿಡಿ|ಸಾಲ|ವಿಮೆ|ಯೋಜನ",
            r"ಪಿಎಂ ಕಿಸಾನ್|ಬೆಳೆ ವಿಮೆ|ಕೆಸಿಸಿ|ಕೃಷಿ ಸಾಲ",
        ],
        "mr": [
            r"सरकारी योजना|अनुदान|कर्ज|विमा|योजना",
            r"पीएम किसान|पीक विमा|केसीसी|शेती कर्ज",
        ],
        "te": [r"ప్రభుత్వ పథకం|పథకం|సబ్సిడీ|రుణం|బీమా"],
        "bn": [r"সরকারি প্রকল্প|প্রকল্প|ভর্তুকি|ঋণ|বিমা"],
        "gu": [r"સરકારી યોજના|યોજના|સબસિડી|લોન|વીમો"],
    },

    # --- IRRIGATION ---
    IntentCategory.IRRIGATION: {
        "en": [
            r"irrigation|water|drip|sprinkler|pump|well|borewell|canal",
            r"watering|moisture|water requirement|irrigation schedule",
        ],
        "hi": [
            r"सिंचाई|पानी|ड्रिप|स्प्रिंकलर|पंप|कुआं|बोरवेल|नहर",
            r"पानी देना|नमी|पानी की आवश्यकता|सिंचाई कार्यक्रम",
        ],
        "ta": [
            r"நீர்ப்பாசனம்|தண்ணீர்|சொட்டு|தெளிப்பான்|பம்ப்|கிணறு|கால்வாய்",
            r"நீர்|ஈரப்பதம்|நீர் தேவை",
        ],
        "kn": [
            r"ನೀರಾವರಿ|ನೀರು|ಡ್ರಿಪ್|ಸ್ಪ್ರಿಂಕ್ಲರ್|ಪಂಪ್|ಬಾವಿ|ಕಾಲುವೆ",
            r"ನೀರು ಹಾಕುವುದು|ತೇವ|ನೀರಿನ ಅವಶ್ಯಕತೆ",
        ],
    },

    # --- SOIL ---
    IntentCategory.SOIL: {
        "en": [
            r"soil|fertility|nutrients|nitrogen|phosphorus|potassium|npk",
            r"soil testing|ph level|organic matter|compost|manure",
        ],
        "hi": [
            r"मिट्टी|उर्वरता|पोषक तत्व|नाइट्रोजन|फास्फोरस|पोटैशियम|एनपीके",
            r"मिट्टी परीक्षण|पीएच स्तर|जैविक खाद|कम्पोस्ट|गोबर",
        ],
        "ta": [
            r"மண்|வளம்|ஊட்டச்சத்து|நைட்ரஜன்|பாஸ்பரஸ்|பொட்டாசியம்",
            r"மண் சோதனை|பிஎச்|இயற்கை உரம்|தொழு உரம்",
        ],
        "kn": [
            r"ಮಣ್ಣು|ಫಲವತ್ತತೆ|ಪೋಷಕಾಂಶ|ನೈಟ್ರೋಜನ್|ಫಾಸ್ಫರಸ್|ಪೊಟ್ಯಾಸಿಯಮ್",
            r"ಮಣ್ಣು ಪರೀಕ್ಷೆ|ಪಿಎಚ್|ಸಾವಯವ ಗೊಬ್ಬರ",
        ],
    },
}


# ============================================================
# PUBLIC API
# ============================================================

def load_intent_patterns() -> Dict[IntentCategory, Dict[str, List[str]]]:
    """
    Raw pattern table, grouped by category and language code.

    Returns a fresh copy; the module table itself is never handed out.
    """
    return {
        category: {lang: list(sources) for lang, sources in by_lang.items()}
        for category, by_lang in _INTENT_PATTERNS.items()
    }


def compile_patterns(
    patterns: Dict[IntentCategory, Dict[str, List[str]]],
) -> Mapping[IntentCategory, Tuple[Pattern[str], ...]]:
    """
    Flatten the per-language lists and compile every source once.

    Language order inside a category is kept, but it carries no meaning:
    a category matches if ANY of its patterns matches.
    """
    compiled = {}

    for category, by_lang in patterns.items():
        compiled[category] = tuple(
            re.compile(source, re.IGNORECASE)
            for sources in by_lang.values()
            for source in sources
        )

    return MappingProxyType(compiled)


# built once at import, shared read-only by every request
COMPILED_PATTERNS = compile_patterns(_INTENT_PATTERNS)


def matches(category: IntentCategory, text: str) -> bool:
    return any(p.search(text) for p in COMPILED_PATTERNS.get(category, ()))
