"""Scripted FAQ responder - Pure functions.

This module answers common questions with canned replies chosen by
keyword. Topics are checked in a fixed order and the first topic whose
keyword appears in the message wins. All functions are pure.
"""

from dataclasses import dataclass


DEFAULT_LANGUAGE = "en"
SUPPORTED_LANGUAGES = ("en", "hi")
DEFAULT_TOPIC = "default"

# (topic, English keyword, Hindi keyword), in match order
TOPIC_KEYWORDS: tuple[tuple[str, str, str], ...] = (
    ("map", "map", "नक्शा"),
    ("emergency", "emergency", "आपातकाल"),
    ("shelter", "shelter", "आश्रय"),
    ("supplies", "supplies", "सामग्री"),
    ("medical", "medical", "चिकित्सा"),
    ("weather", "weather", "मौसम"),
    ("about", "about", "बारे में"),
)

GREETINGS: dict[str, str] = {
    "en": (
        "Hello! I'm here to help you with information about our disaster "
        "response platform. Ask me anything about emergencies, shelters, or "
        "how to use the map."
    ),
    "hi": (
        "नमस्ते! मैं आपको हमारे आपदा प्रतिक्रिया प्लेटफॉर्म के बारे में जानकारी देने "
        "में मदद करूंगा/करूंगी। आप मुझसे आपातकाल, आश्रय, या नक्शे के उपयोग के बारे "
        "में कुछ भी पूछ सकते हैं।"
    ),
}

FAQ_RESPONSES: dict[str, dict[str, str]] = {
    "en": {
        "default": (
            "I'm sorry, I don't understand that question. Please try asking "
            "something about emergencies, shelters, medical services, or using "
            "the map."
        ),
        "map": (
            "The map shows all disaster response centers. Red icons are health "
            "centers, and yellow icons are shelters. Click on any marker to see "
            "details. You can also search for centers using the search bar at "
            "the top."
        ),
        "emergency": (
            "In case of emergency: 1. Stay calm 2. Call emergency services "
            "3. Follow evacuation instructions if given 4. Use our map to find "
            "the nearest shelter or health center 5. Keep emergency contacts handy"
        ),
        "shelter": (
            "To find the nearest shelter: 1. Allow location access in the app "
            "2. Look for yellow triangle markers on the map 3. Click markers to "
            "see capacity and contact info 4. Use the search bar to filter by "
            "location"
        ),
        "supplies": (
            "Essential emergency supplies: 1. Water (3-day supply) "
            "2. Non-perishable food 3. First aid kit 4. Flashlight and batteries "
            "5. Important documents 6. Basic medications 7. Mobile phone and "
            "charger 8. Battery-powered radio"
        ),
        "medical": (
            "Medical services available: 1. Emergency first aid 2. Basic health "
            "checkups 3. Medicine distribution 4. Ambulance services. Red heart "
            "icons on the map show medical centers. Click them for contact "
            "details."
        ),
        "weather": (
            "Weather warnings are color-coded: Red = Severe risk (take immediate "
            "action), Yellow = Moderate risk (stay alert), Blue = Minor risk "
            "(monitor conditions). The app shows current conditions and forecasts."
        ),
        "about": (
            "This is a disaster response platform that helps you: 1. Find nearby "
            "shelters and medical centers 2. Get real-time weather warnings "
            "3. Access emergency information 4. Find contact details for help "
            "5. Track facility capacity"
        ),
    },
    "hi": {
        "default": (
            "क्षमा करें, मैं यह प्रश्न नहीं समझ पा रहा/रही हूं। कृपया आपातकाल, आश्रय, "
            "चिकित्सा सेवाओं, या नक्शे के उपयोग के बारे में पूछें।"
        ),
        "map": (
            "नक्शे पर सभी आपदा प्रतिक्रिया केंद्र दिखाए गए हैं। लाल चिह्न स्वास्थ्य केंद्र "
            "हैं, और पीले चिह्न आश्रय हैं। विवरण देखने के लिए किसी भी चिह्न पर क्लिक करें। "
            "आप ऊपर की खोज पट्टी का उपयोग करके केंद्रों को खोज भी सकते हैं।"
        ),
        "emergency": (
            "आपातकाल में: 1. शांत रहें 2. आपातकालीन सेवाओं को कॉल करें 3. निकासी "
            "निर्देशों का पालन करें 4. निकटतम आश्रय या स्वास्थ्य केंद्र खोजने के लिए "
            "हमारा नक्शा उपयोग करें 5. आपातकालीन संपर्क तैयार रखें"
        ),
        "shelter": (
            "निकटतम आश्रय खोजने के लिए: 1. ऐप में लोकेशन एक्सेस की अनुमति दें 2. नक्शे "
            "पर पीले त्रिकोण चिह्न देखें 3. क्षमता और संपर्क जानकारी देखने के लिए चिह्नों "
            "पर क्लिक करें 4. स्थान के अनुसार फ़िल्टर करने के लिए खोज बार का उपयोग करें"
        ),
        "supplies": (
            "आवश्यक आपातकालीन सामग्री: 1. पानी (3 दिन की आपूर्ति) 2. लंबे समय तक चलने "
            "वाला भोजन 3. प्राथमिक चिकित्सा किट 4. टॉर्च और बैटरी 5. महत्वपूर्ण दस्तावेज "
            "6. बुनियादी दवाएं 7. मोबाइल फोन और चार्जर 8. बैटरी से चलने वाला रेडियो"
        ),
        "medical": (
            "उपलब्ध चिकित्सा सेवाएं: 1. आपातकालीन प्राथमिक चिकित्सा 2. बुनियादी स्वास्थ्य "
            "जांच 3. दवा वितरण 4. एम्बुलेंस सेवाएं। नक्शे पर लाल दिल के चिह्न चिकित्सा "
            "केंद्र दिखाते हैं। संपर्क विवरण के लिए उन पर क्लिक करें।"
        ),
        "weather": (
            "मौसम चेतावनियां रंग-कोडित हैं: लाल = गंभीर जोखिम (तुरंत कार्रवाई करें), "
            "पीला = मध्यम जोखिम (सतर्क रहें), नीला = मामूली जोखिम (स्थितियों पर नज़र "
            "रखें)। ऐप वर्तमान स्थितियां और पूर्वानुमान दिखाता है।"
        ),
        "about": (
            "यह एक आपदा प्रतिक्रिया प्लेटफॉर्म है जो आपकी मदद करता है: 1. आस-पास के "
            "आश्रय और चिकित्सा केंद्र खोजने में 2. रीयल-टाइम मौसम चेतावनियां प्राप्त "
            "करने में 3. आपातकालीन जानकारी तक पहुंचने में 4. मदद के लिए संपर्क विवरण "
            "खोजने में 5. सुविधा क्षमता की जानकारी पाने में"
        ),
    },
}


@dataclass(frozen=True)
class FAQReply:
    """A canned reply.

    Attributes:
        topic: Matched topic, or 'default' when nothing matched
        text: Reply text in the requested language
    """
    topic: str
    text: str


def normalize_language(language: str | None) -> str:
    """Map a requested language to a supported one (English fallback)."""
    if language and language.lower() in SUPPORTED_LANGUAGES:
        return language.lower()
    return DEFAULT_LANGUAGE


def match_topic(message: str) -> str:
    """Find the first topic whose keyword appears in the message.

    Pure function. Keywords of both languages are checked regardless of
    the reply language.
    """
    text = message.strip().lower()
    for topic, english, hindi in TOPIC_KEYWORDS:
        if english in text or hindi in text:
            return topic
    return DEFAULT_TOPIC


def respond(message: str, language: str | None = DEFAULT_LANGUAGE) -> FAQReply | None:
    """Answer a user question.

    Pure function.

    Args:
        message: Question typed by the user
        language: 'en' or 'hi'; anything else falls back to English

    Returns:
        FAQReply, or None for a blank message
    """
    if not message or not message.strip():
        return None

    topic = match_topic(message)
    lang = normalize_language(language)
    return FAQReply(topic=topic, text=FAQ_RESPONSES[lang][topic])


def greeting(language: str | None = DEFAULT_LANGUAGE) -> str:
    """Opening message shown when the chat is opened."""
    return GREETINGS[normalize_language(language)]
