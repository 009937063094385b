"""Unit tests for the scripted FAQ responder."""

import pytest

from src.core.faq import (
    FAQ_RESPONSES,
    GREETINGS,
    FAQReply,
    match_topic,
    normalize_language,
    respond,
    greeting,
)


class TestMatchTopic:
    """Tests for match_topic()."""

    @pytest.mark.parametrize("message,topic", [
        ("How do I use the map?", "map"),
        ("What to do in an EMERGENCY", "emergency"),
        ("where is the nearest shelter", "shelter"),
        ("what supplies should I pack", "supplies"),
        ("is there medical help", "medical"),
        ("weather colors?", "weather"),
        ("tell me about this app", "about"),
        ("hello", "default"),
    ])
    def test_english_keywords(self, message, topic):
        assert match_topic(message) == topic

    def test_hindi_keywords(self):
        assert match_topic("नक्शा कैसे देखें") == "map"
        assert match_topic("मौसम की जानकारी") == "weather"

    def test_first_topic_wins(self):
        """'map' is checked before 'shelter'."""
        assert match_topic("show the shelter on the map") == "map"


class TestRespond:
    """Tests for respond()."""

    def test_english_reply(self):
        reply = respond("emergency")
        assert reply == FAQReply("emergency", FAQ_RESPONSES["en"]["emergency"])

    def test_hindi_reply_for_english_keyword(self):
        """Reply language is chosen independently of the keyword language."""
        reply = respond("shelter", "hi")
        assert reply.text == FAQ_RESPONSES["hi"]["shelter"]

    def test_unknown_question_gets_default(self):
        reply = respond("what is the meaning of life")
        assert reply.topic == "default"
        assert reply.text.startswith("I'm sorry")

    @pytest.mark.parametrize("message", ["", "   ", None])
    def test_blank_message(self, message):
        assert respond(message) is None

    def test_unsupported_language_falls_back_to_english(self):
        assert respond("map", "fr").text == FAQ_RESPONSES["en"]["map"]


class TestLanguages:
    """Tests for language handling."""

    def test_normalize(self):
        assert normalize_language("HI") == "hi"
        assert normalize_language(None) == "en"
        assert normalize_language("de") == "en"

    def test_greeting(self):
        assert greeting() == GREETINGS["en"]
        assert greeting("hi").startswith("नमस्ते")

    def test_every_topic_has_both_languages(self):
        assert FAQ_RESPONSES["en"].keys() == FAQ_RESPONSES["hi"].keys()
