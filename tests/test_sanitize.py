from hubspot_form_action.pipeline.sanitize import sanitize_text, sanitize_url, validate_ip


def test_sanitize_text_strips_tags_and_control_chars():
    assert sanitize_text("<b>Contact</b> Us\x00\x07") == "Contact Us"


def test_sanitize_text_keeps_newlines_and_unicode():
    assert sanitize_text("Wir verarbeiten\nIhre Daten – danke") == "Wir verarbeiten\nIhre Daten – danke"


def test_sanitize_text_empty():
    assert sanitize_text(None) == ""
    assert sanitize_text("") == ""


def test_sanitize_url_drops_disallowed_characters():
    assert sanitize_url("https://site/contact us/é") == "https://site/contactus/"
    assert sanitize_url("https://site/?a=1&b=[2]#top") == "https://site/?a=1&b=[2]#top"


def test_validate_ip():
    assert validate_ip("203.0.113.9") == "203.0.113.9"
    assert validate_ip(" 2001:db8::1 ") == "2001:db8::1"
    assert validate_ip("testclient") is None
    assert validate_ip("") is None
    assert validate_ip(None) is None
