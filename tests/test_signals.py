import dataclasses

import pytest

from phishcheck.detection.signals import (
    SIGNALS,
    count_weird_chars,
    evaluate_signals,
    has_typos_like_patterns,
    has_weird_format,
    normalize_for_check,
)


def _fired(text, links=()):
    return {k for k, v in evaluate_signals(text, list(links)).items() if v}


def test_registry_order_and_weights():
    assert [(s.key, s.weight) for s in SIGNALS] == [
        ("urgency", 14), ("credential", 18), ("money", 16), ("impersonation", 14),
        ("shortlink", 12), ("link_mismatch", 16), ("threat", 12), ("weird_format", 8),
        ("typos", 10), ("attachments", 10),
    ]


def test_registry_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        SIGNALS[0].weight = 100


def test_evaluate_returns_every_key_in_registry_order():
    assert list(evaluate_signals("", [])) == [s.key for s in SIGNALS]


def test_normalize():
    assert normalize_for_check("  Hello\n\tWORLD  ") == "hello world"


def test_weird_chars_and_format():
    assert count_weird_chars("a!b@c# d") == 3
    assert has_weird_format("THIS IS YOUR FINAL WARNING FROM THE SECURITY DEPARTMENT")
    assert has_weird_format("$$$ " * 10)
    assert not has_weird_format("SHORT CAPS")
    assert not has_weird_format("")


def test_typo_patterns():
    assert has_typos_like_patterns("Wait!!!")
    assert has_typos_like_patterns("Login to PayPal")
    assert has_typos_like_patterns("your acount needs verifcation")
    assert not has_typos_like_patterns("Hello there.")


@pytest.mark.parametrize("text,key", [
    ("Please respond within 24 hours", "urgency"),
    ("Act   NOW before it is too late", "urgency"),
    ("Send us the verification code", "credential"),
    ("Buy a gift card and send the numbers", "money"),
    ("Message from your bank", "impersonation"),
    ("Your account has been suspended", "threat"),
    ("or your account will be closed", "threat"),
    ("Please open the attachment", "attachments"),
    ("see document attached", "attachments"),
])
def test_phrase_signals(text, key):
    assert key in _fired(text)


def test_link_signals_use_extracted_links():
    assert _fired("x", ["http://bit.ly/abc"]) == {"shortlink"}
    assert _fired("x", ["http://10.0.0.1/login"]) == {"link_mismatch"}
    assert _fired("x", ["example.com"]) == set()


def test_plain_message_fires_nothing():
    assert _fired("Hi, lunch tomorrow at noon?") == set()
