from __future__ import annotations

# phrase patterns per signal (matched case-insensitively on normalized text)
SIGNAL_PATTERNS = {
    # presja czasu
    "urgency": r"\b(urgent|immediately|asap|act now|final notice|limited time|today only"
               r"|within \d+ (?:min|mins|minutes|hour|hours))\b",

    # hasła / kody / logowanie
    "credential": r"\b(password|passcode|verification code|2fa|otp|security code|login|sign in"
                  r"|confirm your identity)\b",

    # płatności / karty podarunkowe / krypto
    "money": r"\b(gift card|wire|bitcoin|crypto|payment|pay now|refund|invoice|cash app|venmo|zelle)\b",

    # podszycia pod marki / urzędy / wsparcie
    "impersonation": r"\b(bank|irs|apple|microsoft|google|amazon|paypal|usps|fedex|dhl"
                     r"|support team|help desk)\b",

    # groźby: blokada konta / konsekwencje prawne
    "threat": r"\b(account (?:(?:will be|has been|is|was|may be) )?(?:locked|suspended|disabled|closed)"
              r"|legal action|warrant|arrest|penalty|lawsuit)\b",

    # załączniki / pobieranie plików
    "attachments": r"\b(open the attachment|attached|pdf attached|download (?:the )?file"
                   r"|docu?ment attached)\b",
}

# znane literówki z kampanii phishingowych
MISSPELLINGS = ["verifcation", "updte", "acount", "passw0rd", "securrity", "paymnt"]

# skracacze linków
SHORTENER_DOMAINS = (
    "bit.ly", "tinyurl.com", "t.co", "goo.gl", "ow.ly", "is.gd", "buff.ly", "cutt.ly", "rebrand.ly",
    "rb.gy", "shorturl.at",
)

# progi formatowania
WEIRD_CHARS_MAX = 25
ALL_CAPS_MIN_LEN = 40

# progi linków w hoście
MAX_HOST_LABELS = 4
MAX_HOST_HYPHENS = 3

# bonusy (min. liczba linków / punkty / etykieta)
MULTI_LINKS_BONUS = (2, 6, "Multiple links present")
MANY_LINKS_BONUS = (4, 6, "Many links present")
COMBO_BONUS = (1, 10, "Link + credential request combo")

NO_SIGNALS_REASON = "No strong phishing signals detected. Still verify independently."

DEFAULT_MIN_SCORE_MEDIUM = 40
DEFAULT_MIN_SCORE_HIGH = 75
