from __future__ import annotations

import re
import string
from dataclasses import dataclass
from typing import Iterable, List

import tldextract

from ..keywords import MAX_HOST_HYPHENS, MAX_HOST_LABELS, SHORTENER_DOMAINS

# http(s) + wszystko do spacji / nawiasu
URL_RE = re.compile(r"\bhttps?://[^\s)]+", re.I)
# gołe domeny: etykiety DNS (max 63 znaki, max 127 poziomów) + TLD + opcjonalna ścieżka
BARE_RE = re.compile(r"\b(?:[a-z0-9-]{1,63}\.){1,127}[a-z]{2,}(?:/[^\s)]*)?", re.I)
SCHEME_RE = re.compile(r"^https?://", re.I)
IPV4_RE = re.compile(r"\d{1,3}(?:\.\d{1,3}){3}")

_TRAILING_PUNCT = ".,;:!?'\""
_DOMAIN_CHARS = frozenset(string.ascii_letters + string.digits + ".-")

# bundled PSL snapshot only, never fetched
_tldx = tldextract.TLDExtract(suffix_list_urls=())


@dataclass(frozen=True)
class LinkReport:
    url: str
    host: str
    registered_domain: str
    shortener: bool
    suspicious: bool


def _trim(match: str) -> str:
    link = match.rstrip(_TRAILING_PUNCT)
    if link.lower().endswith("://"):
        return ""
    return link


def _bare_matches(text: str):
    # etykieta > 63 znaki: dopnij początek tokenu zamiast zwracać sam ogon
    last_end = 0
    for m in BARE_RE.finditer(text):
        start = m.start()
        while start > last_end and text[start - 1] in _DOMAIN_CHARS:
            start -= 1
        last_end = m.end()
        yield text[start:m.end()].lstrip(".-")


def extract_links(text: str) -> List[str]:
    """
    Links found in `text`: http(s) URLs first, then bare domains.

    A bare domain that is already part of a captured URL is skipped, so
    `example.com` is not counted next to `https://example.com/page`.
    """
    if not text or not text.strip():
        return []

    urls = list(dict.fromkeys(u for u in map(_trim, URL_RE.findall(text)) if u))
    links = list(urls)
    seen = set(links)
    for m in _bare_matches(text):
        bare = _trim(m)
        if not bare or bare in seen:
            continue
        if any(bare in u for u in urls):
            continue
        seen.add(bare)
        links.append(bare)
    return links


def link_host(link: str) -> str:
    """Lowercased host part of a link (userinfo and port kept)."""
    rest = SCHEME_RE.sub("", link.strip().lower())
    for sep in ("/", "?", "#"):
        rest = rest.split(sep, 1)[0]
    return rest


def _bare_host(host: str) -> str:
    return host.rsplit("@", 1)[-1].split(":", 1)[0]


def is_shortener(link: str) -> bool:
    host = _bare_host(link_host(link))
    return any(d in host for d in SHORTENER_DOMAINS)


def domain_looks_suspicious(link: str) -> bool:
    # @ w URL, punycode, IP zamiast domeny, długi łańcuch subdomen, dużo myślników
    u = link.lower()
    if "@" in u:
        return True
    if "xn--" in u:
        return True
    host = link_host(link)
    if IPV4_RE.fullmatch(_bare_host(host)):
        return True
    if len(host.split(".")) >= MAX_HOST_LABELS:
        return True
    if host.count("-") >= MAX_HOST_HYPHENS:
        return True
    return False


def registered_domain(link: str) -> str:
    ext = _tldx(_bare_host(link_host(link)))
    if ext.domain and ext.suffix:
        return f"{ext.domain}.{ext.suffix}"
    return ext.domain or ""


def describe_links(links: Iterable[str]) -> List[LinkReport]:
    out: List[LinkReport] = []
    for link in links:
        out.append(LinkReport(
            url=link,
            host=link_host(link),
            registered_domain=registered_domain(link),
            shortener=is_shortener(link),
            suspicious=domain_looks_suspicious(link),
        ))
    return out
