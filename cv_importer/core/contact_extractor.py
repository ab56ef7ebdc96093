import re
from typing import List

from cv_importer.core.schemas import ContactInfo


EMAIL_RE = re.compile(r"[A-Za-z0-9._%+\-]+@[A-Za-z0-9.\-]+\.[A-Za-z]{2,}")
# Vietnamese numbers: +84 / 0084 / 0 prefix, then 9 digits (spaces allowed between digits)
PHONE_RE = re.compile(r"(?:(?:\+|00)84|0)(?:\s*\d){9}")
URL_RE = re.compile(r"https?://[^\s,)]+")
URL_TRAILING_PUNCT_RE = re.compile(r"[.,;:)]+$")


def clean_url(url: str) -> str:
    """Strip sentence punctuation glued to the end of a URL."""
    return URL_TRAILING_PUNCT_RE.sub("", url)


def find_urls(text: str) -> List[str]:
    return [clean_url(m.group(0)) for m in URL_RE.finditer(text)]


def extract_contact_info(text: str) -> ContactInfo:
    """
    Scan the whole document text for contact details.

    Email and phone: first match wins. URLs are classified by domain:
    linkedin.com and github.com fill their own slot (first one only), the first
    other URL becomes the website and later ones are ignored.
    """
    contact = ContactInfo()

    m = EMAIL_RE.search(text)
    if m:
        contact.email = m.group(0)

    m = PHONE_RE.search(text)
    if m:
        contact.phone = re.sub(r"\s", "", m.group(0))

    for url in find_urls(text):
        lowered = url.lower()
        if "linkedin.com" in lowered:
            if not contact.linkedin:
                contact.linkedin = url
        elif "github.com" in lowered:
            if not contact.github:
                contact.github = url
        elif not contact.website:
            contact.website = url

    return contact
