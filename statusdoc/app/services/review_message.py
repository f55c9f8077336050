"""
Review message resolution.

Turns the free-text reason attached to a review into the explanation
printed on an in-review status document. Matching is a case-sensitive
substring test; the first matching rule wins.
"""

from typing import Optional, Tuple

BASE_REVIEW_MESSAGE = "Your application has been placed in review"

ADDRESS_SUFFIX = " pending outstanding address verification for FICA purposes."
BANK_SUFFIX = " pending outstanding bank account verification."
SUSPICIOUS_SUFFIX = (
    " because of suspicious account behaviour. Please contact support ASAP."
)

# Ordered by priority: "address" beats "bank".
REVIEW_REASON_RULES: Tuple[Tuple[str, str], ...] = (
    ("address", ADDRESS_SUFFIX),
    ("bank", BANK_SUFFIX),
)


def resolve_review_message(reason: Optional[str]) -> str:
    """
    Return the review explanation for ``reason``.

    A missing or empty reason falls through to the suspicious-behaviour
    message.
    """
    text = reason or ""

    for keyword, suffix in REVIEW_REASON_RULES:
        if keyword in text:
            return BASE_REVIEW_MESSAGE + suffix

    return BASE_REVIEW_MESSAGE + SUSPICIOUS_SUFFIX
