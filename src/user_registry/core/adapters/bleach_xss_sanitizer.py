"""XSS sanitizer backed by bleach."""

import bleach

from user_registry.core.contracts.sanitizers import XssSanitizer


class BleachXssSanitizer(XssSanitizer):
    """Strip every tag and attribute, keeping the text content.

    No markup is allowed through. Characters that are meaningful in HTML
    (``<``, ``&``) are escaped so the result is safe to render as-is.
    """

    def sanitize(self, text: str) -> str:
        if not text:
            return ""
        return bleach.clean(
            text,
            tags=set(),
            attributes={},
            strip=True,
            strip_comments=True,
        )
