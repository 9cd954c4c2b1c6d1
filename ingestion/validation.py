"""Email shape validation."""

import re

# local-part@domain.tld, no whitespace and no extra "@" in any part
EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def validate_email(email: str) -> bool:
    """Check an already lower-cased email against the accepted shape.

    Both the pattern and a separate "dot after the first @" check must pass.
    """
    if not EMAIL_RE.fullmatch(email):
        return False
    return "." in email.split("@", 1)[1]
