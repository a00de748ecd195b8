"""Email address validation for user accounts."""

from protean.exceptions import ValidationError

_FORBIDDEN = (";", ",", "(", ")", '"', ":", "<", ">", "[", "]", "\\")


def normalize_email(email: str) -> str:
    """Return the lower-cased address, or raise ValidationError if malformed.

    Structural checks only: one ``@``, non-empty local and domain parts, a dot
    in the domain, no whitespace, no consecutive dots, no forbidden characters.
    """
    address = (email or "").strip().lower()

    def invalid():
        return ValidationError({"email": [f"Invalid email address: {email!r}"]})

    if not address or any(c.isspace() for c in address):
        raise invalid()
    if address.count("@") != 1:
        raise invalid()

    local_part, domain_part = address.split("@", 1)
    if not local_part or local_part.startswith(".") or local_part.endswith("."):
        raise invalid()
    if not domain_part or "." not in domain_part or domain_part.startswith(".") or domain_part.endswith("."):
        raise invalid()
    if any(label.startswith("-") or label.endswith("-") for label in domain_part.split(".")):
        raise invalid()
    if ".." in address or any(c in address for c in _FORBIDDEN):
        raise invalid()

    return address
