"""
Form validation for the create/edit contact form.

- accept_phone_input(): per-keystroke filter, digits only, max 10 characters.
- validate_form(): submit-time checks producing one message per field.
"""
import re

from models.schemas import FormValidation, UserForm

PHONE_MAX_LENGTH = 10
PHONE_MIN_LENGTH = 10

# Standard email address pattern (local part, "@", domain label, dotted labels).
EMAIL_PATTERN = re.compile(
    r"[a-zA-Z0-9+._%\-]{1,256}"
    r"@"
    r"[a-zA-Z0-9][a-zA-Z0-9\-]{0,64}"
    r"(\.[a-zA-Z0-9][a-zA-Z0-9\-]{0,25})+"
)

_PHONE_INPUT = re.compile(r"[0-9]{0,%d}" % PHONE_MAX_LENGTH)


def accept_phone_input(current: str, candidate: str) -> str:
    """Return `candidate` if it is a valid partial phone entry, else keep `current`."""
    if _PHONE_INPUT.fullmatch(candidate):
        return candidate
    return current


def is_valid_email(value: str) -> bool:
    return EMAIL_PATTERN.fullmatch(value) is not None


def validate_form(form: UserForm) -> FormValidation:
    result = FormValidation()

    if not form.name.strip():
        result.name = "Name is required"

    email = form.email.strip()
    if not email:
        result.email = "Email is required"
    elif not is_valid_email(email):
        result.email = "Invalid email"

    phone = form.phone.strip()
    if not phone:
        result.phone = "Phone is required"
    elif len(phone) < PHONE_MIN_LENGTH:
        result.phone = f"Phone must have at least {PHONE_MIN_LENGTH} digits"

    return result
