import re

from enquiries.links import parse_links

from .api import ApiError
from .notifications import Notifier

FIELDS = ("clientName", "projectName", "phone", "description", "budget", "links")
REQUIRED_FIELDS = ("clientName", "projectName", "description", "budget")
PHONE_PATTERN = re.compile(r"^[0-9]{10,}$")


def empty_draft():
    return {name: "" for name in FIELDS}


def coerce_number(text):
    """Parse budget text into an int or float; unparsable text is passed through."""
    try:
        value = float(text)
    except (TypeError, ValueError):
        return text
    if value != value or value in (float("inf"), float("-inf")):
        return text
    return int(value) if value.is_integer() else value


class ContactForm:
    def __init__(self, api, notifier=None):
        self.api = api
        self.notifier = notifier if notifier is not None else Notifier()
        self.data = empty_draft()
        self.submitting = False

    def update(self, **fields):
        for name, value in fields.items():
            if name not in self.data:
                raise KeyError(f"Unknown contact form field: {name}")
            self.data[name] = "" if value is None else str(value)

    def reset(self):
        self.data = empty_draft()

    def validate(self):
        """Return the first violated rule's message, or None when the draft is valid."""
        if any(not self.data[name].strip() for name in REQUIRED_FIELDS):
            return "Please fill in all required fields"
        if not PHONE_PATTERN.match(self.data["phone"]):
            return "Please enter a valid phone number (at least 10 digits)"
        return None

    def payload(self):
        return {
            **self.data,
            "links": parse_links(self.data["links"]),
            "budget": coerce_number(self.data["budget"]),
        }

    def submit(self):
        error = self.validate()
        if error:
            self.notifier.error(error)
            return None

        self.submitting = True
        try:
            record = self.api.create_enquiry(self.payload())
        except ApiError as e:
            self.notifier.error(e.first_message or "Failed to submit enquiry")
            return None
        finally:
            self.submitting = False

        self.notifier.success("Enquiry submitted successfully!")
        self.reset()
        return record
