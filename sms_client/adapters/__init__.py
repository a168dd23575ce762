"""Provider adapters for the SMS client."""

from .twilio import ACCEPTED_STATUS_CODES, MAX_BODY_UNITS, MessagingClient

__all__ = ["ACCEPTED_STATUS_CODES", "MAX_BODY_UNITS", "MessagingClient"]
