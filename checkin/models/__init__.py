# checkin/models/__init__.py
# Central import surface for SQLModel table registration.
# Keeping these imports ensures init_db() sees all models and creates tables.

from .person import PersonKind
from .volunteer import Volunteer, VOLUNTEER_AREAS
from .guest import Guest, GUEST_REASONS
from .staff import Staff

# Table model per registry kind
MODELS_BY_KIND = {
    PersonKind.VOLUNTEER: Volunteer,
    PersonKind.GUEST: Guest,
    PersonKind.STAFF: Staff,
}

__all__ = [
    "PersonKind",
    "Volunteer",
    "VOLUNTEER_AREAS",
    "Guest",
    "GUEST_REASONS",
    "Staff",
    "MODELS_BY_KIND",
]
