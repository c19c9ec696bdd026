from __future__ import annotations

from enum import Enum


class PersonKind(str, Enum):
    """
    Discriminator for the unified people view.

    Identities are only unique within one kind; (kind, id) is the
    registry-wide key.
    """

    VOLUNTEER = "volunteer"
    GUEST = "guest"
    STAFF = "staff"
