# =============================================================================
# core/fixtures.py - Fixed Demo Data
# =============================================================================
# The demo endpoints return hand-built, in-memory users. They are defined
# here once so the REST and view handlers serve the same records.
# =============================================================================

from core.models import User

DETAILS_TITLE = "Hola Mundo Cruel"
LIST_TITLE = "Hola mundo cruel"


def details_user() -> User:
    """The user shown on /details and /api/details."""
    return User(name="Jose", lastname="Carrillo")


def rest_users() -> list[User]:
    """The three users returned by GET /api/list, in order."""
    return [
        User(name="Jose", lastname="Carrillo"),
        User(name="Manolo", lastname="Jimenez"),
        User(name="Maria", lastname="Cabello"),
    ]


def view_users() -> list[User]:
    """The user list made available to every server-rendered view."""
    return [
        User(name="Jose", lastname="Carrillo", email="carrillo@email.com"),
        User(name="Manuel", lastname="Benitez"),
        User(name="Paco", lastname="Lolo"),
    ]
