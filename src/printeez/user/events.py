"""Domain events for the User aggregate."""

from protean.fields import DateTime, Identifier, String

from printeez.domain import printeez


@printeez.event(part_of="User")
class UserRegistered:
    """A new shopper account was created."""

    __version__ = 1

    user_id: Identifier(required=True)
    name: String(required=True)
    email: String(required=True)
    registered_at: DateTime(required=True)


@printeez.event(part_of="User")
class UserPromotedToAdmin:
    __version__ = 1

    user_id: Identifier(required=True)
    email: String(required=True)
