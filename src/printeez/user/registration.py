"""User registration and admin promotion: commands and handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from printeez.domain import printeez
from printeez.user.user import User


@printeez.command(part_of="User")
class RegisterUser:
    """Create a shopper account. The password is stored only as a hash."""

    name: String(required=True, max_length=50)
    email: String(required=True, max_length=254)
    password: String(required=True, max_length=128)
    address: String(max_length=200)


@printeez.command(part_of="User")
class PromoteToAdmin:
    user_id: Identifier()
    email: String(max_length=254)


@printeez.command_handler(part_of=User)
class UserAccountHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        repo = current_domain.repository_for(User)
        if repo.find_by_email(command.email) is not None:
            raise ValidationError({"email": ["Email is already registered"]})

        user = User.register(
            name=command.name,
            email=command.email,
            password=command.password,
            address=command.address,
        )
        repo.add(user)
        return str(user.id)

    @handle(PromoteToAdmin)
    def promote_to_admin(self, command):
        repo = current_domain.repository_for(User)
        if command.user_id:
            user = repo.get(command.user_id)
        elif command.email:
            user = repo.find_by_email(command.email)
            if user is None:
                raise ObjectNotFoundError(f"No user registered with email {command.email}")
        else:
            raise ValidationError({"user_id": ["Either user_id or email is required"]})

        user.promote_to_admin()
        repo.add(user)
        return str(user.id)
