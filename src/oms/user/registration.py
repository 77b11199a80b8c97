"""User registration — command and handler."""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String
from protean.utils.globals import current_domain

from oms.domain import oms
from oms.user.user import User

logger = structlog.get_logger(__name__)


@oms.command(part_of="User")
class RegisterUser:
    name = String(required=True, max_length=255)
    email = String(required=True, max_length=254)


@oms.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        repo = current_domain.repository_for(User)
        if repo.find_by_email(command.email):
            raise ValidationError({"email": [f"Email {command.email} is already registered"]})

        user = User.register(name=command.name, email=command.email)
        repo.add(user)
        logger.info("User registered", user_id=str(user.id))
        return str(user.id)
