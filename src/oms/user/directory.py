"""User directory — lookups used by the order lifecycle and the API."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from oms.domain import oms
from oms.errors import UserNotFoundError
from oms.user.user import User


@oms.repository(part_of=User)
class UserRepository:
    def get_by_id(self, user_id) -> User:
        try:
            return self.get(user_id)
        except ObjectNotFoundError:
            raise UserNotFoundError(user_id) from None

    def find_by_email(self, email) -> User | None:
        return self._dao.query.filter(email=email.strip().lower()).all().first

    def find_all(self) -> list[User]:
        return self._dao.query.order_by("created_at").limit(None).all().items


def get_user(user_id) -> User:
    return current_domain.repository_for(User).get_by_id(user_id)


def list_users() -> list[User]:
    return current_domain.repository_for(User).find_all()


def user_to_dict(user) -> dict:
    return {
        "id": str(user.id),
        "name": user.name,
        "email": user.email,
        "created_at": user.created_at.isoformat() if user.created_at else None,
    }
