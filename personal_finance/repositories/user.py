"""SQLAlchemy implementation of the user store."""

from sqlalchemy import select, exists

from personal_finance.models.user import User
from personal_finance.repositories.base import SQLAlchemyRepository


class UserRepository(SQLAlchemyRepository[User]):
    model = User

    def exists_by_email(self, email: str) -> bool:
        return bool(self.db.scalar(select(exists().where(User.email == email))))

    def find_by_email(self, email: str) -> User | None:
        return self.db.execute(
            select(User).where(User.email == email)
        ).scalar_one_or_none()
