"""
User account service: registration, lookup and login.

Passwords are hashed with argon2 on registration and verified
against the stored hash on login; plaintext is never stored.
"""

import logging

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError

from personal_finance.exceptions import AuthenticationError, BusinessRuleError
from personal_finance.models.user import User
from personal_finance.repositories.user import UserRepository

logger = logging.getLogger(__name__)

EMAIL_TAKEN = "Já existe um usuário cadastrado com esse email."
USER_NOT_FOUND = "Usuário não encontrado para o email informado."
INVALID_PASSWORD = "Senha inválida."

_hasher = PasswordHasher()


class UserAccountService:

    def __init__(self, repository: UserRepository):
        self.repository = repository

    def register(self, user: User) -> User:
        """
        Save a new user if the email is not taken.

        user.password must be the plaintext password string; it is
        replaced by its argon2 hash before saving.

        The uniqueness check and the insert share one transaction.
        Two concurrent registrations can still both pass the check;
        the unique constraint on users.email rejects the second insert.
        """
        with self.repository.transaction():
            self.validate_email_unique(user.email)
            user.password = _hasher.hash(user.password)
            user = self.repository.save(user)
        logger.info("Registered user %s", user.id)
        return user

    def validate_email_unique(self, email: str) -> None:
        """Raise BusinessRuleError if a user with this email exists."""
        if self.repository.exists_by_email(email):
            logger.warning("Registration rejected: email already in use")
            raise BusinessRuleError(EMAIL_TAKEN)

    def authenticate(self, email: str, password: str) -> User:
        """Return the user owning email if password matches its hash."""
        user = self.repository.find_by_email(email)
        if user is None:
            logger.warning("Authentication failed: unknown email")
            raise AuthenticationError(USER_NOT_FOUND)

        try:
            _hasher.verify(user.password, password)
        except (VerificationError, InvalidHashError):
            logger.warning("Authentication failed for user %s", user.id)
            raise AuthenticationError(INVALID_PASSWORD)

        return user

    def get_by_id(self, user_id: int) -> User | None:
        return self.repository.find_by_id(user_id)
