"""
Tests for the UserAccountService.
"""

from unittest.mock import MagicMock

import pytest

from personal_finance.exceptions import AuthenticationError, BusinessRuleError
from personal_finance.models.user import User
from personal_finance.repositories.user import UserRepository
from personal_finance.services.user_service import UserAccountService


def make_user(email="a@b.com", password="secret", name="Ana") -> User:
    return User(name=name, email=email, password=password)


@pytest.fixture
def service(db_session):
    return UserAccountService(UserRepository(db_session))


@pytest.fixture
def mock_repository():
    return MagicMock(spec=UserRepository)


# --- Registration ---

class TestRegister:

    def test_register_assigns_id(self, service):
        user = service.register(make_user())

        assert user.id is not None
        assert user.email == "a@b.com"
        assert user.registered_at is not None

    def test_password_is_hashed(self, service):
        user = service.register(make_user(password="secret"))

        assert user.password != "secret"
        assert user.password.startswith("$argon2")

    def test_duplicate_email_rejected(self, service):
        service.register(make_user())

        with pytest.raises(BusinessRuleError) as exc_info:
            service.register(make_user(name="Other"))

        assert exc_info.value.message == (
            "Já existe um usuário cadastrado com esse email."
        )

    def test_duplicate_email_leaves_single_user(self, service, db_session):
        service.register(make_user())
        with pytest.raises(BusinessRuleError):
            service.register(make_user(name="Other"))

        assert len(service.repository.find_all_by_example(User())) == 1

    def test_duplicate_email_never_saved(self, mock_repository):
        mock_repository.exists_by_email.return_value = True
        service = UserAccountService(mock_repository)

        with pytest.raises(BusinessRuleError):
            service.register(make_user())

        mock_repository.save.assert_not_called()

    def test_missing_password_never_saved(self, mock_repository):
        mock_repository.exists_by_email.return_value = False
        service = UserAccountService(mock_repository)

        with pytest.raises(TypeError):
            service.register(make_user(password=None))

        mock_repository.save.assert_not_called()

    def test_new_email_saved(self, mock_repository):
        mock_repository.exists_by_email.return_value = False
        saved = User(id=1, name="Ana", email="a@b.com", password="hash")
        mock_repository.save.return_value = saved
        service = UserAccountService(mock_repository)

        assert service.register(make_user()) is saved
        mock_repository.exists_by_email.assert_called_once_with("a@b.com")


class TestValidateEmailUnique:

    def test_unused_email_passes(self, service):
        service.validate_email_unique("free@b.com")

    def test_used_email_rejected(self, service):
        service.register(make_user())

        with pytest.raises(BusinessRuleError, match="Já existe"):
            service.validate_email_unique("a@b.com")

    def test_does_not_save(self, mock_repository):
        mock_repository.exists_by_email.return_value = False
        UserAccountService(mock_repository).validate_email_unique("a@b.com")

        mock_repository.save.assert_not_called()


# --- Authentication ---

class TestAuthenticate:

    def test_correct_password_returns_user(self, service):
        registered = service.register(make_user(password="secret"))

        user = service.authenticate("a@b.com", "secret")

        assert user.id == registered.id

    def test_wrong_password_rejected(self, service):
        service.register(make_user(password="secret"))

        with pytest.raises(AuthenticationError) as exc_info:
            service.authenticate("a@b.com", "wrong")

        assert exc_info.value.message == "Senha inválida."

    def test_unknown_email_rejected(self, service):
        with pytest.raises(AuthenticationError) as exc_info:
            service.authenticate("nobody@b.com", "secret")

        assert exc_info.value.message == (
            "Usuário não encontrado para o email informado."
        )

    def test_unhashed_stored_password_rejected(self, mock_repository):
        """A plaintext password in the store never authenticates."""
        mock_repository.find_by_email.return_value = make_user(password="secret")
        service = UserAccountService(mock_repository)

        with pytest.raises(AuthenticationError, match="Senha inválida"):
            service.authenticate("a@b.com", "secret")


# --- Lookup ---

class TestGetById:

    def test_found(self, service):
        user = service.register(make_user())
        assert service.get_by_id(user.id) is user

    def test_not_found_returns_none(self, service):
        assert service.get_by_id(42) is None
