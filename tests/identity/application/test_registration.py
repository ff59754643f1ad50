"""Application tests for user registration and admin promotion."""

import pytest
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from printeez.user.registration import PromoteToAdmin, RegisterUser
from printeez.user.user import User


def _register(**overrides):
    defaults = {"name": "Bilal Ahmed", "email": "bilal@example.com", "password": "s3cret-pass"}
    defaults.update(overrides)
    return current_domain.process(RegisterUser(**defaults), asynchronous=False)


class TestRegisterUserHandler:
    def test_register_user(self):
        user_id = _register(address="House 12, Street 4, Lahore")
        user = current_domain.repository_for(User).get(user_id)
        assert user.name == "Bilal Ahmed"
        assert user.address == "House 12, Street 4, Lahore"
        assert user.check_password("s3cret-pass")

    def test_duplicate_email_rejected(self):
        _register()
        with pytest.raises(ValidationError) as exc:
            _register(email="BILAL@example.com")
        assert "email" in exc.value.messages

    def test_find_by_email_is_case_insensitive(self):
        user_id = _register()
        user = current_domain.repository_for(User).find_by_email("Bilal@Example.COM")
        assert str(user.id) == user_id

    def test_find_by_email_missing(self):
        assert current_domain.repository_for(User).find_by_email("nobody@example.com") is None

    def test_register_stores_event(self):
        _register()
        messages = current_domain.event_store.store.read("printeez::user")
        registered = [
            m
            for m in messages
            if m.metadata and m.metadata.headers and m.metadata.headers.type == "Printeez.UserRegistered.v1"
        ]
        assert len(registered) == 1


class TestPromoteToAdminHandler:
    def test_promote_by_id(self):
        user_id = _register()
        current_domain.process(PromoteToAdmin(user_id=user_id), asynchronous=False)
        assert current_domain.repository_for(User).get(user_id).is_admin is True

    def test_promote_by_email(self):
        user_id = _register()
        current_domain.process(PromoteToAdmin(email="bilal@example.com"), asynchronous=False)
        assert current_domain.repository_for(User).get(user_id).is_admin is True

    def test_promote_unknown_email(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(PromoteToAdmin(email="nobody@example.com"), asynchronous=False)

    def test_promote_needs_a_target(self):
        with pytest.raises(ValidationError):
            current_domain.process(PromoteToAdmin(), asynchronous=False)
