import pytest
from pydantic import ValidationError

from models.user import User, validation_messages


def make_user(**overrides):
    fields = {"email": "a@b.com", "username": "alice", "password": "secret"}
    fields.update(overrides)
    return User(**fields)


@pytest.mark.parametrize("email", ["a@b.com", "first.last@sub.example.org", '"odd name"@example.com', "x@[10.0.0.1]"])
def test_accepts_valid_emails(email):
    assert make_user(email=email).email == email


@pytest.mark.parametrize("email", ["plainaddress", "a@b", "a b@c.com", "@example.com", "a@b.c"])
def test_rejects_invalid_emails(email):
    with pytest.raises(ValidationError) as exc_info:
        make_user(email=email)
    assert validation_messages(exc_info.value) == [f'"{email}" is not a valid email address']


def test_missing_email_and_password_are_reported():
    with pytest.raises(ValidationError) as exc_info:
        User(username="alice")
    messages = validation_messages(exc_info.value)
    assert "Email address not provided" in messages
    assert "Password not provided" in messages


def test_username_needs_a_word_run_of_three():
    with pytest.raises(ValidationError):
        make_user(username="ab")
    with pytest.raises(ValidationError):
        make_user(username="a-b-c")


def test_username_pattern_is_searched_not_full_matched():
    assert make_user(username="!!!abc!!!").username == "!!!abc!!!"


def test_assignment_is_validated():
    user = make_user()
    with pytest.raises(ValidationError):
        user.email = "not-an-email"
    assert user.email == "a@b.com"


def test_new_user_has_unsaved_password():
    user = make_user()
    assert user.is_password_modified()
    user.mark_persisted()
    assert not user.is_password_modified()


def test_document_uses_stored_keys():
    doc = make_user().to_document()
    assert set(doc) == {"email", "username", "pass", "dateCreated", "dateUpdated"}
    assert doc["pass"] == "secret"


def test_public_view_hides_password():
    public = make_user(id="abc123").to_public()
    assert "pass" not in public
    assert "password" not in public
    assert public["id"] == "abc123"
    assert public["username"] == "alice"


def test_date_created_is_taken_per_record(monkeypatch):
    ticks = iter([1700000000.0, 1700000001.0])
    monkeypatch.setattr("auth.utils.time.time", lambda: next(ticks))
    first = make_user()
    second = make_user(email="c@d.com", username="bobby")
    assert first.date_created == "1700000000000"
    assert second.date_created == "1700000001000"


def test_missing_username_is_rejected_on_creation():
    with pytest.raises(ValidationError) as exc_info:
        User(email="a@b.com", password="secret")
    assert validation_messages(exc_info.value) == ["Username not provided"]
