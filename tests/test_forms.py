"""Form validation tests."""

import pytest

from snippetbox.forms import SnippetCreateForm, UserLoginForm, UserSignupForm


def test_valid_create_form_has_no_problems():
    form = SnippetCreateForm(title="Hi", content="Body", expires=7)
    assert form.validate() == {}
    assert form.problems == {}


def test_create_form_defaults_to_one_year():
    assert SnippetCreateForm().expires == 365


@pytest.mark.parametrize("expires", [0, 2, 30, -1, 366])
def test_create_form_rejects_unlisted_expiry(expires):
    form = SnippetCreateForm(title="Hi", content="Body", expires=expires)
    problems = form.validate()
    assert "expires" in problems
    assert problems["expires"]


def test_create_form_blank_title():
    form = SnippetCreateForm(title="  ", content="x", expires=7)
    assert form.validate() == {"title": "Title field cannot be blank"}


def test_create_form_long_title():
    form = SnippetCreateForm(title="a" * 101, content="x", expires=1)
    problems = form.validate()
    assert "too" in problems["title"] or "100" in problems["title"]


def test_create_form_title_limit_counts_characters():
    form = SnippetCreateForm(title="é" * 100, content="x", expires=1)
    assert form.validate() == {}


def test_create_form_collects_every_field():
    form = SnippetCreateForm(title="", content="", expires=3)
    assert set(form.validate()) == {"title", "content", "expires"}


def test_validate_resets_previous_problems():
    form = SnippetCreateForm(title="", content="x", expires=7)
    form.validate()
    form.title = "Fixed"
    assert form.validate() == {}


def test_signup_form_valid():
    form = UserSignupForm(name="Alice", email="alice@example.com", password="s3cretpass")
    assert form.validate() == {}


def test_signup_form_blank_fields():
    form = UserSignupForm()
    problems = form.validate()
    assert problems == {
        "name": "Name field cannot be blank",
        "email": "Email field cannot be blank",
        "password": "Password field cannot be blank",
    }


def test_signup_form_bad_email_and_short_password():
    form = UserSignupForm(name="Alice", email="not-an-email", password="short")
    problems = form.validate()
    assert problems["email"] == "Provided email has invalid format"
    assert "at least 8" in problems["password"]


def test_login_form():
    assert UserLoginForm(email="a@b.com", password="x").validate() == {}
    problems = UserLoginForm(email="nope", password="").validate()
    assert set(problems) == {"email", "password"}


def test_signup_form_rejects_password_bcrypt_would_truncate():
    form = UserSignupForm(name="Alice", email="alice@example.com", password="a" * 72 + "X")
    assert form.validate() == {"password": "Password cannot be longer than 72 bytes"}


def test_signup_form_password_limit_is_in_bytes():
    # 40 characters, 80 bytes
    form = UserSignupForm(name="Alice", email="alice@example.com", password="é" * 40)
    assert "password" in form.validate()
    assert UserSignupForm(name="A", email="a@b.com", password="é" * 36).validate() == {}
