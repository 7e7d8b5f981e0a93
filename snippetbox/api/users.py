"""User pages: signup, login and logout.

No session is established on login; the handlers only exercise the
credential check.
"""

from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends, Form, status
from fastapi.responses import HTMLResponse, RedirectResponse

from snippetbox.api.dependencies import get_user_service
from snippetbox.forms import UserLoginForm, UserSignupForm
from snippetbox.services.errors import DuplicateEmailError, InvalidCredentialsError
from snippetbox.services.user_service import UserService
from snippetbox.templates import TemplateRegistry, new_template_data, render

INVALID_CREDENTIALS_MESSAGE = "Email or password is incorrect"


def user_routes(templates: TemplateRegistry) -> APIRouter:
    """Build the user router."""
    router = APIRouter(prefix="/user", tags=["users"])

    signup_page = templates.page("signup.html")
    login_page = templates.page("login.html")

    @router.get("/signup", response_class=HTMLResponse)
    def user_signup():
        data = new_template_data()
        data.form = UserSignupForm()
        return render(signup_page, status.HTTP_200_OK, data)

    @router.post("/signup")
    def user_signup_post(
        users: Annotated[UserService, Depends(get_user_service)],
        name: Annotated[str, Form()] = "",
        email: Annotated[str, Form()] = "",
        password: Annotated[str, Form()] = "",
    ):
        """Register a user, then send them to the login page."""
        form = UserSignupForm(name=name, email=email, password=password)
        if form.validate():
            data = new_template_data()
            data.form = form
            return render(signup_page, HTTPStatus.UNPROCESSABLE_ENTITY, data)

        try:
            users.insert(form.name, form.email, form.password)
        except DuplicateEmailError:
            form.problems["email"] = "Email address is already in use"
            data = new_template_data()
            data.form = form
            return render(signup_page, HTTPStatus.UNPROCESSABLE_ENTITY, data)

        return RedirectResponse("/user/login", status_code=status.HTTP_303_SEE_OTHER)

    @router.get("/login", response_class=HTMLResponse)
    def user_login():
        data = new_template_data()
        data.form = UserLoginForm()
        return render(login_page, status.HTTP_200_OK, data)

    @router.post("/login")
    def user_login_post(
        users: Annotated[UserService, Depends(get_user_service)],
        email: Annotated[str, Form()] = "",
        password: Annotated[str, Form()] = "",
    ):
        """Check credentials. Never says which of email or password was wrong."""
        form = UserLoginForm(email=email, password=password)
        if form.validate():
            data = new_template_data()
            data.form = form
            return render(login_page, HTTPStatus.UNPROCESSABLE_ENTITY, data)

        try:
            users.authenticate(form.email, form.password)
        except InvalidCredentialsError:
            form.non_field_problems.append(INVALID_CREDENTIALS_MESSAGE)
            data = new_template_data()
            data.form = form
            return render(login_page, HTTPStatus.UNPROCESSABLE_ENTITY, data)

        return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)

    @router.get("/logout")
    def user_logout():
        # Nothing to tear down without sessions.
        return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)

    return router
