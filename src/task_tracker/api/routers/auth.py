"""Routes handling user registration and sign in."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status
from fastapi.security import OAuth2PasswordRequestForm

from ...deps import DatabaseSessionDependency, SettingsDependency
from ...schemas import AccessToken, AuthCredentials
from ...services import AuthService, UserService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/signup",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    summary="Register a new user account",
    responses={status.HTTP_409_CONFLICT: {"description": "Username already exists"}},
)
async def signup(payload: AuthCredentials, session: DatabaseSessionDependency) -> Response:
    await UserService(session).sign_up(username=payload.username, password=payload.password)
    return Response(status_code=status.HTTP_201_CREATED)


@router.post(
    "/signin",
    response_model=AccessToken,
    status_code=status.HTTP_200_OK,
    summary="Exchange a username and password for an access token",
)
async def signin(
    session: DatabaseSessionDependency,
    settings: SettingsDependency,
    form_data: OAuth2PasswordRequestForm = Depends(),
) -> AccessToken:
    token = await AuthService(session, settings).sign_in(form_data.username, form_data.password)
    return AccessToken(
        access_token=token.token,
        expires_in=settings.access_token_expire_minutes * 60,
    )
