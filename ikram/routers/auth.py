from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.security import OAuth2PasswordRequestForm

from ikram.config import settings
from ikram.dependencies import CurrentUser, DbSession
from ikram.rate_limit import limiter
from ikram.schemas.user import AdminCreate, AdminResponse, LoginResponse
from ikram.services import auth as auth_service

router = APIRouter()


@router.post("/register", response_model=AdminResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit("5/minute")
def register(request: Request, data: AdminCreate, db: DbSession):
    """Yeni personel hesabi. Email benzersiz olmali."""
    return auth_service.register_user(db, data)


@router.post("/login", response_model=LoginResponse)
@limiter.limit("10/minute")
def login(
    request: Request,
    response: Response,
    form_data: Annotated[OAuth2PasswordRequestForm, Depends()],
    db: DbSession,
):
    """
    Giris yap ve JWT al (username = email).
    Token ayrica access_token cookie'sine yazilir; panel header gondermeden de calisir.
    """
    user = auth_service.authenticate_user(db, form_data.username, form_data.password)
    token = auth_service.create_access_token(user.id)
    expires_in = settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60
    response.set_cookie(
        key="access_token", value=token, httponly=True, samesite="lax", max_age=expires_in
    )
    return LoginResponse(
        access_token=token, expires_in=expires_in, admin=AdminResponse.model_validate(user)
    )


@router.get("/me", response_model=AdminResponse)
def get_me(current_user: CurrentUser):
    return current_user
