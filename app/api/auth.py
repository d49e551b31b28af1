"""
Gestao de Template API - Auth API
Login de usuarios do painel e resolucao do usuario autenticado
"""
from dataclasses import dataclass
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.database import get_db
from app.models import User
from app.schemas import LoginRequest, LoginResponse, UserResponse
from app.core import (
    verify_password,
    create_access_token,
    verify_access_token,
    settings
)
from app.core.errors import Forbidden, Unauthorized

router = APIRouter(prefix="/auth", tags=["Authentication"])
security = HTTPBearer(auto_error=False)

# Rate limiting do login por IP
limiter = Limiter(key_func=get_remote_address)


@dataclass(frozen=True)
class Principal:
    """Usuario autenticado da requisicao"""
    user_id: int
    store_id: Optional[int]
    user: User


async def get_current_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: AsyncSession = Depends(get_db)
) -> Principal:
    """Dependency para obter o usuario autenticado"""
    if not credentials:
        raise Unauthorized()

    payload = verify_access_token(credentials.credentials)
    if not payload:
        raise Unauthorized()

    try:
        user_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        raise Unauthorized()

    result = await db.execute(select(User).where(User.id == user_id))
    user = result.scalar_one_or_none()

    if not user or not user.is_active:
        raise Unauthorized()

    return Principal(user_id=user.id, store_id=user.loja_id, user=user)


async def get_store_principal(principal: Principal = Depends(get_current_principal)) -> Principal:
    """Dependency para rotas restritas a loja: exige usuario com loja associada"""
    if principal.store_id is None:
        raise Forbidden()
    return principal


@router.post("/login", response_model=LoginResponse)
@limiter.limit(settings.LOGIN_RATE_LIMIT)
async def login(request: Request, credentials: LoginRequest, db: AsyncSession = Depends(get_db)):
    """Login de usuario do painel"""
    result = await db.execute(
        select(User).where(User.email == credentials.email)
    )
    user = result.scalar_one_or_none()

    if not user or not verify_password(credentials.password, user.hashed_password):
        raise Unauthorized("E-mail ou senha inválidos.")

    if not user.is_active:
        raise Unauthorized("Usuário inativo.")

    # jose exige sub como string
    access_token = create_access_token(data={"sub": str(user.id), "email": user.email})

    return LoginResponse(
        access_token=access_token,
        token_type="bearer",
        user=user.to_dict()
    )


@router.get("/me", response_model=UserResponse)
async def get_me(principal: Principal = Depends(get_current_principal)):
    """Retorna dados do usuario atual"""
    return principal.user.to_dict()
