from fastapi import Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.email_notifier import build_notifier
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.app.services.notifier import Notifier
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import TokenContext, ValidateTokenUseCase
from src.domain.entities import TokenPurpose
from src.domain.errors import DomainError, TokenNotFoundError

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)

notifier = build_notifier()


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_notifier() -> Notifier:
    return notifier


async def get_bearer_token(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> str:
    if credentials is None or not credentials.credentials:
        raise ClientError(
            TokenNotFoundError("Authentication required"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )
    return credentials.credentials


async def get_current_user(
    token: str = Depends(get_bearer_token),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> TokenContext:
    """
    Dependency resolving the bearer session token of the request.

    Returns:
        TokenContext of the active owner

    Raises:
        ClientError: 401 if token is unknown, revoked or expired
    """
    return await ValidateTokenUseCase(uow).execute(token, purpose=TokenPurpose.session)


async def get_tenant_user(
    current_user: TokenContext = Depends(get_current_user),
) -> TokenContext:
    """Same as get_current_user, but the user must belong to a tenant"""
    if current_user.user.tenant_id is None:
        raise ClientError(
            DomainError("User does not belong to a tenant", code="TENANT_REQUIRED"),
            status_code=status.HTTP_403_FORBIDDEN,
        )
    return current_user


async def init_db():
    """Create missing tables"""
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
