from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.database import get_db
from src.repositories.unit_of_work import SqlAlchemyUnitOfWork
from src.services.signup_service import SignupService


async def get_signup_service(db: AsyncSession = Depends(get_db)) -> SignupService:
    """Dependency to provide SignupService."""
    uow = SqlAlchemyUnitOfWork(db)
    return SignupService(uow)
