import logging
from typing import List

from sqlalchemy.exc import IntegrityError

from src.core.errors import SignupConflictError, is_unique_violation
from src.models.signup import Signup
from src.repositories.unit_of_work import AbstractUnitOfWork
from src.schemas.signup import SignupCreate

logger = logging.getLogger(__name__)


def mask_email(email: str) -> str:
    """Keep the first character of the local part and the domain, e.g. ``a***@example.com``."""
    local, sep, domain = email.partition("@")
    if not sep:
        return "***"
    return f"{local[:1]}***@{domain}"


class SignupService:
    """Service for signup-related business logic."""

    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    async def register(self, signup_data: SignupCreate) -> Signup:
        """Insert a signup, making exactly one attempt.

        The unit of work commits on success and rolls back on any failure.
        Raises SignupConflictError when the email is already registered.
        """
        try:
            async with self.uow:
                signup = await self.uow.signups.create_signup(
                    signup_data.name, signup_data.email
                )
        except IntegrityError as e:
            if is_unique_violation(e):
                logger.info(f"Duplicate signup rejected for {mask_email(signup_data.email)}")
                raise SignupConflictError(signup_data.email) from e
            raise

        logger.info(f"New signup registered (id={signup.id})")
        return signup

    async def get_latest_signups(self, limit: int = 10) -> List[Signup]:
        return await self.uow.signups.get_latest_signups(limit)

    async def count_signups(self) -> int:
        return await self.uow.signups.get_total_signups_count()
