from typing import List
from sqlalchemy import select, desc
from sqlalchemy.ext.asyncio import AsyncSession

from src.models.signup import Signup
from src.repositories.base import BaseRepository


class SignupRepository(BaseRepository[Signup]):
    """Repository for Signup model operations."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Signup)

    async def create_signup(self, name: str, email: str) -> Signup:
        """Insert a signup row.

        No existence check is made first; the unique index on ``email``
        rejects duplicates with an ``IntegrityError`` raised on flush.
        """
        return await self.create({"name": name, "email": email})

    async def get_latest_signups(self, limit: int = 10) -> List[Signup]:
        """Get the latest signups, newest first."""
        result = await self.db.execute(
            select(Signup)
            .order_by(desc(Signup.created_at), desc(Signup.id))
            .limit(limit)
        )
        return list(result.scalars().all())

    async def get_total_signups_count(self) -> int:
        """Get total number of signups."""
        return await self.count()
