from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from src.models import Base


class Signup(Base):
    __tablename__ = "signups"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self) -> str:
        return f"<Signup id={self.id} email={self.email!r}>"
