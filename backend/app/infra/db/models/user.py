"""User database model."""
from sqlalchemy import Column, String, Float, DateTime

from app.domain.common.types import ensure_utc
from app.domain.user.entities import User
from app.infra.db.base import Base


class UserModel(Base):
    """User model."""

    __tablename__ = "users"

    id = Column(String, primary_key=True)
    username = Column(String, nullable=False, unique=True)
    email = Column(String, nullable=False, unique=True)
    display_name = Column(String, nullable=False)
    avatar = Column(String, nullable=True)
    rating = Column(Float, nullable=False, default=0.0)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    def to_entity(self) -> User:
        """Convert to domain entity."""
        return User(
            id=self.id,
            username=self.username,
            email=self.email,
            display_name=self.display_name,
            avatar=self.avatar,
            rating=self.rating,
            created_at=ensure_utc(self.created_at),
            updated_at=ensure_utc(self.updated_at),
        )

    @classmethod
    def from_entity(cls, entity: User) -> "UserModel":
        """Create from domain entity."""
        return cls(**entity.model_dump())
