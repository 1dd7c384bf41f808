"""PostgreSQL implementation of User repository."""

from typing import Any, List, Optional

from sqlalchemy import delete, func, literal, select
from sqlalchemy.dialects.postgresql import JSONB, insert
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.model import User
from board.domain.repository import UserRepository
from board.domain.value import RequestId, UserId
from board.persistence.mappers import row_to_user, user_to_dict
from board.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_all(self) -> List[User]:
        """Find all users, oldest first."""
        stmt = select(users_table).order_by(users_table.c.created_at)
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        The upvoted set is never overwritten on update.

        Args:
            user: User to save

        Returns:
            Saved user
        """
        user_dict = user_to_dict(user)
        stmt = (
            insert(users_table)
            .values(**user_dict)
            .on_conflict_do_update(
                index_elements=[users_table.c.id],
                set_={
                    "email": user_dict["email"],
                    "attributes": user_dict["attributes"],
                    "updated_at": func.now(),
                },
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return user

    async def merge_attributes(
        self,
        user_id: UserId,
        attributes: dict[str, Any],
        email: str | None = None,
        set_email: bool = False,
    ) -> Optional[User]:
        """Merge attributes with JSONB concatenation in a single UPDATE.

        ``attributes || :patch`` is evaluated against the row as it is when
        the UPDATE takes its lock, so concurrent merges keep each other's
        keys. No row is inserted when the user is absent.
        """
        values: dict[str, Any] = {
            "attributes": users_table.c.attributes.op("||")(
                literal(attributes, type_=JSONB)
            ),
            "updated_at": func.now(),
        }
        if set_email:
            values["email"] = email

        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .values(**values)
            .returning(*users_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_user(dict(row)) if row else None

    async def create_if_absent(self, user: User) -> bool:
        """Insert a user unless the ID already exists."""
        stmt = (
            insert(users_table)
            .values(**user_to_dict(user))
            .on_conflict_do_nothing(index_elements=[users_table.c.id])
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def add_upvoted_on(self, user_id: UserId, request_id: RequestId) -> bool:
        """Atomically append a request ID unless already present.

        Single UPDATE with the membership test in the WHERE clause, so
        concurrent callers never lose each other's additions.
        """
        rid = str(request_id)
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .where(~users_table.c.upvoted_on.contains([rid]))
            .values(
                upvoted_on=func.array_append(users_table.c.upvoted_on, rid),
                updated_at=func.now(),
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete(self, user_id: UserId) -> bool:
        """Delete a user."""
        stmt = delete(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
