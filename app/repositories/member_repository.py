from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from app.core.exceptions import DuplicateMemberEmailError
from app.models.member import Member
from app.repositories.base import BaseRepository


class MemberRepository(BaseRepository):
    """Encapsulates every SQL query that touches the ``members`` table."""

    async def get_by_id(self, member_id: int) -> Optional[Member]:
        """Return a single member by primary key, or ``None``."""
        result = await self._db.execute(select(Member).where(Member.id == member_id))
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[Member]:
        result = await self._db.execute(select(Member).where(Member.email == email))
        return result.scalar_one_or_none()

    async def get_many(self, member_ids: Iterable[int]) -> List[Member]:
        """Return every member whose id is in *member_ids*."""
        ids = set(member_ids)
        if not ids:
            return []
        result = await self._db.execute(select(Member).where(Member.id.in_(ids)))
        return list(result.scalars().all())

    async def list_all(self) -> List[Member]:
        result = await self._db.execute(select(Member).order_by(Member.id))
        return list(result.scalars().all())

    async def _flush_member(self, member: Member) -> Member:
        # The unique index on email still guards against concurrent writers
        try:
            await self._db.flush()
        except IntegrityError:
            await self.rollback()
            raise DuplicateMemberEmailError()
        await self._db.refresh(member)
        return member

    async def create(self, name: str, email: Optional[str] = None) -> Member:
        member = Member(name=name, email=email)
        self._db.add(member)
        return await self._flush_member(member)

    async def update(self, member: Member, changes: Dict[str, Any]) -> Member:
        for key, value in changes.items():
            setattr(member, key, value)
        return await self._flush_member(member)
