import logging
from typing import List, Optional

from app.core.exceptions import DuplicateMemberEmailError, MemberNotFoundError
from app.models.member import Member
from app.repositories.member_repository import MemberRepository
from app.schemas.member import MemberCreate, MemberUpdate

logger = logging.getLogger(__name__)


class MemberService:
    """Create, read and update the account owners contacts are routed to."""

    async def _ensure_email_free(
        self,
        email: Optional[str],
        member_repo: MemberRepository,
        member_id: Optional[int] = None,
    ) -> None:
        if email is None:
            return
        existing = await member_repo.get_by_email(email)
        if existing is not None and existing.id != member_id:
            raise DuplicateMemberEmailError(
                f"A member with email {email} already exists"
            )

    async def create_member(
        self, request: MemberCreate, member_repo: MemberRepository
    ) -> Member:
        await self._ensure_email_free(request.email, member_repo)
        member = await member_repo.create(name=request.name, email=request.email)
        await member_repo.commit()
        logger.info("Created member %s", member.id)
        return member

    async def get_member(self, member_id: int, member_repo: MemberRepository) -> Member:
        member = await member_repo.get_by_id(member_id)
        if member is None:
            raise MemberNotFoundError(f"Member {member_id} not found")
        return member

    async def list_members(self, member_repo: MemberRepository) -> List[Member]:
        return await member_repo.list_all()

    async def update_member(
        self, member_id: int, updates: MemberUpdate, member_repo: MemberRepository
    ) -> Member:
        member = await self.get_member(member_id, member_repo)
        changes = updates.model_dump(exclude_unset=True)
        await self._ensure_email_free(changes.get("email"), member_repo, member_id)
        member = await member_repo.update(member, changes)
        await member_repo.commit()
        return member
