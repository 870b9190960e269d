from fastapi import APIRouter, Depends

from app.api.deps import get_member_repo, get_member_service
from app.repositories.member_repository import MemberRepository
from app.schemas.member import (
    MemberCreate,
    MemberListResponse,
    MemberOut,
    MemberResponse,
    MemberUpdate,
)
from app.services.member_service import MemberService

router = APIRouter(prefix="/members", tags=["Members"])


@router.post("", response_model=MemberResponse, status_code=201)
async def create_member(
    request_body: MemberCreate,
    service: MemberService = Depends(get_member_service),
    member_repo: MemberRepository = Depends(get_member_repo),
) -> MemberResponse:
    member = await service.create_member(request_body, member_repo)
    return MemberResponse(data=MemberOut.model_validate(member))


@router.get("", response_model=MemberListResponse)
async def list_members(
    service: MemberService = Depends(get_member_service),
    member_repo: MemberRepository = Depends(get_member_repo),
) -> MemberListResponse:
    members = await service.list_members(member_repo)
    return MemberListResponse(data=[MemberOut.model_validate(m) for m in members])


@router.get("/{member_id}", response_model=MemberResponse)
async def get_member(
    member_id: int,
    service: MemberService = Depends(get_member_service),
    member_repo: MemberRepository = Depends(get_member_repo),
) -> MemberResponse:
    member = await service.get_member(member_id, member_repo)
    return MemberResponse(data=MemberOut.model_validate(member))


@router.patch("/{member_id}", response_model=MemberResponse)
async def update_member(
    member_id: int,
    request_body: MemberUpdate,
    service: MemberService = Depends(get_member_service),
    member_repo: MemberRepository = Depends(get_member_repo),
) -> MemberResponse:
    member = await service.update_member(member_id, request_body, member_repo)
    return MemberResponse(data=MemberOut.model_validate(member))
