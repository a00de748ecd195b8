"""FastAPI endpoints for the Identity domain."""

import json

from fastapi import APIRouter, Depends, Request
from protean.utils.globals import current_domain

from identity.api.schemas import (
    ChangeRoleRequest,
    InviteUserRequest,
    SignInRequest,
    SignUpRequest,
    StatusResponse,
    UpdateProfileRequest,
    UserIdResponse,
    UserResponse,
)
from identity.session import require_actor
from identity.user.administration import ChangeUserRole, InviteUser
from identity.user.authentication import DEFAULT_USER_AGENT, SignIn, SignOut, SignUp
from identity.user.profile import UpdateProfile
from shared.snapshots import Actor

auth_router = APIRouter(prefix="/auth", tags=["auth"])
user_router = APIRouter(prefix="/users", tags=["users"])


def _user_agent(request: Request) -> str:
    return request.headers.get("user-agent") or DEFAULT_USER_AGENT


# --- Authentication endpoints ---


@auth_router.post("/sign-in", response_model=UserResponse)
async def sign_in(body: SignInRequest, request: Request) -> UserResponse:
    command = SignIn(email=body.email, password=body.password, user_agent=_user_agent(request))
    user = current_domain.process(command, asynchronous=False)
    return UserResponse(**user.model_dump())


@auth_router.post("/sign-up", status_code=201, response_model=UserResponse)
async def sign_up(body: SignUpRequest, request: Request) -> UserResponse:
    command = SignUp(
        email=body.email,
        password=body.password,
        name=body.name,
        department=body.department,
        phone=body.phone,
        bio=body.bio,
        user_agent=_user_agent(request),
    )
    user = current_domain.process(command, asynchronous=False)
    return UserResponse(**user.model_dump())


@auth_router.post("/sign-out", response_model=StatusResponse)
async def sign_out(actor: Actor = Depends(require_actor)) -> StatusResponse:
    current_domain.process(SignOut(actor=actor.to_json()), asynchronous=False)
    return StatusResponse()


@auth_router.get("/me", response_model=UserResponse)
async def me(actor: Actor = Depends(require_actor)) -> UserResponse:
    return UserResponse(**actor.model_dump())


@auth_router.put("/profile", response_model=UserResponse)
async def update_profile(body: UpdateProfileRequest, actor: Actor = Depends(require_actor)) -> UserResponse:
    command = UpdateProfile(actor=actor.to_json(), changes=json.dumps(body.model_dump(exclude_unset=True)))
    user = current_domain.process(command, asynchronous=False)
    return UserResponse(**user.model_dump())


# --- User administration endpoints ---


@user_router.post("/invitations", status_code=201, response_model=UserIdResponse)
async def invite_user(body: InviteUserRequest, actor: Actor = Depends(require_actor)) -> UserIdResponse:
    command = InviteUser(actor=actor.to_json(), email=body.email, role=body.role)
    result = current_domain.process(command, asynchronous=False)
    return UserIdResponse(user_id=result)


@user_router.put("/{user_id}/role", response_model=UserResponse)
async def change_role(user_id: str, body: ChangeRoleRequest, actor: Actor = Depends(require_actor)) -> UserResponse:
    command = ChangeUserRole(actor=actor.to_json(), user_id=user_id, role=body.role)
    user = current_domain.process(command, asynchronous=False)
    return UserResponse(**user.model_dump())
