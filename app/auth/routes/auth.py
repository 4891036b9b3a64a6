import logging

from fastapi import APIRouter, Depends, status

from app.auth.dependencies import get_auth_service, get_current_principal
from app.auth.schemas.auth import CreateAdminRequest, LoginData, LoginRequest, Principal
from app.auth.schemas.user import AdminUserResponse
from app.auth.services.auth_service import AuthService
from app.core.schemas import ApiResponse, MessageResponse, success_response

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login", response_model=ApiResponse[LoginData])
async def login(
    credentials: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> ApiResponse[LoginData]:
    admin, token = auth_service.authenticate(credentials.email, credentials.password)

    return success_response(
        LoginData(user=AdminUserResponse.model_validate(admin), token=token),
        message="Login successful",
    )


@router.post("/logout", response_model=MessageResponse)
async def logout() -> MessageResponse:
    # Tokens are stateless; the client discards its copy.
    return MessageResponse(message="Logout successful")


@router.get("/me", response_model=ApiResponse[AdminUserResponse])
async def get_current_user_info(
    principal: Principal = Depends(get_current_principal),
    auth_service: AuthService = Depends(get_auth_service),
) -> ApiResponse[AdminUserResponse]:
    admin = auth_service.get_current_admin(principal)
    return success_response(AdminUserResponse.model_validate(admin))


@router.post(
    "/create-admin",
    response_model=ApiResponse[AdminUserResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_admin_user(
    payload: CreateAdminRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> ApiResponse[AdminUserResponse]:
    admin = auth_service.create_administrator(payload.email, payload.password)
    return success_response(
        AdminUserResponse.model_validate(admin),
        message="Admin user created successfully",
    )
