"""ユーザー/認証サービスの呼び出し"""

from __future__ import annotations

from typing import Any

from .models import (
    AuthResponse,
    ChangePasswordRequest,
    DeactivateAccountRequest,
    ForgotPasswordRequest,
    LoginHistoryResponse,
    LoginRequest,
    OtpRequest,
    RegisterRequest,
    ResendOtpRequest,
    ResetPasswordRequest,
    UpdateUserRequest,
    UserResponse,
)
from .service_client import ServiceClient


class UserService:
    """ユーザーサービス API。

    登録とログインは 2 段階（資格情報送信 → OTP 検証）で、トークンは
    OTP 検証の応答でのみ返る。文字列を返す操作はサーバーのメッセージをそのまま返す。
    """

    def __init__(self, client: ServiceClient) -> None:
        self._client = client

    # 認証（公開）

    async def register(self, request: RegisterRequest) -> str:
        return await self._client.post("/api/v1/auth/register", request.to_dict())

    async def verify_registration_otp(self, request: OtpRequest) -> AuthResponse:
        data: dict[str, Any] = await self._client.post(
            "/api/v1/auth/verify-registration-otp", request.to_dict()
        )
        return AuthResponse.from_dict(data)

    async def login(self, request: LoginRequest) -> str:
        return await self._client.post("/api/v1/auth/login", request.to_dict())

    async def verify_login_otp(self, request: OtpRequest) -> AuthResponse:
        data: dict[str, Any] = await self._client.post(
            "/api/v1/auth/verify-login-otp", request.to_dict()
        )
        return AuthResponse.from_dict(data)

    async def resend_otp(self, request: ResendOtpRequest) -> str:
        return await self._client.post("/api/v1/auth/resend-otp", request.to_dict())

    async def forgot_password(self, request: ForgotPasswordRequest) -> str:
        return await self._client.post("/api/v1/auth/forgot-password", request.to_dict())

    async def verify_reset_otp(self, request: OtpRequest) -> str:
        """パスワードリセット用 OTP を検証し、リセットトークンを返す。"""
        return await self._client.post("/api/v1/auth/verify-reset-otp", request.to_dict())

    async def reset_password(self, request: ResetPasswordRequest) -> str:
        return await self._client.post("/api/v1/auth/reset-password", request.to_dict())

    # アカウント（要認証）

    async def get_current_user(self) -> UserResponse:
        data: dict[str, Any] = await self._client.get("/api/v1/users/me")
        return UserResponse.from_dict(data)

    async def update_current_user(self, request: UpdateUserRequest) -> UserResponse:
        data: dict[str, Any] = await self._client.put("/api/v1/users/me", request.to_dict())
        return UserResponse.from_dict(data)

    async def change_password(self, request: ChangePasswordRequest) -> str:
        return await self._client.post("/api/v1/users/change-password", request.to_dict())

    async def get_login_history(self, limit: int = 10) -> list[LoginHistoryResponse]:
        data: list[dict[str, Any]] = await self._client.get(
            "/api/v1/users/login-history", params={"limit": limit}
        )
        return [LoginHistoryResponse.from_dict(d) for d in data or []]

    async def deactivate_account(self, request: DeactivateAccountRequest) -> str:
        return await self._client.delete("/api/v1/users/me", request.to_dict())

    async def request_phone_verification(self) -> str:
        return await self._client.post("/api/v1/users/request-phone-verification")

    async def verify_updated_phone(self, otp: str) -> UserResponse:
        data: dict[str, Any] = await self._client.post(
            "/api/v1/users/verify-updated-phone", {"otp": otp}
        )
        return UserResponse.from_dict(data)

    # その他（公開）

    async def subscribe_newsletter(self, email: str) -> str:
        return await self._client.post("/api/v1/newsletter/subscribe", {"email": email})

    async def check_health(self) -> Any:
        return await self._client.get("/api/v1/health")

    async def check_readiness(self) -> Any:
        return await self._client.get("/api/v1/health/ready")
