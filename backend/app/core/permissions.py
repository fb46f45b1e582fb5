"""
라우트 접근 권한 정책.

모든 라우트는 `require(Policy.XXX)` 의존성으로 정책을 한 번만 선언하고,
실제 판단은 `authorize()` 하나에서 처리합니다.

- 인증 정보가 없으면 401 (UnauthorizedException)
- 인증은 되었지만 권한이 부족하면 403 (ForbiddenException)
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from fastapi import Depends, Request

from app.utils.exceptions import ForbiddenException, UnauthorizedException
from app.utils.logger import auth_logger


@dataclass(frozen=True)
class Identity:
    username: str
    is_admin: bool = False


class Policy(str, Enum):
    PUBLIC = "public"                  # 인증 불필요
    AUTHENTICATED = "authenticated"    # 로그인한 사용자
    ADMIN = "admin"                    # 관리자만
    ADMIN_OR_OWNER = "admin_or_owner"  # 관리자 또는 본인


def authorize(policy: Policy, identity: Optional[Identity], resource_ref: Any = None) -> None:
    """정책에 따라 접근을 허용하거나 예외를 발생시킵니다."""
    if policy is Policy.PUBLIC:
        return

    if identity is None:
        raise UnauthorizedException()

    if policy is Policy.AUTHENTICATED or identity.is_admin:
        return

    # 본인 확인은 대소문자를 구분하는 완전 일치만 허용
    if (
        policy is Policy.ADMIN_OR_OWNER
        and resource_ref is not None
        and identity.username == str(resource_ref)
    ):
        return

    auth_logger.warning(f"접근 거부: user={identity.username}, policy={policy.value}, resource={resource_ref}")
    raise ForbiddenException()


def require(policy: Policy, owner_param: str = "username") -> Callable[..., Optional[Identity]]:
    """라우트에서 Depends()로 사용할 권한 검사 의존성을 생성합니다.

    owner_param: 소유자 확인에 사용할 경로 파라미터 이름
    """
    # 순환 import 방지
    from app.utils.dependencies import get_optional_identity

    def dependency(
        request: Request,
        identity: Optional[Identity] = Depends(get_optional_identity),
    ) -> Optional[Identity]:
        authorize(policy, identity, request.path_params.get(owner_param))
        return identity

    return dependency
