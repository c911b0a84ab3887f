"""FastAPI dependencies for dependency injection."""

from dataclasses import dataclass
from typing import Callable, Optional
from fastapi import Depends, HTTPException, Query, status, Request

from api.schemas.common import PaginationParams
from core.config import settings
from database.models.users import UserRole


@dataclass(frozen=True)
class CallerIdentity:
    """Identity of the caller as established by the upstream auth service."""

    user_id: str
    role: str
    email: Optional[str] = None


async def get_current_caller(request: Request) -> Optional[CallerIdentity]:
    """
    Get the caller identity, or None when the request is anonymous.

    An upstream authentication layer may place a ``CallerIdentity`` on
    ``request.state.caller``; otherwise the identity is read from the
    ``X-Caller-Id`` / ``X-Caller-Role`` / ``X-Caller-Email`` headers that the
    gateway forwards.
    """
    caller = getattr(request.state, "caller", None)
    if isinstance(caller, CallerIdentity):
        return caller

    user_id = request.headers.get("x-caller-id")
    if not user_id:
        return None

    return CallerIdentity(
        user_id=user_id,
        role=request.headers.get("x-caller-role", UserRole.CANDIDATE.value),
        email=request.headers.get("x-caller-email") or None,
    )


async def require_caller(
    caller: Optional[CallerIdentity] = Depends(get_current_caller),
) -> CallerIdentity:
    """Require an identified caller."""
    if caller is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return caller


def require_roles(*roles: str) -> Callable:
    """Dependency factory restricting an endpoint to the given roles."""

    async def _check(caller: CallerIdentity = Depends(require_caller)) -> CallerIdentity:
        if caller.role not in roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Requires one of roles: {', '.join(roles)}",
            )
        return caller

    return _check


require_hiring_staff = require_roles(
    UserRole.EMPLOYER.value,
    UserRole.HIRING_MANAGER.value,
    UserRole.RECRUITER.value,
)

require_recruiter = require_roles(UserRole.RECRUITER.value)


def get_pagination_params(
    page: int = Query(1, ge=1, description="Page number (1-indexed)"),
    page_size: Optional[int] = Query(None, ge=1, le=100, description="Items per page"),
) -> PaginationParams:
    """Pagination parameters, defaulting the page size from settings."""
    return PaginationParams(page=page, page_size=page_size or settings.default_page_size)
