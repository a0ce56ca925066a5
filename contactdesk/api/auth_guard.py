from fastapi import Depends, Request, HTTPException
from jose import jwt, JWTError
import logging

from contactdesk.core.config import settings

logger = logging.getLogger(__name__)

def verify_jwt(token: str):
    if not settings.SUPABASE_JWT_SECRET:
        logger.error("SUPABASE_JWT_SECRET is not configured")
        raise HTTPException(status_code=500, detail="Authentication service misconfigured")

    try:
        return jwt.decode(
            token,
            settings.SUPABASE_JWT_SECRET,
            algorithms=["HS256"],
            options={"verify_aud": False},
        )
    except JWTError as e:
        logger.warning(f"JWT validation failed: {str(e)}")
        raise HTTPException(status_code=401, detail="Invalid token")

async def auth_guard(request: Request):
    """Auth guard that requires a valid bearer token and a user profile."""
    from contactdesk.services.user_service import user_service

    auth = request.headers.get("Authorization")
    if not auth or not auth.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Unauthorized")

    token = auth.split(" ", 1)[1]
    user = verify_jwt(token)

    try:
        user_id = user.get("sub")
        if not user_id:
            raise HTTPException(status_code=401, detail="Invalid user session")

        profile = await user_service.get_basic_profile(user_id)
        user["email"] = profile.get("email")
        user["role"] = profile.get("role")

        request.state.user = user
        return user

    except HTTPException as e:
        if e.status_code == 404:
            raise HTTPException(status_code=401, detail="Invalid user session")
        raise
    except Exception as e:
        logger.error(f"Error loading user profile: {str(e)}")
        raise HTTPException(status_code=500, detail="Error validating account status")

async def admin_guard(user=Depends(auth_guard)):
    """Auth guard that additionally requires the admin role."""
    if user.get("role") != settings.ADMIN_ROLE:
        logger.warning(f"User {user.get('sub')} denied admin access")
        raise HTTPException(status_code=403, detail="Admin access required")
    return user
