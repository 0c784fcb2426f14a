from fastapi import Header, HTTPException
from videolike.infrastructure.supabase_client import get_supabase

def get_current_user(authorization: str = Header(...)) -> str:
    """
    Validates the Supabase JWT token and returns the caller's username.
    Expected format: Bearer <token>
    """
    if not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Invalid authorization header")

    token = authorization.split(" ", 1)[1]

    try:
        # Verify the token with Supabase
        res = get_supabase().auth.get_user(token)
    except Exception as e:
        print(f"Auth error exception: {type(e).__name__}: {str(e)}")
        raise HTTPException(status_code=401, detail=f"Unauthenticated: {str(e)}")

    if not res or not res.user:
        print("Auth error: No user returned from Supabase")
        raise HTTPException(status_code=401, detail="Invalid or expired token")

    metadata = res.user.user_metadata or {}
    username = metadata.get("username") or res.user.email
    if not username:
        raise HTTPException(status_code=401, detail="Authenticated user has no username")
    return username
