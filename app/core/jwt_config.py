import jwt
from jwt import InvalidTokenError
from datetime import datetime, timedelta, timezone
from app.core.config import settings
from fastapi import HTTPException, Request

def create_access_token(data: dict, expires_days: int | None = None):
    if expires_days is None:
        expires_days = settings.ACCESS_TOKEN_EXPIRE_DAYS

    to_encode = data.copy()
    now = datetime.now(timezone.utc)
    to_encode.update({"iat": now, "exp": now + timedelta(days=expires_days)})

    return jwt.encode(to_encode, settings.JWT_SECRET, algorithm = settings.JWT_ALGO)

def decode_token(token : str):
    # expired and malformed tokens are both rejected with 403
    try:
        return jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms = [settings.JWT_ALGO]
        )
    except InvalidTokenError:
        raise HTTPException(status_code=403, detail="Invalid or expired token")

def get_token_from_request(request : Request) -> str:
    token = None
    auth_header = request.headers.get("Authorization")
    if auth_header and auth_header.startswith("Bearer "):
        token = auth_header.split(" ", 1)[1]

    if not token:
        token = request.cookies.get("access_token")

    if not token or not token.strip():
        raise HTTPException(401, "Access token required")

    return token.strip()
