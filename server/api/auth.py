# server/api/auth.py

import logging
from fastapi import APIRouter, HTTPException, status
from database import read_users, write_users
from models.user import Credentials, RegisterRequest, SafeUser, LoginResponse
from core.utils import next_id, safe_user


logger = logging.getLogger(__name__)

router = APIRouter()


def validate_user(username: str, password: str) -> dict | None:
    """
    Returns the stored user whose username and password both match exactly, or None.
    Plaintext, case-sensitive comparison against a fresh read of users.json.
    """
    for user in read_users():
        if user.get("username") == username and user.get("password") == password:
            return user
    return None


def require_user(creds: Credentials) -> dict:
    user = validate_user(creds.username, creds.password)
    if not user:
        logger.info("Rejected credentials for %r", creds.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password"
        )
    return user


@router.post("/register", response_model=SafeUser, status_code=status.HTTP_201_CREATED)
def register(req: RegisterRequest):
    users = read_users()
    if any(u.get("username") == req.username for u in users):
        raise HTTPException(status_code=400, detail="Username already exists")

    new_user = {
        "id": next_id(users),
        "username": req.username,
        "email": req.email,
        "password": req.password,
    }
    users.append(new_user)
    write_users(users)

    logger.info("Registered user %r with id %d", req.username, new_user["id"])
    return safe_user(new_user)


@router.post("/login", response_model=LoginResponse)
def login(req: Credentials):
    user = require_user(req)
    return {"message": "Login successful", "user": safe_user(user)}
