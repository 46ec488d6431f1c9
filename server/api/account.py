# server/api/account.py

import logging
from fastapi import APIRouter
from api.auth import require_user
from database import read_users, write_users, read_posts, write_posts
from models.user import Credentials, ProfileUpdateRequest, SafeUser
from core.utils import safe_user, find_by_id


logger = logging.getLogger(__name__)

router = APIRouter()


# -------------------------------
# Member Directory
# -------------------------------

@router.get("/users")
def list_users():
    return [safe_user(u) for u in read_users()]


# -------------------------------
# Profile & Account Endpoints
# -------------------------------

@router.put("/profile", response_model=SafeUser)
def update_profile(req: ProfileUpdateRequest):
    """
    Updates the caller's email and/or password.
    Username changes are not supported, so post snapshots never go stale here.
    """
    user = require_user(req)
    users = read_users()
    stored = find_by_id(users, user["id"])

    if req.email is not None:
        stored["email"] = req.email
    if req.new_password is not None:
        stored["password"] = req.new_password

    write_users(users)
    return safe_user(stored)


@router.delete("/account")
def delete_account(req: Credentials):
    """
    Removes the caller and every post they authored.
    The two files are written one after the other with no transaction between them.
    """
    user = require_user(req)

    users = [u for u in read_users() if u["id"] != user["id"]]
    write_users(users)

    posts = read_posts()
    remaining = [p for p in posts if p.get("authorId") != user["id"]]
    write_posts(remaining)

    logger.info(
        "Deleted account %r and %d of its posts",
        user["username"], len(posts) - len(remaining)
    )
    return {"message": "Account deleted"}
