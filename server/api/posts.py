# server/api/posts.py

import logging
from fastapi import APIRouter, HTTPException, status
from api.auth import require_user
from database import read_posts, write_posts
from models.user import Credentials
from models.post import Post, PostCreateRequest, PostUpdateRequest
from core.utils import next_id, find_by_id


logger = logging.getLogger(__name__)

router = APIRouter()


def get_owned_post(posts: list[dict], post_id: int, user: dict) -> dict:
    """
    Looks up a post for mutation.
    Raises 404 if it does not exist and 403 if the user is not its author.
    """
    post = find_by_id(posts, post_id)
    if post is None:
        raise HTTPException(status_code=404, detail="Post not found")
    if post.get("authorId") != user["id"]:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You can only modify your own posts"
        )
    return post


@router.get("/posts")
def list_posts():
    return read_posts()


@router.post("/posts", response_model=Post, status_code=status.HTTP_201_CREATED)
def create_post(req: PostCreateRequest):
    user = require_user(req)
    posts = read_posts()

    post = {
        "id": next_id(posts),
        "title": req.title,
        "content": req.content,
        "authorId": user["id"],
        "authorUsername": user["username"],
    }
    posts.append(post)
    write_posts(posts)
    return post


@router.put("/posts/{post_id}", response_model=Post)
def update_post(post_id: int, req: PostUpdateRequest):
    user = require_user(req)
    posts = read_posts()
    post = get_owned_post(posts, post_id, user)

    if req.title is not None:
        post["title"] = req.title
    if req.content is not None:
        post["content"] = req.content

    write_posts(posts)
    return post


@router.delete("/posts/{post_id}")
def delete_post(post_id: int, req: Credentials):
    user = require_user(req)
    posts = read_posts()
    post = get_owned_post(posts, post_id, user)

    write_posts([p for p in posts if p is not post])
    logger.info("User %r deleted post %d", user["username"], post_id)
    return {"message": "Post deleted"}
