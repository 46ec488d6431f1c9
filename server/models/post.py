# server/models/post.py

from pydantic import BaseModel, Field, ConfigDict
from .user import Credentials


class PostCreateRequest(Credentials):
    title: str
    content: str


class PostUpdateRequest(Credentials):
    title: str | None = None
    content: str | None = None


class Post(BaseModel):
    """
    A post as persisted in posts.json.
    authorUsername is copied from the author at creation time and never refreshed.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: str
    content: str
    author_id: int = Field(alias="authorId")
    author_username: str = Field(alias="authorUsername")
