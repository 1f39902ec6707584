import uuid
from datetime import datetime
from pydantic import Field
from app.core.schemas import ApiModel
from app.modules.users.schemas import UserSummary

class PostCreate(ApiModel):
    user_id: uuid.UUID
    title: str = Field(..., min_length=1, max_length=200)
    content: str = Field(..., min_length=1)
    category: str | None = None
    tags: list[str] = Field(default_factory=list)
    image_urls: list[str] = Field(default_factory=list)

class CommentCreate(ApiModel):
    user_id: uuid.UUID
    content: str = Field(..., min_length=1)
    parent_comment_id: uuid.UUID | None = None

class LikeRequest(ApiModel):
    user_id: uuid.UUID

class LikeResult(ApiModel):
    liked: bool
    likes_count: int

class PostOut(ApiModel):
    id: uuid.UUID
    title: str
    content: str
    category: str | None = None
    tags: list[str] = Field(default_factory=list)
    image_urls: list[str] = Field(default_factory=list)
    likes_count: int
    comments_count: int
    created_at: datetime
    updated_at: datetime
    author: UserSummary

class CommentOut(ApiModel):
    id: uuid.UUID
    content: str
    likes_count: int
    created_at: datetime
    parent_comment_id: uuid.UUID | None = None
    author: UserSummary

class CommentNode(CommentOut):
    replies: list[CommentOut] = Field(default_factory=list)

class PostDetail(PostOut):
    comments: list[CommentNode] = Field(default_factory=list)
