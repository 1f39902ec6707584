import uuid
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, Text, Integer, ForeignKey, UniqueConstraint, CheckConstraint
from app.core.base import Base, CreatedMixin, TimestampedMixin
from app.core.codecs import JsonList

POST_CATEGORIES = [
    "Health", "Parenting", "Education", "Nutrition", "Development",
    "Safety", "Activities", "General", "QnA", "Support",
]

class CommunityPost(Base, TimestampedMixin):
    user_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("user.id", ondelete="CASCADE"), index=True)
    title: Mapped[str] = mapped_column(String(200))
    content: Mapped[str] = mapped_column(Text)
    category: Mapped[str | None] = mapped_column(String(50), nullable=True, index=True)
    tags: Mapped[list] = mapped_column(JsonList, default=list)
    image_urls: Mapped[list] = mapped_column(JsonList, default=list)
    # maintained by comment and like handlers
    likes_count: Mapped[int] = mapped_column(Integer, default=0)
    comments_count: Mapped[int] = mapped_column(Integer, default=0)

class CommunityComment(Base, TimestampedMixin):
    post_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("community_post.id", ondelete="CASCADE"), index=True)
    user_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("user.id"), index=True)
    parent_comment_id: Mapped[uuid.UUID | None] = mapped_column(ForeignKey("community_comment.id"), nullable=True)
    content: Mapped[str] = mapped_column(Text)
    likes_count: Mapped[int] = mapped_column(Integer, default=0)

class CommunityLike(Base, CreatedMixin):
    __table_args__ = (
        UniqueConstraint("user_id", "post_id", name="uq_community_like_user_post"),
        UniqueConstraint("user_id", "comment_id", name="uq_community_like_user_comment"),
        CheckConstraint("(post_id IS NULL) <> (comment_id IS NULL)", name="ck_community_like_one_target"),
    )
    user_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("user.id", ondelete="CASCADE"))
    post_id: Mapped[uuid.UUID | None] = mapped_column(ForeignKey("community_post.id", ondelete="CASCADE"), nullable=True)
    comment_id: Mapped[uuid.UUID | None] = mapped_column(ForeignKey("community_comment.id", ondelete="CASCADE"), nullable=True)
