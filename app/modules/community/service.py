import logging
import uuid
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.clock import Clock
from app.core.errors import InvalidArgument, NotFound
from app.core.paging import Page, page_offset
from app.modules.community.repository import PostRepository, CommentRepository, LikeRepository
from app.modules.community.schemas import (
    CommentCreate, CommentOut, LikeResult, PostCreate, PostDetail, PostOut
)
from app.modules.community.views import build_comment, build_post, build_post_detail
from app.modules.users.models import User
from app.modules.users.repository import UserRepository

logger = logging.getLogger(__name__)

class CommunityService:
    def __init__(self, session: AsyncSession, clock: Clock):
        self.session = session
        self.clock = clock
        self.posts = PostRepository(session, clock)
        self.comments = CommentRepository(session, clock)
        self.likes = LikeRepository(session, clock)
        self.users = UserRepository(session, clock)

    async def _active_user(self, user_id: uuid.UUID) -> User:
        user = await self.users.get_active(user_id)
        if not user:
            raise InvalidArgument("Invalid user")
        return user

    # Posts
    async def list_posts(
        self,
        *,
        category: str | None = None,
        search: str | None = None,
        page: int = 1,
        page_size: int = 10,
    ) -> Page[PostOut]:
        posts, total = await self.posts.list_posts(
            category=category,
            search=search,
            offset=page_offset(page, page_size),
            limit=page_size,
        )
        authors = await self.users.get_many(p.user_id for p in posts)
        items = [build_post(p, authors[p.user_id]) for p in posts]
        return Page[PostOut].build(items, total, page, page_size)

    async def get_post(self, post_id: uuid.UUID) -> PostDetail:
        post = await self.posts.get_active(post_id)
        if not post:
            raise NotFound("Post")
        comments = await self.comments.list_for_post(post_id)
        authors = await self.users.get_many([post.user_id] + [c.user_id for c in comments])
        return build_post_detail(post, comments, authors)

    async def create_post(self, payload: PostCreate) -> PostOut:
        author = await self._active_user(payload.user_id)
        post = await self.posts.create(**payload.model_dump())
        await self.session.commit()
        logger.info(f"Created post {post.id} by user {author.id}")
        return build_post(post, author)

    # Comments
    async def add_comment(self, post_id: uuid.UUID, payload: CommentCreate) -> CommentOut:
        post = await self.posts.get_active(post_id)
        if not post:
            raise NotFound("Post")
        author = await self._active_user(payload.user_id)
        if payload.parent_comment_id is not None:
            parent = await self.comments.get_active(payload.parent_comment_id)
            if not parent or parent.post_id != post_id:
                raise InvalidArgument("Invalid parent comment")
        comment = await self.comments.create(post_id=post_id, **payload.model_dump())
        post.comments_count += 1
        await self.session.commit()
        logger.info(f"Added comment {comment.id} to post {post_id}")
        return build_comment(comment, author)

    # Likes
    async def toggle_like(
        self,
        user_id: uuid.UUID,
        *,
        post_id: uuid.UUID | None = None,
        comment_id: uuid.UUID | None = None,
    ) -> LikeResult:
        """Like the target, or remove an existing like. Counters never drop below zero."""
        if (post_id is None) == (comment_id is None):
            raise InvalidArgument("A like must target exactly one post or comment")
        if post_id is not None:
            target = await self.posts.get_active(post_id)
            if not target:
                raise NotFound("Post")
        else:
            target = await self.comments.get_active(comment_id)
            if not target:
                raise NotFound("Comment")
        await self._active_user(user_id)

        existing = await self.likes.find(user_id, post_id=post_id, comment_id=comment_id)
        if existing:
            await self.likes.delete(existing)
            target.likes_count = max(0, target.likes_count - 1)
            liked = False
        else:
            await self.likes.create(user_id=user_id, post_id=post_id, comment_id=comment_id)
            target.likes_count += 1
            liked = True
        await self.session.commit()
        return LikeResult(liked=liked, likes_count=target.likes_count)
