import uuid
from typing import Sequence
from sqlalchemy import select, or_
from app.core.repository import Repository, SoftDeleteRepository, icontains
from app.modules.community.models import CommunityPost, CommunityComment, CommunityLike

class PostRepository(SoftDeleteRepository[CommunityPost]):
    model = CommunityPost

    async def list_posts(
        self,
        *,
        category: str | None = None,
        search: str | None = None,
        offset: int = 0,
        limit: int | None = None,
    ) -> tuple[Sequence[CommunityPost], int]:
        conditions = []
        if category:
            conditions.append(CommunityPost.category == category)
        if search:
            conditions.append(or_(icontains(CommunityPost.title, search), icontains(CommunityPost.content, search)))
        return await self.list_active(
            *conditions,
            order_by=(CommunityPost.created_at.desc(),),
            offset=offset,
            limit=limit,
        )

class CommentRepository(SoftDeleteRepository[CommunityComment]):
    model = CommunityComment

    async def list_for_post(self, post_id: uuid.UUID) -> Sequence[CommunityComment]:
        items, _ = await self.list_active(
            CommunityComment.post_id == post_id,
            order_by=(CommunityComment.created_at.asc(),),
        )
        return items

class LikeRepository(Repository[CommunityLike]):
    model = CommunityLike

    async def find(
        self,
        user_id: uuid.UUID,
        *,
        post_id: uuid.UUID | None = None,
        comment_id: uuid.UUID | None = None,
    ) -> CommunityLike | None:
        q = select(CommunityLike).where(CommunityLike.user_id == user_id)
        if post_id is not None:
            q = q.where(CommunityLike.post_id == post_id)
        else:
            q = q.where(CommunityLike.comment_id == comment_id)
        res = await self.session.execute(q)
        return res.scalar_one_or_none()
