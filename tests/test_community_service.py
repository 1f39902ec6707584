import uuid
from datetime import timedelta

import pytest

from app.core.errors import InvalidArgument, NotFound
from app.modules.community.schemas import CommentCreate, PostCreate
from app.modules.community.service import CommunityService


@pytest.fixture
def service(session, clock):
    return CommunityService(session, clock)


async def test_create_and_list_posts_newest_first(service, factory, clock):
    user = await factory.user()
    first = await service.create_post(PostCreate(user_id=user.id, title="Sleep regression", content="Help",
                                                 category="Sleep", tags=["sleep", "4 months"]))
    clock.at += timedelta(minutes=1)
    second = await service.create_post(PostCreate(user_id=user.id, title="Weaning", content="Purees?",
                                                  category="Nutrition"))

    page = await service.list_posts()
    assert [p.id for p in page.items] == [second.id, first.id]
    assert page.items[1].tags == ["sleep", "4 months"]
    assert page.items[0].author.id == user.id

    assert [p.id for p in (await service.list_posts(category="Sleep")).items] == [first.id]
    assert [p.id for p in (await service.list_posts(search="PUREE")).items] == [second.id]


async def test_create_post_requires_active_user(service):
    with pytest.raises(InvalidArgument):
        await service.create_post(PostCreate(user_id=uuid.uuid4(), title="x", content="y"))


async def test_comments_build_a_tree_and_count(service, factory, clock):
    author = await factory.user()
    reader = await factory.user()
    post = await factory.post(author)

    top = await service.add_comment(post.id, CommentCreate(user_id=reader.id, content="Try a routine"))
    clock.at += timedelta(minutes=1)
    reply = await service.add_comment(
        post.id, CommentCreate(user_id=author.id, content="Thanks!", parent_comment_id=top.id)
    )

    detail = await service.get_post(post.id)
    assert detail.comments_count == 2
    assert [c.id for c in detail.comments] == [top.id]
    assert [r.id for r in detail.comments[0].replies] == [reply.id]
    assert detail.comments[0].author.id == reader.id


async def test_reply_must_belong_to_same_post(service, factory):
    user = await factory.user()
    post = await factory.post(user)
    other_post = await factory.post(user)
    foreign = await factory.comment(other_post, user)
    with pytest.raises(InvalidArgument, match="Invalid parent comment"):
        await service.add_comment(post.id, CommentCreate(user_id=user.id, content="x", parent_comment_id=foreign.id))


async def test_comment_on_missing_post(service, factory):
    user = await factory.user()
    with pytest.raises(NotFound):
        await service.add_comment(uuid.uuid4(), CommentCreate(user_id=user.id, content="x"))


async def test_like_toggles(service, factory):
    author = await factory.user()
    fan = await factory.user()
    post = await factory.post(author)

    liked = await service.toggle_like(fan.id, post_id=post.id)
    assert (liked.liked, liked.likes_count) == (True, 1)
    other = await service.toggle_like(author.id, post_id=post.id)
    assert other.likes_count == 2
    unliked = await service.toggle_like(fan.id, post_id=post.id)
    assert (unliked.liked, unliked.likes_count) == (False, 1)


async def test_comment_like_and_counter_floor(service, factory):
    user = await factory.user()
    post = await factory.post(user)
    comment = await factory.comment(post, user)

    assert (await service.toggle_like(user.id, comment_id=comment.id)).likes_count == 1
    # out-of-band drift must not push the counter negative
    comment.likes_count = 0
    await factory.session.commit()
    result = await service.toggle_like(user.id, comment_id=comment.id)
    assert (result.liked, result.likes_count) == (False, 0)


async def test_like_target_validation(service, factory):
    user = await factory.user()
    post = await factory.post(user)
    comment = await factory.comment(post, user)
    with pytest.raises(InvalidArgument):
        await service.toggle_like(user.id)
    with pytest.raises(InvalidArgument):
        await service.toggle_like(user.id, post_id=post.id, comment_id=comment.id)
    with pytest.raises(NotFound):
        await service.toggle_like(user.id, post_id=uuid.uuid4())
    with pytest.raises(NotFound):
        await service.toggle_like(user.id, comment_id=uuid.uuid4())
    with pytest.raises(InvalidArgument, match="Invalid user"):
        await service.toggle_like(uuid.uuid4(), post_id=post.id)
