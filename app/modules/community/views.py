from collections import defaultdict
from app.modules.community.schemas import CommentNode, CommentOut, PostDetail, PostOut
from app.modules.users.schemas import UserSummary

def _post_fields(post) -> dict:
    return {
        "id": post.id,
        "title": post.title,
        "content": post.content,
        "category": post.category,
        "tags": post.tags,
        "image_urls": post.image_urls,
        "likes_count": post.likes_count,
        "comments_count": post.comments_count,
        "created_at": post.created_at,
        "updated_at": post.updated_at,
    }

def build_post(post, author) -> PostOut:
    return PostOut(**_post_fields(post), author=UserSummary.model_validate(author))

def build_comment(comment, author) -> CommentOut:
    return CommentOut(
        id=comment.id,
        content=comment.content,
        likes_count=comment.likes_count,
        created_at=comment.created_at,
        parent_comment_id=comment.parent_comment_id,
        author=UserSummary.model_validate(author),
    )

def build_post_detail(post, comments, authors: dict) -> PostDetail:
    """Rebuild the comment tree from a flat, creation-ordered list.

    Top-level comments carry their direct replies; deeper replies are not shown.
    """
    replies = defaultdict(list)
    for c in comments:
        if c.parent_comment_id is not None:
            replies[c.parent_comment_id].append(c)
    nodes = [
        CommentNode(
            **build_comment(c, authors[c.user_id]).model_dump(),
            replies=[build_comment(r, authors[r.user_id]) for r in replies[c.id]],
        )
        for c in comments
        if c.parent_comment_id is None
    ]
    return PostDetail(**_post_fields(post), author=UserSummary.model_validate(authors[post.user_id]), comments=nodes)
