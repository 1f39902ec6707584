from datetime import date
from pydantic import Field
from app.modules.children.schemas import ChildSummary
from app.modules.users.schemas import UserOut

class UserDetail(UserOut):
    children: list[ChildSummary] = Field(default_factory=list)

def build_user_detail(user, children, today: date) -> UserDetail:
    return UserDetail(
        **UserOut.model_validate(user).model_dump(),
        children=[ChildSummary.of(c, today) for c in children],
    )
