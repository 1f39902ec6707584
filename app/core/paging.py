import math
from typing import Generic, TypeVar
from app.core.schemas import ApiModel

T = TypeVar("T")

def page_offset(page: int, page_size: int) -> int:
    return (page - 1) * page_size

def total_pages(total_count: int, page_size: int) -> int:
    if page_size <= 0:
        return 0
    return math.ceil(total_count / page_size)

class Page(ApiModel, Generic[T]):
    items: list[T]
    total_count: int
    page: int
    page_size: int
    total_pages: int

    @classmethod
    def build(cls, items: list, total_count: int, page: int, page_size: int) -> "Page[T]":
        return cls(
            items=items,
            total_count=total_count,
            page=page,
            page_size=page_size,
            total_pages=total_pages(total_count, page_size),
        )
