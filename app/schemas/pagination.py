from typing import Generic, TypeVar

from app.schemas.base import CamelModel

T = TypeVar("T")


class Page(CamelModel, Generic[T]):
    """Zero-based page envelope"""
    content: list[T]
    total_elements: int
    total_pages: int
    number: int
    size: int
    number_of_elements: int
    first: bool
    last: bool
    empty: bool

    @classmethod
    def build(cls, content: list[T], *, total: int, page: int, size: int) -> "Page[T]":
        total_pages = (total + size - 1) // size if size else 0
        return cls(
            content=content,
            total_elements=total,
            total_pages=total_pages,
            number=page,
            size=size,
            number_of_elements=len(content),
            first=page == 0,
            last=page + 1 >= total_pages,
            empty=not content,
        )
