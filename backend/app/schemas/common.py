from typing import Optional

from pydantic import BaseModel, Field

from backend.app.queries.assembler import Pagination


class PageQuery(BaseModel):
    page: Optional[int] = Field(None, ge=1)
    limit: Optional[int] = Field(None, ge=1)

    def pagination(self) -> Pagination:
        return Pagination.from_query(self.page, self.limit)


class MessageResponse(BaseModel):
    status: int = 200
    message: str


def contains(value: Optional[str], lower: bool = False) -> Optional[str]:
    """Wrap a search term in LIKE wildcards; ``None`` stays absent."""
    if value is None:
        return None
    if lower:
        value = value.lower()
    return f"%{value}%"

