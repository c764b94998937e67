from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UserRecord(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: int
    username: str
    email: str
    is_admin: bool = Field(alias="isAdmin", strict=True)

    @field_validator("username")
    @classmethod
    def _username_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("username must not be empty")
        return value

    @property
    def admin_text(self) -> str:
        return "true" if self.is_admin else "false"

    @property
    def role_label(self) -> str:
        return "Admin" if self.is_admin else "User"


class SortField(str, Enum):
    ID = "id"
    USERNAME = "username"
    EMAIL = "email"
    IS_ADMIN = "is_admin"

    @property
    def label(self) -> str:
        return "Admin Status" if self is SortField.IS_ADMIN else self.value


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


class PageDirection(str, Enum):
    PREV = "prev"
    NEXT = "next"


@dataclass(frozen=True)
class SortConfiguration:
    field: SortField | None = None
    direction: SortDirection = SortDirection.ASC

    @property
    def is_active(self) -> bool:
        return self.field is not None


@dataclass
class PageState:
    current_page: int = 1
    page_size: int = 5


@dataclass(frozen=True)
class PageSlice:
    rows: tuple[UserRecord, ...]
    start_index: int
    end_index: int
    total_count: int
    total_pages: int


@dataclass(frozen=True)
class TableView:
    """Read-only snapshot handed to the presentation layer after each input."""

    visible_rows: tuple[UserRecord, ...]
    start_index: int
    end_index: int
    total_count: int
    current_page: int
    total_pages: int
    sort_configuration: SortConfiguration
    search_term: str = ""
    page_size: int = 5

    @property
    def is_empty(self) -> bool:
        return not self.visible_rows

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages
