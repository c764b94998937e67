from .config import ConfigError, TableConfig, load_config
from .exceptions import ApiError, NotFoundError, RateLimitError, RecordSourceError, ServerError, TransportError, ValidationError
from .filtering import filter_records, matches_search
from .http_client import HttpClient
from .memo import LastCallMemo
from .models import (
    PageDirection,
    PageSlice,
    PageState,
    SortConfiguration,
    SortDirection,
    SortField,
    TableView,
    UserRecord,
)
from .pagination import next_page, paginate, prev_page, total_pages_for
from .record_source import (
    HttpRecordSource,
    RecordSource,
    StaticRecordSource,
    build_record_source,
    load_records,
    sample_source,
)
from .sorting import sort_records, toggle_sort
from .table_store import UserTableStore

__all__ = [
    "ApiError",
    "ConfigError",
    "HttpClient",
    "HttpRecordSource",
    "LastCallMemo",
    "NotFoundError",
    "PageDirection",
    "PageSlice",
    "PageState",
    "RateLimitError",
    "RecordSource",
    "RecordSourceError",
    "ServerError",
    "SortConfiguration",
    "SortDirection",
    "SortField",
    "StaticRecordSource",
    "TableConfig",
    "TableView",
    "TransportError",
    "UserRecord",
    "UserTableStore",
    "ValidationError",
    "build_record_source",
    "filter_records",
    "load_config",
    "load_records",
    "matches_search",
    "next_page",
    "paginate",
    "prev_page",
    "sample_source",
    "sort_records",
    "toggle_sort",
    "total_pages_for",
]
