import math
from typing import Callable, Optional, TypeVar

import attrs

from src.platform.config.core_setting import Settings, settings
from src.service.ticket.app.dto.paging import PaginatedResult, Pagination, TicketEntityPage
from src.service.ticket.domain.entity.ticket_entity import TicketEntity


_T = TypeVar('_T')


@attrs.define(frozen=True)
class PaginationDefaults:
    page: int = 1
    limit: int = 10

    @classmethod
    def from_settings(cls, config: Optional[Settings] = None) -> 'PaginationDefaults':
        config = config or settings
        return cls(page=config.PAGINATION_DEFAULT_PAGE, limit=config.PAGINATION_DEFAULT_LIMIT)

    def page_or_default(self, page: Optional[int]) -> int:
        # Missing, zero and negative pages all mean "the first page"
        return page if page is not None and page >= 1 else self.page

    def limit_or_default(self, limit: Optional[int]) -> int:
        return limit if limit is not None and limit >= 1 else self.limit


class PaginationAggregator:
    """Turns a persistence page into a client page with consistent paging numbers."""

    def __init__(self, defaults: PaginationDefaults) -> None:
        self.defaults = defaults

    def resolve(self, pagination: Optional[Pagination]) -> Pagination:
        pagination = pagination or Pagination()
        return attrs.evolve(
            pagination,
            page=self.defaults.page_or_default(pagination.page),
            limit=self.defaults.limit_or_default(pagination.limit),
        )

    def aggregate(
        self,
        *,
        result: TicketEntityPage,
        requested: Optional[Pagination],
        convert: Callable[[TicketEntity], _T],
    ) -> PaginatedResult[_T]:
        resolved = self.resolve(requested)
        page = result.page if result.page and result.page >= 1 else resolved.page
        limit = result.limit if result.limit and result.limit >= 1 else resolved.limit
        return PaginatedResult(
            items=[convert(ticket) for ticket in result.tickets],
            total=result.total,
            page=page,
            limit=limit,
            total_pages=math.ceil(result.total / limit),
        )
