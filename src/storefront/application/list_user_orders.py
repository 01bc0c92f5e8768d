"""Application service: List User Orders use case (query)."""

from __future__ import annotations

from storefront.application.dto import OrderPageDTO, Pagination, validate_paging
from storefront.application.show_order import to_order_dto
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.user_repository import UserRepository


class ListUserOrdersHandler:

    def __init__(self, order_repo: OrderRepository, user_repo: UserRepository) -> None:
        self._order_repo = order_repo
        self._user_repo = user_repo

    def handle(self, user_id: str, page: int = 1, limit: int = 10) -> OrderPageDTO:
        """Return one page of a user's orders, newest first."""
        validate_paging(page, limit)
        if self._user_repo.get_by_id(user_id) is None:
            raise EntityNotFoundError("User not found")

        orders = self._order_repo.list_by_user(user_id)
        start = (page - 1) * limit
        return OrderPageDTO(
            orders=[to_order_dto(o) for o in orders[start:start + limit]],
            pagination=Pagination.of(page, limit, len(orders)),
        )
