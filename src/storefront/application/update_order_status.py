"""Application service: Update Order Status use case.

Only the status moves; items and amounts of a placed order never change.
The target status is validated before the order is looked up, so an
invalid status is rejected even for unknown orders.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import OrderDTO
from storefront.application.show_order import to_order_dto
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.order import parse_assignable_status
from storefront.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


class UpdateOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int, status: str) -> OrderDTO:
        new_status = parse_assignable_status(status)

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        previous = order.status
        order.change_status(new_status)
        self._order_repo.save(order)
        logger.info(
            "order.status_changed",
            order_id=order_id,
            previous=previous.value,
            status=new_status.value,
        )
        return to_order_dto(order)
