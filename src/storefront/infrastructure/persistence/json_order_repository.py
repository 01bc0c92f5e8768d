"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from storefront.domain.model.order import Order, OrderItem, OrderStatus, PaymentStatus
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.json_file_store import JsonFileStore


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._store = JsonFileStore(file_path)

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> int:
        return self._next_id(self._store.read())

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._store.read():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def list_by_user(self, user_id: str) -> list[Order]:
        orders = [
            self._to_domain(raw)
            for raw in self._store.read()
            if raw["user_id"] == user_id
        ]
        orders.sort(key=lambda o: (o.created_at, o.id or 0), reverse=True)
        return orders

    def save(self, order: Order) -> None:
        # One locked write assigns the id and stores the order with its items.
        with self._store.update() as orders:
            if order.id is None:
                order.id = self._next_id(orders)

            for i, raw in enumerate(orders):
                if raw["id"] == order.id:
                    orders[i] = self._to_raw(order)
                    break
            else:
                orders.append(self._to_raw(order))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _next_id(orders: list[dict]) -> int:
        if not orders:
            return 1
        return max(o["id"] for o in orders) + 1

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "user_id": order.user_id,
            "status": order.status.value,
            "payment_status": order.payment_status.value,
            "payment_id": order.payment_id,
            "payment_method": order.payment_method,
            "currency": order.total.currency,
            "subtotal": str(order.subtotal.amount),
            "shipping": str(order.shipping.amount),
            "tax": str(order.tax.amount),
            "total": str(order.total.amount),
            "shipping_address": order.shipping_address,
            "billing_address": order.billing_address,
            "created_at": order.created_at.isoformat(),
            "updated_at": order.updated_at.isoformat(),
            "items": [
                {
                    "product_id": item.product_id,
                    "quantity": item.quantity.value,
                    "price": str(item.price.amount),
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        currency = raw.get("currency", "USD")

        def money(key: str) -> Money:
            return Money(Decimal(raw[key]), currency)

        items = tuple(
            OrderItem(
                product_id=i["product_id"],
                quantity=Quantity(i["quantity"]),
                price=Money(Decimal(i["price"]), currency),
            )
            for i in raw["items"]
        )
        return Order(
            id=raw["id"],
            user_id=raw["user_id"],
            items=items,
            subtotal=money("subtotal"),
            shipping=money("shipping"),
            tax=money("tax"),
            total=money("total"),
            shipping_address=raw["shipping_address"],
            billing_address=raw["billing_address"],
            payment_method=raw["payment_method"],
            status=OrderStatus(raw["status"]),
            payment_status=PaymentStatus(raw["payment_status"]),
            payment_id=raw.get("payment_id"),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )
