"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from cafe.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def get_by_number(self, number: int) -> Order | None:
        """Return an order by its number, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order, in the order they were placed."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new or updated order.

        A new order (``number is None``) is given the next sequential
        number before it is stored.
        """
