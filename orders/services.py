"""
Operaciones sobre pares Order/Review.

Cada operación corre en su propia transacción corta. Los borrados son
soft-delete (UPDATE de deleted_at) y nunca se propagan al otro lado de la
relación: borrar la Review deja el review_id de la Order apuntando a ella.
"""
import logging
import time

from django.db import transaction

from .exceptions import NotFound
from .models import Order, Review

logger = logging.getLogger(__name__)

SAMPLE_CONTENT = "good prod"
SAMPLE_RATING = 10


def _order_number() -> str:
    return f"ORD-{int(time.time() * 1000)}"


def create_order_with_review() -> tuple[int, int]:
    with transaction.atomic():
        review = Review.objects.create(content=SAMPLE_CONTENT, rating=SAMPLE_RATING)
        order = Order.objects.create(order_number=_order_number(), review=review)

    logger.info(f"Order {order.id} ({order.order_number}) creada con Review {review.id}")
    return order.id, review.id


def _soft_delete(model, pk) -> None:
    # UPDATE atómico; 0 filas = no existe o ya estaba borrada
    deleted = model.objects.filter(pk=pk).delete()
    if not deleted:
        logger.warning(f"{model.__name__} {pk} no encontrada para borrar")
        raise NotFound(model.__name__, pk)
    logger.info(f"{model.__name__} {pk} marcada como borrada")


def delete_order(order_id: int) -> None:
    with transaction.atomic():
        _soft_delete(Order, order_id)


def delete_review(review_id: int) -> None:
    with transaction.atomic():
        _soft_delete(Review, review_id)


def delete_order_then_review(order_id: int, review_id: int) -> None:
    with transaction.atomic():
        _soft_delete(Order, order_id)
        _soft_delete(Review, review_id)


def delete_review_then_order(order_id: int, review_id: int) -> None:
    with transaction.atomic():
        _soft_delete(Review, review_id)
        _soft_delete(Order, order_id)


def get_order(order_id: int) -> Order:
    try:
        return Order.objects.get(pk=order_id)
    except Order.DoesNotExist:
        raise NotFound("Order", order_id)


def get_review(review_id: int) -> Review:
    try:
        return Review.objects.get(pk=review_id)
    except Review.DoesNotExist:
        raise NotFound("Review", review_id)
