"""Lecturas SQL directas que ignoran el filtro de soft-delete.

Sirven para ver el estado físico de las filas (deleted_at, review_id)
después de cada operación. Las columnas de fecha se devuelven como
datetime aware (UTC), igual que por el ORM, aunque el driver (sqlite)
las entregue como texto o naive.
"""
import logging
from datetime import timezone as dt_timezone

from django.conf import settings
from django.db import connection
from django.utils import timezone
from django.utils.dateparse import parse_datetime

from .models import Order, Review

logger = logging.getLogger(__name__)

_TABLES = {
    Order._meta.db_table: Order,
    Review._meta.db_table: Review,
}

_TIMESTAMP_COLUMNS = ("created_at", "updated_at", "deleted_at")


def _to_datetime(value):
    if isinstance(value, str):
        value = parse_datetime(value)
    if value is not None and settings.USE_TZ and timezone.is_naive(value):
        value = timezone.make_aware(value, dt_timezone.utc)
    return value


def _dictfetchall(cursor) -> list[dict]:
    columns = [col[0] for col in cursor.description]
    rows = [dict(zip(columns, row)) for row in cursor.fetchall()]
    for row in rows:
        for column in _TIMESTAMP_COLUMNS:
            if column in row:
                row[column] = _to_datetime(row[column])
    return rows


def fetch_rows(table: str, active_only: bool = False) -> list[dict]:
    if table not in _TABLES:
        raise ValueError(f"tabla desconocida: {table}")

    sql = f"SELECT * FROM {table}"
    if active_only:
        sql += " WHERE deleted_at IS NULL"
    sql += " ORDER BY id"

    with connection.cursor() as cursor:
        cursor.execute(sql)
        return _dictfetchall(cursor)


def _fetch_row(table: str, pk) -> dict | None:
    with connection.cursor() as cursor:
        cursor.execute(f"SELECT * FROM {table} WHERE id = %s", [pk])
        rows = _dictfetchall(cursor)
    return rows[0] if rows else None


def fetch_order_row(order_id) -> dict | None:
    return _fetch_row(Order._meta.db_table, order_id)


def fetch_review_row(review_id) -> dict | None:
    return _fetch_row(Review._meta.db_table, review_id)


def log_state(order_id, review_id) -> None:
    order_row = fetch_order_row(order_id)
    review_row = fetch_review_row(review_id)
    logger.info(f"Order({order_id}) en BD: {order_row}")
    logger.info(f"Review({review_id}) en BD: {review_row}")
