from django.db import models
from django.utils import timezone


class SoftDeleteQuerySet(models.QuerySet):
    def delete(self):
        """Marca las filas como borradas en un solo UPDATE; nunca las elimina.

        Devuelve el número de filas afectadas (no la tupla de QuerySet.delete).
        """
        now = timezone.now()
        return self.update(deleted_at=now, updated_at=now)


class SoftDeleteManager(models.Manager.from_queryset(SoftDeleteQuerySet)):
    """Manager por defecto: solo filas con deleted_at IS NULL."""

    def get_queryset(self):
        return super().get_queryset().filter(deleted_at__isnull=True)


class SoftDeleteModel(models.Model):
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    deleted_at = models.DateTimeField(null=True, blank=True)

    objects = SoftDeleteManager()
    all_objects = SoftDeleteQuerySet.as_manager()  # incluye borrados

    class Meta:
        abstract = True

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    # Devuelve un int con las filas marcadas, no la tupla (count, {label: count}) de Django
    def delete(self, using=None, keep_parents=False):
        now = timezone.now()
        count = (
            type(self).all_objects.using(using or self._state.db)
            .filter(pk=self.pk, deleted_at__isnull=True)
            .update(deleted_at=now, updated_at=now)
        )
        if count:
            self.deleted_at = now
            self.updated_at = now
        return count


class Review(SoftDeleteModel):
    content = models.TextField()
    rating = models.IntegerField()

    class Meta:
        db_table = "reviews"

    def __str__(self):
        return f"Review #{self.id}:{self.rating}"


class Order(SoftDeleteModel):
    order_number = models.CharField(max_length=64)
    # Sin cascada en ningún sentido; review_id queda apuntando a la review borrada
    review = models.OneToOneField(
        Review,
        on_delete=models.DO_NOTHING,
        null=True,
        blank=True,
        related_name="+",
    )

    class Meta:
        db_table = "orders"

    def __str__(self):
        return f"{self.order_number}:{self.review_id}"

    @property
    def active_review(self):
        review = self.review
        if review is None or review.is_deleted:
            return None
        return review
