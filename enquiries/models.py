from django.db import models
from django.utils import timezone


class Enquiry(models.Model):
    client_name = models.CharField(max_length=255)
    project_name = models.CharField(max_length=255)
    phone = models.CharField(max_length=15)
    description = models.TextField()
    budget = models.FloatField()
    links = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(default=timezone.now, editable=False, db_index=True)

    class Meta:
        ordering = ["-created_at", "-id"]
        verbose_name_plural = "enquiries"

    def __str__(self):
        return f"Enquiry from {self.client_name} ({self.project_name})"
