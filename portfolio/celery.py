"""
Celery application for background work such as new-enquiry emails.

Configuration comes from the Django settings under the ``CELERY_`` prefix. In
tests (or with ``CELERY_TASK_ALWAYS_EAGER``) tasks run inline in the caller.
"""

import os

from celery import Celery

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "portfolio.settings")

app = Celery("portfolio")
app.config_from_object("django.conf:settings", namespace="CELERY")

# run workers with `-Q notifications,celery` to consume both queues
app.conf.task_routes = {
    "enquiries.tasks.*": {"queue": os.environ.get("CELERY_NOTIFY_QUEUE", "notifications")},
}

app.autodiscover_tasks()
