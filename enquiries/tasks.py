import logging

from celery import shared_task
from django.conf import settings
from django.core.mail import send_mail

from .models import Enquiry

logger = logging.getLogger(__name__)


def build_notification(enquiry):
    subject = f"New enquiry from {enquiry.client_name}: {enquiry.project_name}"
    links = "\n".join(f"  - {link}" for link in enquiry.links) or "  (none)"
    message = (
        f"Client: {enquiry.client_name}\n"
        f"Project: {enquiry.project_name}\n"
        f"Phone: {enquiry.phone}\n"
        f"Budget: {enquiry.budget:g}\n"
        f"Submitted: {enquiry.created_at:%Y-%m-%d %H:%M} UTC\n"
        f"Links:\n{links}\n\n"
        f"{enquiry.description}\n"
    )
    return subject, message


@shared_task(bind=True, max_retries=3, default_retry_delay=60)
def notify_new_enquiry(self, enquiry_id):
    """Email the site owner about a new enquiry. Returns the number of messages sent."""
    recipients = settings.ENQUIRY_NOTIFY_TO
    if not recipients:
        return 0

    try:
        enquiry = Enquiry.objects.get(pk=enquiry_id)
    except Enquiry.DoesNotExist:
        logger.warning(f"Enquiry {enquiry_id} was deleted before its notification was sent")
        return 0

    subject, message = build_notification(enquiry)
    try:
        sent = send_mail(
            subject=subject,
            message=message,
            from_email=settings.DEFAULT_FROM_EMAIL,
            recipient_list=recipients,
            fail_silently=False,
        )
    except Exception as e:
        logger.error(f"Error sending notification for enquiry {enquiry_id}: {e}", exc_info=True)
        raise self.retry(exc=e)

    logger.info(f"Notification for enquiry {enquiry_id} sent to {len(recipients)} recipient(s)")
    return sent
