import logging
import smtplib

from django.conf import settings
from django.core.mail import BadHeaderError, send_mail

logger = logging.getLogger(__name__)


def meeting_link(call):
    return f"{settings.MEETING_BASE_URL.rstrip('/')}/meeting/{call.id}"


def send_meeting_invite(call, emails):
    """
    Email the meeting link to each address.

    Returns False when nothing was sent. Delivery errors are logged and
    reported through the return value; the call itself is left as is.
    """
    if not emails:
        return False

    link = meeting_link(call)
    starts = call.starts_at.strftime("%A %d %B %Y, %H:%M %Z").strip()
    message = "\n".join([
        "You have been invited to a meeting.",
        "",
        f"What: {call.description}",
        f"When: {starts}",
        f"Join: {link}",
    ])
    try:
        send_mail(
            subject=f"Invitation: {call.title or call.description}",
            message=message,
            from_email=settings.DEFAULT_FROM_EMAIL,
            recipient_list=list(emails),
            fail_silently=False,
        )
    except (smtplib.SMTPException, OSError, BadHeaderError):
        logger.exception("Failed to send invite for call %s to %s", call.id, ", ".join(emails))
        return False

    logger.info("Invite sent for call %s to %d recipient(s)", call.id, len(emails))
    return True
