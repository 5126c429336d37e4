"""Transactional email through the Resend HTTP API."""

import html
import logging

import requests

from jobboard.config import settings

logger = logging.getLogger(__name__)


def send_email(to: str, subject: str, html_body: str) -> tuple[bool, str]:
    """
    Attempt one delivery. Returns (ok, error_message); never raises.
    Missing configuration is reported as a failure, not an exception.
    """
    if not settings.resend_api_key:
        logger.error("RESEND_API_KEY is not set; cannot send email")
        return False, "Missing RESEND_API_KEY"
    if not settings.send_email_from:
        logger.error("SEND_EMAIL_FROM is not set; cannot send email")
        return False, "Missing SEND_EMAIL_FROM"
    if not to or not subject:
        return False, "Missing required fields: to or subject"

    try:
        r = requests.post(
            settings.email_api_url,
            json={"from": settings.send_email_from, "to": [to], "subject": subject, "html": html_body},
            headers={"Authorization": f"Bearer {settings.resend_api_key}"},
            timeout=settings.http_timeout_seconds,
        )
        r.raise_for_status()
    except requests.RequestException as e:
        logger.warning("Email send to %s failed: %s", to, e)
        return False, str(e)
    logger.info("Email sent to %s: %s", to, subject)
    return True, ""


def application_confirmation_html(applicant_name: str, job_title: str) -> str:
    name = html.escape(applicant_name or "")
    title = html.escape(job_title or "")
    return (
        f"<p>Dear {name},</p>"
        f"<p>Thank you for applying to the {title} position. "
        "We have received your application and will review it shortly.</p>"
        "<p>Best regards,<br>The Hiring Team</p>"
    )


def send_application_confirmation(to: str, applicant_name: str, job_title: str) -> tuple[bool, str]:
    return send_email(
        to,
        f"Application Submitted for {job_title}",
        application_confirmation_html(applicant_name, job_title),
    )
