# -*- coding: utf-8 -*-
"""
Registration summary emails, sent through Resend.

Sending runs as a FastAPI background task: errors are logged and never
propagate back to the registration that triggered them.
"""

import html
import logging
from datetime import date
from typing import Iterable, Optional

import resend

from eventhub.config import settings

logger = logging.getLogger(__name__)

CONFIRMATION_SUBJECT = "Your Registration Confirmation"
UPDATE_SUBJECT = "Your Registration Has Been Updated"


def send_mail(to: str, subject: str, html_body: str) -> Optional[dict]:
    """Send one email. Returns the Resend response, or None when mail is disabled."""
    if not settings.RESEND_API_KEY:
        logger.warning(f"RESEND_API_KEY not set, email '{subject}' to {to} not sent")
        return None

    resend.api_key = settings.RESEND_API_KEY
    params = {
        "from": settings.MAIL_FROM,
        "to": [to],
        "subject": subject,
        "html": html_body,
    }
    response = resend.Emails.send(params)
    logger.info(f"Email '{subject}' sent to {to}")
    return response


def render_summary_html(name: Optional[str], registrations: Iterable[dict]) -> str:
    rows = "".join(
        f"""
          <tr>
            <td style="padding: 10px; border: 1px solid #ddd;">{html.escape(r.get('event') or '')}</td>
            <td style="padding: 10px; border: 1px solid #ddd;">{html.escape(r.get('date') or 'TBD')}</td>
            <td style="padding: 10px; border: 1px solid #ddd;">{html.escape(r.get('time') or 'TBD')}</td>
            <td style="padding: 10px; border: 1px solid #ddd;">{html.escape(r.get('topic') or '')}</td>
          </tr>"""
        for r in registrations
    )
    contact = html.escape(settings.CONTACT_EMAIL)

    return f"""
<div style="font-family: Arial, sans-serif; max-width: 600px; margin: auto; border: 1px solid #eee; border-radius: 10px; background: #fff;">
  <div style="padding: 32px 24px 24px 24px;">
    <h2 style="color: #2563eb; text-align: center;">Registration Confirmed!</h2>
    <p>Dear <b>{html.escape(name or 'Participant')}</b>,</p>
    <p>Thank you for registering for our event. Below are your confirmed topics and schedule:</p>
    <table style="width: 100%; border-collapse: collapse; margin: 24px 0 16px 0;">
      <thead>
        <tr style="background: #e0e7ff;">
          <th style="padding: 10px; border: 1px solid #ddd; text-align: left;">Event</th>
          <th style="padding: 10px; border: 1px solid #ddd; text-align: left;">Date</th>
          <th style="padding: 10px; border: 1px solid #ddd; text-align: left;">Time</th>
          <th style="padding: 10px; border: 1px solid #ddd; text-align: left;">Topic</th>
        </tr>
      </thead>
      <tbody>{rows}
      </tbody>
    </table>
    <p>If you have any questions, please contact us at <a href="mailto:{contact}">{contact}</a>.</p>
    <p>We look forward to seeing you at the event!</p>
  </div>
  <div style="background: #2563eb; color: #fff; text-align: center; padding: 14px 0; font-size: 13px;">
    &copy; {date.today().year} Event Hub
  </div>
</div>
"""


def send_summary_mail(to: str, name: Optional[str], registrations: list, is_update: bool = False) -> None:
    """
    Background task: render and send the registration summary.
    Failures are only logged.
    """
    subject = UPDATE_SUBJECT if is_update else CONFIRMATION_SUBJECT
    try:
        send_mail(to, subject, render_summary_html(name, registrations))
    except Exception as e:
        logger.error(f"Failed to send summary email to {to}: {e}", exc_info=True)
