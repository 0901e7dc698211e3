from html import escape
from typing import Any, Dict, Tuple

from ..core.logging import logger
from .mailer import email_service


def _e(value: Any) -> str:
    return escape(str(value or ""))


def render_thank_you(event: Dict[str, Any], task: Dict[str, Any], volunteer: Dict[str, Any]) -> Tuple[str, str]:
    """Subject and HTML body thanking a volunteer for signing up."""
    subject = f"Thank you for volunteering - {event.get('name', '')}"
    html = f"""
<h2>Thank you for volunteering!</h2>
<p>Dear {_e(volunteer.get('name'))},</p>
<p>Thank you for signing up to help with <strong>{_e(event.get('name'))}</strong>!</p>
<p><strong>Event Details:</strong></p>
<ul>
    <li><strong>Date:</strong> {_e(event.get('date'))}</li>
    <li><strong>Time:</strong> {_e(event.get('time'))}</li>
    <li><strong>Your Task:</strong> {_e(task.get('name'))}</li>
</ul>
<p>{_e(event.get('description'))}</p>
<p>We'll send you more details as the event approaches. Thank you for your commitment to our club!</p>
<p>Best regards,<br>Club Event Organizers</p>
"""
    return subject, html


def _roster_line(volunteer: Dict[str, Any]) -> str:
    line = f"{_e(volunteer.get('name'))} - {_e(volunteer.get('email'))}"
    if volunteer.get("phone"):
        line += f" - {_e(volunteer['phone'])}"
    if volunteer.get("notes"):
        line += f" - Notes: {_e(volunteer['notes'])}"
    return f"<li>{line}</li>"


def render_roster(event: Dict[str, Any], task: Dict[str, Any], volunteer: Dict[str, Any]) -> Tuple[str, str]:
    """Subject and HTML body giving the organizer the full current roster."""
    subject = f"Volunteer Roster Update - {event.get('name', '')}"

    sections = []
    for t in event.get("tasks") or []:
        roster = t.get("volunteers") or []
        section = f"<h4>{_e(t.get('name'))} ({len(roster)}/{t.get('needed', 0)})</h4>\n"
        if roster:
            section += "<ul>\n" + "\n".join(_roster_line(v) for v in roster) + "\n</ul>"
        else:
            section += "<p>No volunteers yet</p>"
        sections.append(section)

    html = f"""
<h2>New Volunteer Signup - {_e(event.get('name'))}</h2>
<p><strong>New Volunteer:</strong> {_e(volunteer.get('name'))} ({_e(volunteer.get('email'))})</p>
<p><strong>Task:</strong> {_e(task.get('name'))}</p>
<p><strong>Signup Time:</strong> {_e(volunteer.get('signupTime'))}</p>

<h3>Complete Current Roster:</h3>
{chr(10).join(sections)}
"""
    return subject, html


def notify_signup(event: Dict[str, Any], task: Dict[str, Any], volunteer: Dict[str, Any]) -> int:
    """Email the volunteer and, when configured, the organizer. Returns messages delivered."""
    delivered = 0

    subject, html = render_thank_you(event, task, volunteer)
    if email_service.send_email(volunteer.get("email", ""), subject, html):
        delivered += 1
    else:
        logger.warning(f"Thank-you email not delivered to {volunteer.get('email')}")

    organizer_email = event.get("organizerEmail")
    if organizer_email:
        subject, html = render_roster(event, task, volunteer)
        if email_service.send_email(organizer_email, subject, html):
            delivered += 1
        else:
            logger.warning(f"Roster update not delivered to {organizer_email}")

    return delivered
