"""
Plain-text bodies for outgoing notifications.
"""

from config import ApplicationConfig

PRODUCT_NAME = "Black Belt Platform"

REMINDER_SUBJECTS = {
    1: "Reminder: your COPSOQ-II assessment is pending",
    2: "Second reminder: your COPSOQ-II assessment",
    3: "Your COPSOQ-II assessment expires soon",
}

REMINDER_LEADS = {
    1: "We noticed you have not answered the assessment yet. Your participation matters to us.",
    2: "This is another chance to answer the assessment. Your opinion helps improve the workplace.",
    3: "The deadline to answer the assessment is approaching. Please complete it in the next few days.",
}


def _link(path: str) -> str:
    return f"{ApplicationConfig.FRONTEND_URL.rstrip('/')}{path}"


def email_verification(name: str, token: str) -> tuple:
    body = (
        f"Hello {name},\n\n"
        f"Confirm your email address for {PRODUCT_NAME}:\n"
        f"{_link('/verify-email/' + token)}\n\n"
        f"This link expires in {ApplicationConfig.EMAIL_VERIFICATION_TTL_HOURS} hours."
    )
    return f"Confirm your email - {PRODUCT_NAME}", body


def password_reset(name: str, token: str) -> tuple:
    body = (
        f"Hello {name},\n\n"
        "We received a request to reset your password. Open the link below:\n"
        f"{_link('/reset-password/' + token)}\n\n"
        f"This link expires in {ApplicationConfig.PASSWORD_RESET_TTL_MINUTES} minutes.\n"
        "If you did not ask for this, ignore this email."
    )
    return f"Password recovery - {PRODUCT_NAME}", body


def survey_invitation(respondent_name: str, invite_token: str, expires_in_days: int) -> tuple:
    body = (
        f"Hello {respondent_name},\n\n"
        "You have been invited to answer the COPSOQ-II psychosocial assessment.\n"
        "It takes 15-20 minutes and your answers are confidential.\n"
        f"{_link('/copsoq/respond/' + invite_token)}\n\n"
        f"The invitation expires in {expires_in_days} days."
    )
    return "Invitation: COPSOQ-II assessment", body


def survey_reminder(respondent_name: str, invite_token: str, reminder_number: int) -> tuple:
    subject = REMINDER_SUBJECTS.get(reminder_number, REMINDER_SUBJECTS[1])
    lead = REMINDER_LEADS.get(reminder_number, REMINDER_LEADS[1])
    body = (
        f"Hello {respondent_name},\n\n"
        f"{lead}\n"
        f"{_link('/copsoq/respond/' + invite_token)}"
    )
    return subject, body
