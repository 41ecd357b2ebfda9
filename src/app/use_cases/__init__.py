"""
Use Cases

Organized into domain folders:
- auth/: Registration, login, sessions, email verification, password reset
- users/: User administration
- invitations/: Survey invitations and respondent actions
- reminders/: Reminder scheduler and statistics

Import from subdirectories.
"""
