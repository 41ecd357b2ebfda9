from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest


async def _echo(entity):
    return entity


@pytest.fixture
def now():
    return datetime(2025, 3, 3, 9, 0, 0)


@pytest.fixture
def clock(now):
    return lambda: now


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    # Mock repositories; create/update return what they were given
    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.create = AsyncMock(side_effect=_echo)
    uow.users.update = AsyncMock(side_effect=_echo)

    uow.auth_tokens = MagicMock()
    uow.auth_tokens.create = AsyncMock(side_effect=_echo)
    uow.auth_tokens.update = AsyncMock(side_effect=_echo)
    uow.auth_tokens.get_by_token_hash = AsyncMock(return_value=None)
    uow.auth_tokens.revoke_live_by_user_id = AsyncMock(return_value=0)
    uow.auth_tokens.consume = AsyncMock(return_value=True)

    uow.invitations = MagicMock()
    uow.invitations.get_by_id = AsyncMock(return_value=None)
    uow.invitations.get_by_id_for_update = AsyncMock(return_value=None)
    uow.invitations.get_by_invite_token = AsyncMock(return_value=None)
    uow.invitations.get_by_assessment = AsyncMock(return_value=[])
    uow.invitations.get_open_ids = AsyncMock(return_value=[])
    uow.invitations.claim_reminder = AsyncMock(return_value=True)
    uow.invitations.release_reminder = AsyncMock(return_value=True)
    uow.invitations.create = AsyncMock(side_effect=_echo)
    uow.invitations.update = AsyncMock(side_effect=_echo)

    uow.reminders = MagicMock()
    uow.reminders.create = AsyncMock(side_effect=_echo)
    uow.reminders.get_by_invitation_id = AsyncMock(return_value=[])
    uow.reminders.get_by_assessment = AsyncMock(return_value=[])
    uow.reminders.get_by_id = AsyncMock(return_value=None)

    uow.audit_events = MagicMock()
    uow.audit_events.create = AsyncMock(side_effect=_echo)

    return uow
