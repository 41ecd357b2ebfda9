"""
Repository behaviour against a real SQLite database.
"""
from datetime import datetime, timedelta
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from src.domain.entities import (
    AuthToken,
    Invitation,
    InvitationStatus,
    Reminder,
    ReminderStatus,
    TokenPurpose,
    User,
)
from src.domain.errors import ValidationError

NOW = datetime(2025, 3, 1, 9, 0, 0)


async def make_user(uow, email="User@Acme.com"):
    return await uow.users.create(User(email=email, name="User", password_hash="x"))


async def make_invitation(uow, status=InvitationStatus.pending, sent_at=NOW):
    return await uow.invitations.create(
        Invitation(
            tenant_id=uuid4(),
            assessment_id=uuid4(),
            respondent_name="Ana",
            respondent_email="ana@acme.com",
            invite_token=uuid4().hex,
            status=status,
            sent_at=sent_at,
            expires_at=sent_at + timedelta(days=14),
        )
    )


def make_reminder(invitation, number=1, status=ReminderStatus.sent):
    return Reminder(
        invitation_id=invitation.id,
        tenant_id=invitation.tenant_id,
        assessment_id=invitation.assessment_id,
        reminder_number=number,
        status=status,
        sent_at=NOW,
    )


@pytest.mark.asyncio
async def test_user_lookup_ignores_case(uow):
    async with uow:
        user = await make_user(uow)
        user_id = user.id
        await uow.commit()

    async with uow:
        found = await uow.users.get_by_email("user@ACME.com")
        assert found is not None
        assert found.id == user_id


@pytest.mark.asyncio
async def test_revoke_live_tokens_by_purpose(uow):
    async with uow:
        user = await make_user(uow)
        for i, purpose in enumerate(
            [TokenPurpose.session, TokenPurpose.session, TokenPurpose.password_reset]
        ):
            await uow.auth_tokens.create(
                AuthToken(
                    user_id=user.id,
                    token_hash=f"{i:064d}",
                    purpose=purpose,
                    issued_at=NOW,
                    expires_at=NOW + timedelta(hours=1),
                )
            )
        await uow.commit()

    async with uow:
        revoked = await uow.auth_tokens.revoke_live_by_user_id(user.id, NOW, purpose=TokenPurpose.session)
        await uow.commit()

    assert revoked == 2

    async with uow:
        reset = await uow.auth_tokens.get_by_token_hash(f"{2:064d}")
        session = await uow.auth_tokens.get_by_token_hash(f"{0:064d}")
        assert session.revoked_at == NOW
        assert reset.is_live
        assert await uow.auth_tokens.revoke_live_by_user_id(session.user_id, NOW, purpose=TokenPurpose.session) == 0


@pytest.mark.asyncio
async def test_open_ids_skip_closed_invitations(uow):
    async with uow:
        pending = await make_invitation(uow)
        viewed = await make_invitation(uow, InvitationStatus.viewed, sent_at=NOW + timedelta(hours=1))
        expected = [pending.id, viewed.id]
        await make_invitation(uow, InvitationStatus.completed)
        await make_invitation(uow, InvitationStatus.expired)
        await uow.commit()

    async with uow:
        open_ids = await uow.invitations.get_open_ids()

    assert open_ids == expected


@pytest.mark.asyncio
async def test_duplicate_email_is_reported_as_already_registered(uow):
    async with uow:
        await make_user(uow, email="dup@acme.com")
        await uow.commit()

    with pytest.raises(ValidationError) as exc_info:
        async with uow:
            await make_user(uow, email="dup@acme.com")

    assert exc_info.value.code == "EMAIL_ALREADY_REGISTERED"


@pytest.mark.asyncio
async def test_claim_reminder_is_compare_and_swap(uow):
    async with uow:
        invitation = await make_invitation(uow)
        invitation_id = invitation.id
        await uow.commit()

    async with uow:
        assert await uow.invitations.claim_reminder(invitation_id, 1) is True
        assert await uow.invitations.claim_reminder(invitation_id, 1) is False
        # Numbers cannot be skipped
        assert await uow.invitations.claim_reminder(invitation_id, 3) is False
        await uow.commit()

    async with uow:
        stored = await uow.invitations.get_by_id_for_update(invitation_id)
        assert stored.last_reminder_number == 1


@pytest.mark.asyncio
async def test_claim_reminder_requires_open_invitation(uow):
    async with uow:
        invitation = await make_invitation(uow, InvitationStatus.completed)
        invitation_id = invitation.id
        await uow.commit()

    async with uow:
        assert await uow.invitations.claim_reminder(invitation_id, 1) is False


@pytest.mark.asyncio
async def test_release_reminder_only_gives_back_latest_claim(uow):
    async with uow:
        invitation = await make_invitation(uow)
        invitation_id = invitation.id
        await uow.commit()

    async with uow:
        await uow.invitations.claim_reminder(invitation_id, 1)
        await uow.invitations.claim_reminder(invitation_id, 2)
        assert await uow.invitations.release_reminder(invitation_id, 1) is False
        assert await uow.invitations.release_reminder(invitation_id, 2) is True
        await uow.commit()

    async with uow:
        stored = await uow.invitations.get_by_id_for_update(invitation_id)
        assert stored.last_reminder_number == 1


@pytest.mark.asyncio
async def test_reminders_of_invitation_keep_failed_attempts(uow):
    async with uow:
        invitation = await make_invitation(uow)
        invitation_id = invitation.id
        await uow.reminders.create(make_reminder(invitation, 1, ReminderStatus.failed))
        await uow.reminders.create(make_reminder(invitation, 1, ReminderStatus.sent))
        await uow.reminders.create(make_reminder(invitation, 2, ReminderStatus.failed))
        await uow.commit()

    async with uow:
        reminders = await uow.reminders.get_by_invitation_id(invitation_id)
        assert sorted((r.reminder_number, r.status.value) for r in reminders) == [
            (1, "failed"),
            (1, "sent"),
            (2, "failed"),
        ]


@pytest.mark.asyncio
async def test_one_sent_reminder_per_sequence_number(uow):
    async with uow:
        invitation = await make_invitation(uow)
        invitation_id = invitation.id
        await uow.reminders.create(make_reminder(invitation, 1))
        await uow.commit()

    with pytest.raises(IntegrityError):
        async with uow:
            await uow.reminders.create(make_reminder(invitation, 1))

    async with uow:
        reminders = await uow.reminders.get_by_invitation_id(invitation_id)
        assert len(reminders) == 1
