"""Testes do fluxo de confissões com store em memória e cliente fake."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from api.connectors.discord import DiscordApiError
from api.payload_builders.discord import DiscordConfessionPayloadBuilder
from app.constants.discord import Color
from app.domain.confession import ChannelRecord, ConfessOptions
from app.domain.message import EmbedAttachment
from app.infra.stores import MemoryConfessionStore
from app.services import ConfessionService
from tests.fakes.fake_discord import FakeDiscordHttpClient
from utils.errors import (
    ApprovalLogUnavailableError,
    ChannelDisabledError,
    ChannelNotConfiguredError,
    ConfessionAlreadyApprovedError,
    ConfessionDeliveryError,
    ConfessionNotFoundError,
    ConfessionPendingError,
)

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=UTC)
CHANNEL_ID = 44
LOG_CHANNEL_ID = 45
AUTHOR_ID = 55
MODERATOR_ID = 66


def _setup(
    *,
    approval: bool = False,
    log_channel: int | None = LOG_CHANNEL_ID,
    disabled_at: datetime | None = None,
    failing: dict[int, DiscordApiError] | None = None,
) -> tuple[ConfessionService, MemoryConfessionStore, FakeDiscordHttpClient]:
    store = MemoryConfessionStore(
        [
            ChannelRecord(
                id=CHANNEL_ID,
                guild_id=1,
                last_confession_id=41,
                is_approval_required=approval,
                log_channel_id=log_channel,
                disabled_at=disabled_at,
            )
        ]
    )
    http = FakeDiscordHttpClient(failing)
    return ConfessionService(http, DiscordConfessionPayloadBuilder()), store, http


@pytest.mark.asyncio
async def test_submit_publishes_immediately() -> None:
    service, store, http = _setup()

    reply = await service.submit(store, NOW, CHANNEL_ID, AUTHOR_ID, ConfessOptions(content="hi"))

    assert reply == "Confession #42 submitted."
    [echo] = http.sent_to(CHANNEL_ID)
    assert echo.embeds[0].title == "Confession #42"
    [log] = http.sent_to(LOG_CHANNEL_ID)
    assert log.embeds[0].color == Color.SUCCESS
    confession = await store.get_confession(1)
    assert confession.is_approved
    assert confession.log_reference is not None


@pytest.mark.asyncio
async def test_submit_without_log_channel_skips_log() -> None:
    service, store, http = _setup(log_channel=None)

    await service.submit(store, NOW, CHANNEL_ID, AUTHOR_ID, ConfessOptions(content="hi"))

    assert [target for target, _ in http.sent] == [CHANNEL_ID]


@pytest.mark.asyncio
async def test_submit_log_failure_is_best_effort() -> None:
    service, store, http = _setup(
        failing={LOG_CHANNEL_ID: DiscordApiError(status_code=403, code=50001, message="Missing Access")}
    )

    reply = await service.submit(store, NOW, CHANNEL_ID, AUTHOR_ID, ConfessOptions(content="hi"))

    assert reply == "Confession #42 submitted."
    assert len(http.sent_to(CHANNEL_ID)) == 1


@pytest.mark.asyncio
async def test_submit_delivery_failure_raises_with_code() -> None:
    service, store, _ = _setup(
        failing={CHANNEL_ID: DiscordApiError(status_code=403, code=50001, message="Missing Access")}
    )

    with pytest.raises(ConfessionDeliveryError) as exc_info:
        await service.submit(store, NOW, CHANNEL_ID, AUTHOR_ID, ConfessOptions(content="hi"))

    assert exc_info.value.code == 50001


@pytest.mark.asyncio
async def test_submit_unknown_channel() -> None:
    service, store, _ = _setup()

    with pytest.raises(ChannelNotConfiguredError):
        await service.submit(store, NOW, 999, AUTHOR_ID, ConfessOptions(content="hi"))


@pytest.mark.asyncio
async def test_submit_disabled_channel() -> None:
    service, store, http = _setup(disabled_at=NOW - timedelta(minutes=1))

    with pytest.raises(ChannelDisabledError):
        await service.submit(store, NOW, CHANNEL_ID, AUTHOR_ID, ConfessOptions(content="hi"))
    assert http.sent == []


@pytest.mark.asyncio
async def test_submit_disabled_in_future_still_accepts() -> None:
    service, store, _ = _setup(disabled_at=NOW + timedelta(minutes=1))

    reply = await service.submit(store, NOW, CHANNEL_ID, AUTHOR_ID, ConfessOptions(content="hi"))

    assert reply.endswith("submitted.")


@pytest.mark.asyncio
async def test_submit_requiring_approval_posts_pending_log() -> None:
    service, store, http = _setup(approval=True)
    attachment = EmbedAttachment(url="https://cdn.discordapp.com/a.mp3", content_type="audio/mpeg")

    reply = await service.submit(
        store, NOW, CHANNEL_ID, AUTHOR_ID, ConfessOptions(content="hi", attachment=attachment)
    )

    assert "submitted for approval" in reply
    assert http.sent_to(CHANNEL_ID) == []
    [log] = http.sent_to(LOG_CHANNEL_ID)
    assert log.components[0].components[0].custom_id == "publish:1"
    assert (await store.get_confession(1)).is_approved is False


@pytest.mark.asyncio
async def test_submit_requiring_approval_without_log_channel() -> None:
    service, store, _ = _setup(approval=True, log_channel=None)

    with pytest.raises(ApprovalLogUnavailableError):
        await service.submit(store, NOW, CHANNEL_ID, AUTHOR_ID, ConfessOptions(content="hi"))
    assert await store.get_confession(1) is None


@pytest.mark.asyncio
async def test_publish_pending_confession() -> None:
    service, store, http = _setup(approval=True)
    await service.submit(store, NOW, CHANNEL_ID, AUTHOR_ID, ConfessOptions(content="hi"))

    reply = await service.publish(store, NOW, 1, MODERATOR_ID)

    assert reply == "Confession #42 has been published."
    assert len(http.sent_to(CHANNEL_ID)) == 1
    assert (await store.get_confession(1)).is_approved
    with pytest.raises(ConfessionAlreadyApprovedError):
        await service.publish(store, NOW, 1, MODERATOR_ID)


@pytest.mark.asyncio
async def test_publish_delivery_failure_keeps_confession_pending() -> None:
    service, store, http = _setup(
        approval=True,
        failing={CHANNEL_ID: DiscordApiError(403, 50001, "Missing Access")},
    )
    await service.submit(store, NOW, CHANNEL_ID, AUTHOR_ID, ConfessOptions(content="hi"))

    with pytest.raises(ConfessionDeliveryError) as exc_info:
        await service.publish(store, NOW, 1, MODERATOR_ID)

    assert exc_info.value.code == 50001
    assert not (await store.get_confession(1)).is_approved
    assert http.sent_to(CHANNEL_ID) == []

    http._failing.clear()
    reply = await service.publish(store, NOW, 1, MODERATOR_ID)

    assert reply == "Confession #42 has been published."
    assert (await store.get_confession(1)).is_approved


@pytest.mark.asyncio
async def test_delete_pending_confession() -> None:
    service, store, _ = _setup(approval=True)
    await service.submit(store, NOW, CHANNEL_ID, AUTHOR_ID, ConfessOptions(content="hi"))

    reply = await service.delete(store, NOW, 1, MODERATOR_ID)

    assert reply == "Confession #42 has been deleted."
    with pytest.raises(ConfessionNotFoundError):
        await service.delete(store, NOW, 1, MODERATOR_ID)


@pytest.mark.asyncio
async def test_resend_requires_approved() -> None:
    service, store, _ = _setup(approval=True)
    await service.submit(store, NOW, CHANNEL_ID, AUTHOR_ID, ConfessOptions(content="hi"))

    with pytest.raises(ConfessionPendingError):
        await service.resend(store, NOW, 1, MODERATOR_ID)


@pytest.mark.asyncio
async def test_resend_posts_echo_and_resent_log() -> None:
    service, store, http = _setup()
    await service.submit(store, NOW, CHANNEL_ID, AUTHOR_ID, ConfessOptions(content="hi"))

    reply = await service.resend(store, NOW, 1, MODERATOR_ID)

    assert reply == "Confession #42 has been resent."
    assert len(http.sent_to(CHANNEL_ID)) == 2
    resent_log = http.sent_to(LOG_CHANNEL_ID)[-1]
    assert resent_log.embeds[0].color == Color.REPLAY
    assert resent_log.embeds[0].fields[1].value == f"<@{MODERATOR_ID}>"
