"""Testes dos builders de mensagens de confissão e anexos."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from api.payload_builders.discord import (
    build_approved_log,
    build_attachment_field,
    build_confession_message,
    build_pending_log,
    build_resent_log,
)
from app.constants.discord import (
    CONFESSION_FOOTER_TEXT,
    LOG_FOOTER_TEXT,
    ButtonStyle,
    Color,
    MessageFlags,
)
from app.domain.message import EmbedAttachment
from utils.errors import InvariantViolationError

TIMESTAMP = datetime(2026, 10, 19, 12, 0, tzinfo=UTC)
IMAGE = EmbedAttachment(
    url="https://cdn.discordapp.com/a.png",
    content_type="image/png",
    width=640,
    height=480,
)
AUDIO = EmbedAttachment(url="https://cdn.discordapp.com/a.mp3", content_type="audio/mpeg")


def _log_kwargs(**overrides: object) -> dict[str, object]:
    kwargs: dict[str, object] = {
        "timestamp": TIMESTAMP,
        "confession_id": 7,
        "author_id": 1100000000000000005,
        "label": "Confession",
        "description": "@everyone @here look at this",
    }
    kwargs.update(overrides)
    return kwargs


class TestAttachment:
    def test_image_becomes_embed_image(self) -> None:
        message = build_confession_message(
            timestamp=TIMESTAMP,
            confession_id=1,
            label="Confession",
            description="hi",
            attachment=IMAGE,
        )

        embed = message.embeds[0]
        assert embed.image is not None
        assert embed.image.url == IMAGE.url
        assert embed.image.width == 640
        assert embed.fields is None

    def test_audio_becomes_named_field(self) -> None:
        field = build_attachment_field(AUDIO)

        assert field.name == "Audio Attachment"
        assert field.value == AUDIO.url
        assert field.inline is True

    def test_missing_content_type_is_file_attachment(self) -> None:
        field = build_attachment_field(EmbedAttachment(url="https://cdn.discordapp.com/x"))

        assert field.name == "File Attachment"

    def test_echo_omits_attachment_without_content_type(self) -> None:
        untyped = EmbedAttachment(url="https://cdn.discordapp.com/x")
        message = build_confession_message(
            timestamp=TIMESTAMP,
            confession_id=1,
            label="Confession",
            description="hi",
            attachment=untyped,
        )

        embed = message.embeds[0]
        assert embed.image is None
        assert embed.fields is None

        log = build_approved_log(**_log_kwargs(attachment=untyped))
        assert [field.name for field in log.embeds[0].fields] == ["Authored by", "File Attachment"]

    @pytest.mark.parametrize("content_type", ["audiompeg", "a/b/c", "/png"])
    def test_malformed_content_type_raises(self, content_type: str) -> None:
        attachment = EmbedAttachment(url="https://cdn.discordapp.com/x", content_type=content_type)

        with pytest.raises(InvariantViolationError):
            build_attachment_field(attachment)

    def test_log_never_inlines_image(self) -> None:
        message = build_approved_log(**_log_kwargs(attachment=IMAGE))

        embed = message.embeds[0]
        assert embed.image is None
        assert [field.name for field in embed.fields] == ["Authored by", "Image Attachment"]


class TestConfessionMessage:
    def test_echo_shape(self) -> None:
        message = build_confession_message(
            timestamp=TIMESTAMP,
            confession_id=42,
            label="Secret",
            description="hello",
            color=0x123456,
        )
        payload = message.model_dump(mode="json", exclude_none=True)

        embed = payload["embeds"][0]
        assert embed["title"] == "Secret #42"
        assert embed["description"] == "hello"
        assert embed["color"] == 0x123456
        assert embed["type"] == "rich"
        assert embed["footer"]["text"] == CONFESSION_FOOTER_TEXT
        assert "message_reference" not in payload
        assert "allowed_mentions" not in payload

    def test_reply_reference_never_fails_if_missing(self) -> None:
        message = build_confession_message(
            timestamp=TIMESTAMP,
            confession_id=1,
            label="Confession",
            description="reply",
            reply_to_message_id=1100000000000000009,
        )
        payload = message.model_dump(mode="json", exclude_none=True)

        assert payload["message_reference"] == {
            "type": 0,
            "message_id": "1100000000000000009",
            "fail_if_not_exists": False,
        }


class TestLogs:
    @pytest.mark.parametrize(
        "build",
        [
            lambda: build_pending_log(internal_id=3, **_log_kwargs()),
            lambda: build_approved_log(**_log_kwargs()),
            lambda: build_resent_log(moderator_id=99, **_log_kwargs()),
        ],
    )
    def test_allowed_mentions_restricted_to_users(self, build) -> None:
        payload = build().model_dump(mode="json", exclude_none=True)

        assert payload["allowed_mentions"] == {"parse": ["users"]}
        assert payload["flags"] == int(MessageFlags.SUPPRESS_NOTIFICATIONS)
        assert payload["embeds"][0]["footer"]["text"] == LOG_FOOTER_TEXT
        assert payload["embeds"][0]["fields"][0] == {
            "name": "Authored by",
            "value": "||<@1100000000000000005>||",
            "inline": True,
        }

    def test_pending_log_buttons_use_internal_id(self) -> None:
        message = build_pending_log(internal_id=3, **_log_kwargs())

        embed = message.embeds[0]
        assert embed.color == Color.PENDING
        row = message.components[0]
        assert [button.custom_id for button in row.components] == ["publish:3", "delete:3"]
        assert [button.style for button in row.components] == [
            ButtonStyle.SUCCESS,
            ButtonStyle.DANGER,
        ]

    def test_approved_log_has_no_buttons(self) -> None:
        message = build_approved_log(**_log_kwargs())

        assert message.components is None
        assert message.embeds[0].color == Color.SUCCESS

    def test_resent_log_names_moderator(self) -> None:
        message = build_resent_log(moderator_id=99, **_log_kwargs(attachment=AUDIO))

        embed = message.embeds[0]
        assert embed.color == Color.REPLAY
        assert [(field.name, field.value) for field in embed.fields] == [
            ("Authored by", "||<@1100000000000000005>||"),
            ("Resent by", "<@99>"),
            ("Audio Attachment", AUDIO.url),
        ]
