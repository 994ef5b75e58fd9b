"""Botões de moderação do log de revisão pendente."""

from __future__ import annotations

from app.constants.discord import ButtonStyle, ComponentAction
from app.domain.custom_id import build_custom_id
from app.domain.message import ActionRow, Button, Emoji


def build_moderation_row(internal_id: int) -> ActionRow:
    """Linha com os botões Publish e Delete."""
    return ActionRow(
        components=[
            Button(
                style=ButtonStyle.SUCCESS,
                label="Publish",
                emoji=Emoji(name="\u2712\ufe0f"),
                custom_id=build_custom_id(ComponentAction.PUBLISH, internal_id),
            ),
            Button(
                style=ButtonStyle.DANGER,
                label="Delete",
                emoji=Emoji(name="\U0001f5d1\ufe0f"),
                custom_id=build_custom_id(ComponentAction.DELETE, internal_id),
            ),
        ]
    )
