"""Builders de payload para a API Discord.

- confession.py: mensagem pública e logs de moderação
- attachment.py: imagem inline vs campo de anexo
- components.py: botões de moderação
- factory.py: adapter para ConfessionPayloadBuilderProtocol
"""

from api.payload_builders.discord.attachment import (
    apply_attachment,
    build_attachment_field,
    split_content_type,
)
from api.payload_builders.discord.components import build_moderation_row
from api.payload_builders.discord.confession import (
    build_approved_log,
    build_confession_message,
    build_pending_log,
    build_resent_log,
)
from api.payload_builders.discord.factory import DiscordConfessionPayloadBuilder

__all__ = [
    "DiscordConfessionPayloadBuilder",
    "apply_attachment",
    "build_approved_log",
    "build_attachment_field",
    "build_confession_message",
    "build_moderation_row",
    "build_pending_log",
    "build_resent_log",
    "split_content_type",
]
