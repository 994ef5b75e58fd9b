"""Decisão de exibição de anexos: imagem inline ou campo com link."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.domain.message import EmbedField, EmbedImage
from utils.errors import InvariantViolationError

if TYPE_CHECKING:
    from app.domain.message import Embed, EmbedAttachment

logger = logging.getLogger(__name__)

# Sem content_type o anexo é tratado como arquivo genérico
DEFAULT_CONTENT_IDENTIFIER = "file"


def split_content_type(content_type: str) -> tuple[str, str]:
    """Separa um MIME type em (tipo primário, subtipo).

    Raises:
        InvariantViolationError: Se o MIME não tiver exatamente duas partes
    """
    parts = content_type.split("/")
    if len(parts) != 2 or not parts[0]:
        raise InvariantViolationError(f"malformed content type: {content_type!r}")
    return parts[0], parts[1]


def is_image(attachment: EmbedAttachment) -> bool:
    if attachment.content_type is None:
        return False
    primary, _ = split_content_type(attachment.content_type)
    return primary == "image"


def build_attachment_field(attachment: EmbedAttachment) -> EmbedField:
    """Campo inline com o link do anexo ("Audio Attachment" para audio/mpeg).

    Raises:
        InvariantViolationError: Se o content_type estiver malformado
    """
    if attachment.content_type is None:
        identifier = DEFAULT_CONTENT_IDENTIFIER
    else:
        identifier, _ = split_content_type(attachment.content_type)
    return EmbedField(
        name=f"{identifier[0].upper()}{identifier[1:]} Attachment",
        value=attachment.url,
        inline=True,
    )


def build_attachment_image(attachment: EmbedAttachment) -> EmbedImage:
    return EmbedImage(
        url=attachment.url,
        width=attachment.width,
        height=attachment.height,
    )


def apply_attachment(embed: Embed, attachment: EmbedAttachment) -> None:
    """Anexa imagem ao embed, ou um campo para os demais tipos.

    Sem content_type o eco fica sem anexo; o link aparece só nos logs.
    """
    if attachment.content_type is None:
        logger.debug("embed_attachment_skipped", extra={"reason": "missing_content_type"})
        return

    if is_image(attachment):
        embed.image = build_attachment_image(attachment)
        logger.debug("embed_image_attached", extra={"content_type": attachment.content_type})
        return

    embed.fields = [*(embed.fields or []), build_attachment_field(attachment)]
    logger.debug("embed_field_attached", extra={"content_type": attachment.content_type})
