"""Enums e constantes da API Discord usadas pelo Spectro."""

from __future__ import annotations

from enum import IntEnum, IntFlag, StrEnum

APP_ICON_URL = "https://spectro.fly.dev/favicon.png"

# Rodapés fixos dos embeds
CONFESSION_FOOTER_TEXT = "Admins can access Spectro's confession logs"
LOG_FOOTER_TEXT = "Spectro Logs"

# Janela para o callback inicial de uma interação
INITIAL_RESPONSE_WINDOW_SECONDS = 3.0


class InteractionType(IntEnum):
    """Tipos de interação entregues pelo Discord."""

    PING = 1
    APPLICATION_COMMAND = 2
    MESSAGE_COMPONENT = 3
    APPLICATION_COMMAND_AUTOCOMPLETE = 4
    MODAL_SUBMIT = 5


class InteractionCallbackType(IntEnum):
    """Tipos de resposta a uma interação."""

    PONG = 1
    CHANNEL_MESSAGE_WITH_SOURCE = 4
    DEFERRED_CHANNEL_MESSAGE_WITH_SOURCE = 5
    DEFERRED_UPDATE_MESSAGE = 6
    UPDATE_MESSAGE = 7


class ApplicationCommandOptionType(IntEnum):
    """Tipos de opção de slash command."""

    SUB_COMMAND = 1
    SUB_COMMAND_GROUP = 2
    STRING = 3
    INTEGER = 4
    BOOLEAN = 5
    USER = 6
    CHANNEL = 7
    ROLE = 8
    MENTIONABLE = 9
    NUMBER = 10
    ATTACHMENT = 11


class MessageFlags(IntFlag):
    """Flags de mensagem."""

    EPHEMERAL = 1 << 6
    SUPPRESS_NOTIFICATIONS = 1 << 12


class MessageComponentType(IntEnum):
    """Tipos de componente de mensagem."""

    ACTION_ROW = 1
    BUTTON = 2
    STRING_SELECT = 3
    TEXT_INPUT = 4


class ButtonStyle(IntEnum):
    """Estilos de botão."""

    PRIMARY = 1
    SECONDARY = 2
    SUCCESS = 3
    DANGER = 4
    LINK = 5


class MessageReferenceType(IntEnum):
    """Tipos de referência de mensagem."""

    DEFAULT = 0
    FORWARD = 1


class EmbedType(StrEnum):
    """Tipos de embed."""

    RICH = "rich"


class AllowedMentionType(StrEnum):
    """Categorias aceitas em allowed_mentions.parse."""

    ROLES = "roles"
    USERS = "users"
    EVERYONE = "everyone"


class Color(IntEnum):
    """Cores dos embeds de log."""

    PENDING = 0xFFB34D
    SUCCESS = 0x4DFF88
    REPLAY = 0x4DB8FF
    FAILURE = 0xFF4D4D


class ComponentAction(StrEnum):
    """Ações codificadas no custom_id dos botões de moderação."""

    PUBLISH = "publish"
    DELETE = "delete"
