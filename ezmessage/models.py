"""Value objects produced and consumed by the email builder.

Every type in this module is immutable. `Email` is the snapshot returned by
`EmailBuilder.build()` and can be handed to any transport without copying.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple

from .utils import validate_address


class RecipientType(Enum):
    """Role of a recipient within a message."""

    FROM = "from"
    REPLY_TO = "reply-to"
    TO = "to"
    CC = "cc"
    BCC = "bcc"


@dataclass(frozen=True)
class Recipient:
    """A named or anonymous mail address tagged with a role.

    Attributes:
        name (str | None): Display name. Empty strings are stored as `None`.
        address (str): Mail address. Must be a non-empty string.
        type (RecipientType | None): Role of the recipient, or `None` for
            the sender and reply-to singletons.

    Raises:
        ValueError: If `address` is empty or not a string.
    """

    name: str | None
    address: str
    type: RecipientType | None = None

    def __post_init__(self):
        validate_address(self.address)
        if not self.name:
            object.__setattr__(self, "name", None)

    def with_type(self, recipient_type: RecipientType | None) -> "Recipient":
        """Returns a copy of this recipient carrying `recipient_type`."""
        return Recipient(self.name, self.address, recipient_type)

    def __str__(self) -> str:
        return f"{self.name} <{self.address}>" if self.name else self.address


@dataclass(frozen=True)
class NamedResource:
    """Binary payload with a MIME type, used for attachments and inline images."""

    name: str | None
    content: bytes
    mime_type: str

    def __post_init__(self):
        object.__setattr__(self, "content", bytes(self.content))

    @property
    def size(self) -> int:
        return len(self.content)

    def __repr__(self) -> str:
        return f"<NamedResource name={self.name!r} mime_type={self.mime_type!r} size={self.size}>"


@dataclass(frozen=True)
class Email:
    """Immutable snapshot of a composed email.

    Attributes:
        from_recipient (Recipient | None): Sender, type always `None`.
        reply_to_recipient (Recipient | None): Reply-to address, type always `None`.
        recipients (tuple[Recipient, ...]): TO, CC and BCC recipients in the
            order they were added. Duplicates are kept.
        attachments (tuple[NamedResource, ...]): Attachments in call order.
        embedded_images (tuple[NamedResource, ...]): Inline images in call order.
        subject (str | None): Subject line.
        text (str | None): Plain text body.
        text_html (str | None): HTML body.
        headers (Mapping[str, str]): Custom headers (read-only).
    """

    from_recipient: Recipient | None = None
    reply_to_recipient: Recipient | None = None
    recipients: Tuple[Recipient, ...] = ()
    attachments: Tuple[NamedResource, ...] = ()
    embedded_images: Tuple[NamedResource, ...] = ()
    subject: str | None = None
    text: str | None = None
    text_html: str | None = None
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "recipients", tuple(self.recipients))
        object.__setattr__(self, "attachments", tuple(self.attachments))
        object.__setattr__(self, "embedded_images", tuple(self.embedded_images))
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    def __eq__(self, other):
        if not isinstance(other, Email):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def _key(self):
        # MappingProxyType is neither comparable nor hashable across instances
        return (
            self.from_recipient,
            self.reply_to_recipient,
            self.recipients,
            self.attachments,
            self.embedded_images,
            self.subject,
            self.text,
            self.text_html,
            tuple(sorted(self.headers.items())),
        )

    def _of_type(self, recipient_type: RecipientType) -> Tuple[Recipient, ...]:
        return tuple(r for r in self.recipients if r.type is recipient_type)

    @property
    def to_recipients(self) -> Tuple[Recipient, ...]:
        return self._of_type(RecipientType.TO)

    @property
    def cc_recipients(self) -> Tuple[Recipient, ...]:
        return self._of_type(RecipientType.CC)

    @property
    def bcc_recipients(self) -> Tuple[Recipient, ...]:
        return self._of_type(RecipientType.BCC)

    def has_attachments(self) -> bool:
        """Checks whether the email carries any attachments."""
        return bool(self.attachments)

    def __repr__(self) -> str:
        return (
            f"<Email from={str(self.from_recipient) if self.from_recipient else None!r} "
            f"subject={self.subject!r} recipients={len(self.recipients)} "
            f"attachments={len(self.attachments)} images={len(self.embedded_images)}>"
        )


__all__ = ["RecipientType", "Recipient", "NamedResource", "Email"]
