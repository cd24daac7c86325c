"""EZMessage package initialization module.

This package provides a fluent builder for composing email messages:
sender and reply-to, TO/CC/BCC recipients (including delimited address
lists), subject, text and HTML bodies rendered from Jinja2 templates,
inline images and file attachments. The result is an immutable `Email`
snapshot ready to be handed to a mail transport.

Modules:
    core (module): Implements the `EmailBuilder`.
    models (module): Immutable value objects (`Email`, `Recipient`, ...).
    recipients (module): Parsing and normalization of recipient inputs.
    datasource (module): In-memory and file-backed binary content sources.
    config (module): Builder defaults loaded from the environment.
    utils (module): Validation helpers for files and templates.

Example:
    from ezmessage import EmailBuilder, FileDataSource

    email = (
        EmailBuilder()
        .from_("Me", "me@domain.com")
        .to("recipient@domain.com, other@domain.com")
        .subject("Hello!")
        .add_text("<p>This is a test email.</p>")
        .add_attachment(None, FileDataSource("report.pdf"))
        .build()
    )
"""

from .config import Settings, get_settings
from .core import EmailBuilder
from .datasource import ByteArrayDataSource, DataSource, FileDataSource
from .exceptions import EmailException
from .models import Email, NamedResource, Recipient, RecipientType
from .recipients import RecipientListParser, parse_address_list

__all__ = [
    "EmailBuilder",
    "Email",
    "Recipient",
    "RecipientType",
    "NamedResource",
    "DataSource",
    "ByteArrayDataSource",
    "FileDataSource",
    "EmailException",
    "RecipientListParser",
    "parse_address_list",
    "Settings",
    "get_settings",
]
