import logging
from typing import Dict, List

from jinja2 import Template  # type: ignore

from .config import Settings, get_settings
from .datasource import DataSource
from .exceptions import EmailException
from .models import Email, NamedResource, Recipient, RecipientType
from .recipients import parse_address_list, recipient_inputs, resolve_recipients
from .utils import validate_template

logger = logging.getLogger(__name__)

_BINARY_TYPES = (bytes, bytearray, memoryview)


class EmailBuilder:
    """Accumulates the parts of an email and produces immutable snapshots.

    Every setter returns the builder itself so calls can be chained. Values
    are validated as soon as they are added; `build()` only assembles them
    into an `Email`. The builder is not thread-safe.

    Example:
        email = (
            EmailBuilder()
            .from_("Support", "support@domain.com")
            .to("Jane", "jane@domain.com")
            .cc("ops@domain.com; audit@domain.com")
            .subject("Welcome!")
            .add_text("<h1>Hello!</h1><p>Welcome to our platform.</p>")
            .embed_image("logo", FileDataSource("logo.png"))
            .add_attachment(None, FileDataSource("report.pdf"))
            .build()
        )
    """

    def __init__(self, settings: Settings | None = None):
        """Initializes an empty builder, pre-populated with configured defaults.

        Args:
            settings (Settings, optional): Defaults to apply. When omitted the
                process-wide settings from `get_settings()` are used.
        """
        self._from: Recipient | None = None
        self._reply_to: Recipient | None = None
        self._recipients: List[Recipient] = []
        self._attachments: List[NamedResource] = []
        self._embedded_images: List[NamedResource] = []
        self._subject: str | None = None
        self._text: str | None = None
        self._text_html: str | None = None
        self._body: List[str] = []
        self._headers: Dict[str, str] = {}

        self._apply_defaults(settings if settings is not None else get_settings())

    def _apply_defaults(self, settings: Settings) -> None:
        if settings.is_empty:
            return
        logger.debug("Applying configured email defaults")

        if settings.DEFAULT_FROM_ADDRESS:
            self.from_(settings.DEFAULT_FROM_NAME, settings.DEFAULT_FROM_ADDRESS)
        if settings.DEFAULT_REPLY_TO_ADDRESS:
            self.reply_to(settings.DEFAULT_REPLY_TO_NAME, settings.DEFAULT_REPLY_TO_ADDRESS)

        for recipient_type, name, addresses in (
            (RecipientType.TO, settings.DEFAULT_TO_NAME, settings.DEFAULT_TO_ADDRESS),
            (RecipientType.CC, settings.DEFAULT_CC_NAME, settings.DEFAULT_CC_ADDRESS),
            (RecipientType.BCC, settings.DEFAULT_BCC_NAME, settings.DEFAULT_BCC_ADDRESS),
        ):
            if not addresses:
                continue
            parsed = parse_address_list(addresses, recipient_type)
            # A default name only makes sense for a single address
            if name and len(parsed) == 1:
                parsed = [Recipient(name, parsed[0].address, recipient_type)]
            self._recipients.extend(parsed)

        if settings.DEFAULT_SUBJECT:
            self._subject = settings.DEFAULT_SUBJECT

    # Sender and reply-to

    @staticmethod
    def _singleton(args: tuple) -> Recipient:
        if len(args) == 1 and isinstance(args[0], Recipient):
            return args[0].with_type(None)
        if len(args) == 2 and (args[0] is None or isinstance(args[0], str)):
            return Recipient(args[0], args[1])
        raise TypeError("Expected a Recipient or a (name, address) pair.")

    def from_(self, *args) -> "EmailBuilder":
        """Sets the sender, replacing any previous one.

        Args:
            *args: Either a `Recipient` or a `(name, address)` pair. The
                stored recipient never carries a type.

        Raises:
            ValueError: If the address is empty.
            TypeError: If the arguments match neither form.

        Example:
            from_("Support", "support@domain.com")
            from_(Recipient(None, "noreply@domain.com"))
        """
        self._from = self._singleton(args)
        return self

    def reply_to(self, *args) -> "EmailBuilder":
        """Sets the reply-to address. Same forms and rules as `from_`."""
        self._reply_to = self._singleton(args)
        return self

    # TO / CC / BCC

    def _add_recipients(self, recipient_type: RecipientType, args: tuple) -> "EmailBuilder":
        self._recipients.extend(resolve_recipients(recipient_inputs(args), recipient_type))
        return self

    def to(self, *args) -> "EmailBuilder":
        """Adds TO recipients.

        Accepts a `(name, address)` pair, a single string holding one or more
        addresses separated by `,` or `;`, or any number of `Recipient`
        objects. Recipient objects are added with their type forced to TO.
        Calls are additive and duplicates are kept.

        Raises:
            ValueError: If a pair carries an empty address.
            TypeError: If the arguments match none of the accepted forms.

        Example:
            to("Jane", "jane@domain.com")
            to("a@domain.com; b@domain.com, c@domain.com")
            to(Recipient("Joe", "joe@domain.com"), Recipient(None, "ann@domain.com"))
        """
        return self._add_recipients(RecipientType.TO, args)

    def cc(self, *args) -> "EmailBuilder":
        """Adds CC recipients. Same forms and rules as `to`."""
        return self._add_recipients(RecipientType.CC, args)

    def bcc(self, *args) -> "EmailBuilder":
        """Adds BCC recipients. Same forms and rules as `to`."""
        return self._add_recipients(RecipientType.BCC, args)

    # Content

    def subject(self, subject: str | None) -> "EmailBuilder":
        self._subject = subject
        return self

    def text(self, text: str | None) -> "EmailBuilder":
        """Sets the plain text body."""
        self._text = text
        return self

    def text_html(self, html: str | None) -> "EmailBuilder":
        """Sets the HTML body, taking precedence over fragments from `add_text`."""
        self._text_html = html
        return self

    def add_text(self, html: str) -> "EmailBuilder":
        """Appends plain text or HTML content to the HTML body.

        Fragments are joined in call order when the email is built, unless an
        explicit body was set with `text_html`.

        Raises:
            ValueError: If `html` is not a string.

        Example:
            add_text("<p>Hello, this is a test message.</p>")
        """
        if not isinstance(html, str):
            raise ValueError("Text must be a string.")
        self._body.append(html)
        return self

    def use_template(self, file: str, **variables) -> "EmailBuilder":
        """Renders a Jinja2 HTML template and appends it to the HTML body.

        Args:
            file (str): Path to the template file (`.html`, `.htm` or `.j2`).
            **variables: Values for the template placeholders.

        Raises:
            ValueError: If the file is not a valid HTML template.
            FileNotFoundError: If the file does not exist.

        Example:
            use_template("templates/welcome.html", name="John", version="1.0.0")
        """
        validate_template(file)

        with open(file, "r", encoding="utf-8") as f:
            html = Template(f.read()).render(**variables)
        return self.add_text(html)

    def add_header(self, name: str, value) -> "EmailBuilder":
        if not isinstance(name, str) or not name:
            raise ValueError("Header name must be a non-empty string.")
        self._headers[name] = str(value)
        return self

    # Embedded images and attachments

    @staticmethod
    def _resource(name: str | None, data, mime_type: str | None, require_name: bool) -> NamedResource:
        if isinstance(data, _BINARY_TYPES):
            if mime_type is None:
                raise ValueError("A MIME type is required when passing raw content.")
            if require_name and not name:
                raise ValueError("Name is required when embedding an image from raw content.")
            return NamedResource(name or None, bytes(data), mime_type)

        if isinstance(data, DataSource):
            resolved = name or data.name
            if require_name and not resolved:
                raise EmailException(
                    "Name is required when embedding an image: "
                    "none was given and the data source has no name."
                )
            return NamedResource(resolved or None, data.content, mime_type or data.content_type)

        raise TypeError(f"Expected bytes or a DataSource, got {type(data).__name__}")

    def embed_image(self, name: str | None, data, mime_type: str | None = None) -> "EmailBuilder":
        """Adds an inline image that the HTML body can reference by name.

        Args:
            name (str | None): Name of the image, e.g. for `cid:` references.
            data: A `DataSource`, or raw `bytes` together with `mime_type`.
            mime_type (str, optional): MIME type of raw content.

        Raises:
            EmailException: If `data` is a data source and neither `name` nor
                the source provides a name.
            ValueError: If `data` is raw content and `name` is missing.

        Example:
            embed_image("logo", FileDataSource("logo.png"))
            embed_image("chart", png_bytes, "image/png")
        """
        self._embedded_images.append(self._resource(name, data, mime_type, require_name=True))
        return self

    def add_attachment(self, name: str | None, data, mime_type: str | None = None) -> "EmailBuilder":
        """Adds an attachment. Same forms as `embed_image`, but a missing name
        is accepted and stored as `None`.

        Example:
            add_attachment(None, FileDataSource("reports/monthly_report.pdf"))
            add_attachment("data.csv", csv_bytes, "text/csv")
        """
        self._attachments.append(self._resource(name, data, mime_type, require_name=False))
        return self

    # Reuse

    def clear_body(self) -> "EmailBuilder":
        """Clears text, HTML and fragments so another body can be composed."""
        self._text = None
        self._text_html = None
        self._body = []
        return self

    def clear_attachments(self) -> "EmailBuilder":
        self._attachments = []
        return self

    def clear_embedded_images(self) -> "EmailBuilder":
        self._embedded_images = []
        return self

    def clear_recipients(self) -> "EmailBuilder":
        """Removes every TO, CC and BCC recipient. Sender and reply-to are kept."""
        self._recipients = []
        return self

    def build(self) -> Email:
        """Returns an immutable snapshot of the current state.

        The builder can keep being used afterwards; later changes never
        affect emails that were already built.
        """
        text_html = self._text_html
        if text_html is None and self._body:
            text_html = "".join(self._body)

        email = Email(
            from_recipient=self._from,
            reply_to_recipient=self._reply_to,
            recipients=tuple(self._recipients),
            attachments=tuple(self._attachments),
            embedded_images=tuple(self._embedded_images),
            subject=self._subject,
            text=self._text,
            text_html=text_html,
            headers=dict(self._headers),
        )
        logger.debug("Built %r", email)
        return email
