"""Validation helpers for builder inputs."""

from os.path import isfile, splitext

TEMPLATE_EXTENSIONS = (".html", ".htm", ".j2")


def validate_path(path: str) -> None:
    """Ensures `path` names an existing file.

    Raises:
        ValueError: If `path` is not a non-empty string.
        FileNotFoundError: If the file does not exist.
    """
    if not isinstance(path, str) or not path:
        raise ValueError("File path must be a non-empty string.")
    if not isfile(path):
        raise FileNotFoundError(f"File not found: {path}")


def validate_template(file: str) -> None:
    """Ensures `file` is an existing HTML or Jinja2 template.

    Raises:
        ValueError: If the path is invalid or has an unsupported extension.
        FileNotFoundError: If the file does not exist.
    """
    validate_path(file)
    _, extension = splitext(file)
    if extension.lower() not in TEMPLATE_EXTENSIONS:
        raise ValueError(
            f"Template must be one of {', '.join(TEMPLATE_EXTENSIONS)} files: {file}"
        )


def validate_address(address) -> str:
    """Returns `address` if it is a non-empty string, raises ValueError otherwise."""
    if not isinstance(address, str) or not address:
        raise ValueError("Email address must be a non-empty string.")
    return address
