"""Recipient input normalization.

The `to`, `cc` and `bcc` setters of `EmailBuilder` accept a name/address
pair, a delimited address string or prebuilt `Recipient` objects. Each call
is first turned into a sequence of tagged inputs by `recipient_inputs` and
then resolved by `resolve_recipients` into `Recipient` values carrying the
role of the calling setter.
"""

import re
from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple, Union

from .models import Recipient, RecipientType

_DELIMITERS = re.compile(r"[,;]")


def parse_address_list(text: str, recipient_type: RecipientType | None) -> List[Recipient]:
    """Splits a `,`/`;` delimited address string into recipients.

    Tokens are trimmed and empty tokens are dropped. No syntax validation is
    performed, any non-empty token is accepted as an address.

    Args:
        text (str): Addresses, e.g. `"a@x.org; b@x.org,c@x.org"`.
        recipient_type (RecipientType | None): Role given to every recipient.

    Returns:
        list[Recipient]: One unnamed recipient per token, left to right.

    Example:
        >>> [r.address for r in parse_address_list("a@x.org;b@x.org, c@x.org", RecipientType.TO)]
        ['a@x.org', 'b@x.org', 'c@x.org']
    """
    tokens = (token.strip() for token in _DELIMITERS.split(text))
    return [Recipient(None, token, recipient_type) for token in tokens if token]


class RecipientListParser:
    """Parser bound to a single recipient role."""

    def __init__(self, recipient_type: RecipientType | None):
        self.recipient_type = recipient_type

    def parse(self, text: str) -> List[Recipient]:
        return parse_address_list(text, self.recipient_type)


@dataclass(frozen=True)
class RawAddressString:
    text: str


@dataclass(frozen=True)
class NameAddressPair:
    name: str | None
    address: str


@dataclass(frozen=True)
class PrebuiltRecipient:
    recipient: Recipient


RecipientInput = Union[RawAddressString, NameAddressPair, PrebuiltRecipient]


def recipient_inputs(args: Sequence) -> Tuple[RecipientInput, ...]:
    """Classifies the positional arguments of a recipient setter.

    Accepted shapes:
        - `(name, address)` where `name` is a string or `None`
        - `(addresses,)` a single delimited address string
        - `(recipient, ...)` one or more `Recipient` objects

    Raises:
        TypeError: For any other combination of arguments.
    """
    if args and all(isinstance(arg, Recipient) for arg in args):
        return tuple(PrebuiltRecipient(arg) for arg in args)
    if len(args) == 1 and isinstance(args[0], str):
        return (RawAddressString(args[0]),)
    if len(args) == 2 and (args[0] is None or isinstance(args[0], str)) and isinstance(args[1], str):
        return (NameAddressPair(args[0], args[1]),)
    raise TypeError(
        "Expected (name, address), a delimited address string or Recipient objects, "
        f"got {tuple(type(arg).__name__ for arg in args)}"
    )


def resolve_recipients(
    inputs: Sequence[RecipientInput], recipient_type: RecipientType
) -> Iterator[Recipient]:
    """Turns tagged inputs into recipients of `recipient_type`.

    Prebuilt recipients always take the given role, whatever role they
    carried before.
    """
    for item in inputs:
        if isinstance(item, RawAddressString):
            yield from parse_address_list(item.text, recipient_type)
        elif isinstance(item, NameAddressPair):
            yield Recipient(item.name, item.address, recipient_type)
        elif isinstance(item, PrebuiltRecipient):
            yield item.recipient.with_type(recipient_type)
        else:
            raise TypeError(f"Unsupported recipient input: {item!r}")


__all__ = [
    "parse_address_list",
    "RecipientListParser",
    "RawAddressString",
    "NameAddressPair",
    "PrebuiltRecipient",
    "RecipientInput",
    "recipient_inputs",
    "resolve_recipients",
]
