"""
Tests for recipient parsing and input normalization.
"""

import pytest

from ezmessage.models import Recipient, RecipientType
from ezmessage.recipients import (
    NameAddressPair,
    PrebuiltRecipient,
    RawAddressString,
    RecipientListParser,
    parse_address_list,
    recipient_inputs,
    resolve_recipients,
)


class TestParseAddressList:
    """Test splitting of delimited address strings."""

    def test_single_address(self):
        """Test a string without delimiters yields one recipient."""
        result = parse_address_list("5@candyshop.org", RecipientType.TO)
        assert result == [Recipient(None, "5@candyshop.org", RecipientType.TO)]

    def test_comma_delimited(self):
        """Test comma separated addresses."""
        result = parse_address_list("6@candyshop.org,7@candyshop.org", RecipientType.CC)
        assert [r.address for r in result] == ["6@candyshop.org", "7@candyshop.org"]
        assert all(r.type is RecipientType.CC for r in result)

    def test_semicolon_delimited(self):
        """Test semicolon separated addresses."""
        result = parse_address_list("8@candyshop.org;9@candyshop.org", RecipientType.BCC)
        assert [r.address for r in result] == ["8@candyshop.org", "9@candyshop.org"]

    def test_mixed_delimiters_preserve_order(self):
        """Test both delimiters in one string, order preserved."""
        result = parse_address_list("a@x.org;b@x.org,c@x.org", RecipientType.TO)
        assert [r.address for r in result] == ["a@x.org", "b@x.org", "c@x.org"]

    def test_whitespace_is_trimmed(self):
        """Test whitespace around delimiters and addresses is removed."""
        result = parse_address_list("  a@x.org ;  b@x.org ,\tc@x.org  ", RecipientType.TO)
        assert [r.address for r in result] == ["a@x.org", "b@x.org", "c@x.org"]

    def test_empty_tokens_dropped(self):
        """Test trailing and repeated delimiters produce no recipients."""
        result = parse_address_list("a@x.org,, ;b@x.org;", RecipientType.TO)
        assert [r.address for r in result] == ["a@x.org", "b@x.org"]

    def test_only_delimiters(self):
        """Test a string of delimiters yields nothing."""
        assert parse_address_list(" , ; ", RecipientType.TO) == []

    def test_no_syntax_validation(self):
        """Test malformed addresses are accepted as-is."""
        result = parse_address_list("not-an-address", RecipientType.TO)
        assert result[0].address == "not-an-address"

    def test_names_are_unset(self):
        """Test parsed recipients never carry a name."""
        result = parse_address_list("a@x.org,b@x.org", RecipientType.TO)
        assert all(r.name is None for r in result)

    def test_parser_class_binds_role(self):
        """Test RecipientListParser applies its role."""
        parser = RecipientListParser(RecipientType.CC)
        assert parser.parse("a@x.org") == [Recipient(None, "a@x.org", RecipientType.CC)]


class TestRecipientInputs:
    """Test classification of setter arguments."""

    def test_pair(self):
        """Test (name, address) becomes a NameAddressPair."""
        assert recipient_inputs(("1", "1@x.org")) == (NameAddressPair("1", "1@x.org"),)

    def test_pair_without_name(self):
        """Test (None, address) is a pair as well."""
        assert recipient_inputs((None, "2@x.org")) == (NameAddressPair(None, "2@x.org"),)

    def test_raw_string(self):
        """Test a single string becomes a RawAddressString."""
        assert recipient_inputs(("a@x.org,b@x.org",)) == (RawAddressString("a@x.org,b@x.org"),)

    def test_recipients(self):
        """Test Recipient objects are wrapped one by one."""
        r1 = Recipient("13", "13@x.org")
        r2 = Recipient("14", "14@x.org")
        assert recipient_inputs((r1, r2)) == (PrebuiltRecipient(r1), PrebuiltRecipient(r2))

    @pytest.mark.parametrize("args", [(), (42,), ("a", "b", "c"), (None,), (Recipient(None, "a@x.org"), "b@x.org")])
    def test_unsupported_shapes(self, args):
        """Test other argument shapes are rejected."""
        with pytest.raises(TypeError):
            recipient_inputs(args)


class TestResolveRecipients:
    """Test turning tagged inputs into recipients."""

    def test_role_is_forced(self):
        """Test prebuilt recipients take the caller's role."""
        inputs = (PrebuiltRecipient(Recipient("x", "x@x.org", RecipientType.BCC)),)
        result = list(resolve_recipients(inputs, RecipientType.TO))
        assert result == [Recipient("x", "x@x.org", RecipientType.TO)]

    def test_mixed_inputs(self):
        """Test every variant resolves in order."""
        inputs = (
            NameAddressPair("1", "1@x.org"),
            RawAddressString("2@x.org;3@x.org"),
            PrebuiltRecipient(Recipient(None, "4@x.org")),
        )
        result = list(resolve_recipients(inputs, RecipientType.CC))
        assert result == [
            Recipient("1", "1@x.org", RecipientType.CC),
            Recipient(None, "2@x.org", RecipientType.CC),
            Recipient(None, "3@x.org", RecipientType.CC),
            Recipient(None, "4@x.org", RecipientType.CC),
        ]

    def test_pair_with_empty_address(self):
        """Test a pair with an empty address is rejected."""
        with pytest.raises(ValueError):
            list(resolve_recipients((NameAddressPair("n", ""),), RecipientType.TO))
