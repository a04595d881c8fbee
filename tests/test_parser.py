"""Tests for the EmailParser public interface."""

import re

import pytest

import quotestrip
from quotestrip import DEFAULT_PATTERNS, Email, EmailParser, InvalidInputError, Matcher, QuoteStripError

MAILING_LIST_POST = """\
Hi folks

What is the best way to clear a Riak bucket of all key, values after
running a test?
I am currently using the Java HTTP API.

-Abhishek Kona


_______________________________________________
riak-users mailing list
riak-users@lists.basho.com
http://lists.basho.com/mailman/listinfo/riak-users_lists.basho.com
"""

TOP_POST = """\
Oh thanks.

Having the function would be great.

-Abhishek Kona

On 01/03/11 7:07 PM, Russell Brown wrote:
> Hi,
> There is no API call to delete a bucket.
>
> Cheers
>
> Russell
>
> On 1 Mar 2011, at 13:31, Abhishek Kona wrote:
>
>> Hi folks
>>
>> What is the best way to clear a Riak bucket?
>>
>> -Abhishek Kona
>
>


_______________________________________________
riak-users mailing list
riak-users@lists.basho.com
http://lists.basho.com/mailman/listinfo/riak-users_lists.basho.com
"""

BOTTOM_POST = """\
Hi,
On Tue, 2011-03-01 at 18:02 +0530, Abhishek Kona wrote:
> Hi folks
>
> What is the best way to clear a Riak bucket of all key, values after
> running a test?
> I am currently using the Java HTTP API.

You can list the keys for the bucket and call delete for each. Or if you
put the keys (and kept track of them in your test) you can delete them
one at a time (without incurring the cost of calling list first.)

Something like:

        String bucket = "my_bucket";
        BucketResponse bucketResponse = riakClient.listBucket(bucket);

would do it.

>
> -Abhishek Kona
>
>
> _______________________________________________
> riak-users mailing list
> riak-users@lists.basho.com


_______________________________________________
riak-users mailing list
riak-users@lists.basho.com
"""

WRAPPED_HEADER = """\
I get proper rendering as well.

Sent from a magnificent torch of pixels

On Dec 16, 2011, at 12:47 PM, Corey Donohoe
<reply@reply.github.com>
wrote:

> Was this caching related or fixed already?  I get anchors in the markdown
> just fine, but I also get the same `Nothing found` error on both pages.
>
> ---
> Reply to this email directly or view it on GitHub:
> https://github.com/github/markup/issues/6#issuecomment-3193051"""

WINDOWS_LINE_ENDINGS = (
    ":+1:\r\n"
    "\r\n"
    "On Tue, Sep 25, 2012 at 8:19 AM, Chris Wanstrath\r\n"
    "<notifications@github.com>wrote:\r\n"
    "\r\n"
    "> Steps 0-2 are in prod. Gonna let them sit for a bit then start cleaning up\r\n"
    "> the old code with 3 & 4.\r\n"
    ">\r\n"
    "> Reply to this email directly or view it on GitHub.\r\n"
)

BULLETS = """\
test 2 this should list second

and have spaces

and retain this formatting


   - how about bullets
   - and another


On Fri, Feb 24, 2012 at 10:19 AM, <examples@email.goalengine.com> wrote:

> Give us an example of how you applied what they learned to achieve
> something in your organization"""

FORWARDED = """\
Hey, check out the joke below.

---------- Forwarded message ----------
From: Someone <someone@example.com>
Date: Mon, Jan 7, 2013 at 10:21 AM
Subject: Funny
To: me@example.com


A man is flying in a hot air balloon and realizes he is lost.
"You must work in management," says the man below."""

YAHOO = """\
who is using yahoo?



________________________________
 From: Felix Geisendörfer <felix@example.com>
To: "someone@yahoo.com" <someone@yahoo.com>
Sent: Monday, January 7, 2013 2:56 PM
Subject: test


yahoo does not quote with >"""

OUTLOOK = """\
Outlook with a reply


 ------------------------------
 *From:* Google Apps Sync Team [mailto:mail-noreply@google.com]
 *Sent:* Thu, Oct 27, 2011 at 9:15 PM
 *To:* me@example.com
 *Subject:* Google Apps Sync was updated!

Dear Google Apps Sync user,

You're receiving this message because you use Google Apps Sync for Microsoft Outlook."""

GMAIL_DATE_HEADER = """\
Fine, and you?

2012/11/23 Felix Geisendörfer <felix@example.com>

> How are you?"""

ONE_IS_NOT_ON = """\
Thank, this is really helpful.

One outstanding question I had:

Locally (on development), when I run the app it takes a while.

On Oct 1, 2012, at 11:55 PM, Dave Tapley wrote:

> The good news is that I've found a much better query for lastLocation.
>"""

FIXTURES = (
    MAILING_LIST_POST,
    TOP_POST,
    BOTTOM_POST,
    WRAPPED_HEADER,
    WINDOWS_LINE_ENDINGS,
    BULLETS,
    FORWARDED,
    YAHOO,
    OUTLOOK,
    GMAIL_DATE_HEADER,
    ONE_IS_NOT_ON,
)


def _flags(email: Email, name: str) -> list[bool]:
    return [getattr(fragment, name) for fragment in email]


class TestParserBasic:
    """Basic parser behavior."""

    def test_plain_reply(self) -> None:
        """Text without markers is one visible fragment."""
        email = EmailParser().parse("Just a quick note.\n\nSee you tomorrow.")

        assert len(email) == 1
        assert email.visible_text == "Just a quick note.\n\nSee you tomorrow."

    def test_reply_with_signature(self) -> None:
        """Signature below the reply is hidden."""
        email = EmailParser().parse("Hi there\n\nThanks,\n-- \nBob")

        assert len(email) == 2
        assert _flags(email, "signature") == [False, True]
        assert _flags(email, "hidden") == [False, True]
        assert email.visible_text == "Hi there"

    def test_reply_above_quote(self) -> None:
        """Quoted history below the reply is hidden."""
        email = EmailParser().parse("New text\n\nOn Jan 1, 2020, X wrote:\n> old text")

        assert _flags(email, "quoted") == [False, True]
        assert email.visible_text == "New text"
        assert email.quoted_text == "On Jan 1, 2020, X wrote:\n> old text"

    def test_quote_only_stays_visible(self) -> None:
        """An email that is only a quote is not emptied."""
        email = EmailParser().parse("> just a quote\n> nothing else")

        assert len(email) == 1
        assert email[0].quoted is True
        assert email[0].hidden is False
        assert email.visible_text == "> just a quote\n> nothing else"

    def test_empty_string(self) -> None:
        """Empty input parses to an empty email."""
        email = EmailParser().parse("")

        assert len(email) == 0
        assert email.text == ""
        assert email.visible_text == ""

    def test_whitespace_only(self) -> None:
        """Whitespace-only input has no visible text."""
        email = EmailParser().parse("\n   \n")

        assert email.visible_text == ""

    def test_parse_reply(self) -> None:
        """parse_reply returns the visible text."""
        parser = EmailParser()
        assert parser.parse_reply("Sounds good.\n\nOn Mon, Bob wrote:\n> Lunch?") == "Sounds good."

    def test_patterns_property(self) -> None:
        """Parser exposes its pattern set."""
        assert EmailParser().patterns is DEFAULT_PATTERNS

    def test_str_is_visible_text(self) -> None:
        email = EmailParser().parse("Hi\n\n-- \nBob")
        assert str(email) == "Hi"


class TestInputValidation:
    """Input type checking."""

    def test_bytes_rejected(self) -> None:
        """Bytes must be decoded by the caller."""
        with pytest.raises(InvalidInputError, match="Expected str, got bytes"):
            EmailParser().parse(b"Hello")  # type: ignore[arg-type]

    def test_none_rejected(self) -> None:
        with pytest.raises(InvalidInputError, match="NoneType"):
            EmailParser().parse_reply(None)  # type: ignore[arg-type]

    def test_error_hierarchy(self) -> None:
        """InvalidInputError is a QuoteStripError."""
        with pytest.raises(QuoteStripError):
            quotestrip.parse(42)  # type: ignore[arg-type]

    def test_invalid_header_span(self) -> None:
        """max_header_lines is validated at construction."""
        with pytest.raises(ValueError):
            EmailParser(max_header_lines=0)


class TestMailingListFixtures:
    """Mailing-list threads with footers and nested quotes."""

    def test_signature_and_footer(self) -> None:
        """Sign-off and list footer become two signature fragments."""
        email = quotestrip.parse(MAILING_LIST_POST)

        assert len(email) == 3
        assert _flags(email, "quoted") == [False, False, False]
        assert _flags(email, "signature") == [False, True, True]
        assert _flags(email, "hidden") == [False, True, True]
        assert email[0].text.startswith("Hi folks")
        assert email[0].text.endswith("\n")
        assert email[1].text.startswith("-Abhishek Kona")
        assert email[2].text.startswith("_" * 47)

    def test_top_post(self) -> None:
        """Reply, signature, quoted thread, blank gap and list footer."""
        email = quotestrip.parse(TOP_POST)

        assert len(email) == 5
        assert _flags(email, "quoted") == [False, False, True, False, False]
        assert _flags(email, "signature") == [False, True, False, False, True]
        assert _flags(email, "hidden") == [False, True, True, True, True]
        assert email[1].text == "-Abhishek Kona"
        assert re.search(r"(?m)^On 01/03/11", email[2].text)
        assert email[4].text.startswith("_")
        assert email.visible_text == "Oh thanks.\n\nHaving the function would be great."

    def test_bottom_post(self) -> None:
        """Reply interleaved below a quote keeps both plain fragments."""
        email = quotestrip.parse(BOTTOM_POST)

        assert len(email) == 6
        assert _flags(email, "quoted") == [False, True, False, True, False, False]
        assert _flags(email, "signature") == [False, False, False, False, False, True]
        assert _flags(email, "hidden") == [False, True, False, True, True, True]
        assert email.visible_text.startswith("Hi,\n\nYou can list the keys")
        assert email.visible_text.endswith("would do it.")
        assert "riak-users" not in email.visible_text


class TestQuoteHeaderFixtures:
    """Attribution lines in their many shapes."""

    def test_wrapped_header(self) -> None:
        """Header wrapped over three lines folds into the quote."""
        email = quotestrip.parse(WRAPPED_HEADER)

        assert len(email) == 2
        assert email[0].text.startswith("I get")
        assert re.search(r"(?m)^On", email[1].text)
        assert "Was this" in email[1].text
        assert email.visible_text == "I get proper rendering as well.\n\nSent from a magnificent torch of pixels"

    def test_windows_line_endings(self) -> None:
        """CRLF input with a two-line header."""
        email = quotestrip.parse(WINDOWS_LINE_ENDINGS)

        assert ":+1:" in email[0].text
        assert re.search(r"(?m)^On", email[1].text)
        assert "Steps 0-2" in email[1].text
        assert "\r" not in email.text
        assert email.visible_text == ":+1:"

    def test_gmail_date_header(self) -> None:
        """Gmail attribution without 'wrote:'."""
        assert quotestrip.parse_reply(GMAIL_DATE_HEADER) == "Fine, and you?"

    def test_one_is_not_on(self) -> None:
        """'One ...:' in the reply is not an attribution."""
        email = quotestrip.parse(ONE_IS_NOT_ON)

        assert len(email) == 2
        assert "One outstanding question" in email[0].text
        assert re.search(r"(?m)^On Oct 1, 2012", email[1].text)

    def test_custom_header_pattern(self) -> None:
        """Extended patterns recognize localized attributions."""
        french = Matcher("le_a_ecrit", re.compile(r"^\s*Le\s.+a\s?écrit\s?:\s*$"))
        parser = EmailParser(DEFAULT_PATTERNS.extend(quote_headers=(french,)))
        body = "Merci !\n\nLe 3 mars 2024, Marie a écrit :\n> Bonjour"

        assert parser.parse_reply(body) == "Merci !"
        assert "a écrit" in quotestrip.parse_reply(body)


class TestSignatureFixtures:
    """Sign-off detection."""

    @pytest.mark.parametrize(
        "device",
        ["iPhone", "BlackBerry", "Verizon Wireless BlackBerry"],
    )
    def test_sent_from_device(self, device: str) -> None:
        """Mobile client sign-offs are hidden."""
        body = f"Here is another email\n\nSent from my {device}"
        assert quotestrip.parse_reply(body) == "Here is another email"

    def test_sent_from_in_sentence(self) -> None:
        """A sentence starting with 'Sent from my' is kept."""
        body = "Here is another email\n\nSent from my desk, is much easier then my mobile phone."
        assert quotestrip.parse_reply(body) == body

    def test_signature_directly_below_quote(self) -> None:
        """A sign-off right under a quote is hidden with it."""
        email = quotestrip.parse("Reply here\n\n> quoted\n-- \nBob")

        assert _flags(email, "signature") == [False, False, True]
        assert _flags(email, "hidden") == [False, True, True]
        assert email.visible_text == "Reply here"

    def test_indented_dash_items(self) -> None:
        """Indented -items in the reply are kept and the quote is hidden."""
        email = quotestrip.parse("Steps:\n  -run make\n  -run tests\n\nOn Mon, X wrote:\n> hi")

        assert _flags(email, "signature") == [False, False]
        assert _flags(email, "hidden") == [False, True]
        assert email.visible_text == "Steps:\n  -run make\n  -run tests"

    def test_correct_signature(self) -> None:
        """RFC 3676 delimiter."""
        email = quotestrip.parse("this is an email with a correct -- signature.\n\n-- \nrick")

        assert _flags(email, "quoted") == [False, False]
        assert _flags(email, "signature") == [False, True]
        assert _flags(email, "hidden") == [False, True]
        assert re.match(r"-- \nrick", email[1].text)

    def test_bullets_are_not_signatures(self) -> None:
        """Indented dash bullets keep their formatting."""
        assert quotestrip.parse_reply(BULLETS) == (
            "test 2 this should list second\n\n"
            "and have spaces\n\n"
            "and retain this formatting\n\n\n"
            "   - how about bullets\n"
            "   - and another"
        )


class TestBannerAndForwardFixtures:
    """Clients that do not quote with >."""

    def test_yahoo(self) -> None:
        """Underscore rule above From: starts the quoted message."""
        email = quotestrip.parse(YAHOO)

        assert len(email) == 2
        assert _flags(email, "quoted") == [False, True]
        assert _flags(email, "hidden") == [False, True]
        assert email.visible_text == "who is using yahoo?"

    def test_outlook(self) -> None:
        """Dash rule above *From:* starts the quoted message."""
        email = quotestrip.parse(OUTLOOK)

        assert _flags(email, "quoted") == [False, True]
        assert email.visible_text == "Outlook with a reply"

    def test_forwarded(self) -> None:
        """Forwarded messages stay visible."""
        email = quotestrip.parse(FORWARDED)

        assert len(email) == 2
        assert _flags(email, "forwarded") == [False, True]
        assert _flags(email, "quoted") == [False, False]
        assert _flags(email, "hidden") == [False, False]
        assert "hot air balloon" in email.visible_text

    def test_quoted_forward_marker(self) -> None:
        """A forward the client quoted stays visible with its body."""
        body = "See below\n\n> ---------- Forwarded message ----------\n> From: a@example.com\n>\n> the shared body"
        email = quotestrip.parse(body)

        assert _flags(email, "forwarded") == [False, True]
        assert _flags(email, "quoted") == [False, False]
        assert _flags(email, "hidden") == [False, False]
        assert email.visible_text == body


class TestParserProperties:
    """Properties that hold for every body."""

    @pytest.mark.parametrize("body", FIXTURES)
    def test_text_is_lossless(self, body: str) -> None:
        """Concatenated fragments equal the normalized input."""
        expected = body.replace("\r\n", "\n").replace("\r", "\n")
        assert quotestrip.parse(body).text == expected

    @pytest.mark.parametrize("body", FIXTURES)
    def test_parse_is_deterministic(self, body: str) -> None:
        """Parsing the same body twice gives equal results."""
        assert quotestrip.parse(body) == quotestrip.parse(body)

    @pytest.mark.parametrize("body", FIXTURES)
    def test_visible_text_is_stable(self, body: str) -> None:
        """Reparsing the visible text removes nothing more."""
        visible = quotestrip.parse_reply(body)
        assert quotestrip.parse_reply(visible) == visible

    @pytest.mark.parametrize("body", FIXTURES)
    def test_reparsing_full_text_keeps_visible_text(self, body: str) -> None:
        """Parsing the full rendering again gives the same visible text."""
        email = quotestrip.parse(body)
        assert quotestrip.parse(email.text).visible_text == email.visible_text

    @pytest.mark.parametrize("body", FIXTURES)
    def test_hidden_only_after_content(self, body: str) -> None:
        """Nothing is hidden before the first non-noise fragment."""
        email = quotestrip.parse(body)
        seen_content = False
        for fragment in email:
            if not fragment.hidden and not (fragment.quoted or fragment.signature or fragment.is_blank):
                seen_content = True
            if fragment.hidden:
                assert seen_content

    def test_leading_quote_stays_visible(self) -> None:
        """Quote before the first content is kept; signature after it is not."""
        email = quotestrip.parse("> quoted\n\nmy reply\n\n-- \nsig")

        assert _flags(email, "quoted") == [True, False, False]
        assert _flags(email, "hidden") == [False, False, True]
        assert email.visible_text == "> quoted\n\nmy reply"
