from __future__ import annotations
from dataclasses import dataclass
from email import policy
from email.errors import HeaderParseError
from email.header import decode_header, make_header
from email.message import Message
from email.parser import BytesParser
from typing import Union


class MimeParseError(ValueError):
    """The bytes could not be interpreted as an RFC-822 message."""


@dataclass(frozen=True)
class MimeLeaf:
    content_type: str  # lower-cased Content-Type header of the part, "" when absent
    text: str


@dataclass(frozen=True)
class MimeMultipart:
    parts: tuple["MimeNode", ...]


MimeNode = Union[MimeLeaf, MimeMultipart]


@dataclass(frozen=True)
class ParsedMime:
    headers: list[tuple[str, str]]  # every occurrence, in message order
    body: MimeNode


def _lossy_text(value: str) -> str:
    # undecodable header bytes arrive as surrogate escapes
    return value.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def decode_header_value(raw: str) -> str:
    """Unfold a raw header value and decode RFC 2047 encoded words.

    Raw values are used instead of the policy's header objects so that fields
    such as Date are kept exactly as written.
    """
    value = "".join(raw.splitlines()).strip()
    try:
        value = str(make_header(decode_header(value)))
    except (HeaderParseError, UnicodeError, LookupError, ValueError):
        pass
    return _lossy_text(value)


def _decode_text(part: Message) -> str:
    payload = part.get_payload(decode=True) or b""
    charset = part.get_content_charset() or "utf-8"
    try:
        return payload.decode(charset, errors="replace")
    except LookupError:
        return payload.decode("utf-8", errors="replace")


def _leaf_content_type(part: Message) -> str:
    content_type = part.get("Content-Type")
    return str(content_type).lower() if content_type is not None else ""


def _embedded_text(part: Message) -> str:
    if not part.is_multipart():
        return _decode_text(part)
    return _lossy_text(part.get_payload(0).as_bytes().decode("utf-8", "surrogateescape"))


def _to_node(part: Message) -> MimeNode:
    # an attached message is a single leaf, its own parts are not walked
    if part.get_content_type() == "message/rfc822":
        return MimeLeaf(content_type=_leaf_content_type(part), text=_embedded_text(part))
    if part.is_multipart():
        return MimeMultipart(parts=tuple(_to_node(sub) for sub in part.get_payload()))
    return MimeLeaf(content_type=_leaf_content_type(part), text=_decode_text(part))


def parse_mime(data: bytes) -> ParsedMime:
    """Parse one message into its header list and body-part tree."""
    try:
        em = BytesParser(policy=policy.default).parsebytes(data)
        headers = [(name, decode_header_value(value)) for name, value in em.raw_items()]
        # part headers are parsed lazily and can raise on hostile input
        body = _to_node(em)
    except Exception as e:
        raise MimeParseError(f"{type(e).__name__}: {e}") from e

    return ParsedMime(headers=headers, body=body)
