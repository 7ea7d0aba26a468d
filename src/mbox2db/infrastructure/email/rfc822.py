from __future__ import annotations
import re
from typing import Iterable

from mbox2db.domain.entities.email_record import EmailRecord
from mbox2db.domain.entities.raw_message import RawMessageBlock
from mbox2db.domain.errors import ParseFailure
from mbox2db.infrastructure.email.mime import MimeLeaf, MimeMultipart, MimeNode, MimeParseError, parse_mime

# lower-cased header name -> EmailRecord field
HEADER_FIELDS = {
    "from": "from_addr",
    "to": "to_addr",
    "cc": "cc",
    "bcc": "bcc",
    "subject": "subject",
    "date": "date",
    "message-id": "message_id",
    "in-reply-to": "in_reply_to",
    "references": "references",
    "content-type": "content_type",
    "x-gmail-labels": "gmail_labels",
}


_BLANK_LINES = (b"\n", b"\r\n", b"")
# what an indented line must look like to be treated as a misplaced header
_INDENTED_FIELD = re.compile(rb"[A-Za-z][A-Za-z0-9-]*:")
# what the stdlib parser accepts as a header line
_PARSER_FIELD = re.compile(rb"[\x21-\x39\x3b-\x7e]+:")


def clean_leading_whitespace(lines: Iterable[bytes]) -> bytes:
    """Repair indented header lines and join the lines.

    Some archives indent ordinary header lines, which ends header parsing
    early. Inside a header section (the message headers, or the part headers
    after a ``--`` boundary line) an indented ``Name:`` line is unindented,
    while any other indented line stays a folded continuation. In the message
    headers a bare line without a colon is folded onto the previous field so
    the parser keeps reading. Everywhere else leading whitespace is stripped.

    Lossy: a continuation that itself starts with ``Word:`` is split off as
    its own field.
    """
    cleaned: list[bytes] = []
    message_headers = True
    part_headers = False
    for line in lines:
        if line in _BLANK_LINES:
            message_headers = part_headers = False
            cleaned.append(line)
            continue

        indented = line[:1] in (b" ", b"\t")
        stripped = line.lstrip(b" \t")
        in_headers = message_headers or part_headers
        envelope = not cleaned and line.startswith(b"From ")

        if in_headers and indented and stripped.strip() and not _INDENTED_FIELD.match(stripped):
            cleaned.append(line)
        elif message_headers and not indented and not envelope and not _PARSER_FIELD.match(line):
            cleaned.append(b" " + line)
        elif indented and stripped.strip():
            cleaned.append(stripped)
        else:
            cleaned.append(line)

        if not message_headers and stripped.startswith(b"--"):
            part_headers = True
    return b"".join(cleaned)


def collect_bodies(root: MimeNode, record: EmailRecord) -> EmailRecord:
    """Depth-first walk in document order; the last leaf of each kind wins."""
    stack: list[MimeNode] = [root]
    while stack:
        node = stack.pop()
        if isinstance(node, MimeMultipart):
            stack.extend(reversed(node.parts))
            continue

        leaf: MimeLeaf = node
        if "text/html" in leaf.content_type:
            record.body_html = leaf.text
        else:
            record.body_plain = leaf.text
    return record


def extract_email_record(block: RawMessageBlock) -> EmailRecord:
    """Build an EmailRecord from one raw mbox block. ``date_parsed`` is left unset."""
    try:
        parsed = parse_mime(clean_leading_whitespace(block.lines))
    except MimeParseError as e:
        raise ParseFailure(block.sequence, str(e)) from e

    record = EmailRecord()
    seen: set[str] = set()
    for name, value in parsed.headers:
        field_name = HEADER_FIELDS.get(name.lower())
        if field_name is None or field_name in seen:
            continue
        seen.add(field_name)
        setattr(record, field_name, value)

    return collect_bodies(parsed.body, record)
