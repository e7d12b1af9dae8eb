"""Decode and encode a contact document in JSON."""

from __future__ import annotations

import argparse
import json
from dataclasses import dataclass, field
from typing import Any

SAMPLE_JSON = """{
\t"name": "Gopher",
\t"title": "programmer",
\t"contact": {
\t\t"home": "[phone]",
\t\t"cell": "[phone]"
\t}
}"""


@dataclass(frozen=True)
class ContactNumbers:
    """The ways to reach a contact."""

    home: str = ""
    cell: str = ""


@dataclass(frozen=True)
class Contact:
    """A person with a title and phone numbers."""

    name: str = ""
    title: str = ""
    contact: ContactNumbers = field(default_factory=ContactNumbers)


def _string(obj: dict[str, Any], key: str) -> str:
    value = obj.get(key, "")
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


def decode_contact(text: str | bytes) -> Contact:
    """Parse a JSON contact document; raise ValueError if it does not fit."""
    document = json.loads(text)
    if not isinstance(document, dict):
        raise ValueError("contact document must be a JSON object")
    numbers = document.get("contact") or {}
    if not isinstance(numbers, dict):
        raise ValueError("field 'contact' must be an object")
    return Contact(
        name=_string(document, "name"),
        title=_string(document, "title"),
        contact=ContactNumbers(
            home=_string(numbers, "home"), cell=_string(numbers, "cell")
        ),
    )


def encode_contact(contact: Contact) -> str:
    """Return *contact* as JSON with sorted keys and four-space indentation."""
    document = {
        "name": contact.name,
        "title": contact.title,
        "contact": {"home": contact.contact.home, "cell": contact.contact.cell},
    }
    return json.dumps(document, indent=4, sort_keys=True)


def main(argv: list[str] | None = None) -> int:
    """Decode a contact document, show its fields and print it re-encoded."""
    parser = argparse.ArgumentParser(
        prog="contacts", description="Decode and re-encode a JSON contact."
    )
    parser.add_argument("path", nargs="?", help="JSON file (default: a sample)")
    args = parser.parse_args(argv)

    try:
        if args.path is None:
            text = SAMPLE_JSON
        else:
            with open(args.path, encoding="utf-8") as handle:
                text = handle.read()
        contact = decode_contact(text)
    except (OSError, ValueError) as exc:
        print("ERROR:", exc)
        return 1

    print("Name:", contact.name)
    print("Title:", contact.title)
    print("Contact")
    print("H:", contact.contact.home)
    print("C:", contact.contact.cell)
    print(encode_contact(contact))
    return 0