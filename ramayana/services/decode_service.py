"""Decoding of the bundled document format.

The wire format uses the external key names declared as aliases on the
models in `ramayana.core.models`. Decoding is structural only: duplicate
ids, ordering and declared shloka counts are taken as they come.
"""

from __future__ import annotations

from pydantic import ValidationError

from ramayana.core.errors import MalformedDocument
from ramayana.core.models import Document


def decode_document(data: bytes | str, source: str | None = None) -> Document:
    """Decode JSON text into a Document.

    Raises MalformedDocument for unparseable JSON, invalid UTF-8, missing
    required keys or wrong value types.
    """
    if isinstance(data, bytes):
        try:
            data = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedDocument(f"not valid UTF-8: {e}", source) from e
    try:
        return Document.model_validate_json(data)
    except ValidationError as e:
        errors = e.errors(include_url=False)
        first = errors[0] if errors else {}
        loc = ".".join(str(p) for p in first.get("loc", ()))
        msg = first.get("msg", str(e))
        raise MalformedDocument(f"{len(errors)} error(s), first at '{loc}': {msg}", source) from e


def encode_document(document: Document) -> bytes:
    """Encode a Document back into the external key layout."""
    return document.model_dump_json(by_alias=True, indent=2).encode("utf-8")
