"""Upload-time document classification: auto-tags and document type."""

import re

from documents.document.document import DocumentType

# File-name keyword -> tags added when the keyword appears in the name
_KEYWORD_TAGS = (
    ("contract", ("contract", "legal")),
    ("nda", ("nda", "confidential")),
    ("agreement", ("agreement", "legal")),
    ("invoice", ("invoice", "financial")),
    ("template", ("template",)),
    ("draft", ("draft",)),
    ("final", ("final",)),
    ("signed", ("signed",)),
    ("proposal", ("proposal", "business")),
)

# MIME fragment -> tags
_MIME_TAGS = (
    ("pdf", ("pdf",)),
    ("word", ("word", "document")),
    ("excel", ("excel", "spreadsheet")),
    ("image", ("image",)),
)

_YEAR = re.compile(r"(?<!\d)((?:19|20)\d{2})(?!\d)")


def generate_auto_tags(file_name: str, mime_type: str) -> list[str]:
    """Derive tags from the MIME type, file-name keywords and any year in the name."""
    tags: list[str] = []
    name = file_name.lower()
    mime = (mime_type or "").lower()

    for fragment, fragment_tags in _MIME_TAGS:
        if fragment in mime:
            tags.extend(fragment_tags)

    for keyword, keyword_tags in _KEYWORD_TAGS:
        if keyword in name:
            tags.extend(keyword_tags)

    tags.extend(_YEAR.findall(name))

    return merge_tags(tags)


def merge_tags(*groups) -> list[str]:
    """Concatenate tag groups, dropping duplicates while keeping first-seen order."""
    merged: list[str] = []
    for group in groups:
        for tag in group or ():
            if tag not in merged:
                merged.append(tag)
    return merged


def document_type_for(mime_type: str) -> str:
    mime = (mime_type or "").lower()
    if "pdf" in mime:
        return DocumentType.PDF.value
    if "word" in mime:
        return DocumentType.DOCUMENT.value
    if "excel" in mime:
        return DocumentType.SPREADSHEET.value
    if "image" in mime:
        return DocumentType.IMAGE.value
    if "text" in mime:
        return DocumentType.TEXT.value
    return DocumentType.OTHER.value


def is_proposal(file_name: str, tags: list[str]) -> bool:
    return "proposal" in file_name.lower() or "proposal" in tags
