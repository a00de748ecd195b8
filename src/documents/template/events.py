"""Domain events for the Template aggregate."""

from protean.fields import DateTime, Identifier, Text

from documents.domain import documents


@documents.event(part_of="Template")
class TemplateCreated:
    __version__ = "v1"

    template_id: Identifier(required=True)
    actor: Text(required=True)
    template: Text(required=True)
    created_at: DateTime(required=True)


@documents.event(part_of="Template")
class TemplateUsed:
    """A template was rendered into document text."""

    __version__ = "v1"

    template_id: Identifier(required=True)
    actor: Text(required=True)
    template: Text(required=True)
    used_at: DateTime(required=True)


@documents.event(part_of="Template")
class TemplateDeleted:
    __version__ = "v1"

    template_id: Identifier(required=True)
    actor: Text(required=True)
    template: Text(required=True)
    deleted_at: DateTime(required=True)
