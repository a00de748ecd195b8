"""Outbound webhook handler — mirrors Template events to the webhook receiver."""

from protean.utils.mixins import handle

from documents.domain import documents
from documents.template.events import TemplateCreated, TemplateDeleted, TemplateUsed
from documents.template.template import Template
from shared.snapshots import Actor, TemplateSnapshot
from webhooks import catalog


def _unpack(event) -> tuple[Actor, TemplateSnapshot]:
    return Actor.from_json(event.actor), TemplateSnapshot.from_json(event.template)


@documents.event_handler(part_of=Template)
class TemplateWebhookHandler:
    @handle(TemplateCreated)
    def on_template_created(self, event: TemplateCreated) -> None:
        catalog.template_created(*_unpack(event))

    @handle(TemplateUsed)
    def on_template_used(self, event: TemplateUsed) -> None:
        catalog.template_used(*_unpack(event))

    @handle(TemplateDeleted)
    def on_template_deleted(self, event: TemplateDeleted) -> None:
        catalog.template_deleted(*_unpack(event))
