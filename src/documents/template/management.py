"""Template management — commands and handler."""

import json

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Boolean, Identifier, String, Text
from protean.utils.globals import current_domain

from documents.domain import documents
from documents.template.template import Template
from shared.snapshots import Actor


@documents.command(part_of="Template")
class CreateTemplate:
    actor: Text(required=True)
    name: String(required=True, max_length=255)
    category: String(required=True, max_length=100)
    content: Text(required=True)
    is_public: Boolean(default=False)


@documents.command(part_of="Template")
class UseTemplate:
    """Render a template; returns the rendered text."""

    actor: Text(required=True)
    template_id: Identifier(required=True)
    values: Text()  # JSON object of variable -> value


@documents.command(part_of="Template")
class DeleteTemplate:
    actor: Text(required=True)
    template_id: Identifier(required=True)


def load_template(template_id: str) -> Template:
    template = current_domain.repository_for(Template).get(template_id)
    if template.is_deleted:
        raise ObjectNotFoundError({"_entity": f"Template {template_id} not found"})
    return template


@documents.command_handler(part_of=Template)
class ManageTemplateHandler:
    @handle(CreateTemplate)
    def create_template(self, command):
        template = Template.create(
            actor=Actor.from_json(command.actor),
            name=command.name,
            category=command.category,
            content=command.content,
            is_public=command.is_public,
        )
        current_domain.repository_for(Template).add(template)
        return str(template.id)

    @handle(UseTemplate)
    def use_template(self, command):
        values = json.loads(command.values) if command.values else {}

        template = load_template(command.template_id)
        rendered = template.use(Actor.from_json(command.actor), values)
        current_domain.repository_for(Template).add(template)
        return rendered

    @handle(DeleteTemplate)
    def delete_template(self, command):
        template = load_template(command.template_id)
        template.delete(Actor.from_json(command.actor))
        current_domain.repository_for(Template).add(template)
