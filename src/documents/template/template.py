"""Template aggregate — reusable document text with ``{{variable}}`` placeholders.

Using a template renders its content with caller-supplied values and bumps
the usage counter.
"""

import json
import re
from datetime import UTC, datetime
from uuid import uuid4

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Identifier, Integer, String, Text

from documents.domain import documents
from shared.snapshots import Actor, TemplateSnapshot

_PLACEHOLDER = re.compile(r"\{\{\s*([A-Za-z_][A-Za-z0-9_]*)\s*\}\}")


def extract_variables(content: str) -> list[str]:
    """Placeholder names in first-seen order."""
    names: list[str] = []
    for name in _PLACEHOLDER.findall(content or ""):
        if name not in names:
            names.append(name)
    return names


@documents.aggregate
class Template:
    name: String(required=True, max_length=255)
    category: String(required=True, max_length=100)
    content: Text(required=True)
    variables: Text()  # JSON list of placeholder names
    is_public: Boolean(default=False)
    usage_count: Integer(default=0, min_value=0)
    created_by: Identifier()
    is_deleted: Boolean(default=False)
    created_at: DateTime()
    updated_at: DateTime()

    @classmethod
    def create(cls, actor: Actor, name, category, content, is_public=False):
        from documents.template.events import TemplateCreated

        now = datetime.now(UTC)
        template = cls(
            id=str(uuid4()),
            name=name,
            category=category,
            content=content,
            variables=json.dumps(extract_variables(content)),
            is_public=is_public,
            usage_count=0,
            created_by=actor.id,
            created_at=now,
            updated_at=now,
        )
        template.raise_(
            TemplateCreated(
                template_id=str(template.id),
                actor=actor.to_json(),
                template=template.snapshot().to_json(),
                created_at=now,
            )
        )
        return template

    def get_variables(self) -> list[str]:
        return json.loads(self.variables) if self.variables else []

    def snapshot(self) -> TemplateSnapshot:
        return TemplateSnapshot(
            id=str(self.id),
            name=self.name,
            category=self.category,
            is_public=bool(self.is_public),
            variables=self.get_variables(),
            usage_count=self.usage_count or 0,
        )

    def use(self, actor: Actor, values: dict[str, str]) -> str:
        """Render the template with ``values``; every variable must be supplied."""
        from documents.template.events import TemplateUsed

        missing = [name for name in self.get_variables() if name not in values]
        if missing:
            raise ValidationError({"values": [f"Missing template values: {', '.join(missing)}"]})

        rendered = _PLACEHOLDER.sub(lambda m: str(values[m.group(1)]), self.content)

        now = datetime.now(UTC)
        self.usage_count = (self.usage_count or 0) + 1
        self.updated_at = now
        self.raise_(
            TemplateUsed(
                template_id=str(self.id),
                actor=actor.to_json(),
                template=self.snapshot().to_json(),
                used_at=now,
            )
        )
        return rendered

    def delete(self, actor: Actor):
        from documents.template.events import TemplateDeleted

        if self.is_deleted:
            raise ValidationError({"template": ["Template is already deleted"]})

        now = datetime.now(UTC)
        self.is_deleted = True
        self.updated_at = now
        self.raise_(
            TemplateDeleted(
                template_id=str(self.id),
                actor=actor.to_json(),
                template=self.snapshot().to_json(),
                deleted_at=now,
            )
        )
