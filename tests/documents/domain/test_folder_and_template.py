"""Tests for the Folder and Template aggregates."""

import pytest
from documents.folder.events import FolderCreated, FolderDeleted
from documents.folder.folder import Folder
from documents.template.events import TemplateCreated, TemplateDeleted, TemplateUsed
from documents.template.template import Template, extract_variables
from protean.exceptions import ValidationError
from shared.snapshots import Actor, TemplateSnapshot

ACTOR = Actor(id="1", name="Umar Khan", email="umar@pocketlaw.com", role="admin")

NDA_TEXT = "This agreement between {{party_a}} and {{ party_b }} is governed by {{law}}. Signed: {{party_a}}"


class TestFolder:
    def test_create(self):
        folder = Folder.create(ACTOR, "Contracts", parent_id="root")

        assert folder.name == "Contracts"
        assert folder.snapshot().parent_id == "root"
        assert isinstance(folder._events[0], FolderCreated)

    def test_blank_name_is_rejected(self):
        with pytest.raises(ValidationError):
            Folder.create(ACTOR, "   ")

    def test_delete(self):
        folder = Folder.create(ACTOR, "Contracts")
        folder._events.clear()

        folder.delete(ACTOR)

        assert folder.is_deleted is True
        assert isinstance(folder._events[0], FolderDeleted)


class TestTemplate:
    def _template(self):
        template = Template.create(ACTOR, "Mutual NDA", "nda", NDA_TEXT, is_public=True)
        template._events.clear()
        return template

    def test_variables_extracted_in_order(self):
        assert extract_variables(NDA_TEXT) == ["party_a", "party_b", "law"]

    def test_create(self):
        template = Template.create(ACTOR, "Mutual NDA", "nda", NDA_TEXT)

        assert template.get_variables() == ["party_a", "party_b", "law"]
        assert template.usage_count == 0
        event = template._events[0]
        assert isinstance(event, TemplateCreated)
        assert TemplateSnapshot.from_json(event.template).variables == ["party_a", "party_b", "law"]

    def test_use_renders_and_counts(self):
        template = self._template()

        rendered = template.use(ACTOR, {"party_a": "Acme", "party_b": "Pocketlaw", "law": "English law"})

        assert rendered == "This agreement between Acme and Pocketlaw is governed by English law. Signed: Acme"
        assert template.usage_count == 1
        event = template._events[0]
        assert isinstance(event, TemplateUsed)
        assert TemplateSnapshot.from_json(event.template).usage_count == 1

    def test_use_requires_every_variable(self):
        template = self._template()

        with pytest.raises(ValidationError):
            template.use(ACTOR, {"party_a": "Acme"})
        assert template.usage_count == 0

    def test_delete(self):
        template = self._template()

        template.delete(ACTOR)

        assert template.is_deleted is True
        assert isinstance(template._events[0], TemplateDeleted)
