"""Tests for the subject area definition scenario against the fake platform."""

from __future__ import annotations

import pytest

from metadata_fvt.clients.subject_area import SubjectAreaClient
from metadata_fvt.core.exceptions import InvalidParameterError, PropertyServerError
from metadata_fvt.domain import Glossary, SubjectAreaDefinition
from metadata_fvt.harness import PropertyMismatchFailure
from metadata_fvt.scenarios import subject_area as scenario_module
from metadata_fvt.scenarios.subject_area import SubjectAreaDefinitionCategoryFVT


class TestSubjectAreaDefinitionCategoryFVT:
    def test_run_completes_and_cleans_up(self, subject_area_client, fake_platform, connection):
        SubjectAreaDefinitionCategoryFVT(subject_area_client).run()

        store = fake_platform.server(connection.server_name).subject_area
        assert store.glossaries == {}
        assert store.definitions == {}

    def test_run_it_opens_its_own_client(self, monkeypatch, fake_platform, connection):
        opened = []

        def client_factory(server_name, endpoint, user_id):
            client = SubjectAreaClient(server_name, endpoint, user_id, http_client=fake_platform.client())
            opened.append(client)
            return client

        monkeypatch.setattr(scenario_module, "SubjectAreaClient", client_factory)

        SubjectAreaDefinitionCategoryFVT.run_it(connection.endpoint, connection.server_name, connection.user_id)

        assert len(opened) == 1
        assert all(connection.server_name in str(r.url) for r in fake_platform.requests)

    def test_child_points_at_parent(self, subject_area_client):
        scenario = SubjectAreaDefinitionCategoryFVT(subject_area_client)
        glossary = subject_area_client.create_glossary(Glossary(name="g"))

        parent = scenario.create_definition("parent", glossary.guid)
        child = scenario.create_definition("child", glossary.guid, parent_guid=parent.guid)

        assert child.parent_category_guid == parent.guid
        assert child.glossary_guid == glossary.guid

    def test_update_description(self, subject_area_client):
        scenario = SubjectAreaDefinitionCategoryFVT(subject_area_client)
        glossary = subject_area_client.create_glossary(Glossary(name="g"))
        definition = scenario.create_definition("d", glossary.guid)

        updated = scenario.update_description(definition, "new description")

        assert updated.description == "new description"
        assert subject_area_client.get_subject_area_definition(definition.guid).description == "new description"

    def test_replace_clears_unset_fields(self, subject_area_client):
        glossary = subject_area_client.create_glossary(Glossary(name="g"))
        created = subject_area_client.create_subject_area_definition(
            SubjectAreaDefinition(name="d", description="old", glossary_guid=glossary.guid)
        )

        replaced = subject_area_client.update_subject_area_definition(
            created.guid, SubjectAreaDefinition(name="d2"), replace=True
        )

        assert replaced.name == "d2"
        assert replaced.description is None

    def test_glossary_with_content_not_deleted(self, subject_area_client):
        glossary = subject_area_client.create_glossary(Glossary(name="g"))
        subject_area_client.create_subject_area_definition(SubjectAreaDefinition(name="d", glossary_guid=glossary.guid))

        with pytest.raises(InvalidParameterError):
            subject_area_client.delete_glossary(glossary.guid)

    def test_definition_needs_glossary(self, subject_area_client):
        with pytest.raises(InvalidParameterError):
            subject_area_client.create_subject_area_definition(SubjectAreaDefinition(name="orphan"))

    def test_cleanup_runs_after_failure(self, subject_area_client, fake_platform, connection, monkeypatch):
        def wrong_update(self, definition, description):
            raise PropertyMismatchFailure("updated description differs")

        monkeypatch.setattr(SubjectAreaDefinitionCategoryFVT, "update_description", wrong_update)

        with pytest.raises(PropertyMismatchFailure):
            SubjectAreaDefinitionCategoryFVT(subject_area_client).run()

        store = fake_platform.server(connection.server_name).subject_area
        assert store.glossaries == {}
        assert store.definitions == {}

    def test_cleanup_after_child_read_back_mismatch(self, subject_area_client, fake_platform, connection, monkeypatch):
        read_back = SubjectAreaClient.get_subject_area_definition

        def wrong_child_name(self, guid):
            fetched = read_back(self, guid)
            if fetched.name == scenario_module.DEFAULT_CHILD_DEFINITION_NAME:
                return fetched.model_copy(update={"name": "wrong"})
            return fetched

        monkeypatch.setattr(SubjectAreaClient, "get_subject_area_definition", wrong_child_name)

        with pytest.raises(PropertyMismatchFailure, match="definition name"):
            SubjectAreaDefinitionCategoryFVT(subject_area_client).run()

        store = fake_platform.server(connection.server_name).subject_area
        assert store.glossaries == {}
        assert store.definitions == {}

    def test_cleanup_error_does_not_hide_failure(self, subject_area_client, fake_platform, connection, monkeypatch):
        def wrong_update(self, definition, description):
            raise PropertyMismatchFailure("updated description differs")

        def refuse_delete(guid, purge=False):
            raise PropertyServerError("Glossary delete refused")

        monkeypatch.setattr(SubjectAreaDefinitionCategoryFVT, "update_description", wrong_update)
        monkeypatch.setattr(subject_area_client, "delete_glossary", refuse_delete)

        with pytest.raises(PropertyMismatchFailure, match="updated description differs"):
            SubjectAreaDefinitionCategoryFVT(subject_area_client).run()

        store = fake_platform.server(connection.server_name).subject_area
        assert store.definitions == {}
        assert len(store.glossaries) == 1

    def test_cleanup_error_raised_after_success(self, subject_area_client, monkeypatch):
        def refuse_delete(guid, purge=False):
            raise PropertyServerError("Glossary delete refused")

        monkeypatch.setattr(subject_area_client, "delete_glossary", refuse_delete)

        with pytest.raises(PropertyServerError, match="Glossary delete refused"):
            SubjectAreaDefinitionCategoryFVT(subject_area_client).run()

    def test_server_error_propagates(self, subject_area_client, fake_platform):
        fake_platform.inject_error("/subject-area-definitions", class_name="PropertyServerException")

        with pytest.raises(PropertyServerError):
            SubjectAreaDefinitionCategoryFVT(subject_area_client).run()
