"""Subject Area definition category scenario.

Creates a glossary with a subject area definition and a child definition,
reads them back, updates one and removes everything it created. Any
unexpected value raises a ``VerificationFailure``; client errors propagate.
"""

from __future__ import annotations

from metadata_fvt.clients.subject_area import SubjectAreaClient
from metadata_fvt.core.exceptions import FVTException
from metadata_fvt.core.logging import get_logger
from metadata_fvt.domain.subject_area import Glossary, SubjectAreaDefinition
from metadata_fvt.harness.failures import PropertyMismatchFailure


logger = get_logger("scenarios.subject_area")


DEFAULT_GLOSSARY_NAME = "Glossary for subject area definition FVT"
DEFAULT_DEFINITION_NAME = "Subject area definition FVT"
DEFAULT_CHILD_DEFINITION_NAME = "Child subject area definition FVT"


def _expect_equal(what: str, expected, actual) -> None:
    if expected != actual:
        raise PropertyMismatchFailure(
            f"{what}: expected {expected!r}, found {actual!r}",
            expected=expected,
            actual=actual,
        )


class SubjectAreaDefinitionCategoryFVT:
    def __init__(self, client: SubjectAreaClient):
        self.client = client

    @classmethod
    def run_it(cls, endpoint: str, server_name: str, user_id: str) -> None:
        """Run the scenario against one server with its own client."""
        with SubjectAreaClient(server_name, endpoint, user_id) as client:
            cls(client).run()

    def run(self) -> None:
        glossary = self.client.create_glossary(
            Glossary(name=DEFAULT_GLOSSARY_NAME, description="Holds the subject area definitions under test")
        )
        logger.info(f"Created glossary {glossary.guid}")
        created_guids: list[str] = []
        try:
            definition = self.create_definition(DEFAULT_DEFINITION_NAME, glossary.guid, created_guids=created_guids)

            child = self.create_definition(
                DEFAULT_CHILD_DEFINITION_NAME,
                glossary.guid,
                parent_guid=definition.guid,
                created_guids=created_guids,
            )
            _expect_equal("child parent category", definition.guid, child.parent_category_guid)

            self.update_description(definition, "Updated by the subject area definition FVT")
        except BaseException:
            self.clean_up(glossary.guid, created_guids, after_failure=True)
            raise
        self.clean_up(glossary.guid, created_guids)

    def clean_up(self, glossary_guid: str, created_guids: list[str], after_failure: bool = False) -> None:
        """Delete the definitions, children first, then the glossary.

        After a failure every delete is attempted and delete errors are only
        logged, so the original failure is the one reported.
        """
        deletes = [(self.client.delete_subject_area_definition, guid) for guid in reversed(created_guids)]
        deletes.append((self.client.delete_glossary, glossary_guid))
        for delete, guid in deletes:
            try:
                delete(guid)
            except FVTException as exc:
                if not after_failure:
                    raise
                logger.warning(f"Cleanup could not delete {guid}: {exc.error_code}: {exc.message}")
        logger.info(f"Removed glossary {glossary_guid} and {len(created_guids)} definitions")

    def create_definition(
        self,
        name: str,
        glossary_guid: str,
        parent_guid: str | None = None,
        created_guids: list[str] | None = None,
    ) -> SubjectAreaDefinition:
        """Create a definition and read it back.

        The new GUID goes into ``created_guids`` before the read-back checks.
        """
        created = self.client.create_subject_area_definition(
            SubjectAreaDefinition(name=name, glossary_guid=glossary_guid, parent_category_guid=parent_guid)
        )
        if not created.guid:
            raise PropertyMismatchFailure(f"Subject area definition {name!r} was created without a GUID")
        if created_guids is not None:
            created_guids.append(created.guid)

        fetched = self.client.get_subject_area_definition(created.guid)
        _expect_equal("definition name", name, fetched.name)
        _expect_equal("definition glossary", glossary_guid, fetched.glossary_guid)
        _expect_equal("definition qualified name", created.qualified_name, fetched.qualified_name)
        return fetched

    def update_description(self, definition: SubjectAreaDefinition, description: str) -> SubjectAreaDefinition:
        patch = SubjectAreaDefinition(name=definition.name, description=description)
        updated = self.client.update_subject_area_definition(definition.guid, patch)
        _expect_equal("updated description", description, updated.description)
        _expect_equal("name after update", definition.name, updated.name)
        return updated
