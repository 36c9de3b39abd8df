"""Tests for dependency injection container.

These tests verify the container correctly creates and wires up dependencies,
including singleton and transient patterns, configuration injection, and
testing overrides.
"""

from unittest.mock import Mock

from rich.console import Console

from cocina_transpiler.application.transform_use_case import TransformUseCase
from cocina_transpiler.application.user_version_service import UserVersionService
from cocina_transpiler.application.version_service import VersionService
from cocina_transpiler.config import TranspilerConfig
from cocina_transpiler.domain.entities.repository_object import RepositoryObject
from cocina_transpiler.infrastructure.container import DependencyContainer
from cocina_transpiler.infrastructure.io.mods_generator import ModsGenerator
from cocina_transpiler.infrastructure.logging import ConsoleLogger, NullLogger
from cocina_transpiler.infrastructure.repositories import (
    CocinaDocumentRepository,
    InMemoryRepositoryObjectStore,
    StaticWorkflowState,
)

DRUID = "druid:bc123df4567"


class TestDependencyContainer:
    """Tests for DependencyContainer class."""

    def test_create_container_with_defaults(self):
        container = DependencyContainer()

        assert container.verbose == 0
        assert container.console is not None
        assert container.use_null_logger is False
        assert container.config == TranspilerConfig()

    def test_console_logger_uses_verbosity(self):
        console = Console()
        container = DependencyContainer(verbose=2, console=console)

        logger = container.create_logger()

        assert isinstance(logger, ConsoleLogger)
        assert logger.verbosity == 2
        assert logger.console is console

    def test_null_logger(self):
        container = DependencyContainer(use_null_logger=True)

        assert isinstance(container.create_logger(), NullLogger)

    def test_singletons(self):
        container = DependencyContainer(use_null_logger=True)

        assert container.create_logger() is container.create_logger()
        assert container.create_object_store() is container.create_object_store()
        assert container.create_mods_transformer() is container.create_mods_transformer()
        assert isinstance(container.create_document_repository(), CocinaDocumentRepository)
        assert isinstance(container.create_object_store(), InMemoryRepositoryObjectStore)
        assert isinstance(container.create_workflow_state(), StaticWorkflowState)

    def test_use_cases_are_transient(self):
        container = DependencyContainer(use_null_logger=True)

        first = container.create_transform_use_case()
        second = container.create_transform_use_case()

        assert isinstance(first, TransformUseCase)
        assert first is not second

    def test_config_reaches_mods_transformer(self):
        config = TranspilerConfig(
            purl_base_url="https://purl.example.org", mods_version="3.7", pretty_print=False
        )
        container = DependencyContainer(config=config)

        transformer = container.create_mods_transformer()

        assert isinstance(transformer, ModsGenerator)
        assert transformer.purl_base_url == "https://purl.example.org"
        assert transformer.mods_version == "3.7"
        assert transformer.pretty_print is False

    def test_version_services_share_the_store(self):
        container = DependencyContainer(use_null_logger=True)
        repository_object = RepositoryObject.create(DRUID)
        repository_object.close_version()
        container.create_object_store().add(repository_object)

        version_service = container.create_version_service()
        user_version_service = container.create_user_version_service()

        assert isinstance(version_service, VersionService)
        assert isinstance(user_version_service, UserVersionService)
        version_service.open(DRUID, "Fix title")
        version_service.close(DRUID)
        assert user_version_service.create(DRUID) == 1

    def test_reset_singletons(self):
        container = DependencyContainer(use_null_logger=True)
        store = container.create_object_store()

        container.reset_singletons()

        assert container.create_object_store() is not store


class TestContainerOverrides:
    """Test overrides used by tests and alternative front ends."""

    def test_override_logger(self):
        container = DependencyContainer()
        logger = Mock()

        container.override_logger(logger)

        assert container.create_logger() is logger
        assert container.create_transform_use_case().logger is logger

    def test_override_object_store(self):
        container = DependencyContainer(use_null_logger=True)
        store = InMemoryRepositoryObjectStore()

        container.override_object_store(store)

        assert container.create_object_store() is store

    def test_override_workflow_and_preservation(self):
        config = TranspilerConfig(sync_with_preservation=True)
        container = DependencyContainer(use_null_logger=True, config=config)
        repository_object = RepositoryObject.create(DRUID)
        repository_object.close_version()
        container.create_object_store().add(repository_object)
        preservation = Mock()
        preservation.current_version.return_value = 1

        container.override_workflow_state(StaticWorkflowState(accessioning={(DRUID, 1)}))
        container.override_preservation(preservation)
        service = container.create_version_service()

        assert not service.can_open(DRUID)
        container.override_workflow_state(StaticWorkflowState())
        assert container.create_version_service().can_open(DRUID)
        preservation.current_version.assert_called_with(DRUID)
