from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

from ..application.transform_use_case import TransformDependencies, TransformUseCase
from ..application.user_version_service import UserVersionService
from ..application.version_service import VersionService, VersionServiceDependencies
from ..config import TranspilerConfig
from .io.mods_generator import ModsGenerator
from .logging.console_logger import ConsoleLogger
from .logging.null_logger import NullLogger
from .repositories.cocina_document_repository import CocinaDocumentRepository
from .repositories.in_memory_object_store import InMemoryRepositoryObjectStore
from .repositories.static_workflow_state import StaticWorkflowState

if TYPE_CHECKING:
    from ..application.ports.repositories import (
        CocinaDocumentRepositoryPort,
        RepositoryObjectStorePort,
    )
    from ..application.ports.services import (
        LoggerPort,
        ModsTransformerPort,
        PreservationPort,
        WorkflowStatePort,
    )


class DependencyContainer:
    pass

    def __init__(
        self,
        verbose: int = 0,
        console: Console | None = None,
        use_null_logger: bool = False,
        config: TranspilerConfig | None = None,
    ) -> None:
        super().__init__()
        self.verbose = verbose
        self.console = console or Console()
        self.use_null_logger = use_null_logger
        self.config = config or TranspilerConfig()
        self._logger_instance: LoggerPort | None = None
        self._document_repository_instance: CocinaDocumentRepositoryPort | None = None
        self._mods_transformer_instance: ModsTransformerPort | None = None
        self._object_store_instance: RepositoryObjectStorePort | None = None
        self._workflow_state_instance: WorkflowStatePort | None = None
        self._preservation_instance: PreservationPort | None = None

    def create_logger(self) -> LoggerPort:
        if self._logger_instance is None:
            if self.use_null_logger:
                self._logger_instance = NullLogger()
            else:
                self._logger_instance = ConsoleLogger(
                    console=self.console, verbosity=self.verbose
                )
        return self._logger_instance

    def create_document_repository(self) -> CocinaDocumentRepositoryPort:
        if self._document_repository_instance is None:
            self._document_repository_instance = CocinaDocumentRepository()
        return self._document_repository_instance

    def create_mods_transformer(self) -> ModsTransformerPort:
        if self._mods_transformer_instance is None:
            self._mods_transformer_instance = ModsGenerator(
                purl_base_url=self.config.purl_base_url,
                mods_version=self.config.mods_version,
                pretty_print=self.config.pretty_print,
            )
        return self._mods_transformer_instance

    def create_object_store(self) -> RepositoryObjectStorePort:
        if self._object_store_instance is None:
            self._object_store_instance = InMemoryRepositoryObjectStore()
        return self._object_store_instance

    def create_workflow_state(self) -> WorkflowStatePort:
        if self._workflow_state_instance is None:
            self._workflow_state_instance = StaticWorkflowState()
        return self._workflow_state_instance

    def create_transform_use_case(self) -> TransformUseCase:
        dependencies = TransformDependencies(
            logger=self.create_logger(),
            document_repository=self.create_document_repository(),
            mods_transformer=self.create_mods_transformer(),
        )
        return TransformUseCase(dependencies)

    def create_version_service(self) -> VersionService:
        dependencies = VersionServiceDependencies(
            store=self.create_object_store(),
            workflow_state=self.create_workflow_state(),
            logger=self.create_logger(),
            preservation=self._preservation_instance,
            sync_with_preservation=self.config.sync_with_preservation,
        )
        return VersionService(dependencies)

    def create_user_version_service(self) -> UserVersionService:
        return UserVersionService(store=self.create_object_store(), logger=self.create_logger())

    def reset_singletons(self) -> None:
        self._logger_instance = None
        self._document_repository_instance = None
        self._mods_transformer_instance = None
        self._object_store_instance = None
        self._workflow_state_instance = None
        self._preservation_instance = None

    def override_logger(self, logger: LoggerPort) -> None:
        self._logger_instance = logger

    def override_object_store(self, store: RepositoryObjectStorePort) -> None:
        self._object_store_instance = store

    def override_workflow_state(self, workflow_state: WorkflowStatePort) -> None:
        self._workflow_state_instance = workflow_state

    def override_preservation(self, preservation: PreservationPort) -> None:
        self._preservation_instance = preservation
