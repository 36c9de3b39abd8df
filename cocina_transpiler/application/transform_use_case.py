"""Cocina → MODS transform use case.

Reads a Cocina JSON file (either a whole object document or a bare
description), validates it, maps it to the value model and hands it to the
MODS transformer port.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import traceback
from typing import TYPE_CHECKING

from ..domain.entities.cocina_schema import validate_cocina_document, validate_description
from ..domain.entities.description import description_from_dict
from .models import CocinaInput, TransformResponse

if TYPE_CHECKING:
    from .models import TransformRequest
    from .ports.repositories import CocinaDocumentRepositoryPort
    from .ports.services import LoggerPort, ModsTransformerPort

UNKNOWN_DRUID = "druid:unknown"


@dataclass(slots=True)
class TransformDependencies:
    logger: LoggerPort
    document_repository: CocinaDocumentRepositoryPort
    mods_transformer: ModsTransformerPort


class TransformUseCase:
    pass

    def __init__(self, dependencies: TransformDependencies) -> None:
        super().__init__()
        self.logger = dependencies.logger
        self._document_repository = dependencies.document_repository
        self._mods_transformer = dependencies.mods_transformer

    def execute(self, request: TransformRequest) -> TransformResponse:
        response = TransformResponse()
        try:
            document = self._document_repository.read_document(request.input_path)
            cocina_input = parse_cocina_input(document, druid=request.druid, purl=request.purl)
            response.druid = cocina_input.druid
            self.logger.log_transform_start(cocina_input.druid, request.input_path)

            description = description_from_dict(cocina_input.description)
            if request.output_path is None:
                response.mods_xml = self._mods_transformer.generate(
                    description, cocina_input.druid, purl=cocina_input.purl
                )
            else:
                self._mods_transformer.write(
                    description,
                    cocina_input.druid,
                    request.output_path,
                    purl=cocina_input.purl,
                )
                response.output_path = request.output_path
            self.logger.log_transform_complete(
                cocina_input.druid, _element_count(cocina_input.description), request.output_path
            )
        except Exception as exc:
            response.success = False
            response.error = str(exc)
            self.logger.error(f"{request.input_path}: {exc}")
            self.logger.debug(traceback.format_exc())
        return response


def parse_cocina_input(
    document: Mapping[str, object], *, druid: str | None = None, purl: str | None = None
) -> CocinaInput:
    """Validate ``document`` and split out druid, description and purl.

    A document with a ``description`` key is treated as a full Cocina object;
    anything else is validated as a bare description. ``druid`` and ``purl``
    override what the document carries.
    """
    if "description" in document:
        cocina = validate_cocina_document(document)
        description = cocina.description_dict()
        return CocinaInput(
            druid=druid or cocina.externalIdentifier,
            description=description,
            purl=purl or cocina.description.purl,
        )
    model = validate_description(document)
    return CocinaInput(
        druid=druid or UNKNOWN_DRUID,
        description=model.model_dump(exclude_none=True),
        purl=purl or model.purl,
    )


def _element_count(description: Mapping[str, object]) -> int:
    """Number of top-level descriptive entries, used for progress output."""
    count = 0
    for value in description.values():
        if isinstance(value, list):
            count += len(value)
        elif isinstance(value, Mapping):
            count += 1
    return count
