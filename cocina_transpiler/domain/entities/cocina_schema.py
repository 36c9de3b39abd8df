"""Pydantic schema for Cocina JSON documents.

Field names keep Cocina's camelCase spelling so that a validated document can
be dumped straight back to the JSON shape ``description_from_dict`` reads.
Descriptive models reject unknown keys; the top-level document tolerates the
administrative/structural sections this project does not map.
"""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

DRUID_PATTERN = r"^druid:[b-df-hjkmnp-tv-z]{2}[0-9]{3}[b-df-hjkmnp-tv-z]{2}[0-9]{4}$"


class CocinaModel(BaseModel):
    model_config = ConfigDict(extra="forbid")


class SourceModel(CocinaModel):
    code: str | None = None
    uri: str | None = None
    value: str | None = None
    version: str | None = None
    note: list[DescriptiveValueModel] | None = None


class StandardModel(SourceModel):
    pass


class ValueScriptModel(CocinaModel):
    code: str | None = None
    value: str | None = None
    uri: str | None = None
    source: SourceModel | None = None


class ValueLanguageModel(CocinaModel):
    code: str | None = None
    value: str | None = None
    uri: str | None = None
    source: SourceModel | None = None
    valueScript: ValueScriptModel | None = None


class DescriptiveValueModel(CocinaModel):
    value: str | None = None
    structuredValue: list[DescriptiveValueModel] | None = None
    parallelValue: list[DescriptiveValueModel] | None = None
    groupedValue: list[DescriptiveValueModel] | None = None
    type: str | None = None
    status: str | None = None
    code: str | None = None
    uri: str | None = None
    standard: StandardModel | None = None
    encoding: StandardModel | None = None
    source: SourceModel | None = None
    displayLabel: str | None = None
    qualifier: str | None = None
    note: list[DescriptiveValueModel] | None = None
    valueLanguage: ValueLanguageModel | None = None
    valueAt: str | None = None
    appliesTo: list[DescriptiveValueModel] | None = None


class ContributorModel(CocinaModel):
    name: list[DescriptiveValueModel] | None = None
    type: str | None = None
    status: str | None = None
    role: list[DescriptiveValueModel] | None = None
    identifier: list[DescriptiveValueModel] | None = None
    note: list[DescriptiveValueModel] | None = None
    valueLanguage: ValueLanguageModel | None = None
    valueAt: str | None = None
    parallelContributor: list[ContributorModel] | None = None


class EventModel(CocinaModel):
    type: str | None = None
    displayLabel: str | None = None
    date: list[DescriptiveValueModel] | None = None
    contributor: list[ContributorModel] | None = None
    location: list[DescriptiveValueModel] | None = None
    identifier: list[DescriptiveValueModel] | None = None
    note: list[DescriptiveValueModel] | None = None
    valueLanguage: ValueLanguageModel | None = None
    parallelEvent: list[EventModel] | None = None


class LanguageModel(CocinaModel):
    value: str | None = None
    code: str | None = None
    uri: str | None = None
    source: SourceModel | None = None
    status: str | None = None
    displayLabel: str | None = None
    script: DescriptiveValueModel | None = None
    appliesTo: list[DescriptiveValueModel] | None = None
    note: list[DescriptiveValueModel] | None = None


class AccessModel(CocinaModel):
    url: list[DescriptiveValueModel] | None = None
    physicalLocation: list[DescriptiveValueModel] | None = None
    digitalLocation: list[DescriptiveValueModel] | None = None
    accessContact: list[DescriptiveValueModel] | None = None
    digitalRepository: list[DescriptiveValueModel] | None = None
    note: list[DescriptiveValueModel] | None = None


class GeographicModel(CocinaModel):
    form: list[DescriptiveValueModel] | None = None
    subject: list[DescriptiveValueModel] | None = None


class AdminMetadataModel(CocinaModel):
    contributor: list[ContributorModel] | None = None
    event: list[EventModel] | None = None
    language: list[LanguageModel] | None = None
    note: list[DescriptiveValueModel] | None = None
    metadataStandard: list[DescriptiveValueModel] | None = None
    identifier: list[DescriptiveValueModel] | None = None


class RelatedResourceModel(CocinaModel):
    type: str | None = None
    status: str | None = None
    displayLabel: str | None = None
    valueAt: str | None = None
    title: list[DescriptiveValueModel] | None = None
    contributor: list[ContributorModel] | None = None
    event: list[EventModel] | None = None
    form: list[DescriptiveValueModel] | None = None
    language: list[LanguageModel] | None = None
    note: list[DescriptiveValueModel] | None = None
    identifier: list[DescriptiveValueModel] | None = None
    subject: list[DescriptiveValueModel] | None = None
    purl: str | None = None
    access: AccessModel | None = None
    relatedResource: list[RelatedResourceModel] | None = None
    adminMetadata: AdminMetadataModel | None = None
    version: str | None = None


class DescriptionModel(CocinaModel):
    title: list[DescriptiveValueModel] = Field(min_length=1)
    contributor: list[ContributorModel] | None = None
    event: list[EventModel] | None = None
    form: list[DescriptiveValueModel] | None = None
    geographic: list[GeographicModel] | None = None
    language: list[LanguageModel] | None = None
    note: list[DescriptiveValueModel] | None = None
    identifier: list[DescriptiveValueModel] | None = None
    subject: list[DescriptiveValueModel] | None = None
    access: AccessModel | None = None
    relatedResource: list[RelatedResourceModel] | None = None
    marcEncodedData: list[DescriptiveValueModel] | None = None
    adminMetadata: AdminMetadataModel | None = None
    purl: str | None = None
    valueAt: str | None = None


class CocinaDocument(BaseModel):
    model_config = ConfigDict(extra="allow")

    externalIdentifier: str = Field(pattern=DRUID_PATTERN)
    type: str
    label: str
    version: int = Field(ge=1)
    description: DescriptionModel

    def description_dict(self) -> dict[str, object]:
        return self.description.model_dump(exclude_none=True)


def validate_cocina_document(data: Mapping[str, object]) -> CocinaDocument:
    """Validate a Cocina object document; raises ``pydantic.ValidationError``."""
    return CocinaDocument.model_validate(dict(data))


def validate_description(data: Mapping[str, object]) -> DescriptionModel:
    return DescriptionModel.model_validate(dict(data))


for _model in (
    SourceModel,
    StandardModel,
    ValueScriptModel,
    ValueLanguageModel,
    DescriptiveValueModel,
    ContributorModel,
    EventModel,
    LanguageModel,
    AccessModel,
    GeographicModel,
    AdminMetadataModel,
    RelatedResourceModel,
    DescriptionModel,
    CocinaDocument,
):
    _model.model_rebuild()
