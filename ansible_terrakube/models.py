"""
Data structures for the records read from the Terrakube API.

The entity models mirror the attributes of the JSON:API resources. Attribute
names arrive in camelCase and are exposed in snake_case; attributes we do not
use are ignored so that newer API versions keep working.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiEntity(BaseModel):
    """Base class for all JSON:API resource records."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )

    id: str


class OrganizationEntity(ApiEntity):
    name: str
    description: Optional[str] = None
    execution_mode: Optional[str] = None
    disabled: bool = False


class WorkspaceEntity(ApiEntity):
    name: str
    description: Optional[str] = None
    source: Optional[str] = None
    branch: Optional[str] = None
    folder: Optional[str] = None
    template_id: Optional[str] = None
    iac_type: Optional[str] = None
    # Terrakube keeps the tool version under its historical name.
    iac_version: Optional[str] = Field(default=None, alias="terraformVersion")
    execution_mode: Optional[str] = None
    deleted: bool = False
    allow_remote_apply: bool = False
    vcs_id: Optional[str] = None


class TeamEntity(ApiEntity):
    name: str
    manage_workspace: bool = False
    manage_module: bool = False
    manage_provider: bool = False
    manage_vcs: bool = False
    manage_template: bool = False
    manage_state: bool = False
    manage_collection: bool = False
    manage_job: bool = False


class HistoryEntity(ApiEntity):
    """A state history entry. ``output`` links to the state output document."""

    output: str
    created_date: Optional[str] = None
    job_reference: Optional[str] = None


class OutputRecord(BaseModel):
    """
    A single workspace output. An output only counts as non-sensitive when
    the state document says so explicitly.
    """

    model_config = ConfigDict(extra="ignore")

    value: Any = None
    sensitive: bool = True


class OutputValues(BaseModel):
    model_config = ConfigDict(extra="ignore")

    outputs: Dict[str, OutputRecord] = Field(default_factory=dict)


class OutputDocument(BaseModel):
    """The state output document linked from a history entry."""

    model_config = ConfigDict(extra="ignore")

    values: OutputValues
