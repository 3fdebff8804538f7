from __future__ import annotations

from pydantic import ConfigDict
from pydantic.alias_generators import to_camel

from mcp_core.interfaces.model_bases import DomainModel


class ToolMetadata(DomainModel):
    """Behavioural hints a command publishes to tool hosts.

    Defaults describe a read-only, idempotent command that only touches the
    resources it is pointed at.
    """

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    destructive: bool = False
    idempotent: bool = True
    open_world: bool = False
    read_only: bool = True
    secret: bool = False
    local_required: bool = False
