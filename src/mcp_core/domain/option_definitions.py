"""
Registry of option descriptors shared across commands.

Each descriptor here is constructed exactly once; commands reference these
objects directly so that validation can compare them by identity.
"""

from __future__ import annotations

from typing import Final

from mcp_core.domain.options import OptionDescriptor


class OptionDefinitions:
    class Common:
        RESOURCE_GROUP: Final = OptionDescriptor(
            name="resource-group",
            description="The name of the resource group.",
            shared=True,
        )
        SUBSCRIPTION: Final = OptionDescriptor(
            name="subscription",
            description="The subscription ID or name.",
            shared=True,
        )
        TENANT: Final = OptionDescriptor(
            name="tenant",
            description="The tenant ID or name.",
            shared=True,
        )
