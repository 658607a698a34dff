"""Base models for all keymapdoc Pydantic models.

This module provides the base model classes that enforce consistent
serialization behavior across the package.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class KeymapDocBaseModel(BaseModel):
    """Base model class for all keymapdoc Pydantic models.

    Serialization always uses:
    - by_alias=True: Use field aliases for serialization
    - mode="json": Use JSON-compatible serialization
    """

    model_config = ConfigDict(
        # Use enum values in serialization
        use_enum_values=True,
        # Validate assignment after model creation
        validate_assignment=True,
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert model to dictionary with consistent serialization parameters.

        Returns:
            Dictionary representation using JSON-compatible serialization
        """
        return self.model_dump(by_alias=True, exclude_unset=False, mode="json")


class KeymapDocFrozenModel(KeymapDocBaseModel):
    """Immutable variant used for parse output records."""

    model_config = ConfigDict(
        use_enum_values=True,
        frozen=True,
    )
