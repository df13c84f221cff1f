"""
Shared base model for schemas.

All Pydantic models in the application should inherit from StrictModel.
"""

from __future__ import annotations

import pydantic


class StrictModel(pydantic.BaseModel):
    """
    Base model with strict validation settings.

    Uses extra='forbid' to reject unknown fields - any field not modeled
    causes immediate validation failure (fail-fast).
    """

    model_config = pydantic.ConfigDict(
        extra='forbid',  # Reject unknown fields (fail-fast)
        strict=True,  # Strict type coercion
        frozen=True,  # Immutable after creation
    )
