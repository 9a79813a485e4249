"""ServiceResult — the ``--json`` payload.

Printing cannot fail, so there is no error branch: ``ok`` is always
True and problems found along the way (an ignored config file) ride in
``warnings`` without changing the data.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ServiceResult(BaseModel):
    """Containers captured for structured output.

    Attributes:
        ok: Always True; kept so consumers can test a single key.
        op: Name of the operation (``"print_arrays"``).
        data: Container name to its values, e.g. ``{"array": [1, ...]}``.
        shape: Container name to its dimensions, e.g. ``{"matrix": [3, 3]}``.
        warnings: Non-fatal issues, such as an ignored config file.
    """

    model_config = {"frozen": True}

    ok: bool = True
    op: str
    data: dict[str, list] = Field(default_factory=dict)
    shape: dict[str, list[int]] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
