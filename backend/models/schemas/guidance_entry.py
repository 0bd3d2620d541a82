"""Stage 4 output: human-readable guidance for one cost option type."""

from pydantic import BaseModel


class GuidanceEntry(BaseModel):
    model_config = {"frozen": True}

    title: str
    description: str
    when_to_choose: list[str] = []
    considerations: list[str] = []
