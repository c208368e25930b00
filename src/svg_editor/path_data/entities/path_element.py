from typing import Any

from pydantic import BaseModel, ConfigDict


class PathElement(BaseModel):
    """Represents one <path …/> element of an SVG document.
    `instructions` holds the decoded PathSequence once the `d` attribute is parsed.
    """

    d: str
    id: str | None = None
    source: str | None = None  # file the element was read from, if any

    # After decoding, the PathSequence of the `d` attribute
    instructions: Any | None = None
    # `instructions` written back out, e.g. "M 0 0 L 10 10"
    canonical_d: str | None = None
    model_config = ConfigDict(from_attributes=True, arbitrary_types_allowed=True)
