from dataclasses import dataclass
from typing import Any, List, Optional

# Fields a request may leave out; None means "not sent" and keeps the stored value.
OPTIONAL_FIELDS = (
    "name",
    "description",
    "author",
    "pixi_version",
    "is_public",
    "external_js",
)


@dataclass(frozen=True)
class PlaygroundPayload:
    """Validated fields of a create or update request."""

    contents: str
    name: Optional[str] = None
    description: Optional[str] = None
    author: Optional[str] = None
    pixi_version: Optional[str] = None
    is_public: Optional[bool] = None
    external_js: Optional[List[str]] = None
    # None means the request did not mention tags at all.
    tags: Optional[List[Any]] = None

    def model_fields(self) -> dict:
        """Model field values to write: contents plus every field that was sent."""
        fields = {"contents": self.contents}
        for name in OPTIONAL_FIELDS:
            value = getattr(self, name)
            if value is not None:
                fields[name] = list(value) if name == "external_js" else value
        return fields
