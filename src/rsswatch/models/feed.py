"""RSS document models.

Every model is frozen: a parsed document is an immutable snapshot that can
be handed to subscribers and swapped wholesale on update. Field names are
snake_case; ``serialization_alias`` keeps the RSS element names for JSON
output.
"""

import json
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Characters removed from both ends of free-text fields.
TRIM_CUTSET = " \t\n"


def _trim(value):
    if isinstance(value, str):
        return value.strip(TRIM_CUTSET)
    return value


def _describe(value) -> str:
    if isinstance(value, _Element):
        return "{" + str(value) + "}"
    return str(value)


class _Element(BaseModel):
    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        parts = []
        for name, value in self:
            if value is None or value == () or value == "":
                continue
            if isinstance(value, str):
                value = json.dumps(value, ensure_ascii=False)
            elif isinstance(value, datetime):
                value = value.isoformat()
            elif isinstance(value, tuple):
                value = "[" + ", ".join(_describe(v) for v in value) + "]"
            elif isinstance(value, _Element):
                value = _describe(value)
            parts.append(f"{name}={value}")
        return ", ".join(parts)


class Category(_Element):
    """A category, with an optional taxonomy domain."""

    value: str = ""
    domain: str | None = None


class Cloud(_Element):
    """Publish/subscribe endpoint for channel update notifications.

    Modelled as data only; rsswatch never registers with a cloud.
    """

    domain: str
    port: int
    path: str
    register_procedure: str = Field(serialization_alias="registerProcedure")
    protocol: str


class Image(_Element):
    """Channel image (GIF, JPEG or PNG)."""

    url: str
    title: str
    link: str
    width: int | None = None
    height: int | None = None
    description: str | None = None


class TextInput(_Element):
    """Text input box that can be displayed with the channel."""

    title: str
    description: str
    name: str
    link: str


class Enclosure(_Element):
    """Media object attached to an item."""

    url: str
    length: int
    type: str


class Guid(_Element):
    """String that uniquely identifies an item."""

    value: str
    is_perma_link: bool = Field(default=False, serialization_alias="isPermaLink")


class ItemSource(_Element):
    """The channel an item came from."""

    value: str = ""
    url: str


class Item(_Element):
    """A story within a channel.

    All elements are optional, but a well-formed producer sets at least a
    title or a description.
    """

    title: str | None = None
    link: str | None = None
    description: str | None = None
    author: str | None = None
    categories: tuple[Category, ...] = Field(default=(), serialization_alias="category")
    comments: str | None = None
    enclosure: Enclosure | None = None
    guid: Guid | None = None
    pub_date: datetime | None = Field(default=None, serialization_alias="pubDate")
    source: ItemSource | None = None

    @field_validator("title", "description", mode="before")
    @classmethod
    def _trim_text(cls, value):
        return _trim(value)

    @property
    def has_content(self) -> bool:
        """Whether the item carries a title or a description."""
        return bool(self.title) or bool(self.description)


class Channel(_Element):
    """Channel metadata and its items, in document order."""

    # Required elements
    title: str
    link: str
    description: str

    # Optional elements
    language: str | None = None
    copyright: str | None = None
    managing_editor: str | None = Field(default=None, serialization_alias="managingEditor")
    web_master: str | None = Field(default=None, serialization_alias="webMaster")
    pub_date: datetime | None = Field(default=None, serialization_alias="pubDate")
    last_build_date: datetime | None = Field(default=None, serialization_alias="lastBuildDate")
    categories: tuple[Category, ...] = Field(default=(), serialization_alias="category")
    generator: str | None = None
    docs: str | None = None
    cloud: Cloud | None = None
    ttl: int = Field(default=0, description="Minutes to cache before refreshing, not positive = unset")
    image: Image | None = None
    rating: str | None = None
    text_input: TextInput | None = Field(default=None, serialization_alias="textInput")
    skip_hours: tuple[int, ...] = Field(default=(), serialization_alias="skipHours")
    skip_days: tuple[str, ...] = Field(default=(), serialization_alias="skipDays")
    items: tuple[Item, ...] = Field(default=(), serialization_alias="item")

    @field_validator("title", "description", "copyright", mode="before")
    @classmethod
    def _trim_text(cls, value):
        return _trim(value)


class FeedSnapshot(_Element):
    """The parsed content of one RSS document."""

    version: str = ""
    channel: Channel

    def to_json(self, source: str = "", indent: int | None = 2) -> str:
        """Render as JSON with ``source``, ``version`` and ``channel`` keys.

        Keys use RSS element names and unset optional elements are omitted.
        """
        data = {"source": source}
        data.update(
            self.model_dump(mode="json", by_alias=True, exclude_none=True, exclude_defaults=True)
        )
        data.setdefault("version", self.version)
        return json.dumps(data, indent=indent, ensure_ascii=False)
