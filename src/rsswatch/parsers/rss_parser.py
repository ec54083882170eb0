"""RSS 2.0 document parser implementation.

Also reads the 0.91 and 0.92 dialects, whose elements are a subset of
2.0. Elements in other namespaces (``atom:link``, ``dc:creator``...) are
ignored.
"""

import structlog
from lxml import etree
from pydantic import ValidationError

from rsswatch.exceptions import DateFormatError, ParseError
from rsswatch.models.feed import (
    Category,
    Channel,
    Cloud,
    Enclosure,
    FeedSnapshot,
    Guid,
    Image,
    Item,
    ItemSource,
    TextInput,
)
from rsswatch.parsers.dates import parse_date

logger = structlog.get_logger()

_XML_PARSER = etree.XMLParser(
    resolve_entities=False,
    no_network=True,
    huge_tree=False,
)


class _InvalidField(Exception):
    """Field-level failure, reported as ParseError by RSSParser.parse."""


class RSSParser:
    """Parser for RSS 0.91, 0.92 and 2.0 documents."""

    def parse(self, raw_content: bytes, source_id: str = "<bytes>") -> FeedSnapshot:
        """Parse an RSS document into a FeedSnapshot.

        Args:
            raw_content: Raw XML bytes.
            source_id: Source identifier used in errors and log events.

        Returns:
            The parsed snapshot.

        Raises:
            ParseError: When the document is not well-formed XML, has no
                channel, or holds a field that cannot be converted (dates
                included).
        """
        try:
            root = etree.fromstring(raw_content.lstrip(), parser=_XML_PARSER)
        except etree.XMLSyntaxError as e:
            raise ParseError(source_id, f"Malformed XML: {e}") from e

        channel_el = root.find("channel")
        if channel_el is None:
            raise ParseError(source_id, f"No <channel> element under <{root.tag}>")

        try:
            channel = self._parse_channel(channel_el, source_id)
            snapshot = FeedSnapshot(version=root.get("version", ""), channel=channel)
        except DateFormatError as e:
            raise ParseError(source_id, str(e)) from e
        except _InvalidField as e:
            raise ParseError(source_id, str(e)) from e
        except ValidationError as e:
            raise ParseError(source_id, f"Invalid document: {e}") from e

        logger.debug(
            "Feed document parsed",
            source_id=source_id,
            version=snapshot.version,
            item_count=len(channel.items),
        )
        return snapshot

    def _parse_channel(self, el: etree._Element, source_id: str) -> Channel:
        items = []
        for position, item_el in enumerate(el.findall("item")):
            item = self._parse_item(item_el)
            if not item.has_content:
                # Passed through: the producer broke the format, not the document.
                logger.warning(
                    "Item has neither title nor description",
                    source_id=source_id,
                    position=position,
                )
            items.append(item)

        return Channel(
            title=_text(el, "title") or "",
            link=_text(el, "link") or "",
            description=_text(el, "description") or "",
            language=_text(el, "language"),
            copyright=_text(el, "copyright"),
            managing_editor=_text(el, "managingEditor"),
            web_master=_text(el, "webMaster"),
            pub_date=_date(el, "pubDate"),
            last_build_date=_date(el, "lastBuildDate"),
            categories=_categories(el),
            generator=_text(el, "generator"),
            docs=_text(el, "docs"),
            cloud=self._parse_cloud(el.find("cloud")),
            ttl=_int(_text(el, "ttl"), "ttl") or 0,
            image=self._parse_image(el.find("image")),
            rating=_text(el, "rating"),
            text_input=self._parse_text_input(el.find("textInput")),
            skip_hours=tuple(
                _int(_element_text(hour), "skipHours/hour") for hour in el.findall("skipHours/hour")
            ),
            skip_days=tuple(_element_text(day).strip() for day in el.findall("skipDays/day")),
            items=tuple(items),
        )

    def _parse_item(self, el: etree._Element) -> Item:
        return Item(
            title=_text(el, "title"),
            link=_text(el, "link"),
            description=_text(el, "description"),
            author=_text(el, "author"),
            categories=_categories(el),
            comments=_text(el, "comments"),
            enclosure=self._parse_enclosure(el.find("enclosure")),
            guid=self._parse_guid(el.find("guid")),
            pub_date=_date(el, "pubDate"),
            source=self._parse_source(el.find("source")),
        )

    def _parse_cloud(self, el: etree._Element | None) -> Cloud | None:
        if el is None:
            return None
        return Cloud(
            domain=el.get("domain", ""),
            port=_int(el.get("port"), "cloud@port") or 0,
            path=el.get("path", ""),
            register_procedure=el.get("registerProcedure", ""),
            protocol=el.get("protocol", ""),
        )

    def _parse_image(self, el: etree._Element | None) -> Image | None:
        if el is None:
            return None
        return Image(
            url=_text(el, "url") or "",
            title=_text(el, "title") or "",
            link=_text(el, "link") or "",
            width=_int(_text(el, "width"), "image/width"),
            height=_int(_text(el, "height"), "image/height"),
            description=_text(el, "description"),
        )

    def _parse_text_input(self, el: etree._Element | None) -> TextInput | None:
        if el is None:
            return None
        return TextInput(
            title=_text(el, "title") or "",
            description=_text(el, "description") or "",
            name=_text(el, "name") or "",
            link=_text(el, "link") or "",
        )

    def _parse_enclosure(self, el: etree._Element | None) -> Enclosure | None:
        if el is None:
            return None
        url, length, mime_type = el.get("url"), el.get("length"), el.get("type")
        if url is None or length is None or mime_type is None:
            logger.warning("Enclosure skipped, url/length/type are required together", url=url)
            return None
        return Enclosure(url=url, length=_int(length, "enclosure@length"), type=mime_type)

    def _parse_guid(self, el: etree._Element | None) -> Guid | None:
        if el is None:
            return None
        is_perma_link = el.get("isPermaLink", "false").strip().lower() == "true"
        return Guid(value=_element_text(el).strip(), is_perma_link=is_perma_link)

    def _parse_source(self, el: etree._Element | None) -> ItemSource | None:
        if el is None:
            return None
        return ItemSource(value=_element_text(el), url=el.get("url", ""))


def _element_text(el: etree._Element) -> str:
    return "".join(el.itertext())


def _text(parent: etree._Element, tag: str) -> str | None:
    """Return the text of the first ``tag`` child, or None when absent."""
    el = parent.find(tag)
    if el is None:
        return None
    return _element_text(el)


def _int(value: str | None, field: str) -> int | None:
    if value is None or not value.strip():
        return None
    try:
        return int(value.strip())
    except ValueError as e:
        raise _InvalidField(f"{field} is not an integer: {value!r}") from e


def _date(parent: etree._Element, tag: str):
    value = _text(parent, tag)
    if value is None or not value.strip():
        return None
    return parse_date(value)


def _categories(parent: etree._Element) -> tuple[Category, ...]:
    return tuple(
        Category(value=_element_text(el).strip(), domain=el.get("domain"))
        for el in parent.findall("category")
    )
