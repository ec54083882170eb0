"""Tests for the RSS document parser."""

from datetime import datetime, timezone

import pytest

from rsswatch.exceptions import DateFormatError, ParseError
from rsswatch.models.feed import Category, Cloud, Enclosure, Guid, ItemSource
from rsswatch.parsers.rss_parser import RSSParser


@pytest.fixture
def parser():
    return RSSParser()


def test_version_attribute(parser, solidot_rss):
    snapshot = parser.parse(solidot_rss)

    assert snapshot.version == "2.0"


def test_channel_elements(parser, solidot_rss):
    channel = parser.parse(solidot_rss).channel

    assert channel.title == "最新更新 – Solidot"
    assert channel.link == "https://www.solidot.org"
    assert channel.description == "奇客的资讯，重要的东西。"
    assert channel.language == "zh-cn"
    assert channel.copyright is None
    assert channel.managing_editor == "editor@example.com"
    assert channel.web_master == "webmaster@example.com"
    assert channel.pub_date is None
    assert channel.last_build_date == datetime(2018, 5, 11, 8, 45, 56, tzinfo=timezone.utc)
    assert channel.generator == "Weblog Editor 2.0"
    assert channel.docs == "http://blogs.law.harvard.edu/tech/rss"
    assert channel.ttl == 20
    assert channel.skip_hours == ()
    assert channel.skip_days == ()


def test_item_elements(parser, solidot_rss):
    items = parser.parse(solidot_rss).channel.items

    assert len(items) == 1
    item = items[0]
    assert item.title == "中国年轻一代不愿意长时间工作"
    assert item.link == "https://www.solidot.org/story?sid=56470"
    assert item.description.startswith("中国科技行业流行的 <a href=")
    assert item.guid == Guid(value="http://liftoff.msfc.nasa.gov/2003/06/03.html#item573")
    assert item.guid.is_perma_link is False
    assert item.pub_date == datetime(2018, 5, 11, 8, 28, 39, tzinfo=timezone.utc)
    assert item.enclosure is None
    assert item.source is None


def test_optional_channel_elements(parser, full_rss):
    channel = parser.parse(full_rss).channel

    assert channel.categories == (
        Category(value="Science"),
        Category(value="Top/Science/Space", domain="http://www.dmoz.org"),
    )
    assert channel.cloud == Cloud(
        domain="rpc.sys.com", port=80, path="/RPC2", register_procedure="pingMe", protocol="soap"
    )
    assert channel.image.url == "http://liftoff.msfc.nasa.gov/news.gif"
    assert (channel.image.width, channel.image.height) == (88, 31)
    assert channel.image.description is None
    assert channel.text_input.name == "q"
    assert channel.text_input.description == "Search Liftoff"
    assert channel.rating.startswith("(PICS-1.1")
    assert channel.skip_hours == (0, 1, 23)
    assert channel.skip_days == ("Saturday", "Sunday")
    assert channel.pub_date == datetime(2003, 6, 10, 4, 0, tzinfo=timezone.utc)
    assert channel.ttl == 0


def test_optional_item_elements(parser, full_rss):
    first, second = parser.parse(full_rss).channel.items

    assert first.author == "jim@example.com (Jim)"
    assert first.categories == (
        Category(value="MSFT", domain="http://www.fool.com/cusips"),
        Category(value="Space"),
    )
    assert first.comments == "http://liftoff.msfc.nasa.gov/comments/starcity"
    assert first.enclosure == Enclosure(
        url="http://www.scripting.com/mp3s/weatherReportSuite.mp3",
        length=12216320,
        type="audio/mpeg",
    )
    assert first.guid.is_perma_link is True
    assert first.source == ItemSource(value="Tomalak's Realm", url="http://www.tomalak.org/links2.xml")

    assert second.title is None
    assert second.description.startswith("Sky watchers")
    assert second.guid.is_perma_link is False


def test_text_fields_are_trimmed(parser, full_rss):
    channel = parser.parse(full_rss).channel

    assert channel.title == "Liftoff News"
    assert channel.description == "Liftoff to Space Exploration."
    assert channel.copyright == "Copyright 2002, Spartanburg Herald-Journal"
    assert channel.items[0].title == "Star City"
    description = channel.items[0].description
    assert description == description.strip(" \t\n")
    assert description.startswith("How do Americans")


def test_items_keep_document_order(parser, rss_builder):
    raw = rss_builder(
        [
            ("b", "Tue, 03 Jun 2003 09:39:21 GMT"),
            ("a", "Fri, 30 May 2003 11:06:42 GMT"),
            ("c", None),
        ]
    )

    titles = [item.title for item in parser.parse(raw).channel.items]

    assert titles == ["b", "a", "c"]


def test_rss_091_dialect(parser):
    raw = b"""<?xml version="1.0"?>
<rss version="0.91">
  <channel>
    <title>WriteTheWeb</title>
    <link>http://writetheweb.com</link>
    <description>News for web users that write back</description>
    <language>en-us</language>
    <image>
      <title>WriteTheWeb</title>
      <url>http://writetheweb.com/images/mynetscape88.gif</url>
      <link>http://writetheweb.com</link>
    </image>
    <item>
      <title>Giving the world a pluggable Gnutella</title>
      <link>http://writetheweb.com/read.php?item=24</link>
      <description>WorldOS is a framework on which to build programs.</description>
    </item>
  </channel>
</rss>"""

    snapshot = parser.parse(raw)

    assert snapshot.version == "0.91"
    assert snapshot.channel.image.title == "WriteTheWeb"
    assert snapshot.channel.items[0].pub_date is None


def test_parsing_same_bytes_twice_gives_equal_content(parser, full_rss):
    assert parser.parse(full_rss) == parser.parse(full_rss)


def test_item_without_title_or_description_is_kept(parser):
    raw = b"""<rss version="2.0"><channel><title>t</title><link>l</link>
<description>d</description><item><link>https://example.com/a</link></item></channel></rss>"""

    items = parser.parse(raw).channel.items

    assert len(items) == 1
    assert items[0].has_content is False


def test_incomplete_enclosure_is_dropped(parser):
    raw = b"""<rss version="2.0"><channel><title>t</title><link>l</link>
<description>d</description><item><title>x</title>
<enclosure url="https://example.com/a.mp3" type="audio/mpeg"/></item></channel></rss>"""

    assert parser.parse(raw).channel.items[0].enclosure is None


def test_malformed_markup_raises(parser):
    with pytest.raises(ParseError) as exc_info:
        parser.parse(b"<rss version='2.0'><channel><title>oops</channel></rss>", "broken.xml")

    assert exc_info.value.source_id == "broken.xml"


def test_missing_channel_raises(parser):
    with pytest.raises(ParseError):
        parser.parse(b"<rss version='2.0'></rss>")


def test_bad_date_raises_parse_error(parser, rss_builder):
    raw = rss_builder([("a", "yesterday")])

    with pytest.raises(ParseError) as exc_info:
        parser.parse(raw)

    assert isinstance(exc_info.value.__cause__, DateFormatError)


def test_non_integer_ttl_raises(parser):
    raw = b"""<rss version="2.0"><channel><title>t</title><link>l</link>
<description>d</description><ttl>soon</ttl></channel></rss>"""

    with pytest.raises(ParseError):
        parser.parse(raw)


def test_negative_ttl_is_kept(parser, rss_builder):
    channel = parser.parse(rss_builder([("a", None)], ttl=-5)).channel

    assert channel.ttl == -5
