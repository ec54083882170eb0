"""Test configuration and fixtures."""

from pathlib import Path

import pytest

SOLIDOT_RSS = """
	<?xml version="1.0" encoding="UTF-8"?>
	<rss version="2.0" xmlns:atom="http://www.w3.org/2005/Atom">
		<channel>
			<title>最新更新 &#8211; Solidot</title>
			<link>https://www.solidot.org</link>
			<description><![CDATA[奇客的资讯，重要的东西。]]></description>
			<atom:link href="https://www.solidot.org/index.rss" rel="self" type="application/rss+xml"></atom:link>
			<language>zh-cn</language>
			<lastBuildDate>Fri, 11 May 2018 16:45:56 +0800</lastBuildDate>
			<docs>http://blogs.law.harvard.edu/tech/rss</docs>
			<generator>Weblog Editor 2.0</generator>
			<managingEditor>editor@example.com</managingEditor>
			<webMaster>webmaster@example.com</webMaster>
			<ttl>20</ttl>
			<item>
				<title><![CDATA[中国年轻一代不愿意长时间工作]]></title>
				<link><![CDATA[https://www.solidot.org/story?sid=56470]]></link>
				<description><![CDATA[中国科技行业流行的 <a href="https://www.solidot.org/story?sid=51481">996 工作制</a>正遭到年轻一代专业人士的挑战。]]></description>
				<pubDate>Fri, 11 May 2018 16:28:39 +0800</pubDate>
				<guid>http://liftoff.msfc.nasa.gov/2003/06/03.html#item573</guid>
			</item>
		</channel>
	</rss>"""

FULL_RSS = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>
      Liftoff News	</title>
    <link>http://liftoff.msfc.nasa.gov/</link>
    <description>	Liftoff to Space Exploration.
    </description>
    <language>en-us</language>
    <copyright>  Copyright 2002, Spartanburg Herald-Journal
</copyright>
    <pubDate>Tue, 10 Jun 2003 04:00:00 GMT</pubDate>
    <lastBuildDate>Tue, 10 Jun 2003 09:41:01 GMT</lastBuildDate>
    <category>Science</category>
    <category domain="http://www.dmoz.org">Top/Science/Space</category>
    <cloud domain="rpc.sys.com" port="80" path="/RPC2" registerProcedure="pingMe" protocol="soap"/>
    <image>
      <url>http://liftoff.msfc.nasa.gov/news.gif</url>
      <title>Liftoff News</title>
      <link>http://liftoff.msfc.nasa.gov/</link>
      <width>88</width>
      <height>31</height>
    </image>
    <rating>(PICS-1.1 "http://www.rsac.org/ratingsv01.html" l gen true)</rating>
    <textInput>
      <title>Search</title>
      <description>Search Liftoff</description>
      <name>q</name>
      <link>http://liftoff.msfc.nasa.gov/search</link>
    </textInput>
    <skipHours><hour>0</hour><hour>1</hour><hour>23</hour></skipHours>
    <skipDays><day>Saturday</day><day>Sunday</day></skipDays>
    <item>
      <title>  Star City  </title>
      <link>http://liftoff.msfc.nasa.gov/news/2003/news-starcity.asp</link>
      <description>
        How do Americans get ready to work with Russians aboard the
        International Space Station?
      </description>
      <author>jim@example.com (Jim)</author>
      <category domain="http://www.fool.com/cusips">MSFT</category>
      <category>Space</category>
      <comments>http://liftoff.msfc.nasa.gov/comments/starcity</comments>
      <enclosure url="http://www.scripting.com/mp3s/weatherReportSuite.mp3" length="12216320" type="audio/mpeg"/>
      <guid isPermaLink="true">http://liftoff.msfc.nasa.gov/2003/06/03.html#item573</guid>
      <pubDate>Tue, 03 Jun 2003 09:39:21 GMT</pubDate>
      <source url="http://www.tomalak.org/links2.xml">Tomalak's Realm</source>
    </item>
    <item>
      <description>Sky watchers in Europe, Asia, and parts of Alaska and Canada will experience a partial eclipse.</description>
      <pubDate>Fri, 30 May 2003 11:06:42 GMT</pubDate>
      <guid>http://liftoff.msfc.nasa.gov/2003/05/30.html#item572</guid>
    </item>
  </channel>
</rss>"""


def build_rss(items=(), ttl: int | None = None, version: str = "2.0") -> bytes:
    """Build a minimal RSS document.

    Args:
        items: (title, pubDate) pairs; pubDate may be None.
        ttl: Optional channel ttl in minutes.
        version: Root version attribute.
    """
    parts = [
        f'<rss version="{version}"><channel>',
        "<title>Test Feed</title><link>https://example.com/</link>",
        "<description>Test feed description</description>",
    ]
    if ttl is not None:
        parts.append(f"<ttl>{ttl}</ttl>")
    for title, pub_date in items:
        parts.append(f"<item><title>{title}</title><guid>{title}</guid>")
        if pub_date is not None:
            parts.append(f"<pubDate>{pub_date}</pubDate>")
        parts.append("</item>")
    parts.append("</channel></rss>")
    return "".join(parts).encode("utf-8")


@pytest.fixture
def solidot_rss() -> bytes:
    """Single-item RSS 2.0 document with a numeric-offset date."""
    return SOLIDOT_RSS.encode("utf-8")


@pytest.fixture
def full_rss() -> bytes:
    """RSS 2.0 document using every channel and item element."""
    return FULL_RSS.encode("utf-8")


@pytest.fixture
def rss_builder():
    """Factory for small RSS documents."""
    return build_rss


@pytest.fixture
def feed_file(tmp_path: Path):
    """Write an RSS document to a temp file and return its path.

    Calling it again rewrites the same file.
    """
    path = tmp_path / "feed.xml"

    def write(content: bytes) -> Path:
        path.write_bytes(content)
        return path

    return write
