import json

from spacedash.normalizers import FeedResult, GalleryItem, map_feed, map_gallery_item

def test_link_and_caption_defaults():
    assert map_gallery_item({"url": "a.jpg"}) == GalleryItem(url="a.jpg", link="a.jpg", caption="")

def test_explicit_link_and_caption():
    item = map_gallery_item({"url": "a.jpg", "link": "https://webbtelescope.org/a", "caption": "Carina"})
    assert item == GalleryItem(url="a.jpg", link="https://webbtelescope.org/a", caption="Carina")

def test_caption_markup_is_escaped():
    item = map_gallery_item({"url": "a.jpg", "caption": "<script>alert(1)</script>"})
    assert "<" not in item.caption
    assert item.caption.startswith("&lt;script&gt;")

def test_items_without_url_are_kept():
    feed = map_feed({"items": [{"caption": "lost"}, {"url": "b.jpg"}], "source": "jpg", "count": 2})
    assert feed.items[0] == GalleryItem(url="", link="", caption="lost")
    assert len(feed.items) == 2

def test_feed_fields():
    feed = map_feed({"items": [{"url": "a.jpg"}], "source": "program 2734", "count": "1"})
    assert feed == FeedResult(items=(GalleryItem("a.jpg", "a.jpg", ""),), source="program 2734", count=1)

def test_count_falls_back_to_len_items():
    assert map_feed({"items": [{"url": "a"}, {"url": "b"}]}).count == 2

def test_malformed_feed():
    assert map_feed(None) == FeedResult()
    assert map_feed({"items": "nope", "source": None}) == FeedResult()
    assert map_feed({"items": [42]}).items == (GalleryItem(),)

def test_huge_count_falls_back_to_len_items():
    huge = json.loads("1" + "0" * 400)
    assert map_feed({"items": [{"url": "a"}], "count": huge}).count == 1
