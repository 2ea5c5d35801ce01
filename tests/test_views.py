import json

from spacedash.normalizers import FeedResult, GalleryItem, NormalizedEvent, map_gallery_item
from spacedash.views import (
    PLACEHOLDER,
    build_events_view,
    event_row,
    events_caption,
    events_records,
    feed_info,
    format_metric,
    gallery_figure_html,
    gallery_html,
    shift_window,
)

def _many_events(n):
    return {"results": [{"name": f"Body {i}", "type": "transit", "time": f"t{i}"} for i in range(n)]}

def test_truncates_to_display_limit_but_keeps_total_and_raw():
    payload = _many_events(250)
    view = build_events_view(payload)
    assert len(view.rows) == 200
    assert view.total == 250
    assert view.truncated
    assert events_caption(view) == "Showing 200 of 250 events"
    assert json.loads(view.raw_json) == payload

def test_rows_are_numbered_from_one():
    view = build_events_view(_many_events(3))
    assert [r.index for r in view.rows] == [1, 2, 3]
    assert events_caption(view) == "3 events"
    assert events_records(view)[0] == {
        "#": 1, "Body": "Body 0", "Event": "transit", "When (UTC)": "t0", "Extra": "",
    }

def test_empty_when_is_shown_with_placeholder():
    row = event_row(1, NormalizedEvent(name="Moon", type="eclipse"))
    assert row.when == PLACEHOLDER
    assert row.extra == ""

def test_no_events_view():
    view = build_events_view({"nothing": "here"})
    assert view.rows == []
    assert view.total == 0
    assert not view.truncated

def test_gallery_figure_escapes_caption_and_attributes():
    item = map_gallery_item({"url": 'a.jpg" onerror="x', "caption": "<script>alert(1)</script>"})
    out = gallery_figure_html(item)
    assert "<script>" not in out
    assert 'onerror="x' not in out
    assert 'href="a.jpg&quot; onerror=&quot;x"' in out

def test_gallery_figure_uses_link_for_anchor():
    out = gallery_figure_html(GalleryItem(url="a.jpg", link="https://example.org/a", caption="Pillars"))
    assert 'href="https://example.org/a"' in out
    assert 'src="a.jpg"' in out
    assert "Pillars" in out

def test_gallery_html_track():
    out = gallery_html([GalleryItem("a.jpg", "a.jpg", ""), GalleryItem("b.jpg", "b.jpg", "")])
    assert out.count('<figure class="jwst-item">') == 2
    assert 'class="jwst-track"' in out

def test_feed_info():
    assert feed_info(FeedResult(source="jpg", count=24)) == "Source: jpg · Showing 24"
    assert feed_info(FeedResult()) == f"Source: {PLACEHOLDER} · Showing 0"

def test_format_metric():
    assert format_metric(27598.4) == "27 598"
    assert format_metric("420.7") == "421"
    assert format_metric(None) == PLACEHOLDER
    assert format_metric("n/a") == PLACEHOLDER
    assert format_metric(10 ** 400) == PLACEHOLDER

def test_shift_window_clamps():
    assert shift_window(0, -3, 24, 6) == 0
    assert shift_window(0, 3, 24, 6) == 3
    assert shift_window(17, 3, 24, 6) == 18
    assert shift_window(0, 3, 4, 6) == 0
    assert shift_window(5, 3, 0, 6) == 0
