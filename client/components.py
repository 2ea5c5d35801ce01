# client/components.py
import streamlit as st
import pandas as pd

from spacedash.views import EventsView, events_caption, events_records, feed_info, gallery_html

def show_table(rows, caption: str | None = None):
    """Render a list[dict] as a dataframe; otherwise show JSON."""
    if caption:
        st.caption(caption)
    if isinstance(rows, list):
        if rows and isinstance(rows[0], dict):
            st.dataframe(pd.DataFrame(rows), hide_index=True)
        else:
            st.write(rows)
    else:
        st.write(rows)

def show_json(obj, caption: str | None = None):
    if caption:
        st.caption(caption)
    st.json(obj)

def show_placeholder(message: str, error: bool = False):
    """The 'no data' / 'loading error' line a panel shows instead of content."""
    if error:
        st.error(message)
    else:
        st.caption(message)

def show_events(view: EventsView, message: str | None = None):
    if view.rows:
        st.caption(events_caption(view))
        st.dataframe(pd.DataFrame(events_records(view)), hide_index=True, use_container_width=True)
    else:
        show_placeholder(message or "no events found")
    # full payload stays inspectable, even when the table was cut at the display limit
    with st.expander("Full JSON"):
        st.code(view.raw_json, language="json")

def show_gallery(items, feed, start: int, size: int):
    st.markdown(gallery_html(items[start:start + size]), unsafe_allow_html=True)
    st.caption(feed_info(feed))

def show_cms_block(title: str, content: str | None, message: str | None = None):
    with st.container(border=True):
        st.markdown(f"**{title}**")
        if content:
            # editor-authored HTML from the cms_blocks table
            st.markdown(content, unsafe_allow_html=True)
        else:
            show_placeholder(message or "block not found")
