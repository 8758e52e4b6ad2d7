import streamlit as st

from affiliate import config
from affiliate.uploads import InvalidImageError, from_upload


def image_uploader(label: str, key: str, current, on_image, on_remove, help: str = None):
    """
    Uploader with preview. The stored ImagePart lives in session state (not in the widget),
    so the preview survives page switches; `on_image` / `on_remove` receive st.session_state.
    """
    error_key = f"{key}_error"

    def _changed():
        file = st.session_state.get(key)
        if file is None:
            return
        try:
            on_image(st.session_state, from_upload(file))
            st.session_state[error_key] = None
        except InvalidImageError as e:
            st.session_state[error_key] = str(e)

    if current is not None:
        st.image(current.data)
        if st.button("Remove photo", key=f"{key}_remove"):
            on_remove(st.session_state)
            st.rerun()
    else:
        st.file_uploader(label, type=config.UPLOAD_TYPES, key=key, on_change=_changed, help=help)

    if st.session_state.get(error_key):
        st.error(st.session_state[error_key])


def _store(key: str, widget_key: str):
    st.session_state[key] = st.session_state[widget_key]


def persisted(widget, key: str, *args, **kwargs):
    """
    Draw `widget` bound to the plain session key `key`.
    Streamlit drops a widget's own state when it is not drawn (hidden input, other page),
    so the widget gets a private key seeded from `key` and every change is copied back.
    """
    widget_key = f"_{key}"
    if widget_key not in st.session_state:
        st.session_state[widget_key] = st.session_state[key]
    value = widget(*args, key=widget_key, on_change=_store, args=(key, widget_key), **kwargs)
    st.session_state[key] = value
    return value
