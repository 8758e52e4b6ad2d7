import streamlit as st

from affiliate.config import setup_logging
from affiliate.session import init_state

st.set_page_config(page_title="Mesin Pembangkit Skrip Video Affiliate", page_icon="🎬", layout="wide")
setup_logging()
init_state(st.session_state)

st.title("Mesin Pembangkit Skrip Video Affiliate")
st.caption("Ubah foto & detail produk menjadi skrip video siap pakai dengan AI.")
st.markdown(
    "- **01_Script_Generator**: turns a product photo plus details into ready-to-read video scripts.\n"
    "- **02_Image_Renderer**: edits the product photo from a free-text instruction."
)
st.info("Set your credentials in `.env` at the project root (see `.env.example`).")
