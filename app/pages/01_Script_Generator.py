import streamlit as st

from affiliate import config, session
from affiliate.exports import build_csv_bytes, build_docx_bytes, build_txt_bytes, slugify
from affiliate.forms import DETAIL_PHOTO, DETAIL_TEXT, ScriptForm, can_generate_script, validate_script_form
from affiliate.script_gemini import generate_scripts
from affiliate.widgets import image_uploader, persisted

st.set_page_config(page_title="Script Generator", page_icon="🎬", layout="wide")
config.setup_logging()
session.init_state(st.session_state)
state = st.session_state

st.title("🎬 Script Generator")

DETAIL_LABELS = {DETAIL_TEXT: "Tulis Detail", DETAIL_PHOTO: "Upload Foto Detail"}

col_in, col_out = st.columns([1, 1])

with col_in:
    st.subheader("1. Upload Product Photo")
    image_uploader(
        "Main product photo (PNG/JPG/GIF/WEBP)",
        key="main_upload",
        current=state["main_image"],
        on_image=session.set_main_image,
        on_remove=session.clear_main_image,
    )

    st.subheader("2. Provide Product Details")
    detail_mode = persisted(
        st.radio, "detail_mode", "Detail input", list(DETAIL_LABELS.keys()),
        format_func=DETAIL_LABELS.get, horizontal=True, label_visibility="collapsed",
    )

    if detail_mode == DETAIL_TEXT:
        persisted(
            st.text_area, "product_details", "Product details", height=170, label_visibility="collapsed",
            placeholder="Jelaskan produk secara detail: fitur, manfaat, bahan, dll.",
        )
    else:
        image_uploader(
            "Detail photo (label, instructions, ...)",
            key="detail_upload",
            current=state["detail_image"],
            on_image=session.set_detail_image,
            on_remove=session.clear_detail_image,
        )

    st.subheader("3. Additional Info")
    persisted(st.text_input, "target_audience", "Target Audiens (opsional)",
              placeholder="e.g., Mahasiswa, ibu rumah tangga...")
    persisted(st.text_area, "other_details", "Detail Lainnya (opsional)", height=70,
              placeholder="e.g., Promo beli 1 gratis 1...")
    c1, c2 = st.columns(2)
    with c1:
        persisted(
            st.slider, "duration", "Durasi Script (detik)",
            min_value=config.DURATION_MIN, max_value=config.DURATION_MAX, step=config.DURATION_STEP,
        )
    with c2:
        persisted(
            st.number_input, "number_of_scripts", "Jumlah Script",
            min_value=config.SCRIPTS_MIN, max_value=config.SCRIPTS_MAX, step=1,
        )

    form = ScriptForm(
        main_image=state["main_image"],
        detail_mode=state["detail_mode"],
        product_details=state["product_details"],
        detail_image=state["detail_image"],
        target_audience=state["target_audience"],
        other_details=state["other_details"],
        duration=int(state["duration"]),
        number_of_scripts=int(state["number_of_scripts"]),
    )

    busy = session.is_busy(state, session.SCRIPT)
    st.button(
        "✨ Generating Script..." if busy else "✨ Generate Script",
        key="generate_script", type="primary", width="stretch",
        disabled=busy or not can_generate_script(form),
        on_click=session.start, args=(state, session.SCRIPT),
    )

with col_out:
    st.subheader("Hasil Script")

    if session.is_busy(state, session.SCRIPT):
        with st.spinner("Generating..."):
            session.submit(state, session.SCRIPT, validate_script_form(form),
                           lambda: generate_scripts(**form.request_kwargs()))
        st.rerun()

    if state["script_error"]:
        st.error(f"Error: {state['script_error']}")

    scripts = state["scripts"]
    if scripts:
        for i, script in enumerate(scripts, 1):
            with st.container(border=True):
                st.markdown(f"**Script #{i}**")
                st.code(script, language=None, wrap_lines=True)   # st.code ships a copy button

        slug = slugify(form.product_details, default="scripts")
        d1, d2, d3 = st.columns(3)
        with d1:
            st.download_button("Download CSV", data=build_csv_bytes(scripts), file_name=f"{slug}.csv",
                               mime="text/csv", width="stretch")
        with d2:
            st.download_button("Download TXT", data=build_txt_bytes(scripts), file_name=f"{slug}.txt",
                               mime="text/plain", width="stretch")
        with d3:
            docx_io = build_docx_bytes(scripts, duration=form.duration, target_audience=form.target_audience)
            if docx_io is not None:
                st.download_button(
                    "Download Word (.docx)", data=docx_io, file_name=f"{slug}.docx",
                    mime="application/vnd.openxmlformats-officedocument.wordprocessingml.document",
                    width="stretch",
                )
            else:
                st.info("Install `python-docx` to export to Word.")
    elif not state["script_error"]:
        st.caption("Your generated script(s) will appear here.")
