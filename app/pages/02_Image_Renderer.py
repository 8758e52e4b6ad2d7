import streamlit as st

from affiliate import config, session
from affiliate.exports import slugify
from affiliate.forms import RenderForm, can_render, validate_render_form
from affiliate.render_gemini import render_image
from affiliate.widgets import image_uploader, persisted

st.set_page_config(page_title="Image Renderer", page_icon="🖼️", layout="wide")
config.setup_logging()
session.init_state(st.session_state)
state = st.session_state

st.title("🖼️ Image Renderer")

with st.sidebar:
    st.caption("💡 Prompt tips:")
    st.markdown(
        "- Describe the **scene** (beach, studio, kitchen table...).\n"
        "- Mention **style** or **filter** (retro, soft light, minimalist).\n"
        "- Keep the product itself unchanged unless you ask otherwise."
    )

col_in, col_out = st.columns([1, 1])

with col_in:
    st.subheader("1. Input Foto & Prompt")
    image_uploader(
        "Product photo (PNG/JPG/GIF/WEBP)",
        key="render_upload",
        current=state["main_image"],
        on_image=session.set_main_image,
        on_remove=session.clear_main_image,
    )
    prompt = persisted(
        st.text_area, "render_prompt", "Render Prompt", height=120,
        placeholder="e.g., Add a retro filter, put this product on a beach background...",
    )
    form = RenderForm(main_image=state["main_image"], prompt=prompt)

    busy = session.is_busy(state, session.RENDER)
    st.button(
        "✨ Rendering Image..." if busy else "✨ Render Image",
        key="render_image", type="primary", width="stretch",
        disabled=busy or not can_render(form),
        on_click=session.start, args=(state, session.RENDER),
    )

with col_out:
    st.subheader("2. Hasil Foto")

    if session.is_busy(state, session.RENDER):
        with st.spinner("Rendering image..."):
            session.submit(state, session.RENDER, validate_render_form(form),
                           lambda: render_image(form.prompt.strip(), form.main_image))
        st.rerun()

    if state["render_error"]:
        st.error(f"Error: {state['render_error']}")

    rendered = state["rendered_image"]
    if rendered is not None:
        st.image(rendered.data, caption="Rendered image")
        st.download_button(
            label="Download image",
            data=rendered.data,
            file_name=f"{slugify(form.prompt, default='rendered')}.{rendered.extension}",
            mime=rendered.mime_type,
            width="stretch",
        )
    elif not state["render_error"]:
        st.caption("Your rendered image will appear here.")
