"""
UI layer
Purpose: Streamlit-only glue. Renders the topic sidebar, tone picker,
transcript and input area, and delegates all work to the controller. Keeps
UI concerns (layout/state widgets) separate from session logic so that logic
can be unit tested without Streamlit.
"""

import logging

import streamlit as st

from topicchat.config import AppConfig
from topicchat.controller import ChatSessionController
from topicchat.models import DEFAULT_TOPIC
from topicchat.persistence import JsonFileSessionStore
from topicchat.services.images import preview_bytes, stage_image
from topicchat.services.llm_openai import OpenAICompletionClient

config = AppConfig.from_env()
logging.basicConfig(
    level=getattr(logging, config.log_level, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("topicchat.app")

# ---------------------------
# Page config
# ---------------------------
st.set_page_config(
    page_title=config.page_title,
    page_icon="💬",
    layout="wide",
    initial_sidebar_state="expanded",
)

# ---------------------------
# Session state init
# ---------------------------
st_session = st.session_state
st_session.setdefault("controller", None)
st_session.setdefault("new_topic", "")
st_session.setdefault("upload_key", 0)
st_session.setdefault("last_upload_sig", None)


def get_controller():
    """Return the controller object."""
    return st_session.get("controller")


def on_add_topic():
    controller = get_controller()
    if controller and controller.add_topic(st_session.new_topic):
        st_session.new_topic = ""


def on_clear_chat():
    controller = get_controller()
    if controller:
        controller.clear_topic()


def on_discard_image():
    controller = get_controller()
    if controller:
        controller.discard_image()
    st_session.upload_key += 1
    st_session.last_upload_sig = None


# ---------------------------
# SIDEBAR: access gate & topics
# ---------------------------
with st.sidebar:
    st.markdown("# Topics")

    if get_controller() is None:
        api_key = config.api_key or st.text_input(
            "Enter your OpenAI API key",
            type="password",
            help="The key stays in this browser session only.",
        )
        if not api_key:
            st.warning("Please enter your API key in the sidebar to continue.")
            st.stop()
        try:
            llm = OpenAICompletionClient(api_key=api_key)
        except Exception as e:
            st.error(f"OpenAI client init failed: {e}")
            st.stop()
        st_session.controller = ChatSessionController(
            llm,
            JsonFileSessionStore(config.data_path),
            settings=config.llm_settings(),
        )
        logger.info(f"App: session loaded from {config.data_path}")

    controller = get_controller()

    st.text_input("New topic", key="new_topic", placeholder="New Topic")
    st.button("Add Topic", on_click=on_add_topic, use_container_width=True)
    st.button("Clear Current Chat", on_click=on_clear_chat, use_container_width=True)
    st.divider()

    for topic in controller.topics:
        name_col, del_col = st.columns([5, 1])
        with name_col:
            st.button(
                topic,
                key=f"topic_{topic}",
                type="primary" if topic == controller.active_topic else "secondary",
                on_click=controller.set_active,
                args=(topic,),
                use_container_width=True,
            )
        if topic != DEFAULT_TOPIC:
            with del_col:
                st.button(
                    "×",
                    key=f"delete_{topic}",
                    on_click=controller.delete_topic,
                    args=(topic,),
                )

# ---------------------------
# MAIN: tone picker
# ---------------------------
st.title(controller.active_topic)

tone = controller.tone
st.caption("Available tones:")
tone_cols = st.columns(max(len(tone.available), 1))
for col, label in zip(tone_cols, tone.available):
    with col:
        st.button(
            tone.display_label(label),
            key=f"tone_{label}",
            on_click=controller.select_tone,
            args=(label,),
            use_container_width=True,
        )
st.markdown(f"**Current tone:** {tone.display_label(tone.current)}")
st.divider()

# ---------------------------
# MAIN: transcript
# ---------------------------
transcript = st.container(height=500, border=True)
with transcript:
    for msg in controller.transcript:
        with st.chat_message(msg.role):
            if msg.image:
                st.image(preview_bytes(msg.image))
            if msg.content:
                st.markdown(msg.content)

# ---------------------------
# MAIN: input area
# ---------------------------
uploaded = st.file_uploader(
    "Attach an image",
    type=["png", "jpg", "jpeg", "gif", "webp"],
    key=f"image_upload_{st_session.upload_key}",
)
if uploaded is not None:
    raw = uploaded.getvalue()
    sig = (uploaded.name, len(raw))
    if sig != st_session.last_upload_sig:
        controller.stage_image(stage_image(raw, uploaded.type, uploaded.name))
        st_session.last_upload_sig = sig

if controller.staged_image is not None:
    st.image(preview_bytes(controller.staged_image.preview), width=160)
    send_col, remove_col = st.columns(2)
    with send_col:
        send_image_only = st.button("Send image")
    with remove_col:
        st.button("Remove", on_click=on_discard_image)
else:
    send_image_only = False

raw_text = st.chat_input(config.chat_input_placeholder, disabled=controller.is_sending)
if raw_text is not None or send_image_only:
    controller.set_draft(raw_text or "")
    had_image = controller.staged_image is not None
    with st.spinner("Sending..."):
        sent = controller.submit()
    if sent and had_image and controller.staged_image is None:
        st_session.upload_key += 1
        st_session.last_upload_sig = None
    st.rerun()
