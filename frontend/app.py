import logging

import streamlit as st

from controller import PlannerController


logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
st.set_page_config(page_title="Study Planner", layout="centered")


if "controller" not in st.session_state:
    st.session_state.controller = PlannerController()
if "upload_round" not in st.session_state:
    st.session_state.upload_round = 0

controller = st.session_state.controller
state = controller.state


def on_name_change():
    controller.edit_draft("name", st.session_state.draft_name)


def on_date_change():
    picked = st.session_state.draft_date
    controller.edit_draft("date", picked.isoformat() if picked else "")


def on_upload():
    uploaded = st.session_state[upload_key()]
    if uploaded is not None:
        controller.upload_study_guide(uploaded)


def on_add_test():
    if controller.add_test():
        st.session_state.draft_name = ""
        st.session_state.draft_date = None
        # a fresh key is the only way to empty a file uploader
        st.session_state.upload_round += 1


def on_api_key_change():
    controller.set_credential(st.session_state.api_key)


def on_generate():
    controller.set_credential(st.session_state.get("api_key", ""))
    controller.generate_plan()


def upload_key():
    return f"study_guide_{st.session_state.upload_round}"


@st.fragment(run_every=1)
def watch_jobs():
    if controller.pending():
        st.caption("Working on it...")
    else:
        st.rerun()


st.title("Study Planner")


with st.container(border=True):
    st.subheader("Add New Test")
    st.text_input("Test Name", key="draft_name", placeholder="Test Name", on_change=on_name_change)
    st.date_input("Test Date", value=None, key="draft_date", on_change=on_date_change)
    st.file_uploader(
        "Study Guide (PDF File Upload)",
        type=["pdf"],
        key=upload_key(),
        on_change=on_upload,
    )
    st.button("Add Test", key="add_test", on_click=on_add_test)


if state.tests:
    with st.container(border=True):
        st.subheader("Added Tests")
        for test in state.tests:
            st.markdown(f"**{test.name}** - {test.date} - Study Guide Uploaded")


with st.container(border=True):
    st.subheader("Generate Study Plan")
    st.text_input(
        "OpenAI API Key",
        type="password",
        key="api_key",
        placeholder="Enter your OpenAI API key",
        on_change=on_api_key_change,
    )
    st.button("Generate Study Plan", key="generate", type="primary", on_click=on_generate)


if controller.pending():
    watch_jobs()

if state.error:
    st.error(f"**Error:** {state.error}")

if state.study_plan:
    with st.container(border=True):
        st.subheader("Your Study Plan")
        st.text(state.study_plan)
