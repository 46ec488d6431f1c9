# app/main.py

import streamlit as st
from ui.login import login_page, logout
from ui.posts import posts_page
from ui.profile import profile_page


st.set_page_config(page_title="Post Board")


def main_page():
    st.sidebar.markdown(f"## Hi, {st.session_state['username']}")

    if st.sidebar.button("📰 Posts"):
        st.session_state["page"] = "posts"
    if st.sidebar.button("👤 Profile"):
        st.session_state["page"] = "profile"
    if st.sidebar.button("🔓 Log out"):
        logout()
        st.rerun()

    page = st.session_state.get("page", "posts")
    if page == "profile":
        profile_page()
    else:
        posts_page()


if "user" not in st.session_state:
    login_page()
else:
    main_page()
