# app/ui/posts.py

import streamlit as st
from services.api import list_posts, create_post, update_post, delete_post


def posts_page():
    st.title("📰 Posts")

    username = st.session_state["username"]
    password = st.session_state["password"]
    user_id = st.session_state["user"]["id"]

    with st.expander("✏️ New post"):
        with st.form("new_post_form", clear_on_submit=True):
            title = st.text_input("Title")
            content = st.text_area("Content")
            submitted = st.form_submit_button("Publish")
        if submitted:
            result = create_post(username, password, title, content)
            if result.get("error"):
                st.error(result["error"])
            else:
                st.rerun()

    posts = list_posts()
    if not posts:
        st.info("No posts yet.")
        return

    for post in reversed(posts):
        with st.container(border=True):
            st.subheader(post["title"])
            st.caption(f"by {post['authorUsername']}")
            st.write(post["content"])

            if post["authorId"] == user_id:
                handle_own_post(username, password, post)


def handle_own_post(username, password, post):
    post_id = post["id"]
    editing_key = f"editing_{post_id}"

    cols = st.columns([1, 1, 6])
    with cols[0]:
        if st.button("Edit", key=f"edit_{post_id}"):
            st.session_state[editing_key] = not st.session_state.get(editing_key, False)
    with cols[1]:
        if st.button("Delete", key=f"delete_{post_id}"):
            result = delete_post(username, password, post_id)
            if result.get("error"):
                st.error(result["error"])
            else:
                st.rerun()

    if st.session_state.get(editing_key):
        with st.form(f"edit_form_{post_id}"):
            title = st.text_input("Title", value=post["title"])
            content = st.text_area("Content", value=post["content"])
            saved = st.form_submit_button("Save")
        if saved:
            result = update_post(username, password, post_id, title=title, content=content)
            if result.get("error"):
                st.error(result["error"])
            else:
                st.session_state[editing_key] = False
                st.rerun()
