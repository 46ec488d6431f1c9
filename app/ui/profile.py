# app/ui/profile.py

import streamlit as st
from services.api import update_profile, delete_account, list_users
from ui.login import logout


def profile_page():
    st.title("👤 Profile")

    username = st.session_state["username"]
    password = st.session_state["password"]
    user = st.session_state["user"]

    st.markdown(f"**Username:** {user['username']}")
    st.markdown(f"**Email:** {user.get('email') or '-'}")

    with st.form("profile_form"):
        email = st.text_input("New email")
        new_password = st.text_input("New password", type="password")
        saved = st.form_submit_button("Save changes")

    if saved:
        result = update_profile(username, password, email=email, new_password=new_password)
        if result.get("error"):
            st.error(result["error"])
        else:
            st.session_state["user"] = result
            if new_password:
                st.session_state["password"] = new_password
            st.success("✅ Profile updated")

    st.markdown("### 👥 Members")
    st.table(list_users())

    st.markdown("### ⚠️ Danger zone")
    confirm = st.checkbox("I understand my posts will be deleted too")
    if st.button("Delete account", disabled=not confirm):
        result = delete_account(username, password)
        if result.get("error"):
            st.error(result["error"])
        else:
            logout()
            st.rerun()
