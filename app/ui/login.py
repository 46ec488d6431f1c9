# app/ui/login.py

import streamlit as st
from services.api import login_user, register_user


def logout():
    for key in ("username", "password", "user", "page"):
        st.session_state.pop(key, None)


def login_page():
    st.title("🔐 Log in")

    if "show_register" not in st.session_state:
        st.session_state["show_register"] = False

    if st.session_state["show_register"]:
        show_register_form()
    else:
        show_login_form()


def show_login_form():
    notice = st.session_state.pop("login_notice", None)
    if notice:
        st.success(notice)

    with st.form("login_form"):
        username = st.text_input("Username")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Log in")

    if submitted:
        with st.spinner("Logging in..."):
            result = login_user(username, password)
        if result.get("error"):
            st.error(f"❌ Login failed: {result['error']}")
        else:
            # Every protected call re-sends the credentials, so they are kept for the session.
            st.session_state["username"] = username
            st.session_state["password"] = password
            st.session_state["user"] = result["user"]
            st.rerun()

    if st.button("Create an account"):
        st.session_state["show_register"] = True
        st.rerun()


def show_register_form():
    st.subheader("📝 Sign up")

    new_user = st.text_input("Username", key="new_user")
    new_email = st.text_input("Email", key="new_email")
    new_pass = st.text_input("Password", type="password", key="new_pass")

    if st.button("Sign up"):
        with st.spinner("Creating account..."):
            result = register_user(new_user, new_email, new_pass)
        if result.get("error"):
            st.error(f"❌ Sign up failed: {result['error']}")
        else:
            st.session_state["login_notice"] = "🎉 Account created! You can log in now."
            st.session_state["show_register"] = False
            st.rerun()

    if st.button("← Back to log in"):
        st.session_state["show_register"] = False
        st.rerun()
