# app/services/api.py

import os
import requests
from dotenv import load_dotenv


load_dotenv()

# Base URL of the FastAPI backend
API_URL = os.getenv("API_URL", "http://localhost:3000")


def _handle(res):
    """
    Returns the decoded body on success, or {"error": ...} carrying the server's detail.
    """
    if res.ok:
        return res.json()
    try:
        detail = res.json().get("detail", res.text)
    except ValueError:
        detail = res.text
    if not isinstance(detail, str):
        detail = "Invalid request"
    return {"error": f"{res.status_code}: {detail}"}


def _call(method, path, **kwargs):
    try:
        res = requests.request(method, f"{API_URL}{path}", **kwargs)
    except requests.RequestException as e:
        return {"error": str(e)}
    return _handle(res)


# -------------------------------
# Authentication
# -------------------------------

def register_user(username, email, password):
    """
    Creates an account and returns the new user without its password.
    """
    payload = {"username": username, "email": email, "password": password}
    return _call("POST", "/register", json=payload)


def login_user(username, password):
    """
    Checks credentials. Returns {"message", "user"} on success.
    """
    return _call("POST", "/login", json={"username": username, "password": password})


# -------------------------
# Posts
# -------------------------

def list_posts():
    data = _call("GET", "/posts")
    return data if isinstance(data, list) else []


def create_post(username, password, title, content):
    payload = {
        "username": username,
        "password": password,
        "title": title,
        "content": content,
    }
    return _call("POST", "/posts", json=payload)


def update_post(username, password, post_id, title=None, content=None):
    payload = {"username": username, "password": password}
    if title is not None:
        payload["title"] = title
    if content is not None:
        payload["content"] = content
    return _call("PUT", f"/posts/{post_id}", json=payload)


def delete_post(username, password, post_id):
    return _call("DELETE", f"/posts/{post_id}", json={"username": username, "password": password})


# -------------------------
# Members & Account
# -------------------------

def list_users():
    data = _call("GET", "/users")
    return data if isinstance(data, list) else []


def update_profile(username, password, email=None, new_password=None):
    """
    Sends only the fields that should change.
    """
    payload = {"username": username, "password": password}
    if email:
        payload["email"] = email
    if new_password:
        payload["newPassword"] = new_password
    return _call("PUT", "/profile", json=payload)


def delete_account(username, password):
    return _call("DELETE", "/account", json={"username": username, "password": password})
