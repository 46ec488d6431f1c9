# server/core/utils.py


def next_id(records: list[dict]) -> int:
    """
    One past the highest id in the collection, or 1 for an empty one.
    """
    return max((r["id"] for r in records), default=0) + 1


def safe_user(user: dict) -> dict:
    return {key: value for key, value in user.items() if key != "password"}


def find_by_id(records: list[dict], record_id: int) -> dict | None:
    return next((r for r in records if r["id"] == record_id), None)
