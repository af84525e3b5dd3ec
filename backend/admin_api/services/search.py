# global search — matches users, consultants and tasks for the command palette

from typing import Sequence

from admin_api.models.dashboard import SearchResult
from admin_api.models.task import Task
from admin_api.models.user import UserRecord

MAX_USERS = 5
MAX_CONSULTANTS = 3
MAX_TASKS = 5
MAX_RESULTS = 10


def _user_matches(user: UserRecord, needle: str) -> bool:
    return (
        needle in user.display_name.lower()
        or needle in user.email.lower()
        or needle in user.id.lower()
    )


def global_search(query: str, users: Sequence[UserRecord], tasks: Sequence[Task]) -> list[SearchResult]:
    """case-insensitive substring search. a consultant can show up both as
    a user and as a consultant, like in the dashboard's palette."""
    needle = query.strip().lower()
    if not needle:
        return []

    results: list[SearchResult] = []

    for user in [u for u in users if _user_matches(u, needle)][:MAX_USERS]:
        results.append(SearchResult(
            type="user",
            id=user.id,
            title=user.label,
            subtitle=user.email,
            badge=user.role,
            href="/admin/users",
        ))

    consultants = [u for u in users if u.role == "consultant" and _user_matches(u, needle)]
    for user in consultants[:MAX_CONSULTANTS]:
        results.append(SearchResult(
            type="consultant",
            id=user.id,
            title=user.label,
            subtitle="Verified Consultant" if user.verified else "Pending Approval",
            badge="verified" if user.verified else "pending",
            href="/admin/consultants" if user.verified else "/admin/consultants/requests",
        ))

    matching_tasks = [
        t for t in tasks
        if needle in t.title.lower() or needle in t.user_id.lower() or needle in t.id.lower()
    ]
    for task in matching_tasks[:MAX_TASKS]:
        results.append(SearchResult(
            type="task",
            id=task.id,
            title=task.title,
            subtitle=f"User: {task.user_id[:8]}... | {task.status}",
            badge=task.status,
            href="/admin/tasks",
        ))

    return results[:MAX_RESULTS]
