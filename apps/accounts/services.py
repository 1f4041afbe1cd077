"""
Service layer for accounts app.

Read-side helpers used by the report engine:
- get_users_by_group_and_role: Group members of one role, with their tasks
- get_transcribers_by_group / get_reviewers_by_group: Role shortcuts
"""

from django.db.models import Prefetch

from .models import User


# Reverse relation holding each role's own task list
ROLE_TASK_RELATIONS = {
    User.Role.TRANSCRIBER: 'transcriber_tasks',
    User.Role.REVIEWER: 'reviewer_tasks',
    User.Role.FINAL_REVIEWER: 'final_reviewer_tasks',
}


def get_users_by_group_and_role(group_id, role, with_tasks=True):
    """
    Fetch all users of a group with the given role.

    With with_tasks, each user carries its role's task list prefetched, so
    the report engine can fold over `user.<relation>.all()` without extra
    queries.

    Args:
        group_id: Group primary key (int or numeric string)
        role: One of User.Role
        with_tasks: Prefetch the role's tasks

    Returns:
        list of User ordered by name
    """
    users = User.objects.filter(group_id=int(group_id), role=role)

    relation = ROLE_TASK_RELATIONS.get(role)
    if relation and with_tasks:
        from apps.tasks.models import Task
        users = users.prefetch_related(
            Prefetch(relation, queryset=Task.objects.order_by('id'))
        )

    return list(users.order_by('first_name', 'last_name', 'id'))


def get_transcribers_by_group(group_id):
    """Fetch transcribers of a group with their transcriber tasks."""
    return get_users_by_group_and_role(group_id, User.Role.TRANSCRIBER)


def get_reviewers_by_group(group_id):
    """Fetch reviewers of a group; their counts are queried, not folded."""
    return get_users_by_group_and_role(group_id, User.Role.REVIEWER, with_tasks=False)


def get_user_tasks(user):
    """Return the task list that belongs to the user's role (empty for admins)."""
    relation = ROLE_TASK_RELATIONS.get(user.role)
    if relation is None:
        return []
    return list(getattr(user, relation).all())
