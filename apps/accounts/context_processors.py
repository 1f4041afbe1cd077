"""
Context processors for accounts app.

Provides permission flags for navigation.
"""


def user_permissions(request):
    """
    Context processor to provide user permission flags for templates.
    """
    context = {
        'can_view_reports': False,
        'is_admin': False,
    }

    if not request.user.is_authenticated:
        return context

    user = request.user
    context['can_view_reports'] = user.can_view_reports()
    context['is_admin'] = user.is_admin()

    return context
