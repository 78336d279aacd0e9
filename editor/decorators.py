from functools import wraps

from django.http import JsonResponse


def staff_required_json(view_func):
    """Like staff_member_required, but answers API callers with JSON instead of a redirect."""

    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        user = request.user

        if not user.is_authenticated:
            return JsonResponse(
                {"success": False, "error": "Authentication required."}, status=401
            )

        if not (user.is_active and user.is_staff):
            return JsonResponse(
                {"success": False, "error": "Staff access required."}, status=403
            )

        return view_func(request, *args, **kwargs)

    return wrapper
