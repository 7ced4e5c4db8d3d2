"""Authentication binding exports."""

from repoxauth.core.binding.binder import AuthenticationBinder

__all__ = ["AuthenticationBinder"]
