"""Repository set reconciliation exports."""

from repoxauth.core.reconcile.policy import KEEP_POLICIES, keep_permissive, keep_strict
from repoxauth.core.reconcile.reconciler import RepositoryReconciler

__all__ = ["KEEP_POLICIES", "RepositoryReconciler", "keep_permissive", "keep_strict"]
