"""Repository reconciliation and credential resolution core."""
