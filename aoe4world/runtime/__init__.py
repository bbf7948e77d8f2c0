"""Runtime: REST execution and pagination."""
