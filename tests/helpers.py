"""Common values for tests."""

SANDBOX_USERNAME = "octocat"
SANDBOX_PASSWORD = "hunter2"  # nosec
