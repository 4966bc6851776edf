# Environment variables
ENV_USERNAME = "GITHUB_USERNAME"
ENV_PASSWORD = "GITHUB_PASSWORD"
ENV_LOGIN_URL = "BROWSER_CHECKS_LOGIN_URL"
ENV_POST_LOGIN_URL = "BROWSER_CHECKS_POST_LOGIN_URL"
ENV_STATE_PATH = "BROWSER_CHECKS_STATE_PATH"
ENV_A11Y_URL = "BROWSER_CHECKS_A11Y_URL"
ENV_AXE_SCRIPT_URL = "BROWSER_CHECKS_AXE_SCRIPT_URL"
ENV_TIMEOUT_MS = "BROWSER_CHECKS_TIMEOUT_MS"

# Auth bootstrap
LOGIN_URL = "https://github.com/login"
POST_LOGIN_URL = "https://github.com/"
USERNAME_LABEL = "Username or email address"
PASSWORD_LABEL = "Password"
SIGN_IN_BUTTON = "Sign in"
DASHBOARD_LINK = "Dashboard"
STORAGE_STATE_PATH = "playwright/.auth/user.json"

# Accessibility smoke check
A11Y_TARGET_URL = "https://playwright.dev/"
WCAG_TAGS = ("wcag2a", "wcag2aa", "wcag21a", "wcag21aa")
AXE_SCRIPT_URL = "https://cdnjs.cloudflare.com/ajax/libs/axe-core/4.9.1/axe.min.js"

MISSING_CREDENTIALS_MESSAGE = (
    f"{ENV_USERNAME} and {ENV_PASSWORD} environment variables must be set."
)
