import pytest


@pytest.fixture(scope="session")
def browser_context_args(browser_context_args):
    # axe-core is injected from its CDN, which the live sites' CSP would block.
    return {**browser_context_args, "bypass_csp": True}
