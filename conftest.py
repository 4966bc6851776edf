pytest_plugins = ["browserchecks.fixtures"]
