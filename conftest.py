pytest_plugins = ["scalike.testing.fixtures"]
