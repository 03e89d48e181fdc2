"""bundlekit command-line interface."""
