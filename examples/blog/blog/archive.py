"""Host module bound through resources.yaml."""
