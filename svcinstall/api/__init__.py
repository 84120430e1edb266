"""svcinstall API - service descriptors, renderers, orchestration and CLI commands."""
