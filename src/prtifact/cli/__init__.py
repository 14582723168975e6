"""Command line interface for prtifact."""
