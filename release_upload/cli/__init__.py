"""Command line interface for upload-release-asset."""
