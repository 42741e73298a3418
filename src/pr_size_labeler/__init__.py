"""Platform-resolving launcher for the pr-size-labeler binaries."""
