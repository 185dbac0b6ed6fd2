"""Report modules for displaying view configuration."""
