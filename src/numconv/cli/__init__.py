"""CLI layer — argument parsing, the interactive shell, and error boundary.

This package is the outermost layer.  It may import from ``core``; the
core never imports from ``cli``.
"""
