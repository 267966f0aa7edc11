"""CLI layer — the fail-fast boundary, console output and the demo program.

This package is the outermost layer.  It may import from ``core`` and
``infra``; neither of them imports from ``cli``.  It is the only place
that writes diagnostics and turns failures into process exit codes.
"""
