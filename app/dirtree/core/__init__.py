"""Core directory tree materialization.

This package contains path safety checks, permission handling, the
filesystem writer, settings and the generic value walker. Import from the
submodules directly; ``dirtree.core.materialize`` depends on
``dirtree.fixpoint``, which in turn depends on the other core modules.
"""
