"""Browser-side cookie helpers over a read/write cookie jar.

The jar is injected (``WebCookies(jar)``) or resolved from the ambient
context installed with ``pastry.context.use_jar``.
"""
