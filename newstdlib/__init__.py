"""General-purpose building blocks: a 3D vector, maths helpers, strings, pools, a mutex and threads."""

__version__ = "0.1.0"