"""Build script for the Cython extension.

Usage:
    python setup_cython.py build_ext --inplace

This compiles prefixtree/trie.py into a shared-object (.so / .pyd) file
that Python imports in place of the pure-Python module.
"""

from setuptools import setup, Extension
from Cython.Build import cythonize

extensions = [
    Extension(
        "prefixtree.trie",
        ["prefixtree/trie.py"],
    ),
]

setup(
    name="prefixtree-cython",
    ext_modules=cythonize(
        extensions,
        compiler_directives={
            "language_level": "3",
            "boundscheck": False,
            "wraparound": False,
        },
    ),
)
