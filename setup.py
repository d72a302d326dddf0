import contextlib
import os
import sys

import setuptools

# modules on the dispatch hot path. `_uncompiled.py` must stay pure python, and
# `__init__.py` only re-exports.
COMPILED_MODULES = [
    "src/poniard/_exceptions.py",
    "src/poniard/_injector.py",
    "src/poniard/_sources.py",
    "src/poniard/_unknown.py",
    "src/poniard/_util.py",
]

ext_modules = None
if (
    all(arg not in sys.argv for arg in ["clean", "check"])
    and "SKIP_CYTHON" not in os.environ
    and "PONIARD_SKIP_CYTHON" not in os.environ
):
    with contextlib.suppress(ImportError):
        from Cython.Build import cythonize

        # CYTHON_TRACE=1 builds with line tracing, for coverage of compiled modules
        compiler_directives = {
            "linetrace": bool(os.getenv("CYTHON_TRACE")),
            # `Injector.inject` relies on closures and `functools.wraps` metadata
            "binding": True,
        }

        os.environ["CFLAGS"] = "-O3 " + os.environ.get("CFLAGS", "")

        ext_modules = cythonize(
            COMPILED_MODULES,
            nthreads=int(os.getenv("CYTHON_NTHREADS", 0)),
            language_level=3,
            compiler_directives=compiler_directives,
        )

setuptools.setup(
    ext_modules=ext_modules,
    package_dir={"": "src"},
)
