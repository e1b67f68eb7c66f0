import ast
import pathlib

from setuptools import find_packages, setup

INIT_PY = pathlib.Path(__file__).resolve().parent.joinpath(
    "src", "sudokulib", "__init__.py"
)


def read_version():
    with INIT_PY.open() as f:
        for line in f:
            if line.startswith("__version__"):
                return ast.literal_eval(line.split("=", 1)[-1].strip())
    raise RuntimeError(f"__version__ not found in {INIT_PY}")


# Everything static is declared in setup.cfg.
setup(
    package_dir={"": "src"},
    packages=find_packages("src"),
    package_data={"": ["LICENSE*", "README*"]},
    version=read_version(),
)
