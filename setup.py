# pip install -e .[test]
import os

from setuptools import find_packages, setup

INSTALL_REQUIRES = [
    "numpy>=1.22",
]

EXTRAS_REQUIRE = {
    "test": ["pytest>=7.0"],
}


def read_version(package: str) -> str:
    """
    Read ``__version__`` from the package without importing it.

    Parameters
    ----------
    package : str
        Name of the package directory next to this file.

    Returns
    -------
    str
        The version string, "0.0.0" when the package does not declare one.
    """
    path = os.path.join(os.path.dirname(__file__), package, "__init__.py")
    with open(path) as f:
        for line in f:
            if line.startswith("__version__"):
                return line.split("=")[1].strip().strip("\"'")
    return "0.0.0"


def main() -> None:
    """Main setup function"""
    setup(
        name="idxpq",
        version=read_version("idxpq"),
        description="Indexed minimum priority queue on a D-ary heap",
        packages=find_packages(include=["idxpq", "idxpq.*"]),
        python_requires=">=3.9",
        install_requires=INSTALL_REQUIRES,
        extras_require=EXTRAS_REQUIRE,
        zip_safe=False
    )


if __name__ == "__main__":
    main()
