from pathlib import Path
from setuptools import setup, find_packages

BASE_DIR = Path(__file__).parent

# ----------------------------------------------------------------------
# Core version & requirements (the library itself)
# ----------------------------------------------------------------------
version = (BASE_DIR / ".version").read_text().strip()
long_description = (BASE_DIR / "README.md").read_text(encoding="utf-8")
requirements_lib = (BASE_DIR / "requirements_lib.txt").read_text().splitlines()

# ----------------------------------------------------------------------
# Extras handling
# ----------------------------------------------------------------------
extras = {
    "test": ["pytest"],
}

# ----------------------------------------------------------------------
setup(
    name="lang-services",
    version=version,
    description="Client library for cloud language translation, "
    "identification and text-to-speech services",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="Apache-2.0",
    packages=find_packages(
        where=".",
        include=[
            "lang_services_lib*",
            "lang_services_cli*",
        ],
        exclude=("tests", "docs"),
    ),
    python_requires=">=3.10",
    install_requires=[r for r in requirements_lib if r.strip()],
    extras_require=extras,
    entry_points={
        "console_scripts": {
            "lang-services=lang_services_cli.translate:main",
        }
    },
)
