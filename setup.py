import pathlib
from sys import version_info

from setuptools import find_packages
from setuptools import setup

install_requires = [
    "jinja2",
    "markupsafe",
    "rich >= 11.2.0",
]

lint_requires = [
    "black",
    "flake8",
    "isort",
    "mypy",
]

test_requires = [
    "pytest",
    "pytest-cov",
]

about = {}
with open("src/dhatless/_version.py") as fp:
    exec(fp.read(), about)


HERE = pathlib.Path(__file__).parent.resolve()
README = HERE / "README.md"
LONG_DESCRIPTION = README.read_text(encoding="utf-8") if README.exists() else ""

setup(
    name="dhatless",
    version=about["__version__"],
    python_requires=">=3.8.0",
    description="Readable text and HTML reports from DHAT heap profiles",
    long_description=LONG_DESCRIPTION,
    long_description_content_type="text/markdown",
    classifiers=[
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Software Development :: Debuggers",
    ],
    license="Apache 2.0",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    package_data={
        "dhatless.reporters": ["templates/*.html", "templates/assets/*"],
    },
    install_requires=install_requires,
    extras_require={
        "test": test_requires,
        "lint": lint_requires,
        "dev": test_requires + lint_requires,
    },
    entry_points={
        "console_scripts": [
            f"dhatless{version_info.major}.{version_info.minor}=dhatless.commands:main",
            "dhatless=dhatless.commands:main",
        ],
    },
)
