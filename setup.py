# setup.py
from setuptools import setup, find_packages

install_requires = [
    # --- UI & REACTIVE ---
    "flet",
    "FletXr",

    # --- STATE & CONFIG ---
    "pydantic>=2.0.0",
    "python-dotenv>=1.0.0",
    "pyyaml>=6.0.0",
]

setup(
    name="biodata-form",
    version="1.0.0",
    description="Biodata form with inline validation on Flet",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    package_data={
        "biodata.shared": ["config/settings/*.yaml"],
    },
    install_requires=install_requires,
    extras_require={
        "test": [
            "pytest>=8.0.0",
            "pytest-asyncio>=0.23.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "biodata-form=biodata.mobile.main:run",
        ],
    },
    python_requires=">=3.11",
)
