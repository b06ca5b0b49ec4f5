from pathlib import Path

from setuptools import find_packages, setup


setup(
    name="orbiter",
    version="0.1.0",
    packages=find_packages(include=["orbiter", "orbiter.*"]),
    py_modules=["cli"],
    package_data={"orbiter.reporting": ["messages.yaml"]},
    python_requires=">=3.9",
    install_requires=Path("requirements.txt").read_text(encoding="utf-8").splitlines(),
    extras_require={"test": ["pytest>=7.0"]},
    entry_points={"console_scripts": ["orbiter=cli:main"]},
)
