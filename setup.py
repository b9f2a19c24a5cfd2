"""
/setup.py

Paired scatterplot annotation helpers.
"""

import setuptools

with open("requirements.txt", "r", encoding="utf-8") as file:
    requirements = file.read().splitlines()

setuptools.setup(
    name="paired-plots",
    version="0.1.0",
    description="Difference histograms and quantile lines for paired scatterplots",
    package_dir={"": "src"},
    packages=setuptools.find_packages(where="src", exclude=["*.tests"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": [
            "paired_diff_plot = paired_plots.cli:main",
        ]
    },
)
