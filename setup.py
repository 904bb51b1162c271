from setuptools import setup, find_packages

setup(
    name="review-waiting-list",
    version="1.0.0",
    description="List open GitHub pull requests awaiting review",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "requests>=2.31.0",
        "rich>=13.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "review-waiting-list=review_waiting_list.cli:main",
        ],
    },
)
