"""Setup configuration for repoview"""

from setuptools import setup, find_packages

setup(
    name="github-repo-view",
    version="0.1.0",
    description=(
        "CLI tool showing the stars, open issues and open pull requests of a "
        "GitHub repository via the GraphQL API."
    ),
    author="GitHub Repo View Contributors",
    author_email="",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "requests>=2.28.0",
        "rich>=13.0",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "black>=22.0",
            "flake8>=4.0",
            "mypy>=0.950",
        ],
    },
    entry_points={
        "console_scripts": [
            "github-repo-view=repoview.main:main",
        ],
    },
)
