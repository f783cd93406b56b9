from setuptools import find_namespace_packages, setup

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="bingbackground",
    version="1.0.0",
    author="David Rubert",
    author_email="david.rubert@gmail.com",
    description="Set the Bing image of the day as your desktop background",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/yourusername/bingbackground",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["bingbackground*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
    python_requires=">=3.8",
    install_requires=[
        "pillow>=10.0.0",
        "python-dotenv>=1.0.0",
        "httpx>=0.25.0",
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        "structlog>=23.1.0",
        "rich>=13.0.0",
        "screeninfo>=0.8.1",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "bingbackground=bingbackground.cli.main:main",
        ],
    },
)
