"""Setup script for urlsign."""
from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
  long_description = fh.read()

setup(
  name="urlsign",
  version="0.1.0",
  author="urlsign Contributors",
  description="Time-limited, tamper-evident signed URLs with key rotation",
  long_description=long_description,
  long_description_content_type="text/markdown",
  packages=find_packages(include=["urlsign", "urlsign.*"]),
  py_modules=["urlsign_cli"],
  python_requires=">=3.11",
  install_requires=[
    "pydantic>=2.0",
    "rich>=13.0.0",
  ],
  extras_require={
    "test": [
      "pytest>=7.0",
    ],
  },
  entry_points={
    "console_scripts": [
      "urlsign=urlsign_cli:main",
    ],
  },
  classifiers=[
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Topic :: Security",
    "Topic :: Software Development :: Libraries",
    "License :: OSI Approved :: Apache Software License",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
  ],
)
