from setuptools import find_packages, setup

setup(
  name="curvegroup",
  version="0.1.0",
  description="Elliptic curve group arithmetic (Ed25519, NIST P-curves) and Schnorr signatures",
  long_description=open("README.md").read(),
  long_description_content_type="text/markdown",
  packages=find_packages(exclude=["tests"]),
  python_requires=">=3.9",
  classifiers=[
    "Programming Language :: Python :: 3",
    "License :: OSI Approved :: MIT License",
    "Operating System :: OS Independent",
    "Topic :: Security :: Cryptography",
  ],
  install_requires=[],
  extras_require={
    "test": ["pytest", "pytest-sugar", "pytest-mock", "coverage", "mypy", "bandit", "pynacl>=1.4", "cryptography>=35"],
    "dev": ["tox", "isort", "yapf"],
  },
)
