# setup.py
from setuptools import setup, find_packages

setup(
    name="sc2k_decoder",
    version="0.1.0",
    packages=find_packages(include=['sc2k_decoder', 'sc2k_decoder.*']),
    install_requires=[
        "construct>=2.10",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    python_requires=">=3.8",
    description="Decoder for SimCity 2000 save files",
    keywords="simcity, sc2, save file, iff",
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
)
