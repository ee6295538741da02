from setuptools import setup, find_namespace_packages

PROGRAM_NAME = "Playlist"

setup(
    name=PROGRAM_NAME.lower(),
    version="0.1.0",
    description="Read, write and manipulate playlists of music tracks",
    python_requires=">=3.12",
    packages=find_namespace_packages(include=[PROGRAM_NAME.lower(), f"{PROGRAM_NAME.lower()}.*"]),
    install_requires=[
        "pydantic>=2.9",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "Faker>=25.0",
        ],
    },
)
