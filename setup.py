from setuptools import find_packages, setup

"""
# Usage instructions
#
# To install the package
#   'pip install .'
#
# To install with test dependencies
#   'pip install -e ".[test]"'
"""

INSTALL_REQUIRES = [
    "msgspec>=0.18",
    "picows>=1.0",
    "aiohttp>=3.9",
]

EXTRAS_REQUIRE = {
    "test": [
        "pytest>=8.0",
        "pytest-asyncio>=0.23",
    ],
}


setup(
    name="ps2_toolbox",
    version="0.1.0",
    description="Event stream and census lookup client for PlanetSide 2",
    python_requires=">=3.11",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=INSTALL_REQUIRES,
    extras_require=EXTRAS_REQUIRE,
)
