# setup.py

from setuptools import setup, find_packages

setup(
    name="openstack-flavor-mapper",
    version="0.1.0",
    packages=find_packages(exclude=["tests"]),
    install_requires=[
        "openstacksdk",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'map-flavor=flavor_mapper.cli:main',
        ],
    },
    description="Select the OpenStack flavor that best fits VM resource requirements",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    keywords="openstack flavor instance-type",
    python_requires=">=3.9",
)
