"""Setup script for int64-transformers package."""

from setuptools import setup, find_packages

setup(
    name="int64-transformers",
    use_scm_version={"fallback_version": "0.1.0"},
    setup_requires=['setuptools_scm'],
    packages=find_packages(include=['byte_generators', 'int_transformers']),
    include_package_data=True,
    python_requires='>=3.9',
    extras_require={
        'test': ['pytest'],
    },
)
