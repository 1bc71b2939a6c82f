#!/usr/bin/env python
# -*- coding: utf-8 -*-
from setuptools import setup

# There are problems running setup.py on Windows if the encoding is not set
with open('README.md', encoding='utf8') as readme_file:
    readme = readme_file.read()
with open('HISTORY.rst', encoding='utf8') as history_file:
    history = history_file.read()
with open('hatari/VERSION', encoding='utf8') as version_file:
    version = version_file.read().strip()


setup(
    name='hatari',
    version=version,
    description="Python client for collecting events through the Hatari API.",
    long_description=readme + '\n\n' + history,
    long_description_content_type="text/markdown",
    author="hatario.io",
    author_email='support@hatario.io',
    url='https://github.com/hatario/hatari-python',
    packages=[
        'hatari',
        'hatari.dispatch',
        'hatari.events',
    ],
    package_dir={'hatari': 'hatari'},
    package_data={'hatari': ['VERSION']},
    entry_points={
        'console_scripts': [
            'hatari=hatari.cli:cli_app'
        ]
    },
    include_package_data=True,
    install_requires=[
        'httpx>=0.23',
        'pydantic>=2.0',
        'typer>=0.9',
        'rich',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    python_requires=">=3.8",
    license="MIT license",
    zip_safe=False,
    keywords='hatari events analytics',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ]
)
