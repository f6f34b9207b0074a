#!/usr/bin/env python
# -*- coding: utf-8 -*-
import os

from setuptools import setup

# There are problems running setup.py on Windows if the encoding is not set
with open('README.md', encoding='utf8') as readme_file:
    readme = readme_file.read()
with open('HISTORY.rst', encoding='utf8') as history_file:
    history = history_file.read()
with open(os.path.join('ligen', 'VERSION'), encoding='utf8') as version_file:
    version = version_file.read().strip()


setup(
    name='ligen',
    version=version,
    description="Create, detect and update the license files of your projects.",
    long_description=readme + '\n\n' + history,
    long_description_content_type="text/markdown",
    author="MoonMoon1919",
    author_email='moonmoon1919@users.noreply.github.com',
    url='https://github.com/MoonMoon1919/ligen',
    packages=[
        'ligen',
    ],
    package_dir={'ligen': 'ligen'},
    package_data={
        'ligen': ['VERSION', 'templates/*.jinja2'],
    },
    entry_points={
        'console_scripts': [
            'ligen=ligen.cli:cli'
        ]
    },
    include_package_data=True,
    install_requires=[
        'Click>=8.0.2',
        'typer>=0.12.1,<0.26',
        'rich',
        'Jinja2>=3.1.0',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    python_requires=">=3.9",
    license="MIT license",
    zip_safe=False,
    keywords='license',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ]
)
