#!/usr/bin/env python

import setuptools

if __name__ == '__main__':
    setuptools.setup(
        name='sigpair-admin',
        version='1.0.0-dev0',
        description='Admin client for Sigpair servers',
        packages=setuptools.find_packages(exclude=['tests', 'tests.*']),
        classifiers=[
            'Operating System :: OS Independent',
            'Programming Language :: Python',
            'Programming Language :: Python :: 3',
        ],
        python_requires='>=3.9',
        install_requires=[
            'attrs >=22.2.0',
            'requests >=2.12.4',
            'PyJWT >=2.0.0',
        ],
        extras_require={
            'test': ['pytest'],
        },
        zip_safe=True,
    )
