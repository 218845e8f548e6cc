# -*- coding: utf-8 -*-
import codecs
from setuptools import setup, find_packages


tests_require = [
    'Flask>=2.2',
    'pytest>=7.0',
]

setup(
    name='Remotely',
    version='0.1.0',
    packages=find_packages(exclude=['*tests*']),
    license='MIT',
    description='Lazily fetched, cached associations to resources of remote HTTP/JSON applications',
    long_description=codecs.open('README.rst', encoding='utf-8').read(),
    python_requires='>=3.7',
    tests_require=tests_require,
    install_requires=[
        'requests>=2.27',
        'blinker>=1.3',
        'jsonschema>=3.0',
        'inflection>=0.5',
    ],
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Internet :: WWW/HTTP',
        'Topic :: Software Development :: Libraries :: Python Modules'
    ],
    zip_safe=False,
    extras_require={
        'tests': tests_require,
    }
)
