from setuptools import find_packages
from setuptools import setup


setup(
    name='merge_uses',
    description=(
        'Group, merge and sort the use declarations of Rust source files.'
    ),
    version='0.1.0',

    platforms='all',
    classifiers=[
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3 :: Only',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Rust',
    ],

    packages=find_packages(exclude=('tests*',)),
    python_requires='>=3.10',
    install_requires=[
        'cached_property',
        'rich',
        'tree-sitter>=0.23',
        'tree-sitter-rust>=0.23',
        'typer',
    ],
    extras_require={
        'testing': ['pytest'],
    },
    entry_points={
        'console_scripts': ['merge-uses=merge_uses.main:app'],
    },
)
