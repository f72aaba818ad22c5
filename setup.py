"""
Setup file for rulegraph
"""

from setuptools import setup, find_packages

setup(
    name='RuleGraph',
    version='0.1.0',
    description="""
    Event-driven finite-state machines over a graph of rule-guarded edges.
    """.strip(),
    packages=find_packages(exclude=[]),
    package_dir={'rulegraph': 'rulegraph'},
    python_requires='>=3.8',
    install_requires=[
        "attrs>=20.1.0",
    ],
    extras_require={
        "test": ["pytest",
                 "pytest-benchmark"],
    },
    entry_points={
        "console_scripts": [
            "rulegraph-turnstile = rulegraph._turnstile:tool"
        ],
    },
    include_package_data=True,
    license="MIT",
    keywords='fsm finite state machine graph rules events',
    classifiers=[
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ],
)
