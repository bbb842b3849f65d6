from setuptools import setup, find_packages

setup(
    name='graphcore-cli',
    version='1.0.0',
    description='Command interpreter core for graph data: command registry, '
                'status protocol and node/arc data set ingestion',
    packages=find_packages(include=['graphcore', 'graphcore.*']),
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'graphcore = graphcore.cli.shell:main',
        ],
    },
    python_requires='>=3.8',
)
