from setuptools import setup, find_packages

setup(
    name='k3sargo',
    version='0.1.0',
    packages=find_packages(exclude=['k3sargo.tests']),
    include_package_data=True,
    install_requires=[
        'typer[all]',
        'kubernetes',
        'python-dotenv',
        'requests',
        'PyYAML'
    ],
    extras_require={
        'test': ['pytest']
    },
    entry_points={
        'console_scripts': [
            'k3sargo=k3sargo.cli:app'
        ]
    },
    description='Bootstrap a single-node k3s cluster with Argo CD, Argo Rollouts and a GitOps Application',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: POSIX :: Linux',
    ],
    python_requires='>=3.8',
)
