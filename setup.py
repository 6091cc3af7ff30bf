from setuptools import setup, find_packages

setup(
    name="golfezz",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
        'requests>=2.31.0',
        'PyYAML>=6.0',
        'tabulate>=0.9.0',
        'typing_extensions>=4.5.0'
    ],
    extras_require={
        'test': [
            'pytest>=7.4.0',
            'coverage>=7.3.0'
        ]
    },
    entry_points={
        'console_scripts': [
            'golfezz=golfezz.cli:main'
        ]
    }
)
