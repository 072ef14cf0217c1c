from setuptools import setup, find_packages

setup(
    name="axemacal",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.11",
    install_requires=[
        'requests>=2.31.0',
        'icalendar>=6.0.0',
        'tabulate>=0.9.0',
        'typing_extensions>=4.5.0'
    ],
    extras_require={
        'test': [
            'pytest>=7.0.0'
        ]
    },
    entry_points={
        'console_scripts': [
            'axemacal=axemacal.cli:main'
        ]
    }
)
